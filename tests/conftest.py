from __future__ import annotations

import pytest

from progress_tracker.models import (
    AssessmentRecord,
    AssessmentTemplateEntry,
    ProgressState,
    Subject,
)

# CIA1 15, CIA2 25, CIA3 15, CIA4 30, CP 15 -> 100 marks
TEMPLATE_LAYOUT = [("CIA1", 15), ("CIA2", 25), ("CIA3", 15), ("CIA4", 30), ("CP", 15)]


def make_subject(name: str = "Maths", scores=(None, None, None, None, None), layout=TEMPLATE_LAYOUT) -> Subject:
    return Subject(
        name=name,
        assessments=tuple(
            AssessmentRecord(name=n, max=m, score=s) for (n, m), s in zip(layout, scores)
        ),
    )


def make_state(*subjects: Subject, target_pct: int = 70, layout=TEMPLATE_LAYOUT) -> ProgressState:
    return ProgressState(
        target_pct=target_pct,
        template=tuple(AssessmentTemplateEntry(n, m) for n, m in layout),
        subjects=tuple(subjects),
    )


@pytest.fixture
def blank_subject() -> Subject:
    return make_subject()


@pytest.fixture
def partial_subject() -> Subject:
    # CIA1 scored 10, everything else pending
    return make_subject(scores=(10, None, None, None, None))


@pytest.fixture
def short_subject() -> Subject:
    # 2/15 and 5/25 done; even full marks elsewhere gives 67/100
    return make_subject(scores=(2, 5, None, None, None))


@pytest.fixture
def full_subject() -> Subject:
    return make_subject(scores=(15, 25, 15, 30, 15))
