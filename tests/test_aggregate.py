from __future__ import annotations

import pytest

from conftest import make_state, make_subject
from progress_tracker.engines import AggregateReporter
from progress_tracker.models import AssessmentAverage, RemainingCapacity, Totals
from progress_tracker.editing import default_template


@pytest.fixture
def reporter() -> AggregateReporter:
    return AggregateReporter()


@pytest.fixture
def two_subjects():
    # Maths 12/15 = 80% so far; Physics 24/40 = 60% so far
    maths = make_subject("Maths", scores=(12, None, None, None, None))
    physics = make_subject("Physics", scores=(9, 15, None, None, None))
    return (maths, physics)


@pytest.fixture
def template():
    return make_state().template


def test_overall_pct_is_unweighted_mean(reporter, two_subjects) -> None:
    # Weighted by marks it would be 36/55 = 65.45%
    assert reporter.overall_pct(two_subjects) == pytest.approx(70.0)


def test_overall_pct_without_subjects_is_zero(reporter) -> None:
    assert reporter.overall_pct(()) == 0


def test_overall_totals(reporter, two_subjects) -> None:
    assert reporter.overall_totals(two_subjects) == Totals(earned=36, max=200)
    assert reporter.totals_so_far_all(two_subjects) == Totals(earned=36, max=55)


def test_counts(reporter, two_subjects) -> None:
    assert reporter.completed_count(two_subjects) == 3
    assert reporter.pending_count(two_subjects) == 7


def test_average_skips_subjects_without_a_score(reporter, two_subjects, template) -> None:
    averages = reporter.average_pct_per_assessment(two_subjects, template)
    assert averages[0] == AssessmentAverage("CIA1", pytest.approx(70.0))
    assert averages[1].actual_pct == pytest.approx(60.0)   # Physics only
    assert averages[2] == AssessmentAverage("CIA3", 0)


def test_sum_series_counts_missing_scores_as_zero(reporter, two_subjects, template) -> None:
    series = reporter.assessment_sum_series(two_subjects, template)
    assert [s.name for s in series] == ["CIA1", "CIA2", "CIA3", "CIA4", "CP"]
    assert series[0].total == 21
    assert series[0].total_max == 30
    assert series[0].by_subject == {"Maths": 12, "Physics": 9}
    assert series[1].total == 15
    assert series[1].total_max == 50
    assert series[4].by_subject == {"Maths": 0, "Physics": 0}


def test_series_match_records_by_name(reporter) -> None:
    # A subject whose records don't carry the template names adds nothing
    odd = make_subject("Odd", scores=(5,), layout=[("Quiz", 10)])
    series = reporter.assessment_sum_series((odd,), default_template())
    assert all(s.total == 0 and s.total_max == 0 for s in series)


def test_remaining_by_subject_omits_finished_subjects(reporter, two_subjects, full_subject) -> None:
    remaining = reporter.remaining_by_subject(two_subjects + (full_subject,))
    assert remaining == [
        RemainingCapacity("Maths", 85),
        RemainingCapacity("Physics", 60),
    ]
