from __future__ import annotations

import pytest

from conftest import make_subject
from progress_tracker.engines import TotalsCalculator, percentage, target_points
from progress_tracker.models import Subject, Totals


@pytest.fixture
def calc() -> TotalsCalculator:
    return TotalsCalculator()


def test_subject_totals_counts_every_max(calc, partial_subject) -> None:
    assert calc.subject_totals(partial_subject) == Totals(earned=10, max=100)
    assert calc.subject_pct(partial_subject) == pytest.approx(10.0)


def test_totals_so_far_counts_completed_only(calc, partial_subject) -> None:
    assert calc.totals_so_far(partial_subject) == Totals(earned=10, max=15)
    assert calc.subject_pct_so_far(partial_subject) == pytest.approx(66.6667, rel=1e-4)


def test_pending_everything_gives_zero_not_nan(calc, blank_subject) -> None:
    assert calc.totals_so_far(blank_subject) == Totals(earned=0, max=0)
    assert calc.subject_pct_so_far(blank_subject) == 0
    assert calc.subject_pct(Subject(name="Empty")) == 0


def test_earned_matches_between_views(calc, partial_subject, short_subject, full_subject) -> None:
    for s in (partial_subject, short_subject, full_subject):
        assert calc.totals_so_far(s).earned == calc.subject_totals(s).earned
        assert calc.totals_so_far(s).max <= calc.subject_totals(s).max


def test_percentage_stays_within_bounds_for_valid_scores(calc) -> None:
    subject = make_subject(scores=(0, 25, 7.5, None, 15))
    assert 0 <= calc.subject_pct(subject) <= 100
    assert 0 <= calc.subject_pct_so_far(subject) <= 100


def test_bonus_marks_push_percentage_over_100(calc) -> None:
    subject = make_subject(scores=(20, None, None, None, None))
    assert calc.subject_pct_so_far(subject) == pytest.approx(133.333, rel=1e-4)


def test_remaining_max(calc, short_subject, full_subject) -> None:
    assert calc.remaining_max(short_subject) == 60
    assert calc.remaining_max(full_subject) == 0


def test_target_points_is_exact_for_whole_marks() -> None:
    assert target_points(70, 40) == 28
    assert target_points(70, 100) == 70
    assert percentage(Totals(earned=5, max=0)) == 0
