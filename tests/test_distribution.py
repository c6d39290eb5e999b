from __future__ import annotations

from conftest import make_subject
from progress_tracker.engines import DistributionPlanner, NextAssessmentProjector
from progress_tracker.models import DistributionRow


def test_partial_subject_plan(partial_subject) -> None:
    plan = DistributionPlanner().plan(partial_subject, 70)
    assert plan.earned == 10
    assert plan.max == 100
    assert list(plan.rows) == [
        DistributionRow("CIA2", 18, 25, True),
        DistributionRow("CIA3", 11, 15, True),   # ceil(42/60 * 15)
        DistributionRow("CIA4", 21, 30, True),   # ceil(42/60 * 30)
        DistributionRow("CP", 11, 15, True),
    ]


def test_blank_subject_plan_spreads_rest_by_max(blank_subject) -> None:
    plan = DistributionPlanner().plan(blank_subject, 70)
    # next CIA1 needs 11, leaving ceil(70 - 11) = 59 over 85 marks
    assert [(r.assessment, r.needed) for r in plan.rows] == [
        ("CIA1", 11),
        ("CIA2", 18),
        ("CIA3", 11),
        ("CIA4", 21),
        ("CP", 11),
    ]
    # Independent rounding may overshoot the 59 still needed
    assert sum(r.needed for r in plan.rows[1:]) >= 59


def test_fully_scored_subject_has_empty_plan(full_subject) -> None:
    plan = DistributionPlanner().plan(full_subject, 70)
    assert plan.rows == ()
    assert plan.earned == 100
    assert plan.max == 100


def test_infeasible_rows_are_clamped_and_flagged(short_subject) -> None:
    plan = DistributionPlanner().plan(short_subject, 70)
    assert list(plan.rows) == [
        DistributionRow("CIA3", 15, 15, False),  # raw ceil(38.5 - 7) = 32
        DistributionRow("CIA4", 30, 30, False),  # share ceil(48 * 30/45) = 32
        DistributionRow("CP", 15, 15, False),    # share 16
    ]


def test_single_pending_assessment_has_one_row() -> None:
    subject = make_subject(scores=(15, 10, 15, 30, None))
    plan = DistributionPlanner().plan(subject, 70)
    # raw ceil(70 - 70) = 0
    assert list(plan.rows) == [DistributionRow("CP", 0, 15, True)]


def test_next_row_ahead_of_pace_is_not_feasible() -> None:
    subject = make_subject(scores=(15, 25, 15, 30, None))
    nxt = NextAssessmentProjector().project(subject, 70)
    plan = DistributionPlanner().plan(subject, 70)

    assert nxt.raw_need < 0
    assert nxt.feasible
    assert list(plan.rows) == [DistributionRow("CP", 0, 15, False)]


def test_every_row_within_zero_and_max(blank_subject, partial_subject, short_subject) -> None:
    planner = DistributionPlanner()
    subjects = (
        blank_subject,
        partial_subject,
        short_subject,
        make_subject(scores=(None, 3, None, 29, None)),
    )
    for s in subjects:
        for target in (60, 75, 90, 100):
            for row in planner.plan(s, target).rows:
                assert 0 <= row.needed <= row.max
