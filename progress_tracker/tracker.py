"""
Progress Tracker - Main Orchestrator.

This module contains the ProgressTracker class that connects the
engines to the persistence port and the presentation layer.

NOTE: Don't run this file directly. Use the console script:
    progress-tracker path/to/my_marks_setup.json
"""

import logging

from .data import JsonFileStore, SnapshotStore
from .engines import (
    TotalsCalculator,
    NextAssessmentProjector,
    DistributionPlanner,
    ShortfallEvaluator,
    StatusClassifier,
    AggregateReporter,
)
from .models import ProgressState, ProgressReport, SubjectReport, StatusState
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class ProgressTracker:
    """
    Main interface for the progress tracker.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Gets a snapshot (from the caller, or from the store)
    2. Runs every engine over it to build a ProgressReport (pure data)
    3. Passes that report to the display

    The engines share one TotalsCalculator and keep no state between calls,
    so build_report() gives the same report for the same snapshot every time.

    TO CHANGE THE UI:
    -----------------
    Pass a different display object, or just call build_report() and
    render the ProgressReport yourself.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        tracker = ProgressTracker(JsonFileStore("my_marks_setup.json"))
        state = tracker.load()
        report = tracker.build_report(state)
        tracker.run_dashboard(state)
    """

    def __init__(self, store: SnapshotStore = None, display=None):
        self.store = store or JsonFileStore()

        # Initialize all engines with a shared TotalsCalculator
        self.totals = TotalsCalculator()
        self.projector = NextAssessmentProjector(self.totals)
        self.planner = DistributionPlanner(self.totals, self.projector)
        self.shortfall = ShortfallEvaluator(self.totals)
        self.classifier = StatusClassifier(self.projector, self.shortfall)
        self.aggregate = AggregateReporter(self.totals)

        self.display = display or TerminalDisplay()

    def load(self) -> ProgressState:
        return self.store.load()

    def save(self, state: ProgressState):
        self.store.save(state)

    def build_report(self, state: ProgressState) -> ProgressReport:
        """
        Run every engine over a snapshot.

        Returns:
            ProgressReport with one SubjectReport per subject (in order)
            plus the cross-subject figures and chart series
        """
        subjects = state.subjects

        subject_reports = [
            self.build_subject_report(subjects, i, state.target_pct)
            for i in range(len(subjects))
        ]

        off = sum(1 for r in subject_reports if r.status.state == StatusState.OFF)
        logger.debug("Built report: %d subject(s), %d off track", len(subject_reports), off)

        return ProgressReport(
            target_pct=state.target_pct,
            subjects=subject_reports,
            overall_pct=self.aggregate.overall_pct(subjects),
            overall_totals=self.aggregate.overall_totals(subjects),
            overall_so_far=self.aggregate.totals_so_far_all(subjects),
            completed_count=self.aggregate.completed_count(subjects),
            pending_count=self.aggregate.pending_count(subjects),
            averages=self.aggregate.average_pct_per_assessment(subjects, state.template),
            sums=self.aggregate.assessment_sum_series(subjects, state.template),
            remaining=self.aggregate.remaining_by_subject(subjects),
        )

    def build_subject_report(self, subjects, index: int, target_pct: int) -> SubjectReport:
        """
        Every per-subject figure for subjects[index].

        Make-up options list the remaining capacity of every other subject,
        picked by position so subjects sharing a name still count.
        """
        subject = subjects[index]
        shortfall = self.shortfall.shortfall(subject, target_pct)
        if shortfall > 0:
            others = tuple(subjects[:index]) + tuple(subjects[index + 1:])
            make_up = self.aggregate.remaining_by_subject(others)
        else:
            make_up = []

        return SubjectReport(
            name=subject.name,
            totals=self.totals.subject_totals(subject),
            totals_so_far=self.totals.totals_so_far(subject),
            pct=self.totals.subject_pct(subject),
            pct_so_far=self.totals.subject_pct_so_far(subject),
            next_assessment=self.projector.project(subject, target_pct),
            plan=self.planner.plan(subject, target_pct),
            shortfall=shortfall,
            status=self.classifier.classify(subject, target_pct),
            make_up_options=make_up,
        )

    def run_dashboard(self, state: ProgressState) -> ProgressReport:
        """Build the report and display the dashboard."""
        report = self.build_report(state)
        self.display.print_dashboard(report)
        return report

    def run_subject(self, state: ProgressState, subject_index: int) -> SubjectReport:
        """Build and display the detail view for one subject."""
        subject_report = self.build_subject_report(state.subjects, subject_index, state.target_pct)
        self.display.print_subject(subject_report, state.target_pct)
        return subject_report
