"""
Aggregate Reporter.

This module computes the cross-subject figures shown on the dashboard
and the series used for charts.
"""

from typing import Optional

from ..models import (
    Totals,
    AssessmentAverage,
    AssessmentSum,
    RemainingCapacity,
)
from .totals import TotalsCalculator


def _find_record(subject, name: str):
    """First assessment record in a subject with the given name, or None."""
    for a in subject.assessments:
        if a.name == name:
            return a
    return None


class AggregateReporter:
    """
    Summarizes all subjects of a snapshot.
    
    WHY UNWEIGHTED:
    --------------
    The overall percentage is the plain mean of each subject's completed-only
    percentage. Every subject counts the same regardless of how many marks
    it is worth. Do not turn this into a marks-weighted average.
    
    PER-ASSESSMENT SERIES:
    ---------------------
    Records are matched to template entries by name. For averages, subjects
    without a score for an entry are left out entirely (not counted as 0).
    For sums, a missing score counts as 0.
    """
    
    def __init__(self, totals: Optional[TotalsCalculator] = None):
        self.totals = totals or TotalsCalculator()
    
    def overall_pct(self, subjects) -> float:
        if not subjects:
            return 0
        return sum(self.totals.subject_pct_so_far(s) for s in subjects) / len(subjects)
    
    def overall_totals(self, subjects) -> Totals:
        earned = 0
        max_points = 0
        for s in subjects:
            t = self.totals.subject_totals(s)
            earned += t.earned
            max_points += t.max
        return Totals(earned=earned, max=max_points)
    
    def totals_so_far_all(self, subjects) -> Totals:
        earned = 0
        max_points = 0
        for s in subjects:
            t = self.totals.totals_so_far(s)
            earned += t.earned
            max_points += t.max
        return Totals(earned=earned, max=max_points)
    
    def completed_count(self, subjects) -> int:
        return sum(1 for s in subjects for a in s.assessments if not a.is_pending)
    
    def pending_count(self, subjects) -> int:
        return sum(1 for s in subjects for a in s.assessments if a.is_pending)
    
    def average_pct_per_assessment(self, subjects, template) -> list:
        averages = []
        for entry in template:
            total = 0
            n = 0
            for s in subjects:
                a = _find_record(s, entry.name)
                if a is not None and not a.is_pending:
                    total += a.score / a.max * 100
                    n += 1
            averages.append(AssessmentAverage(name=entry.name, actual_pct=total / n if n else 0))
        return averages
    
    def assessment_sum_series(self, subjects, template) -> list:
        """
        Per template entry, the summed score and summed max across subjects.
        
        Returns:
            [AssessmentSum(name, total, total_max, by_subject), ...]
        """
        series = []
        for entry in template:
            total = 0
            total_max = 0
            by_subject = {}
            for s in subjects:
                a = _find_record(s, entry.name)
                value = a.score if a is not None and not a.is_pending else 0
                by_subject[s.name] = value
                total += value
                total_max += a.max if a is not None else 0
            series.append(AssessmentSum(
                name=entry.name,
                total=total,
                total_max=total_max,
                by_subject=by_subject,
            ))
        return series
    
    def remaining_by_subject(self, subjects) -> list:
        """Marks still available per subject, omitting subjects with none left."""
        remaining = []
        for s in subjects:
            left = self.totals.remaining_max(s)
            if left > 0:
                remaining.append(RemainingCapacity(name=s.name, remaining=left))
        return remaining
