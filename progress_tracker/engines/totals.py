"""
Totals Calculator.

This module aggregates earned and possible points for a subject, over
every assessment and over completed assessments only.
"""

from ..models import Subject, Totals


def percentage(totals: Totals) -> float:
    """earned / max * 100, defined as 0 when there are no possible points."""
    if totals.max > 0:
        return totals.earned / totals.max * 100
    return 0


def target_points(target_pct: int, points: float) -> float:
    """
    Points needed to reach target_pct of `points`.
    
    Multiplies before dividing so integer marks and targets stay exact
    (70 * 40 / 100 is exactly 28, 0.7 * 40 is not).
    """
    return target_pct * points / 100


class TotalsCalculator:
    """
    Sums scores and max marks for a subject.
    
    TWO VIEWS OF A SUBJECT:
    ----------------------
    subject_totals: max counts EVERY assessment, pending or not.
                    Used for overall totals and the all-assessments %.
    
    totals_so_far:  only completed assessments count towards max.
                    Used for the live "current average" figure and as
                    the pace baseline for the next assessment.
    
    In both views a pending assessment contributes nothing to earned,
    so earned is always identical between the two.
    """
    
    def subject_totals(self, subject: Subject) -> Totals:
        earned = 0
        max_points = 0
        for a in subject.assessments:
            max_points += a.max
            if not a.is_pending:
                earned += a.score
        return Totals(earned=earned, max=max_points)
    
    def totals_so_far(self, subject: Subject) -> Totals:
        earned = 0
        max_points = 0
        for a in subject.assessments:
            if not a.is_pending:
                earned += a.score
                max_points += a.max
        return Totals(earned=earned, max=max_points)
    
    def remaining_max(self, subject: Subject) -> float:
        """Sum of max marks over pending assessments."""
        return sum(a.max for a in subject.assessments if a.is_pending)
    
    def subject_pct(self, subject: Subject) -> float:
        """Percentage over all assessments (pending ones count as 0)."""
        return percentage(self.subject_totals(subject))
    
    def subject_pct_so_far(self, subject: Subject) -> float:
        """Percentage over completed assessments only."""
        return percentage(self.totals_so_far(subject))
