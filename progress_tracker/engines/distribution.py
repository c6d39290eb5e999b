"""
Distribution Planner.

This module builds the full "minimum marks needed in every pending
assessment" table for a subject.
"""

import math
from typing import Optional

from ..models import Subject, DistributionRow, DistributionPlan
from .totals import TotalsCalculator, target_points
from .next_assessment import NextAssessmentProjector


class DistributionPlanner:
    """
    Plans minimum marks for every pending assessment of a subject.
    
    ═══════════════════════════════════════════════════════════════════════════
    ALLOCATION POLICY
    ═══════════════════════════════════════════════════════════════════════════
    
    1. The NEXT pending assessment gets exactly the pace requirement from
       NextAssessmentProjector. Its row is only marked feasible when
       0 <= raw need <= max, so a subject already ahead of pace shows "No"
       here even though the projection itself counts as feasible.
    
    2. Assuming that requirement is met, the points still missing for the
       whole subject are:
    
           need_after_next = max(0, ceil(target% * total_max - (earned + next_needed)))
    
    3. need_after_next is spread over the OTHER pending assessments in
       proportion to their max marks, so bigger assessments carry more:
    
           share = ceil(need_after_next * a.max / rem_total_max)
    
    Every row is rounded up on its own. The shares can therefore add up to
    slightly more than need_after_next; that slack is accepted.
    
    Example (target 70%, template 15/25/15/30/15, CIA 1 scored 10):
        CIA 2 (next):  18 / 25
        need_after_next = ceil(70 - 28) = 42 over 60 remaining marks
        CIA 3:  11 / 15
        CIA 4:  21 / 30
        CP:     11 / 15
    ═══════════════════════════════════════════════════════════════════════════
    """
    
    def __init__(self, totals: Optional[TotalsCalculator] = None,
                 projector: Optional[NextAssessmentProjector] = None):
        self.totals = totals or TotalsCalculator()
        self.projector = projector or NextAssessmentProjector(self.totals)
    
    def plan(self, subject: Subject, target_pct: int) -> DistributionPlan:
        full = self.totals.subject_totals(subject)
        earned_now = full.earned
        total_max = full.max
        target_pts = target_points(target_pct, total_max)
        
        nxt = self.projector.project(subject, target_pct)
        if nxt is None:
            return DistributionPlan(rows=(), earned=earned_now, max=total_max)
        
        earned_after_next = earned_now + nxt.needed
        
        remaining = [
            a for i, a in enumerate(subject.assessments)
            if a.is_pending and i != nxt.index
        ]
        rem_total_max = sum(a.max for a in remaining)
        need_after_next = max(0, math.ceil(target_pts - earned_after_next))
        
        rows = [DistributionRow(
            assessment=nxt.name,
            needed=nxt.needed,
            max=nxt.max,
            feasible=0 <= nxt.raw_need <= nxt.max,
        )]
        for a in remaining:
            rows.append(self._share_row(a, need_after_next, rem_total_max))
        
        return DistributionPlan(rows=tuple(rows), earned=earned_now, max=total_max)
    
    def _share_row(self, assessment, need_after_next: float, rem_total_max: float) -> DistributionRow:
        """Proportional share of the remaining deficit for one assessment."""
        if rem_total_max > 0:
            share = math.ceil(need_after_next * assessment.max / rem_total_max)
        else:
            share = 0
        return DistributionRow(
            assessment=assessment.name,
            needed=max(0, min(share, assessment.max)),
            max=assessment.max,
            feasible=0 <= share <= assessment.max,
        )
