"""
Next Assessment Projector.

This module works out the minimum score needed on the next pending
assessment to stay on pace for the target percentage.
"""

import math
from typing import Optional

from ..models import Subject, NextAssessmentProjection
from .totals import TotalsCalculator, target_points


class NextAssessmentProjector:
    """
    Projects the minimum mark for the first pending assessment.
    
    PACE RULE:
    ---------
    "On pace" means holding the target fraction of every point accumulated
    so far, INCLUDING the next assessment but ignoring everything after it:
    
        raw_need = ceil(target% * (max_so_far + next.max) - earned_so_far)
    
    The requirement is always rounded up, never down, so it never
    understates what is needed.
    
    raw_need below 0 means the student is already ahead of pace; it is
    clamped to 0 and still feasible. raw_need above next.max means even
    full marks on the next assessment cannot keep pace.
    """
    
    def __init__(self, totals: Optional[TotalsCalculator] = None):
        self.totals = totals or TotalsCalculator()
    
    def find_next_index(self, subject: Subject) -> int:
        """Index of the first pending assessment in template order, or -1."""
        for i, a in enumerate(subject.assessments):
            if a.is_pending:
                return i
        return -1
    
    def project(self, subject: Subject, target_pct: int) -> Optional[NextAssessmentProjection]:
        """
        Project the next pending assessment.
        
        Returns:
            NextAssessmentProjection, or None when the subject is fully scored
        """
        idx = self.find_next_index(subject)
        if idx < 0:
            return None
        
        nxt = subject.assessments[idx]
        so_far = self.totals.totals_so_far(subject)
        
        raw_need = math.ceil(target_points(target_pct, so_far.max + nxt.max) - so_far.earned)
        needed = max(0, min(raw_need, nxt.max))
        
        return NextAssessmentProjection(
            index=idx,
            name=nxt.name,
            raw_need=raw_need,
            needed=needed,
            max=nxt.max,
            feasible=raw_need <= nxt.max,
        )
