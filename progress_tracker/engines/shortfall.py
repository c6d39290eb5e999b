"""
Shortfall Evaluator.

This module decides whether the target is reachable at all, independent
of how the remaining points get allocated.
"""

import math
from typing import Optional

from ..models import Subject
from .totals import TotalsCalculator, target_points


class ShortfallEvaluator:
    """
    Computes the marks by which a target is out of reach.
    
    FULL-MARKS TEST:
    ---------------
    Assume every pending assessment is scored in full:
    
        max_possible = earned + remaining_max
        shortfall    = max(0, ceil(target% * total_max - max_possible))
    
    A shortfall above 0 is a hard floor: no allocation of the remaining
    marks can reach the target. Entering more scores can only lower it.
    """
    
    def __init__(self, totals: Optional[TotalsCalculator] = None):
        self.totals = totals or TotalsCalculator()
    
    def shortfall(self, subject: Subject, target_pct: int) -> int:
        full = self.totals.subject_totals(subject)
        max_possible = full.earned + self.totals.remaining_max(subject)
        needed_total = target_points(target_pct, full.max)
        return max(0, math.ceil(needed_total - max_possible))
    
    def max_possible_pct(self, subject: Subject) -> float:
        """Best achievable percentage with full marks on everything pending."""
        full = self.totals.subject_totals(subject)
        if full.max > 0:
            return (full.earned + self.totals.remaining_max(subject)) / full.max * 100
        return 0
