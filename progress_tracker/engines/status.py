"""
Status Classifier.

This module turns shortfall and next-assessment feasibility into the
tri-state On Track / At Risk / Off Track label.
"""

from typing import Optional

from ..config import AT_RISK_THRESHOLD_PCT, STATUS_STYLES
from ..models import Subject, StatusState, SubjectStatus
from .next_assessment import NextAssessmentProjector
from .shortfall import ShortfallEvaluator


def make_status(state: StatusState, message: Optional[str] = None, shortfall: int = 0) -> SubjectStatus:
    """Attach the fixed label/color pairing to a status state."""
    label, color, _ = STATUS_STYLES[state.value]
    return SubjectStatus(state=state, label=label, color=color,
                         message=message, shortfall=shortfall)


class StatusClassifier:
    """
    Classifies a subject's pacing.
    
    DECISION ORDER (first match wins):
    ---------------------------------
    1. shortfall > 0                         -> OFF  ("short by N")
    2. nothing pending                       -> ON
    3. next assessment infeasible            -> OFF
    4. next needs > 85% of its max marks     -> RISK
    5. otherwise                             -> ON
    
    Step 3 can fire without a shortfall: the full-marks test lets slack
    from every remaining assessment cover the deficit, while the pace test
    asks the next assessment alone to cover it.
    """
    
    def __init__(self, projector: Optional[NextAssessmentProjector] = None,
                 shortfall_evaluator: Optional[ShortfallEvaluator] = None,
                 at_risk_threshold: float = AT_RISK_THRESHOLD_PCT):
        self.projector = projector or NextAssessmentProjector()
        self.shortfall_evaluator = shortfall_evaluator or ShortfallEvaluator(self.projector.totals)
        self.at_risk_threshold = at_risk_threshold
    
    def classify(self, subject: Subject, target_pct: int) -> SubjectStatus:
        short = self.shortfall_evaluator.shortfall(subject, target_pct)
        if short > 0:
            return make_status(StatusState.OFF, message=f"short by {short}", shortfall=short)
        
        nxt = self.projector.project(subject, target_pct)
        if nxt is None:
            return make_status(StatusState.ON)
        
        if not nxt.feasible:
            return make_status(StatusState.OFF)
        
        need_pct_of_next = nxt.needed / nxt.max * 100
        if need_pct_of_next > self.at_risk_threshold:
            return make_status(StatusState.RISK)
        
        return make_status(StatusState.ON)
