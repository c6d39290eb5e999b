"""
Projection result data models.

Contains dataclasses returned by the per-subject engines: totals,
next-assessment projections, distribution plans and statuses.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Totals:
    """Earned and possible points over some set of assessments."""
    earned: float
    max: float


@dataclass(frozen=True)
class NextAssessmentProjection:
    """
    Minimum score needed on the next pending assessment to stay on pace.
    
    Example (target 70%, CIA 1 scored 10/15, CIA 2 next):
        index: 1
        name: "CIA 2"
        raw_need: 18         # ceil(0.70 * (15 + 25) - 10)
        needed: 18           # raw_need clamped to [0, max]
        max: 25
        feasible: True
    """
    index: int                       # Position of the assessment in template order
    name: str
    raw_need: int                    # Unclamped requirement (may be negative or > max)
    needed: float                    # Clamped to [0, max]
    max: float
    feasible: bool                   # False when raw_need exceeds max


@dataclass(frozen=True)
class DistributionRow:
    """One row of the minimum-marks table."""
    assessment: str
    needed: float                    # Needed (raw), clamped to [0, max]
    max: float
    feasible: bool


@dataclass(frozen=True)
class DistributionPlan:
    """
    Minimum marks needed in every pending assessment.
    
    The next pending assessment comes first, followed by the remaining
    pending assessments in template order. Rows are empty when nothing
    is pending.
    """
    rows: tuple = field(default_factory=tuple)   # Tuple of DistributionRow
    earned: float = 0                # Sum of entered scores
    max: float = 0                   # Sum of every template max


class StatusState(Enum):
    """
    Pacing of a subject relative to the target.
    
    ON: Target reachable and the next assessment needs at most the
        at-risk threshold share of its marks
    RISK: Target reachable but the next assessment needs a large share
    OFF: Target unreachable, or the next assessment alone cannot keep pace
    """
    ON = "on"
    RISK = "risk"
    OFF = "off"


@dataclass(frozen=True)
class SubjectStatus:
    """Tagged status value handed to the presentation layer."""
    state: StatusState
    label: str                       # "On Track", "At Risk", "Off Track"
    color: str                       # Color token: "green", "amber", "red"
    message: Optional[str] = None    # e.g. "short by 3"
    shortfall: int = 0
