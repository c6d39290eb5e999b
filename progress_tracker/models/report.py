"""
Report data models.

These dataclasses collect everything the dashboard shows, both per subject
and across all subjects. Chart series are kept as plain rows so any
presentation layer can plot them.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class AssessmentAverage:
    """Mean percentage for one template entry over subjects that scored it."""
    name: str
    actual_pct: float                # 0 when no subject has a score yet


@dataclass(frozen=True)
class AssessmentSum:
    """
    Sum of scores and max marks for one template entry across subjects.
    
    Example:
        name: "CIA 1"
        total: 23            # 10 (Maths) + 13 (Physics)
        total_max: 30        # 15 + 15
        by_subject: {"Maths": 10, "Physics": 13}
    """
    name: str
    total: float
    total_max: float
    by_subject: dict = field(default_factory=dict)   # {subject name: score or 0}


@dataclass(frozen=True)
class RemainingCapacity:
    """Marks still available in a subject's pending assessments."""
    name: str
    remaining: float


@dataclass
class SubjectReport:
    """Every per-subject figure for one subject."""
    name: str
    totals: object                   # Totals over all assessments
    totals_so_far: object            # Totals over completed assessments
    pct: float                       # Percentage over all assessments
    pct_so_far: float                # Percentage over completed assessments
    next_assessment: Optional[object]  # NextAssessmentProjection or None
    plan: object                     # DistributionPlan
    shortfall: int
    status: object                   # SubjectStatus
    make_up_options: list            # RemainingCapacity in OTHER subjects


@dataclass
class ProgressReport:
    """
    Complete dashboard for one snapshot.
    
    This is the top-level result of ProgressTracker.build_report():
    
    1. PER-SUBJECT REPORTS
       Totals, projections, plan and status for every subject
    
    2. OVERALL FIGURES
       Unweighted mean of subject percentages and summed totals
    
    3. CHART SERIES
       Per-assessment averages, per-assessment sums and remaining capacity
    """
    target_pct: int
    subjects: list                   # List of SubjectReport
    overall_pct: float
    overall_totals: object           # Totals summed over all subjects
    overall_so_far: object           # Totals over completed assessments, all subjects
    completed_count: int
    pending_count: int
    averages: list                   # List of AssessmentAverage
    sums: list                       # List of AssessmentSum
    remaining: list                  # List of RemainingCapacity
