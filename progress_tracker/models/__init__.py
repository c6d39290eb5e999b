"""
Data models for the progress tracker.

This package contains all dataclasses and enums used throughout the system.
These serve as "contracts" between different parts of the system.
"""

from .state import (
    AssessmentTemplateEntry,
    AssessmentRecord,
    Subject,
    ProgressState,
)
from .projection import (
    Totals,
    NextAssessmentProjection,
    DistributionRow,
    DistributionPlan,
    StatusState,
    SubjectStatus,
)
from .report import (
    AssessmentAverage,
    AssessmentSum,
    RemainingCapacity,
    SubjectReport,
    ProgressReport,
)

__all__ = [
    # Snapshot models
    "AssessmentTemplateEntry",
    "AssessmentRecord",
    "Subject",
    "ProgressState",
    # Projection results
    "Totals",
    "NextAssessmentProjection",
    "DistributionRow",
    "DistributionPlan",
    "StatusState",
    "SubjectStatus",
    # Report models
    "AssessmentAverage",
    "AssessmentSum",
    "RemainingCapacity",
    "SubjectReport",
    "ProgressReport",
]
