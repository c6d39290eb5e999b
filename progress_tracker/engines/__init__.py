"""
Projection engines.

This package contains the pure computation layer: every engine derives
values from a snapshot and never mutates it.
"""

from .totals import TotalsCalculator, percentage, target_points
from .next_assessment import NextAssessmentProjector
from .distribution import DistributionPlanner
from .shortfall import ShortfallEvaluator
from .status import StatusClassifier, make_status
from .aggregate import AggregateReporter

__all__ = [
    "TotalsCalculator",
    "NextAssessmentProjector",
    "DistributionPlanner",
    "ShortfallEvaluator",
    "StatusClassifier",
    "AggregateReporter",
    "percentage",
    "target_points",
    "make_status",
]
