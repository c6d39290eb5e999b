"""
Academic Progress Tracker Package
=================================

Tracks progress toward a target overall percentage across a shared set of
weighted assessments per subject, and projects the minimum marks needed on
remaining assessments to stay on pace.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                        PROJECTION ENGINES                                │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────────┐  ┌─────────────────────────┐  ┌────────────────┐  │
│  │ TotalsCalculator │  │ NextAssessmentProjector │  │ Distribution   │  │
│  │ (earned / max)   │  │ (pace for the next one) │  │ Planner        │  │
│  └──────────────────┘  └─────────────────────────┘  └────────────────┘  │
│                                                                         │
│  ┌──────────────────┐  ┌─────────────────────────┐  ┌────────────────┐  │
│  │ ShortfallEval.   │  │ StatusClassifier        │  │ Aggregate      │  │
│  │ (full-marks test)│  │ (on / risk / off)       │  │ Reporter       │  │
│  └──────────────────┘  └─────────────────────────┘  └────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching engines)           │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     ProgressTracker                                      │
│   (Orchestrator - connects store, engines and presentation)             │
└─────────────────────────────────────────────────────────────────────────┘

Snapshots (ProgressState) are immutable. Edits go through
progress_tracker.editing and always return a new snapshot; the store
loads and saves whole snapshots.

PACKAGE STRUCTURE
-----------------

progress_tracker/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── editing.py           # Copy-on-write snapshot edits + template reconciliation
├── tracker.py           # ProgressTracker orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── state.py         # ProgressState, Subject, AssessmentRecord, ...
│   ├── projection.py    # Totals, NextAssessmentProjection, SubjectStatus, ...
│   └── report.py        # SubjectReport, ProgressReport, chart rows
│
├── data/                # Snapshot parsing and persistence
│   ├── parser.py        # SnapshotParser, serialize_state
│   └── store.py         # SnapshotStore, JsonFileStore
│
├── engines/             # Projection engines
│   ├── totals.py        # TotalsCalculator
│   ├── next_assessment.py # NextAssessmentProjector
│   ├── distribution.py  # DistributionPlanner
│   ├── shortfall.py     # ShortfallEvaluator
│   ├── status.py        # StatusClassifier
│   └── aggregate.py     # AggregateReporter
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from progress_tracker import ProgressTracker, JsonFileStore, editing

    tracker = ProgressTracker(JsonFileStore("my_marks_setup.json"))
    state = tracker.load()
    state = editing.set_score(state, 0, 0, 10)     # CIA 1 = 10 for subject 1
    report = tracker.build_report(state)
    print(report.subjects[0].status.label)

Running from command line:

    progress-tracker my_marks_setup.json

"""

# Version
__version__ = "1.0.0"

# Main exports
from .tracker import ProgressTracker
from .cli import main
from . import editing

# Model exports (for programmatic use)
from .models import (
    AssessmentTemplateEntry,
    AssessmentRecord,
    Subject,
    ProgressState,
    Totals,
    NextAssessmentProjection,
    DistributionRow,
    DistributionPlan,
    StatusState,
    SubjectStatus,
    AssessmentAverage,
    AssessmentSum,
    RemainingCapacity,
    SubjectReport,
    ProgressReport,
)

# Engine exports (for advanced use)
from .engines import (
    TotalsCalculator,
    NextAssessmentProjector,
    DistributionPlanner,
    ShortfallEvaluator,
    StatusClassifier,
    AggregateReporter,
)

# Data exports
from .data import SnapshotParser, SnapshotError, SnapshotStore, JsonFileStore, serialize_state

# UI exports
from .ui import TerminalDisplay

# Configuration exports
from .config import (
    DEFAULT_TEMPLATE,
    DEFAULT_TARGET_PCT,
    AT_RISK_THRESHOLD_PCT,
    ALLOW_OVER_MAX,
    TEMPLATE_MATCH_POLICY,
    snap_target_pct,
)

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "ProgressTracker",
    "main",
    "editing",
    # Models
    "AssessmentTemplateEntry",
    "AssessmentRecord",
    "Subject",
    "ProgressState",
    "Totals",
    "NextAssessmentProjection",
    "DistributionRow",
    "DistributionPlan",
    "StatusState",
    "SubjectStatus",
    "AssessmentAverage",
    "AssessmentSum",
    "RemainingCapacity",
    "SubjectReport",
    "ProgressReport",
    # Engines
    "TotalsCalculator",
    "NextAssessmentProjector",
    "DistributionPlanner",
    "ShortfallEvaluator",
    "StatusClassifier",
    "AggregateReporter",
    # Data
    "SnapshotParser",
    "SnapshotError",
    "SnapshotStore",
    "JsonFileStore",
    "serialize_state",
    # UI
    "TerminalDisplay",
    # Config
    "DEFAULT_TEMPLATE",
    "DEFAULT_TARGET_PCT",
    "AT_RISK_THRESHOLD_PCT",
    "ALLOW_OVER_MAX",
    "TEMPLATE_MATCH_POLICY",
    "snap_target_pct",
]
