"""
Configuration constants for the progress tracker.

This module contains all configuration values and constants used throughout
the projection engine. Centralizing these makes it easy to adjust
behavior as course policies change.
"""

import math
from pathlib import Path

# =============================================================================
# FILE PATHS
# =============================================================================

# Base directory (relative to this file's location)
BASE_DIR = Path(__file__).parent.parent
DATA_DIR = BASE_DIR / "data"
DEFAULT_SNAPSHOT_PATH = DATA_DIR / "my_marks_setup.json"


# =============================================================================
# ASSESSMENT TEMPLATE
# =============================================================================

# Default assessment structure applied to every subject.
# (name, max marks) in template order. Totals 100 marks.
DEFAULT_TEMPLATE = (
    ("CIA 1", 15),
    ("CIA 2", 25),
    ("CIA 3", 15),
    ("CIA 4", 30),
    ("CP", 15),
)

# Name and max given to an entry appended from the setup menu
NEW_ENTRY_NAME_FORMAT = "Assessment {n}"
NEW_ENTRY_MAX = 10

# Smallest max marks a template entry may have
MIN_ENTRY_MAX = 1

DEFAULT_SUBJECT_NAME_FORMAT = "Subject {n}"

# Name given to nameless subjects when migrating a legacy snapshot
LEGACY_SUBJECT_NAME = "Subject"


# =============================================================================
# TARGET PERCENTAGE
# =============================================================================

DEFAULT_TARGET_PCT = 70
TARGET_PCT_MIN = 60
TARGET_PCT_MAX = 100
TARGET_PCT_STEP = 5


def snap_target_pct(raw) -> int:
    """Snap a raw target to the nearest step (halves round up), clamped to range."""
    snapped = math.floor(float(raw) / TARGET_PCT_STEP + 0.5) * TARGET_PCT_STEP
    return int(min(TARGET_PCT_MAX, max(TARGET_PCT_MIN, snapped)))


# =============================================================================
# STATUS CLASSIFICATION
# =============================================================================

# If the next assessment needs more than this share of its max marks
# (in percent), the subject is flagged At Risk.
AT_RISK_THRESHOLD_PCT = 85

# state -> (label, color token, hex color for rich surfaces)
STATUS_STYLES = {
    "on": ("On Track", "green", "#16a34a"),
    "risk": ("At Risk", "amber", "#f59e0b"),
    "off": ("Off Track", "red", "#ef4444"),
}


# =============================================================================
# SCORE AND TEMPLATE POLICIES
# =============================================================================

# Scores are always floored at 0. When True, scores above an assessment's
# max are accepted as bonus marks and percentages may exceed 100.
ALLOW_OVER_MAX = True

# How subjects are re-aligned after the template changes:
#   "position" - record i follows template entry i (keeps score at index i)
#   "name"     - match records by name, fall back to position
TEMPLATE_MATCH_POLICY = "position"
TEMPLATE_MATCH_POLICIES = ("position", "name")
