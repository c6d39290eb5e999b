"""
Progress state data models.

Contains the immutable snapshot that flows into every engine: the target,
the shared assessment template and the subjects with their scores.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class AssessmentTemplateEntry:
    """
    One assessment definition shared by every subject.
    
    Example:
        name: "CIA 2"
        max: 25
    """
    name: str
    max: float                       # Max marks, always >= 1


@dataclass(frozen=True)
class AssessmentRecord:
    """
    A subject's copy of a template entry, plus the score entered for it.
    
    The name/max always mirror the template entry at the same position.
    A score of None means the assessment is still pending.
    """
    name: str
    max: float
    score: Optional[float] = None    # None = pending, number = completed
    
    @property
    def is_pending(self) -> bool:
        return self.score is None


@dataclass(frozen=True)
class Subject:
    """A subject and its assessment records, in template order."""
    name: str
    assessments: tuple = field(default_factory=tuple)   # Tuple of AssessmentRecord


@dataclass(frozen=True)
class ProgressState:
    """
    Complete snapshot consumed by the engines.
    
    Snapshots are never patched in place. Every edit produces a new
    ProgressState (see progress_tracker.editing), so any computation over
    a snapshot can be replayed and gives the same answer.
    """
    target_pct: int                  # 60..100, step 5
    template: tuple                  # Tuple of AssessmentTemplateEntry
    subjects: tuple                  # Tuple of Subject
