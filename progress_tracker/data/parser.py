"""
Snapshot parsing.

This module turns a JSON document into a ProgressState and back. It is the
gate that rejects malformed input before it can reach the engines.
"""

import logging
import math

from ..config import (
    ALLOW_OVER_MAX,
    DEFAULT_TARGET_PCT,
    DEFAULT_TEMPLATE,
    LEGACY_SUBJECT_NAME,
    MIN_ENTRY_MAX,
    snap_target_pct,
)
from ..models import (
    AssessmentTemplateEntry,
    AssessmentRecord,
    Subject,
    ProgressState,
)

logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    """Raised when a snapshot document does not have the expected shape."""


def _is_number(value) -> bool:
    # bool is an int subclass but never a valid mark
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


class SnapshotParser:
    """
    Parses a snapshot document into an immutable ProgressState.
    
    DOCUMENT SHAPE:
    --------------
        {
            "targetPct": 70,
            "template": [{"name": "CIA 1", "max": 15}, ...],
            "subjects": [
                {"name": "Maths",
                 "assessments": [{"name": "CIA 1", "max": 15, "score": 10}, ...]},
                ...
            ]
        }
    
    LEGACY DOCUMENTS:
    ----------------
    Early files had no "template" key. These get the default template, and
    each subject's scores are carried over by position; anything missing
    becomes pending. A subject without a name is called "Subject".
    
    VALIDATION:
    ----------
    Wrong shapes, non-numeric marks, max below 1, negative scores and
    assessments out of sync with the template all raise SnapshotError.
    The engines assume well-formed input, so a corrupt file must fail here
    rather than produce a misleading projection.
    """
    
    def __init__(self, allow_over_max: bool = ALLOW_OVER_MAX):
        self.allow_over_max = allow_over_max
    
    def parse(self, document: dict) -> ProgressState:
        if not isinstance(document, dict):
            raise SnapshotError("snapshot must be a JSON object")
        
        target_pct = self._parse_target(document.get("targetPct", DEFAULT_TARGET_PCT))
        subjects_raw = document.get("subjects", [])
        if not isinstance(subjects_raw, list):
            raise SnapshotError("subjects: expected a list")
        
        if "template" not in document or document["template"] is None:
            logger.info("Migrating legacy snapshot without a template (%d subjects)", len(subjects_raw))
            template = tuple(AssessmentTemplateEntry(name, max_marks) for name, max_marks in DEFAULT_TEMPLATE)
            subjects = tuple(
                self._migrate_subject(s, template, f"subjects[{i}]")
                for i, s in enumerate(subjects_raw)
            )
        else:
            template = self._parse_template(document["template"])
            subjects = tuple(
                self._parse_subject(s, template, f"subjects[{i}]")
                for i, s in enumerate(subjects_raw)
            )
        
        return ProgressState(target_pct=target_pct, template=template, subjects=subjects)
    
    def _parse_target(self, raw) -> int:
        if not _is_number(raw):
            raise SnapshotError(f"targetPct: expected a number, got {raw!r}")
        return snap_target_pct(raw)
    
    def _parse_template(self, raw) -> tuple:
        if not isinstance(raw, list):
            raise SnapshotError("template: expected a list")
        entries = []
        for i, t in enumerate(raw):
            path = f"template[{i}]"
            if not isinstance(t, dict):
                raise SnapshotError(f"{path}: expected an object")
            entries.append(AssessmentTemplateEntry(
                name=self._parse_name(t.get("name"), path),
                max=self._parse_max(t.get("max"), path),
            ))
        return tuple(entries)
    
    def _parse_subject(self, raw, template: tuple, path: str) -> Subject:
        if not isinstance(raw, dict):
            raise SnapshotError(f"{path}: expected an object")
        assessments_raw = raw.get("assessments", [])
        if not isinstance(assessments_raw, list):
            raise SnapshotError(f"{path}.assessments: expected a list")
        if len(assessments_raw) != len(template):
            raise SnapshotError(
                f"{path}.assessments: has {len(assessments_raw)} entries, template has {len(template)}"
            )
        
        records = []
        for i, (a, entry) in enumerate(zip(assessments_raw, template)):
            a_path = f"{path}.assessments[{i}]"
            if not isinstance(a, dict):
                raise SnapshotError(f"{a_path}: expected an object")
            name = self._parse_name(a.get("name"), a_path)
            max_marks = self._parse_max(a.get("max"), a_path)
            if name != entry.name or max_marks != entry.max:
                raise SnapshotError(
                    f"{a_path}: {name!r}/{max_marks} does not match template entry {entry.name!r}/{entry.max}"
                )
            records.append(AssessmentRecord(
                name=name,
                max=max_marks,
                score=self._parse_score(a.get("score"), max_marks, a_path),
            ))
        
        return Subject(name=self._parse_name(raw.get("name"), path), assessments=tuple(records))
    
    def _migrate_subject(self, raw, template: tuple, path: str) -> Subject:
        """Apply the default template to a legacy subject, keeping scores by index."""
        if not isinstance(raw, dict):
            raise SnapshotError(f"{path}: expected an object")
        old = raw.get("assessments") or []
        if not isinstance(old, list):
            raise SnapshotError(f"{path}.assessments: expected a list")
        
        records = []
        for i, entry in enumerate(template):
            score = None
            if i < len(old) and isinstance(old[i], dict):
                score = self._parse_score(old[i].get("score"), entry.max, f"{path}.assessments[{i}]")
            records.append(AssessmentRecord(name=entry.name, max=entry.max, score=score))
        
        name = raw.get("name")
        if name is None:
            name = LEGACY_SUBJECT_NAME
        return Subject(name=self._parse_name(name, path), assessments=tuple(records))
    
    def _parse_name(self, raw, path: str) -> str:
        if not isinstance(raw, str):
            raise SnapshotError(f"{path}.name: expected a string, got {raw!r}")
        return raw
    
    def _parse_max(self, raw, path: str):
        if not _is_number(raw):
            raise SnapshotError(f"{path}.max: expected a number, got {raw!r}")
        if raw < MIN_ENTRY_MAX:
            raise SnapshotError(f"{path}.max: must be at least {MIN_ENTRY_MAX}, got {raw}")
        return raw
    
    def _parse_score(self, raw, max_marks, path: str):
        if raw is None:
            return None
        if not _is_number(raw):
            raise SnapshotError(f"{path}.score: expected a number or null, got {raw!r}")
        if raw < 0:
            raise SnapshotError(f"{path}.score: must not be negative, got {raw}")
        if raw > max_marks and not self.allow_over_max:
            raise SnapshotError(f"{path}.score: {raw} exceeds max {max_marks}")
        return raw


def serialize_state(state: ProgressState) -> dict:
    """Convert a ProgressState into the JSON-serializable document shape."""
    return {
        "targetPct": state.target_pct,
        "template": [{"name": t.name, "max": t.max} for t in state.template],
        "subjects": [
            {
                "name": s.name,
                "assessments": [
                    {"name": a.name, "max": a.max, "score": a.score}
                    for a in s.assessments
                ],
            }
            for s in state.subjects
        ],
    }
