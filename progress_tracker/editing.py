"""
Snapshot editing.

Every function here takes a ProgressState and returns a NEW one; the input
is never modified. This is the only way the outer layers change state, so
the engines always see a complete, consistent snapshot.

Template edits are followed by an explicit reconciliation step that
re-aligns every subject's records with the new template.
"""

import logging
import math
from dataclasses import replace
from typing import Optional

from .config import (
    ALLOW_OVER_MAX,
    DEFAULT_SUBJECT_NAME_FORMAT,
    DEFAULT_TARGET_PCT,
    DEFAULT_TEMPLATE,
    MIN_ENTRY_MAX,
    NEW_ENTRY_MAX,
    NEW_ENTRY_NAME_FORMAT,
    TEMPLATE_MATCH_POLICIES,
    TEMPLATE_MATCH_POLICY,
    snap_target_pct,
)
from .models import (
    AssessmentTemplateEntry,
    AssessmentRecord,
    Subject,
    ProgressState,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTRUCTION
# =============================================================================

def default_template() -> tuple:
    return tuple(AssessmentTemplateEntry(name, max_marks) for name, max_marks in DEFAULT_TEMPLATE)


def blank_subject(name: str, template: tuple) -> Subject:
    """A subject with every template entry pending."""
    return Subject(
        name=name,
        assessments=tuple(AssessmentRecord(name=t.name, max=t.max) for t in template),
    )


def new_state() -> ProgressState:
    """Fresh snapshot: default target and template, one blank subject."""
    template = default_template()
    return ProgressState(
        target_pct=DEFAULT_TARGET_PCT,
        template=template,
        subjects=(blank_subject(DEFAULT_SUBJECT_NAME_FORMAT.format(n=1), template),),
    )


def reset_subjects(state: ProgressState) -> ProgressState:
    """Drop every subject and start again with a single blank one."""
    return replace(state, subjects=(blank_subject(DEFAULT_SUBJECT_NAME_FORMAT.format(n=1), state.template),))


# =============================================================================
# TARGET AND SCORES
# =============================================================================

def set_target_pct(state: ProgressState, raw) -> ProgressState:
    """Snap to the nearest 5 within 60-100. Non-numeric input is ignored."""
    try:
        target = snap_target_pct(raw)
    except (TypeError, ValueError, OverflowError):
        return state
    return replace(state, target_pct=target)


def set_score(state: ProgressState, subject_index: int, assessment_index: int,
              value: Optional[float], allow_over_max: bool = ALLOW_OVER_MAX) -> ProgressState:
    """
    Enter or clear a score.
    
    None clears the score (the assessment becomes pending again). Numbers
    are floored at 0, and clamped to the assessment's max unless
    allow_over_max is set. Infinity and NaN raise ValueError.
    """
    _check_index(state.subjects, subject_index)
    subject = state.subjects[subject_index]
    _check_index(subject.assessments, assessment_index)
    record = subject.assessments[assessment_index]
    
    if value is None:
        score = None
    elif not math.isfinite(value):
        raise ValueError(f"score must be a finite number, got {value!r}")
    else:
        score = max(0, value)
        if not allow_over_max:
            score = min(score, record.max)
    
    assessments = list(subject.assessments)
    assessments[assessment_index] = replace(record, score=score)
    return _replace_subject(state, subject_index, replace(subject, assessments=tuple(assessments)))


# =============================================================================
# SUBJECTS
# =============================================================================

def add_subject(state: ProgressState, name: Optional[str] = None) -> ProgressState:
    """Append a blank subject. A blank name leaves the state unchanged."""
    if name is None:
        name = DEFAULT_SUBJECT_NAME_FORMAT.format(n=len(state.subjects) + 1)
    name = name.strip()
    if not name:
        return state
    return replace(state, subjects=state.subjects + (blank_subject(name, state.template),))


def rename_subject(state: ProgressState, index: int, name: str) -> ProgressState:
    _check_index(state.subjects, index)
    return _replace_subject(state, index, replace(state.subjects[index], name=name))


def remove_subject(state: ProgressState, index: int) -> ProgressState:
    _check_index(state.subjects, index)
    return replace(state, subjects=state.subjects[:index] + state.subjects[index + 1:])


def _replace_subject(state: ProgressState, index: int, subject: Subject) -> ProgressState:
    _check_index(state.subjects, index)
    subjects = list(state.subjects)
    subjects[index] = subject
    return replace(state, subjects=tuple(subjects))


def _check_index(seq, index: int):
    # Negative indices would silently address from the end
    if not 0 <= index < len(seq):
        raise IndexError(f"index {index} out of range for {len(seq)} item(s)")


# =============================================================================
# TEMPLATE
# =============================================================================

def rename_template_entry(state: ProgressState, index: int, name: str,
                          policy: str = TEMPLATE_MATCH_POLICY) -> ProgressState:
    _check_index(state.template, index)
    template = list(state.template)
    template[index] = replace(template[index], name=name)
    return _with_template(state, tuple(template), policy)


def set_template_max(state: ProgressState, index: int, value,
                     policy: str = TEMPLATE_MATCH_POLICY) -> ProgressState:
    """Change an entry's max marks. Values below 1 or non-numeric become 1."""
    _check_index(state.template, index)
    try:
        max_marks = max(MIN_ENTRY_MAX, value or MIN_ENTRY_MAX)
    except TypeError:
        max_marks = MIN_ENTRY_MAX
    template = list(state.template)
    template[index] = replace(template[index], max=max_marks)
    return _with_template(state, tuple(template), policy)


def add_template_entry(state: ProgressState, policy: str = TEMPLATE_MATCH_POLICY) -> ProgressState:
    entry = AssessmentTemplateEntry(
        name=NEW_ENTRY_NAME_FORMAT.format(n=len(state.template) + 1),
        max=NEW_ENTRY_MAX,
    )
    return _with_template(state, state.template + (entry,), policy)


def remove_template_entry(state: ProgressState, index: int,
                          policy: str = TEMPLATE_MATCH_POLICY) -> ProgressState:
    """Remove an entry. The last remaining entry cannot be removed."""
    if len(state.template) <= 1:
        return state
    _check_index(state.template, index)
    template = state.template[:index] + state.template[index + 1:]
    return _with_template(state, template, policy)


def reset_template(state: ProgressState, policy: str = TEMPLATE_MATCH_POLICY) -> ProgressState:
    return _with_template(state, default_template(), policy)


def _with_template(state: ProgressState, template: tuple, policy: str) -> ProgressState:
    return replace(state, template=template,
                   subjects=reconcile_subjects(state.subjects, template, policy))


def reconcile_subjects(subjects: tuple, template: tuple,
                       policy: str = TEMPLATE_MATCH_POLICY) -> tuple:
    """
    Re-align every subject's records with a template.
    
    POLICIES:
    --------
    "position": record i takes template entry i's name/max and keeps the
                score that was at index i. This is the historical behavior;
                reordering or deleting an entry shifts scores onto the
                wrong assessment.
    
    "name":     each template entry first claims the old record with the
                same name. Entries without a name match fall back to the
                record at the same index, unless a name match already
                claimed it. Unmatched entries start pending.
    """
    if policy not in TEMPLATE_MATCH_POLICIES:
        raise ValueError(f"Unknown template match policy: {policy!r}")
    
    reconciled = []
    for s in subjects:
        if policy == "name":
            scores = _scores_by_name(s.assessments, template)
        else:
            scores = [
                s.assessments[i].score if i < len(s.assessments) else None
                for i in range(len(template))
            ]
        reconciled.append(replace(s, assessments=tuple(
            AssessmentRecord(name=t.name, max=t.max, score=score)
            for t, score in zip(template, scores)
        )))
    
    logger.debug("Reconciled %d subject(s) to %d template entries (%s)",
                 len(reconciled), len(template), policy)
    return tuple(reconciled)


def _scores_by_name(old_records: tuple, template: tuple) -> list:
    claimed = set()
    matches = [None] * len(template)
    
    # Pass 1: exact name matches
    for i, t in enumerate(template):
        for j, a in enumerate(old_records):
            if j not in claimed and a.name == t.name:
                matches[i] = j
                claimed.add(j)
                break
    
    # Pass 2: positional fallback for entries that found no name
    for i in range(len(template)):
        if matches[i] is None and i < len(old_records) and i not in claimed:
            matches[i] = i
            claimed.add(i)
    
    return [old_records[j].score if j is not None else None for j in matches]
