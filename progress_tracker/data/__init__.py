"""
Snapshot loading and persistence module.

This package handles all file I/O and document parsing.
"""

from .parser import SnapshotParser, SnapshotError, serialize_state
from .store import SnapshotStore, JsonFileStore

__all__ = [
    "SnapshotParser",
    "SnapshotError",
    "serialize_state",
    "SnapshotStore",
    "JsonFileStore",
]
