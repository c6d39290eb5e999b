"""
Snapshot persistence.

This module holds the persistence port used by the outer layers. The
engines never see it: they only receive ProgressState snapshots.
"""

import json
import logging
from pathlib import Path

from ..config import DEFAULT_SNAPSHOT_PATH
from ..editing import new_state
from ..models import ProgressState
from .parser import SnapshotParser, SnapshotError, serialize_state

logger = logging.getLogger(__name__)


class SnapshotStore:
    """
    Persistence port: load() -> ProgressState, save(ProgressState).
    
    To store snapshots somewhere else (browser storage, a database, a web
    API), subclass this and implement both methods. Saving always writes
    the whole snapshot; stores never patch.
    """
    
    def load(self) -> ProgressState:
        raise NotImplementedError
    
    def save(self, state: ProgressState) -> None:
        raise NotImplementedError


class JsonFileStore(SnapshotStore):
    """
    Keeps the snapshot in a single JSON file.
    
    The file is the same document users download and upload
    (my_marks_setup.json), so a saved file can be moved between machines.
    
    Usage:
        store = JsonFileStore("my_marks_setup.json")
        state = store.load()        # fresh state if the file doesn't exist
        store.save(state)
    """
    
    def __init__(self, path=DEFAULT_SNAPSHOT_PATH, parser: SnapshotParser = None):
        self.path = Path(path)
        self.parser = parser or SnapshotParser()
    
    def load(self) -> ProgressState:
        if not self.path.exists():
            logger.info("No snapshot at %s, starting fresh", self.path)
            return new_state()
        
        with open(self.path, "r", encoding="utf-8") as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as e:
                raise SnapshotError(f"{self.path}: invalid JSON ({e})") from e
        
        state = self.parser.parse(document)
        logger.info("Loaded %d subject(s) from %s", len(state.subjects), self.path)
        return state
    
    def save(self, state: ProgressState) -> None:
        # Nothing is written unless the whole snapshot serializes
        text = json.dumps(serialize_state(state), indent=2, allow_nan=False)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("Saved %d subject(s) to %s", len(state.subjects), self.path)
