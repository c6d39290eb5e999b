"""
Command-Line Interface for the Progress Tracker.

This module provides the interactive CLI. It handles user input, applies
edits through progress_tracker.editing and shows results through the
tracker's display.

MODES:
------
1. DASHBOARD:     Overall % so far, subject health and per-assessment series
2. SUBJECT-WISE:  Pace for the next assessment and the minimum-marks table
3. ENTER MARKS:   Record or clear scores as assessments are returned
4. SETUP:         Target %, subjects and the assessment structure
5. SAVE:          Write the snapshot JSON (same file you can move around)

Usage:
    progress-tracker [path/to/my_marks_setup.json]
"""

import logging
import sys

from . import editing
from .config import DEFAULT_SNAPSHOT_PATH
from .data import JsonFileStore, SnapshotError
from .tracker import ProgressTracker
from .ui import TerminalDisplay


def _ask(prompt: str) -> str:
    """input() that treats end-of-input as an empty answer."""
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def _ask_index(prompt: str, count: int):
    """Ask for a 1-based choice; returns a 0-based index or None."""
    try:
        choice = int(_ask(f"{prompt} (1-{count}): "))
    except ValueError:
        return None
    if 1 <= choice <= count:
        return choice - 1
    return None


def _select_subject(state):
    if not state.subjects:
        TerminalDisplay.print_message("No subjects yet. Add one under Setup.", ok=False)
        return None
    print()
    for i, s in enumerate(state.subjects, 1):
        print(f"    {i}. {s.name}")
    return _ask_index("  Subject", len(state.subjects))


def _enter_marks(tracker: ProgressTracker, state):
    """
    Record scores for one subject.

    Blank input leaves a score as it is, '-' clears it (pending again).
    """
    idx = _select_subject(state)
    if idx is None:
        return state

    TerminalDisplay.print_scores(state, idx)
    print(f"\n  {TerminalDisplay.DIM}Enter a score, '-' to clear, or press Enter to keep.{TerminalDisplay.RESET}")

    for a_idx, record in enumerate(state.subjects[idx].assessments):
        raw = _ask(f"    {record.name} (/{record.max}): ")
        if not raw:
            continue
        if raw == "-":
            state = editing.set_score(state, idx, a_idx, None)
            continue
        try:
            state = editing.set_score(state, idx, a_idx, float(raw))
        except ValueError:
            TerminalDisplay.print_message(f"'{raw}' is not a valid score, kept previous value.", ok=False)

    tracker.run_subject(state, idx)
    return state


def _setup(state):
    """Setup submenu: target, subjects and the assessment structure."""
    while True:
        TerminalDisplay.print_setup(state)
        print(f"""
  {TerminalDisplay.BOLD}Setup:{TerminalDisplay.RESET}
    t. Set target %            a. Add subject        d. Delete subject
    r. Rename subject          o. Reset to 1 subject
    n. Rename assessment       m. Change max marks   +. Add assessment
    x. Remove assessment       p. Default structure  b. Back""")
        choice = _ask("  > ").lower()

        if choice == "t":
            state = editing.set_target_pct(state, _ask("  Target % (60-100, step 5): "))
        elif choice == "a":
            state = editing.add_subject(state, _ask("  Subject name: "))
        elif choice == "d":
            idx = _select_subject(state)
            if idx is not None:
                state = editing.remove_subject(state, idx)
        elif choice == "r":
            idx = _select_subject(state)
            name = _ask("  New name: ") if idx is not None else ""
            if name:
                state = editing.rename_subject(state, idx, name)
        elif choice == "o":
            state = editing.reset_subjects(state)
        elif choice in ("n", "m", "x"):
            idx = _ask_index("  Assessment", len(state.template))
            if idx is None:
                continue
            if choice == "n":
                name = _ask("  New name: ")
                if name:
                    state = editing.rename_template_entry(state, idx, name)
            elif choice == "m":
                try:
                    value = float(_ask("  Max marks: "))
                except ValueError:
                    value = None
                state = editing.set_template_max(state, idx, value)
            else:
                state = editing.remove_template_entry(state, idx)
        elif choice == "+":
            state = editing.add_template_entry(state)
        elif choice == "p":
            state = editing.reset_template(state)
        elif choice in ("b", ""):
            return state


def main(argv=None) -> int:
    """
    Command-line interface for the progress tracker.

    ═══════════════════════════════════════════════════════════════════════════
    FLOW
    ═══════════════════════════════════════════════════════════════════════════

    1. Load the snapshot (a fresh one if the file doesn't exist yet)
    2. Loop over the main menu; every edit produces a new snapshot
    3. Save on request, and offer to save unsaved changes on quit

    ═══════════════════════════════════════════════════════════════════════════
    """
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else DEFAULT_SNAPSHOT_PATH

    tracker = ProgressTracker(JsonFileStore(path))
    try:
        state = tracker.load()
    except SnapshotError as e:
        # Don't fall back to a fresh state: saving it would overwrite the file
        TerminalDisplay.print_message(f"Invalid marks file: {e}", ok=False)
        return 1
    saved = state

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         ACADEMIC PROGRESS TRACKER                                ║")
    print("║         Minimum marks needed to stay on target                   ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    while True:
        print(f"""
  {TerminalDisplay.BOLD}Menu:{TerminalDisplay.RESET}
    1. 📊 Dashboard
    2. 📘 Subject-wise
    3. ✏️  Enter marks
    4. ⚙️  Setup
    5. 💾 Save
    6. Quit""")
        mode = _ask(f"{TerminalDisplay.BOLD}Select (1-6): {TerminalDisplay.RESET}")

        if mode == "1":
            tracker.run_dashboard(state)
        elif mode == "2":
            idx = _select_subject(state)
            if idx is not None:
                tracker.run_subject(state, idx)
        elif mode == "3":
            state = _enter_marks(tracker, state)
        elif mode == "4":
            state = _setup(state)
        elif mode == "5":
            tracker.save(state)
            saved = state
            TerminalDisplay.print_message(f"Saved to {tracker.store.path}")
        elif mode in ("6", ""):
            if state != saved and _ask("  Save changes before quitting? (y/n): ").lower() == "y":
                tracker.save(state)
            return 0


if __name__ == "__main__":
    sys.exit(main())
