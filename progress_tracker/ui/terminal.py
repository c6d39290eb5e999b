"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the progress_tracker package.

Percentages arrive unrounded from the engines; rounding to two decimals
happens here, at display time.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from ..models import (
    DistributionPlan,
    NextAssessmentProjection,
    ProgressReport,
    ProgressState,
    SubjectReport,
    SubjectStatus,
)


def _fmt(value) -> str:
    """Marks without a trailing .0 (10 rather than 10.0)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return f"{value:g}" if isinstance(value, float) else str(value)


class TerminalDisplay:
    """
    Pretty terminal output for progress reports.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Status colors are available as hex in config.STATUS_STYLES.

    2. FOR CHARTS:
       ProgressReport.averages and ProgressReport.sums are ready-made
       series ({name, actual_pct} and {name, total, total_max}).

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_YELLOW = "\033[43m"
    BG_RED = "\033[41m"

    # Status color token -> (foreground, background)
    STATUS_COLORS = {
        "green": (GREEN, BG_GREEN),
        "amber": (YELLOW, BG_YELLOW),
        "red": (RED, BG_RED),
    }

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, status: SubjectStatus) -> str:
        """Return a colored status badge, e.g. ' Off Track • short by 3 '."""
        _, bg = cls.STATUS_COLORS.get(status.color, (cls.WHITE, ""))
        text = status.label
        if status.message:
            text += f" • {status.message}"
        return f"{bg}{cls.WHITE} {text} {cls.RESET}"

    @classmethod
    def progress_bar(cls, pct: float, width: int = 30) -> str:
        """Bar filled to pct, clamped to 0-100 for drawing only."""
        filled = int(round(min(100, max(0, pct)) / 100 * width))
        return f"{cls.BLUE}{'█' * filled}{cls.DIM}{'░' * (width - filled)}{cls.RESET}"

    # =========================================================================
    # DASHBOARD
    # =========================================================================

    @classmethod
    def print_dashboard(cls, report: ProgressReport):
        """Print the overall dashboard followed by subject health."""
        cls.print_header(f"DASHBOARD  •  TARGET {report.target_pct}%")

        print(f"\n  {cls.BOLD}Overall % so far:{cls.RESET} {report.overall_pct:.2f}%  "
              f"{cls.progress_bar(report.overall_pct)}")
        if report.overall_pct >= report.target_pct:
            print(f"  {cls.GREEN}{cls.BOLD}Target Achieved! 🎉{cls.RESET}")
        else:
            print(f"  {cls.DIM}Keep going!{cls.RESET}")
        print(f"  {cls.BOLD}Marks scored:{cls.RESET} {_fmt(report.overall_so_far.earned)}"
              f" / {_fmt(report.overall_so_far.max)} {cls.DIM}(completed assessments){cls.RESET}")
        print(f"  {cls.BOLD}Total possible:{cls.RESET} {_fmt(report.overall_totals.max)}")
        print(f"  {cls.GREEN}Completed:{cls.RESET} {report.completed_count}   "
              f"{cls.YELLOW}Pending:{cls.RESET} {report.pending_count}")

        cls.print_subheader("Subject Health")
        if not report.subjects:
            print(f"  {cls.DIM}(no subjects){cls.RESET}")
        for s in report.subjects:
            print(f"  {s.name:<24} {s.pct_so_far:>7.2f}%  {cls.status_badge(s.status)}")

        cls.print_assessment_series(report)
        print()

    @classmethod
    def print_assessment_series(cls, report: ProgressReport):
        """Print per-assessment averages and summed totals across subjects."""
        cls.print_subheader("Per Assessment")
        print(f"\n  {cls.BOLD}{'ASSESSMENT':<16} {'AVG %':>8} {'TOTAL':>10} {'MAX':>8}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 45}{cls.RESET}")
        for avg, total in zip(report.averages, report.sums):
            print(f"  {avg.name:<16} {avg.actual_pct:>8.2f} {_fmt(total.total):>10} {_fmt(total.total_max):>8}")

    # =========================================================================
    # SUBJECT DETAIL
    # =========================================================================

    @classmethod
    def print_subject(cls, subject_report: SubjectReport, target_pct: int):
        """Print one subject: headline figures, pace message and the plan."""
        cls.print_header(f"SUBJECT: {subject_report.name.upper()}")
        print(f"\n  {cls.BOLD}Status:{cls.RESET} {cls.status_badge(subject_report.status)}")
        print(f"  {cls.BOLD}Current average so far:{cls.RESET} {subject_report.pct_so_far:.2f}%")
        print(f"  {cls.BOLD}Scored:{cls.RESET} {_fmt(subject_report.totals.earned)}"
              f" / {_fmt(subject_report.totals.max)} ({subject_report.pct:.2f}% of all marks)")
        print()
        cls._print_pace_message(subject_report, target_pct)
        cls.print_plan(subject_report.plan)

    @classmethod
    def _print_pace_message(cls, s: SubjectReport, target_pct: int):
        if s.next_assessment is None:
            print(f"  {cls.GREEN}No remaining assessments.{cls.RESET}")
            return

        if s.shortfall > 0:
            print(f"  {cls.RED}Even with full marks in this subject you'll be short by "
                  f"{cls.BOLD}{s.shortfall}{cls.RESET}{cls.RED} marks for the {target_pct}% target.{cls.RESET}")
            if s.make_up_options:
                where = ", ".join(f"{r.name} ({_fmt(r.remaining)})" for r in s.make_up_options)
                print(f"  {cls.DIM}Make up across:{cls.RESET} {where}")
            else:
                print(f"  {cls.DIM}No remaining capacity in other subjects.{cls.RESET}")
            return

        cls.print_next_assessment(s.next_assessment, target_pct)

    @classmethod
    def print_next_assessment(cls, nxt: NextAssessmentProjection, target_pct: int):
        color = cls.GREEN if nxt.feasible else cls.RED
        print(f"  {cls.BOLD}Next:{cls.RESET} {nxt.name}: need at least "
              f"{color}{cls.BOLD}{_fmt(nxt.needed)}/{_fmt(nxt.max)}{cls.RESET} "
              f"to stay on track for {target_pct}%.")

    @classmethod
    def print_plan(cls, plan: DistributionPlan):
        """Print the minimum-marks table."""
        cls.print_subheader("Minimum Marks Needed")
        if not plan.rows:
            print(f"  {cls.DIM}(nothing pending){cls.RESET}")
            return

        print(f"\n  {cls.BOLD}{'ASSESSMENT':<16} {'NEEDED (RAW)':>13} {'MAX':>6}  {'FEASIBLE?'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 48}{cls.RESET}")
        for row in plan.rows:
            feasible = f"{cls.GREEN}Yes{cls.RESET}" if row.feasible else f"{cls.RED}No{cls.RESET}"
            print(f"  {row.assessment:<16} {_fmt(row.needed):>13} {_fmt(row.max):>6}  {feasible}")

    # =========================================================================
    # SETUP
    # =========================================================================

    @classmethod
    def print_setup(cls, state: ProgressState):
        """Print the target, template and subject list."""
        cls.print_header("SETUP")
        print(f"\n  {cls.BOLD}Target overall %:{cls.RESET} {state.target_pct}%")

        cls.print_subheader("Assessment Structure")
        for i, t in enumerate(state.template, 1):
            print(f"    {i}. {t.name:<16} {cls.DIM}max{cls.RESET} {_fmt(t.max)}")

        cls.print_subheader("Subjects")
        for i, s in enumerate(state.subjects, 1):
            done = sum(1 for a in s.assessments if not a.is_pending)
            print(f"    {i}. {s.name:<24} {cls.DIM}{done}/{len(s.assessments)} scored{cls.RESET}")

    @classmethod
    def print_scores(cls, state: ProgressState, subject_index: int):
        """Print one subject's records with their scores."""
        subject = state.subjects[subject_index]
        cls.print_subheader(f"{subject.name} Marks")
        for i, a in enumerate(subject.assessments, 1):
            score = f"{cls.DIM}pending{cls.RESET}" if a.is_pending else _fmt(a.score)
            print(f"    {i}. {a.name:<16} {score} / {_fmt(a.max)}")

    @classmethod
    def print_message(cls, text: str, ok: bool = True):
        color = cls.GREEN if ok else cls.RED
        print(f"\n  {color}{text}{cls.RESET}")
