from __future__ import annotations

from collections import Counter
from typing import Iterable

from rich import box
from rich.console import Console
from rich.table import Table

from ..scanner.models import ScanIssue, ScanSummary

_LABELS = {
    "directories_visited": "Directories visited",
    "files_checked": "Files checked",
    "archives_opened": "Archives opened",
    "entries_visited": "Archive entries visited",
    "matches": "Matches",
    "issues_count": "Issues",
    "trace_lines": "Trace lines",
}


def build_summary_table(summary: ScanSummary, issues: Iterable[ScanIssue] = ()) -> Table:
    """Tabulate run counters, followed by one row per issue code seen."""
    table = Table(title="Lookup Summary", box=box.ROUNDED)
    table.add_column("Metric", style="cyan", justify="right")
    table.add_column("Value", style="white")
    for key, value in summary.as_dict().items():
        table.add_row(_LABELS.get(key, key), f"{value:,}")

    by_code = Counter(issue.code for issue in issues)
    for code, count in sorted(by_code.items()):
        table.add_row(f"[dim]{code}[/dim]", f"{count:,}")
    return table


def render_summary(
    summary: ScanSummary,
    issues: Iterable[ScanIssue] = (),
    *,
    console: Console | None = None,
) -> None:
    # Statistics are diagnostics, so they never go to stdout.
    console = console or Console(stderr=True)
    console.print(build_summary_table(summary, issues))
