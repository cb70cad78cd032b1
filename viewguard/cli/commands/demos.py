"""``viewguard unmodifiable-view`` / ``builder-mutation`` / ``all``.

Each command prints the demo's two lines verbatim.  Rich markup and
highlighting are off for these lines so the output is exactly what the
demo rendered.
"""

from __future__ import annotations

from rich.console import Console

from viewguard.demos import DEMOS, builder_mutation, unmodifiable_view
from viewguard.models.reports import DemoReport

console = Console()


def _print_report(report: DemoReport) -> None:
    for line in report.lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)


def unmodifiable_view_cmd() -> None:
    """Show that a read-only view tracks changes to its backing list."""
    _print_report(unmodifiable_view.run())


def builder_mutation_cmd() -> None:
    """Show that a built Person ignores later changes to its builder."""
    _print_report(builder_mutation.run())


def all_cmd() -> None:
    """Run every registered demonstration, view first."""
    for run in DEMOS.values():
        _print_report(run())
