"""Central UI handler for rangefix.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from rangefix.pipeline.ui import console, print_file_result, print_summary

    console.print("[success]No loops to rewrite[/success]")
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from .structures import FileResult, FileStatus

RANGEFIX_THEME = Theme({
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "path": "bold cyan",
    "dim": "dim white",
})

# Single console instance - import this, don't create your own
console = Console(
    theme=RANGEFIX_THEME,
    force_terminal=sys.stdout.isatty()
)

STATUS_STYLES = {
    FileStatus.UPDATED: "success",
    FileStatus.WOULD_UPDATE: "warning",
    FileStatus.FAILED: "error",
    FileStatus.UNCHANGED: "dim",
}


def print_file_result(result: FileResult) -> None:
    """Print one line for a file that changed or failed."""
    if result.status == FileStatus.UNCHANGED:
        return
    style = STATUS_STYLES[result.status]
    label = result.status.value.replace("_", " ")
    if result.status == FileStatus.FAILED:
        detail = result.error
    else:
        detail = f"{result.loops_rewritten} loop(s)"
    console.print(
        f"[{style}]{label:>12}[/{style}] [path]{escape(str(result.path))}[/path] {escape(str(detail))}",
        highlight=False,
        soft_wrap=True,
    )


def print_summary(results: list[FileResult], dry_run: bool) -> None:
    """Print a table of per-status file and loop counts."""
    table = Table(title="rangefix summary (dry run)" if dry_run else "rangefix summary")
    table.add_column("Status")
    table.add_column("Files", justify="right")
    table.add_column("Loops", justify="right")

    for status in FileStatus:
        matching = [r for r in results if r.status == status]
        if not matching:
            continue
        style = STATUS_STYLES[status]
        table.add_row(
            f"[{style}]{status.value}[/{style}]",
            str(len(matching)),
            str(sum(r.loops_rewritten for r in matching)),
        )

    skipped = sum(r.loops_skipped for r in results)
    if skipped:
        table.caption = f"{skipped} matching loop(s) left alone: body writes the counter"

    console.print(table)
