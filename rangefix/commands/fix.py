"""Rewrite counting loops into range loops."""

import sys
from pathlib import Path

import click

from rangefix.config import load_config, merge_cli_options
from rangefix.discovery import find_go_files
from rangefix.pipeline import FileStatus, fix_paths
from rangefix.pipeline.ui import console, print_file_result, print_summary
from rangefix.utils.error_handler import handle_exceptions
from rangefix.utils.exit_codes import ExitCodes
from rangefix.utils.logging import logger, set_log_level


@click.command("fix")
@click.help_option("-h", "--help")
@click.argument("paths", nargs=-1, type=click.Path(exists=True, path_type=Path))
@click.option("--dry-run", "-n", is_flag=True, help="Report what would change without writing")
@click.option(
    "--check",
    is_flag=True,
    help="Dry run that exits with status 1 if any file would change",
)
@click.option(
    "--guard-mutated-counter",
    is_flag=True,
    help="Leave loops alone when their body assigns to the counter",
)
@click.option("--exclude", "-e", multiple=True, help="Glob of files or directories to skip")
@click.option("--jobs", "-j", type=click.IntRange(min=1), help="Number of files fixed in parallel")
@click.option(
    "--config-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Directory holding rangefix.toml or pyproject.toml",
)
@click.option("--verbose", "-v", is_flag=True, help="Log every file, including unchanged ones")
@handle_exceptions
def fix(paths, dry_run, check, guard_mutated_counter, exclude, jobs, config_root, verbose):
    """Convert `for i := 0; i < n; i++` loops into `for i := range n`.

    Walks the given files and directories (default: current directory) for
    .go files, skipping vendor/, testdata/ and hidden directories. Only
    loops of exactly that shape are rewritten: the counter must be declared
    with := and start at literal 0, the condition must be a strict < on the
    counter, and the post statement must be counter++. Loop bodies are left
    untouched. The result needs Go 1.22 or later.

    \b
    EXAMPLES:
      rangefix fix                     # Fix everything under .
      rangefix fix ./pkg --dry-run     # Show what would change
      rangefix fix --check             # CI gate: exit 1 if anything would change
      rangefix fix -e '*_gen.go' -j 4  # Skip generated code, 4 workers

    \b
    EXIT CODES:
      0  Success
      1  --check found files that would change
      2  Some files could not be parsed, printed or written
    """
    if verbose:
        set_log_level("DEBUG")

    config = merge_cli_options(load_config(config_root), exclude=list(exclude), jobs=jobs)
    if config.source is not None:
        logger.debug(f"Loaded settings from {config.source}")

    dry_run = dry_run or check or config.dry_run
    guard_mutated_counter = guard_mutated_counter or config.guard_mutated_counter

    files = find_go_files(paths or [Path(".")], exclude=config.exclude)
    if not files:
        console.print("[warning]No Go files found[/warning]")
        return

    results = fix_paths(
        files,
        dry_run=dry_run,
        guard_mutated_counter=guard_mutated_counter,
        jobs=config.jobs,
    )

    for result in results:
        print_file_result(result)
    print_summary(results, dry_run)

    if any(r.status == FileStatus.FAILED for r in results):
        sys.exit(ExitCodes.FILE_ERRORS)
    if check and any(r.changed for r in results):
        sys.exit(ExitCodes.CHANGES_NEEDED)
