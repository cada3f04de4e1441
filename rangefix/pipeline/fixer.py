"""Parse, rewrite and print a single Go file."""

from pathlib import Path

from ..errors import ParseError, PrintError
from ..rewriter import RangeLoopRewriter
from ..syntax.parser import parse
from ..syntax.printer import render
from ..utils.logging import logger
from ..utils.temp_manager import TempManager
from .structures import FileResult, FileStatus


def rewrite_source(
    source: str | bytes, filename: str = "<file>", guard_mutated_counter: bool = False
) -> tuple[str | None, RangeLoopRewriter]:
    """Run the rewriter over ``source``, returning the new text and the rewriter.

    The text is None when no loop was rewritten.
    """
    module = parse(source, filename)
    rewriter = RangeLoopRewriter(guard_mutated_counter=guard_mutated_counter)
    module.root = rewriter.visit(module.root)

    # No updates, nothing to print
    if not rewriter.changed:
        return None, rewriter

    text = render(module)
    try:
        parse(text, filename)
    except ParseError as e:
        raise PrintError(f"rewritten {filename} is not valid Go: {e}") from e
    return text, rewriter


def transform(
    source: str | bytes, filename: str = "<file>", guard_mutated_counter: bool = False
) -> str | None:
    """Rewrite counting loops in Go source into range loops.

    Returns the new source, or None when no loop could be converted (the
    caller has nothing to write). Raises ``ParseError`` for invalid input
    and ``PrintError`` if the result cannot be printed.

    The output is not run through gofmt. Only the rewritten loop headers
    are printed in gofmt style; every other byte, including formatting the
    file had before, is kept as it was. Comments inside a rewritten header
    are dropped.
    """
    text, _ = rewrite_source(source, filename, guard_mutated_counter)
    return text


def fix_file(
    path: str | Path, dry_run: bool = False, guard_mutated_counter: bool = False
) -> FileResult:
    """Fix integer loops into ranges for a given file.

    With ``dry_run`` the transform still runs, so the result says whether
    the file would change, but nothing is written.
    """
    path = Path(path)
    with open(path, "rb") as f:
        source = f.read()

    text, rewriter = rewrite_source(source, str(path), guard_mutated_counter)

    if text is None:
        logger.debug(f"No updates needed for {path}")
        return FileResult(path, FileStatus.UNCHANGED, loops_skipped=rewriter.skipped)

    if dry_run:
        logger.info(f"Would have updated {path}, skipping for dry run")
        return FileResult(path, FileStatus.WOULD_UPDATE, rewriter.rewritten, rewriter.skipped)

    logger.info(f"Updating {path} ({rewriter.rewritten} loop(s))")
    TempManager.write_atomic(path, text)
    return FileResult(path, FileStatus.UPDATED, rewriter.rewritten, rewriter.skipped)
