"""Run the fixer over many files."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from ..errors import RangefixError
from ..utils.logging import logger
from .structures import FileResult, FileStatus
from .fixer import fix_file


def _fix_one(path: Path, dry_run: bool, guard_mutated_counter: bool) -> FileResult:
    """Fix one file, recording failures instead of raising them."""
    try:
        return fix_file(path, dry_run=dry_run, guard_mutated_counter=guard_mutated_counter)
    except (RangefixError, OSError) as e:
        logger.error(f"Failed to fix {path}: {e}")
        return FileResult(path, FileStatus.FAILED, error=f"{type(e).__name__}: {e}")


def fix_paths(
    files: list[Path],
    dry_run: bool = False,
    guard_mutated_counter: bool = False,
    jobs: int = 1,
) -> list[FileResult]:
    """Fix every file in ``files`` and return results in input order.

    A failing file does not stop the others. With ``jobs > 1`` files are
    fixed on a thread pool; each path is submitted once, so no two workers
    ever write the same file.
    """
    unique_files = list(dict.fromkeys(files))

    if jobs <= 1 or len(unique_files) <= 1:
        return [_fix_one(f, dry_run, guard_mutated_counter) for f in unique_files]

    results: dict[Path, FileResult] = {}
    with ThreadPoolExecutor(max_workers=jobs) as executor:
        futures = {
            executor.submit(_fix_one, f, dry_run, guard_mutated_counter): f for f in unique_files
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()

    return [results[f] for f in unique_files]
