"""Find the Go files to fix."""

import fnmatch
import os
from collections.abc import Iterable
from pathlib import Path

from .utils.constants import GO_EXTENSION, SKIP_DIRS


def _is_excluded(path: Path, exclude: Iterable[str]) -> bool:
    """Match a path against exclude globs, by full path or by name."""
    posix = path.as_posix()
    return any(
        fnmatch.fnmatch(posix, pattern) or fnmatch.fnmatch(path.name, pattern)
        for pattern in exclude
    )


def find_go_files(paths: Iterable[str | Path], exclude: Iterable[str] = ()) -> list[Path]:
    """Collect ``.go`` files from files and directories.

    Files named explicitly are taken as long as they are not excluded, even
    inside a directory that would be skipped during a walk. Directories are
    walked recursively, pruning ``SKIP_DIRS``, hidden directories and any
    excluded directory.

    Raises:
        FileNotFoundError: If a path does not exist
    """
    exclude = list(exclude)
    found: set[Path] = set()

    for item in paths:
        root = Path(item)
        if not root.exists():
            raise FileNotFoundError(f"No such file or directory: {root}")

        if root.is_file():
            if root.suffix == GO_EXTENSION and not _is_excluded(root, exclude):
                found.add(root)
            continue

        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(
                d
                for d in dirnames
                if d not in SKIP_DIRS
                and not d.startswith(".")
                and not _is_excluded(Path(dirpath) / d, exclude)
            )
            for filename in filenames:
                file = Path(dirpath) / filename
                if file.suffix == GO_EXTENSION and not _is_excluded(file, exclude):
                    found.add(file)

    return sorted(found)
