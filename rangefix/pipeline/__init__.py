"""File transform pipeline: parse, rewrite, print, write back."""

from .runner import fix_paths
from .structures import FileResult, FileStatus
from .fixer import fix_file, rewrite_source, transform

__all__ = [
    "FileResult",
    "FileStatus",
    "fix_file",
    "fix_paths",
    "rewrite_source",
    "transform",
]
