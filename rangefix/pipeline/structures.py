"""Data contracts for per-file results."""

from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class FileStatus(Enum):
    """Outcome of fixing one file."""

    UNCHANGED = "unchanged"
    UPDATED = "updated"
    WOULD_UPDATE = "would_update"
    FAILED = "failed"


@dataclass
class FileResult:
    """Result of running the fixer on a single file.

    ``FAILED`` results are only produced by the batch runner, which records
    the error instead of stopping; ``fix_file`` itself raises.
    """

    path: Path
    status: FileStatus
    loops_rewritten: int = 0
    loops_skipped: int = 0
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        d = asdict(self)
        d["path"] = str(self.path)
        d["status"] = self.status.value
        return d

    @property
    def changed(self) -> bool:
        """True if the file was, or in a dry run would have been, rewritten."""
        return self.status in (FileStatus.UPDATED, FileStatus.WOULD_UPDATE)
