"""Temporary files for atomic write-back."""

import os
import re
import shutil
import uuid
from pathlib import Path

from .constants import SKIP_DIRS

# <name>.go.new.<8 hex digits>, as created by TempManager.create_temp_file
STALE_TEMP_RE = re.compile(r"^.+\.go\.new\.[0-9a-f]{8}$")


class TempManager:
    """Manages temporary files next to their target to keep renames atomic."""

    @staticmethod
    def create_temp_file(target: Path) -> tuple[Path, int]:
        """Create an empty temporary file in the same directory as ``target``.

        Same directory means same filesystem, so the later rename is atomic.
        """
        unique_id = uuid.uuid4().hex[:8]
        file_path = target.parent / f"{target.name}.new.{unique_id}"

        fd = os.open(str(file_path), os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)

        return file_path, fd

    @staticmethod
    def write_atomic(target: Path, text: str) -> None:
        """Replace the contents of ``target`` with ``text``, all or nothing.

        The new content goes to a temporary file which is then renamed over
        ``target``. If anything fails, ``target`` keeps its old bytes and the
        temporary file is removed.
        """
        target = Path(target)
        temp_path, fd = TempManager.create_temp_file(target)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            shutil.copymode(target, temp_path)
            os.replace(temp_path, target)
        finally:
            # Already gone after a successful rename
            if temp_path.exists():
                temp_path.unlink()

    @staticmethod
    def cleanup_stale_temp_files(root_path: str | Path) -> list[Path]:
        """Remove temporary files left behind by interrupted runs."""
        root = Path(root_path)
        if root.is_file():
            root = root.parent

        removed = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = [d for d in dirnames if d not in SKIP_DIRS]
            for filename in filenames:
                if STALE_TEMP_RE.match(filename):
                    stale = Path(dirpath) / filename
                    stale.unlink()
                    removed.append(stale)

        return sorted(removed)
