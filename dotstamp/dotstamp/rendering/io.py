"""File I/O operations for rendering."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_FILE_MODE = 0o644


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def read_existing(path: Path) -> str:
    """Return the contents of ``path``, or an empty string when it does not exist."""
    if not path.exists():
        return ""
    return path.read_text(encoding="utf-8")


def atomic_write_text(path: Path, text: str, mode: int | None = None) -> None:
    """Write text to a file atomically using a temporary file.

    Symlinks are followed, so the link target receives the new contents.
    The permissions of an existing file are kept unless ``mode`` is given.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    target = path.resolve()
    ensure_parent(target)

    if mode is None:
        mode = (
            stat.S_IMODE(target.stat().st_mode)
            if target.exists()
            else DEFAULT_FILE_MODE
        )

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", dir=str(target.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, target)
    finally:
        if os.path.exists(tmp_name):
            try:
                os.remove(tmp_name)
            except OSError as e:
                logger.warning(f"Could not remove temporary file {tmp_name}: {e}")
