"""File utility functions for atomic writes and safe copies."""

from __future__ import annotations

import os
import shutil
import stat
import tempfile
from pathlib import Path


def atomic_write_text(path: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write text to ``path`` atomically.

    The content goes to a temporary file in the same directory, which then
    replaces the target with ``os.replace``. A failure at any point leaves the
    original file untouched and removes the temporary file. The written file
    keeps the permission bits of the file it replaces; a new file gets the
    mode a plain ``open`` would give it under the current umask.

    Args:
        path: Destination file.
        content: Text to write.
        encoding: Text encoding.

    Raises:
        OSError: If the temporary file cannot be written or moved into place.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent)
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            handle.write(content)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def copy_file(src: Path, dst: Path) -> Path:
    """
    Copy a single file, creating the destination's parent directories.

    Returns:
        The destination path.

    Raises:
        OSError: If the copy fails.
    """
    dst = Path(dst)
    dst.parent.mkdir(parents=True, exist_ok=True)
    shutil.copy2(src, dst)
    return dst
