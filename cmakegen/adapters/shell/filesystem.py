"""
Filesystem adapter — change-aware writes and deletes.

The descriptor is always built fully in memory first; these helpers
are the only place it touches disk.  Errors propagate as ``OSError``.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_file_if_changed(path: Path, content: str) -> bool:
    """Write *content* to *path* unless the file already holds it byte for byte.

    Args:
        path: Target file.  Parent directories are created.
        content: Full file content, encoded as UTF-8.

    Returns:
        True if the file was written, False if it was already up to date.

    Raises:
        OSError: If reading the old file or writing the new one fails.
    """
    data = content.encode("utf-8")
    if path.is_file() and path.read_bytes() == data:
        logger.debug("Unchanged, skipping write: %s", path)
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    logger.info("Wrote %s (%d bytes)", path, len(data))
    return True


def delete_file(path: Path) -> bool:
    """Delete *path* if it exists.

    Returns:
        True if a file was removed, False if there was nothing to remove.
    """
    if not path.is_file():
        logger.debug("Nothing to delete: %s", path)
        return False

    path.unlink()
    logger.info("Deleted %s", path)
    return True
