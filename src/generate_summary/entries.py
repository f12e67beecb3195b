"""Select the directory entries that take part in chapter generation."""

from __future__ import annotations

import logging
from pathlib import Path

from generate_summary.exceptions import FilesystemAccessError

logger = logging.getLogger(__name__)


def is_document(path: Path, extension: str) -> bool:
    """Check whether ``path`` is a regular file with the document extension."""
    return path.suffix == f".{extension}" and path.is_file()


def list_chapter_entries(directory: Path, extension: str) -> list[Path]:
    """Return the subdirectories and documents directly inside ``directory``.

    Everything else (other extensions, special files, dangling symlinks) is
    dropped without complaint. The result is unordered; callers sort it.

    Raises:
        FilesystemAccessError: If the directory cannot be listed.
    """
    try:
        children = list(directory.iterdir())
    except OSError as exc:
        raise FilesystemAccessError(directory, exc.strerror or str(exc)) from exc

    entries = [child for child in children if child.is_dir() or is_document(child, extension)]
    logger.debug("Listed %s: %d of %d entries kept", directory, len(entries), len(children))
    return entries
