"""Chapter title derivation."""

from __future__ import annotations

import logging
from pathlib import Path

from generate_summary.config import SummaryConfig
from generate_summary.exceptions import FilesystemAccessError

logger = logging.getLogger(__name__)

HEADING_MARKER = "# "


def read_first_line(path: Path) -> str:
    """Read a document's first line without its line terminator.

    Raises:
        FilesystemAccessError: If the file cannot be opened or decoded.
    """
    try:
        with path.open(encoding="utf-8") as handle:
            line = handle.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise FilesystemAccessError(path, getattr(exc, "strerror", None) or str(exc)) from exc
    return line.rstrip("\r\n")


def heading_title(line: str) -> str | None:
    """Return the text after a leading ``# `` marker, or None if there is none."""
    if not line.startswith(HEADING_MARKER):
        return None
    title = line[len(HEADING_MARKER):].strip()
    return title or None


def chapter_name(content_path: Path | None, fallback_name: str, config: SummaryConfig) -> str:
    """Pick the display title for a chapter.

    Only the first line of the document is read. A line that is not a
    level-one heading is not an error; the filesystem name is used instead.
    """
    if not config.derive_title_from_heading or content_path is None:
        return fallback_name

    title = heading_title(read_first_line(content_path))
    if title is None:
        logger.debug("No heading on first line of %s, using %r", content_path, fallback_name)
        return fallback_name
    logger.debug("Derived title %r from %s", title, content_path)
    return title
