"""Locate the index document that backs a directory chapter."""

from __future__ import annotations

import logging
from pathlib import Path

from generate_summary.config import SummaryConfig
from generate_summary.exceptions import FilesystemAccessError, MissingIndexDocumentError

logger = logging.getLogger(__name__)


def index_path_for(directory: Path, config: SummaryConfig) -> Path:
    """Expected location of ``directory``'s index document."""
    return directory / config.index_file_name


def create_stub_document(path: Path, title: str) -> Path:
    """Write a one-line ``# title`` document at ``path``.

    Raises:
        FilesystemAccessError: If the file cannot be written.
    """
    try:
        path.write_text(f"# {title}\n", encoding="utf-8")
    except OSError as exc:
        raise FilesystemAccessError(path, exc.strerror or str(exc)) from exc
    logger.info("Created stub index document %s", path)
    return path


def resolve_index_document(directory: Path, config: SummaryConfig) -> Path | None:
    """Resolve the content document of a directory chapter.

    An existing index document is returned as is; its content is not
    inspected. When it is missing the configured policy applies, in order:
    ``create_missing_index`` writes a stub and returns it,
    ``ignore_missing_index`` returns None, otherwise the build fails.

    Args:
        directory: The directory being turned into a chapter.
        config: Active preprocessor configuration.

    Returns:
        Path to the index document, or None for a content-less chapter.

    Raises:
        MissingIndexDocumentError: If the document is missing and no tolerant
            policy is configured.
        FilesystemAccessError: If a stub cannot be written.
    """
    path = index_path_for(directory, config)
    if path.is_file():
        logger.debug("Resolved index document %s", path)
        return path

    if config.create_missing_index:
        return create_stub_document(path, directory.name)
    if config.ignore_missing_index:
        logger.debug("No index document in %s, emitting draft chapter", directory)
        return None
    raise MissingIndexDocumentError(path)
