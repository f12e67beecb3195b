"""Build the numbered chapter tree from a book's source directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from generate_summary.config import SummaryConfig
from generate_summary.entries import list_chapter_entries
from generate_summary.exceptions import FilesystemAccessError
from generate_summary.index import resolve_index_document
from generate_summary.naming import chapter_name
from generate_summary.schemas import ChapterNode

logger = logging.getLogger(__name__)


def build_chapters(
    directory: Path,
    config: SummaryConfig,
    prefix: tuple[int, ...] | None = None,
) -> list[ChapterNode]:
    """Turn ``directory`` into an ordered, numbered list of chapters.

    Entries are sorted by file name, which is the only ordering control an
    author has. Files named after the index document are consumed by their
    directory and never listed as siblings; at the book root the generated
    summary file is skipped too. Numbers are assigned after all exclusions,
    so siblings are always numbered ``1..N``.

    Args:
        directory: Directory to scan.
        config: Active preprocessor configuration.
        prefix: Section number of the chapter that owns ``directory``. None
            marks the book root.

    Returns:
        The chapters found directly in ``directory``, children populated.

    Raises:
        MissingIndexDocumentError: If a directory chapter lacks its index
            document under the strict policy.
        FilesystemAccessError: If any listing, read or stub write fails.
    """
    chapters = _build_level(directory, config, prefix or (), frozenset())
    if prefix is None:
        logger.info("Built %d top-level chapters from %s", len(chapters), directory)
    return chapters


def _build_level(
    directory: Path,
    config: SummaryConfig,
    prefix: tuple[int, ...],
    ancestors: frozenset[Path],
) -> list[ChapterNode]:
    ancestors = ancestors | {_real_path(directory)}
    entries = [
        entry
        for entry in sorted(list_chapter_entries(directory, config.document_extension), key=_sort_key)
        if _is_chapter(entry, config, at_root=not prefix, ancestors=ancestors)
    ]

    chapters: list[ChapterNode] = []
    for position, entry in enumerate(entries, start=1):
        number = prefix + (position,)
        if entry.is_dir():
            content_path = resolve_index_document(entry, config)
            chapters.append(
                ChapterNode(
                    display_name=chapter_name(content_path, entry.stem, config),
                    content_path=content_path,
                    children=tuple(_build_level(entry, config, number, ancestors)),
                    number=number,
                )
            )
        else:
            chapters.append(
                ChapterNode(
                    display_name=chapter_name(entry, entry.stem, config),
                    content_path=entry,
                    number=number,
                )
            )
    return chapters


def _is_chapter(entry: Path, config: SummaryConfig, *, at_root: bool, ancestors: frozenset[Path]) -> bool:
    if at_root and entry.stem == config.summary_file_name:
        return False
    if not entry.is_dir():
        return entry.stem != config.index_base_name
    if _real_path(entry) in ancestors:
        logger.warning("Skipping %s: it links back to one of its parent directories", entry)
        return False
    return True


def _real_path(path: Path) -> Path:
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise FilesystemAccessError(path, str(exc)) from exc


def _sort_key(path: Path) -> bytes:
    # Raw filesystem bytes, so undecodable names keep their on-disk order.
    return os.fsencode(path.name)
