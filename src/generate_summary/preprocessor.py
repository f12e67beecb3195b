"""mdBook preprocessor protocol: JSON in on stdin, book JSON out on stdout."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TextIO

from generate_summary.builder import build_chapters
from generate_summary.config import DEFAULT_BOOK_SRC, PREPROCESSOR_NAME, UNSUPPORTED_RENDERER, SummaryConfig
from generate_summary.exceptions import FilesystemAccessError, PreprocessorInputError
from generate_summary.schemas import ChapterNode
from generate_summary.summary import relative_link, write_placeholder_summary

logger = logging.getLogger(__name__)


def supports_renderer(renderer: str) -> bool:
    """Every renderer is supported except the placeholder ``not-supported``."""
    return renderer != UNSUPPORTED_RENDERER


def load_preprocessor_input(stream: TextIO) -> tuple[dict[str, Any], dict[str, Any]]:
    """Parse the ``[context, book]`` pair mdBook writes to the preprocessor.

    Raises:
        PreprocessorInputError: If the payload is not valid JSON or not a pair
            of objects.
    """
    try:
        payload = json.load(stream)
    except json.JSONDecodeError as exc:
        raise PreprocessorInputError(f"Preprocessor input is not valid JSON: {exc}") from exc

    if (
        not isinstance(payload, list)
        or len(payload) != 2
        or not all(isinstance(item, dict) for item in payload)
    ):
        raise PreprocessorInputError("Preprocessor input must be a [context, book] JSON array")
    context, book = payload
    return context, book


def book_source_dir(context: dict[str, Any]) -> Path:
    """Absolute book source directory, ``<root>/<book.src>``."""
    config = context.get("config") or {}
    src = (config.get("book") or {}).get("src", DEFAULT_BOOK_SRC)
    return Path(context.get("root", ".")) / src


def preprocessor_config(context: dict[str, Any]) -> SummaryConfig:
    """Read this preprocessor's table out of the book configuration."""
    tables = (context.get("config") or {}).get("preprocessor") or {}
    return SummaryConfig.from_table(tables.get(PREPROCESSOR_NAME))


def run_preprocessor(context: dict[str, Any], book: dict[str, Any]) -> dict[str, Any]:
    """Replace the book's sections with ones generated from the source tree.

    The incoming ``book`` is ignored apart from being replaced; mdBook built
    it from a placeholder summary.
    """
    book_src = book_source_dir(context)
    config = preprocessor_config(context)
    chapters = build_chapters(book_src, config)
    if config.write_placeholder_summary:
        write_placeholder_summary(book_src)
    logger.debug("Replacing %d incoming sections", len(book.get("sections") or []))
    return {
        "sections": [chapter_item(chapter, book_src, []) for chapter in chapters],
        "__non_exhaustive": None,
    }


def chapter_item(chapter: ChapterNode, book_src: Path, parent_names: list[str]) -> dict[str, Any]:
    """Serialize one chapter into mdBook's ``BookItem::Chapter`` shape."""
    link = relative_link(chapter, book_src)
    child_parents = parent_names + [chapter.display_name]
    return {
        "Chapter": {
            "name": chapter.display_name,
            "content": _read_content(chapter.content_path),
            "number": list(chapter.number),
            "sub_items": [chapter_item(child, book_src, child_parents) for child in chapter.children],
            "path": link,
            "source_path": link,
            "parent_names": list(parent_names),
        }
    }


def _read_content(path: Path | None) -> str:
    if path is None:
        return ""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FilesystemAccessError(path, getattr(exc, "strerror", None) or str(exc)) from exc
