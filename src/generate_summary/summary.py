"""Render a chapter tree as an mdBook ``SUMMARY.md``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from generate_summary.exceptions import FilesystemAccessError
from generate_summary.schemas import ChapterNode

logger = logging.getLogger(__name__)

SUMMARY_HEADING = "# Summary"


def render_summary(chapters: list[ChapterNode], book_src: Path) -> str:
    """Create SUMMARY.md text with links relative to ``book_src``."""
    lines = [SUMMARY_HEADING, ""]
    lines.extend(_render_items(chapters, book_src))
    return "\n".join(lines) + "\n"


def count_chapters(chapters: Iterable[ChapterNode]) -> int:
    """Count total chapters in the tree."""
    total = 0
    for chapter in chapters:
        total += 1
        total += count_chapters(chapter.children)
    return total


def relative_link(chapter: ChapterNode, book_src: Path) -> str | None:
    """POSIX path of the chapter's content relative to the book source."""
    if chapter.content_path is None:
        return None
    return chapter.content_path.relative_to(book_src).as_posix()


def write_summary(chapters: list[ChapterNode], book_src: Path, path: Path | None = None) -> Path:
    """Write the rendered summary, by default to ``book_src/SUMMARY.md``.

    Raises:
        FilesystemAccessError: If the file cannot be written.
    """
    target = path or book_src / "SUMMARY.md"
    try:
        target.write_text(render_summary(chapters, book_src), encoding="utf-8")
    except OSError as exc:
        raise FilesystemAccessError(target, exc.strerror or str(exc)) from exc
    logger.info("Wrote %s with %d chapters", target, count_chapters(chapters))
    return target


def write_placeholder_summary(book_src: Path) -> Path:
    """Reset ``book_src/SUMMARY.md`` to a bare heading.

    mdBook parses SUMMARY.md before any preprocessor runs. An empty summary
    keeps it from loading stale entries or scaffolding ``chapter_1.md``.

    Raises:
        FilesystemAccessError: If the file cannot be written.
    """
    target = book_src / "SUMMARY.md"
    try:
        target.write_text(SUMMARY_HEADING + "\n", encoding="utf-8")
    except OSError as exc:
        raise FilesystemAccessError(target, exc.strerror or str(exc)) from exc
    logger.debug("Reset %s to a placeholder", target)
    return target


def _render_items(chapters: list[ChapterNode], book_src: Path, indent: int = 0) -> list[str]:
    lines: list[str] = []
    for chapter in chapters:
        link = relative_link(chapter, book_src) or ""
        lines.append("  " * indent + f"- [{_escape_label(chapter.display_name)}]({_escape_link(link)})")
        lines.extend(_render_items(list(chapter.children), book_src, indent + 1))
    return lines


def _escape_label(label: str) -> str:
    return label.replace("\\", "\\\\").replace("[", r"\[").replace("]", r"\]")


def _escape_link(link: str) -> str:
    # Spaces and parentheses would end a CommonMark link destination early.
    return link.replace(" ", "%20").replace("(", "%28").replace(")", "%29")
