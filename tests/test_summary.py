"""Tests for SUMMARY.md rendering."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from generate_summary.builder import build_chapters
from generate_summary.config import SummaryConfig
from generate_summary.exceptions import FilesystemAccessError
from generate_summary.schemas import ChapterNode
from generate_summary.summary import count_chapters, render_summary, write_placeholder_summary, write_summary


class TestRenderSummary:
    """Tests for render_summary function."""

    def test_sample_book(self, book_src: Path) -> None:
        """Nested chapters are indented two spaces per level."""
        chapters = build_chapters(book_src, SummaryConfig(derive_title_from_heading=True))

        assert render_summary(chapters, book_src) == (
            "# Summary\n"
            "\n"
            "- [The Guide](guide/README.md)\n"
            "  - [Setting Up](guide/setup.md)\n"
            "- [Introduction](intro.md)\n"
        )

    def test_draft_chapter_has_empty_link(self, tmp_path: Path) -> None:
        chapters = [ChapterNode(display_name="Drafts", number=(1,))]

        assert "- [Drafts]()" in render_summary(chapters, tmp_path)

    def test_escapes_brackets_and_spaces(self, tmp_path: Path) -> None:
        chapters = [
            ChapterNode(display_name="[WIP] Notes", content_path=tmp_path / "my notes.md", number=(1,)),
        ]

        assert "- [\\[WIP\\] Notes](my%20notes.md)" in render_summary(chapters, tmp_path)

    def test_escapes_trailing_backslash(self, tmp_path: Path) -> None:
        """A backslash in a title cannot escape the closing bracket."""
        chapters = [ChapterNode(display_name="Ends with \\", content_path=tmp_path / "a.md", number=(1,))]

        assert "- [Ends with \\\\](a.md)" in render_summary(chapters, tmp_path)

    def test_empty_book(self, tmp_path: Path) -> None:
        assert render_summary([], tmp_path) == "# Summary\n\n"


class TestWriteSummary:
    """Tests for write_summary function."""

    def test_writes_default_location(self, book_src: Path) -> None:
        chapters = build_chapters(book_src, SummaryConfig())

        target = write_summary(chapters, book_src)

        assert target == book_src / "SUMMARY.md"
        assert target.read_text(encoding="utf-8").startswith("# Summary\n")

    def test_written_summary_not_reingested(self, book_src: Path) -> None:
        """A generated SUMMARY.md does not show up on the next build."""
        config = SummaryConfig()
        first = build_chapters(book_src, config)
        write_summary(first, book_src)

        assert build_chapters(book_src, config) == first

    def test_write_failure_raises(self, tmp_path: Path) -> None:
        with patch.object(Path, "write_text", side_effect=OSError(28, "No space left on device")):
            with pytest.raises(FilesystemAccessError, match="No space left"):
                write_summary([], tmp_path, tmp_path / "out.md")


def test_count_chapters(book_src: Path) -> None:
    assert count_chapters(build_chapters(book_src, SummaryConfig())) == 3


class TestWritePlaceholderSummary:
    """Tests for write_placeholder_summary function."""

    def test_replaces_existing_summary(self, tmp_path: Path) -> None:
        """Stale entries are wiped, only the heading remains."""
        (tmp_path / "SUMMARY.md").write_text("# Summary\n\n- [Chapter 1](chapter_1.md)\n")

        target = write_placeholder_summary(tmp_path)

        assert target == tmp_path / "SUMMARY.md"
        assert target.read_text(encoding="utf-8") == "# Summary\n"

    def test_write_failure_raises(self, tmp_path: Path) -> None:
        with patch.object(Path, "write_text", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(FilesystemAccessError) as excinfo:
                write_placeholder_summary(tmp_path)

        assert excinfo.value.path == tmp_path / "SUMMARY.md"
