"""Chapter tree models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class ChapterNode(BaseModel):
    """One numbered entry in the generated table of contents."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    content_path: Path | None = None
    children: tuple["ChapterNode", ...] = ()
    number: tuple[PositiveInt, ...] = Field(..., min_length=1)

    @property
    def depth(self) -> int:
        return len(self.number)

    @property
    def section_label(self) -> str:
        """Dotted section number as shown in a rendered book, e.g. ``2.1.``."""
        return "".join(f"{part}." for part in self.number)

    @property
    def is_draft(self) -> bool:
        """True for a directory chapter without a content document."""
        return self.content_path is None
