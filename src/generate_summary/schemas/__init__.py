"""Shared schemas for generate_summary."""

from generate_summary.schemas.chapter import ChapterNode

__all__ = ["ChapterNode"]
