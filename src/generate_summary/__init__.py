"""generate_summary: build an mdBook table of contents from the source tree."""

from generate_summary.builder import build_chapters
from generate_summary.config import SummaryConfig
from generate_summary.entries import list_chapter_entries
from generate_summary.exceptions import (
    ConfigurationError,
    FilesystemAccessError,
    GenerateSummaryError,
    MissingIndexDocumentError,
    PreprocessorInputError,
)
from generate_summary.index import resolve_index_document
from generate_summary.naming import chapter_name
from generate_summary.preprocessor import run_preprocessor, supports_renderer
from generate_summary.schemas import ChapterNode
from generate_summary.summary import render_summary, write_summary

__all__ = [
    "ChapterNode",
    "ConfigurationError",
    "FilesystemAccessError",
    "GenerateSummaryError",
    "MissingIndexDocumentError",
    "PreprocessorInputError",
    "SummaryConfig",
    "build_chapters",
    "chapter_name",
    "list_chapter_entries",
    "render_summary",
    "resolve_index_document",
    "run_preprocessor",
    "supports_renderer",
    "write_summary",
]
