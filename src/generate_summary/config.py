"""Configuration for generate_summary."""

from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    ValidationError,
    field_validator,
)

from generate_summary.exceptions import ConfigurationError

PREPROCESSOR_NAME = "generate-summary"
UNSUPPORTED_RENDERER = "not-supported"

DEFAULT_INDEX_BASE_NAME = "README"
DEFAULT_DOCUMENT_EXTENSION = "md"
DEFAULT_SUMMARY_FILE_NAME = "SUMMARY"
DEFAULT_BOOK_SRC = "src"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

GENERATE_SUMMARY_LOG_LEVEL = os.getenv("GENERATE_SUMMARY_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


class SummaryConfig(BaseModel):
    """Options read from the ``[preprocessor.generate-summary]`` table.

    The legacy option names of earlier releases are still accepted.

    Attributes:
        derive_title_from_heading: Use the ``# Title`` on a document's first
            line as the chapter title.
        index_base_name: Stem of the document that backs a directory chapter.
        create_missing_index: Write a stub index document when one is missing.
        ignore_missing_index: Emit a content-less chapter when the index
            document is missing (only consulted if ``create_missing_index``
            is off).
        document_extension: Extension of chapter documents, without the dot.
        write_placeholder_summary: In preprocessor mode, reset ``SUMMARY.md``
            to a bare ``# Summary`` heading after a successful build, so mdBook
            never loads stale entries or creates its default chapter files.
        summary_file_name: Stem of the generated table of contents, never
            picked up as a chapter at the book root.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    derive_title_from_heading: StrictBool = Field(
        default=False,
        validation_alias=AliasChoices("derive_title_from_heading", "get_chapter_name_from_file"),
    )
    index_base_name: str = Field(
        default=DEFAULT_INDEX_BASE_NAME,
        min_length=1,
        validation_alias=AliasChoices("index_base_name", "chapter_file_name"),
    )
    create_missing_index: StrictBool = Field(
        default=False,
        validation_alias=AliasChoices("create_missing_index", "create_missing_chapter_files"),
    )
    ignore_missing_index: StrictBool = False
    write_placeholder_summary: StrictBool = False
    document_extension: str = DEFAULT_DOCUMENT_EXTENSION
    summary_file_name: str = DEFAULT_SUMMARY_FILE_NAME

    @field_validator("document_extension")
    @classmethod
    def _strip_leading_dot(cls, value: str) -> str:
        value = value.lstrip(".")
        if not value:
            raise ValueError("document_extension must not be empty")
        return value

    @property
    def index_file_name(self) -> str:
        """File name of a directory's index document, e.g. ``README.md``."""
        return f"{self.index_base_name}.{self.document_extension}"

    @classmethod
    def from_table(cls, table: Mapping[str, Any] | None) -> "SummaryConfig":
        """Build a config from a preprocessor table, rejecting mistyped values."""
        try:
            return cls.model_validate(dict(table or {}))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid {PREPROCESSOR_NAME} configuration: {exc}") from exc
