"""Custom exceptions for generate_summary."""

from __future__ import annotations

from pathlib import Path


class GenerateSummaryError(Exception):
    """Base exception for generate_summary operations."""


class MissingIndexDocumentError(GenerateSummaryError):
    """A directory chapter has no index document and no tolerant policy is set."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(
            f"Missing chapter index document: {path} "
            "(add the file, or enable create_missing_index / ignore_missing_index)"
        )


class FilesystemAccessError(GenerateSummaryError):
    """A directory could not be listed or a document could not be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot access {path}: {reason}")


class ConfigurationError(GenerateSummaryError):
    """Preprocessor options have the wrong shape."""


class PreprocessorInputError(GenerateSummaryError):
    """The host handed over input that is not a [context, book] JSON pair."""
