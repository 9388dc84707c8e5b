"""Custom exception classes for the scoring pipeline."""

from __future__ import annotations


class RegScoreError(Exception):
    """Base exception for all pipeline errors."""


class ConfigError(RegScoreError):
    """Raised when configuration is invalid or missing."""


class DocumentError(RegScoreError):
    """Base for errors tied to a single document field."""

    def __init__(self, message: str, *, reg_id: str | None = None, field: str | None = None) -> None:
        self.reg_id = reg_id
        self.field = field
        context = []
        if reg_id is not None:
            context.append(f"reg_id={reg_id}")
        if field is not None:
            context.append(f"field={field}")
        if context:
            message = f"{message} ({', '.join(context)})"
        super().__init__(message)


class DataFormatError(DocumentError):
    """Raised when a required field is missing or malformed."""


class DateParseError(DocumentError):
    """Raised when a date cannot be parsed after cleaning."""


class DivisionUndefined(DocumentError):
    """Raised when normalising against a zero word count."""


class LexiconLoadError(RegScoreError):
    """Raised when a word list is missing or malformed."""
