"""Core exceptions for blogcorpus."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class BlogCorpusError(Exception):
    """Base exception for all blogcorpus errors."""


class MalformedDocumentError(BlogCorpusError):
    """Raised when a document cannot be turned into a Post.

    This is the single error kind of the loader: the metadata block is
    missing, unparseable, or does not satisfy the post schema.
    """

    def __init__(self, reason: str, *, source: Path | str | None = None) -> None:
        self.reason = reason
        self.source = source
        message = f"{source}: {reason}" if source is not None else reason
        super().__init__(message)


class MissingFrontmatterError(MalformedDocumentError):
    """Raised when a document has no delimited front matter block."""


class FrontmatterParseError(MalformedDocumentError):
    """Raised when the front matter block is not a valid YAML mapping."""


class InvalidMetadataError(MalformedDocumentError):
    """Raised when front matter fields fail post validation."""

    def __init__(
        self,
        reason: str,
        *,
        source: Path | str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        self.errors = errors or []
        super().__init__(reason, source=source)

    @property
    def fields(self) -> list[str]:
        """Names of the offending front matter fields."""
        names = []
        for error in self.errors:
            loc = error.get("loc") or ()
            if loc and str(loc[0]) not in names:
                names.append(str(loc[0]))
        return names


class InvalidDateError(BlogCorpusError, ValueError):
    """Raised when a value cannot be read as a calendar date."""

    def __init__(self, value: Any, original_exception: Exception | None = None) -> None:
        self.value = value
        self.original_exception = original_exception
        message = f"Could not read a valid date from '{value}'"
        if original_exception:
            message += f". Original error: {original_exception}"
        super().__init__(message)
