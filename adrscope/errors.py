"""
Exceptions raised by ADRScope.

Per-record decode failures derive from MetadataError so the batch builder can
collect them next to the records that did decode. Filesystem and discovery
failures have their own types and are raised to the caller.
"""

from __future__ import annotations

from typing import Any


class AdrScopeError(Exception):
    """Base exception for all ADRScope errors."""
    pass


class MetadataError(AdrScopeError, ValueError):
    """Exception raised when a record's header or metadata is invalid."""
    pass


class MalformedHeader(MetadataError):
    """The text has no opening '---' delimiter or no closing one."""
    pass


class SchemaError(MetadataError):
    """The metadata block is not valid YAML or has values of the wrong shape."""
    pass


class MissingField(MetadataError):
    """A required metadata field is absent or empty."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"missing required field '{field}'")


class DateParseError(MetadataError):
    """A date field holds a non-empty value that is not YYYY-MM-DD."""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"invalid date format in '{field}': {value!r} (expected YYYY-MM-DD)")


class SourceReadError(AdrScopeError):
    """A source file could not be read."""

    def __init__(self, locator: Any, reason: str):
        self.locator = locator
        super().__init__(f"failed to read {locator}: {reason}")


class OutputWriteError(AdrScopeError):
    """An output file could not be written."""

    def __init__(self, path: Any, reason: str):
        self.path = path
        super().__init__(f"failed to write output to {path}: {reason}")


class NoRecordsFound(AdrScopeError):
    """No source files matched the discovery pattern."""

    def __init__(self, path: Any):
        self.path = path
        super().__init__(f"no ADR files found in {path}")
