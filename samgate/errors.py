"""Errors raised while scanning SAM text.

Every error aborts the scan. The driver returns the error alongside the
collections that were complete before the failing line.
"""

from __future__ import annotations

from samgate.records.models import RecordKind


class SamError(Exception):
    """Base class for all scan errors."""

    def __init__(
        self,
        record_kind: RecordKind | None,
        message: str,
        line_number: int | None = None,
    ) -> None:
        super().__init__(message)
        self.record_kind = record_kind
        self.message = message
        self.line_number = line_number

    def at_line(self, line_number: int) -> "SamError":
        """Attach the 1-based line number of the offending line."""
        self.line_number = line_number
        return self

    def __str__(self) -> str:
        parts = ["sam"]
        if self.line_number is not None:
            parts.append(f"line {self.line_number}")
        if self.record_kind is not None:
            parts.append(self.record_kind.value)
        parts.append(self.message)
        return ": ".join(parts)


class GrammarViolation(SamError):
    """A field does not match its pattern or lies outside its numeric range."""


class DuplicateIdentifier(SamError):
    """An identifier that must be unique within the file was seen twice."""

    def __init__(
        self,
        record_kind: RecordKind,
        identifier: str,
        line_number: int | None = None,
    ) -> None:
        super().__init__(
            record_kind,
            f"identifier '{identifier}' is not unique",
            line_number,
        )
        self.identifier = identifier


class MalformedLine(SamError):
    """A line has too few fields to be decoded."""


class SourceUnavailable(SamError):
    """The line source could not be opened or read."""

    def __init__(self, cause: OSError | UnicodeDecodeError, line_number: int | None = None) -> None:
        super().__init__(None, f"cannot read input: {cause}", line_number)
        self.cause = cause
