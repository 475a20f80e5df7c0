"""Error hierarchy for the crow parsers and loaders."""

from __future__ import annotations


class CrowError(Exception):
    """Base error for everything raised by crow."""


class ParseError(CrowError):
    """Raised when markup or stylesheet source cannot be parsed."""

    def __init__(
        self,
        message: str,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ):
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"


class StructuralViolation(ParseError):
    """A required literal or terminator was absent or mismatched."""


class OutOfBoundsError(ParseError, IndexError):
    """The cursor was read after the end of its input."""


class LoadError(CrowError):
    """A document could not be read from a file or URL."""

    def __init__(
        self, message: str, *, location: str = "", cause: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.location = location
        self.cause = cause


class ConfigError(CrowError):
    """A configuration setting has an unusable value."""
