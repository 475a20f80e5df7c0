"""Character cursor shared by the markup and stylesheet parsers.

A cursor is a position into an immutable string. Parsers drive it forward
one production at a time; it never moves backwards.
"""

from __future__ import annotations

import unicodedata
from typing import Callable

from crow.errors import OutOfBoundsError, StructuralViolation

__all__ = ["Cursor", "is_markup_whitespace", "is_stylesheet_whitespace"]

CharPredicate = Callable[[str], bool]


def is_markup_whitespace(char: str) -> bool:
    """Tabs and Unicode space separators. Line breaks are not included."""
    return char == "\t" or unicodedata.category(char) == "Zs"


def is_stylesheet_whitespace(char: str) -> bool:
    """Any Unicode whitespace, line breaks included."""
    return char.isspace()


class Cursor:
    """A forward-only scanner over ``text``."""

    def __init__(self, text: str, whitespace: CharPredicate = is_stylesheet_whitespace):
        self.text = text
        self.whitespace = whitespace
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        """Return True once all input is consumed."""
        return self._pos >= len(self.text)

    def peek(self) -> str:
        """Read the current character without consuming it."""
        if self.at_end():
            raise self._out_of_bounds()
        return self.text[self._pos]

    def advance(self) -> str:
        """Return the current character and move past it."""
        if self.at_end():
            raise self._out_of_bounds()
        char = self.text[self._pos]
        self._pos += 1
        return char

    def starts_with(self, literal: str) -> bool:
        """Does the unconsumed input begin with ``literal``?"""
        return self.text.startswith(literal, self._pos)

    def consume_while(self, predicate: CharPredicate) -> str:
        """Consume characters while ``predicate`` holds and return them."""
        start = self._pos
        end = len(self.text)
        while self._pos < end and predicate(self.text[self._pos]):
            self._pos += 1
        return self.text[start:self._pos]

    def consume_whitespace(self) -> str:
        return self.consume_while(self.whitespace)

    def expect(self, char: str) -> str:
        """Consume ``char`` or raise StructuralViolation."""
        if self.at_end():
            raise self.error(f"expected {char!r} but reached end of input")
        found = self.text[self._pos]
        if found != char:
            raise self.error(f"expected {char!r} but found {found!r}")
        self._pos += 1
        return found

    # --- error reporting --------------------------------------------------

    def location(self) -> tuple[int, int]:
        """Return the 1-based (line, column) of the current position."""
        consumed = self.text[:self._pos]
        line = consumed.count("\n") + 1
        column = self._pos - (consumed.rfind("\n") + 1) + 1
        return line, column

    def error(self, message: str) -> StructuralViolation:
        """Build a StructuralViolation located at the current position."""
        line, column = self.location()
        return StructuralViolation(message, position=self._pos, line=line, column=column)

    def _out_of_bounds(self) -> OutOfBoundsError:
        line, column = self.location()
        return OutOfBoundsError(
            f"read past end of input at offset {self._pos}",
            position=self._pos,
            line=line,
            column=column,
        )
