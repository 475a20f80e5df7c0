"""Hand-written recursive-descent parser for a tiny subset of CSS.

Syntax example:
    h1, h2, h3 { margin: auto; color: #cc0000; }
    div.note { margin-bottom: 20px; padding: 10px; }
    #answer { display: none; }

Only simple selectors (tag, id, classes, ``*``) are understood; there are no
combinators, at-rules or comments. Lengths must be in ``px``.
"""

from __future__ import annotations

import logging

from crow.cursor import Cursor, is_stylesheet_whitespace
from crow.stylesheet.model import (
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    Unit,
    Value,
)

__all__ = ["StylesheetParser", "parse_stylesheet", "valid_identifier_char"]

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def valid_identifier_char(char: str) -> bool:
    # ASCII only; non-ASCII identifiers are not supported.
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or ("0" <= char <= "9") or char in "-_"


def _is_number_char(char: str) -> bool:
    return "0" <= char <= "9" or char == "."


class StylesheetParser:
    """Parse stylesheet source into Rules. One instance per input string."""

    def __init__(self, source: str):
        self.cursor = Cursor(source, whitespace=is_stylesheet_whitespace)

    def parse_rules(self) -> list[Rule]:
        """Parse rule sets separated by optional whitespace."""
        cursor = self.cursor
        rules: list[Rule] = []
        while True:
            cursor.consume_whitespace()
            if cursor.at_end():
                break
            rules.append(self.parse_rule())
        return rules

    def parse_rule(self) -> Rule:
        """Parse ``<selectors> { <declarations> }``."""
        selectors = self.parse_selectors()
        return Rule(selectors=tuple(selectors), declarations=tuple(self.parse_declarations()))

    def parse_selectors(self) -> list[Selector]:
        """Parse a comma-separated selector list, stopping before ``{``."""
        cursor = self.cursor
        selectors: list[Selector] = []
        while True:
            selectors.append(self.parse_simple_selector())
            cursor.consume_whitespace()
            if cursor.at_end():
                raise cursor.error("expected ',' or '{' but reached end of input")
            char = cursor.peek()
            if char == ",":
                cursor.advance()
                cursor.consume_whitespace()
            elif char == "{":
                break
            else:
                raise cursor.error(f"unexpected character {char!r} in selector list")
        return selectors

    def parse_simple_selector(self) -> SimpleSelector:
        """Parse one simple selector, e.g. ``type#id.class1.class2``."""
        cursor = self.cursor
        tag_name: str | None = None
        selector_id: str | None = None
        classes: list[str] = []
        while not cursor.at_end():
            char = cursor.peek()
            if char == "#":
                cursor.advance()
                selector_id = self._required_identifier("an id after '#'")
            elif char == ".":
                cursor.advance()
                classes.append(self._required_identifier("a class name after '.'"))
            elif char == "*":
                cursor.advance()
            elif valid_identifier_char(char):
                tag_name = self.parse_identifier()
            else:
                break
        return SimpleSelector(tag_name=tag_name, id=selector_id, classes=tuple(classes))

    def parse_declarations(self) -> list[Declaration]:
        """Parse a list of declarations enclosed in ``{ ... }``."""
        cursor = self.cursor
        cursor.expect("{")
        declarations: list[Declaration] = []
        while True:
            cursor.consume_whitespace()
            if cursor.at_end():
                raise cursor.error("unterminated declaration block")
            if cursor.peek() == "}":
                cursor.advance()
                break
            declarations.append(self.parse_declaration())
        return declarations

    def parse_declaration(self) -> Declaration:
        """Parse one ``<property>: <value>;`` declaration."""
        cursor = self.cursor
        name = self._required_identifier("a property name")
        cursor.consume_whitespace()
        cursor.expect(":")
        cursor.consume_whitespace()
        value = self.parse_value()
        cursor.consume_whitespace()
        cursor.expect(";")
        return Declaration(name=name, value=value)

    # --- values -----------------------------------------------------------

    def parse_value(self) -> Value:
        cursor = self.cursor
        if cursor.at_end():
            raise cursor.error("expected a value but reached end of input")
        char = cursor.peek()
        if "0" <= char <= "9":
            return self.parse_length()
        if char == "#":
            return self.parse_color()
        return Keyword(self.parse_identifier())

    def parse_length(self) -> Length:
        return Length(self.parse_float(), self.parse_unit())

    def parse_float(self) -> float:
        text = self.cursor.consume_while(_is_number_char)
        try:
            return float(text)
        except ValueError:
            logger.debug("Unparseable number %r, using 0.0", text)
            return 0.0

    def parse_unit(self) -> Unit:
        unit = self.parse_identifier()
        if unit.lower() == "px":
            return Unit.PX
        raise self.cursor.error(f"unrecognized unit {unit!r}")

    def parse_color(self) -> Color:
        self.cursor.expect("#")
        return Color(self.parse_hex_pair(), self.parse_hex_pair(), self.parse_hex_pair(), 255)

    def parse_hex_pair(self) -> int:
        """Parse two hexadecimal digits."""
        cursor = self.cursor
        digits = ""
        for _ in range(2):
            if cursor.at_end() or cursor.peek() not in _HEX_DIGITS:
                raise cursor.error("expected two hexadecimal digits in color")
            digits += cursor.advance()
        return int(digits, 16)

    def parse_identifier(self) -> str:
        """Parse a property name or keyword."""
        return self.cursor.consume_while(valid_identifier_char)

    def _required_identifier(self, wanted: str) -> str:
        identifier = self.parse_identifier()
        if not identifier:
            cursor = self.cursor
            found = "end of input" if cursor.at_end() else repr(cursor.peek())
            raise cursor.error(f"expected {wanted} but found {found}")
        return identifier


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse a stylesheet string into a Stylesheet.

    Rules keep their source order; each rule's selectors are ordered most
    specific first.
    """
    rules = StylesheetParser(source).parse_rules()
    logger.debug("Parsed %d rule(s) from %d characters", len(rules), len(source))
    return Stylesheet(rules=tuple(rules))
