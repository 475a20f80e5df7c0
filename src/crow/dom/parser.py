"""Recursive-descent parser for a tiny subset of HTML.

Handles opening and closing tags, double- or single-quoted attributes, and
text nodes. Comments, doctypes, processing instructions, self-closing tags,
character entities and non-well-formed markup are not supported: anything
outside the grammar raises StructuralViolation.

Grammar:
    nodes     = ( ws? node )*            stops at end of input or "</"
    node      = element | text
    element   = '<' name attribute* '>' nodes '</' name '>'
    attribute = ws? name '=' quote chars quote
    text      = [^<]*
"""

from __future__ import annotations

import logging

from crow.cursor import Cursor, is_markup_whitespace
from crow.dom.model import AttrMap, Node
from crow.errors import StructuralViolation

__all__ = ["MarkupParser", "parse_document"]

logger = logging.getLogger(__name__)

_QUOTES = ('"', "'")


class MarkupParser:
    """Parse markup source into Nodes. One instance per input string."""

    def __init__(self, source: str):
        self.cursor = Cursor(source, whitespace=is_markup_whitespace)

    def parse_nodes(self) -> list[Node]:
        """Parse a sequence of sibling nodes."""
        cursor = self.cursor
        nodes: list[Node] = []
        while True:
            cursor.consume_whitespace()
            if cursor.at_end() or cursor.starts_with("</"):
                break
            nodes.append(self.parse_node())
        return nodes

    def parse_node(self) -> Node:
        if self.cursor.peek() == "<":
            return self.parse_element()
        return self.parse_text()

    def parse_text(self) -> Node:
        return Node.text(self.cursor.consume_while(lambda c: c != "<"))

    def parse_element(self) -> Node:
        """Parse an element: open tag, contents, and closing tag."""
        cursor = self.cursor
        cursor.expect("<")
        tag_name = self.parse_tag_name()
        attrs = self.parse_attributes()
        cursor.expect(">")

        children = self.parse_nodes()

        cursor.expect("<")
        cursor.expect("/")
        closing = cursor.consume_while(str.isalnum)
        if closing != tag_name:
            raise cursor.error(
                f"closing tag </{closing}> does not match opening tag <{tag_name}>"
            )
        cursor.expect(">")
        return Node.element(tag_name, attrs, children)

    def parse_tag_name(self) -> str:
        """Parse a tag or attribute name."""
        name = self.cursor.consume_while(str.isalnum)
        if not name:
            raise self._unexpected("a tag or attribute name")
        return name

    def parse_attributes(self) -> AttrMap:
        """Parse name="value" pairs up to (not including) the closing '>'."""
        cursor = self.cursor
        attributes: AttrMap = {}
        while True:
            cursor.consume_whitespace()
            if cursor.at_end():
                raise cursor.error("unterminated start tag")
            if cursor.peek() == ">":
                break
            name, value = self.parse_attribute()
            attributes[name] = value
        return attributes

    def parse_attribute(self) -> tuple[str, str]:
        name = self.parse_tag_name()
        self.cursor.expect("=")
        return name, self.parse_attribute_value()

    def parse_attribute_value(self) -> str:
        cursor = self.cursor
        if cursor.at_end() or cursor.peek() not in _QUOTES:
            raise self._unexpected("a quoted attribute value")
        quote = cursor.advance()
        value = cursor.consume_while(lambda c: c != quote)
        if cursor.at_end():
            raise cursor.error("unterminated attribute value")
        cursor.advance()
        return value

    def _unexpected(self, wanted: str) -> StructuralViolation:
        if self.cursor.at_end():
            return self.cursor.error(f"expected {wanted} but reached end of input")
        return self.cursor.error(f"expected {wanted} but found {self.cursor.peek()!r}")


def parse_document(source: str) -> Node:
    """Parse a markup document and return its root node.

    A document with exactly one top-level node returns that node; anything
    else is wrapped in a synthetic ``html`` element.
    """
    parser = MarkupParser(source)
    nodes = parser.parse_nodes()
    if not parser.cursor.at_end():
        raise parser.cursor.error("unexpected closing tag at top level")
    logger.debug("Parsed %d top-level node(s) from %d characters", len(nodes), len(source))
    if len(nodes) == 1:
        return nodes[0]
    return Node.element("html", {}, nodes)
