"""Text renderings of document trees and stylesheets.

``format_tree`` is a debug dump. ``to_markup`` and ``format_stylesheet``
produce source that the parsers accept again.
"""

from __future__ import annotations

from decimal import Decimal

from crow.dom.model import ElementData, Node, Text
from crow.stylesheet.model import (
    Color,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    Value,
)

__all__ = [
    "format_rule",
    "format_selector",
    "format_stylesheet",
    "format_tree",
    "format_value",
    "to_markup",
]


# ---------------------------------------------------------------------------
# Document tree
# ---------------------------------------------------------------------------


def _quote(value: str) -> str:
    if '"' in value and "'" in value:
        raise ValueError(f"Attribute value cannot contain both quote characters: {value!r}")
    if '"' in value:
        return f"'{value}'"
    return f'"{value}"'


def _open_tag(element: ElementData) -> str:
    attrs = "".join(f" {name}={_quote(value)}" for name, value in element.attributes.items())
    return f"<{element.tag_name}{attrs}>"


def format_tree(node: Node, indent: int = 0) -> str:
    """Indented dump of ``node`` and its descendants, one node per line."""
    lines: list[str] = []
    _dump(node, indent, lines)
    return "\n".join(lines)


def _dump(node: Node, indent: int, lines: list[str]) -> None:
    kind = node.kind
    if isinstance(kind, Text):
        lines.append(" " * indent + repr(kind.data))
    elif isinstance(kind, ElementData):
        lines.append(" " * indent + _open_tag(kind))
        for child in node.children:
            _dump(child, indent + 2, lines)
    else:
        raise TypeError(f"Unknown node kind: {type(kind).__name__}")


def to_markup(node: Node) -> str:
    """Serialize ``node`` back to markup.

    Raises ValueError for an attribute value holding both quote characters,
    which the markup grammar cannot express.
    """
    kind = node.kind
    if isinstance(kind, Text):
        return kind.data
    if isinstance(kind, ElementData):
        inner = "".join(to_markup(child) for child in node.children)
        return f"{_open_tag(kind)}{inner}</{kind.tag_name}>"
    raise TypeError(f"Unknown node kind: {type(kind).__name__}")


# ---------------------------------------------------------------------------
# Stylesheet
# ---------------------------------------------------------------------------


def format_selector(selector: Selector) -> str:
    if isinstance(selector, SimpleSelector):
        text = selector.tag_name or ""
        if selector.id is not None:
            text += f"#{selector.id}"
        text += "".join(f".{name}" for name in selector.classes)
        return text or "*"
    raise TypeError(f"Unknown selector type: {type(selector).__name__}")


def _format_number(number: float) -> str:
    # Plain decimal notation; the stylesheet grammar has no exponents.
    text = format(Decimal(repr(float(number))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_value(value: Value) -> str:
    if isinstance(value, Keyword):
        return value.name
    if isinstance(value, Length):
        return f"{_format_number(value.value)}{value.unit.value}"
    if isinstance(value, Color):
        return f"#{value.r:02x}{value.g:02x}{value.b:02x}"
    raise TypeError(f"Unknown value type: {type(value).__name__}")


def format_rule(rule: Rule) -> str:
    lines = [", ".join(format_selector(s) for s in rule.selectors) + " {"]
    for decl in rule.declarations:
        lines.append(f"  {decl.name}: {format_value(decl.value)};")
    lines.append("}")
    return "\n".join(lines)


def format_stylesheet(stylesheet: Stylesheet) -> str:
    return "\n\n".join(format_rule(rule) for rule in stylesheet.rules)
