"""Crow: a minimal markup and stylesheet front end."""

__version__ = "0.1.0"

from crow.errors import (  # noqa: E402
    ConfigError,
    CrowError,
    LoadError,
    OutOfBoundsError,
    ParseError,
    StructuralViolation,
)
from crow.dom import ElementData, Node, Text, parse_document  # noqa: E402
from crow.stylesheet import (  # noqa: E402
    Color,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    Unit,
    parse_stylesheet,
)

__all__ = [
    "__version__",
    # entry points
    "parse_document",
    "parse_stylesheet",
    # document tree
    "Node",
    "Text",
    "ElementData",
    # stylesheet
    "Stylesheet",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Declaration",
    "Keyword",
    "Length",
    "Color",
    "Unit",
    # errors
    "CrowError",
    "ParseError",
    "StructuralViolation",
    "OutOfBoundsError",
    "LoadError",
    "ConfigError",
]
