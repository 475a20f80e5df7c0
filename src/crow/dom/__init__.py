from crow.dom.parser import MarkupParser, parse_document
from crow.dom.model import AttrMap, ElementData, Node, NodeKind, Text

__all__ = [
    "parse_document",
    "MarkupParser",
    "AttrMap",
    "ElementData",
    "Node",
    "NodeKind",
    "Text",
]
