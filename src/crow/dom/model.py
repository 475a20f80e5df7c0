"""Document tree model: Node, Text, and ElementData dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

__all__ = ["AttrMap", "ElementData", "Node", "NodeKind", "Text"]

AttrMap = dict[str, str]


@dataclass(frozen=True)
class Text:
    """Character data between tags."""

    data: str


@dataclass(frozen=True)
class ElementData:
    """Tag name and attributes of an element node."""

    tag_name: str
    attributes: AttrMap = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.tag_name:
            raise ValueError("Element tag_name must be a non-empty string")

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    @property
    def id(self) -> str | None:
        """Value of the ``id`` attribute, if present."""
        return self.get_attribute("id")

    @property
    def classes(self) -> list[str]:
        """The ``class`` attribute split on single spaces."""
        class_list = self.get_attribute("class")
        if class_list is None:
            return []
        return class_list.split(" ")


NodeKind = Union[Text, ElementData]


@dataclass(frozen=True)
class Node:
    """A node in the document tree.

    ``kind`` holds the data specific to the node type; ``children`` is empty
    for text nodes.
    """

    kind: NodeKind
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.kind, Text) and self.children:
            raise ValueError("Text nodes cannot have children")

    @classmethod
    def text(cls, data: str) -> Node:
        return cls(kind=Text(data))

    @classmethod
    def element(
        cls, name: str, attrs: AttrMap | None = None, children: tuple[Node, ...] | list[Node] = ()
    ) -> Node:
        return cls(kind=ElementData(name, dict(attrs or {})), children=tuple(children))

    @property
    def is_text(self) -> bool:
        return isinstance(self.kind, Text)

    @property
    def is_element(self) -> bool:
        return isinstance(self.kind, ElementData)
