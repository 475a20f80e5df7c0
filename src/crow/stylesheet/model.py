"""Stylesheet model: selectors, values, declarations, rules, and Stylesheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

__all__ = [
    "Color",
    "Declaration",
    "Keyword",
    "Length",
    "Rule",
    "Selector",
    "SimpleSelector",
    "Stylesheet",
    "Unit",
    "Value",
    "to_px",
]


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimpleSelector:
    """A selector matching on tag name, id, and class names, e.g. ``div#nav.menu``.

    Any of the parts may be missing; ``*`` parses to a selector with none.
    """

    tag_name: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()


# Only simple selectors exist today; combinators would join this union.
Selector = SimpleSelector


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


class Unit(Enum):
    """Length units."""

    PX = "px"


@dataclass(frozen=True)
class Keyword:
    name: str


@dataclass(frozen=True)
class Length:
    value: float
    unit: Unit = Unit.PX


@dataclass(frozen=True)
class Color:
    """An RGBA color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range 0..255: {channel}")


Value = Union[Keyword, Length, Color]


def to_px(value: Value) -> float:
    """Return the size of a length in px, or zero for non-lengths."""
    if isinstance(value, Length) and value.unit is Unit.PX:
        return value.value
    return 0.0


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value;`` pair."""

    name: str
    value: Value


@dataclass(frozen=True)
class Rule:
    """Selectors plus the declarations they apply.

    ``selectors`` is stored most specific first; the ordering is applied
    here so every Rule holds it regardless of how it was built.
    """

    selectors: tuple[Selector, ...]
    declarations: tuple[Declaration, ...] = ()

    def __post_init__(self) -> None:
        from crow.stylesheet.specificity import sort_selectors

        object.__setattr__(self, "selectors", tuple(sort_selectors(self.selectors)))
        object.__setattr__(self, "declarations", tuple(self.declarations))


@dataclass(frozen=True)
class Stylesheet:
    """Rules in source order."""

    rules: tuple[Rule, ...] = ()
