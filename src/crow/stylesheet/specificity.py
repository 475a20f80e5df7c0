"""Selector specificity and the most-specific-first ordering.

See http://www.w3.org/TR/selectors/#specificity. Without combinators a
selector has at most one id and one tag name, so the id and tag parts are
0 or 1.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple

from crow.stylesheet.model import Selector, SimpleSelector

__all__ = ["Specificity", "sort_selectors", "specificity"]


class Specificity(NamedTuple):
    """Sort key compared lexicographically: id beats classes beats tag."""

    has_id: int
    class_count: int
    has_tag_name: int


def specificity(selector: Selector) -> Specificity:
    if isinstance(selector, SimpleSelector):
        return Specificity(
            has_id=0 if selector.id is None else 1,
            class_count=len(selector.classes),
            has_tag_name=0 if selector.tag_name is None else 1,
        )
    raise TypeError(f"Unknown selector type: {type(selector).__name__}")


def sort_selectors(selectors: Iterable[Selector]) -> list[Selector]:
    """Return selectors most specific first; ties keep their source order."""
    return sorted(selectors, key=specificity, reverse=True)
