"""Selector model: fragment categories, their rendering table, and the Selector protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Protocol


class Category(IntEnum):
    """Kinds of selector fragment, valued in canonical CSS order."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def singular(self) -> bool:
        """True if at most one fragment of this kind fits in a selector."""
        return self in _SINGULAR


_SINGULAR = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})


@dataclass(frozen=True)
class FragmentFormat:
    """How the fragments of one category are wrapped and joined."""

    prefix: str = ""
    separator: str = ""
    suffix: str = ""

    def render(self, fragments: list[str]) -> str:
        if not fragments:
            return ""
        return self.prefix + self.separator.join(fragments) + self.suffix


FORMATS: dict[Category, FragmentFormat] = {
    Category.ELEMENT: FragmentFormat(),
    Category.ID: FragmentFormat("#", "#"),
    Category.CLASS: FragmentFormat(".", "."),
    Category.ATTRIBUTE: FragmentFormat("[", "][", "]"),
    Category.PSEUDO_CLASS: FragmentFormat(":", ":"),
    Category.PSEUDO_ELEMENT: FragmentFormat("::", "::"),
}

# Descendant, adjacent sibling, general sibling, child.
COMBINATORS = frozenset({" ", "+", "~", ">"})


class Selector(Protocol):
    """Anything that renders to a CSS selector string."""

    def render(self) -> str: ...
