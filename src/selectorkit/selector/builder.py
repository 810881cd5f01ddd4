"""Selector builders: fragment accumulation, order validation and rendering."""

from __future__ import annotations

import logging

from selectorkit.errors import (
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    SelectorOrderError,
)
from selectorkit.selector.model import COMBINATORS, FORMATS, Category, Selector

__all__ = ["SelectorBuilder", "CombinedSelector", "combine"]

log = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates the fragments of one compound selector.

    Fragments must arrive in canonical order::

        element#id.class[attr]:pseudo-class::pseudo-element

    Element, id and pseudo-element may appear once; class, attribute and
    pseudo-class may repeat and render in insertion order. Every ``add_*``
    method returns the builder so calls can be chained.
    """

    def __init__(self) -> None:
        self._fragments: dict[Category, list[str]] = {c: [] for c in Category}
        self._position: int = -1  # highest category touched so far

    # --- fragments ------------------------------------------------------------

    def add_element(self, name: str) -> SelectorBuilder:
        return self._add(Category.ELEMENT, name)

    def add_id(self, name: str) -> SelectorBuilder:
        return self._add(Category.ID, name)

    def add_class(self, name: str) -> SelectorBuilder:
        return self._add(Category.CLASS, name)

    def add_attribute(self, expr: str) -> SelectorBuilder:
        """Add a raw attribute expression, e.g. ``href$=".png"``."""
        return self._add(Category.ATTRIBUTE, expr)

    def add_pseudo_class(self, name: str) -> SelectorBuilder:
        return self._add(Category.PSEUDO_CLASS, name)

    def add_pseudo_element(self, name: str) -> SelectorBuilder:
        return self._add(Category.PSEUDO_ELEMENT, name)

    def add(self, category: Category, value: str) -> SelectorBuilder:
        """Add a fragment of any category."""
        return self._add(Category(category), value)

    def _add(self, category: Category, value: str) -> SelectorBuilder:
        fragments = self._fragments[category]
        if category.singular and fragments:
            log.debug("Rejected second %s fragment %r", category.name, value)
            raise DuplicateSelectorPartError(category)
        if category < self._position:
            log.debug(
                "Rejected %s fragment %r after %s",
                category.name,
                value,
                Category(self._position).name,
            )
            raise SelectorOrderError(category)
        fragments.append(value)
        self._position = category
        return self

    # --- composition ----------------------------------------------------------

    def combine_with(self, other: Selector, combinator: str) -> CombinedSelector:
        """Join this selector and *other* with *combinator*."""
        return combine(self, combinator, other)

    # --- output ---------------------------------------------------------------

    def fragments(self, category: Category) -> tuple[str, ...]:
        """Return the fragments recorded for *category*, in insertion order."""
        return tuple(self._fragments[category])

    def render(self) -> str:
        return "".join(FORMATS[c].render(self._fragments[c]) for c in Category)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.render()!r})"


class CombinedSelector:
    """Two selectors joined by a combinator, frozen as rendered text.

    The operands are rendered when the combination is made; later changes to
    them do not show up here. A combined selector takes no further fragments
    but can be combined again.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    def combine_with(self, other: Selector, combinator: str) -> CombinedSelector:
        return combine(self, combinator, other)

    def render(self) -> str:
        return self._text

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CombinedSelector({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CombinedSelector):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)


def combine(left: Selector, combinator: str, right: Selector) -> CombinedSelector:
    """Render ``left combinator right`` with a space either side of the combinator.

    The descendant combinator is itself a space, so it renders as three.
    """
    if combinator not in COMBINATORS:
        log.debug("Rejected combinator %r", combinator)
        raise InvalidCombinatorError(combinator)
    text = f"{left.render()} {combinator} {right.render()}"
    log.debug("Combined selector: %s", text)
    return CombinedSelector(text)
