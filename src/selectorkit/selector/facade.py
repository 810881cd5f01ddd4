"""Stateless entry points that start a new selector per call."""

from __future__ import annotations

from selectorkit.selector.builder import CombinedSelector, SelectorBuilder, combine
from selectorkit.selector.model import Selector

__all__ = ["BuilderFacade", "css_selector_builder"]


class BuilderFacade:
    """Start a selector chain from any fragment kind.

    Example::

        builder = css_selector_builder
        builder.id("main").add_class("container").add_class("editable").render()
        # '#main.container.editable'
    """

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_class(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_attribute(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().add_pseudo_element(value)

    def combine(
        self, left: Selector, combinator: str, right: Selector
    ) -> CombinedSelector:
        return combine(left, combinator, right)

    def render(self) -> str:
        """The facade itself builds nothing, so it renders empty."""
        return ""


css_selector_builder = BuilderFacade()
