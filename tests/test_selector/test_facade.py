"""Tests for the stateless BuilderFacade entry points."""

import pytest

from selectorkit import css_selector_builder
from selectorkit.errors import DuplicateSelectorPartError, SelectorOrderError
from selectorkit.selector import BuilderFacade, CombinedSelector, SelectorBuilder

builder = css_selector_builder


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


class TestEntryPoints:
    def test_element(self):
        assert builder.element("div").render() == "div"

    def test_id(self):
        assert builder.id("main").render() == "#main"

    def test_class(self):
        assert builder.class_("container").render() == ".container"

    def test_attr(self):
        assert builder.attr("target=_blank").render() == "[target=_blank]"

    def test_pseudo_class(self):
        assert builder.pseudo_class("checked").render() == ":checked"

    def test_pseudo_element(self):
        assert builder.pseudo_element("first-line").render() == "::first-line"

    def test_each_call_returns_new_builder(self):
        first = builder.element("a")
        second = builder.element("a")
        assert isinstance(first, SelectorBuilder)
        assert first is not second

    def test_calls_do_not_share_state(self):
        builder.element("a").add_class("x")
        assert builder.element("b").render() == "b"

    def test_facade_render_is_empty(self):
        assert builder.render() == ""
        assert BuilderFacade().render() == ""


class TestChaining:
    def test_id_with_classes(self):
        sel = builder.id("main").add_class("container").add_class("editable")
        assert sel.render() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        sel = builder.element("a").add_attribute('href$=".png"').add_pseudo_class("focus")
        assert sel.render() == 'a[href$=".png"]:focus'

    def test_element_twice_from_facade(self):
        with pytest.raises(DuplicateSelectorPartError):
            builder.element("div").add_element("p")

    def test_element_after_id_from_facade(self):
        with pytest.raises(SelectorOrderError):
            builder.id("main").add_element("div")

    def test_pseudo_element_then_pseudo_class(self):
        with pytest.raises(SelectorOrderError):
            builder.pseudo_element("after").add_pseudo_class("hover")


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------


class TestCombine:
    def test_simple_combination(self):
        combined = builder.combine(
            builder.element("div").add_id("main").add_class("container").add_class("draggable"),
            "+",
            builder.element("table").add_id("data"),
        )
        assert isinstance(combined, CombinedSelector)
        assert combined.render() == "div#main.container.draggable + table#data"

    def test_nested_combination(self):
        combined = builder.combine(
            builder.element("div").add_id("main").add_class("container").add_class("draggable"),
            "+",
            builder.combine(
                builder.element("table").add_id("data"),
                "~",
                builder.combine(
                    builder.element("tr").add_pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").add_pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert combined.render() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combine_render_is_idempotent(self):
        combined = builder.combine(builder.element("a"), ">", builder.element("b"))
        assert combined.render() == combined.render() == "a > b"

    def test_all_combinators(self):
        for combinator, expected in [
            (" ", "p   span"),
            ("+", "p + span"),
            ("~", "p ~ span"),
            (">", "p > span"),
        ]:
            combined = builder.combine(
                builder.element("p"), combinator, builder.element("span")
            )
            assert combined.render() == expected
