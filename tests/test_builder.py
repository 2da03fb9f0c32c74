"""Facade scenarios from the selector builder documentation."""

from __future__ import annotations

import pytest

from css_selector import CombinedSelector, SelectorBuilder, css_selector_builder as builder
from css_selector import builder as builder_module
from css_selector.errors import DuplicatePartError, OrderError


def test_id_with_classes() -> None:
    assert (
        builder.id("main").class_("container").class_("editable").stringify()
        == "#main.container.editable"
    )


def test_element_attribute_pseudo_class() -> None:
    assert (
        builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        == 'a[href$=".png"]:focus'
    )


def test_second_element_raises_duplicate() -> None:
    selector = builder.element("div").id("main").class_("container").class_("draggable")
    with pytest.raises(DuplicatePartError):
        selector.element("span")


def test_element_after_class_raises_order() -> None:
    with pytest.raises(OrderError):
        builder.class_("a").element("div")


@pytest.mark.parametrize(
    "factory, expected",
    [
        (lambda: builder.element("li"), "li"),
        (lambda: builder.id("main"), "#main"),
        (lambda: builder.class_("row"), ".row"),
        (lambda: builder.attr("disabled"), "[disabled]"),
        (lambda: builder.pseudo_class("checked"), ":checked"),
        (lambda: builder.pseudo_element("after"), "::after"),
    ],
)
def test_each_entry_point_starts_a_selector(factory, expected) -> None:
    selector = factory()
    assert isinstance(selector, SelectorBuilder)
    assert selector.stringify() == expected


def test_each_call_returns_fresh_builder() -> None:
    first = builder.element("div")
    second = builder.element("span")
    assert first is not second
    first.class_("a")
    assert second.stringify() == "span"


def test_module_level_entry_points() -> None:
    selector = builder_module.element("p").pseudo_element("first-line")
    assert selector.stringify() == "p::first-line"
    assert builder_module.id("x").stringify() == "#x"
    assert builder_module.class_("y").stringify() == ".y"


def test_combine_two_selectors() -> None:
    combined = builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    )
    assert isinstance(combined, CombinedSelector)
    assert combined.stringify() == "div#main + table#data"


def test_nested_combine_with_descendant_combinator() -> None:
    combined = builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    )
    assert combined.stringify() == (
        "div#main.container.draggable + table#data ~ "
        "tr:nth-of-type(even)   td:nth-of-type(even)"
    )


def test_combine_snapshots_operands() -> None:
    left = builder.element("ul")
    combined = builder.combine(left, ">", builder.element("li"))
    left.class_("menu")
    assert combined.stringify() == "ul > li"


def test_combined_selector_is_frozen() -> None:
    combined = builder.combine(builder.element("a"), ">", builder.element("b"))
    with pytest.raises(AttributeError):
        combined.selector = "x"  # type: ignore[misc]


def test_method_style_combine() -> None:
    combined = builder.element("ul").combine(">", builder.element("li")).combine(
        "+", builder.element("p")
    )
    assert str(combined) == "ul > li + p"


def test_star_import_keeps_builtin_id() -> None:
    namespace: dict = {}
    exec("from css_selector.builder import *", namespace)
    assert "id" not in namespace
    assert "element" in namespace
    assert builder_module.id("main").stringify() == "#main"
