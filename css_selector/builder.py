"""Factory facade for building CSS selectors.

Each entry point starts a fresh :class:`~css_selector.types.SelectorBuilder`,
so unrelated selectors never share state::

    from css_selector import css_selector_builder as builder

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
"""

from __future__ import annotations

from .types import CombinedSelector, Selector, SelectorBuilder, combine as _combine

__all__ = [
    "CssSelectorBuilder",
    "css_selector_builder",
    "element",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


class CssSelectorBuilder:
    """Stateless facade returning a new selector from every call."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self, first: Selector, combinator: str, second: Selector
    ) -> CombinedSelector:
        return _combine(first, combinator, second)


css_selector_builder = CssSelectorBuilder()

element = css_selector_builder.element
id = css_selector_builder.id  # noqa: A001 - not in __all__, shadows the builtin
class_ = css_selector_builder.class_
attr = css_selector_builder.attr
pseudo_class = css_selector_builder.pseudo_class
pseudo_element = css_selector_builder.pseudo_element
combine = css_selector_builder.combine
