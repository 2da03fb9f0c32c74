"""Selector types for the css-selector builder.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

Element, id, and pseudo-element occur at most once; class, attribute, and
pseudo-class may repeat. :class:`SelectorBuilder` enforces both rules as parts
are added, so misuse surfaces at the offending call rather than at render
time. :func:`combine` joins two rendered selectors with a combinator token.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import logging
from typing import Protocol, runtime_checkable

from .errors import DuplicatePartError, OrderError

_logger = logging.getLogger(__name__)


class SelectorPart(str, Enum):
    """Kinds of simple selector, declared in their required order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of the part within a compound selector."""
        return _RANKS[self]

    @property
    def singleton(self) -> bool:
        """Whether the part may occur at most once per selector."""
        return self in _SINGLETON_PARTS


_RANKS = {part: rank for rank, part in enumerate(SelectorPart)}

_SINGLETON_PARTS = frozenset(
    {SelectorPart.ELEMENT, SelectorPart.ID, SelectorPart.PSEUDO_ELEMENT}
)

_TEMPLATES = {
    SelectorPart.ELEMENT: "{}",
    SelectorPart.ID: "#{}",
    SelectorPart.CLASS: ".{}",
    SelectorPart.ATTRIBUTE: "[{}]",
    SelectorPart.PSEUDO_CLASS: ":{}",
    SelectorPart.PSEUDO_ELEMENT: "::{}",
}


@runtime_checkable
class Selector(Protocol):
    """Anything that renders to a CSS selector string."""

    def stringify(self) -> str: ...


class SelectorBuilder:
    """Mutable, chainable builder for one compound selector.

    Every mutator returns the builder itself::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    A mutator raises :class:`~css_selector.errors.DuplicatePartError` when a
    singleton part is already set and
    :class:`~css_selector.errors.OrderError` when a part that must follow it
    is already set. The duplicate check runs first. A failed call leaves the
    builder unchanged.

    Builders are not safe for concurrent mutation; callers sharing one across
    threads must lock around it.
    """

    __slots__ = ("_fragments",)

    def __init__(self) -> None:
        self._fragments: dict[SelectorPart, list[str]] = {
            part: [] for part in SelectorPart
        }

    # Mutators -----------------------------------------------------------
    def element(self, value: str) -> SelectorBuilder:
        return self._add(SelectorPart.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._add(SelectorPart.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._add(SelectorPart.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append raw attribute-selector text, e.g. ``href$=".png"``."""
        return self._add(SelectorPart.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(SelectorPart.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(SelectorPart.PSEUDO_ELEMENT, value)

    # Rendering ----------------------------------------------------------
    def parts(self) -> tuple[SelectorPart, ...]:
        """Return the parts set so far, in selector order."""
        return tuple(part for part in SelectorPart if self._fragments[part])

    def stringify(self) -> str:
        return "".join(
            _TEMPLATES[part].format(value)
            for part in SelectorPart
            for value in self._fragments[part]
        )

    def combine(self, combinator: str, other: Selector) -> CombinedSelector:
        """Shorthand for ``combine(self, combinator, other)``."""
        return combine(self, combinator, other)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.stringify()!r})"

    # Internal helpers ---------------------------------------------------
    def _add(self, part: SelectorPart, value: str) -> SelectorBuilder:
        if not isinstance(value, str):
            raise TypeError(
                f"{part.value} value must be a str, not {type(value).__name__}"
            )

        if part.singleton and self._fragments[part]:
            _logger.debug("Rejected second %s %r in %r", part.value, value, self)
            raise DuplicatePartError(part)

        later = [other for other in self.parts() if other.rank > part.rank]
        if later:
            _logger.debug(
                "Rejected %s %r after %s in %r",
                part.value,
                value,
                later[-1].value,
                self,
            )
            raise OrderError(part, later[-1])

        self._fragments[part].append(value)
        return self


@dataclass(frozen=True, slots=True)
class CombinedSelector:
    """Two selectors joined by a combinator, rendered once at creation."""

    selector: str

    def stringify(self) -> str:
        return self.selector

    def combine(self, combinator: str, other: Selector) -> CombinedSelector:
        """Shorthand for ``combine(self, combinator, other)``."""
        return combine(self, combinator, other)

    def __str__(self) -> str:
        return self.selector


def combine(first: Selector, combinator: str, second: Selector) -> CombinedSelector:
    """Join two selectors as ``"{first} {combinator} {second}"``.

    ``combinator`` is inserted verbatim between single spaces; it is not
    checked against the CSS combinators (space, ``+``, ``~``, ``>``).
    Either operand may itself be a :class:`CombinedSelector`.
    """
    rendered = f"{first.stringify()} {combinator} {second.stringify()}"
    _logger.debug("Combined selector %r", rendered)
    return CombinedSelector(rendered)


__all__ = [
    "SelectorPart",
    "Selector",
    "SelectorBuilder",
    "CombinedSelector",
    "combine",
]
