"""Exception hierarchy for the css-selector builder.

Both concrete errors signal programmer misuse of a
:class:`~css_selector.types.SelectorBuilder` and are raised at the offending
mutator call, before the builder's state changes. Catch
:class:`CssSelectorError` to handle either one.
"""

from __future__ import annotations

import typing as _t

if _t.TYPE_CHECKING:
    from .types import SelectorPart


DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class CssSelectorError(Exception):
    """Base class for all exceptions raised by the css-selector builder."""


class DuplicatePartError(CssSelectorError):
    """Raised when element, id, or pseudo-element is set twice on one selector."""

    def __init__(self, part: SelectorPart) -> None:
        super().__init__(DUPLICATE_PART_MESSAGE)
        self.part = part


class OrderError(CssSelectorError):
    """Raised when a selector part is added after a part that must follow it."""

    def __init__(self, part: SelectorPart, conflicting: SelectorPart) -> None:
        super().__init__(ORDER_MESSAGE)
        self.part = part
        self.conflicting = conflicting


__all__ = [
    "CssSelectorError",
    "DuplicatePartError",
    "OrderError",
]
