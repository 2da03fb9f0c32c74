"""Chainable builder for CSS selector strings.

This module re-exports the selector types, the factory facade, the small
record helpers, and the exception hierarchy so callers only need
``import css_selector``.
"""

from . import errors as errors
from .builder import CssSelectorBuilder, css_selector_builder
from .serde import from_json, get_json
from .shapes import Rectangle
from .types import (
    CombinedSelector,
    Selector,
    SelectorBuilder,
    SelectorPart,
    combine,
)

__version__ = "0.1.0"

__all__ = [
    "SelectorBuilder",
    "CombinedSelector",
    "Selector",
    "SelectorPart",
    "combine",
    "CssSelectorBuilder",
    "css_selector_builder",
    "Rectangle",
    "get_json",
    "from_json",
    "errors",
    "__version__",
]

for _name in errors.__all__:
    globals()[_name] = getattr(errors, _name)
    if _name not in __all__:
        __all__.append(_name)

del _name
