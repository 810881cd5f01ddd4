"""selectorkit: CSS selector builder, JSON helpers and a small rectangle type."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.config import SelectorKitConfig  # noqa: E402
from selectorkit.errors import (  # noqa: E402
    DuplicateSelectorPartError,
    InvalidCombinatorError,
    ParseError,
    RecipeError,
    SelectorError,
    SelectorKitError,
    SelectorOrderError,
    UnknownFieldError,
)
from selectorkit.rectangle import Rectangle  # noqa: E402
from selectorkit.selector import (  # noqa: E402
    BuilderFacade,
    Category,
    CombinedSelector,
    Selector,
    SelectorBuilder,
    build_selector,
    css_selector_builder,
)
from selectorkit.serialization import deserialize, serialize  # noqa: E402

__all__ = [
    "__version__",
    # config
    "SelectorKitConfig",
    # errors
    "SelectorKitError",
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
    "InvalidCombinatorError",
    "ParseError",
    "UnknownFieldError",
    "RecipeError",
    # rectangle
    "Rectangle",
    # serialization
    "serialize",
    "deserialize",
    # selector
    "Category",
    "Selector",
    "SelectorBuilder",
    "CombinedSelector",
    "BuilderFacade",
    "css_selector_builder",
    "build_selector",
]
