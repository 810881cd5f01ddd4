from selectorkit.selector.builder import CombinedSelector, SelectorBuilder, combine
from selectorkit.selector.facade import BuilderFacade, css_selector_builder
from selectorkit.selector.model import COMBINATORS, FORMATS, Category, Selector
from selectorkit.selector.recipe import build_selector

__all__ = [
    "Category",
    "COMBINATORS",
    "FORMATS",
    "Selector",
    "SelectorBuilder",
    "CombinedSelector",
    "combine",
    "BuilderFacade",
    "css_selector_builder",
    "build_selector",
]
