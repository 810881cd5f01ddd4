"""Build selectors from plain (JSON-shaped) recipes.

Recipe shapes:
    {"parts": [["element", "a"], ["attr", "href$=\\".png\\""]]}
    {"left": <recipe>, "combinator": "+", "right": <recipe>}

Parts are applied in list order, so an out-of-order or repeated part raises
the same error as the equivalent chained builder calls.
"""

from __future__ import annotations

from typing import Any

from selectorkit.errors import RecipeError
from selectorkit.selector.builder import CombinedSelector, SelectorBuilder, combine
from selectorkit.selector.model import Category

__all__ = ["build_selector", "CATEGORY_NAMES"]

CATEGORY_NAMES: dict[str, Category] = {
    "element": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "attribute": Category.ATTRIBUTE,
    "pseudoClass": Category.PSEUDO_CLASS,
    "pseudo_class": Category.PSEUDO_CLASS,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pseudoElement": Category.PSEUDO_ELEMENT,
    "pseudo_element": Category.PSEUDO_ELEMENT,
    "pseudo-element": Category.PSEUDO_ELEMENT,
}


def _build_parts(parts: Any) -> SelectorBuilder:
    if not isinstance(parts, list):
        raise RecipeError(f"'parts' must be a list, got {type(parts).__name__}")
    builder = SelectorBuilder()
    for index, part in enumerate(parts):
        if not (isinstance(part, (list, tuple)) and len(part) == 2):
            raise RecipeError(f"Part {index} must be a [category, value] pair")
        name, value = part
        category = CATEGORY_NAMES.get(name) if isinstance(name, str) else None
        if category is None:
            raise RecipeError(f"Part {index} has unknown category {name!r}")
        if not isinstance(value, str):
            raise RecipeError(f"Part {index} value must be a string")
        builder.add(category, value)
    return builder


def build_selector(recipe: Any) -> SelectorBuilder | CombinedSelector:
    """Turn a recipe mapping into a selector builder or combined selector."""
    if not isinstance(recipe, dict):
        raise RecipeError(f"Recipe must be an object, got {type(recipe).__name__}")
    if "parts" in recipe:
        return _build_parts(recipe["parts"])
    missing = [key for key in ("left", "combinator", "right") if key not in recipe]
    if missing:
        raise RecipeError(
            "Recipe needs either 'parts' or 'left', 'combinator' and 'right' "
            f"(missing: {', '.join(missing)})"
        )
    combinator = recipe["combinator"]
    if not isinstance(combinator, str):
        raise RecipeError("'combinator' must be a string")
    return combine(
        build_selector(recipe["left"]), combinator, build_selector(recipe["right"])
    )
