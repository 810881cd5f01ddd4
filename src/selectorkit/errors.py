"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from selectorkit.selector.model import Category


class SelectorKitError(Exception):
    """Base error for all selectorkit errors."""


# ---------------------------------------------------------------------------
# Selector grammar errors
# ---------------------------------------------------------------------------


class SelectorError(SelectorKitError):
    """A selector fragment or combinator violates CSS selector grammar."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class DuplicateSelectorPartError(SelectorError):
    """Element, id or pseudo-element added twice to one selector."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            category=category,
        )


class SelectorOrderError(SelectorError):
    """A fragment was added after a fragment that must follow it."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            category=category,
        )


class InvalidCombinatorError(SelectorError, ValueError):
    """The combinator is not one of ' ', '+', '~', '>'."""

    def __init__(self, combinator: str) -> None:
        super().__init__(
            f"Invalid combinator {combinator!r}: expected one of ' ', '+', '~', '>'"
        )
        self.combinator = combinator


# ---------------------------------------------------------------------------
# Serialization errors
# ---------------------------------------------------------------------------


class ParseError(SelectorKitError):
    """Raised when JSON text cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class UnknownFieldError(SelectorKitError):
    """Parsed JSON carries keys the target type does not declare."""

    def __init__(self, target: type, fields: Iterable[str]) -> None:
        self.target = target
        self.fields = sorted(fields)
        super().__init__(
            f"Unknown field(s) for {target.__name__}: {', '.join(self.fields)}"
        )


class RecipeError(SelectorKitError, ValueError):
    """A selector recipe is not shaped like a simple or combined selector."""
