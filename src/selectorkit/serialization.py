"""JSON helpers: encode plain values and objects, decode onto a target type."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.errors import ParseError, UnknownFieldError

__all__ = ["serialize", "parse", "deserialize", "declared_fields"]

log = logging.getLogger(__name__)

T = TypeVar("T")


def _public_state(obj: object) -> dict[str, Any]:
    """Instance attributes that JSON can carry: no callables, no _private names."""
    state: dict[str, Any] = {}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        for f in dataclasses.fields(obj):
            state[f.name] = getattr(obj, f.name)
    # Declared fields first, then anything set on the instance afterwards.
    for name, value in getattr(obj, "__dict__", {}).items():
        state.setdefault(name, value)
    return {
        name: value
        for name, value in state.items()
        if not name.startswith("_") and not callable(value)
    }


def _default(obj: object) -> Any:
    """``json.dumps`` fallback for objects that are not plain JSON values."""
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if callable(obj):
        raise TypeError(f"Callable {obj!r} is not JSON serializable")
    if hasattr(obj, "__dict__") or dataclasses.is_dataclass(obj):
        return _public_state(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(value: Any, *, indent: int | None = None) -> str:
    """Return the JSON text for *value*.

    Keys keep their insertion order. Dataclass instances and plain objects are
    written as their public, non-callable attributes.
    """
    if indent is None:
        # Compact form: [1,2,3] and {"width":10}.
        return json.dumps(
            value, default=_default, separators=(",", ":"), ensure_ascii=False
        )
    return json.dumps(value, default=_default, indent=indent, ensure_ascii=False)


def parse(text: str) -> Any:
    """Parse JSON *text* into plain values, raising ParseError when malformed."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(str(exc), line=exc.lineno, column=exc.colno) from exc


def declared_fields(target: type) -> set[str]:
    """Field names *target* declares: dataclass fields, else class annotations."""
    if dataclasses.is_dataclass(target):
        return {f.name for f in dataclasses.fields(target)}
    names: set[str] = set()
    for klass in reversed(target.__mro__):
        names.update(getattr(klass, "__annotations__", {}))
    return names


def deserialize(prototype: type[T], text: str, *, strict: bool = False) -> T:
    """Parse *text* and copy its fields onto a fresh instance of *prototype*.

    The instance is created without running ``__init__``, so its behaviour
    comes from *prototype* and every field value comes from the JSON. Keys the
    type does not declare are copied too, unless *strict* is set, in which case
    they raise :class:`UnknownFieldError`. Keys that a ``__slots__`` type has
    no slot for always raise :class:`UnknownFieldError`.
    """
    data = parse(text)

    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {prototype.__name__}, "
            f"got {type(data).__name__}"
        )

    if strict:
        known = declared_fields(prototype)
        unknown = set(data) - known if known else set()
        if unknown:
            raise UnknownFieldError(prototype, unknown)

    obj = prototype.__new__(prototype)
    rejected: list[str] = []
    for key, value in data.items():
        # object.__setattr__ also works for frozen dataclasses.
        try:
            object.__setattr__(obj, key, value)
        except AttributeError:
            # __slots__ without __dict__ leaves no room for the key.
            rejected.append(key)
    if rejected:
        raise UnknownFieldError(prototype, rejected)
    log.debug("Deserialized %s with fields %s", prototype.__name__, list(data))
    return obj
