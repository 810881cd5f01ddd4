"""Rectangle model: width, height and a live area accessor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A mutable width/height pair.

    Example::

        r = Rectangle(10, 20)
        r.get_area()  # 200
    """

    width: float
    height: float

    def get_area(self) -> float:
        """Area from the current width and height (not cached)."""
        return self.width * self.height
