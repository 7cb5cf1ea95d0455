"""Two-component vector used for planar positions and directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator

_NORMALIZE_EPSILON = 0.0001


def _fmt(value: float) -> str:
    return format(value, "g")


@dataclass(frozen=True, eq=False)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def normalized(self) -> Vec2:
        """Return a unit vector in the same direction, or ZERO if too short."""
        length = math.sqrt(self.x * self.x + self.y * self.y)
        if length >= _NORMALIZE_EPSILON:
            inv = 1.0 / length
            return Vec2(self.x * inv, self.y * inv)
        return Vec2.ZERO

    def rotate(self, degrees: float) -> Vec2:
        """Return this vector rotated counter-clockwise by ``degrees``."""
        radians = math.radians(degrees)
        sin_t = math.sin(radians)
        cos_t = math.cos(radians)
        return Vec2(
            self.x * cos_t - self.y * sin_t,
            self.x * sin_t + self.y * cos_t,
        )

    def __str__(self) -> str:
        return f"Vec2({_fmt(self.x)}, {_fmt(self.y)})"

    def to_json(self) -> str:
        """Return the vector as a JSON array string."""
        return f"[{_fmt(self.x)}, {_fmt(self.y)}]"


Vec2.ZERO = Vec2(0.0, 0.0)