"""Small 2D value types used throughout the game: vectors and rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__


@dataclass(frozen=True)
class IntRect:
    """An integer rectangle given by its top-left corner and its size."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class FloatRect:
    """A floating point rectangle given by its top-left corner and its size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def _normalized(self) -> tuple[float, float, float, float]:
        left = min(self.left, self.left + self.width)
        right = max(self.left, self.left + self.width)
        top = min(self.top, self.top + self.height)
        bottom = max(self.top, self.top + self.height)
        return left, top, right, bottom

    def intersects(self, other: FloatRect) -> bool:
        """Return True when the two rectangles overlap by a non-zero area."""
        l1, t1, r1, b1 = self._normalized()
        l2, t2, r2, b2 = other._normalized()
        return max(l1, l2) < min(r1, r2) and max(t1, t2) < min(b1, b2)

    @classmethod
    def centered(cls, center: Vec2, width: float, height: float) -> FloatRect:
        """Build a rectangle of the given size whose centre is ``center``."""
        return cls(center.x - width / 2, center.y - height / 2, width, height)


def _rotated_bounds(position: Vec2, origin: Vec2, size: Vec2, angle: float) -> FloatRect:
    """Axis-aligned bounds of a sprite rotated by ``angle`` degrees about its origin."""
    radians = math.radians(angle)
    cos, sin = math.cos(radians), math.sin(radians)
    corners = ((0.0, 0.0), (size.x, 0.0), (size.x, size.y), (0.0, size.y))
    xs = []
    ys = []
    for px, py in corners:
        lx, ly = px - origin.x, py - origin.y
        xs.append(position.x + lx * cos - ly * sin)
        ys.append(position.y + lx * sin + ly * cos)
    left, top = min(xs), min(ys)
    return FloatRect(left, top, max(xs) - left, max(ys) - top)