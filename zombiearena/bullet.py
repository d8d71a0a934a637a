"""Bullets fired by the player."""

from __future__ import annotations

import math

from .geometry import FloatRect, Vec2

BULLET_SPEED = 1000.0
BULLET_RANGE = 1000.0
BULLET_SIZE = 20.0


def _float_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE semantics, yielding inf or nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class Bullet:
    """A square bullet that flies in a straight line until out of range or stopped."""

    def __init__(self) -> None:
        self.position = Vec2()
        self.shape_position = Vec2()
        self.in_flight = False
        self.speed = BULLET_SPEED
        self.velocity = Vec2()
        self._min = Vec2()
        self._max = Vec2()

    def shoot(self, start_x: float, start_y: float, target_x: float, target_y: float) -> None:
        """Launch the bullet from the start point towards the target."""
        self.in_flight = True
        self.position = Vec2(start_x, start_y)

        gradient = abs(_float_div(start_x - target_x, start_y - target_y))
        distance_y = self.speed / (1 + gradient)
        distance_x = self.speed * (gradient / (1 + gradient))
        if target_x < start_x:
            distance_x = -distance_x
        if target_y < start_y:
            distance_y = -distance_y
        self.velocity = Vec2(distance_x, distance_y)

        self._min = Vec2(start_x - BULLET_RANGE, start_y - BULLET_RANGE)
        self._max = Vec2(start_x + BULLET_RANGE, start_y + BULLET_RANGE)
        self.shape_position = self.position

    def stop(self) -> None:
        self.in_flight = False

    def update(self, elapsed: float) -> None:
        """Move the bullet and drop it once it leaves its range."""
        self.position = self.position + self.velocity * elapsed
        self.shape_position = self.position
        x, y = self.position.x, self.position.y
        if x < self._min.x or x > self._max.x or y < self._min.y or y > self._max.y:
            self.in_flight = False

    def bounds(self) -> FloatRect:
        return FloatRect(self.shape_position.x, self.shape_position.y, BULLET_SIZE, BULLET_SIZE)