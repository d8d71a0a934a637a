"""The player character: movement, health and facing."""

from __future__ import annotations

import math
from enum import Enum

from .geometry import FloatRect, IntRect, Vec2, _rotated_bounds

START_SPEED = 200.0
START_HEALTH = 100
HIT_COOLDOWN_MS = 200
_SPRITE_ORIGIN = Vec2(25, 25)


class Direction(Enum):
    """A movement direction, valued by its unit step in screen coordinates."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Player:
    """The player, who walks around the arena and faces the mouse pointer."""

    def __init__(self, size: Vec2 = Vec2(50, 50)) -> None:
        self.size = size
        self.speed = START_SPEED
        self.health = START_HEALTH
        self.max_health = START_HEALTH
        self.position = Vec2()
        self.sprite_position = Vec2()
        self.rotation = 0.0
        self.arena = IntRect()
        self.tile_size = 0
        self.resolution = Vec2()
        self.last_hit_ms = 0
        self._pressed: set[Direction] = set()

    def spawn(self, arena: IntRect, resolution: Vec2, tile_size: int) -> None:
        """Place the player in the middle of ``arena``."""
        self.position = Vec2(arena.width // 2, arena.height // 2)
        self.arena = arena
        self.tile_size = tile_size
        self.resolution = resolution

    def hit(self, time_hit_ms: int) -> bool:
        """Take one point of damage unless the last hit was too recent."""
        if time_hit_ms - self.last_hit_ms > HIT_COOLDOWN_MS:
            self.last_hit_ms = time_hit_ms
            self.health -= 1
            return True
        return False

    def bounds(self) -> FloatRect:
        """The area the player's sprite covers on screen."""
        return _rotated_bounds(self.sprite_position, _SPRITE_ORIGIN, self.size, self.rotation)

    def move(self, direction: Direction) -> None:
        self._pressed.add(direction)

    def stop(self, direction: Direction) -> None:
        self._pressed.discard(direction)

    def update(self, elapsed: float, mouse_position: Vec2) -> None:
        """Advance the player by ``elapsed`` seconds and turn towards the mouse."""
        step = self.speed * elapsed
        position = self.position
        for direction in self._pressed:
            dx, dy = direction.value
            position = position + Vec2(dx, dy) * step

        self.sprite_position = position

        x = min(position.x, self.arena.width - self.tile_size)
        x = max(x, self.arena.left + self.tile_size)
        y = min(position.y, self.arena.height - self.tile_size)
        y = max(y, self.arena.top + self.tile_size)
        self.position = Vec2(x, y)

        self.rotation = (
            math.atan2(
                mouse_position.y - self.resolution.y / 2,
                mouse_position.x - self.resolution.x / 2,
            )
            * 180
        ) / 3.141

    def upgrade_speed(self) -> None:
        """Raise speed by a fifth of the starting speed."""
        self.speed += START_SPEED * 0.2

    def upgrade_health(self) -> None:
        """Raise maximum health by a fifth of the starting health."""
        self.max_health = int(self.max_health + START_HEALTH * 0.2)

    def increase_health_level(self, amount: int) -> None:
        """Heal by ``amount``, capped at maximum health."""
        self.health = min(self.health + amount, self.max_health)

    def reset_stats(self) -> None:
        self.speed = START_SPEED
        self.health = START_HEALTH
        self.max_health = START_HEALTH