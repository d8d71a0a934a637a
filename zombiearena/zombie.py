"""Zombies that shamble towards the player."""

from __future__ import annotations

import math
import random
from enum import IntEnum

from .geometry import FloatRect, Vec2, _rotated_bounds

_SPRITE_ORIGIN = Vec2(25, 25)
_SPRITE_SIZE = Vec2(50, 50)
DEAD_TEXTURE = "blood"


class ZombieKind(IntEnum):
    BLOATER = 0
    CHASER = 1
    CRAWLER = 2


# speed, health, texture name
_KIND_STATS = {
    ZombieKind.BLOATER: (20.0, 5, "bloater"),
    ZombieKind.CHASER: (40.0, 1, "chaser"),
    ZombieKind.CRAWLER: (10.0, 3, "crawler"),
}


class Zombie:
    """A zombie; it does nothing until spawned."""

    def __init__(self) -> None:
        self.kind: ZombieKind | None = None
        self.texture: str | None = None
        self.position = Vec2()
        self.sprite_position = Vec2()
        self.rotation = 0.0
        self.speed = 0.0
        self.health = 0
        self.alive = False

    def spawn(self, x: float, y: float, kind: ZombieKind, rng: random.Random | None = None) -> None:
        """Bring the zombie to life at (x, y) with a randomly reduced speed."""
        rng = rng if rng is not None else random.Random()
        self.kind = ZombieKind(kind)
        self.position = Vec2(x, y)
        base_speed, self.health, self.texture = _KIND_STATS[self.kind]
        self.alive = True
        modifier = rng.randrange(70, 101) / 100
        self.speed = base_speed * modifier

    def update(self, elapsed: float, player_location: Vec2) -> None:
        """Step towards ``player_location`` along each axis and face it."""
        if not self.alive:
            return
        step = self.speed * elapsed
        x, y = self.position.x, self.position.y
        px, py = player_location.x, player_location.y
        if x < px:
            x += step
        if x > px:
            x -= step
        if y < py:
            y += step
        if y > py:
            y -= step
        self.position = Vec2(x, y)
        self.sprite_position = self.position
        self.rotation = (math.atan2(py - y, px - x) * 180) / 3.141

    def hit(self) -> bool:
        """Take a bullet; return True if that killed the zombie."""
        self.health -= 1
        if self.health < 0:
            self.alive = False
            self.texture = DEAD_TEXTURE
            return True
        return False

    def bounds(self) -> FloatRect:
        return _rotated_bounds(self.sprite_position, _SPRITE_ORIGIN, _SPRITE_SIZE, self.rotation)