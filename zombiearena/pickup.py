"""Health and ammo pickups that appear and vanish on a timer."""

from __future__ import annotations

import random
from enum import IntEnum

from .geometry import FloatRect, IntRect, Vec2

HEALTH_START_VALUE = 50
AMMO_START_VALUE = 12
START_WAIT_TIME = 10
START_SECONDS_TO_LIVE = 5
_SPRITE_SIZE = 50
_ARENA_MARGIN = 50


class PickupKind(IntEnum):
    HEALTH = 1
    AMMO = 2


class Pickup:
    """A pickup that spawns at a random spot, lives a while, then waits to respawn."""

    def __init__(self, kind: PickupKind, rng: random.Random | None = None) -> None:
        self.kind = PickupKind(kind)
        self.rng = rng if rng is not None else random.Random()
        self.value = HEALTH_START_VALUE if self.kind is PickupKind.HEALTH else AMMO_START_VALUE
        self.position = Vec2()
        self.arena = IntRect()
        self.spawned = False
        self.seconds_since_spawn = 0.0
        self.seconds_since_despawn = 0.0
        self.seconds_to_live = float(START_SECONDS_TO_LIVE)
        self.seconds_to_wait = float(START_WAIT_TIME)

    def set_arena(self, arena: IntRect) -> None:
        """Shrink ``arena`` by the wall margin, keep it, and spawn."""
        self.arena = IntRect(
            arena.left + _ARENA_MARGIN,
            arena.top + _ARENA_MARGIN,
            arena.width - _ARENA_MARGIN,
            arena.height - _ARENA_MARGIN,
        )
        self.spawn()

    def spawn(self) -> None:
        """Appear at a random spot; raises ValueError if the arena is empty."""
        x = self.rng.randrange(self.arena.width)
        y = self.rng.randrange(self.arena.height)
        self.position = Vec2(x, y)
        self.seconds_since_spawn = 0.0
        self.spawned = True

    def update(self, elapsed: float) -> None:
        """Advance the spawn and despawn timers."""
        if self.spawned:
            self.seconds_since_spawn += elapsed
        else:
            self.seconds_since_despawn += elapsed

        if self.seconds_since_despawn > self.seconds_to_wait and not self.spawned:
            self.spawn()

        if self.seconds_since_spawn > self.seconds_to_live and self.spawned:
            self.spawned = False
            self.seconds_since_despawn = 0.0

    def collect(self) -> int:
        """Take the pickup, returning its value."""
        self.spawned = False
        self.seconds_since_despawn = 0.0
        return self.value

    def upgrade(self) -> None:
        """Make the pickup worth half its starting value more."""
        start = HEALTH_START_VALUE if self.kind is PickupKind.HEALTH else AMMO_START_VALUE
        self.value = int(self.value + start * 0.5)
        self.seconds_to_live += START_SECONDS_TO_LIVE // 10
        self.seconds_to_wait -= START_WAIT_TIME // 10

    def bounds(self) -> FloatRect:
        return FloatRect.centered(self.position, _SPRITE_SIZE, _SPRITE_SIZE)