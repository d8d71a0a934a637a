"""Building an arena: the tiled background and the horde of zombies."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .geometry import IntRect, Vec2
from .zombie import Zombie, ZombieKind

TILE_SIZE = 50
TILE_TYPES = 3
HORDE_MARGIN = 20


@dataclass(frozen=True)
class Tile:
    """One square of the background, with its place in the world and in the texture sheet."""

    x: int
    y: int
    texture_offset: int
    size: int = TILE_SIZE

    @property
    def is_wall(self) -> bool:
        return self.texture_offset == TILE_TYPES * self.size

    @property
    def vertices(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """World corners in order: top-left, top-right, bottom-right, bottom-left."""
        s = self.size
        return (
            Vec2(self.x, self.y),
            Vec2(self.x + s, self.y),
            Vec2(self.x + s, self.y + s),
            Vec2(self.x, self.y + s),
        )

    @property
    def tex_coords(self) -> tuple[Vec2, Vec2, Vec2, Vec2]:
        """Texture corners matching :attr:`vertices`."""
        s = self.size
        offset = self.texture_offset
        return (
            Vec2(0, offset),
            Vec2(s, offset),
            Vec2(s, s + offset),
            Vec2(0, s + offset),
        )


def create_background(arena: IntRect, rng: random.Random | None = None) -> tuple[list[Tile], int]:
    """Lay tiles over ``arena``: walls round the edge, random floor inside.

    Tiles come column by column. Returns the tiles and the tile size.
    """
    rng = rng if rng is not None else random.Random()
    columns = int(arena.width / TILE_SIZE)
    rows = int(arena.height / TILE_SIZE)
    tiles = []
    for w in range(columns):
        for h in range(rows):
            on_edge = h in (0, rows - 1) or w in (0, columns - 1)
            if on_edge:
                offset = TILE_TYPES * TILE_SIZE
            else:
                offset = rng.randrange(TILE_TYPES) * TILE_SIZE
            tiles.append(Tile(w * TILE_SIZE, h * TILE_SIZE, offset))
    return tiles, TILE_SIZE


def create_horde(num_zombies: int, arena: IntRect, rng: random.Random | None = None) -> list[Zombie]:
    """Spawn ``num_zombies`` zombies of random kinds along the edges of ``arena``."""
    rng = rng if rng is not None else random.Random()
    max_x = arena.width - HORDE_MARGIN
    min_x = arena.left + HORDE_MARGIN
    max_y = arena.height - HORDE_MARGIN
    min_y = arena.top + HORDE_MARGIN

    zombies = []
    for _ in range(num_zombies):
        side = rng.randrange(4)
        if side == 0:
            x, y = min_x, rng.randrange(max_y) + min_y
        elif side == 1:
            x, y = max_x, rng.randrange(max_y) + min_y
        elif side == 2:
            x, y = rng.randrange(max_x) + min_x, min_y
        else:
            x, y = rng.randrange(max_x) + min_x, max_y
        kind = ZombieKind(rng.randrange(len(ZombieKind)))
        zombie = Zombie()
        zombie.spawn(float(x), float(y), kind, rng)
        zombies.append(zombie)
    return zombies