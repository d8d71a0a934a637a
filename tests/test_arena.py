import random

import pytest

from zombiearena.arena import TILE_SIZE, TILE_TYPES, Tile, create_background, create_horde
from zombiearena.geometry import IntRect, Vec2
from zombiearena.zombie import ZombieKind


ARENA = IntRect(0, 0, 500, 500)


def test_background_returns_tile_size():
    _, tile_size = create_background(ARENA, random.Random(1))
    assert tile_size == TILE_SIZE


def test_background_covers_arena():
    tiles, _ = create_background(ARENA, random.Random(1))
    columns = ARENA.width // TILE_SIZE
    rows = ARENA.height // TILE_SIZE
    assert len(tiles) == columns * rows
    assert {(t.x, t.y) for t in tiles} == {
        (w * TILE_SIZE, h * TILE_SIZE) for w in range(columns) for h in range(rows)
    }


def test_background_is_column_major():
    tiles, _ = create_background(ARENA, random.Random(1))
    assert (tiles[0].x, tiles[0].y) == (0, 0)
    assert (tiles[1].x, tiles[1].y) == (0, TILE_SIZE)


def test_edges_are_walls_and_inside_is_floor():
    tiles, _ = create_background(ARENA, random.Random(3))
    last = ARENA.width - TILE_SIZE
    for tile in tiles:
        edge = tile.x in (0, last) or tile.y in (0, last)
        assert tile.is_wall == edge
        if edge:
            assert tile.texture_offset == TILE_TYPES * TILE_SIZE
        else:
            assert tile.texture_offset in {k * TILE_SIZE for k in range(TILE_TYPES)}


def test_background_empty_for_tiny_arena():
    tiles, _ = create_background(IntRect(0, 0, 40, 40), random.Random(0))
    assert tiles == []


def test_tile_vertices_and_tex_coords():
    tile = Tile(100, 150, TILE_TYPES * TILE_SIZE)
    assert tile.vertices == (
        Vec2(100, 150),
        Vec2(100 + TILE_SIZE, 150),
        Vec2(100 + TILE_SIZE, 150 + TILE_SIZE),
        Vec2(100, 150 + TILE_SIZE),
    )
    offset = TILE_TYPES * TILE_SIZE
    assert tile.tex_coords[0] == Vec2(0, offset)
    assert tile.tex_coords[2] == Vec2(TILE_SIZE, TILE_SIZE + offset)


def test_background_is_deterministic_for_seed():
    a, _ = create_background(ARENA, random.Random(42))
    b, _ = create_background(ARENA, random.Random(42))
    assert a == b


def test_horde_size_and_life():
    zombies = create_horde(8, ARENA, random.Random(5))
    assert len(zombies) == 8
    assert all(z.alive for z in zombies)
    assert all(z.kind in set(ZombieKind) for z in zombies)


def test_horde_spawns_on_edges():
    zombies = create_horde(30, ARENA, random.Random(9))
    min_x, max_x = ARENA.left + 20, ARENA.width - 20
    min_y, max_y = ARENA.top + 20, ARENA.height - 20
    for z in zombies:
        x, y = z.position.x, z.position.y
        assert x in (min_x, max_x) or y in (min_y, max_y)
        assert min_x <= x < max_x + min_x
        assert min_y <= y < max_y + min_y


def test_empty_horde():
    assert create_horde(0, ARENA, random.Random(0)) == []


def test_horde_needs_room():
    with pytest.raises(ValueError):
        create_horde(5, IntRect(0, 0, 10, 10), random.Random(0))