import random

import pytest

from zombiearena.geometry import Vec2
from zombiearena.session import (
    HUD_UPDATE_INTERVAL,
    KILL_SCORE,
    MAX_BULLETS,
    START_BULLETS_SPARE,
    START_CLIP_SIZE,
    GameSession,
    State,
)
from zombiearena.zombie import Zombie, ZombieKind

RESOLUTION = Vec2(1920, 1080)
SCREEN_CENTER = Vec2(960, 540)


def _new_session(seed=7):
    return GameSession(RESOLUTION, random.Random(seed))


def _playing(choice=4, seed=7):
    session = _new_session(seed)
    session.press_enter()
    session.choose_upgrade(choice)
    return session


def _no_pickups(session):
    session.health_pickup.spawned = False
    session.ammo_pickup.spawned = False


def _zombie_at(pos, health=0):
    zombie = Zombie()
    zombie.spawn(pos.x, pos.y, ZombieKind.CHASER, random.Random(0))
    zombie.health = health
    return zombie


def test_starts_in_game_over():
    assert _new_session().state is State.GAME_OVER


def test_enter_cycle():
    session = _new_session()
    assert session.press_enter() is State.LEVELING_UP
    assert session.press_enter() is State.LEVELING_UP
    session.choose_upgrade(5)
    assert session.state is State.PLAYING
    assert session.press_enter() is State.PAUSED
    assert session.press_enter() is State.PLAYING


def test_new_game_resets_run():
    session = _playing(choice=2)
    session.score = 50
    session.bullets_spare = 0
    session.state = State.GAME_OVER
    session.press_enter()
    assert session.wave == 0
    assert session.score == 0
    assert session.clip_size == START_CLIP_SIZE
    assert session.bullets_spare == START_BULLETS_SPARE
    assert session.bullets_in_clip == START_CLIP_SIZE


def test_upgrade_starts_wave():
    session = _playing(choice=1)
    assert session.wave == 1
    assert session.fire_rate == 2
    assert session.arena.width == session.arena.height == 500
    assert len(session.zombies) == session.num_zombies_alive == 2
    assert session.player.position == Vec2(250, 250)
    assert session.health_pickup.spawned and session.ammo_pickup.spawned


def test_clip_upgrade_doubles():
    session = _playing(choice=2)
    assert session.clip_size == 2 * START_CLIP_SIZE


def test_upgrade_outside_levelling_is_ignored():
    session = _playing()
    assert session.choose_upgrade(1) is False
    assert session.wave == 1


def test_unknown_upgrade_raises():
    session = _new_session()
    session.press_enter()
    with pytest.raises(ValueError):
        session.choose_upgrade(7)


def test_reload():
    session = _playing(choice=2)
    assert session.reload() is True
    assert session.bullets_in_clip == session.clip_size
    assert session.bullets_spare == START_BULLETS_SPARE - session.clip_size
    session.bullets_spare = 5
    assert session.reload() is True
    assert (session.bullets_in_clip, session.bullets_spare) == (5, 0)
    assert session.reload() is False
    assert session.bullets_in_clip == 5


def test_reload_needs_playing():
    session = _playing()
    session.press_enter()
    spare = session.bullets_spare
    assert session.reload() is False
    assert session.bullets_spare == spare


def test_fire_respects_cooldown_and_clip():
    session = _playing()
    _no_pickups(session)
    target = Vec2(400, 250)
    assert session.fire(target) is False
    session.update(1.1, SCREEN_CENTER, target)
    assert session.fire(target) is True
    assert session.bullets_in_clip == START_CLIP_SIZE - 1
    assert session.current_bullet == 1
    assert session.bullets[0].in_flight
    assert session.fire(target) is False
    session.bullets_in_clip = 0
    session.update(1.1, SCREEN_CENTER, target)
    assert session.fire(target) is False


def test_bullet_index_wraps():
    session = _playing()
    session.current_bullet = MAX_BULLETS - 1
    session.game_time = 10.0
    assert session.fire(Vec2(0, 0)) is True
    assert session.current_bullet == 0


def test_movement_moves_player():
    session = _playing()
    _no_pickups(session)
    session.zombies = []
    start = session.player.position
    session.set_movement(True, False, False, False)
    session.update(0.1, SCREEN_CENTER, SCREEN_CENTER)
    assert session.player.position.y < start.y
    assert session.player.position.x == start.x


def test_paused_does_not_advance():
    session = _playing()
    session.press_enter()
    session.update(1.0, SCREEN_CENTER, SCREEN_CENTER)
    assert session.game_time == 0.0


def test_killing_last_zombie_levels_up():
    session = _playing()
    _no_pickups(session)
    spot = Vec2(100, 100)
    session.zombies = [_zombie_at(spot)]
    session.num_zombies_alive = 1
    session.bullets[0].shoot(spot.x, spot.y, spot.x + 50, spot.y)
    session.update(0.001, SCREEN_CENTER, spot)
    assert session.score == KILL_SCORE
    assert session.hi_score == KILL_SCORE
    assert session.num_zombies_alive == 0
    assert not session.zombies[0].alive
    assert not session.bullets[0].in_flight
    assert session.state is State.LEVELING_UP


def test_zombie_hurts_player():
    session = _playing()
    _no_pickups(session)
    session.zombies = [_zombie_at(session.player.position, health=3)]
    health = session.player.health
    session.update(0.25, SCREEN_CENTER, SCREEN_CENTER)
    assert session.player.health == health - 1
    assert session.state is State.PLAYING


def test_zombie_kills_player():
    session = _playing()
    _no_pickups(session)
    session.zombies = [_zombie_at(session.player.position, health=3)]
    session.player.health = 1
    session.update(0.25, SCREEN_CENTER, SCREEN_CENTER)
    assert session.state is State.GAME_OVER


def test_ammo_pickup_adds_spare():
    session = _playing()
    session.zombies = []
    session.health_pickup.spawned = False
    session.ammo_pickup.position = session.player.position
    session.ammo_pickup.spawned = True
    spare = session.bullets_spare
    session.update(0.01, SCREEN_CENTER, SCREEN_CENTER)
    assert session.bullets_spare == spare + session.ammo_pickup.value
    assert not session.ammo_pickup.spawned


def test_hud_text_formats():
    session = _playing()
    hud = session.hud_text()
    assert hud["ammo"] == f"{START_CLIP_SIZE}/{START_BULLETS_SPARE}"
    assert hud["score"] == "Score:0"
    assert hud["hi_score"] == "Hi Score:0"
    assert hud["wave"] == "Wave:1"
    assert hud["zombies"] == f"Zombies:{len(session.zombies)}"


def test_hud_refreshes_after_interval():
    session = _playing()
    _no_pickups(session)
    session.zombies = []
    assert session.hud["zombies"] == "Zombies: 100"
    session.frames_since_hud_update = HUD_UPDATE_INTERVAL
    session.update(0.01, SCREEN_CENTER, SCREEN_CENTER)
    assert session.hud == session.hud_text()
    assert session.frames_since_hud_update == 0


def test_health_bar_tracks_health():
    session = _playing()
    session.player.health = 40
    assert session.health_bar_width == 40 * 3