"""The game's rules and state, independent of any window or input device."""

from __future__ import annotations

import random
from enum import Enum, auto

from .arena import Tile, create_background, create_horde
from .bullet import Bullet
from .geometry import IntRect, Vec2
from .pickup import Pickup, PickupKind
from .player import Direction, Player
from .zombie import Zombie

MAX_BULLETS = 100
START_BULLETS_SPARE = 24
START_CLIP_SIZE = 6
START_FIRE_RATE = 1.0
KILL_SCORE = 10
WAVE_ARENA_SIZE = 500
ZOMBIES_PER_WAVE = 2
HUD_UPDATE_INTERVAL = 1000
HEALTH_BAR_SCALE = 3
UPGRADE_CHOICES = range(1, 7)


class State(Enum):
    PAUSED = auto()
    LEVELING_UP = auto()
    GAME_OVER = auto()
    PLAYING = auto()


class GameSession:
    """One run of the game: waves, ammunition, score and collisions."""

    def __init__(self, resolution: Vec2 = Vec2(1920, 1080), rng: random.Random | None = None) -> None:
        self.resolution = resolution
        self.rng = rng if rng is not None else random.Random()
        self.state = State.GAME_OVER
        self.player = Player()
        self.bullets = [Bullet() for _ in range(MAX_BULLETS)]
        self.health_pickup = Pickup(PickupKind.HEALTH, self.rng)
        self.ammo_pickup = Pickup(PickupKind.AMMO, self.rng)
        self.arena = IntRect()
        self.background: list[Tile] = []
        self.zombies: list[Zombie] = []
        self.num_zombies_alive = 0
        self.game_time = 0.0
        self.last_fired_ms = 0
        self.crosshair = Vec2()
        self.score = 0
        self.hi_score = 0
        self.frames_since_hud_update = 0
        self.hud = {
            "ammo": "",
            "score": "",
            "hi_score": f"Hi Score:{self.hi_score}",
            "wave": "Wave: 0",
            "zombies": "Zombies: 100",
        }
        self._reset_run()

    def _reset_run(self) -> None:
        self.wave = 0
        self.current_bullet = 0
        self.bullets_spare = START_BULLETS_SPARE
        self.bullets_in_clip = START_CLIP_SIZE
        self.clip_size = START_CLIP_SIZE
        self.fire_rate = START_FIRE_RATE
        self.score = 0

    @property
    def game_time_ms(self) -> int:
        return int(self.game_time * 1000)

    @property
    def health_bar_width(self) -> int:
        return self.player.health * HEALTH_BAR_SCALE

    @property
    def view_center(self) -> Vec2:
        return self.player.position

    def press_enter(self) -> State:
        """Pause, resume, or start a new game, depending on the state; return the new state."""
        if self.state is State.PLAYING:
            self.state = State.PAUSED
        elif self.state is State.PAUSED:
            self.state = State.PLAYING
        elif self.state is State.GAME_OVER:
            self.state = State.LEVELING_UP
            self._reset_run()
            self.player.reset_stats()
        return self.state

    def reload(self) -> bool:
        """Refill the clip from spare bullets while playing; return True if any were loaded."""
        if self.state is not State.PLAYING or self.bullets_spare <= 0:
            return False
        loaded = min(self.clip_size, self.bullets_spare)
        self.bullets_in_clip = loaded
        self.bullets_spare -= loaded
        return True

    def choose_upgrade(self, choice: int) -> bool:
        """Apply upgrade ``choice`` (1-6) and start the next wave.

        Returns False when not levelling up; raises ValueError for an unknown choice.
        """
        if choice not in UPGRADE_CHOICES:
            raise ValueError(f"unknown upgrade choice: {choice!r}")
        if self.state is not State.LEVELING_UP:
            return False
        if choice == 1:
            self.fire_rate += 1
        elif choice == 2:
            self.clip_size += self.clip_size
        elif choice == 3:
            self.player.upgrade_health()
        elif choice == 4:
            self.player.upgrade_speed()
        self.state = State.PLAYING
        self._start_wave()
        return True

    def _start_wave(self) -> None:
        self.wave += 1
        size = self.wave * WAVE_ARENA_SIZE
        self.arena = IntRect(0, 0, size, size)
        self.background, tile_size = create_background(self.arena, self.rng)
        self.player.spawn(self.arena, self.resolution, tile_size)
        self.zombies = create_horde(self.wave * ZOMBIES_PER_WAVE, self.arena, self.rng)
        self.num_zombies_alive = len(self.zombies)
        self.health_pickup.set_arena(self.arena)
        self.ammo_pickup.set_arena(self.arena)

    def fire(self, target: Vec2) -> bool:
        """Shoot towards ``target`` if playing, loaded and off cooldown; return True if fired."""
        if self.state is not State.PLAYING:
            return False
        cooldown = 1000 / self.fire_rate
        if self.game_time_ms - self.last_fired_ms <= cooldown or self.bullets_in_clip <= 0:
            return False
        center = self.player.position
        self.bullets[self.current_bullet].shoot(center.x, center.y, target.x, target.y)
        self.current_bullet = (self.current_bullet + 1) % MAX_BULLETS
        self.last_fired_ms = self.game_time_ms
        self.bullets_in_clip -= 1
        return True

    def set_movement(self, up: bool, down: bool, left: bool, right: bool) -> None:
        """Set which directions the player is walking in, while playing."""
        if self.state is not State.PLAYING:
            return
        for pressed, direction in (
            (up, Direction.UP),
            (down, Direction.DOWN),
            (left, Direction.LEFT),
            (right, Direction.RIGHT),
        ):
            if pressed:
                self.player.move(direction)
            else:
                self.player.stop(direction)

    def update(self, dt: float, mouse_screen: Vec2, mouse_world: Vec2) -> None:
        """Advance the game by ``dt`` seconds while playing."""
        if self.state is not State.PLAYING:
            return
        self.game_time += dt
        self.crosshair = mouse_world

        self.player.update(dt, mouse_screen)
        player_position = self.player.position
        for zombie in self.zombies:
            zombie.update(dt, player_position)
        for bullet in self.bullets:
            if bullet.in_flight:
                bullet.update(dt)
        self.health_pickup.update(dt)
        self.ammo_pickup.update(dt)

        self._bullet_collisions()
        self._zombie_collisions()
        self._pickup_collisions()

        self.frames_since_hud_update += 1
        if self.frames_since_hud_update > HUD_UPDATE_INTERVAL:
            self.hud = self.hud_text()
            self.frames_since_hud_update = 0

    def _bullet_collisions(self) -> None:
        for bullet in self.bullets:
            for zombie in self.zombies:
                if not bullet.in_flight:
                    break
                if not zombie.alive or not bullet.bounds().intersects(zombie.bounds()):
                    continue
                bullet.stop()
                if zombie.hit():
                    self.score += KILL_SCORE
                    self.hi_score = max(self.hi_score, self.score)
                    self.num_zombies_alive -= 1
                    if self.num_zombies_alive == 0:
                        self.state = State.LEVELING_UP

    def _zombie_collisions(self) -> None:
        for zombie in self.zombies:
            if zombie.alive and self.player.bounds().intersects(zombie.bounds()):
                self.player.hit(self.game_time_ms)
                if self.player.health <= 0:
                    self.state = State.GAME_OVER

    def _pickup_collisions(self) -> None:
        if self.health_pickup.spawned and self.player.bounds().intersects(self.health_pickup.bounds()):
            self.player.increase_health_level(self.health_pickup.collect())
        if self.ammo_pickup.spawned and self.player.bounds().intersects(self.ammo_pickup.bounds()):
            self.bullets_spare += self.ammo_pickup.collect()

    def hud_text(self) -> dict[str, str]:
        """The heads-up display texts for the current state of play."""
        return {
            "ammo": f"{self.bullets_in_clip}/{self.bullets_spare}",
            "score": f"Score:{self.score}",
            "hi_score": f"Hi Score:{self.hi_score}",
            "wave": f"Wave:{self.wave}",
            "zombies": f"Zombies:{self.num_zombies_alive}",
        }