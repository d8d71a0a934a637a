"""The windowed game: asset loading, input handling and drawing with pygame."""

from __future__ import annotations

import argparse
import time
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .arena import TILE_SIZE, TILE_TYPES
from .bullet import BULLET_SIZE
from .geometry import Vec2
from .session import GameSession, State

RESOLUTION = Vec2(1920, 1080)
FONT_FILE = "zombiecontrol.ttf"

IMAGE_NAMES = (
    "player",
    "crosshair",
    "background_sheet",
    "background",
    "ammo_icon",
    "health_pickup",
    "ammo_pickup",
    "bloater",
    "chaser",
    "crawler",
    "blood",
)

_PLACEHOLDER_SIZE = (50, 50)
_PLACEHOLDER_SIZES = {
    "background_sheet": (TILE_SIZE, TILE_SIZE * (TILE_TYPES + 1)),
    "background": (int(RESOLUTION.x), int(RESOLUTION.y)),
}
_PLACEHOLDER_COLOR = (255, 0, 255)

LEVEL_UP_LINES = (
    "1- Increased rate of fire",
    "2- Increased clip size(next reload)",
    "3- Increased max health",
    "4- Increased run speed",
    "5- More and better health pickups",
    "6- More and better ammo pickups",
)
PAUSED_LINES = ("Press Enter ", "to continue")
GAME_OVER_TEXT = "Press Enter to play"

_WHITE = (255, 255, 255)
_RED = (255, 0, 0)
_BLACK = (0, 0, 0)

_UPGRADE_KEYS = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
    pygame.K_6: 6,
}


def _placeholder(name: str) -> pygame.Surface:
    surface = pygame.Surface(_PLACEHOLDER_SIZES.get(name, _PLACEHOLDER_SIZE))
    surface.fill(_PLACEHOLDER_COLOR)
    return surface


def _load_image(path: Path, name: str) -> pygame.Surface:
    """Load an image, or stand in a plain placeholder when it is missing or unreadable."""
    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError):
        return _placeholder(name)
    if pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


@dataclass
class Assets:
    """The game's images and the path of its font, if present."""

    images: dict[str, pygame.Surface] = field(default_factory=dict)
    font_path: Path | None = None

    @classmethod
    def load(cls, root: str | Path) -> Assets:
        """Load ``graphics/*.png`` and ``fonts/zombiecontrol.ttf`` below ``root``."""
        root = Path(root)
        images = {
            name: _load_image(root / "graphics" / f"{name}.png", name) for name in IMAGE_NAMES
        }
        font_path = root / "fonts" / FONT_FILE
        return cls(images, font_path if font_path.is_file() else None)

    def __getitem__(self, name: str) -> pygame.Surface:
        return self.images[name]


def screen_to_world(mouse_screen: Vec2, view_center: Vec2, resolution: Vec2) -> Vec2:
    """Map a window pixel to world coordinates for a view the size of the window."""
    return Vec2(
        mouse_screen.x - resolution.x / 2 + view_center.x,
        mouse_screen.y - resolution.y / 2 + view_center.y,
    )


class _Renderer:
    """Draws a game session onto a pygame surface."""

    def __init__(self, screen: pygame.Surface, assets: Assets, resolution: Vec2) -> None:
        self.screen = screen
        self.assets = assets
        self.resolution = resolution
        font_file = str(assets.font_path) if assets.font_path else None
        self.fonts = {size: pygame.font.Font(font_file, size) for size in (55, 80, 125, 155)}

    def _text(self, text: str, size: int, position: tuple[int, int]) -> None:
        if text:
            self.screen.blit(self.fonts[size].render(text, True, _WHITE), position)

    def _lines(self, lines: tuple[str, ...], size: int, position: tuple[int, int]) -> None:
        x, y = position
        height = self.fonts[size].get_linesize()
        for offset, line in enumerate(lines):
            self._text(line, size, (x, y + offset * height))

    def _centered(self, image: pygame.Surface, world: Vec2, camera: Vec2, angle: float = 0.0) -> None:
        if angle:
            image = pygame.transform.rotate(image, -angle)
        rect = image.get_rect(center=(round(world.x - camera.x), round(world.y - camera.y)))
        self.screen.blit(image, rect)

    def draw(self, session: GameSession) -> None:
        state = session.state
        if state is State.PLAYING:
            self._draw_world(session)
            self._draw_hud(session)
        elif state is State.LEVELING_UP:
            self.screen.blit(self.assets["background"], (0, 0))
            self._lines(LEVEL_UP_LINES, 80, (150, 250))
        elif state is State.PAUSED:
            self._lines(PAUSED_LINES, 155, (400, 400))
        elif state is State.GAME_OVER:
            self.screen.blit(self.assets["background"], (0, 0))
            self._text(GAME_OVER_TEXT, 125, (250, 850))
            self._text(session.hud["score"], 55, (20, 0))
            self._text(session.hud["hi_score"], 55, (1400, 0))

    def _draw_world(self, session: GameSession) -> None:
        self.screen.fill(_BLACK)
        center = session.view_center
        camera = Vec2(center.x - self.resolution.x / 2, center.y - self.resolution.y / 2)

        sheet = self.assets["background_sheet"]
        for tile in session.background:
            area = pygame.Rect(0, tile.texture_offset, tile.size, tile.size)
            self.screen.blit(sheet, (round(tile.x - camera.x), round(tile.y - camera.y)), area)

        for bullet in session.bullets:
            if bullet.in_flight:
                pos = bullet.shape_position
                rect = pygame.Rect(
                    round(pos.x - camera.x), round(pos.y - camera.y), int(BULLET_SIZE), int(BULLET_SIZE)
                )
                pygame.draw.rect(self.screen, _WHITE, rect)

        player = session.player
        self._centered(self.assets["player"], player.sprite_position, camera, player.rotation)
        for zombie in session.zombies:
            if zombie.texture is not None:
                self._centered(self.assets[zombie.texture], zombie.sprite_position, camera, zombie.rotation)
        self._centered(self.assets["crosshair"], session.crosshair, camera)

        if session.ammo_pickup.spawned:
            self._centered(self.assets["ammo_pickup"], session.ammo_pickup.position, camera)
        if session.health_pickup.spawned:
            self._centered(self.assets["health_pickup"], session.health_pickup.position, camera)

    def _draw_hud(self, session: GameSession) -> None:
        width = max(session.health_bar_width, 0)
        pygame.draw.rect(self.screen, _RED, pygame.Rect(450, 980, width, 70))
        self.screen.blit(self.assets["ammo_icon"], (20, 980))
        hud = session.hud
        self._text(hud["ammo"], 55, (200, 980))
        self._text(hud["score"], 55, (20, 0))
        self._text(hud["hi_score"], 55, (1400, 0))
        self._text(hud["wave"], 55, (1250, 980))
        self._text(hud["zombies"], 55, (1500, 980))


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="zombiearena", description="Survive waves of zombies.")
    parser.add_argument("--assets", default=".", help="directory holding graphics/ and fonts/")
    parser.add_argument("--windowed", action="store_true", help="run in a window, not full screen")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the game until the window is closed or Escape is pressed."""
    args = _parse_args(argv)
    resolution = RESOLUTION

    pygame.init()
    try:
        flags = 0 if args.windowed else pygame.FULLSCREEN
        screen = pygame.display.set_mode((int(resolution.x), int(resolution.y)), flags)
        pygame.display.set_caption("Zombie Arena")
        pygame.mouse.set_visible(True)

        assets = Assets.load(args.assets)
        renderer = _Renderer(screen, assets, resolution)
        session = GameSession(resolution)
        last_tick = time.perf_counter()
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_RETURN:
                        if session.press_enter() is State.PLAYING:
                            last_tick = time.perf_counter()
                    elif event.key == pygame.K_r:
                        session.reload()
                    elif event.key in _UPGRADE_KEYS and session.state is State.LEVELING_UP:
                        session.choose_upgrade(_UPGRADE_KEYS[event.key])
                        last_tick = time.perf_counter()

            keys = pygame.key.get_pressed()
            if keys[pygame.K_ESCAPE]:
                running = False

            mx, my = pygame.mouse.get_pos()
            mouse_screen = Vec2(mx, my)
            mouse_world = screen_to_world(mouse_screen, session.view_center, resolution)

            if session.state is State.PLAYING:
                session.set_movement(keys[pygame.K_w], keys[pygame.K_s], keys[pygame.K_a], keys[pygame.K_d])
                if pygame.mouse.get_pressed()[0]:
                    session.fire(session.crosshair)

                now = time.perf_counter()
                dt, last_tick = now - last_tick, now
                session.update(dt, mouse_screen, mouse_world)

            renderer.draw(session)
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0