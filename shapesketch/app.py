"""The interactive sketching window."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from .cursor import OrthographicCamera
from .drawing import DrawMode, MouseButton, Sketcher, mode_for_key
from .shapes import (
    DEFAULT_RESOLUTION,
    Arc,
    Circle,
    Dot,
    Line,
    Vec3,
    arc_points,
    circle_points,
)
from .world import ReloadLevel, World

BACKGROUND = (30, 30, 30)
WHITE = (255, 255, 255)
CONE_COLOR = (26, 102, 102)
CONE_RADIUS = 0.5
DOT_RADIUS = 0.05

_PYGAME_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}


@dataclass(frozen=True)
class SceneObject:
    """A fixed part of the scene, such as the camera, the light or the cone."""

    name: str


class Application:
    """Ties the world, the sketcher and the camera to keyboard, mouse and screen."""

    def __init__(self, width: int, height: int) -> None:
        self.camera = OrthographicCamera(width, height)
        self.world = World()
        self.sketcher = Sketcher(self.world)
        self.cursor = Vec3()
        self._setup()

    @property
    def mode(self) -> DrawMode:
        return self.sketcher.mode

    def _setup(self) -> None:
        for name in ("camera", "light", "cone"):
            self.world.spawn(SceneObject(name), ReloadLevel.SOFT)

    def handle_key(self, key: str, ctrl: bool = False, shift: bool = False) -> Optional[str]:
        """Handle a key press; return the reload message if a reload happened."""
        mode = mode_for_key(key)
        if mode is not None:
            self.sketcher.set_mode(mode)
        if ctrl and key.lower() == "r":
            return self.reload(ReloadLevel.HARD if shift else ReloadLevel.SOFT)
        return None

    def move_cursor(self, x: float, y: float) -> Vec3:
        """Move the cursor to a pixel; outside the window it keeps its last position."""
        position = self.camera.screen_to_world(x, y)
        if position is not None:
            self.cursor = position
        return self.cursor

    def handle_mouse(self, button: MouseButton, x: float, y: float) -> list:
        """Handle a mouse press at a pixel; return the shapes spawned."""
        self.move_cursor(x, y)
        return self.sketcher.click(button, self.cursor)

    def reload(self, level: ReloadLevel) -> str:
        """Remove entities up to ``level``, drop the drawing in progress and rebuild the scene."""
        self.world.despawn_up_to(level)
        self.sketcher.reset()
        self._setup()
        return "Soft reloaded." if level == ReloadLevel.SOFT else "Hard reloaded."

    def _pixel(self, point: Vec3) -> tuple[int, int]:
        x, y = self.camera.world_to_screen(point)
        return round(x), round(y)

    def _pixels(self, length: float) -> int:
        return max(1, round(length / self.camera.scale))

    def _draw(self, surface: pygame.Surface, shape) -> None:
        if isinstance(shape, SceneObject):
            if shape.name == "cone":
                pygame.draw.circle(
                    surface, CONE_COLOR, self._pixel(Vec3()), self._pixels(CONE_RADIUS)
                )
        elif isinstance(shape, Dot):
            pygame.draw.circle(
                surface, WHITE, self._pixel(shape.position), max(2, self._pixels(DOT_RADIUS))
            )
        elif isinstance(shape, Line):
            pygame.draw.line(surface, WHITE, self._pixel(shape.start), self._pixel(shape.end))
        elif isinstance(shape, Circle):
            points = [self._pixel(p) for p in circle_points(shape.center, shape.radius, DEFAULT_RESOLUTION)]
            pygame.draw.lines(surface, WHITE, True, points)
        elif isinstance(shape, Arc):
            points = [self._pixel(p) for p in arc_points(shape, DEFAULT_RESOLUTION)]
            pygame.draw.lines(surface, WHITE, False, points)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the scene, every shape and the guides of the shape in progress."""
        surface.fill(BACKGROUND)
        for shape in self.world:
            self._draw(surface, shape)
        for guide in self.sketcher.preview(self.cursor):
            self._draw(surface, guide)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="shapesketch", description="Sketch shapes on a plane.")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("shapesketch")
        app = Application(args.width, args.height)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    message = app.handle_key(
                        pygame.key.name(event.key),
                        bool(event.mod & pygame.KMOD_LCTRL),
                        bool(event.mod & pygame.KMOD_LSHIFT),
                    )
                    if message:
                        print(message)
                elif event.type == pygame.MOUSEMOTION:
                    app.move_cursor(*event.pos)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    button = _PYGAME_BUTTONS.get(event.button)
                    if button is not None:
                        app.handle_mouse(button, *event.pos)
            app.render(screen)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0