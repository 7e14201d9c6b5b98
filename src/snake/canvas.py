# canvas.py
from __future__ import annotations
from typing import Dict, Optional, Protocol, Set, Tuple
import logging

import pygame # type: ignore

from .config import SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, Direction, Config

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

KEY_BINDINGS: Dict[int, Direction] = {
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_UP:    Direction.UP,
}


class Canvas(Protocol):
    """What the game loop needs from a window: key presses, rectangles, frame flips."""

    def key_pressed(self, direction: Direction) -> bool: ...
    def clear_background(self, color: Color) -> None: ...
    def draw_filled_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None: ...
    def should_close(self) -> bool: ...
    def present_frame(self) -> None: ...


class PygameCanvas:
    """
    Canvas backed by a pygame surface.

    should_close() drains the event queue, so it must run once at the start of
    every frame; key_pressed() then reports the KEYDOWN events seen by that call.
    """

    def __init__(self, screen: pygame.Surface, clock: Optional[pygame.time.Clock] = None, fps: int = 0):
        self.screen = screen
        self.clock = clock
        self.fps = fps
        self.pressed: Set[Direction] = set()
        self.close_requested = False

    def should_close(self) -> bool:
        self.pressed.clear()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close_requested = True
            elif event.type == pygame.KEYDOWN and event.key in KEY_BINDINGS:
                self.pressed.add(KEY_BINDINGS[event.key])
        return self.close_requested

    def key_pressed(self, direction: Direction) -> bool:
        return direction in self.pressed

    def clear_background(self, color: Color) -> None:
        self.screen.fill(color)

    def draw_filled_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        pygame.draw.rect(self.screen, color, pygame.Rect(x, y, w, h))

    def present_frame(self) -> None:
        pygame.display.flip()
        if self.clock is not None:
            self.clock.tick(self.fps)


def load_icon(path: str) -> pygame.Surface:
    """Load the window icon. Any failure is fatal."""
    try:
        return pygame.image.load(path)
    except (pygame.error, OSError) as e:
        logger.error("Failed to load icon image %r: %s", path, e)
        raise SystemExit(f"Failed to load icon image: {e}") from e


def _set_mode(vsync: bool) -> pygame.Surface:
    size = (SCREEN_WIDTH, SCREEN_HEIGHT)
    if vsync:
        try:
            return pygame.display.set_mode(size, vsync=1)
        except pygame.error as e:
            logger.warning("vsync unavailable (%s), falling back to clock pacing", e)
    return pygame.display.set_mode(size)


def open_window(config: Config, icon: pygame.Surface) -> PygameCanvas:
    """Initialize pygame and open the game window. Caller owns pygame.quit()."""
    pygame.init()
    try:
        pygame.display.set_icon(icon)
        pygame.display.set_caption(WINDOW_TITLE)
        screen = _set_mode(config.vsync)
    except pygame.error as e:
        logger.error("Failed to open window: %s", e)
        pygame.quit()
        raise SystemExit(f"Failed to open window: {e}") from e
    return PygameCanvas(screen, pygame.time.Clock(), config.fps)
