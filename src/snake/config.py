from dataclasses import dataclass
from enum import Enum
from typing import Optional

# ----- Window & grid -----
TILE_SIZE = 16
MAP_SIZE = 50
SCREEN_WIDTH, SCREEN_HEIGHT = MAP_SIZE * TILE_SIZE, MAP_SIZE * TILE_SIZE
WINDOW_TITLE = "Snake Game"
ICON_PATH = "icon/icon.png"

# ----- Colors -----
BG         = (0, 0, 0)
HEAD_GREEN = (0, 117, 44)
BODY_GREEN = (0, 228, 48)
RED        = (230, 41, 55)

# ----- Pacing -----
GAME_SPEED = 5    # frames per snake step
TARGET_FPS = 60

# ----- Directions (dx, dy) -----
class Direction(Enum):
    RIGHT = (1, 0)
    DOWN  = (0, 1)
    LEFT  = (-1, 0)
    UP    = (0, -1)

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def is_reverse_of(self, other: "Direction") -> bool:
        return self.opposite is other

# ----- Tunables (what a launcher may override) -----
@dataclass
class Config:
    seed: Optional[int] = None
    fps: int = TARGET_FPS
    game_speed: int = GAME_SPEED
    icon_path: str = ICON_PATH
    vsync: bool = True
