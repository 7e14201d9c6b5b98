# game.py
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Iterable, Optional, Tuple
import itertools
import logging
import random

from .canvas import Canvas
from .config import (
    TILE_SIZE, MAP_SIZE,
    BG, HEAD_GREEN, BODY_GREEN, RED,
    GAME_SPEED,
    Direction, Config,
)

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# ---------- Helpers ----------
def wrap(x: int, y: int) -> Cell:
    """Fold a cell that stepped one tile off the grid back onto the opposite edge."""
    if x >= MAP_SIZE:
        x = 0
    if x < 0:
        x = MAP_SIZE - 1
    if y >= MAP_SIZE:
        y = 0
    if y < 0:
        y = MAP_SIZE - 1
    return (x, y)

def next_head(cell: Cell, direction: Direction) -> Cell:
    dx, dy = direction.value
    return wrap(cell[0] + dx, cell[1] + dy)

def draw_cell(canvas: Canvas, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    canvas.draw_filled_rect(gx * TILE_SIZE, gy * TILE_SIZE, TILE_SIZE, TILE_SIZE, color)

# ---------- Snake ----------
@dataclass
class Snake:
    body: Deque[Cell]              # head at index 0
    direction: Direction = Direction.RIGHT
    pending: Direction = Direction.RIGHT

    @classmethod
    def new(cls) -> Snake:
        mid = MAP_SIZE // 2
        return cls(body=deque([(4, mid), (3, mid), (2, mid)]))

    @classmethod
    def from_cells(cls, cells: Iterable[Cell], direction: Direction = Direction.RIGHT) -> Snake:
        return cls(body=deque(cells), direction=direction, pending=direction)

    @property
    def head(self) -> Cell:
        return self.body[0]

    def update(self) -> None:
        """
        Advance one grid step.
        A pending reversal is not committed; it stays buffered until input replaces it.
        """
        if self.pending is not self.direction and not self.pending.is_reverse_of(self.direction):
            self.direction = self.pending

        self.body.appendleft(next_head(self.head, self.direction))
        self.body.pop()

    def grow(self) -> None:
        # The duplicated tail is what the next update() pops, so length nets +1.
        self.body.append(self.body[-1])

    def collides_with_self(self) -> bool:
        head = self.head
        return any(cell == head for cell in itertools.islice(self.body, 1, None))

    def draw(self, canvas: Canvas) -> None:
        for i, (x, y) in enumerate(self.body):
            draw_cell(canvas, x, y, HEAD_GREEN if i == 0 else BODY_GREEN)

# ---------- Food ----------
def random_cell(rng: random.Random) -> Cell:
    return (rng.randrange(MAP_SIZE), rng.randrange(MAP_SIZE))

@dataclass
class Food:
    position: Cell
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def new(cls, rng: Optional[random.Random] = None) -> Food:
        rng = rng if rng is not None else random.Random()
        return cls(position=random_cell(rng), rng=rng)

    def respawn(self) -> None:
        """Move to a uniformly random cell. Snake-occupied cells are not excluded."""
        self.position = random_cell(self.rng)

    def draw(self, canvas: Canvas) -> None:
        draw_cell(canvas, self.position[0], self.position[1], RED)

# ---------- Game ----------
class Phase(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"

# Poll order matters: a later accepted key overwrites an earlier one in the same frame.
POLL_ORDER = (Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP)

@dataclass
class Game:
    snake: Snake
    food: Food
    frame_count: int = 0
    phase: Phase = Phase.RUNNING
    game_speed: int = GAME_SPEED

    def handle_input(self, canvas: Canvas) -> None:
        """Buffer key presses as the pending direction (no 180° turns against the committed one)."""
        for direction in POLL_ORDER:
            if canvas.key_pressed(direction) and not direction.is_reverse_of(self.snake.direction):
                self.snake.pending = direction

    def draw(self, canvas: Canvas) -> None:
        canvas.clear_background(BG)
        self.snake.draw(canvas)
        self.food.draw(canvas)
        canvas.present_frame()

    def run_frame(self, canvas: Canvas) -> bool:
        """
        Run one frame: input, gated movement, collision, food, draw.
        Returns False once the game is over; the collision frame is not drawn.
        """
        if self.phase is Phase.TERMINATED:
            return False

        self.handle_input(canvas)

        if self.frame_count % self.game_speed == 0:
            self.snake.update()

        if self.snake.collides_with_self():
            self.phase = Phase.TERMINATED
            logger.info("Game over: snake length %d after %d frames",
                        len(self.snake.body), self.frame_count)
            return False

        if self.snake.head == self.food.position:
            self.food.respawn()
            self.snake.grow()
            logger.debug("Food eaten at frame %d, length now %d",
                         self.frame_count, len(self.snake.body))

        self.draw(canvas)
        self.frame_count += 1
        return True

def new_game(config: Optional[Config] = None) -> Game:
    config = config if config is not None else Config()
    return Game(
        snake=Snake.new(),
        food=Food.new(random.Random(config.seed)),
        game_speed=config.game_speed,
    )

def run(game: Game, canvas: Canvas) -> Phase:
    """Drive frames until the window asks to close or the snake bites itself."""
    while not canvas.should_close():
        if not game.run_frame(canvas):
            break
    return game.phase
