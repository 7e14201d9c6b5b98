from typing import List, Set, Tuple

import pytest

from src.snake.config import Direction


class RecordingCanvas:
    """Fake canvas: scripted key presses per frame, records every draw call."""

    def __init__(self, frames_before_close: int = 10_000):
        self.calls: List[Tuple] = []
        self.pressed: Set[Direction] = set()
        self.frames_before_close = frames_before_close
        self.polls = 0

    def press(self, *directions: Direction) -> None:
        self.pressed = set(directions)

    def key_pressed(self, direction: Direction) -> bool:
        return direction in self.pressed

    def clear_background(self, color) -> None:
        self.calls.append(("clear", color))

    def draw_filled_rect(self, x, y, w, h, color) -> None:
        self.calls.append(("rect", x, y, w, h, color))

    def should_close(self) -> bool:
        self.polls += 1
        return self.polls > self.frames_before_close

    def present_frame(self) -> None:
        self.calls.append(("present",))
        # Presses are edge-triggered: they only last one frame.
        self.pressed = set()


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


class ScriptedRng:
    """Stands in for random.Random; hands out the given values in order."""

    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, stop):
        return self.values.pop(0)
