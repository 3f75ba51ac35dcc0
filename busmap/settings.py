"""Shared constants, colours and small helpers for the bus map."""

from __future__ import annotations

from dataclasses import dataclass

WINDOW_SIZE = (1000, 600)
WINDOW_TITLE = "App"
ANTI_ALIASING = 8

FONT_PATH = "assets/font/arial.ttf"
DATA_DIR = "assets/data"
STATIONS_FILE = "des_station.txt"
ROUTES_FILE = "bus_route.txt"
SAVED_ROUTES_FILE = "myroute.txt"

GREEN = (0, 255, 127)
GREY = (193, 205, 205)
SPRING_GREEN = (0, 139, 0)
PURE_GREEN = (0, 255, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
CYAN = (0, 255, 255)

Point = tuple[float, float]


def to_int(text: str) -> int:
    """Read a decimal number digit by digit; an empty string gives 0.

    No validation is done: every character contributes its offset from '0'.
    """
    value = 0
    for char in text:
        value = value * 10 + (ord(char) - ord("0"))
    return value


@dataclass
class DragState:
    """Tracks a mouse drag and the offset the map should move by."""

    start: Point = (0.0, 0.0)
    offset: Point = (0.0, 0.0)
    dragging: bool = False

    def press(self, pos: Point) -> None:
        """Begin a drag at ``pos``."""
        self.start = (float(pos[0]), float(pos[1]))
        self.dragging = True

    def update(self, pos: Point) -> None:
        """While dragging, record the movement since the last position."""
        if not self.dragging:
            return
        self.offset = (pos[0] - self.start[0], pos[1] - self.start[1])
        self.start = (float(pos[0]), float(pos[1]))

    def release(self, pos: Point) -> None:
        """End the drag, recording the final movement."""
        self.offset = (pos[0] - self.start[0], pos[1] - self.start[1])
        self.dragging = False

    def take_offset(self) -> Point:
        """Return the pending offset and reset it to zero."""
        offset = self.offset
        self.offset = (0.0, 0.0)
        return offset