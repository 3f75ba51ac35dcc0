"""Drawable map elements: stations, links and the saved-route history panel."""

from __future__ import annotations

import pygame

from .settings import BLACK, GREY, SPRING_GREEN, WHITE, Point


class Station:
    """A numbered circle on the map."""

    RADIUS = 20

    def __init__(self, number: int, font):
        self.number = number
        self.font = font
        self.color = GREY
        self.label = str(number)
        self.position: Point = (0.0, 0.0)
        self.label_pos: Point = (0.0, 0.0)

    @property
    def center(self) -> Point:
        """Centre of the circle."""
        return (self.position[0] + self.RADIUS, self.position[1] + self.RADIUS)

    def set_position(self, x: float, y: float) -> None:
        """Place the circle's top-left corner at ``(x, y)`` and centre its number."""
        self.position = (float(x), float(y))
        half_width = self.font.size(self.label)[0] / 2
        self.label_pos = (x + 18 - half_width, y + 5)

    def move(self, dx: float, dy: float) -> None:
        """Shift the station and its label by ``(dx, dy)``."""
        self.position = (self.position[0] + dx, self.position[1] + dy)
        self.label_pos = (self.label_pos[0] + dx, self.label_pos[1] + dy)

    def draw(self, surface) -> None:
        """Draw the circle and its number."""
        pygame.draw.circle(surface, self.color, self.center, self.RADIUS)
        surface.blit(self.font.render(self.label, True, BLACK), self.label_pos)


class Link:
    """A straight connection between two stations, optionally labelled with its weight."""

    def __init__(self, u: int, v: int, weight: int | None = None, font=None):
        self.u = u
        self.v = v
        self.weight = weight
        self.font = font

    def endpoints(self, stations: list[Station]) -> tuple[Point, Point]:
        """Return the centres of the two stations the link joins."""
        return stations[self.u].center, stations[self.v].center

    def draw(self, surface, stations: list[Station], color=GREY) -> None:
        """Draw the line and, when the link has a weight, its value at the midpoint."""
        start, end = self.endpoints(stations)
        pygame.draw.aaline(surface, color, start, end)
        if self.weight is None or self.font is None:
            return
        (sx, sy), (ex, ey) = stations[self.u].position, stations[self.v].position
        surface.blit(
            self.font.render(str(self.weight), True, BLACK),
            ((sx + ex) / 2, (sy + ey) / 2 + 10),
        )


class HistoryEntry:
    """One saved route shown as a line of text in the history panel."""

    def __init__(self, name: str, start: int, end: int, font):
        self.name = name
        self.start = start
        self.end = end
        self.font = font
        self.color = WHITE
        self.position: Point = (0.0, 0.0)

    def set_position(self, pos) -> None:
        """Move the text's top-left corner to ``pos``."""
        self.position = (float(pos[0]), float(pos[1]))

    def _bounds(self) -> pygame.Rect:
        width, height = self.font.size(self.name)
        return pygame.Rect(int(self.position[0]), int(self.position[1]), width, height)

    def contains(self, pos) -> bool:
        """Tell whether ``pos`` falls on the entry's text."""
        return bool(self._bounds().collidepoint(pos))

    def draw(self, surface) -> None:
        """Draw the entry's name."""
        surface.blit(self.font.render(self.name, True, self.color), self.position)


class HistoryPanel:
    """Side panel listing saved routes, opened and closed with an icon."""

    PANEL = (0, 0, 200, 600)
    ICON = (5, 5, 30, 30)
    SHIFT = 200.0
    ROW_X = 10
    FIRST_ROW = 50
    ROW_HEIGHT = 25

    def __init__(self, font):
        self.font = font
        self.entries: list[HistoryEntry] = []
        self.open = False
        self.panel_rect = pygame.Rect(self.PANEL)
        self.icon_rect = pygame.Rect(self.ICON)

    def _row_position(self, row: int) -> Point:
        return (self.ROW_X, row * self.ROW_HEIGHT + self.FIRST_ROW)

    def add(self, name: str, start: int, end: int) -> HistoryEntry:
        """Append a saved route as the next row and return its entry."""
        entry = HistoryEntry(name, start, end, self.font)
        entry.set_position(self._row_position(len(self.entries)))
        self.entries.append(entry)
        return entry

    def remove(self, index: int) -> HistoryEntry:
        """Remove the ``index``-th entry and move the later rows up."""
        entry = self.entries.pop(index)
        for row, later in enumerate(self.entries[index:], start=index):
            later.set_position(self._row_position(row))
        return entry

    def handle_event(self, event, mouse_pos) -> Point | None:
        """Toggle the panel on a left click on the icon.

        Returns the horizontal shift the map should make, or None when the
        panel did not change.
        """
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return None
        if not self.icon_rect.collidepoint(mouse_pos):
            return None
        self.open = not self.open
        return (self.SHIFT, 0.0) if self.open else (-self.SHIFT, 0.0)

    def _draw_menu_icon(self, surface) -> None:
        x, y, width, height = self.icon_rect
        for row in (1, 2, 3):
            bar_y = y + row * height // 4
            pygame.draw.line(surface, BLACK, (x + 3, bar_y), (x + width - 3, bar_y), 3)

    def _draw_close_icon(self, surface) -> None:
        rect = self.icon_rect.inflate(-8, -8)
        pygame.draw.line(surface, WHITE, rect.topleft, rect.bottomright, 3)
        pygame.draw.line(surface, WHITE, rect.topright, rect.bottomleft, 3)

    def draw(self, surface) -> None:
        """Draw the icon, and the panel with its entries while open."""
        if not self.open:
            self._draw_menu_icon(surface)
            return
        pygame.draw.rect(surface, SPRING_GREEN, self.panel_rect)
        self._draw_close_icon(surface)
        for entry in self.entries:
            entry.draw(surface)