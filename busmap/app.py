"""The bus map screen: stations, routes, queries and saved routes."""

from __future__ import annotations

import argparse
from pathlib import Path

import pygame

from .elements import HistoryPanel, Link, Station
from .graph import RoadFinder, read_bus_route
from .settings import (
    DATA_DIR,
    FONT_PATH,
    GREEN,
    GREY,
    RED,
    ROUTES_FILE,
    SAVED_ROUTES_FILE,
    STATIONS_FILE,
    WHITE,
    WINDOW_SIZE,
    WINDOW_TITLE,
    DragState,
    to_int,
)
from .storage import (
    SavedRoute,
    append_saved_route,
    delete_saved_route,
    read_saved_routes,
    read_stations,
)
from .widgets import NumberBox, SaveBox

TOTAL_TIME_POS = (800, 570)


class BusMap:
    """Holds the map state and reacts to user input."""

    def __init__(self, data_dir, font):
        self.data_dir = Path(data_dir)
        self.font = font
        self.stations: list[Station] = []
        for record in read_stations(self.data_dir / STATIONS_FILE):
            station = Station(record.number, font)
            station.set_position(record.x, record.y)
            self.stations.append(station)

        routes_path = self.data_dir / ROUTES_FILE
        self.links = [Link(u - 1, v - 1, weight, font) for u, v, weight in read_bus_route(routes_path)]

        self.panel = HistoryPanel(font)
        for saved in read_saved_routes(self.saved_routes_path):
            self.panel.add(saved.name, saved.start, saved.end)

        self.start_box = NumberBox("START", font)
        self.end_box = NumberBox("FINISH", font)
        self.start_box.set_position((415, 550))
        self.end_box.set_position((505, 550))
        self.save_box = SaveBox(font)

        self.finder = RoadFinder(len(self.stations) + 1)
        self.finder.load(routes_path)
        self.drag = DragState()
        self.path: list[int] = []
        self.cost: int | None = None

    @property
    def saved_routes_path(self) -> Path:
        return self.data_dir / SAVED_ROUTES_FILE

    def is_valid_query(self) -> bool:
        """Tell whether both boxes name existing stations."""
        count = len(self.stations)
        start = to_int(self.start_box.content)
        end = to_int(self.end_box.content)
        return 0 < start <= count and 0 < end <= count

    def current_route(self) -> tuple[list[int], int | None]:
        """Return the cheapest path and its cost for the boxes' query.

        Without a complete, valid query the path is empty and the cost None.
        """
        if not self.start_box.content or not self.end_box.content or not self.is_valid_query():
            return [], None
        return self.finder.find(to_int(self.start_box.content), to_int(self.end_box.content))

    def push_new_route(self) -> None:
        """Store the route named in the save box, if a name is ready."""
        name = self.save_box.take_name()
        if not name:
            return
        route = SavedRoute(name, to_int(self.start_box.content), to_int(self.end_box.content))
        self.panel.add(route.name, route.start, route.end)
        append_saved_route(self.saved_routes_path, route)

    def delete_route(self, index: int) -> None:
        """Forget the ``index``-th saved route, on screen and on disk."""
        self.panel.remove(index)
        delete_saved_route(self.saved_routes_path, index)

    def move_map(self) -> None:
        """Shift every station by the pending drag offset."""
        dx, dy = self.drag.take_offset()
        for station in self.stations:
            station.move(dx, dy)

    def _entry_at(self, pos) -> int | None:
        return next((i for i, entry in enumerate(self.panel.entries) if entry.contains(pos)), None)

    def _handle_drag(self, event, mouse_pos) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.drag.press(mouse_pos)
        self.drag.update(mouse_pos)
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.drag.release(mouse_pos)

    def _handle_history(self, event, mouse_pos) -> None:
        if event.type == pygame.MOUSEMOTION:
            for entry in self.panel.entries:
                entry.color = GREY if entry.contains(mouse_pos) else WHITE
        if event.type != pygame.MOUSEBUTTONDOWN:
            return
        index = self._entry_at(mouse_pos)
        if index is None:
            return
        if event.button == 3:
            self.delete_route(index)
        elif event.button == 1:
            entry = self.panel.entries[index]
            self.start_box.set_content(str(entry.start))
            self.end_box.set_content(str(entry.end))

    def handle_event(self, event, mouse_pos) -> None:
        """Pass one input event to every part of the screen."""
        self.push_new_route()
        self.save_box.handle_event(event, mouse_pos)
        self._handle_drag(event, mouse_pos)
        shift = self.panel.handle_event(event, mouse_pos)
        if shift is not None:
            self.drag.offset = shift
        self._handle_history(event, mouse_pos)
        self.start_box.handle_event(event, mouse_pos)
        self.end_box.handle_event(event, mouse_pos)

    def draw(self, surface) -> None:
        """Draw the whole screen, highlighting the route for the current query."""
        if self.drag.dragging:
            self.move_map()
        for link in self.links:
            link.draw(surface, self.stations)

        for number in self.path:
            self.stations[number - 1].color = GREY
        self.path, self.cost = self.current_route()
        for a, b in zip(self.path, self.path[1:]):
            Link(a - 1, b - 1).draw(surface, self.stations, GREEN)
        for number in self.path:
            self.stations[number - 1].color = GREEN
        if self.cost is not None:
            label = self.font.render(f"Total time {self.cost}", True, RED)
            surface.blit(label, TOTAL_TIME_POS)

        for station in self.stations:
            station.draw(surface)
        self.panel.draw(surface)
        self.start_box.draw(surface)
        self.end_box.draw(surface)
        self.save_box.draw(surface)


def _load_font(path: str, size: int):
    if Path(path).is_file():
        return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


def main(argv=None) -> int:
    """Open the bus map window and run it until it is closed."""
    parser = argparse.ArgumentParser(description="Interactive bus route map.")
    parser.add_argument("--data-dir", default=DATA_DIR, help="directory holding the data files")
    parser.add_argument("--font", default=FONT_PATH, help="TrueType font to draw text with")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.key.start_text_input()
        busmap = BusMap(args.data_dir, _load_font(args.font, 20))
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                busmap.handle_event(event, pygame.mouse.get_pos())
            screen.fill(WHITE)
            busmap.draw(screen)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0