import pygame
import pytest

from busmap.elements import HistoryEntry, HistoryPanel, Link, Station
from busmap.settings import GREY, SPRING_GREEN


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    return pygame.font.Font(None, 20)


def click(button, pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=pos)


def test_station_position_and_center(font):
    station = Station(1, font)
    station.set_position(100, 50)
    assert station.position == (100.0, 50.0)
    assert station.center == (100.0 + Station.RADIUS, 50.0 + Station.RADIUS)


def test_station_move_shifts_label_too(font):
    station = Station(7, font)
    station.set_position(10, 10)
    before = station.label_pos
    station.move(5, -3)
    assert station.position == (15.0, 7.0)
    assert station.label_pos == (before[0] + 5, before[1] - 3)


def test_station_draw_fills_circle(font):
    station = Station(1, font)
    station.set_position(50, 50)
    surface = pygame.Surface((200, 200))
    surface.fill((0, 0, 0))
    station.draw(surface)
    assert tuple(surface.get_at((55, 70)))[:3] == GREY


def test_link_endpoints_are_station_centres(font):
    stations = [Station(1, font), Station(2, font)]
    stations[0].set_position(0, 0)
    stations[1].set_position(100, 200)
    link = Link(0, 1, 5, font)
    assert link.endpoints(stations) == (stations[0].center, stations[1].center)
    assert link.endpoints(stations)[0] == (20.0, 20.0)


def test_link_draw_marks_line(font):
    stations = [Station(1, font), Station(2, font)]
    stations[0].set_position(0, 0)
    stations[1].set_position(100, 0)
    surface = pygame.Surface((200, 100))
    surface.fill((0, 0, 0))
    Link(0, 1).draw(surface, stations, (255, 0, 0))
    assert tuple(surface.get_at((70, 20)))[:3] != (0, 0, 0)
    assert surface.get_at((70, 20)).r > 0


def test_history_entry_contains(font):
    entry = HistoryEntry("home", 1, 3, font)
    entry.set_position((10, 50))
    assert entry.contains((11, 51))
    assert not entry.contains((500, 500))
    assert (entry.start, entry.end) == (1, 3)


def test_panel_rows_are_spaced(font):
    panel = HistoryPanel(font)
    first = panel.add("a", 1, 2)
    second = panel.add("b", 2, 3)
    assert first.position == (10.0, 50.0)
    assert second.position[1] - first.position[1] == 25
    assert second.position[0] == first.position[0]


def test_panel_remove_moves_later_rows_up(font):
    panel = HistoryPanel(font)
    panel.add("a", 1, 2)
    panel.add("b", 2, 3)
    panel.add("c", 3, 4)
    original = [entry.position for entry in panel.entries]
    removed = panel.remove(0)
    assert removed.name == "a"
    assert [entry.name for entry in panel.entries] == ["b", "c"]
    assert [entry.position for entry in panel.entries] == original[:2]


def test_panel_remove_out_of_range(font):
    panel = HistoryPanel(font)
    with pytest.raises(IndexError):
        panel.remove(0)


def test_panel_icon_toggles(font):
    panel = HistoryPanel(font)
    assert panel.handle_event(click(1, (10, 10)), (10, 10)) == (200.0, 0.0)
    assert panel.open
    assert panel.handle_event(click(1, (10, 10)), (10, 10)) == (-200.0, 0.0)
    assert not panel.open


@pytest.mark.parametrize("button, pos", [(1, (500, 500)), (3, (10, 10))])
def test_panel_ignores_other_clicks(font, button, pos):
    panel = HistoryPanel(font)
    assert panel.handle_event(click(button, pos), pos) is None
    assert not panel.open


def test_panel_draw_open_fills_background(font):
    panel = HistoryPanel(font)
    panel.open = True
    surface = pygame.Surface((1000, 600))
    surface.fill((0, 0, 0))
    panel.draw(surface)
    assert tuple(surface.get_at((150, 500)))[:3] == SPRING_GREEN