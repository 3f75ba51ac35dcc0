import pytest

from busmap.storage import (
    SavedRoute,
    StationRecord,
    append_saved_route,
    delete_saved_route,
    format_saved_route,
    parse_saved_route,
    read_saved_routes,
    read_stations,
)


def test_parse_saved_route():
    assert parse_saved_route("Home#3#7") == SavedRoute("Home", 3, 7)


def test_parse_missing_fields_are_zero():
    assert parse_saved_route("Work") == SavedRoute("Work", 0, 0)


def test_parse_too_many_fields_raises():
    with pytest.raises(ValueError):
        parse_saved_route("a#1#2#3")


@pytest.mark.parametrize("route", [SavedRoute("Home", 3, 7), SavedRoute("to school", 12, 1)])
def test_format_parse_round_trip(route):
    assert parse_saved_route(format_saved_route(route)) == route


def test_format_uses_hash_separators():
    assert format_saved_route(SavedRoute("x", 1, 2)) == "x#1#2"


def test_read_missing_file(tmp_path):
    assert read_saved_routes(tmp_path / "myroute.txt") == []


def test_append_then_read(tmp_path):
    path = tmp_path / "myroute.txt"
    routes = [SavedRoute("a", 1, 2), SavedRoute("b", 3, 4)]
    for route in routes:
        append_saved_route(path, route)
    assert read_saved_routes(path) == routes


def test_delete_removes_only_that_line(tmp_path):
    path = tmp_path / "myroute.txt"
    routes = [SavedRoute("a", 1, 2), SavedRoute("b", 3, 4), SavedRoute("c", 5, 6)]
    for route in routes:
        append_saved_route(path, route)
    delete_saved_route(path, 1)
    assert read_saved_routes(path) == [routes[0], routes[2]]


def test_delete_out_of_range_keeps_everything(tmp_path):
    path = tmp_path / "myroute.txt"
    append_saved_route(path, SavedRoute("a", 1, 2))
    delete_saved_route(path, 5)
    assert read_saved_routes(path) == [SavedRoute("a", 1, 2)]


def test_read_stations(tmp_path):
    path = tmp_path / "des_station.txt"
    path.write_text("1 100 200\n2 300 400\n")
    assert read_stations(path) == [StationRecord(1, 100, 200), StationRecord(2, 300, 400)]


def test_read_stations_stops_at_bad_token(tmp_path):
    path = tmp_path / "des_station.txt"
    path.write_text("1 100 200\nbad 1 1\n3 5 5\n")
    assert read_stations(path) == [StationRecord(1, 100, 200)]


def test_read_stations_missing_file(tmp_path):
    assert read_stations(tmp_path / "none.txt") == []