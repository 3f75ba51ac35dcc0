"""Reading and writing the station and saved-route data files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .settings import to_int


@dataclass(frozen=True)
class StationRecord:
    """A station number and its position on the map."""

    number: int
    x: int
    y: int


@dataclass(frozen=True)
class SavedRoute:
    """A named start/end query remembered by the user."""

    name: str
    start: int
    end: int


def _read_text(path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return ""


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def read_stations(path) -> list[StationRecord]:
    """Read ``number x y`` triples, stopping at the first malformed token."""
    tokens = iter(_read_text(path).split())
    stations = []
    for group in zip(tokens, tokens, tokens):
        try:
            number, x, y = (int(token) for token in group)
        except ValueError:
            break
        stations.append(StationRecord(number, x, y))
    return stations


def parse_saved_route(line: str) -> SavedRoute:
    """Parse a ``name#start#end`` line; missing fields are empty."""
    parts = line.split("#")
    if len(parts) > 3:
        raise ValueError(f"too many fields in saved route: {line!r}")
    parts += [""] * (3 - len(parts))
    name, start, end = parts
    return SavedRoute(name, to_int(start), to_int(end))


def format_saved_route(route: SavedRoute) -> str:
    """Render a saved route as a ``name#start#end`` line."""
    return f"{route.name}#{route.start}#{route.end}"


def read_saved_routes(path) -> list[SavedRoute]:
    """Read every saved route; a missing file holds none."""
    return [parse_saved_route(line) for line in _lines(_read_text(path))]


def append_saved_route(path, route: SavedRoute) -> None:
    """Add one route to the end of the file."""
    with open(path, "a", encoding="utf-8") as out:
        out.write(format_saved_route(route) + "\n")


def delete_saved_route(path, index: int) -> None:
    """Rewrite the file without its ``index``-th line."""
    kept = [line for number, line in enumerate(_lines(_read_text(path))) if number != index]
    with open(path, "w", encoding="utf-8") as out:
        out.writelines(line + "\n" for line in kept)