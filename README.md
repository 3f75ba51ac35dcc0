# busmap

An interactive bus network map. Stations and the roads between them are
loaded from plain text files and drawn in a pygame window. The quickest
route between two stations is highlighted together with its total travel
time. Routes can be saved under a name and recalled later.

## Installing

```
pip install .
```

## Running

```
busmap
busmap --data-dir path/to/data --font path/to/font.ttf
```

- `--data-dir` is the directory holding the data files. The default is
  `assets/data`, relative to the current directory.
- `--font` is the TrueType font used for all text. The default is
  `assets/font/arial.ttf`. If that file does not exist, pygame's built-in
  font is used instead.

The data directory holds:

- `des_station.txt`: stations as whitespace-separated `number x y`
  triples. `number` is the station's label and `x y` is its position on the
  map. Reading stops at the first entry that is not an integer.
- `bus_route.txt`: roads as `u v weight` triples. `u` and `v` are 1-based
  station numbers and `weight` is the travel time.
- `myroute.txt`: saved routes, one per line, in the form `name#start#end`.
  New routes are appended to this file and deleted routes are removed from
  it.

If a data file is missing, it is treated as empty.

## Using the map

- Click the **START** or **FINISH** box and type a station number. The
  boxes accept digits only. Backspace deletes a character and Enter
  finishes editing. When both boxes hold existing stations, the quickest
  route is drawn in green and `Total time N` appears near the bottom right.
  If the finish cannot be reached, the total is shown as 100000.
- Drag with the left mouse button to move the stations around.
- Click **SAVE** and type a name. The field accepts characters from `0` to
  `y` plus spaces. Press Enter, or click elsewhere, to store the current
  start and finish under that name.
- Click the icon in the top-left corner to open or close the history
  panel. Opening the panel shifts the map 200 pixels to the right, and
  closing it shifts the map back. Inside the panel, left-click a saved
  route to load it into the boxes, or right-click it to delete it.

## Using it as a library

The route search works without a window:

```python
from busmap.graph import RoadFinder

finder = RoadFinder(4)
finder.add_edge(1, 2, 5)
finder.add_edge(2, 3, 7)
path, total = finder.find(1, 3, ())   # ([1, 2, 3], 12)
```

- `RoadFinder.find(start, end, blocked)` never enters nodes listed in
  `blocked`. If `end` cannot be reached, it returns an empty path and
  `busmap.graph.UNREACHABLE`. It raises `ValueError` for a node outside the
  graph.
- `RoadFinder.load(path)` adds the edges from a route file.
- `busmap.graph.read_bus_route(path)` returns a route file's edges as
  triples.

Other modules:

- `busmap.storage` reads and writes the data files:
  - `read_stations` returns `StationRecord` values.
  - `read_saved_routes`, `parse_saved_route` and `format_saved_route` read
    and format `SavedRoute` values.
  - `append_saved_route` adds a route to the file.
  - `delete_saved_route` removes the line at a given index.
- `busmap.settings.to_int` turns the digit strings typed into the boxes
  into station numbers. An empty string gives 0.
- `busmap.settings.DragState` tracks a mouse drag and the offset it
  produces.

## What it does not do

- The history panel's open and close icons are simple drawn shapes. No
  image files are loaded.
- Stations can only be moved by dragging the whole map.
- Stations and roads cannot be edited from the window. Change the data
  files instead.

## Tests

```
pip install .[test]
pytest
```