[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "busmap"
version = "0.1.0"
description = "Interactive bus network map that finds the quickest route between stations"
requires-python = ">=3.10"
keywords = ["bus", "map", "route", "shortest-path", "dijkstra", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
busmap = "busmap.app:main"

[tool.hatch.build.targets.wheel]
packages = ["busmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
