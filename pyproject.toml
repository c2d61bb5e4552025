[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puzzledays"
version = "1.0.0"
description = "Solvers for a collection of daily programming puzzles: reports, grids, disks, towels, racetracks, networks and locks."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "grid", "graph"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
puzzledays-day02 = "puzzledays.day02:main"
puzzledays-day03 = "puzzledays.day03:main"
puzzledays-day04 = "puzzledays.day04:main"
puzzledays-day05 = "puzzledays.day05:main"
puzzledays-day06 = "puzzledays.day06:main"
puzzledays-day07 = "puzzledays.day07:main"
puzzledays-day08 = "puzzledays.day08:main"
puzzledays-day09 = "puzzledays.day09:main"
puzzledays-day19 = "puzzledays.day19:main"
puzzledays-day20 = "puzzledays.day20:main"
puzzledays-day23 = "puzzledays.day23:main"
puzzledays-day25 = "puzzledays.day25:main"

[tool.hatch.build.targets.wheel]
packages = ["puzzledays"]

[tool.hatch.build.targets.sdist]
include = ["puzzledays", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
