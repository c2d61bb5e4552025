"""Locate antinodes created by pairs of same-frequency antennas."""

from itertools import permutations

from puzzledays.day02 import _run
from puzzledays.day04 import _describe, _grid


def parse_map(text):
    """Return the map as a list of equally long row strings."""
    return _grid(text)


def antenna_locations(grid):
    """Map each antenna frequency to its positions in reading order."""
    locations = {}
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char != ".":
                locations.setdefault(char, []).append((i, j))
    return locations


def antinodes(grid, harmonics=False):
    """Return the set of in-bounds antinode positions."""
    nrow = len(grid)
    ncol = len(grid[0]) if grid else 0

    def inside(i, j):
        return 0 <= i < nrow and 0 <= j < ncol

    found = set()
    for positions in antenna_locations(grid).values():
        for (i0, j0), (i1, j1) in permutations(positions, 2):
            di, dj = i1 - i0, j1 - j0
            if harmonics:
                for sign in (1, -1):
                    i, j = i0, j0
                    while inside(i, j):
                        found.add((i, j))
                        i += sign * di
                        j += sign * dj
            elif inside(i0 - di, j0 - dj):
                found.add((i0 - di, j0 - dj))
    return found


def solve(text):
    """Return the antinode counts without and with harmonics."""
    grid = parse_map(text)
    return len(antinodes(grid)), len(antinodes(grid, harmonics=True))


def main(argv=None):
    return _run(
        argv,
        solve,
        missing="Missing File arg!",
        unreadable="Unable to open file!",
        headings=("Answer Task 1", "Answer Task 2"),
        preamble=lambda text: _describe(parse_map(text)),
        errors=(ValueError,),
    )