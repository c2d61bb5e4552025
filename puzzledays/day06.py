"""Follow a patrolling guard and find obstacle spots that trap it in a loop."""

from puzzledays.day02 import _run
from puzzledays.day04 import _describe, _grid

_STEP = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_TURN = {"^": ">", ">": "v", "v": "<", "<": "^"}


def parse_map(text):
    """Return the map as a list of equally long row strings."""
    rows = _grid(text)
    if not rows:
        raise ValueError("empty map")
    return rows


def _find_guard(grid):
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char in _STEP:
                return (i, j), char
    raise ValueError("Could not find guard!")


def _trace(grid, obstacle=None):
    """Return the visited cells and whether the guard ends up walking in a loop."""
    nrow, ncol = len(grid), len(grid[0])
    (i, j), facing = _find_guard(grid)
    visited = {(i, j)}
    seen = {(i, j, facing)}
    while True:
        di, dj = _STEP[facing]
        ni, nj = i + di, j + dj
        if not (0 <= ni < nrow and 0 <= nj < ncol):
            return visited, False
        if (ni, nj) == obstacle or grid[ni][nj] == "#":
            facing = _TURN[facing]
        else:
            i, j = ni, nj
            visited.add((i, j))
        state = (i, j, facing)
        if state in seen:
            return visited, True
        seen.add(state)


def walk(grid):
    """Return the set of cells the guard covers before leaving the map."""
    visited, looped = _trace(grid)
    if looped:
        raise ValueError("Max loop reached!")
    return visited


def is_loop(grid, obstacle):
    """True when an extra obstacle at the given cell traps the guard in a loop."""
    start, _ = _find_guard(grid)
    obstacle = tuple(obstacle)
    if obstacle == start:
        return False
    return _trace(grid, obstacle)[1]


def solve(text):
    """Return the number of covered cells and of obstacle spots causing a loop."""
    grid = parse_map(text)
    visited = walk(grid)
    loops = sum(is_loop(grid, cell) for cell in visited)
    return len(visited), loops


def main(argv=None):
    return _run(
        argv,
        solve,
        missing="Missing File arg!",
        unreadable="Unable to open file!",
        headings=("Answer task 1:", "Answer Task 2:"),
        preamble=lambda text: _describe(parse_map(text)),
        errors=(ValueError,),
    )