"""Word search for XMAS in every direction and for crossed MAS patterns."""

from collections import defaultdict

from puzzledays.day02 import _run

_WORDS = ("XMAS", "SAMX")


def _grid(text):
    """Return the non-empty lines of a rectangular grid."""
    rows = [line for line in text.splitlines() if line]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("grid rows differ in length")
    return rows


def _describe(grid):
    """Return the size line printed before solving a grid puzzle."""
    return f"nrow = {len(grid)}, ncol = {len(grid[0]) if grid else 0}"


def _lines(rows):
    """Yield every row, column, diagonal and anti-diagonal as a string."""
    yield from rows
    yield from ("".join(column) for column in zip(*rows))
    diagonals = defaultdict(list)
    anti_diagonals = defaultdict(list)
    for i, row in enumerate(rows):
        for j, char in enumerate(row):
            diagonals[i - j].append(char)
            anti_diagonals[i + j].append(char)
    yield from ("".join(cells) for cells in diagonals.values())
    yield from ("".join(cells) for cells in anti_diagonals.values())


def count_xmas(text):
    """Count occurrences of XMAS in all eight directions."""
    return sum(line.count(word) for line in _lines(_grid(text)) for word in _WORDS)


def is_mas_cross(uleft, uright, lleft, lright):
    """True when both diagonals through the centre spell MAS in either direction."""
    down_right = {uleft, lright} == {"M", "S"}
    down_left = {uright, lleft} == {"M", "S"}
    return down_right and down_left


def count_mas_crosses(text):
    """Count the A cells that sit in the middle of two crossing MAS words."""
    rows = _grid(text)
    return sum(
        is_mas_cross(above[j - 1], above[j + 1], below[j - 1], below[j + 1])
        for above, row, below in zip(rows, rows[1:], rows[2:])
        for j in range(1, len(row) - 1)
        if row[j] == "A"
    )


def solve(text):
    """Return the XMAS count and the crossed-MAS count."""
    return count_xmas(text), count_mas_crosses(text)


def main(argv=None):
    return _run(argv, solve, headings=("Answer Task 1:", "Answer Task 2:"))