"""Check which towel designs can be assembled from the available stripe patterns."""

import re
import sys
from functools import lru_cache

from puzzledays.day02 import _run

_WORD = re.compile(r"[A-Za-z]+")


def parse_input(text):
    """Return the towel patterns from the first line and the designs that follow."""
    lines = text.splitlines()
    for index, line in enumerate(lines):
        if line.strip():
            towels = _WORD.findall(line)
            designs = [word for rest in lines[index + 1:] for word in _WORD.findall(rest)]
            return towels, designs
    return [], []


def count_arrangements(design, towels):
    """Number of distinct ways to build the design from towel patterns."""
    patterns = tuple(towel for towel in towels if towel)

    @lru_cache(maxsize=None)
    def from_offset(offset):
        if offset >= len(design):
            return 1
        return sum(
            from_offset(offset + len(towel))
            for towel in patterns
            if design.startswith(towel, offset)
        )

    return from_offset(0)


def can_build(design, towels):
    """True when the design is a concatenation of towel patterns."""
    return count_arrangements(design, towels) > 0


def unique_towels(towels):
    """Towels that cannot be built from the others, longest first."""
    distinct = list(dict.fromkeys(towels))
    keep = [
        towel
        for index, towel in enumerate(distinct)
        if not can_build(towel, distinct[:index] + distinct[index + 1:])
    ]
    return sorted(keep, key=len, reverse=True)


def solve(text):
    """Return the number of buildable designs and the total number of arrangements."""
    towels, designs = parse_input(text)
    basic = unique_towels(towels)
    buildable = sum(can_build(design, basic) for design in designs)
    arrangements = sum(count_arrangements(design, towels) for design in designs)
    return buildable, arrangements


def main(argv=None):
    prog = sys.argv[0] if sys.argv and sys.argv[0] else "day19"
    return _run(
        argv,
        solve,
        missing=f"Usage: {prog} <filename>",
        unreadable="Unable to open file!",
        headings=("Answer Task 1:", "Answer Task 2:"),
    )