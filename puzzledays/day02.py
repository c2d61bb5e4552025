"""Safety checks for reactor level reports."""

import sys
from itertools import combinations, pairwise
from pathlib import Path


def _run(
    argv,
    solver,
    *,
    missing="Expected a file input!",
    unreadable="Could not open file!",
    headings=("Answer task 1:", "Answer task 2:"),
    line="  Sum = {}",
    preamble=None,
    errors=(),
):
    """Read the file named on the command line, solve it and print the answers."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(missing)
        return 1
    try:
        text = Path(args[0]).read_text(encoding="utf-8")
    except OSError:
        print(unreadable)
        return 1
    try:
        if preamble is not None:
            print(preamble(text))
        answers = solver(text)
    except errors as err:
        print(err)
        return 1
    for heading, answer in zip(headings, answers):
        print(heading)
        print(line.format(answer))
    return 0


def parse_reports(text):
    """Return one list of integer levels per non-blank line."""
    return [
        [int(token) for token in line.split()]
        for line in text.splitlines()
        if line.strip()
    ]


def _steady(levels):
    """True when every step keeps the first step's direction and changes by 1 to 3."""
    sign = 0
    for previous, current in pairwise(levels):
        diff = current - previous
        if sign == 0:
            sign = 1 if diff >= 0 else -1
        if not 1 <= sign * diff <= 3:
            return False
    return True


def is_safe(levels):
    """A report is safe when it has at least two levels and changes steadily."""
    levels = list(levels)
    return len(levels) >= 2 and _steady(levels)


def can_be_safe(levels):
    """True when the report is steady as is or after removing a single level."""
    levels = list(levels)
    if _steady(levels):
        return True
    return any(_steady(rest) for rest in combinations(levels, len(levels) - 1))


def solve(text):
    """Return the number of safe reports and of reports that can be made safe."""
    reports = parse_reports(text)
    safe = sum(is_safe(report) for report in reports)
    tolerable = sum(can_be_safe(report) for report in reports)
    return safe, tolerable


def main(argv=None):
    return _run(argv, solve)