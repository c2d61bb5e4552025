"""Decide which calibration equations can be made true with the allowed operators."""

from puzzledays.day02 import _run


def parse_equations(text):
    """Return ``(target, numbers)`` pairs from lines like ``190: 10 19``."""
    equations = []
    for line in text.splitlines():
        if not line.strip():
            continue
        target, sep, rest = line.partition(":")
        if not sep:
            raise ValueError(f"missing ':' in line {line!r}")
        equations.append((int(target), [int(number) for number in rest.split()]))
    return equations


def next_power_of_ten(x):
    """Smallest power of ten greater than x (at least 10); zero for zero."""
    if x == 0:
        return 0
    tens = 10
    while x >= tens:
        tens *= 10
    return tens


def can_match(numbers, target, concatenation=False):
    """True when +, * (and optionally digit concatenation), applied left to right, reach target."""
    numbers = list(numbers)
    if not numbers:
        raise ValueError("an equation needs at least one number")
    values = {numbers[0]}
    for number in numbers[1:]:
        reached = set()
        for value in values:
            reached.add(value * number)
            reached.add(value + number)
            if concatenation:
                reached.add(value * next_power_of_ten(number) + number)
        values = reached
    return target in values


def solve(text):
    """Sum the targets reachable without and with concatenation."""
    equations = parse_equations(text)
    return tuple(
        sum(
            target
            for target, numbers in equations
            if can_match(numbers, target, concatenation)
        )
        for concatenation in (False, True)
    )


def main(argv=None):
    return _run(
        argv,
        solve,
        missing="Missing file-argument!",
        unreadable="Unable to open file!",
        line="  Sum {}",
    )