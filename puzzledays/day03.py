"""Sum the products of well-formed multiplication instructions in corrupted memory."""

import re

from puzzledays.day02 import _run

_ARGUMENTS = re.compile(r"([0-9]{1,3}),([0-9]{1,3})\)")


def sum_multiplications(text, conditional=False):
    """Sum every ``mul(a,b)`` product; honour ``do()``/``don't()`` when conditional."""
    total = 0
    mul_found = False
    enabled = True
    pos = 0
    while pos < len(text):
        char = text[pos]
        pos += 1
        if char == "m":
            mul_found = text.startswith("ul", pos)
            if mul_found:
                pos += 2
        elif char == "d" and conditional:
            if text.startswith("o()", pos):
                enabled = True
                pos += 3
            elif text.startswith("on't()", pos):
                enabled = False
                pos += 6
        elif char == "(":
            if mul_found and enabled:
                match = _ARGUMENTS.match(text, pos)
                if match:
                    total += int(match.group(1)) * int(match.group(2))
                    pos = match.end()
            mul_found = False
        else:
            mul_found = False
    return total


def solve(text):
    """Return the unconditional and the conditional sums."""
    return sum_multiplications(text), sum_multiplications(text, conditional=True)


def main(argv=None):
    return _run(argv, solve)