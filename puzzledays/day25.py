"""Count key and lock schematics whose pin heights do not overlap."""

import sys
from itertools import product

_SPACE = 5


def _blocks(text):
    block = []
    for line in text.splitlines():
        if line.strip():
            block.append(line.strip())
        elif block:
            yield block
            block = []
    if block:
        yield block


def parse_schematics(text):
    """Return the key heights and the lock heights, one list per schematic."""
    keys, locks = [], []
    for rows in _blocks(text):
        if any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("schematic rows differ in length")
        heights = [column.count("#") - 1 for column in zip(*rows)]
        first = rows[0][0]
        if first == "#":
            locks.append(heights)
        elif first == ".":
            keys.append(heights)
        else:
            raise ValueError(f"unexpected character {first!r} at start of schematic")
    return keys, locks


def fits(key, lock):
    """True when no column of key and lock together exceeds the available space."""
    return all(k + l <= _SPACE for k, l in zip(key, lock))


def count_fitting(keys, locks):
    """Number of key/lock pairs that fit together."""
    return sum(fits(key, lock) for key, lock in product(keys, locks))


def solve(text):
    """Return the number of fitting key/lock pairs."""
    keys, locks = parse_schematics(text)
    return count_fitting(keys, locks)


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Expected file arg!")
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("Error opening file!")
        return 1

    try:
        keys, locks = parse_schematics(text)
    except ValueError as err:
        print(err)
        return 1
    print("Keys:")
    for key in keys:
        print(",".join(map(str, key)))
    print("Locks:")
    for lock in locks:
        print(",".join(map(str, lock)))
    print(f"Answer Task 1:\n  Sum = {count_fitting(keys, locks)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())