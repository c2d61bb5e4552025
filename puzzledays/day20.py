"""Race through a track and count the shortcuts that cutting through walls allows."""

import sys
from collections import deque
from dataclasses import dataclass

_MOVES = ((0, 1), (0, -1), (1, 0), (-1, 0))
_OPEN = {".", "S", "E"}
_WALL = "#"

PART_ONE_CHEAT = 2
PART_TWO_CHEAT = 20
DEFAULT_THRESHOLD = 64


@dataclass(frozen=True)
class Racetrack:
    """A rectangular track: its size, the open cells, the start and the end."""

    nrow: int
    ncol: int
    open: frozenset
    start: tuple
    end: tuple

    def is_open(self, cell):
        """True when the cell lies on the track and is not a wall."""
        return cell in self.open


def parse_track(text):
    """Parse a map of '#' walls, '.' track, 'S' start and 'E' end."""
    rows = [line for line in text.splitlines() if line]
    if not rows:
        raise ValueError("empty track")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("track rows differ in length")

    open_cells = set()
    starts, ends = [], []
    for i, row in enumerate(rows):
        for j, char in enumerate(row):
            if char == _WALL:
                continue
            if char not in _OPEN:
                raise ValueError(f"unexpected character {char!r} at {i},{j}")
            open_cells.add((i, j))
            if char == "S":
                starts.append((i, j))
            elif char == "E":
                ends.append((i, j))

    if len(starts) != 1:
        raise ValueError("the track needs exactly one start")
    if len(ends) != 1:
        raise ValueError("the track needs exactly one end")
    return Racetrack(len(rows), len(rows[0]), frozenset(open_cells), starts[0], ends[0])


def distances(track):
    """Shortest step count from the start to every reachable open cell."""
    dist = {track.start: 0}
    queue = deque([track.start])
    while queue:
        i, j = queue.popleft()
        for di, dj in _MOVES:
            cell = (i + di, j + dj)
            if track.is_open(cell) and cell not in dist:
                dist[cell] = dist[(i, j)] + 1
                queue.append(cell)
    return dist


def _offsets(max_cheat):
    for di in range(-max_cheat, max_cheat + 1):
        reach = max_cheat - abs(di)
        for dj in range(-reach, reach + 1):
            length = abs(di) + abs(dj)
            if length >= 2:
                yield di, dj, length


def count_cheats(track, dist, threshold, max_cheat):
    """Count cheats of at most ``max_cheat`` steps that save at least ``threshold`` steps."""
    if max_cheat < 0:
        raise ValueError("max_cheat must not be negative")
    offsets = list(_offsets(max_cheat))
    count = 0
    for (i, j), here in dist.items():
        if not track.is_open((i, j)):
            continue
        for di, dj, length in offsets:
            there = dist.get((i + di, j + dj))
            if there is not None and there - here - length >= threshold:
                count += 1
    return count


def solve(text, threshold=DEFAULT_THRESHOLD):
    """Return the cheat counts for short and for long cheats."""
    track = parse_track(text)
    dist = distances(track)
    return (
        count_cheats(track, dist, threshold, PART_ONE_CHEAT),
        count_cheats(track, dist, threshold, PART_TWO_CHEAT),
    )


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Expected file arg!")
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("Unable to open file!")
        return 1

    try:
        track = parse_track(text)
    except ValueError as err:
        print(err)
        return 1
    print(f"nrow = {track.nrow}, ncol = {track.ncol}")
    dist = distances(track)
    if track.end not in dist:
        print("The end cannot be reached from the start!")
        return 1
    print(f"base = {dist[track.end]}")
    task1 = count_cheats(track, dist, DEFAULT_THRESHOLD, PART_ONE_CHEAT)
    task2 = count_cheats(track, dist, DEFAULT_THRESHOLD, PART_TWO_CHEAT)
    print(f"Answer Task 1:\n  Sum = {task1}")
    print(f"Answer Task 2:\n  Sum = {task2}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())