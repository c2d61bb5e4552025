# puzzledays

Solvers for twelve daily programming puzzles. Each day is its own module in the
`puzzledays` package. Each module reads a puzzle input, as a file on the command
line or as a string from Python, and gives the answers.

| Day | Module              | Puzzle                                                       |
|-----|---------------------|--------------------------------------------------------------|
| 2   | `puzzledays.day02`  | Safe level reports, with and without one level removed       |
| 3   | `puzzledays.day03`  | Summing `mul(a,b)` instructions, honouring `do()`/`don't()`  |
| 4   | `puzzledays.day04`  | Counting `XMAS` in a letter grid, and crossed `MAS` patterns |
| 5   | `puzzledays.day05`  | Page ordering rules: valid updates and repaired updates      |
| 6   | `puzzledays.day06`  | A guard walking a map, and obstacles that trap it in a loop  |
| 7   | `puzzledays.day07`  | Calibration equations with `+`, `*` and concatenation        |
| 8   | `puzzledays.day08`  | Antenna antinodes, with and without resonant harmonics       |
| 9   | `puzzledays.day09`  | Disk compaction by block and by whole file, with checksums   |
| 19  | `puzzledays.day19`  | Buildable towel designs and the number of arrangements       |
| 20  | `puzzledays.day20`  | Racetrack shortcuts through walls that save enough time      |
| 23  | `puzzledays.day23`  | Triangles with a `t` computer, and the largest connected LAN |
| 25  | `puzzledays.day25`  | Key and lock pairs that fit without overlapping              |

## Installation

```
pip install .
```

The package uses only the Python standard library and needs Python 3.10 or
later.

## Command line

Every day has a command that takes the path of an input file:

```
puzzledays-day02 input.txt
puzzledays-day03 input.txt
puzzledays-day04 input.txt
puzzledays-day05 input.txt
puzzledays-day06 input.txt
puzzledays-day07 input.txt
puzzledays-day08 input.txt
puzzledays-day09 input.txt
puzzledays-day19 input.txt
puzzledays-day20 input.txt
puzzledays-day23 input.txt
puzzledays-day25 input.txt
```

Each command prints the answers to its tasks and exits with status 0. When the
file argument is missing, the file cannot be read or the input is malformed, it
prints a message and exits with status 1.

Some commands print a little more:

- `puzzledays-day06` and `puzzledays-day08` first print the map size
  (`nrow = ..., ncol = ...`).
- `puzzledays-day20` prints the map size and the plain race time (`base = ...`),
  then the number of cheats of at most 2 and of at most 20 steps that save at
  least 64 steps.
- `puzzledays-day23` prints the triangle count, then the password of the
  largest LAN on its own line.
- `puzzledays-day25` lists the pin heights of every key and lock before the
  answer.

## Library use

Every module has a `solve(text)` function that takes the puzzle input as a
string and returns the answers as a tuple (day 25 returns a single number).
`day20.solve(text, threshold=64)` also takes the number of steps a cheat must
save. The building blocks are public as well, for example:

```python
from pathlib import Path

from puzzledays import day02, day07, day09, day23

reports = day02.parse_reports("7 6 4 2 1\n1 2 7 8 9\n")
print([day02.is_safe(levels) for levels in reports])   # [True, False]

print(day07.can_match([10, 19], 190))                  # True
print(day07.can_match([15, 6], 156, concatenation=True))

disk = day09.parse_disk("12345")
print(day09.checksum(day09.compact_blocks(disk)))

graph = day23.parse_connections(Path("network.txt").read_text())
print(day23.password(day23.largest_lan(graph)))
```

Other public pieces include `day03.sum_multiplications(text, conditional)`,
`day04.count_xmas` and `day04.count_mas_crosses`, `day05.parse_input` (which
returns an `Instructions` object), `day05.is_order_valid` and `day05.fix_order`,
`day06.walk` and `day06.is_loop`, `day08.antinodes(grid, harmonics)`,
`day19.can_build`, `day19.count_arrangements` and `day19.unique_towels`,
`day20.parse_track` (returning a `Racetrack`), `day20.distances` and
`day20.count_cheats`, `day23.count_t_triangles`, and `day25.parse_schematics`,
`day25.fits` and `day25.count_fitting`.

## Tests

```
pip install .[test]
pytest
```