"""Compact an amphipod disk map block by block or file by file and checksum it."""

import sys

_DIGITS = "0123456789"


def parse_disk(text):
    """Expand a dense disk map into blocks: file ids, and None for free space."""
    disk = []
    file_id = 0
    digits = (char for char in text if char in _DIGITS)
    for index, digit in enumerate(digits):
        size = int(digit)
        if index % 2 == 0:
            disk.extend([file_id] * size)
            file_id += 1
        else:
            disk.extend([None] * size)
    return disk


def compact_blocks(disk):
    """Move single blocks from the end into the leftmost free slots."""
    blocks = list(disk)
    left, right = 0, len(blocks) - 1
    while True:
        while left < len(blocks) and blocks[left] is not None:
            left += 1
        while right >= 0 and blocks[right] is None:
            right -= 1
        if left >= right:
            return blocks
        blocks[left], blocks[right] = blocks[right], None


def _spans(disk):
    """Return the file spans as id -> (start, length) and the free runs in order."""
    files = {}
    free = []
    start = 0
    while start < len(disk):
        value = disk[start]
        end = start
        while end < len(disk) and disk[end] == value:
            end += 1
        if value is None:
            free.append([start, end - start])
        elif value not in files:
            files[value] = (start, end - start)
        start = end
    return files, free


def compact_files(disk):
    """Move whole files, highest id first, into the leftmost free run that fits."""
    blocks = list(disk)
    files, free = _spans(blocks)
    for file_id in sorted(files, reverse=True):
        start, length = files[file_id]
        for run in free:
            run_start, run_length = run
            if run_start >= start:
                break
            if run_length >= length:
                blocks[run_start:run_start + length] = [file_id] * length
                blocks[start:start + length] = [None] * length
                run[0] += length
                run[1] -= length
                break
    return blocks


def checksum(disk):
    """Sum of position times file id over all occupied blocks."""
    return sum(position * value for position, value in enumerate(disk) if value is not None)


def solve(text):
    """Return the checksums after block compaction and after file compaction."""
    disk = parse_disk(text)
    return checksum(compact_blocks(disk)), checksum(compact_files(disk))


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Missing file arg!")
        return 1
    try:
        with open(args[0], encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("Unable to open file!")
        return 1

    task1, task2 = solve(text)
    print(f"Answer Task 1:\n  Sum = {task1}")
    print(f"Answer Task 2:\n  Sum = {task2}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())