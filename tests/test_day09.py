from collections import Counter

import pytest

from puzzledays.day09 import (
    checksum,
    compact_blocks,
    compact_files,
    main,
    parse_disk,
    solve,
)

EXAMPLE = "2333133121414131402\n"


def _file_blocks(disk):
    return Counter(value for value in disk if value is not None)


def test_parse_small_map():
    assert parse_disk("12345") == [
        0, None, None, 1, 1, 1, None, None, None, None, 2, 2, 2, 2, 2,
    ]


def test_parse_ignores_non_digits():
    assert parse_disk("12 345\n") == parse_disk("12345")


def test_parse_length_is_digit_sum():
    assert len(parse_disk(EXAMPLE)) == sum(int(c) for c in EXAMPLE.strip())


def test_solve_example():
    assert solve(EXAMPLE) == (1928, 2858)


@pytest.mark.parametrize("compact", [compact_blocks, compact_files])
def test_compaction_keeps_blocks_and_input(compact):
    disk = parse_disk(EXAMPLE)
    original = list(disk)
    packed = compact(disk)
    assert disk == original
    assert _file_blocks(packed) == _file_blocks(original)


def test_compact_blocks_packs_left():
    packed = compact_blocks(parse_disk(EXAMPLE))
    occupied = sum(value is not None for value in packed)
    assert None not in packed[:occupied]
    assert set(packed[occupied:]) <= {None}


def test_compact_files_keeps_files_whole_and_never_moves_right():
    disk = parse_disk(EXAMPLE)
    packed = compact_files(disk)
    for file_id in _file_blocks(packed):
        positions = [i for i, value in enumerate(packed) if value == file_id]
        assert positions == list(range(positions[0], positions[-1] + 1))
        assert positions[0] <= disk.index(file_id)


def test_checksum_ignores_trailing_free_space():
    disk = compact_blocks(parse_disk(EXAMPLE))
    assert checksum(disk + [None] * 3) == checksum(disk)


def test_main(tmp_path, capsys):
    disk_map = tmp_path / "disk.txt"
    disk_map.write_text(EXAMPLE)
    assert main([str(disk_map)]) == 0
    printed = capsys.readouterr().out
    assert "Sum = 1928" in printed and "Sum = 2858" in printed
    assert main([]) == 1
    assert "Missing file arg!" in capsys.readouterr().out