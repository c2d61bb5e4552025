import pytest

from puzzledays.day04 import count_mas_crosses, count_xmas, is_mas_cross, main, solve

SAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""


def _rows(text):
    return text.splitlines()


def _transpose(text):
    return "\n".join("".join(col) for col in zip(*_rows(text))) + "\n"


def _mirror(text):
    return "\n".join(row[::-1] for row in _rows(text)) + "\n"


def _flip(text):
    return "\n".join(reversed(_rows(text))) + "\n"


def test_sample_solution():
    assert solve(SAMPLE) == (18, 9)


def test_single_word():
    assert count_xmas("XMAS") == 1


def test_word_and_reverse_count_alike():
    assert count_xmas("XMAS") == count_xmas("SAMX")


def test_shared_letter_counts_both_words():
    assert count_xmas("XMASAMX") == count_xmas("XMAS") + count_xmas("SAMX")


def test_vertical_matches_horizontal():
    assert count_xmas("X\nM\nA\nS\n") == count_xmas("XMAS")


@pytest.mark.parametrize("transform", [_transpose, _mirror, _flip])
def test_counts_are_symmetric(transform):
    assert count_xmas(transform(SAMPLE)) == count_xmas(SAMPLE)
    assert count_mas_crosses(transform(SAMPLE)) == count_mas_crosses(SAMPLE)


def test_is_mas_cross_accepts_valid_corners():
    assert is_mas_cross("M", "S", "M", "S")
    assert is_mas_cross("S", "S", "M", "M")


def test_is_mas_cross_rejects_invalid_corners():
    assert not is_mas_cross("M", "M", "M", "M")
    assert not is_mas_cross("M", "S", "S", "M")


def test_cross_requires_interior_a():
    assert count_mas_crosses("M.S\n.A.\nM.S\n") == count_mas_crosses("M.S\n.A.\nM.S\n.A.\n")
    assert count_mas_crosses("M.S\n.X.\nM.S\n") == count_mas_crosses("...\n...\n...\n")


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        count_xmas("XMAS\nXM\n")


def test_main_prints_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE)
    assert main([str(path)]) == 0
    task1, task2 = solve(SAMPLE)
    out = capsys.readouterr().out
    assert f"Answer Task 1:\n  Sum = {task1}" in out
    assert f"Answer Task 2:\n  Sum = {task2}" in out