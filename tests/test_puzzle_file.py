import pytest

from slidingtile.domains.puzzle_file import format_board, parse_board, read_board
from slidingtile.errors import MalformedBoard


def test_parse_basic():
    b = parse_board("3\n 8  1  3\n 4  0  2\n 7  6  5\n")
    assert b.tiles() == ((8, 1, 3), (4, 0, 2), (7, 6, 5))


def test_parse_ignores_blank_lines_and_tabs():
    b = parse_board("\n2\n\n1\t2\n\n3 0\n\n")
    assert b.is_goal()


def test_format_round_trip():
    text = "3\n8 1 3\n4 0 2\n7 6 5"
    assert format_board(parse_board(text)) == text


def test_read_board(tmp_path):
    p = tmp_path / "puzzle04.txt"
    p.write_text("3\n0 1 3\n4 2 5\n7 8 6\n")
    assert read_board(p).blank_position() == (0, 0)


@pytest.mark.parametrize("text, msg", [
    ("", "empty"),
    ("x\n1 2\n3 0\n", "board size"),
    ("0\n", "positive"),
    ("2\n1 2\n", "expected 2 rows"),
    ("2\n1 2\n3 0\n4 5\n", "expected 2 rows"),
    ("2\n1 2 9\n3 0\n", "expected 2 tiles"),
    ("2\n1 a\n3 0\n", "non-integer"),
    ("2\n1 2\n3 3\n", "no blank"),
])
def test_parse_errors(text, msg):
    with pytest.raises(MalformedBoard, match=msg):
        parse_board(text)


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_board(tmp_path / "nope.txt")
