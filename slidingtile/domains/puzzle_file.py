from __future__ import annotations
from pathlib import Path
from typing import List, Union

from slidingtile.domains.board import Board
from slidingtile.errors import MalformedBoard


def parse_board(text: str) -> Board:
    """Parse puzzle text: first line N, then N rows of N whitespace-separated tiles.

    Blank lines are ignored anywhere in the text.
    """
    lines = [ln for ln in text.splitlines() if ln.strip()]
    if not lines:
        raise MalformedBoard("puzzle file is empty")
    try:
        n = int(lines[0].strip())
    except ValueError:
        raise MalformedBoard(f"first line must be the board size, got {lines[0].strip()!r}") from None
    if n < 1:
        raise MalformedBoard(f"board size must be positive, got {n}")

    rows = lines[1:]
    if len(rows) != n:
        raise MalformedBoard(f"expected {n} rows, got {len(rows)}")
    tiles: List[List[int]] = []
    for k, ln in enumerate(rows, start=2):
        try:
            nums = [int(tok) for tok in ln.split()]
        except ValueError:
            raise MalformedBoard(f"line {k}: non-integer tile in {ln.strip()!r}") from None
        if len(nums) != n:
            raise MalformedBoard(f"line {k}: expected {n} tiles, got {len(nums)}")
        tiles.append(nums)
    return Board(tiles)


def read_board(path: Union[str, Path]) -> Board:
    return parse_board(Path(path).read_text(encoding="utf-8"))


def format_board(board: Board) -> str:
    return str(board)
