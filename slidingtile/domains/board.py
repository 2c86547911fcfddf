from __future__ import annotations
from functools import lru_cache
import numbers
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from slidingtile.errors import InvariantViolation, MalformedBoard

State = Tuple[int, ...]  # row-major, 0 is the blank


@lru_cache(maxsize=None)
def _tables(n: int) -> Tuple[Dict[int, Tuple[int, ...]], Dict[int, Tuple[int, int]], State]:
    """Blank-move targets per cell, goal (row, col) per tile, and the goal state for an n×n board."""
    size = n * n
    nei: Dict[int, Tuple[int, ...]] = {}
    for i in range(size):
        r, c = divmod(i, n)
        moves = []
        if r > 0:       moves.append(i - n)   # up
        if r < n - 1:   moves.append(i + n)   # down
        if c > 0:       moves.append(i - 1)   # left
        if c < n - 1:   moves.append(i + 1)   # right
        nei[i] = tuple(moves)
    goal_pos: Dict[int, Tuple[int, int]] = {}
    for t in range(1, size):
        goal_pos[t] = divmod(t - 1, n)
    goal: State = tuple(list(range(1, size)) + [0])
    return nei, goal_pos, goal


def _validate(tiles: Sequence[Sequence[int]]) -> Tuple[int, State]:
    try:
        rows = [list(row) for row in tiles]
    except TypeError as e:
        raise MalformedBoard(f"grid must be a sequence of rows: {e}") from e
    n = len(rows)
    if n == 0:
        raise MalformedBoard("grid is empty")
    for r, row in enumerate(rows):
        if len(row) != n:
            raise MalformedBoard(f"grid is not square: row {r} has {len(row)} entries, expected {n}")
        for v in row:
            if isinstance(v, bool) or not isinstance(v, numbers.Integral):
                raise MalformedBoard(f"tile {v!r} in row {r} is not an integer")
    flat = tuple(int(v) for row in rows for v in row)
    if 0 not in flat:
        raise MalformedBoard("grid has no blank (0)")
    if sorted(flat) != list(range(n * n)):
        seen = set()
        for v in flat:
            if v < 0 or v >= n * n:
                raise MalformedBoard(f"tile {v} out of range 0..{n * n - 1}")
            if v in seen:
                raise MalformedBoard(f"tile {v} appears more than once")
            seen.add(v)
    return n, flat


class Board:
    """Immutable N×N sliding-tile configuration (0 is the blank).

    The input grid is copied into a tuple on construction, so later changes
    to the caller's lists never reach the board.
    """

    __slots__ = ("N", "_s", "_key")

    def __init__(self, tiles: Sequence[Sequence[int]]):
        self.N, self._s = _validate(tiles)
        self._key: Optional[str] = None

    @classmethod
    def _from_state(cls, n: int, s: State) -> "Board":
        # successors of a valid board are valid; skip re-validation
        b = cls.__new__(cls)
        b.N = n
        b._s = s
        b._key = None
        return b

    @classmethod
    def from_state(cls, n: int, s: Iterable[int]) -> "Board":
        """Build a board from a flat row-major sequence."""
        flat = list(s)
        if len(flat) != n * n:
            raise MalformedBoard(f"expected {n * n} tiles for n={n}, got {len(flat)}")
        return cls([flat[r * n:(r + 1) * n] for r in range(n)])

    # ---------- accessors ----------
    def dimension(self) -> int:
        return self.N

    @property
    def state(self) -> State:
        """Flat row-major tuple of tiles."""
        return self._s

    def tiles(self) -> Tuple[Tuple[int, ...], ...]:
        n = self.N
        return tuple(self._s[r * n:(r + 1) * n] for r in range(n))

    def blank_position(self) -> Tuple[int, int]:
        return divmod(self._s.index(0), self.N)

    # ---------- heuristics ----------
    def hamming(self) -> int:
        """Number of tiles (blank excluded) not in their goal cell."""
        return sum(1 for idx, t in enumerate(self._s) if t != 0 and t != idx + 1)

    def manhattan(self) -> int:
        """Sum of Manhattan distances to goal positions (blank ignored)."""
        _, goal_pos, _ = _tables(self.N)
        dist = 0
        for idx, tile in enumerate(self._s):
            if tile == 0:
                continue
            r, c = divmod(idx, self.N)
            gr, gc = goal_pos[tile]
            dist += abs(r - gr) + abs(c - gc)
        return dist

    def linear_conflict(self) -> int:
        """Manhattan + 2 per pair of linearly-conflicting tiles (rows & cols)."""
        _, goal_pos, _ = _tables(self.N)
        s, N = self._s, self.N
        m = self.manhattan()
        # Row conflicts
        for r in range(N):
            row = s[r * N:(r + 1) * N]
            tiles = [t for t in row if t != 0 and goal_pos[t][0] == r]
            for i in range(len(tiles)):
                gi = goal_pos[tiles[i]][1]
                for j in range(i + 1, len(tiles)):
                    if gi > goal_pos[tiles[j]][1]:
                        m += 2
        # Column conflicts
        for c in range(N):
            col = [s[c + r * N] for r in range(N)]
            tiles = [t for t in col if t != 0 and goal_pos[t][1] == c]
            for i in range(len(tiles)):
                gi = goal_pos[tiles[i]][0]
                for j in range(i + 1, len(tiles)):
                    if gi > goal_pos[tiles[j]][0]:
                        m += 2
        return m

    def is_goal(self) -> bool:
        # tile at (i, j) must be (i*N + j + 1) mod N², so the blank sits last
        return self._s == _tables(self.N)[2]

    # ---------- successors ----------
    def neighbors(self) -> List["Board"]:
        """Boards one blank slide away, in up, down, left, right order."""
        nei, _, _ = _tables(self.N)
        z = self._s.index(0)
        out: List[Board] = []
        for j in nei[z]:
            lst = list(self._s)
            lst[z], lst[j] = lst[j], lst[z]
            out.append(Board._from_state(self.N, tuple(lst)))
        return out

    def twin(self) -> "Board":
        """Swap the first horizontally adjacent pair of non-blank tiles (row-major scan)."""
        n, s = self.N, self._s
        for r in range(n):
            for c in range(n - 1):
                i = r * n + c
                if s[i] != 0 and s[i + 1] != 0:
                    lst = list(s)
                    lst[i], lst[i + 1] = lst[i + 1], lst[i]
                    return Board._from_state(n, tuple(lst))
        raise InvariantViolation(f"no adjacent non-blank pair to swap on a {n}x{n} board")

    # ---------- identity ----------
    def key(self) -> str:
        """Canonical rendering, used as the visited-set key."""
        if self._key is None:
            n = self.N
            lines = [str(n)]
            for r in range(n):
                lines.append(" ".join(str(t) for t in self._s[r * n:(r + 1) * n]))
            self._key = "\n".join(lines)
        return self._key

    def equals(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.N == other.N and self._s == other._s

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.N, self._s))

    def __str__(self) -> str:
        return self.key()

    def __repr__(self) -> str:
        return f"Board({[list(row) for row in self.tiles()]!r})"
