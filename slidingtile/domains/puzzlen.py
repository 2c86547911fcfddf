from __future__ import annotations
import random

from slidingtile.domains.board import Board, State, _tables


class NPuzzle:
    """Instance generator and parity oracle for the N×N sliding-tile puzzle."""
    def __init__(self, n: int):
        assert n >= 2
        self.N = n
        self.size = n * n
        self._nei, _, self.GOAL_STATE = _tables(n)
        self.GOAL = Board._from_state(n, self.GOAL_STATE)

    # ---------- Instance generation ----------
    def scramble(self, depth: int, seed: int) -> Board:
        """Depth-limited random walk from GOAL with no immediate backtrack."""
        rng = random.Random(seed)
        s: State = self.GOAL_STATE
        last_blank = None
        for _ in range(depth):
            z = s.index(0)
            cand = list(self._nei[z])
            if last_blank in cand and len(cand) > 1:
                cand.remove(last_blank)
            j = rng.choice(cand)
            lst = list(s)
            lst[z], lst[j] = lst[j], lst[z]
            last_blank = z
            s = tuple(lst)
        return Board._from_state(self.N, s)

    def parity_solvable(self, board: Board) -> bool:
        """Solvability rules:
           - N odd: inversions must be even
           - N even: (inversions + blank_row_from_bottom) must be ODD
             (row count is 1-based from the bottom)

        Only used as an independent check on the solver; the search itself
        never looks at parity.
        """
        s = board.state
        arr = [x for x in s if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.N % 2 == 1:
            return (inv % 2) == 0
        blank_row_from_bottom = self.N - s.index(0) // self.N
        return ((inv + blank_row_from_bottom) % 2) == 1
