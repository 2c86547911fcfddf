"""A* solver for the N-puzzle with twin-board unsolvability detection.

The initial board and its twin (one pair of adjacent tiles swapped) lie in
disjoint components of the move graph, and exactly one of them can reach the
goal. Both are seeded into one priority queue, each node tagged with the branch
it descends from; whichever branch pops a goal first decides the outcome.

Duplicate handling: full visited set. Each branch keeps a closed set keyed by
``Board.key()`` and the best g seen per board. A popped node whose board is
already closed in its branch is dropped, and a child is only pushed when it
improves the best g for that board. With a consistent heuristic (Manhattan,
Hamming) no state is expanded twice.

Heap key is ``(f, tie, counter)`` where ``tie`` is selected by ``tie_break``
("h", "g", "fifo", "lifo") and ``counter`` is the insertion order, so the
search order and the returned path are reproducible.

Successors are generated with the blank moving up, down, left, right, taken
literally as row -1, row +1, col -1, col +1. A solver that steps col -1, col +1,
row -1, row +1 instead breaks ties differently and can return another,
equally short, path.
"""
from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Callable, Dict, List, Optional, Set, Tuple
from time import perf_counter
import heapq
import itertools
import logging
import math

from slidingtile.domains.board import Board

logger = logging.getLogger(__name__)

MAIN = "main"
TWIN = "twin"
NO_PARENT = -1

HEURISTICS: Dict[str, Callable[[Board], int]] = {
    "manhattan": Board.manhattan,
    "hamming": Board.hamming,
    "linear_conflict": Board.linear_conflict,
}
TIE_BREAKS = ("h", "g", "fifo", "lifo")


@dataclass(frozen=True)
class SearchNode:
    board: Board
    g: int
    h: int
    parent: int  # index into the solver's node arena, NO_PARENT for a root
    branch: str

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    peak_open: int = 0
    peak_closed: int = 0
    time_sec: float = 0.0
    branch: Optional[str] = None  # branch that popped a goal
    termination: str = "exhausted"

    def as_dict(self) -> Dict[str, object]:
        return asdict(self)


class Solver:
    """Runs the whole search on construction; results via the accessors."""

    def __init__(self, initial: Board, heuristic: str = "manhattan", tie_break: str = "h"):
        if heuristic not in HEURISTICS:
            raise ValueError(f"unknown heuristic {heuristic!r}, expected one of {sorted(HEURISTICS)}")
        if tie_break not in TIE_BREAKS:
            raise ValueError(f"unknown tie_break {tie_break!r}, expected one of {TIE_BREAKS}")
        self._initial = initial
        self._hfun = HEURISTICS[heuristic]
        self._tie_break = tie_break
        self._nodes: List[SearchNode] = []
        self._stats = SearchStats()

        # InvariantViolation from twin() is fatal and leaves the constructor
        twin = initial.twin()

        goal_idx = self._search([(initial, MAIN), (twin, TWIN)])
        self._solution: Optional[List[Board]] = None
        if goal_idx is not None and self._nodes[goal_idx].branch == MAIN:
            self._solution = self._reconstruct_path(goal_idx)
        # the arena is only needed for path reconstruction
        self._nodes = []

    # ---------- results ----------
    def is_solvable(self) -> bool:
        return self._solution is not None

    def moves(self) -> int:
        if self._solution is None:
            return -1
        return len(self._solution) - 1

    def solution(self) -> Optional[List[Board]]:
        if self._solution is None:
            return None
        return list(self._solution)

    def stats(self) -> SearchStats:
        return self._stats

    # ---------- search ----------
    def _priority(self, f: int, g: int, h: int, ctr: int) -> Tuple[int, int, int]:
        if self._tie_break == "h":    return (f, h, ctr)
        if self._tie_break == "g":    return (f, -g, ctr)
        if self._tie_break == "fifo": return (f, 0, ctr)
        return (f, 0, -ctr)

    def _add_node(self, board: Board, g: int, parent: int, branch: str) -> int:
        self._nodes.append(SearchNode(board=board, g=g, h=self._hfun(board), parent=parent, branch=branch))
        return len(self._nodes) - 1

    def _search(self, roots: List[Tuple[Board, str]]) -> Optional[int]:
        stats = self._stats
        t0 = perf_counter()
        open_heap: List[Tuple[Tuple[int, int, int], int]] = []
        counter = itertools.count()

        closed: Dict[str, Set[str]] = {MAIN: set(), TWIN: set()}
        best_g: Dict[str, Dict[str, int]] = {MAIN: {}, TWIN: {}}
        seen_ever: Dict[str, Set[str]] = {MAIN: set(), TWIN: set()}

        for board, branch in roots:
            idx = self._add_node(board, 0, NO_PARENT, branch)
            node = self._nodes[idx]
            best_g[branch][board.key()] = 0
            seen_ever[branch].add(board.key())
            heapq.heappush(open_heap, (self._priority(node.f, 0, node.h, next(counter)), idx))
        logger.debug("search start: n=%d h0=%d", self._initial.dimension(), self._nodes[0].h)

        goal_idx: Optional[int] = None
        while open_heap:
            stats.peak_open = max(stats.peak_open, len(open_heap))
            _, idx = heapq.heappop(open_heap)
            node = self._nodes[idx]
            key = node.board.key()
            if key in closed[node.branch]:
                continue

            if node.board.is_goal():
                goal_idx = idx
                stats.branch = node.branch
                stats.termination = "ok"
                break

            closed[node.branch].add(key)
            stats.expanded += 1
            stats.peak_closed = max(stats.peak_closed, len(closed[MAIN]) + len(closed[TWIN]))

            g2 = node.g + 1
            for nb in node.board.neighbors():
                k2 = nb.key()
                stats.generated += 1
                if k2 in seen_ever[node.branch]:
                    stats.duplicates += 1
                else:
                    seen_ever[node.branch].add(k2)

                if g2 < best_g[node.branch].get(k2, math.inf):
                    best_g[node.branch][k2] = g2
                    child = self._add_node(nb, g2, idx, node.branch)
                    c = self._nodes[child]
                    heapq.heappush(open_heap, (self._priority(c.f, g2, c.h, next(counter)), child))

        stats.time_sec = perf_counter() - t0
        logger.debug(
            "search done: termination=%s branch=%s expanded=%d generated=%d time=%.4fs",
            stats.termination, stats.branch, stats.expanded, stats.generated, stats.time_sec,
        )
        return goal_idx

    def _reconstruct_path(self, idx: int) -> List[Board]:
        path: List[Board] = []
        while idx != NO_PARENT:
            node = self._nodes[idx]
            path.append(node.board)
            idx = node.parent
        path.reverse()
        return path
