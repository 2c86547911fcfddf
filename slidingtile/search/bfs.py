from collections import deque
from time import perf_counter
from typing import Dict, List, Optional, Set

from slidingtile.domains.board import Board

def bfs(start: Board, max_expanded: Optional[int] = None):
    """Uninformed breadth-first search from ``start`` to the goal.

    Reference for the A* solver: the first goal dequeued is at minimum depth.
    Returns a dict with the path (list of Boards) and move count ``g``; both are
    None when the component of ``start`` holds no goal or ``max_expanded`` is hit.
    """
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[Board, Optional[Board]] = {start: None}
    expanded = generated = 0
    seen: Set[Board] = {start}
    peak = 1
    while q:
        if max_expanded is not None and expanded >= max_expanded:
            return {"path": None, "g": None, "expanded": expanded, "generated": generated,
                    "peak_open": peak, "time": perf_counter()-t0, "algorithm": "BFS", "termination": "limit"}
        peak = max(peak, len(q))
        b = q.popleft()
        if b.is_goal():
            path: List[Board] = []
            node: Optional[Board] = b
            while node is not None:
                path.append(node); node = parent[node]
            path.reverse()
            return {"path": path, "g": len(path) - 1, "expanded": expanded, "generated": generated,
                    "peak_open": peak, "time": perf_counter()-t0, "algorithm": "BFS", "termination": "ok"}
        expanded += 1
        for b2 in b.neighbors():
            generated += 1
            if b2 in seen: continue
            seen.add(b2); parent[b2] = b; q.append(b2)
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "peak_open": peak, "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}
