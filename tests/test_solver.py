import pytest

from slidingtile.domains.board import Board
from slidingtile.domains.puzzlen import NPuzzle
from slidingtile.errors import InvariantViolation
from slidingtile.search.bfs import bfs
from slidingtile.search.solver import HEURISTICS, MAIN, TIE_BREAKS, TWIN, Solver

from conftest import board


SOLVABLE_3 = [
    board((8, 1, 3), (4, 0, 2), (7, 6, 5)),
    board((0, 1, 3), (4, 2, 5), (7, 8, 6)),
    board((1, 2, 3), (0, 4, 6), (7, 5, 8)),
    board((4, 1, 3), (7, 2, 6), (0, 5, 8)),
]
UNSOLVABLE_3 = [
    board((1, 2, 3), (4, 5, 6), (8, 7, 0)),
    board((2, 1, 3), (4, 5, 6), (7, 8, 0)),
    board((1, 2, 3), (4, 6, 5), (7, 8, 0)),
]


def _is_neighbor(a, b):
    return b in a.neighbors()


def _check_path(solver, initial):
    path = solver.solution()
    assert path is not None
    assert len(path) - 1 == solver.moves()
    assert path[0] == initial
    assert path[-1].is_goal()
    for a, b in zip(path, path[1:]):
        assert _is_neighbor(a, b)


def test_known_instance_matches_bfs_optimum(classic3):
    solver = Solver(classic3)
    expected = bfs(classic3)
    assert expected["termination"] == "ok"
    assert solver.is_solvable()
    assert solver.moves() == expected["g"]
    _check_path(solver, classic3)


def test_four_move_instance():
    b = board((0, 1, 3), (4, 2, 5), (7, 8, 6))
    solver = Solver(b)
    assert solver.moves() == 4
    assert [x.tiles() for x in solver.solution()] == [
        ((0, 1, 3), (4, 2, 5), (7, 8, 6)),
        ((1, 0, 3), (4, 2, 5), (7, 8, 6)),
        ((1, 2, 3), (4, 0, 5), (7, 8, 6)),
        ((1, 2, 3), (4, 5, 0), (7, 8, 6)),
        ((1, 2, 3), (4, 5, 6), (7, 8, 0)),
    ]


@pytest.mark.parametrize("b", SOLVABLE_3)
def test_solvable_boards_are_optimal(b):
    solver = Solver(b)
    assert solver.is_solvable()
    assert solver.moves() == bfs(b)["g"]
    assert solver.stats().branch == MAIN
    _check_path(solver, b)


@pytest.mark.parametrize("b", UNSOLVABLE_3)
def test_unsolvable_is_a_result_not_an_error(b):
    solver = Solver(b)
    assert solver.is_solvable() is False
    assert solver.moves() == -1
    assert solver.solution() is None
    assert solver.stats().branch == TWIN
    assert solver.stats().termination == "ok"


@pytest.mark.parametrize("b", SOLVABLE_3 + UNSOLVABLE_3)
def test_exactly_one_of_board_and_twin_is_solvable(b):
    assert Solver(b).is_solvable() != Solver(b.twin()).is_solvable()
    assert Solver(b).is_solvable() == NPuzzle(3).parity_solvable(b)


def test_goal_board_needs_no_moves(goal3):
    solver = Solver(goal3)
    assert solver.is_solvable()
    assert solver.moves() == 0
    assert solver.solution() == [goal3]
    assert solver.stats().expanded == 0


def test_two_by_two():
    solver = Solver(Board([[0, 1], [3, 2]]))
    assert solver.moves() == 2
    unsolvable = Solver(Board([[2, 1], [3, 0]]))
    assert not unsolvable.is_solvable()
    # the 2x2 component of an unsolvable board is tiny and holds no goal
    assert bfs(Board([[2, 1], [3, 0]]))["termination"] == "exhausted"


def test_single_cell_board_is_fatal():
    with pytest.raises(InvariantViolation):
        Solver(Board([[0]]))


@pytest.mark.parametrize("tie_break", TIE_BREAKS)
def test_tie_breaks_keep_optimality(classic3, tie_break):
    solver = Solver(classic3, tie_break=tie_break)
    assert solver.moves() == bfs(classic3)["g"]
    _check_path(solver, classic3)


@pytest.mark.parametrize("heuristic", ["manhattan", "hamming"])
def test_consistent_heuristics_are_optimal(classic3, heuristic):
    assert Solver(classic3, heuristic=heuristic).moves() == bfs(classic3)["g"]


def test_search_is_deterministic(classic3):
    a, b = Solver(classic3), Solver(classic3)
    assert a.solution() == b.solution()
    assert a.stats().expanded == b.stats().expanded


def test_manhattan_expands_less_than_hamming(classic3):
    m = Solver(classic3, heuristic="manhattan").stats()
    h = Solver(classic3, heuristic="hamming").stats()
    assert m.expanded <= h.expanded


def test_solution_is_a_copy(classic3):
    solver = Solver(classic3)
    path = solver.solution()
    path.clear()
    assert len(solver.solution()) == solver.moves() + 1


def test_stats_counts(classic3):
    st = Solver(classic3).stats()
    assert st.expanded > 0
    assert st.generated >= st.expanded * 2
    assert st.peak_open >= 2
    assert st.time_sec >= 0.0
    assert set(st.as_dict()) == {
        "expanded", "generated", "duplicates", "peak_open", "peak_closed",
        "time_sec", "branch", "termination",
    }


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_fifteen_puzzle_scrambles(seed):
    dom = NPuzzle(4)
    start = dom.scramble(16, seed)
    solver = Solver(start)
    assert solver.is_solvable()
    assert solver.moves() <= 16
    # every path between two boards has the same parity
    assert solver.moves() % 2 == 0
    _check_path(solver, start)


def test_unknown_options_rejected(classic3):
    with pytest.raises(ValueError):
        Solver(classic3, heuristic="euclid")
    with pytest.raises(ValueError):
        Solver(classic3, tie_break="random")
    assert "manhattan" in HEURISTICS
