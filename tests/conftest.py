import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from slidingtile.domains.board import Board


def board(*rows):
    return Board([list(r) for r in rows])


@pytest.fixture
def goal3():
    return board((1, 2, 3), (4, 5, 6), (7, 8, 0))


@pytest.fixture
def classic3():
    return board((8, 1, 3), (4, 0, 2), (7, 6, 5))
