import pytest

from polyy.core.board import Board


TRIANGLE_TEXT = """Poly-Y 3 3
2 2 3
2 1 3
2 1 2
1 1
1 2
1 3
"""


@pytest.fixture
def triangle_text():
    return TRIANGLE_TEXT


@pytest.fixture
def triangle():
    """Three mutually adjacent fields, each forming its own side."""
    return Board([[1, 2], [0, 2], [0, 1]], [[0], [1], [2]])


@pytest.fixture
def y3():
    """
    Size-3 triangular Y board.

          0
         1 2
        3 4 5

    Sides: left (0, 1, 3), bottom (3, 4, 5), right (5, 2, 0).
    Corner fields: 3 (left/bottom), 5 (bottom/right), 0 (right/left).
    """
    fields = [
        [1, 2],
        [0, 2, 3, 4],
        [0, 1, 4, 5],
        [1, 4],
        [1, 2, 3, 5],
        [2, 4],
    ]
    sides = [[0, 1, 3], [3, 4, 5], [5, 2, 0]]
    return Board(fields, sides)

