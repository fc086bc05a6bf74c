import numpy as np
import pytest

from polyy.core.board import Board
from polyy.core.moves import Move, SWAP
from polyy.core.scoring import captured_corners, field_colors, iter_chains, score_colors, scores

P = Move.place


def test_field_colors_alternate(y3):
    colors = field_colors(y3, [P(1), P(0), P(4)])
    assert colors.tolist() == [-1, 1, 0, 0, 1, 0]


def test_swap_transfers_first_stone(y3):
    colors = field_colors(y3, [P(4), SWAP, P(0)])
    assert colors.tolist() == [1, 0, 0, 0, -1, 0]


def test_swap_must_follow_a_placement(y3):
    with pytest.raises(ValueError):
        field_colors(y3, [SWAP])


@pytest.mark.parametrize("mask, n_sides, expected", [
    (0b011, 3, []),
    (0b111, 3, [0, 1, 2]),
    (0b10111, 5, [0, 1, 4]),
    (0b10101, 5, [4]),
])
def test_captured_corners(mask, n_sides, expected):
    assert captured_corners(mask, n_sides) == expected


def test_triangle_chain_over_all_sides(triangle):
    colors = np.array([1, 1, 1], dtype=np.int8)
    chains = list(iter_chains(triangle, colors))
    assert len(chains) == 1
    assert chains[0].sides == 0b111
    assert chains[0].corners == (0, 1, 2)
    assert chains[0].player == 0
    assert score_colors(triangle, colors) == (3, 0)


def test_triangle_isolated_stones_score_nothing(triangle):
    assert scores(triangle, [P(0), P(1), P(2)]) == (0, 0)


def test_chains_split_by_colour(y3):
    colors = field_colors(y3, [P(1), P(0), P(4), P(3), P(2)])
    chains = {c.fields[0]: c for c in iter_chains(y3, colors)}
    assert sorted(chains) == [0, 1, 3]
    assert sorted(chains[1].fields) == [1, 2, 4]
    assert chains[1].sides == 0b111
    assert chains[0].player == 1 and chains[0].corners == ()
    assert score_colors(y3, colors) == (3, 0)


def test_asymmetric_adjacency_is_deterministic():
    board = Board([[1], [], [1]], [[0], [1], [2]])
    colors = np.ones(3, dtype=np.int8)
    first = [(c.fields, c.sides) for c in iter_chains(board, colors)]
    second = [(c.fields, c.sides) for c in iter_chains(board, colors)]
    assert first == second == [((0, 1), 0b011), ((2,), 0b100)]
    assert score_colors(board, colors) == (0, 0)


def test_long_path_does_not_recurse():
    n = 50000
    fields = [[j for j in (i - 1, i + 1) if 0 <= j < n] for i in range(n)]
    board = Board(fields, [[0], [n // 2], [n - 1]])
    colors = np.ones(n, dtype=np.int8)
    assert score_colors(board, colors) == (3, 0)
    colors[n // 4] = -1
    assert score_colors(board, colors) == (0, 0)


def test_scratch_state_is_not_shared(y3):
    moves = [P(1), P(0), P(4), P(3), P(2)]
    assert scores(y3, moves) == scores(y3, moves) == (3, 0)
    assert scores(y3, moves[:4]) == (0, 0)
