# =========================================================
# --- core_scoring.py ---
# =========================================================

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from polyy.utils.bitmask import has_three_bits, pair_mask

from .board import Board, STONE, EMPTY
from .moves import Move

# =========================================================

"""
Corner scoring for Poly-Y.

A chain is a maximal connected group of same-coloured fields. Its
reachable-sides mask is the OR of the side masks of its fields. A chain
touching at least three sides captures every corner whose two sides are
both in its mask; a player's score is the sum over that player's chains.

All scratch arrays are allocated per call, nothing is cached on the board
or the game state.
"""


@dataclass(frozen=True)
class Chain:
    """
    A connected group of stones of one colour.

    Attributes:
        color (int): +1 (player 0) or -1 (player 1).
        fields (Tuple[int, ...]): Member fields in traversal order.
        sides (int): Bitmask of all sides touched by the chain.
        corners (Tuple[int, ...]): Corners captured by the chain.
    """
    color: int
    fields: Tuple[int, ...]
    sides: int
    corners: Tuple[int, ...]

    @property
    def player(self) -> int:
        """Index of the player owning the chain."""
        return STONE.index(self.color)


def field_colors(board: Board, moves: Sequence[Move]) -> np.ndarray:
    """
    Derive the colour of every field from a move list.

    The field placed on move ``i`` gets ``STONE[i % 2]``. A swap at move
    ``i`` hands the field placed by move ``i - 1`` over to the player of
    move ``i``.

    Args:
        board (Board): The board the moves were played on.
        moves (Sequence[Move]): Moves in playing order.

    Returns:
        np.ndarray: int8 array of length ``board.n_fields`` with +1, -1 or 0.

    Raises:
        ValueError: If a swap does not follow a placement.
    """
    colors = np.full(board.n_fields, EMPTY, dtype=np.int8)
    for i, move in enumerate(moves):
        if move.is_swap:
            if i == 0 or not moves[i - 1].is_place:
                raise ValueError(f"Swap at move {i + 1} does not follow a placement")
            target = moves[i - 1].field
        else:
            target = move.field
        colors[target] = STONE[i % 2]
    return colors


def captured_corners(sides: int, n_sides: int) -> List[int]:
    """
    Return the corners captured by a chain with the given sides mask.

    Args:
        sides (int): Reachable-sides mask of the chain.
        n_sides (int): Number of sides of the board.

    Returns:
        List[int]: Corner indices ``i`` such that sides ``i`` and
        ``(i + 1) % n_sides`` are both in the mask. Empty if the chain
        touches fewer than three sides.
    """
    if not has_three_bits(sides):
        return []
    corners = []
    for i in range(n_sides):
        m = pair_mask(i, (i + 1) % n_sides)
        if sides & m == m:
            corners.append(i)
    return corners


def _trace_chain(board: Board, colors: np.ndarray, visited: np.ndarray, root: int) -> Tuple[List[int], int]:
    """Depth-first walk over same-coloured neighbours with an explicit stack."""
    color = colors[root]
    members: List[int] = []
    sides = 0
    visited[root] = True
    stack = [root]
    while stack:
        i = stack.pop()
        members.append(i)
        sides |= int(board.side_masks[i])
        for j in board.fields[i]:
            if not visited[j] and colors[j] == color:
                visited[j] = True
                stack.append(j)
    return members, sides


def iter_chains(board: Board, colors: np.ndarray) -> Iterator[Chain]:
    """
    Yield every chain on the board, ordered by its lowest-indexed root.

    Args:
        board (Board): Board graph.
        colors (np.ndarray): Per-field colours as returned by field_colors().

    Yields:
        Chain: Each chain with its sides mask and captured corners.
    """
    visited = np.zeros(board.n_fields, dtype=bool)
    for root in np.flatnonzero(colors):
        root = int(root)
        if visited[root]:
            continue
        members, sides = _trace_chain(board, colors, visited, root)
        yield Chain(
            color=int(colors[root]),
            fields=tuple(members),
            sides=sides,
            corners=tuple(captured_corners(sides, board.n_sides)),
        )


def score_colors(board: Board, colors: np.ndarray) -> Tuple[int, int]:
    """Return (player 0, player 1) captured corners for a colour assignment."""
    score = [0, 0]
    for chain in iter_chains(board, colors):
        score[chain.player] += len(chain.corners)
    return score[0], score[1]


def scores(board: Board, moves: Sequence[Move]) -> Tuple[int, int]:
    """Return (player 0, player 1) captured corners after the given moves."""
    return score_colors(board, field_colors(board, moves))
