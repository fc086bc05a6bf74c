# =========================================================
# --- core_state_invariants.py ---
# =========================================================

from collections import Counter
from typing import Any

import numpy as np

# =========================================================

def assert_move_invariant(state: Any, where: str = "") -> None:
    """
    Check that the move list could have been produced by legal play.

    Every placement targets a distinct, existing field, and a swap can only
    appear as the second move.

    Args:
        state: The GameState object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If the move list is inconsistent.
    """
    placed = Counter(m.field for m in state.moves if m.is_place)
    twice = [f for f, n in placed.items() if n > 1]
    if twice:
        raise AssertionError(
            f"[DOUBLE PLACEMENT] fields {sorted(twice)} occupied twice at {where}"
        )
    outside = [f for f in placed if not state.board.is_field(f)]
    if outside:
        raise AssertionError(f"[OFF BOARD] fields {sorted(outside)} at {where}")
    swaps = [i for i, m in enumerate(state.moves) if m.is_swap]
    if swaps and swaps != [1]:
        raise AssertionError(f"[SWAP MISPLACED] swap at move(s) {[i + 1 for i in swaps]} at {where}")


def assert_color_invariant(state: Any, where: str = "") -> None:
    """
    Check that the derived colours agree with the move list.

    Args:
        state: The GameState object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If the number of coloured fields differs from the
            number of placements.
    """
    colors = state.colors()
    colored = int(np.count_nonzero(colors))
    if colored != state.occupied_count():
        raise AssertionError(
            f"[COLOR DESYNC] at {where}\n"
            f"Colored={colored}, Occupied={state.occupied_count()}"
        )


def assert_state_invariant(state: Any, where: str = "") -> None:
    """
    Perform full invariant check for a Poly-Y state.

    This includes:
    - Move list consistency
    - Colour / occupancy consistency

    Args:
        state: The GameState object to check.
        where: Optional description of where the check is performed (for debugging).

    Raises:
        AssertionError: If any invariant fails.
    """
    assert_move_invariant(state, where)
    assert_color_invariant(state, where)
