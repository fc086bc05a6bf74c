# =========================================================
# --- core_board.py ---
# =========================================================

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

from polyy.utils.bitmask import indices_from_bits, pair_mask, set_bit

from .errors import FieldCountOutOfRange, SideCountOutOfRange, InvalidAdjacency, InvalidSideMembership

# =========================================================

"""
Board graph and board-related constants for Poly-Y.

This module defines:
- Limits on the number of fields and sides
- Stone representation for both players
- The immutable Board graph (adjacency lists and sides)
- Per-field side-membership bitmasks
"""

#: Maximum number of fields on a Poly-Y board
MAX_FIELDS = 1000000

#: Maximum number of sides; kept below the width of a 32-bit word
#: so that side membership fits a single bitmask
MAX_SIDES = 31

#: Minimum number of sides of the polygon
MIN_SIDES = 3

#: Stone representation on the board
#: Positive for Player 0, negative for Player 1
STONE = (1, -1)

#: Value of an unoccupied field
EMPTY = 0


@dataclass(frozen=True)
class Board:
    """
    Immutable Poly-Y board: an undirected graph of fields plus polygon sides.

    ``fields[i]`` lists the neighbours of field ``i``; ``sides[i]`` lists the
    fields lying on side ``i``. Sides are ordered around the polygon, so
    side ``i`` and side ``(i + 1) % n_sides`` meet at corner ``i``. A field
    may lie on several sides (corner fields).

    Attributes:
        fields (Tuple[Tuple[int, ...], ...]): Zero-based adjacency lists.
        sides (Tuple[Tuple[int, ...], ...]): Zero-based fields on each side.
        side_masks (np.ndarray): Read-only uint32 array, bit ``i`` of entry
            ``f`` set iff field ``f`` lies on side ``i``.
    """
    fields: Tuple[Tuple[int, ...], ...]
    sides: Tuple[Tuple[int, ...], ...]
    side_masks: np.ndarray = field(init=False, repr=False, compare=False)

    def __init__(self, fields: Sequence[Sequence[int]], sides: Sequence[Sequence[int]]):
        object.__setattr__(self, "fields", tuple(tuple(int(j) for j in nbrs) for nbrs in fields))
        object.__setattr__(self, "sides", tuple(tuple(int(j) for j in side) for side in sides))
        self._validate()
        object.__setattr__(self, "side_masks", self._compute_side_masks())

    # ---------- Validation ----------
    def _validate(self) -> None:
        """Check the board invariants, raising a distinct error per violation."""
        nfield, nside = len(self.fields), len(self.sides)
        if nfield < 1 or nfield > MAX_FIELDS:
            raise FieldCountOutOfRange(nfield)
        if nside < MIN_SIDES or nside > MAX_SIDES:
            raise SideCountOutOfRange(nside)
        for i, nbrs in enumerate(self.fields):
            for j in nbrs:
                if not 0 <= j < nfield:
                    raise InvalidAdjacency(i, j)
        for i, side in enumerate(self.sides):
            for j in side:
                if not 0 <= j < nfield:
                    raise InvalidSideMembership(i, j)

    def _compute_side_masks(self) -> np.ndarray:
        masks = np.zeros(len(self.fields), dtype=np.uint32)
        for i, side in enumerate(self.sides):
            for j in side:
                masks[j] = set_bit(i, int(masks[j]))
        masks.setflags(write=False)
        return masks

    # ---------- Properties ----------
    @property
    def n_fields(self) -> int:
        """Number of fields on the board."""
        return len(self.fields)

    @property
    def n_sides(self) -> int:
        """Number of sides of the polygon (and number of corners)."""
        return len(self.sides)

    def is_field(self, idx: int) -> bool:
        """Check if idx is a valid field index."""
        return 0 <= idx < len(self.fields)

    def neighbours(self, idx: int) -> Tuple[int, ...]:
        """Return the adjacency list of a field."""
        return self.fields[idx]

    def side_mask(self, idx: int) -> int:
        """Return the side-membership bitmask of a field as a Python int."""
        return int(self.side_masks[idx])

    def sides_of(self, idx: int) -> List[int]:
        """Return the sides a field lies on."""
        return indices_from_bits(self.side_masks[idx])

    # ---------- Corners ----------
    def corner(self, idx: int) -> Tuple[int, int]:
        """Return the pair of sides meeting at corner idx."""
        return idx, (idx + 1) % self.n_sides

    def corner_mask(self, idx: int) -> int:
        """Return the two-bit side mask of corner idx."""
        return pair_mask(*self.corner(idx))

    def corner_fields(self, idx: int) -> Tuple[int, ...]:
        """Return all fields lying on both sides of corner idx."""
        m = self.corner_mask(idx)
        return tuple(int(f) for f in np.flatnonzero((self.side_masks & np.uint32(m)) == m))

    def __str__(self) -> str:
        return f"Poly-Y board ({self.n_fields} fields, {self.n_sides} sides)"
