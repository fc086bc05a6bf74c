# =========================================================
# --- core_moves.py ---
# =========================================================

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# =========================================================

#: Transcript token of the swap move
SWAP_TOKEN = -1


class MoveType(Enum):
    """
    Enumeration of possible move types in Poly-Y.

    Attributes:
        PLACE: Claim an unoccupied field.
        SWAP: Take over the first stone (pie rule, second move only).
    """
    PLACE = 1
    SWAP = 2


@dataclass(frozen=True)
class Move:
    """
    A single Poly-Y move.

    Use ``Move.place(field)`` and ``Move.swap()`` (or the ``SWAP`` constant)
    rather than building instances by hand.

    Attributes:
        move_type (MoveType): PLACE or SWAP.
        field (Optional[int]): Zero-based target field; None for SWAP.
    """
    move_type: MoveType
    field: Optional[int] = None

    def __post_init__(self) -> None:
        if self.move_type is MoveType.PLACE and self.field is None:
            raise ValueError("A placement needs a field")
        if self.move_type is MoveType.SWAP and self.field is not None:
            raise ValueError("A swap does not take a field")

    @classmethod
    def place(cls, field: int) -> "Move":
        """Return a move claiming the given zero-based field."""
        return cls(MoveType.PLACE, int(field))

    @classmethod
    def swap(cls) -> "Move":
        """Return the swap move."""
        return cls(MoveType.SWAP)

    @classmethod
    def from_token(cls, token: int) -> "Move":
        """
        Build a move from its transcript number.

        Args:
            token (int): 1-based field index, or -1 for swap.

        Raises:
            ValueError: If token is neither -1 nor positive.
        """
        if token == SWAP_TOKEN:
            return cls.swap()
        if token < 1:
            raise ValueError(f"Invalid move number {token}")
        return cls.place(token - 1)

    @property
    def is_swap(self) -> bool:
        return self.move_type is MoveType.SWAP

    @property
    def is_place(self) -> bool:
        return self.move_type is MoveType.PLACE

    def to_token(self) -> int:
        """Return the transcript number (1-based field, -1 for swap)."""
        return SWAP_TOKEN if self.is_swap else self.field + 1

    def __str__(self) -> str:
        """Return the transcript representation of the move."""
        return str(self.to_token())

    def __repr__(self) -> str:
        return "Swap" if self.is_swap else f"Place({self.field})"


#: The (only) swap move
SWAP = Move.swap()
