# =========================================================
# --- players_player.py ---
# =========================================================

from abc import ABC, abstractmethod
from typing import List, Optional

from polyy.core.moves import Move
from polyy.core.state import GameState

# =========================================================

class Player(ABC):
    """
    Abstract base class for a Poly-Y player.

    Attributes:
        id (Optional[int]): Player index (0 or 1). Initialized in constructor.
    """

    def __init__(self, id: Optional[int] = None):
        """
        Initialize a player with an optional ID.

        Args:
            id (Optional[int]): Player index (0 or 1). Defaults to None.
        """
        self.id: Optional[int] = id

    @abstractmethod
    def select_move(self, moves: List[Move], state: GameState) -> Optional[Move]:
        """
        Select a move from a list of legal moves.

        Args:
            moves (List[Move]): Legal moves in the current state.
            state (GameState): A copy of the current game state.

        Returns:
            Optional[Move]: Selected move, or None if the player has none to offer.
        """
        pass
