# =========================================================
# --- players_human.py ---
# =========================================================

from typing import Callable, List, Optional

from polyy.core.moves import Move
from polyy.core.state import GameState

from .player import Player

# =========================================================

class HumanPlayer(Player):
    """
    Human-controlled player class.

    Moves are obtained through a pluggable input function, so the same
    player works for a terminal, a test or any other front-end.

    Attributes:
        id (int): Player index (0 or 1).
        name (str): Player display name.
        input_func (Callable[[List[Move], GameState], Optional[Move]]):
            Function used to select a move from the legal moves.
    """

    def __init__(
        self,
        id: int,
        input_func: Callable[[List[Move], GameState], Optional[Move]],
        name: str = "Human Player",
    ):
        """
        Initialize a human player.

        Args:
            id (int): Player index (0 or 1).
            input_func (callable): Function to select a move.
            name (str, optional): Player display name. Defaults to "Human Player".
        """
        self.id: int = id
        self.name: str = name
        self.input_func = input_func

    def __str__(self) -> str:
        """Return player name with ID."""
        return f"{self.name}_({self.id})"

    def select_move(self, moves: List[Move], state: GameState) -> Optional[Move]:
        """Prompt the human player for a move."""
        return self.input_func(moves, state)
