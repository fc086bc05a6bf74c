# =========================================================
# --- players_random.py ---
# =========================================================

import random
from typing import List, Optional

from polyy.core.moves import Move
from polyy.core.state import GameState

from .player import Player

# =========================================================

class RandomPlayer(Player):
    """
    Player choosing uniformly among the legal moves.

    Attributes:
        id (int): Player index (0 or 1).
        rng (random.Random): Random number generator.
    """

    def __init__(self, id: int, rng: Optional[random.Random] = None):
        """
        Initialize a RandomPlayer.

        Args:
            id (int): Player index (0 or 1).
            rng (Optional[random.Random]): Optional RNG instance. If None, a new RNG is created.
        """
        self.id: int = id
        self.rng: random.Random = rng or random.Random()

    def __str__(self) -> str:
        """Return a human-readable name for the player."""
        return f"Random player {self.id}"

    def select_move(self, moves: List[Move], state: GameState) -> Optional[Move]:
        """Select a move randomly from available moves."""
        if not moves:
            return None
        return self.rng.choice(moves)
