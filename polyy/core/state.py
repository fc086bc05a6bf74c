# =========================================================
# --- core_state.py ---
# =========================================================

import logging
from typing import Iterable, List, Optional, Set, Tuple

import numpy as np

from .board import Board
from .errors import IllegalMoveError
from .moves import Move, SWAP
from .rules import PolyYRules, ExecuteResult, GameResult
from .scoring import field_colors, scores as compute_scores
from .state_invariants import assert_state_invariant
from .transcript import format_log

# =========================================================

logger = logging.getLogger(__name__)


class GameState:
    """
    Turn-by-turn record of a Poly-Y game.

    The board is never modified. The move list only grows, one validated
    move at a time. Colours, occupancy and the player to move are derived
    from the moves on every query.

    Attributes:
        board (Board): Board the game is played on.
        moves (List[Move]): Moves executed so far.
        rules (PolyYRules): Rules engine (rule variant included).
        debug (bool): Enable state invariant assertions.
    """

    def __init__(self, board: Board, rules: Optional[PolyYRules] = None, debug: bool = False):
        self.board: Board = board
        self.rules: PolyYRules = rules or PolyYRules()
        self.debug: bool = debug
        self.moves: List[Move] = []

    # ---------- Setup / Copy ----------
    @classmethod
    def replay(
        cls,
        board: Board,
        moves: Iterable[Move],
        rules: Optional[PolyYRules] = None,
        debug: bool = False,
    ) -> "GameState":
        """
        Build a state by executing moves in order.

        Raises:
            IllegalMoveError: On the first move that is rejected.
        """
        state = cls(board, rules, debug)
        for move in moves:
            result = state.execute(move)
            if not result:
                raise IllegalMoveError(move, result, len(state.moves))
        return state

    def copy(self) -> "GameState":
        """Return an independent copy sharing the (immutable) board and rules."""
        new_state = GameState(self.board, self.rules, self.debug)
        new_state.moves = list(self.moves)
        return new_state

    # ---------- Turn ----------
    def next_player(self) -> int:
        """Return which player (0 or 1) must play next."""
        return len(self.moves) % 2

    # ---------- Occupancy ----------
    def occupied(self, field: int) -> bool:
        """Return whether a placement has already targeted the field."""
        return any(m.is_place and m.field == field for m in self.moves)

    def occupied_fields(self) -> Set[int]:
        """Return the set of occupied fields."""
        return {m.field for m in self.moves if m.is_place}

    def occupied_count(self) -> int:
        """Return the number of distinct occupied fields (a swap adds none)."""
        return len(self.occupied_fields())

    def colors(self) -> np.ndarray:
        """Return the per-field colours (+1, -1, 0) for the current moves."""
        return field_colors(self.board, self.moves)

    # ---------- Moves ----------
    def valid(self, move: Move) -> ExecuteResult:
        """Classify a move without executing it."""
        if not isinstance(move, Move):
            raise TypeError(f"Expected a Move, got {type(move).__name__}")
        return self.rules.check_move(self, move)

    def legal_moves(self) -> List[Move]:
        """List all valid moves in the current state, swap first."""
        moves: List[Move] = []
        if self.rules.swap_allowed(self):
            moves.append(SWAP)
        taken = self.occupied_fields()
        moves.extend(Move.place(i) for i in range(self.board.n_fields) if i not in taken)
        return moves

    def execute(self, move: Move) -> ExecuteResult:
        """
        Execute a move if it is valid.

        Args:
            move (Move): The move to play for the player to move.

        Returns:
            ExecuteResult: APPLIED if the move was appended; otherwise the
            reason for rejection, with the state left unchanged.

        Raises:
            TypeError: If move is not a Move.
        """
        result = self.valid(move)
        if not result:
            logger.debug("Rejected %r at move %d: %s", move, len(self.moves) + 1, result.name)
            return result
        self.moves.append(move)
        logger.debug("Player %d played %r (move %d)", 1 - self.next_player(), move, len(self.moves))
        self._assert("execute")
        return result

    # ---------- Scoring / Result ----------
    def scores(self) -> Tuple[int, int]:
        """Return the number of corners captured by player 0 and player 1."""
        return compute_scores(self.board, self.moves)

    def result(self) -> Optional[GameResult]:
        """Return the GameResult if the game is over, None otherwise."""
        return self.rules.game_over(self)

    def over(self) -> bool:
        """Return whether the game is over."""
        return self.result() is not None

    def winner(self) -> Optional[int]:
        """Return the winning player, or None if undecided or tied."""
        result = self.result()
        return result.winner if result else None

    # ---------- Serialization ----------
    def to_transcript(self) -> str:
        """Return the move log of the game."""
        return format_log(self.moves)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.board == other.board and self.moves == other.moves

    def __repr__(self) -> str:
        return f"GameState({self.board}, moves={len(self.moves)})"

    # ---------- Debug / Assertions ----------
    def _assert(self, where: str = "") -> None:
        """Assert state invariants if debug mode is active."""
        if self.debug:
            assert_state_invariant(self, where)
