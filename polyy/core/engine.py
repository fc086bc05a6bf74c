# =========================================================
# --- core_engine.py ---
# =========================================================

import logging
from typing import Any, Dict, Optional

from polyy.players.player import Player

from .errors import IllegalMoveError
from .moves import Move
from .rules import ExecuteResult, GameResult
from .state import GameState

# ========================================================

logger = logging.getLogger(__name__)


class EngineEvents:
    """
    Event factory for game engine events.
    Returns structured dictionaries for UI, logging, or network updates.
    """

    def turn_start(self, turn: int, state: GameState) -> Dict[str, Any]:
        """Event: A new turn has started."""
        return {
            "type": "turn_start",
            "turn": turn,
            "state": state,
            "swap_allowed": state.rules.swap_allowed(state),
        }

    def chosen_move(self, turn: int, move: Optional[Move]) -> Dict[str, Any]:
        """Event: Player has chosen a move."""
        return {
            "type": "chosen_move",
            "turn": turn,
            "move": move,
        }

    def rejected_move(self, turn: int, move: Optional[Move], reason: ExecuteResult) -> Dict[str, Any]:
        """Event: The chosen move was not legal and the player must choose again."""
        return {
            "type": "rejected_move",
            "turn": turn,
            "move": move,
            "reason": reason,
        }

    def apply_move(self, move: Move, state: GameState) -> Dict[str, Any]:
        """Event: A move has been applied to the game state."""
        return {
            "type": "apply_move",
            "move": move,
            "state": state,
            "scores": state.scores(),
        }

    def game_over(self, state: GameState, result: GameResult, player_type: Optional[str]) -> Dict[str, Any]:
        """Event: The game has ended."""
        return {
            "type": "game_over",
            "state": state,
            "winner": result.winner,
            "player_type": player_type,
            "scores": result.scores,
            "result_type": result.type,
        }


class GameEngine:
    """
    Poly-Y game engine managing players, game state, turns and events.

    Attributes:
        players (list): List of two player objects.
        state (GameState): Current game state.
        emit_enabled (bool): If True, yield events during play.
        max_rejections (int): Consecutive illegal choices tolerated per turn.
        events (EngineEvents): Event generator for logging/UI.
    """

    def __init__(
        self,
        player0: Player,
        player1: Player,
        state: GameState,
        emit_enabled: bool = True,
        max_rejections: int = 10,
    ):
        self.players: list[Player] = [player0, player1]
        self.state: GameState = state
        if max_rejections < 1:
            raise ValueError("max_rejections must be at least 1")
        self.emit_enabled: bool = emit_enabled
        self.max_rejections: int = max_rejections
        self.events: EngineEvents = EngineEvents()

    # ---------- Properties ----------
    @property
    def turn(self) -> int:
        """Index of the active player (0 or 1)."""
        return self.state.next_player()

    @property
    def player(self) -> Player:
        """Return the current player object."""
        return self.players[self.turn]

    def get_player_type(self, player: int) -> str:
        """Return string representation of a player."""
        return str(self.players[player])

    def game_finished(self) -> Optional[GameResult]:
        """Check if the game is over, returning a GameResult if so."""
        return self.state.result()

    # ---------- Event Emission ----------
    def emit(self, event: dict) -> Any:
        """Yield an event if emission is enabled."""
        if self.emit_enabled:
            yield event

    # ---------- Internal Phases ----------
    def _play_turn(self):
        """Ask the active player for a move until a legal one is applied."""
        turn = self.turn
        for _ in range(self.max_rejections):
            move = self.player.select_move(self.state.legal_moves(), self.state.copy())
            yield from self.emit(self.events.chosen_move(turn, move))

            if isinstance(move, Move):
                result = self.state.execute(move)
            else:
                result = ExecuteResult.NOT_A_MOVE
            if result:
                yield from self.emit(self.events.apply_move(move, self.state))
                return
            logger.debug("%s chose illegal move %r: %s", self.player, move, result.name)
            yield from self.emit(self.events.rejected_move(turn, move, result))

        raise IllegalMoveError(move, result, len(self.state.moves))

    # ---------- Game Loop ----------
    def play_game(self, max_turns: Optional[int] = None):
        """
        Play the game from the current state.

        Args:
            max_turns (Optional[int]): Maximum turns to play. None = no limit.

        Yields:
            dict: Engine events describing the game progression.

        Raises:
            IllegalMoveError: If a player keeps choosing illegal moves.
        """
        game_result = self.game_finished()
        turns_played = 0

        while not game_result:
            if max_turns is not None and turns_played >= max_turns:
                break

            yield from self.emit(self.events.turn_start(self.turn, self.state))
            yield from self._play_turn()

            turns_played += 1
            game_result = self.game_finished()

        if game_result:
            winner = game_result.winner
            player_type = self.get_player_type(winner) if winner is not None else None
            logger.info(
                "Game over after %d moves (%s): scores %s, winner %s",
                len(self.state.moves), game_result.type, game_result.scores, winner,
            )
            yield from self.emit(self.events.game_over(self.state, game_result, player_type))

    def run(self, max_turns: Optional[int] = None) -> Optional[GameResult]:
        """Play without consuming events and return the result (None if unfinished)."""
        for _ in self.play_game(max_turns=max_turns):
            pass
        return self.game_finished()
