# =========================================================
# --- core_rules.py ---
# =========================================================

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple, Union

from .moves import Move

if TYPE_CHECKING:
    from .state import GameState

# =========================================================

class ExecuteResult(Enum):
    """
    Outcome of GameState.execute().

    Only APPLIED is truthy, so ``if state.execute(move):`` reads naturally.
    """
    APPLIED = 0
    INVALID_FIELD = 1
    OCCUPIED = 2
    SWAP_NOT_ALLOWED = 3
    NOT_A_MOVE = 4  # engine only: a player returned something other than a Move

    def __bool__(self) -> bool:
        return self is ExecuteResult.APPLIED


@dataclass(frozen=True)
class RuleConfig:
    """
    Rule variants.

    Attributes:
        swap_allowed (bool): Whether the second player may swap.
        fill_by_move_count (bool): Treat the board as full once the number of
            moves reaches the number of fields, ignoring that a swap does not
            occupy a field. The default counts distinct occupied fields.
    """
    swap_allowed: bool = True
    fill_by_move_count: bool = False


@dataclass(frozen=True)
class GameResult:
    """Encapsulates the outcome of a finished game."""

    winner: Optional[int]  # None when a full board leaves the corners tied
    scores: Tuple[int, int]
    type: str  # MAJORITY / BOARD_FULL


class Rule:
    """Base class for Poly-Y rules."""

    def __init__(self, rule_id: str, description: str) -> None:
        """
        Initialize a rule.

        Args:
            rule_id: Unique identifier for the rule.
            description: Human-readable description.
        """
        self.id: str = rule_id
        self.description: str = description

    def check(self, state: "GameState", **kwargs) -> Union[bool, int, None, GameResult]:
        """
        Evaluate the rule on the given state.

        Raises:
            NotImplementedError: Must be implemented in subclasses.
        """
        raise NotImplementedError


# --- Specific Rules ---

class FieldIndexRule(Rule):
    """R1: A placement must target a field of the board."""

    def __init__(self) -> None:
        super().__init__("R1", "A placement must target an existing field.")

    def check(self, state: "GameState", field: int, **kwargs) -> bool:
        return state.board.is_field(field)


class UnoccupiedRule(Rule):
    """R2: A placement must target an empty field."""

    def __init__(self) -> None:
        super().__init__("R2", "A placement must target an unoccupied field.")

    def check(self, state: "GameState", field: int, **kwargs) -> bool:
        return not state.occupied(field)


class SwapRule(Rule):
    """R3: The second player may swap instead of placing their first stone."""

    def __init__(self, allowed: bool = True) -> None:
        super().__init__("R3", "Swap is only allowed as the second move of the game.")
        self.allowed: bool = allowed

    def check(self, state: "GameState", **kwargs) -> bool:
        return self.allowed and len(state.moves) == 1


class BoardFullRule(Rule):
    """R4: The game ends when every field is occupied."""

    def __init__(self, by_move_count: bool = False) -> None:
        super().__init__("R4", "The game ends when no unoccupied field is left.")
        self.by_move_count: bool = by_move_count

    def check(self, state: "GameState", **kwargs) -> bool:
        if self.by_move_count:
            return len(state.moves) >= state.board.n_fields
        return state.occupied_count() >= state.board.n_fields


class MajorityRule(Rule):
    """R5: A player holding more than half of the corners has won."""

    def __init__(self) -> None:
        super().__init__("R5", "A player capturing a majority of the corners wins.")

    def check(self, state: "GameState", scores: Optional[Tuple[int, int]] = None, **kwargs) -> Optional[int]:
        """
        Return the index of the player holding a corner majority, or None.

        Args:
            state: Current game state.
            scores: Precomputed scores; computed from the state if omitted.
        """
        if scores is None:
            scores = state.scores()
        half = state.board.n_sides // 2
        for player in (0, 1):
            if scores[player] > half:
                return player
        return None


class GameOverRule(Rule):
    """R6: Check if the game is over and summarise the outcome."""

    def __init__(self, majority: MajorityRule, board_full: BoardFullRule) -> None:
        super().__init__("R6", "Check if game is over and return GameResult if so.")
        self.majority: MajorityRule = majority
        self.board_full: BoardFullRule = board_full

    def check(self, state: "GameState", **kwargs) -> Optional[GameResult]:
        scores = state.scores()
        winner = self.majority.check(state, scores=scores)
        if winner is not None:
            return GameResult(winner, scores, "MAJORITY")
        if self.board_full.check(state):
            if scores[0] == scores[1]:
                winner = None
            else:
                winner = 0 if scores[0] > scores[1] else 1
            return GameResult(winner, scores, "BOARD_FULL")
        return None


class PolyYRules:
    """Aggregates all rules and provides a convenient interface for game logic."""

    def __init__(self, config: Optional[RuleConfig] = None) -> None:
        """Initialize all rule instances for the given rule variant."""
        self.config: RuleConfig = config or RuleConfig()
        self.R1 = FieldIndexRule()
        self.R2 = UnoccupiedRule()
        self.R3 = SwapRule(self.config.swap_allowed)
        self.R4 = BoardFullRule(self.config.fill_by_move_count)
        self.R5 = MajorityRule()
        self.R6 = GameOverRule(self.R5, self.R4)

        self.rules = [self.R1, self.R2, self.R3, self.R4, self.R5, self.R6]

    def check_move(self, state: "GameState", move: Move) -> ExecuteResult:
        """Classify a move as applicable or say why it is rejected."""
        if move.is_swap:
            return ExecuteResult.APPLIED if self.R3.check(state) else ExecuteResult.SWAP_NOT_ALLOWED
        if not self.R1.check(state, field=move.field):
            return ExecuteResult.INVALID_FIELD
        if not self.R2.check(state, field=move.field):
            return ExecuteResult.OCCUPIED
        return ExecuteResult.APPLIED

    def swap_allowed(self, state: "GameState") -> bool:
        """Return True if the player to move may swap."""
        return self.R3.check(state)

    def board_full(self, state: "GameState") -> bool:
        """Return True if no field is left to play."""
        return self.R4.check(state)

    def majority(self, state: "GameState") -> Optional[int]:
        """Return the player holding a corner majority, if any."""
        return self.R5.check(state)

    def game_over(self, state: "GameState") -> Optional[GameResult]:
        """Check if the game is over and return GameResult."""
        return self.R6.check(state)
