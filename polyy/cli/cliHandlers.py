# =========================================================
# --- cli_cliHandlers.py ---
# =========================================================

from typing import Any, Dict, Callable

from polyy.core.scoring import iter_chains
from polyy.core.state import GameState
from polyy.utils.bitmask import count_bits, indices_from_bits

from .cliColors import PLAYER, FIELD_MARK
from .cliUtils import interruptible_sleep

# =========================================================

#: Fields printed per row by draw_fields()
FIELDS_PER_ROW = 12


def draw_fields(state: GameState) -> None:
    """Print every field with its 1-based index and owner."""
    colors = state.colors()
    cells = [f"{i + 1:>4}:{FIELD_MARK[int(c)]}" for i, c in enumerate(colors)]
    for start in range(0, len(cells), FIELDS_PER_ROW):
        print(" ".join(cells[start:start + FIELDS_PER_ROW]))


def draw_chains(state: GameState) -> None:
    """Print every chain that captures at least one corner."""
    for chain in iter_chains(state.board, state.colors()):
        if not chain.corners:
            continue
        sides = " ".join(str(s + 1) for s in indices_from_bits(chain.sides))
        corners = " ".join(str(c + 1) for c in chain.corners)
        print(
            f"{PLAYER[chain.player]} chain of {len(chain.fields)} fields touches "
            f"{count_bits(chain.sides)} sides ({sides}), corners: {corners}"
        )


def draw_scores(scores) -> None:
    """Print the captured corners of both players."""
    print(f"Corners: {PLAYER[0]} {scores[0]} - {scores[1]} {PLAYER[1]}")


class CLIHandlers:
    """
    Handles CLI events for Poly-Y game visualization.

    Attributes:
        delay (float): Delay in seconds between event prints to allow user to follow the game.
        show_board (bool): Whether to print the fields at the start of every turn.
    """

    def __init__(self, delay: float = 0.0, show_board: bool = True):
        """
        Initialize the CLI handler.

        Args:
            delay (float): Sleep duration between events.
            show_board (bool): Print the fields at every turn start.
        """
        self.delay: float = delay
        self.show_board: bool = show_board

    # ---------------- Event Handlers ----------------
    def handle_turn_start(self, event: Dict[str, Any]) -> None:
        """
        Handle start of a turn: display fields and current player.

        Args:
            event (dict): Event data with 'state', 'turn', and 'swap_allowed'.
        """
        state = event["state"]
        if self.show_board:
            print()
            draw_fields(state)
        print(f"\nMove {len(state.moves) + 1}: {PLAYER[event['turn']]} to play")
        if event["swap_allowed"]:
            print("Swap allowed! (enter 'swap' to take over the first stone)")

    def handle_chosen_move(self, event: Dict[str, Any]) -> None:
        """Display the move chosen by a player."""
        print(f"{PLAYER[event['turn']]} chose {event['move']}")

    def handle_rejected_move(self, event: Dict[str, Any]) -> None:
        """Display why a chosen move was rejected."""
        print(f"Move {event['move']} rejected: {event['reason'].name}")

    def handle_apply_move(self, event: Dict[str, Any]) -> None:
        """Display the scores after a move."""
        draw_scores(event["scores"])
        interruptible_sleep(self.delay)

    def handle_game_over(self, event: Dict[str, Any]) -> None:
        """
        Display game over information.

        Args:
            event (dict): Event data with 'state', 'winner', 'player_type', 'scores', 'result_type'.
        """
        if self.show_board:
            print()
            draw_fields(event["state"])
            draw_chains(event["state"])
        print("\nGame Over! ", end="")
        if event["winner"] is None:
            print(f"Draw ({event['result_type']})")
        else:
            print(f"Winner: {PLAYER[event['winner']]} ({event['player_type']}), {event['result_type']}")
        draw_scores(event["scores"])

    # ---------------- Handler Mapping ----------------
    @property
    def handlers(self) -> Dict[str, Callable[[Dict[str, Any]], None]]:
        """Return a mapping of event types to handler methods."""
        return {
            "turn_start": self.handle_turn_start,
            "chosen_move": self.handle_chosen_move,
            "rejected_move": self.handle_rejected_move,
            "apply_move": self.handle_apply_move,
            "game_over": self.handle_game_over,
        }
