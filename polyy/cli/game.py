# =========================================================
# --- cli_game.py ---
# =========================================================

import argparse
import logging
import random
import sys
from typing import List, Optional

from polyy.core.boardio import BoardFormat, IndexListFormat, load_board
from polyy.core.engine import GameEngine
from polyy.core.errors import BoardError, IllegalMoveError, TranscriptError
from polyy.core.moves import Move
from polyy.core.rules import PolyYRules, RuleConfig
from polyy.core.state import GameState
from polyy.core.transcript import read_log, write_log

from polyy.players.player import Player
from polyy.players.human import HumanPlayer
from polyy.players.random import RandomPlayer

from .cliColors import PLAYER
from .cliUtils import ExitGame, prompt_move
from .cliHandlers import CLIHandlers, draw_chains, draw_fields, draw_scores

# =========================================================

logger = logging.getLogger(__name__)

PLAYER_TYPES = ("human", "random")


class CLISetup:
    """
    Factory and setup utilities for configuring players
    and initializing the game engine for the CLI.
    """

    @staticmethod
    def human_cli_input(moves: List[Move], state: GameState) -> Move:
        """
        Handle human move selection via the terminal.

        Args:
            moves (List[Move]): All legal moves.
            state (GameState): Current game state.

        Returns:
            Move: The selected legal move.
        """
        return prompt_move(moves, f"{PLAYER[state.next_player()]} move (field / swap / q): ")

    @staticmethod
    def create_player(slot: int, kind: str, rng: random.Random) -> Player:
        """
        Create a player of the given kind for a slot.

        Args:
            slot (int): Player index (0 or 1).
            kind (str): One of PLAYER_TYPES.
            rng (random.Random): Shared RNG for random players.
        """
        if kind == "human":
            return HumanPlayer(id=slot, input_func=CLISetup.human_cli_input)
        if kind == "random":
            return RandomPlayer(id=slot, rng=rng)
        raise ValueError(f"Unknown player type {kind!r}")

    @staticmethod
    def rules_from_args(args: argparse.Namespace) -> PolyYRules:
        """Build the rules for the variant selected on the command line."""
        return PolyYRules(RuleConfig(
            swap_allowed=not args.no_swap,
            fill_by_move_count=args.fill_by_move_count,
        ))

    @staticmethod
    def format_from_args(args: argparse.Namespace) -> BoardFormat:
        """Build the board format selected on the command line."""
        return BoardFormat(
            index_lists=IndexListFormat(args.index_lists),
            coordinates=args.coordinates,
        )

    def setup_engine(self, args: argparse.Namespace) -> GameEngine:
        """
        Load the board and initialize the game engine with rules, state and players.

        Returns:
            GameEngine: Fully configured game engine.
        """
        board = load_board(args.board, self.format_from_args(args))
        state = GameState(board, self.rules_from_args(args), debug=args.debug)
        rng = random.Random(args.seed)
        return GameEngine(
            self.create_player(0, args.player0, rng),
            self.create_player(1, args.player1, rng),
            state,
        )


class PolyYCLI:
    """
    Main command-line interface controller for running a Poly-Y game.
    """

    def __init__(self, delay: float = 0.0, show_board: bool = True):
        """
        Initialize the CLI.

        Args:
            delay (float): Delay in seconds between UI updates.
            show_board (bool): Print the fields before every turn.
        """
        self.setup = CLISetup()
        self.handlers = CLIHandlers(delay, show_board).handlers

    def play_game(self, engine: GameEngine) -> None:
        """
        Run the game loop and dispatch events to CLI handlers.

        Raises:
            ExitGame: If the user exits the game intentionally.
        """
        for event in engine.play_game():
            handler = self.handlers.get(event["type"])
            if handler:
                handler(event)

    def run(self, args: argparse.Namespace) -> int:
        """Start a complete game session; return the process exit code."""
        engine = self.setup.setup_engine(args)
        try:
            self.play_game(engine)
        except ExitGame:
            print("\nGame exited by player.")
        except IllegalMoveError as e:
            logger.error("%s", e)
            return 1
        finally:
            if args.log:
                with open(args.log, "w", encoding="utf-8") as f:
                    write_log(engine.state.moves, f)
                logger.info("Transcript written to %s", args.log)
        return 0


# ---------------- Commands ----------------

def cmd_play(args: argparse.Namespace) -> int:
    """Play a game between two players on a board file."""
    cli = PolyYCLI(delay=args.delay, show_board=not args.quiet)
    return cli.run(args)


def cmd_score(args: argparse.Namespace) -> int:
    """Replay a transcript on a board and report the scores."""
    board = load_board(args.board, CLISetup.format_from_args(args))
    if args.transcript == "-":
        moves = read_log(sys.stdin)
    else:
        with open(args.transcript, "r", encoding="utf-8") as f:
            moves = read_log(f)
    state = GameState.replay(board, moves, CLISetup.rules_from_args(args), debug=args.debug)

    if args.show_fields:
        draw_fields(state)
        draw_chains(state)
    draw_scores(state.scores())
    result = state.result()
    if result is None:
        print(f"Moves: {len(state.moves)}; next: {PLAYER[state.next_player()]}")
    elif result.winner is None:
        print(f"Game over ({result.type}): draw")
    else:
        print(f"Game over ({result.type}): {PLAYER[result.winner]} wins")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the polyy command."""
    parser = argparse.ArgumentParser(prog="polyy", description="Poly-Y rules engine")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Log more (-v info, -vv debug)")
    parser.add_argument("--debug", action="store_true", help="Check state invariants after every move")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("board", help="Board description file")
    common.add_argument("--index-lists", choices=[f.value for f in IndexListFormat], default=IndexListFormat.COUNT.value,
                        help="Index lists are length-prefixed (count) or zero-terminated (sentinel)")
    common.add_argument("--coordinates", action="store_true", help="Field records start with '<index> <x> <y>'")
    common.add_argument("--no-swap", action="store_true", help="Disable the swap rule")
    common.add_argument("--fill-by-move-count", action="store_true",
                        help="Treat the board as full once there are as many moves as fields")

    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", parents=[common], help="Play a game")
    play.add_argument("--player0", choices=PLAYER_TYPES, default="human", help="Player moving first")
    play.add_argument("--player1", choices=PLAYER_TYPES, default="random", help="Player moving second")
    play.add_argument("--seed", type=int, default=None, help="Seed for random players")
    play.add_argument("--delay", type=float, default=0.0, help="Seconds to pause after every move")
    play.add_argument("--quiet", action="store_true", help="Do not print the fields every turn")
    play.add_argument("--log", default=None, help="Write the transcript to this file")
    play.set_defaults(func=cmd_play)

    score = sub.add_parser("score", parents=[common], help="Score a transcript")
    score.add_argument("transcript", help="Transcript file, or - for stdin")
    score.add_argument("--show-fields", action="store_true", help="Print the owner of every field")
    score.set_defaults(func=cmd_score)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the polyy command."""
    args = build_parser().parse_args(argv)

    # SET UP LOGGING -------------------------------------------------------------
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.root.handlers = []
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler(stream=sys.stderr)],
    )

    try:
        return args.func(args)
    except (BoardError, TranscriptError, IllegalMoveError) as e:
        logger.error("%s", e)
        return 2
    except OSError as e:
        logger.error("%s: %s", getattr(e, "filename", None) or "I/O error", e.strerror or e)
        return 2
    except KeyboardInterrupt:
        print("\nGame interrupted by user. Exiting...")
        return 130


# ---------------- Main ----------------
if __name__ == "__main__":
    sys.exit(main())
