# =========================================================
# --- cli_cliUtils.py ---
# =========================================================
import time
from typing import Callable, List, Optional

from polyy.core.moves import Move, SWAP

# =========================================================

class ExitGame(Exception):
    """
    Custom exception to indicate that the player wants to quit the game.
    Raised by `safe_input` when the user types 'q', 'quit', or presses Ctrl+C.
    """
    pass


def safe_input(prompt: str, input_func: Callable[[str], str] = input) -> str:
    """
    Prompt the user for input safely, handling keyboard interrupts
    and quit commands.

    Args:
        prompt (str): The input prompt to display.
        input_func (callable): Function reading a line; defaults to input().

    Raises:
        ExitGame: If the user presses Ctrl+C / Ctrl+D or enters 'q'/'quit'.

    Returns:
        str: The sanitized user input (stripped of leading/trailing whitespace).
    """
    try:
        inp: str = input_func(prompt).strip()
    except (KeyboardInterrupt, EOFError):
        raise ExitGame()
    if inp.lower() in ("q", "quit"):
        raise ExitGame()
    return inp


def parse_move(text: str) -> Optional[Move]:
    """
    Parse a move typed by a user.

    Accepts a 1-based field number, or 'swap' / 's' / '-1' for the swap move.

    Returns:
        Optional[Move]: The move, or None if the text is not a move.
    """
    text = text.strip().lower()
    if text in ("swap", "s", "-1"):
        return SWAP
    try:
        number = int(text)
    except ValueError:
        return None
    if number < 1:
        return None
    return Move.place(number - 1)


def prompt_move(moves: List[Move], prompt: str, input_func: Callable[[str], str] = input) -> Move:
    """
    Ask until the user enters one of the given legal moves.

    Raises:
        ExitGame: If the user quits.
    """
    while True:
        move = parse_move(safe_input(prompt, input_func))
        if move is None:
            print("Enter a field number, 'swap' or 'q'.")
        elif move not in moves:
            print(f"Move {move} is not legal here.")
        else:
            return move


def interruptible_sleep(seconds: float) -> None:
    """
    Sleep for a given number of seconds in small intervals,
    allowing interruptions or responsive UI updates.

    Args:
        seconds (float): Total duration to sleep in seconds.
    """
    start: float = time.time()
    while time.time() - start < seconds:
        time.sleep(0.05)
