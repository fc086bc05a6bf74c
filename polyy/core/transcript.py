# =========================================================
# --- core_transcript.py ---
# =========================================================

from typing import IO, Iterable, List

from .errors import TranscriptError
from .moves import Move

# =========================================================

"""
Move transcript codec.

A transcript is the sequence of moves as 1-based field indices, with -1
for a swap, separated by single spaces and folded so that no line is
longer than 79 columns.
"""

#: Maximum line width of a transcript
LINE_WIDTH = 79


def format_log(moves: Iterable[Move], width: int = LINE_WIDTH) -> str:
    """
    Return the transcript of a move sequence.

    Args:
        moves: Moves in playing order.
        width: Maximum number of characters per line.

    Returns:
        str: The folded transcript, newline-terminated; empty if there are no moves.
    """
    parts: List[str] = []
    col = 0
    for move in moves:
        token = str(move)
        if col > 0:
            if col + 1 + len(token) <= width:
                parts.append(" ")
                col += 1
            else:
                parts.append("\n")
                col = 0
        parts.append(token)
        col += len(token)
    if col > 0:
        parts.append("\n")
    return "".join(parts)


def write_log(moves: Iterable[Move], stream: IO[str], width: int = LINE_WIDTH) -> None:
    """Write the transcript of a move sequence to a text stream."""
    stream.write(format_log(moves, width))


def parse_log(text: str) -> List[Move]:
    """
    Parse a transcript into moves.

    Any whitespace separates tokens, so folded and unfolded transcripts
    parse the same way.

    Raises:
        TranscriptError: If a token is not a positive integer or -1.
    """
    moves: List[Move] = []
    for pos, token in enumerate(text.split()):
        try:
            moves.append(Move.from_token(int(token)))
        except ValueError:
            raise TranscriptError(token, pos) from None
    return moves


def read_log(stream: IO[str]) -> List[Move]:
    """Read a transcript from a text stream."""
    return parse_log(stream.read())
