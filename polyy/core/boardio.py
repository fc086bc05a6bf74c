# =========================================================
# --- core_boardio.py ---
# =========================================================

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import IO, Callable, Iterator, List, Optional

from .board import Board, MAX_FIELDS, MAX_SIDES, MIN_SIDES
from .errors import (
    BoardError,
    InvalidHeader,
    FieldCountOutOfRange,
    SideCountOutOfRange,
    InvalidFieldRecord,
    InvalidAdjacency,
    InvalidSideMembership,
)

# =========================================================

"""
Reader and writer for Poly-Y board descriptions.

    Poly-Y <fields> <sides>
    <neighbour list of field 1>
    ...
    <field list of side 1>
    ...

Field indices are 1-based in the text. An index list is either prefixed
by its length ("3 2 4 6") or terminated by a zero ("2 4 6 0"). Boards
with layout data carry "<index> <x> <y>" before every neighbour list;
the coordinates are skipped.
"""

logger = logging.getLogger(__name__)

HEADER_RE = re.compile(r"\s*Poly-Y[ \t]+(\S+)[ \t]+(\S+)[ \t\r]*(?:\n|$)")


class IndexListFormat(Enum):
    """How the length of an index list is encoded."""
    COUNT = "count"
    SENTINEL = "sentinel"


@dataclass(frozen=True)
class BoardFormat:
    """
    Variant of the board description format.

    Attributes:
        index_lists (IndexListFormat): Length-prefixed (default) or zero-terminated lists.
        coordinates (bool): Whether each field record starts with "<index> <x> <y>".
    """
    index_lists: IndexListFormat = IndexListFormat.COUNT
    coordinates: bool = False


class _Tokens:
    """Whitespace token stream over the body of a description."""

    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())

    def next(self) -> Optional[str]:
        return next(self._it, None)

    def rest(self) -> List[str]:
        return list(self._it)


def _parse_int(token: Optional[str]) -> Optional[int]:
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def _read_indices(
    tokens: _Tokens,
    nfield: int,
    fmt: BoardFormat,
    fail: Callable[[Optional[int]], BoardError],
) -> List[int]:
    """
    Read one index list and convert it to 0-based indices.

    Args:
        tokens: Token stream.
        nfield: Number of fields, for range checks.
        fmt: Format variant.
        fail: Builds the error to raise; receives the offending 0-based
            index, or None for a malformed list.
    """
    res: List[int] = []
    if fmt.index_lists is IndexListFormat.COUNT:
        count = _parse_int(tokens.next())
        if count is None or count < 0:
            raise fail(None)
        for _ in range(count):
            idx = _parse_int(tokens.next())
            if idx is None:
                raise fail(None)
            res.append(idx - 1)
    else:
        while True:
            idx = _parse_int(tokens.next())
            if idx is None:
                raise fail(None)
            if idx == 0:
                break
            res.append(idx - 1)
    for idx in res:
        if not 0 <= idx < nfield:
            raise fail(idx)
    return res


def _skip_coordinates(tokens: _Tokens, field: int) -> None:
    """Consume and discard the '<index> <x> <y>' header of a field record."""
    idx = _parse_int(tokens.next())
    if idx != field + 1:
        raise InvalidFieldRecord(field)
    for _ in range(2):
        token = tokens.next()
        try:
            float(token)
        except (TypeError, ValueError):
            raise InvalidFieldRecord(field) from None


def parse_board(text: str, fmt: Optional[BoardFormat] = None) -> Board:
    """
    Parse a board description.

    Args:
        text: The full description.
        fmt: Format variant; length-prefixed lists without coordinates by default.

    Returns:
        Board: The validated board.

    Raises:
        InvalidHeader, FieldCountOutOfRange, SideCountOutOfRange,
        InvalidFieldRecord, InvalidAdjacency, InvalidSideMembership
    """
    fmt = fmt or BoardFormat()
    m = HEADER_RE.match(text)
    if not m:
        raise InvalidHeader("board: invalid header")
    nfield, nside = _parse_int(m.group(1)), _parse_int(m.group(2))
    if nfield is None or nside is None:
        raise InvalidHeader("board: invalid header")
    if nfield < 1 or nfield > MAX_FIELDS:
        raise FieldCountOutOfRange(nfield)
    if nside < MIN_SIDES or nside > MAX_SIDES:
        raise SideCountOutOfRange(nside)

    tokens = _Tokens(text[m.end():])
    fields: List[List[int]] = []
    for i in range(nfield):
        if fmt.coordinates:
            _skip_coordinates(tokens, i)
        fields.append(_read_indices(tokens, nfield, fmt, lambda idx, i=i: InvalidAdjacency(i, idx)))
    sides: List[List[int]] = []
    for i in range(nside):
        sides.append(_read_indices(tokens, nfield, fmt, lambda idx, i=i: InvalidSideMembership(i, idx)))

    trailing = tokens.rest()
    if trailing:
        logger.debug("Ignoring %d trailing tokens after board description", len(trailing))
    logger.debug("Loaded board with %d fields and %d sides", nfield, nside)
    return Board(fields, sides)


def read_board(stream: IO[str], fmt: Optional[BoardFormat] = None) -> Board:
    """Read a board description from a text stream."""
    return parse_board(stream.read(), fmt)


def load_board(path: str, fmt: Optional[BoardFormat] = None) -> Board:
    """Load a board description from a file."""
    with open(path, "r", encoding="utf-8") as f:
        return read_board(f, fmt)


def _format_indices(indices, fmt: BoardFormat) -> str:
    nums = [str(i + 1) for i in indices]
    if fmt.index_lists is IndexListFormat.COUNT:
        return " ".join([str(len(nums))] + nums)
    return " ".join(nums + ["0"])


def format_board(board: Board, fmt: Optional[BoardFormat] = None) -> str:
    """
    Return the description of a board.

    With ``fmt.coordinates`` every field record is preceded by
    "<index> 0.0 0.0", since boards carry no layout data.
    """
    fmt = fmt or BoardFormat()
    lines = [f"Poly-Y {board.n_fields} {board.n_sides}"]
    for i, nbrs in enumerate(board.fields):
        if fmt.coordinates:
            lines.append(f"{i + 1} 0.0 0.0")
        lines.append(_format_indices(nbrs, fmt))
    for side in board.sides:
        lines.append(_format_indices(side, fmt))
    return "\n".join(lines) + "\n"
