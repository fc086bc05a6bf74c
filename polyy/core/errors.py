# =========================================================
# --- core_errors.py ---
# =========================================================

from typing import Any, Optional

# =========================================================

class PolyYError(Exception):
    """Base class for all Poly-Y errors."""
    pass


# ---------- Board construction / loading ----------

class BoardError(PolyYError, ValueError):
    """A board description or board graph is invalid."""
    pass


class InvalidHeader(BoardError):
    """The description does not start with 'Poly-Y <fields> <sides>'."""
    pass


class FieldCountOutOfRange(BoardError):
    """
    The number of fields is outside [1, MAX_FIELDS].

    Attributes:
        count (int): The rejected field count.
    """

    def __init__(self, count: int, message: Optional[str] = None) -> None:
        self.count: int = count
        super().__init__(message or f"board: invalid number of fields ({count})")


class SideCountOutOfRange(BoardError):
    """
    The number of sides is outside [3, MAX_SIDES].

    Attributes:
        count (int): The rejected side count.
    """

    def __init__(self, count: int, message: Optional[str] = None) -> None:
        self.count: int = count
        super().__init__(message or f"board: invalid number of sides ({count})")


class InvalidFieldRecord(BoardError):
    """A per-field header line ('<index> <x> <y>') is malformed."""

    def __init__(self, field: int, message: Optional[str] = None) -> None:
        self.field: int = field
        super().__init__(message or f"board: invalid record for field {field + 1}")


class InvalidAdjacency(BoardError):
    """
    A neighbour list is malformed or refers to a field out of range.

    Attributes:
        field (int): Zero-based field whose neighbour list is broken.
        index (Optional[int]): The offending zero-based neighbour, if any.
    """

    def __init__(self, field: int, index: Optional[int] = None, message: Optional[str] = None) -> None:
        self.field: int = field
        self.index: Optional[int] = index
        super().__init__(message or f"board: invalid neighbour indices for field {field + 1}")


class InvalidSideMembership(BoardError):
    """
    A side list is malformed or refers to a field out of range.

    Attributes:
        side (int): Zero-based side whose field list is broken.
        index (Optional[int]): The offending zero-based field, if any.
    """

    def __init__(self, side: int, index: Optional[int] = None, message: Optional[str] = None) -> None:
        self.side: int = side
        self.index: Optional[int] = index
        super().__init__(message or f"board: invalid side indices for side {side + 1}")


# ---------- Transcripts / replay ----------

class TranscriptError(PolyYError, ValueError):
    """A move transcript contains a token that is not a valid move."""

    def __init__(self, token: str, position: int) -> None:
        self.token: str = token
        self.position: int = position
        super().__init__(f"transcript: invalid move {token!r} at position {position + 1}")


class IllegalMoveError(PolyYError):
    """
    A move was rejected while replaying a game or driving the engine.

    Attributes:
        move: The rejected move.
        result: The ExecuteResult describing why it was rejected.
        index (int): Position the move would have taken in the move list.
    """

    def __init__(self, move: Any, result: Any, index: int) -> None:
        self.move = move
        self.result = result
        self.index: int = index
        super().__init__(f"illegal move {move} at position {index + 1}: {getattr(result, 'name', result)}")
