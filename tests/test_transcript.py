import io

import pytest

from polyy.core.errors import TranscriptError
from polyy.core.moves import Move, SWAP
from polyy.core.transcript import LINE_WIDTH, format_log, parse_log, read_log, write_log

P = Move.place


def test_format_log():
    assert format_log([P(0), SWAP, P(9)]) == "1 -1 10\n"


def test_empty_log():
    assert format_log([]) == ""
    assert parse_log("") == []


def test_lines_are_folded():
    moves = [P(99)] * 45
    text = format_log(moves)
    lines = text.split("\n")
    assert text.endswith("\n")
    assert all(len(line) <= LINE_WIDTH for line in lines)
    assert len(lines[0]) == 79
    assert lines[0].split() == ["100"] * 20
    assert parse_log(text) == moves


def test_round_trip_through_stream():
    moves = [P(41), SWAP] + [P(i) for i in range(200) if i != 41]
    buf = io.StringIO()
    write_log(moves, buf)
    buf.seek(0)
    assert read_log(buf) == moves


@pytest.mark.parametrize("text, token, position", [
    ("1 0", "0", 1),
    ("3 -2", "-2", 1),
    ("x", "x", 0),
    ("1 2 2.5", "2.5", 2),
])
def test_invalid_tokens(text, token, position):
    with pytest.raises(TranscriptError) as exc:
        parse_log(text)
    assert exc.value.token == token
    assert exc.value.position == position


def test_move_tokens():
    assert Move.from_token(-1) is not None and Move.from_token(-1).is_swap
    assert Move.from_token(7) == P(6)
    assert P(6).to_token() == 7
    assert repr(P(6)) == "Place(6)" and repr(SWAP) == "Swap"
    with pytest.raises(ValueError):
        Move(SWAP.move_type, 3)
