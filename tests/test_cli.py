import pytest

from polyy.cli.cliUtils import ExitGame, parse_move, prompt_move, safe_input
from polyy.cli.game import build_parser, main
from polyy.core.boardio import format_board
from polyy.core.moves import Move, SWAP
from polyy.core.transcript import parse_log

P = Move.place


@pytest.fixture
def board_file(tmp_path, y3):
    path = tmp_path / "y3.txt"
    path.write_text(format_board(y3))
    return str(path)


def feed(*lines):
    it = iter(lines)
    return lambda prompt: next(it)


def test_parse_move():
    assert parse_move("swap") == SWAP
    assert parse_move(" -1 ") == SWAP
    assert parse_move("3") == P(2)
    assert parse_move("0") is None
    assert parse_move("a1") is None


def test_safe_input_quits():
    with pytest.raises(ExitGame):
        safe_input("> ", feed("q"))
    assert safe_input("> ", feed("  7 ")) == "7"


def test_prompt_move_retries_until_legal(capsys):
    move = prompt_move([P(0), P(1)], "> ", feed("x", "9", "2"))
    assert move == P(1)
    out = capsys.readouterr().out
    assert "not legal" in out


def test_score_command(tmp_path, board_file, capsys):
    log = tmp_path / "game.log"
    log.write_text("2 1 5 4 3\n")
    assert main(["score", board_file, str(log), "--show-fields"]) == 0
    out = capsys.readouterr().out
    assert "Game over (MAJORITY)" in out
    assert "chain of 3 fields touches 3 sides (1 2 3), corners: 1 2 3" in out


def test_score_unfinished_game(tmp_path, board_file, capsys):
    log = tmp_path / "game.log"
    log.write_text("5 -1\n")
    assert main(["score", board_file, str(log), "--show-fields"]) == 0
    assert "Moves: 2" in capsys.readouterr().out


def test_score_rejects_illegal_transcript(tmp_path, board_file):
    log = tmp_path / "game.log"
    log.write_text("1 1\n")
    assert main(["score", board_file, str(log)]) == 2


def test_bad_board_file(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("Poly-Y 3 40\n")
    log = tmp_path / "game.log"
    log.write_text("")
    assert main(["score", str(path), str(log)]) == 2


def test_play_random_game(tmp_path, board_file, capsys):
    log = tmp_path / "game.log"
    args = ["play", board_file, "--player0", "random", "--player1", "random", "--seed", "3", "--quiet", "--log", str(log)]
    assert main(args) == 0
    assert "Game Over!" in capsys.readouterr().out
    moves = parse_log(log.read_text())
    assert 5 <= len(moves) <= 7


def test_parser_defaults():
    args = build_parser().parse_args(["play", "board.txt"])
    assert (args.player0, args.player1) == ("human", "random")
    assert args.index_lists == "count"
    assert not args.no_swap and not args.coordinates
