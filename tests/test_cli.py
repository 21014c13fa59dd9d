"""Tests for the terminal interface."""

import io

import pytest

from tictactoe import __main__ as entry
from tictactoe import cli
from tictactoe.game import Game, Piece, Winner


def run(text, empty=cli.ASCII_EMPTY_GLYPH):
    out, err = io.StringIO(), io.StringIO()
    winner = cli.play(io.StringIO(text), out, err, empty=empty)
    return winner, out.getvalue(), err.getvalue()


@pytest.mark.parametrize(
    "text, expected",
    [("1A", (0, 0)), ("1a", (0, 0)), ("2B", (1, 1)), ("3c", (2, 2)), ("3A", (2, 0))],
)
def test_parse_move_accepts_coordinates(text, expected):
    assert cli.parse_move(text) == expected


@pytest.mark.parametrize("text", ["", "1", "A1", "4A", "0B", "1A1", " 1A"])
def test_parse_move_rejects_garbage(text):
    with pytest.raises(cli.InvalidMove) as excinfo:
        cli.parse_move(text)
    assert excinfo.value.text == text


def test_parse_move_reports_bad_column_only():
    with pytest.raises(cli.InvalidMove) as excinfo:
        cli.parse_move("2D")
    assert excinfo.value.text == "D"


def test_render_empty_board():
    rendered = cli.render_tiles(Game().tiles(), empty=".")
    assert rendered == "   A B C\n 1 . . .\n 2 . . .\n 3 . . .\n\n"


def test_render_board_with_pieces_uses_default_glyph():
    game = Game()
    game.make_move(0, 0)
    game.make_move(1, 2)
    lines = cli.render_tiles(game.tiles()).splitlines()
    assert lines[1] == f" 1 x {cli.EMPTY_GLYPH} {cli.EMPTY_GLYPH}"
    assert lines[2] == f" 2 {cli.EMPTY_GLYPH} {cli.EMPTY_GLYPH} o"


def test_piece_symbol_and_position():
    assert cli.piece_symbol(Piece.X) == "x"
    assert cli.piece_symbol(Piece.O) == "o"
    assert cli.format_position(2, 1) == "3B"


def test_prompt_move_reprompts_until_valid():
    out, err = io.StringIO(), io.StringIO()
    move = cli.prompt_move(io.StringIO("hello\n9Z\n2c\n"), out, err)
    assert move == (1, 2)
    assert out.getvalue().count("Enter move") == 3
    assert "invalid move: 'hello'. Please try again." in err.getvalue()
    assert "invalid move: '9Z'. Please try again." in err.getvalue()


def test_prompt_move_returns_none_at_end_of_input():
    assert cli.prompt_move(io.StringIO(""), io.StringIO(), io.StringIO()) is None


def test_play_full_game_x_wins():
    winner, out, err = run("1A\n2A\n1B\n2B\n1C\n")
    assert winner is Winner.X
    assert out.endswith(" 3 . . .\n\nx wins!\n")
    assert "Current piece: o" in out
    assert err == ""


def test_play_tie():
    winner, out, _ = run("1A\n1B\n1C\n3A\n3B\n3C\n2A\n2C\n2B\n")
    assert winner is Winner.TIE
    assert out.endswith("Tie!\n")


def test_play_reports_occupied_tile_and_continues():
    winner, out, err = run("1A\n1a\n2A\n1B\n2B\n3C\n2C\n")
    assert "The tile at position 1A already has piece x in it" in err
    assert winner is Winner.O
    assert out.endswith("o wins!\n")


def test_play_stops_quietly_when_input_ends():
    winner, out, err = run("1A\n")
    assert winner is None
    assert out.endswith("\n")
    assert "wins" not in out
    assert err == ""


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2B\n1A\n3A\n1B\n1C\n"))
    assert cli.main(["--ascii"]) == 0
    captured = capsys.readouterr()
    assert " 1 o o x" in captured.out
    assert "x wins!" in captured.out


def test_entry_point_honours_ascii_env(monkeypatch, capsys):
    monkeypatch.setenv("TICTACTOE_ASCII", "true")
    monkeypatch.setattr("sys.argv", ["tictactoe"])
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as excinfo:
        entry.main()
    assert excinfo.value.code == 0
    assert " 1 . . ." in capsys.readouterr().out
