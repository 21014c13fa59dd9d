"""Text interface: draws the board, reads moves like ``1A`` and reports results."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO, Tuple

from .game import Game, Piece, Tiles, TileNotEmpty, Winner

EMPTY_GLYPH = "▢"
ASCII_EMPTY_GLYPH = "."

ROW_LABELS = "123"
COL_LABELS = "ABC"

RESULT_MESSAGES = {
    Winner.X: "x wins!",
    Winner.O: "o wins!",
    Winner.TIE: "Tie!",
}


class InvalidMove(ValueError):
    """Raised by parse_move for text that is not a coordinate."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid move: {text!r}")
        self.text = text


def piece_symbol(piece: Piece) -> str:
    return piece.value.lower()


def format_position(row: int, col: int) -> str:
    return f"{row + 1}{COL_LABELS[col]}"


def render_tiles(tiles: Tiles, empty: str = EMPTY_GLYPH) -> str:
    """Render the board with column letters on top and row numbers down the side.

    Example::

           A B C
         1 x ▢ ▢
         2 ▢ ▢ o
         3 ▢ ▢ ▢
    """
    lines: List[str] = ["  " + "".join(f" {COL_LABELS[j]}" for j in range(len(tiles[0])))]
    for i, row in enumerate(tiles):
        cells = "".join(
            f" {piece_symbol(tile) if tile is not None else empty}" for tile in row
        )
        lines.append(f" {i + 1}{cells}")
    # Blank line keeps the board apart from the prompts that follow
    return "\n".join(lines) + "\n\n"


def parse_move(text: str) -> Tuple[int, int]:
    """Turn ``"2b"`` into ``(1, 1)``. Raises InvalidMove otherwise."""
    if len(text) != 2:
        raise InvalidMove(text)
    row_char, col_char = text[0], text[1]
    if row_char not in ROW_LABELS:
        raise InvalidMove(text)
    if col_char.upper() not in COL_LABELS:
        raise InvalidMove(col_char)
    return ROW_LABELS.index(row_char), COL_LABELS.index(col_char.upper())


def prompt_move(
    stdin: TextIO, stdout: TextIO, stderr: TextIO
) -> Optional[Tuple[int, int]]:
    """Keep asking until a coordinate parses; None once input runs out."""
    while True:
        stdout.write("Enter move (e.g. 1A): ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            return None
        try:
            return parse_move(line.rstrip())
        except InvalidMove as exc:
            stderr.write(f"invalid move: '{exc.text}'. Please try again.\n")


def play(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    empty: str = EMPTY_GLYPH,
) -> Optional[Winner]:
    """Run one hot-seat game. Returns the winner, or None if input ended early."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    game = Game()

    while not game.is_finished():
        stdout.write(render_tiles(game.tiles(), empty))
        stdout.write(f"Current piece: {piece_symbol(game.current_piece)}\n")

        move = prompt_move(stdin, stdout, stderr)
        if move is None:
            stdout.write("\n")
            return None

        row, col = move
        try:
            game.make_move(row, col)
        except TileNotEmpty as exc:
            stderr.write(
                f"The tile at position {format_position(exc.row, exc.col)} "
                f"already has piece {piece_symbol(exc.other_piece)} in it\n"
            )

    stdout.write(render_tiles(game.tiles(), empty))
    winner = game.winner
    assert winner is not None
    stdout.write(RESULT_MESSAGES[winner] + "\n")
    return winner


def main(argv: Optional[List[str]] = None, ascii_default: bool = False) -> int:
    parser = argparse.ArgumentParser(description="Two-player tic-tac-toe in the terminal")
    parser.add_argument(
        "--ascii",
        action="store_true",
        default=ascii_default,
        help=f"draw empty tiles as '{ASCII_EMPTY_GLYPH}' instead of '{EMPTY_GLYPH}'",
    )
    args = parser.parse_args(argv)

    play(empty=ASCII_EMPTY_GLYPH if args.ascii else EMPTY_GLYPH)
    return 0
