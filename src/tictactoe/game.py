"""Core rules for 3x3 tic-tac-toe: board state, move legality and outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

BOARD_SIZE = 3


# ---------- Pieces ----------


class Piece(Enum):
    """The two pieces; X always moves first."""

    X = "X"
    O = "O"

    def other(self) -> "Piece":
        return Piece.O if self is Piece.X else Piece.X


class Winner(Enum):
    X = "X"
    O = "O"
    TIE = "TIE"

    @classmethod
    def of(cls, piece: Piece) -> "Winner":
        return cls(piece.value)


Tile = Optional[Piece]
Tiles = Tuple[Tuple[Tile, ...], ...]


# ---------- Errors ----------


class MoveError(ValueError):
    """Base class for rejected moves. The game is left untouched."""


class GameAlreadyOver(MoveError):
    def __init__(self) -> None:
        super().__init__("Game already finished")


class InvalidPosition(MoveError):
    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Invalid position ({row}, {col})")
        self.row = row
        self.col = col


class TileNotEmpty(MoveError):
    def __init__(self, other_piece: Piece, row: int, col: int) -> None:
        super().__init__(
            f"Tile ({row}, {col}) already holds {other_piece.value}"
        )
        self.other_piece = other_piece
        self.row = row
        self.col = col


# ---------- Game ----------


@dataclass
class Game:
    board: List[List[Tile]] = field(
        default_factory=lambda: [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    )
    current_piece: Piece = Piece.X
    # Set at most once; see _update_winner
    winner: Optional[Winner] = None

    @classmethod
    def new(cls) -> "Game":
        return cls()

    # ---- API used by the text interface ----

    def make_move(self, row: int, col: int) -> None:
        """Place the current piece at (row, col) and pass the turn.

        Raises GameAlreadyOver, InvalidPosition or TileNotEmpty, checked in
        that order. A rejected move never changes the game.
        """
        if self.is_finished():
            raise GameAlreadyOver()
        if not (0 <= row < len(self.board) and 0 <= col < len(self.board[0])):
            raise InvalidPosition(row, col)
        other_piece = self.board[row][col]
        if other_piece is not None:
            raise TileNotEmpty(other_piece, row, col)

        self.board[row][col] = self.current_piece
        self.current_piece = self.current_piece.other()
        self._update_winner(row, col)

    def is_finished(self) -> bool:
        return self.winner is not None

    def tiles(self) -> Tiles:
        """Read-only snapshot of the board, row-major."""
        return tuple(tuple(row) for row in self.board)

    def available_moves(self) -> List[Tuple[int, int]]:
        if self.is_finished():
            return []
        return [
            (r, c)
            for r, row in enumerate(self.board)
            for c, tile in enumerate(row)
            if tile is None
        ]

    def clone(self) -> "Game":
        return Game(
            board=[row.copy() for row in self.board],
            current_piece=self.current_piece,
            winner=self.winner,
        )

    # ---- helpers ----

    @staticmethod
    def check_line(line: Sequence[Tile]) -> Optional[Winner]:
        """Winner owning all three tiles of ``line``, if any."""
        first = line[0]
        if first is not None and first == line[1] == line[2]:
            return Winner.of(first)
        return None

    def _update_winner(self, row: int, col: int) -> None:
        # Only lines through the last move can have just been completed.
        rows = len(self.board)
        assert rows == BOARD_SIZE and all(len(r) == BOARD_SIZE for r in self.board), (
            "Winner detection assumes a 3x3 board"
        )

        b = self.board
        empty: Tuple[Tile, Tile, Tile] = (None, None, None)
        candidates = (
            tuple(b[row]),
            (b[0][col], b[1][col], b[2][col]),
            (b[0][0], b[1][1], b[2][2]) if row == col else empty,
            (b[0][2], b[1][1], b[2][0]) if rows - 1 - row == col else empty,
        )

        if self.winner is None:
            for line in candidates:
                found = self.check_line(line)
                if found is not None:
                    self.winner = found
                    break

        if self.winner is None and all(
            tile is not None for r in b for tile in r
        ):
            self.winner = Winner.TIE
