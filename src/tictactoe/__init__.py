"""Tic-tac-toe package exposing the game rules and the terminal interface."""

from .game import (
    BOARD_SIZE,
    Game,
    GameAlreadyOver,
    InvalidPosition,
    MoveError,
    Piece,
    TileNotEmpty,
    Winner,
)

__all__ = [
    "BOARD_SIZE",
    "Game",
    "GameAlreadyOver",
    "InvalidPosition",
    "MoveError",
    "Piece",
    "TileNotEmpty",
    "Winner",
]
