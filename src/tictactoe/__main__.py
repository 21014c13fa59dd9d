"""Entry point for running tic-tac-toe via ``python -m tictactoe``."""

from __future__ import annotations

import os
import sys

from . import cli


def main() -> None:
    """Start a two-player game in the terminal."""

    ascii_default = os.environ.get("TICTACTOE_ASCII", "").lower() in ("1", "true", "yes")
    sys.exit(cli.main(ascii_default=ascii_default))


if __name__ == "__main__":
    main()
