"""Command-line entry point: decode a FEN, play moves, print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from chessmaster.config import CastlingStyle, FenSettings
from chessmaster.core.errors import FenDecodeError
from chessmaster.core.move import Move
from chessmaster.core.notation.fen import STARTING_FEN
from chessmaster.game.state import Game

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessmaster",
        description="Apply moves to a FEN position and print the resulting FEN.",
    )
    parser.add_argument("fen", nargs="?", default=STARTING_FEN, help="starting position")
    parser.add_argument(
        "-m",
        "--move",
        action="append",
        default=[],
        metavar="UCI",
        help="move in long algebraic form, e.g. e2e4 (repeatable)",
    )
    parser.add_argument(
        "--legacy-castling",
        action="store_true",
        help="render castling rights the way older ChessMaster builds did",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI. Returns the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = FenSettings(
        castling_style=CastlingStyle.LEGACY if args.legacy_castling else CastlingStyle.STANDARD
    )

    try:
        game = Game.from_fen(args.fen)
    except FenDecodeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    for text in args.move:
        try:
            move = Move.parse(text)
        except ValueError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        if game.apply_move(move) is not None:
            print(f"error: illegal move {text}", file=sys.stderr)
            return 1
        _LOGGER.info("Played %s", move)

    print(game.fen(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
