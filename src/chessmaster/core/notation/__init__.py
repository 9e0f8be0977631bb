"""Notation package: FEN parsing and serialization."""

from chessmaster.core.notation.fen import (
    STARTING_FEN,
    board_to_fen,
    castling_to_fen,
    expand_rank,
    position_from_fen,
    position_to_fen,
    try_position_from_fen,
)

__all__ = [
    "STARTING_FEN",
    "board_to_fen",
    "castling_to_fen",
    "expand_rank",
    "position_from_fen",
    "position_to_fen",
    "try_position_from_fen",
]
