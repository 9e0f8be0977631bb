"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessmaster.core import Location, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    print(pos.board[Location.parse("e1")])
"""

from chessmaster.core.board import Board
from chessmaster.core.enums import CastlingRights, Color, PieceType
from chessmaster.core.errors import (
    FenDecodeError,
    FenErrorKind,
    FenField,
    InvalidSquareTextError,
    MoveError,
    OutOfRangeError,
)
from chessmaster.core.move import Move
from chessmaster.core.notation import (
    STARTING_FEN,
    expand_rank,
    position_from_fen,
    position_to_fen,
    try_position_from_fen,
)
from chessmaster.core.piece import Piece, fen_char, piece_from_fen_char
from chessmaster.core.position import Position
from chessmaster.core.rules import GeometricRules, Rules
from chessmaster.core.types import ALL_LOCATIONS, File, Location, Rank, parse_location

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Coordinates
    "ALL_LOCATIONS",
    "File",
    "Location",
    "Rank",
    "parse_location",
    # Errors
    "FenDecodeError",
    "FenErrorKind",
    "FenField",
    "InvalidSquareTextError",
    "MoveError",
    "OutOfRangeError",
    # Domain objects
    "Board",
    "GeometricRules",
    "Move",
    "Piece",
    "Position",
    "Rules",
    "fen_char",
    "piece_from_fen_char",
    # Notation
    "STARTING_FEN",
    "expand_rank",
    "position_from_fen",
    "position_to_fen",
    "try_position_from_fen",
]
