"""Piece value object and its FEN character mapping."""

from __future__ import annotations

from dataclasses import dataclass

from chessmaster.core.enums import Color, PieceType

# Marker for an empty square in an expanded FEN rank.
EMPTY_SQUARE = "-"

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return fen_char(self)

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        piece = piece_from_fen_char(char)
        if piece is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return piece


def piece_from_fen_char(char: str) -> Piece | None:
    """Piece for one of the 12 FEN letters; ``None`` for anything else."""
    entry = _CHAR_MAP.get(char)
    if entry is None:
        return None
    return Piece(*entry)


def fen_char(piece: Piece) -> str:
    return _FEN_CHARS[(piece.color, piece.piece_type)]
