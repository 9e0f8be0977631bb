"""Board - sparse piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessmaster.core.enums import Color, PieceType
from chessmaster.core.piece import Piece
from chessmaster.core.types import File, Location, Rank

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable mapping from :class:`Location` to :class:`Piece`.

    Only occupied squares are stored. Assigning ``None`` empties a square.
    No piece-count invariant is enforced.
    """

    __slots__ = ("_pieces",)

    def __init__(self, pieces: dict[Location, Piece] | None = None) -> None:
        self._pieces: dict[Location, Piece] = dict(pieces) if pieces else {}

    # -- Element access -----------------------------------------------------

    def __getitem__(self, location: Location) -> Piece | None:
        return self._pieces.get(location)

    def __setitem__(self, location: Location, piece: Piece | None) -> None:
        if piece is None:
            self._pieces.pop(location, None)
        else:
            self._pieces[location] = piece

    def __contains__(self, location: object) -> bool:
        return location in self._pieces

    def __iter__(self) -> Iterator[Location]:
        return iter(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def items(self) -> Iterator[tuple[Location, Piece]]:
        return iter(self._pieces.items())

    def is_empty(self, location: Location) -> bool:
        return location not in self._pieces

    # -- Query helpers ------------------------------------------------------

    def color_at(self, location: Location) -> Color | None:
        piece = self._pieces.get(location)
        return piece.color if piece is not None else None

    def pieces(self, color: Color, piece_type: PieceType) -> list[Location]:
        """Locations occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [loc for loc, piece in self._pieces.items() if piece == target]

    def count(self, piece_type: PieceType, color: Color | None = None) -> int:
        """Number of pieces of *piece_type*, optionally of one *color*."""
        return sum(
            1
            for piece in self._pieces.values()
            if piece.piece_type == piece_type and (color is None or piece.color == color)
        )

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        return Board(self._pieces)

    def clear(self) -> None:
        self._pieces.clear()

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for file, piece_type in zip(File, _BACK_RANK):
            b[Location(file, Rank.TWO)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Location(file, Rank.SEVEN)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Location(file, Rank.ONE)] = Piece(Color.WHITE, piece_type)
            b[Location(file, Rank.EIGHT)] = Piece(Color.BLACK, piece_type)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pieces == other._pieces

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in reversed(Rank):
            row = []
            for file in File:
                p = self[Location(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank.value} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
