"""Position — complete game state (board + metadata)."""

from __future__ import annotations

from chessmaster.core.board import Board
from chessmaster.core.enums import CastlingRights, Color
from chessmaster.core.types import Location, Rank

# The squares a two-square pawn advance can skip over.
EN_PASSANT_RANKS: frozenset[Rank] = frozenset({Rank.THREE, Rank.SIX})


class Position:
    """Full chess position: board + active color + castling + en passant + clocks.

    Raises:
        ValueError: if the en-passant target is not on rank 3 or 6, the
            halfmove clock is negative, or the fullmove number is below 1.
    """

    __slots__ = (
        "board",
        "active_color",
        "castling_rights",
        "en_passant_target",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        active_color: Color = Color.WHITE,
        castling_rights: CastlingRights = CastlingRights.ALL,
        en_passant_target: Location | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        if en_passant_target is not None and en_passant_target.rank not in EN_PASSANT_RANKS:
            raise ValueError(f"En-passant target not on rank 3 or 6: {en_passant_target}")
        if halfmove_clock < 0:
            raise ValueError(f"Halfmove clock must be non-negative: {halfmove_clock!r}")
        if fullmove_number < 1:
            raise ValueError(f"Fullmove number must be positive: {fullmove_number!r}")
        self.board = board if board is not None else Board.initial()
        self.active_color = active_color
        self.castling_rights = castling_rights
        self.en_passant_target = en_passant_target
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            active_color=self.active_color,
            castling_rights=self.castling_rights,
            en_passant_target=self.en_passant_target,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.active_color == other.active_color
            and self.castling_rights == other.castling_rights
            and self.en_passant_target == other.en_passant_target
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    def __repr__(self) -> str:
        from chessmaster.core.notation.fen import position_to_fen

        return f"Position({position_to_fen(self)!r})"
