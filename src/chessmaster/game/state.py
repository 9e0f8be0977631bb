"""Game — owns a position and applies move requests to it."""

from __future__ import annotations

import logging

from chessmaster.config import FenSettings
from chessmaster.core.board import Board
from chessmaster.core.enums import CastlingRights, Color, PieceType
from chessmaster.core.errors import MoveError
from chessmaster.core.move import Move
from chessmaster.core.notation.fen import position_from_fen, position_to_fen
from chessmaster.core.position import EN_PASSANT_RANKS, Position
from chessmaster.core.rules import GeometricRules, Rules
from chessmaster.core.types import Location

_LOGGER = logging.getLogger(__name__)


class Game:
    """Mutable game state driven through :meth:`apply_move`.

    Legality and en-passant geometry come from the *rules* collaborator.
    A move either commits completely or is rejected with no change.

    Thread-safety: none. Callers sharing a game across threads must hold
    their own lock around :meth:`apply_move`.
    """

    __slots__ = ("_position", "_rules")

    def __init__(
        self, position: Position | None = None, rules: Rules | None = None
    ) -> None:
        self._rules = rules if rules is not None else GeometricRules()
        if position is None:
            position = Position(
                board=self._rules.starting_board(),
                active_color=Color.WHITE,
                castling_rights=CastlingRights.ALL,
                en_passant_target=None,
                halfmove_clock=0,
                fullmove_number=1,
            )
        self._position = position.copy()

    @classmethod
    def from_fen(cls, fen: str, rules: Rules | None = None) -> Game:
        """Raises :class:`FenDecodeError` if *fen* is malformed."""
        return cls(position_from_fen(fen), rules)

    # ── Read-only accessors ──────────────────────────────────────────────

    @property
    def position(self) -> Position:
        """Snapshot of the current position."""
        return self._position.copy()

    @property
    def board(self) -> Board:
        return self._position.board.copy()

    @property
    def active_color(self) -> Color:
        return self._position.active_color

    @property
    def castling_rights(self) -> CastlingRights:
        return self._position.castling_rights

    @property
    def en_passant_target(self) -> Location | None:
        return self._position.en_passant_target

    @property
    def halfmove_clock(self) -> int:
        return self._position.halfmove_clock

    @property
    def fullmove_number(self) -> int:
        return self._position.fullmove_number

    @property
    def rules(self) -> Rules:
        return self._rules

    def color_at(self, location: Location) -> Color | None:
        return self._position.board.color_at(location)

    def fen(self, settings: FenSettings | None = None) -> str:
        return position_to_fen(self._position, settings)

    # ── Move application ─────────────────────────────────────────────────

    def legal_destinations(self, start: Location) -> frozenset[Location]:
        if self._position.board.is_empty(start):
            return frozenset()
        return frozenset(self._rules.legal_destinations(self._position, start))

    def apply_move(self, move: Move) -> MoveError | None:
        """Apply *move* if its destination is legal.

        Returns ``None`` on success, or :attr:`MoveError.ILLEGAL_MOVE` with
        the position left untouched.

        Raises:
            ValueError: if the rules report an en-passant target off rank 3
                or 6. Nothing is committed in that case.
        """
        # TODO: castling rook transfer, promotion and clock updates belong to
        # a full Rules implementation; this engine only relocates one piece.
        if move.end not in self.legal_destinations(move.start):
            _LOGGER.debug("Illegal move from %s to %s", move.start, move.end)
            return MoveError.ILLEGAL_MOVE

        pos = self._position
        piece = pos.board[move.start]
        assert piece is not None
        next_en_passant = self._rules.en_passant_target_after_move(pos, move)
        if next_en_passant is not None and next_en_passant.rank not in EN_PASSANT_RANKS:
            raise ValueError(f"En-passant target not on rank 3 or 6: {next_en_passant}")
        capture_square = self._en_passant_capture_square(move)

        board = pos.board.copy()
        if capture_square is not None:
            board[capture_square] = None
        board[move.start] = None
        board[move.end] = piece

        pos.board = board
        pos.en_passant_target = next_en_passant
        pos.active_color = pos.active_color.opposite
        _LOGGER.debug("Applied %s%s", piece, move)
        return None

    def _en_passant_capture_square(self, move: Move) -> Location | None:
        """Square of the pawn taken en passant by *move*, if any."""
        piece = self._position.board[move.start]
        if piece is None or piece.piece_type != PieceType.PAWN:
            return None
        if move.end != self._position.en_passant_target:
            return None
        square = Location(move.end.file, move.start.rank)
        victim = self._position.board[square]
        if victim is None or victim.piece_type != PieceType.PAWN or victim.color == piece.color:
            return None
        return square
