"""Rules collaborator: move geometry, en-passant targets and the starting board.

The position engine never decides legality itself. It asks a :class:`Rules`
implementation, so a full rule set (check, pins, castling) can be plugged in
without touching the engine.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from chessmaster.core.board import Board
from chessmaster.core.enums import Color, PieceType
from chessmaster.core.types import Location, Rank

if TYPE_CHECKING:
    from chessmaster.core.move import Move
    from chessmaster.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_SLIDING_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}

# color -> (forward rank step, home rank, capturable en-passant rank)
_PAWN_GEOMETRY: dict[Color, tuple[int, Rank, Rank]] = {
    Color.WHITE: (1, Rank.TWO, Rank.SIX),
    Color.BLACK: (-1, Rank.SEVEN, Rank.THREE),
}


class Rules(ABC):
    """Interface the position engine consults for every move."""

    @abstractmethod
    def legal_destinations(
        self, position: Position, start: Location
    ) -> frozenset[Location]:
        """Squares the piece on *start* may move to; empty if unoccupied."""

    @abstractmethod
    def en_passant_target_after_move(
        self, position: Position, move: Move
    ) -> Location | None:
        """En-passant target created by *move*, evaluated before it is made."""

    @abstractmethod
    def starting_board(self) -> Board:
        """Board used when a fresh game is created."""


class GeometricRules(Rules):
    """Piece movement geometry only.

    Moves are generated for whichever piece stands on the start square,
    regardless of the side to move. Nothing is filtered for king safety,
    castling is not generated and promotion is not modelled.
    """

    def legal_destinations(
        self, position: Position, start: Location
    ) -> frozenset[Location]:
        piece = position.board[start]
        if piece is None:
            return frozenset()

        if piece.piece_type == PieceType.PAWN:
            return frozenset(self._pawn_targets(position, start, piece.color))
        if piece.piece_type == PieceType.KNIGHT:
            return frozenset(self._step_targets(position, start, piece.color, KNIGHT_OFFSETS))
        if piece.piece_type == PieceType.KING:
            return frozenset(self._step_targets(position, start, piece.color, KING_OFFSETS))
        return frozenset(
            self._sliding_targets(
                position, start, piece.color, _SLIDING_DIRS[piece.piece_type]
            )
        )

    def en_passant_target_after_move(
        self, position: Position, move: Move
    ) -> Location | None:
        piece = position.board[move.start]
        if piece is None or piece.piece_type != PieceType.PAWN:
            return None
        if move.start.file != move.end.file:
            return None
        if abs(move.end.rank - move.start.rank) != 2:
            return None
        return move.start.shifted(0, (move.end.rank - move.start.rank) // 2)

    def starting_board(self) -> Board:
        return Board.initial()

    # -- Piece-specific generators (private) -------------------------------

    @staticmethod
    def _pawn_targets(
        position: Position, start: Location, color: Color
    ) -> list[Location]:
        board = position.board
        forward, home_rank, ep_rank = _PAWN_GEOMETRY[color]
        targets: list[Location] = []

        one_step = start.shifted(0, forward)
        if one_step is not None and board.is_empty(one_step):
            targets.append(one_step)
            if start.rank == home_rank:
                two_step = start.shifted(0, 2 * forward)
                if two_step is not None and board.is_empty(two_step):
                    targets.append(two_step)

        for file_delta in (-1, 1):
            cap = start.shifted(file_delta, forward)
            if cap is None:
                continue
            victim = board[cap]
            if victim is not None and victim.color != color:
                targets.append(cap)
            elif (
                victim is None
                and cap == position.en_passant_target
                and cap.rank == ep_rank
            ):
                targets.append(cap)
        return targets

    @staticmethod
    def _step_targets(
        position: Position,
        start: Location,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
    ) -> list[Location]:
        targets: list[Location] = []
        for df, dr in offsets:
            to = start.shifted(df, dr)
            if to is not None and position.board.color_at(to) != color:
                targets.append(to)
        return targets

    @staticmethod
    def _sliding_targets(
        position: Position,
        start: Location,
        color: Color,
        directions: tuple[tuple[int, int], ...],
    ) -> list[Location]:
        board = position.board
        targets: list[Location] = []
        for df, dr in directions:
            to = start.shifted(df, dr)
            while to is not None:
                occupant = board.color_at(to)
                if occupant is None:
                    targets.append(to)
                elif occupant != color:
                    targets.append(to)
                    break
                else:
                    break
                to = to.shifted(df, dr)
        return targets
