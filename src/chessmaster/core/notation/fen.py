"""FEN parsing and serialization.

A FEN record is six fields separated by single spaces::

    <placement> <active color> <castling> <en passant> <halfmove> <fullmove>

Decoding is all-or-nothing: each field has its own parser, the first
failure aborts the decode with a :class:`FenDecodeError` naming the field
and its raw text.
"""

from __future__ import annotations

import logging

from chessmaster.config import DEFAULT_SETTINGS, CastlingStyle, FenSettings
from chessmaster.core.board import Board
from chessmaster.core.enums import CastlingRights, Color
from chessmaster.core.errors import FenDecodeError, FenErrorKind, InvalidSquareTextError
from chessmaster.core.piece import EMPTY_SQUARE, piece_from_fen_char
from chessmaster.core.position import EN_PASSANT_RANKS, Position
from chessmaster.core.types import File, Location, Rank

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_FIELD_COUNT = 6
_BLANK_DIGITS = "12345678"

# Canonical order of the castling field.
_CASTLING_LETTERS: tuple[tuple[str, CastlingRights], ...] = (
    ("K", CastlingRights.WHITE_KINGSIDE),
    ("Q", CastlingRights.WHITE_QUEENSIDE),
    ("k", CastlingRights.BLACK_KINGSIDE),
    ("q", CastlingRights.BLACK_QUEENSIDE),
)

_ACTIVE_COLORS: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


# ── Field parsers ───────────────────────────────────────────────────────────


def expand_rank(text: str) -> str:
    """Replace each digit 1-8 with that many empty-square markers."""
    return "".join(EMPTY_SQUARE * int(ch) if ch in _BLANK_DIGITS else ch for ch in text)


def parse_piece_placement(text: str) -> Board:
    ranks = text.split("/")
    if len(ranks) != 8:
        raise FenDecodeError(FenErrorKind.MALFORMED_RANK_COUNT, text)

    board = Board()
    for rank, rank_text in zip(reversed(Rank), ranks):
        squares = expand_rank(rank_text)
        if len(squares) != 8:
            raise FenDecodeError(FenErrorKind.MALFORMED_RANK_LENGTH, rank_text)
        for file, ch in zip(File, squares):
            if ch == EMPTY_SQUARE:
                continue
            piece = piece_from_fen_char(ch)
            if piece is None:
                raise FenDecodeError(FenErrorKind.INVALID_PIECE_CHARACTER, rank_text)
            board[Location(file, rank)] = piece
    return board


def parse_active_color(text: str) -> Color:
    try:
        return _ACTIVE_COLORS[text]
    except KeyError:
        raise FenDecodeError(FenErrorKind.INVALID_ACTIVE_COLOR, text) from None


def parse_castling(text: str) -> CastlingRights:
    """Parse ``-`` or an ordered subsequence of ``KQkq``."""
    rights = CastlingRights.NONE
    if text == "-":
        return rights

    rest = text
    for letter, flag in _CASTLING_LETTERS:
        if rest.startswith(letter):
            rights |= flag
            rest = rest[1:]
    if rest or not text:
        raise FenDecodeError(FenErrorKind.MALFORMED_CASTLING_FIELD, text)
    return rights


def parse_en_passant(text: str) -> Location | None:
    if text == "-":
        return None
    try:
        location = Location.parse(text)
    except InvalidSquareTextError:
        raise FenDecodeError(FenErrorKind.INVALID_EN_PASSANT_SQUARE, text) from None
    if location.rank not in EN_PASSANT_RANKS:
        raise FenDecodeError(FenErrorKind.INVALID_EN_PASSANT_SQUARE, text)
    return location


def _parse_counter(text: str, minimum: int, kind: FenErrorKind) -> int:
    # Plain ASCII digits only: no sign, whitespace or underscores.
    if not (text.isascii() and text.isdigit()):
        raise FenDecodeError(kind, text)
    value = int(text)
    if value < minimum:
        raise FenDecodeError(kind, text)
    return value


def parse_halfmove_clock(text: str) -> int:
    return _parse_counter(text, 0, FenErrorKind.INVALID_HALF_MOVE_CLOCK)


def parse_fullmove_number(text: str) -> int:
    return _parse_counter(text, 1, FenErrorKind.INVALID_FULL_MOVE_NUMBER)


# ── Decoding ────────────────────────────────────────────────────────────────


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Raises:
        FenDecodeError: on the first field that fails to parse.
    """
    parts = fen.split(" ")
    if len(parts) != _FIELD_COUNT:
        raise FenDecodeError(FenErrorKind.WRONG_FIELD_COUNT, fen)

    placement, color_part, castling_part, ep_part, half_part, full_part = parts
    return Position(
        board=parse_piece_placement(placement),
        active_color=parse_active_color(color_part),
        castling_rights=parse_castling(castling_part),
        en_passant_target=parse_en_passant(ep_part),
        halfmove_clock=parse_halfmove_clock(half_part),
        fullmove_number=parse_fullmove_number(full_part),
    )


def try_position_from_fen(
    fen: str, diagnostics: list[FenDecodeError] | None = None
) -> Position | None:
    """Non-raising variant of :func:`position_from_fen`.

    On failure returns ``None`` and appends the error to *diagnostics*
    when a sink is given.
    """
    try:
        return position_from_fen(fen)
    except FenDecodeError as exc:
        _LOGGER.debug("Rejected FEN %r: %s", fen, exc)
        if diagnostics is not None:
            diagnostics.append(exc)
        return None


# ── Encoding ────────────────────────────────────────────────────────────────


def board_to_fen(board: Board) -> str:
    """Piece-placement field, rank 8 first."""
    rows: list[str] = []
    for rank in reversed(Rank):
        empty = 0
        row = ""
        for file in File:
            piece = board[Location(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def castling_to_fen(
    rights: CastlingRights, style: CastlingStyle = CastlingStyle.STANDARD
) -> str:
    if style is CastlingStyle.LEGACY:
        checks = (
            ("K", CastlingRights.WHITE_KINGSIDE),
            ("Q", CastlingRights.WHITE_QUEENSIDE),
            ("k", CastlingRights.BLACK_QUEENSIDE),
            ("q", CastlingRights.BLACK_QUEENSIDE),
        )
    else:
        checks = _CASTLING_LETTERS
    text = "".join(letter for letter, flag in checks if flag in rights)
    # Legacy output renders "-" only for the empty set, even when nothing
    # else was written.
    if style is CastlingStyle.LEGACY:
        return text + ("-" if rights == CastlingRights.NONE else "")
    return text or "-"


def position_to_fen(pos: Position, settings: FenSettings | None = None) -> str:
    """Serialise a :class:`Position` to FEN."""
    settings = settings or DEFAULT_SETTINGS
    board_str = board_to_fen(pos.board)
    castling_str = castling_to_fen(pos.castling_rights, settings.castling_style)
    ep_str = str(pos.en_passant_target) if pos.en_passant_target is not None else "-"
    return (
        f"{board_str} {pos.active_color.fen_char} {castling_str} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
