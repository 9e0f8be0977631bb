"""Error taxonomy for the domain layer."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class OutOfRangeError(ValueError):
    """A file or rank index fell outside 1..8."""


class InvalidSquareTextError(ValueError):
    """Text is not a two-character algebraic square name."""


class FenField(IntEnum):
    """The six FEN fields, in order. ``RECORD`` stands for the whole line."""

    RECORD = 0
    PIECE_PLACEMENT = 1
    ACTIVE_COLOR = 2
    CASTLING = 3
    EN_PASSANT = 4
    HALFMOVE_CLOCK = 5
    FULLMOVE_NUMBER = 6


class FenErrorKind(Enum):
    """Why a FEN decode failed, paired with the field it concerns."""

    WRONG_FIELD_COUNT = (FenField.RECORD, "does not have 6 fields")
    MALFORMED_RANK_COUNT = (FenField.PIECE_PLACEMENT, "does not have 8 ranks")
    MALFORMED_RANK_LENGTH = (FenField.PIECE_PLACEMENT, "does not have 8 squares")
    INVALID_PIECE_CHARACTER = (FenField.PIECE_PLACEMENT, "has an unknown piece")
    INVALID_ACTIVE_COLOR = (FenField.ACTIVE_COLOR, "is not 'w' or 'b'")
    MALFORMED_CASTLING_FIELD = (
        FenField.CASTLING,
        "has unexpected characters or order",
    )
    INVALID_EN_PASSANT_SQUARE = (FenField.EN_PASSANT, "is not a square on rank 3 or 6")
    INVALID_HALF_MOVE_CLOCK = (FenField.HALFMOVE_CLOCK, "is not a non-negative integer")
    INVALID_FULL_MOVE_NUMBER = (FenField.FULLMOVE_NUMBER, "is not a positive integer")

    @property
    def field(self) -> FenField:
        return self.value[0]

    @property
    def reason(self) -> str:
        return self.value[1]


class FenDecodeError(ValueError):
    """A FEN string could not be decoded.

    Args:
        kind: Which rule was broken.
        text: The raw text of the offending field (or the whole line).
    """

    def __init__(self, kind: FenErrorKind, text: str) -> None:
        self.kind = kind
        self.text = text
        name = kind.field.name.replace("_", " ").lower()
        super().__init__(f"Invalid FEN {name} {text!r}: {kind.reason}")

    @property
    def field(self) -> FenField:
        return self.kind.field


class MoveError(IntEnum):
    """Reasons a move request is rejected."""

    ILLEGAL_MOVE = auto()
