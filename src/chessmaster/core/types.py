"""Coordinate system: files, ranks and board locations.

Files run a..h (1-indexed columns), ranks run 1..8. A :class:`Location`
pairs the two and is rendered in algebraic notation, e.g. ``e4``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Self

from chessmaster.core.errors import InvalidSquareTextError, OutOfRangeError

_FILE_LETTERS = "abcdefgh"
_RANK_DIGITS = "12345678"


class _Coordinate(IntEnum):
    """Shared 1..8 arithmetic for files and ranks."""

    @classmethod
    def from_index(cls, index: int) -> Self:
        if not 1 <= index <= 8:
            raise OutOfRangeError(f"{cls.__name__} index out of range: {index!r}")
        return cls(index)

    def offset(self, delta: int) -> Self:
        """Step *delta* places along the axis; raises past the board edge."""
        return type(self).from_index(self.value + delta)

    @property
    def next(self) -> Self | None:
        return None if self.value == 8 else type(self)(self.value + 1)

    @property
    def previous(self) -> Self | None:
        return None if self.value == 1 else type(self)(self.value - 1)


class File(_Coordinate):
    """Board column a..h."""

    A = 1
    B = 2
    C = 3
    D = 4
    E = 5
    F = 6
    G = 7
    H = 8

    @classmethod
    def from_letter(cls, letter: str) -> File:
        if len(letter) != 1 or letter not in _FILE_LETTERS:
            raise InvalidSquareTextError(f"Invalid file letter: {letter!r}")
        return cls(_FILE_LETTERS.index(letter) + 1)

    @property
    def letter(self) -> str:
        return _FILE_LETTERS[self.value - 1]


class Rank(_Coordinate):
    """Board row 1..8."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8


@dataclass(frozen=True, slots=True)
class Location:
    """One of the 64 squares."""

    file: File
    rank: Rank

    def __str__(self) -> str:
        return f"{self.file.letter}{self.rank.value}"

    def __repr__(self) -> str:
        return f"Location({self})"

    @classmethod
    def parse(cls, text: str) -> Location:
        """Parse algebraic text, e.g. ``'e4'``."""
        if len(text) != 2 or text[0] not in _FILE_LETTERS or text[1] not in _RANK_DIGITS:
            raise InvalidSquareTextError(f"Invalid square name: {text!r}")
        return cls(File.from_letter(text[0]), Rank(int(text[1])))

    @classmethod
    def of(cls, file: int, rank: int) -> Location:
        """Build from 1-indexed file and rank numbers."""
        return cls(File.from_index(file), Rank.from_index(rank))

    def shifted(self, file_delta: int, rank_delta: int) -> Location | None:
        """The square offset by the given deltas, or ``None`` off the board."""
        f = self.file.value + file_delta
        r = self.rank.value + rank_delta
        if 1 <= f <= 8 and 1 <= r <= 8:
            return Location(File(f), Rank(r))
        return None


def parse_location(text: str) -> Location:
    return Location.parse(text)


# Rank-major, a1..h1 first.
ALL_LOCATIONS: tuple[Location, ...] = tuple(
    Location(file, rank) for rank in Rank for file in File
)

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_LOCATIONS[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_LOCATIONS[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_LOCATIONS[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_LOCATIONS[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_LOCATIONS[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_LOCATIONS[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_LOCATIONS[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_LOCATIONS[56:64]
