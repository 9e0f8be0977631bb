"""Move request value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessmaster.core.types import Location


@dataclass(frozen=True, slots=True)
class Move:
    """A request to move whatever stands on *start* to *end*.

    Carries no piece, capture or promotion metadata; whether it is legal is
    decided when it is applied.
    """

    start: Location
    end: Location

    def __str__(self) -> str:
        return f"{self.start}{self.end}"

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse long-algebraic text, e.g. ``'e2e4'``."""
        if len(text) != 4:
            raise ValueError(f"Invalid move text: {text!r}")
        return cls(Location.parse(text[:2]), Location.parse(text[2:]))
