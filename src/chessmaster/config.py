"""User-configurable codec settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CastlingStyle(Enum):
    """How castling rights are rendered into the FEN castling field."""

    # K, Q, k, q each tested against its own flag.
    STANDARD = "standard"
    # Byte-compatible with older ChessMaster output: both black letters are
    # driven by the queen-side flag, so a lone king-side right is dropped.
    LEGACY = "legacy"


@dataclass(frozen=True)
class FenSettings:
    """All user-configurable FEN output settings."""

    castling_style: CastlingStyle = CastlingStyle.STANDARD


DEFAULT_SETTINGS = FenSettings()
