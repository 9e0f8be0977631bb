"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessmaster.core.notation import STARTING_FEN, position_from_fen
from chessmaster.core.position import Position
from chessmaster.game.state import Game

# White pawn on e5, black pawn just played d7-d5.
EN_PASSANT_FEN = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2"


@pytest.fixture
def start_position() -> Position:
    return position_from_fen(STARTING_FEN)


@pytest.fixture
def game() -> Game:
    return Game()


@pytest.fixture
def en_passant_game() -> Game:
    return Game.from_fen(EN_PASSANT_FEN)
