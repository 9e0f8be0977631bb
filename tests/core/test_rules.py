"""Tests for the geometric rules collaborator."""

from chessmaster.core.board import Board
from chessmaster.core.move import Move
from chessmaster.core.notation import STARTING_FEN, position_from_fen
from chessmaster.core.position import Position
from chessmaster.core.rules import GeometricRules
from chessmaster.core.types import (
    A1,
    B1,
    C3,
    D5,
    D6,
    D7,
    E2,
    E3,
    E4,
    E5,
    E6,
    E7,
    G1,
    H3,
    Location,
    parse_location,
)


def _squares(*names: str) -> frozenset[Location]:
    return frozenset(parse_location(n) for n in names)


RULES = GeometricRules()


class TestPawnGeometry:
    def test_opening_push(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert RULES.legal_destinations(pos, E2) == {E3, E4}

    def test_black_opening_push(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert RULES.legal_destinations(pos, D7) == {D6, D5}

    def test_blocked_pawn(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/4n3/4P3/4K3 w - - 0 1")
        assert RULES.legal_destinations(pos, E2) == frozenset()

    def test_double_push_blocked_on_second_square(self) -> None:
        pos = position_from_fen("4k3/8/8/8/4n3/8/4P3/4K3 w - - 0 1")
        assert RULES.legal_destinations(pos, E2) == {E3}

    def test_captures_only_enemy(self) -> None:
        pos = position_from_fen("4k3/8/8/3p1P2/4P3/8/8/4K3 w - - 0 1")
        assert RULES.legal_destinations(pos, E4) == _squares("d5", "e5")

    def test_en_passant_capture_offered(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 2")
        assert RULES.legal_destinations(pos, E5) == {D6, E6}

    def test_no_en_passant_without_target(self) -> None:
        pos = position_from_fen("4k3/8/8/3pP3/8/8/8/4K3 w - - 0 2")
        assert RULES.legal_destinations(pos, E5) == {E6}

    def test_black_pawn_cannot_take_rank_six_target(self) -> None:
        pos = position_from_fen("4k3/3Np3/8/3pP3/8/8/8/4K3 w - d6 0 2")
        assert RULES.legal_destinations(pos, E7) == {E6}

    def test_black_en_passant_on_rank_three(self) -> None:
        pos = position_from_fen("4k3/8/8/8/3pP3/8/8/4K3 b - e3 0 1")
        assert RULES.legal_destinations(pos, parse_location("d4")) == _squares("d3", "e3")

    def test_white_pawn_cannot_take_rank_three_target(self) -> None:
        pos = position_from_fen("4k3/8/8/8/3p4/8/4P3/4K3 w - d3 0 2")
        assert RULES.legal_destinations(pos, E2) == {E3, E4}


class TestPieceGeometry:
    def test_knight_from_start(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert RULES.legal_destinations(pos, G1) == _squares("f3", "h3")
        assert RULES.legal_destinations(pos, B1) == {C3, parse_location("a3")}

    def test_rook_blocked_in_corner(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert RULES.legal_destinations(pos, A1) == frozenset()

    def test_rook_slides_until_capture(self) -> None:
        pos = position_from_fen("4k3/8/8/8/p7/8/8/R3K3 w - - 0 1")
        assert RULES.legal_destinations(pos, A1) == _squares(
            "a2", "a3", "a4", "b1", "c1", "d1"
        )

    def test_bishop_diagonals(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/2B1K3 w - - 0 1")
        assert RULES.legal_destinations(pos, parse_location("c1")) == _squares(
            "b2", "a3", "d2", "e3", "f4", "g5", "h6"
        )

    def test_queen_in_centre(self) -> None:
        pos = position_from_fen("8/8/8/8/3Q4/8/8/8 w - - 0 1")
        assert len(RULES.legal_destinations(pos, parse_location("d4"))) == 27

    def test_king_steps(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/3P4/4K3 w - - 0 1")
        assert RULES.legal_destinations(pos, parse_location("e1")) == _squares(
            "d1", "f1", "e2", "f2"
        )

    def test_empty_square(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert RULES.legal_destinations(pos, H3) == frozenset()


class TestEnPassantTarget:
    def test_double_push_sets_target(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert RULES.en_passant_target_after_move(pos, Move(E2, E4)) == E3

    def test_black_double_push(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert RULES.en_passant_target_after_move(pos, Move(D7, D5)) == D6

    def test_single_push_has_no_target(self) -> None:
        pos = position_from_fen(STARTING_FEN)
        assert RULES.en_passant_target_after_move(pos, Move(E2, E3)) is None

    def test_non_pawn_has_no_target(self) -> None:
        pos = position_from_fen("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        assert RULES.en_passant_target_after_move(pos, Move(A1, parse_location("a3"))) is None


class TestStartingBoard:
    def test_thirty_two_pieces(self) -> None:
        board = RULES.starting_board()
        assert len(board) == 32
        assert board == Board.initial()

    def test_fresh_board_each_call(self) -> None:
        board = RULES.starting_board()
        board.clear()
        assert len(RULES.starting_board()) == 32
        assert Position(board=RULES.starting_board()) == Position()
