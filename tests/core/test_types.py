"""Tests for squares, pieces, moves and position counters."""

import pytest

from chessrules.core.enums import CastlingSide, Color, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.state import PositionState
from chessrules.core.types import (
    A1, E2, E4, E7, E8, H1, H8, Square, all_squares, parse_square, square_name,
)
from chessrules.errors import InvalidArgument


class TestSquare:
    def test_constants(self) -> None:
        assert A1 == Square(0, 0)
        assert H8 == Square(7, 7)
        assert E4 == Square(3, 4)

    @pytest.mark.parametrize("name", ["a1", "e4", "h8", "c6"])
    def test_parse_and_name(self, name: str) -> None:
        assert square_name(parse_square(name)) == name
        assert str(parse_square(name)) == name

    @pytest.mark.parametrize("name", ["", "e", "i1", "a9", "a0", "E4", "e44"])
    def test_parse_rejects(self, name: str) -> None:
        with pytest.raises(InvalidArgument):
            parse_square(name)

    def test_offset_off_board(self) -> None:
        assert A1.offset(-1, 0) is None
        assert H8.offset(0, 1) is None
        assert A1.offset(1, 1) == Square(1, 1)

    def test_all_squares(self) -> None:
        squares = all_squares()
        assert len(squares) == 64
        assert squares[0] == A1
        assert squares[-1] == H8


class TestPiece:
    def test_identity_equality(self) -> None:
        first = Piece(Color.WHITE, PieceType.PAWN, E2)
        second = Piece(Color.WHITE, PieceType.PAWN, E2)
        assert first == first
        assert first != second

    def test_color_and_type_are_read_only(self) -> None:
        piece = Piece(Color.BLACK, PieceType.QUEEN, E8)
        with pytest.raises(AttributeError):
            piece.color = Color.WHITE  # type: ignore[misc]

    def test_from_char(self) -> None:
        piece = Piece.from_char("n", E7)
        assert piece.is_a(Color.BLACK, PieceType.KNIGHT)
        assert piece.square == E7
        assert str(piece) == "n"
        assert piece.symbol == "♞"

    def test_from_char_rejects(self) -> None:
        with pytest.raises(InvalidArgument):
            Piece.from_char("x", E7)


class TestMove:
    def test_deltas(self) -> None:
        move = Move(E2, E4)
        assert move.row_delta == 2
        assert move.col_delta == 0

    def test_str(self) -> None:
        assert str(Move(E2, E4)) == "e2e4"
        assert str(Move(E7, E8, PieceType.KNIGHT)) == "e7e8n"

    def test_str_shows_any_requested_promotion(self) -> None:
        assert str(Move(E7, E8, PieceType.KING)) == "e7e8k"
        assert str(Move(E7, E8, PieceType.PAWN)) == "e7e8p"

    def test_value_equality(self) -> None:
        assert Move(E2, E4) == Move(parse_square("e2"), parse_square("e4"))


class TestEnums:
    def test_color_helpers(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.back_rank == 7
        assert Color.BLACK.pawn_direction == -1
        assert str(Color.WHITE) == "white"

    def test_castling_side_of(self) -> None:
        assert CastlingSide.of(True) is CastlingSide.KINGSIDE
        assert CastlingSide.of(False) is CastlingSide.QUEENSIDE


class TestPositionState:
    def test_halfmove_clock(self) -> None:
        state = PositionState()
        rook = Piece(Color.WHITE, PieceType.ROOK, H1)
        state.update_halfmove_clock(rook, was_capture=False)
        state.update_halfmove_clock(rook, was_capture=False)
        assert state.halfmove_clock == 2
        state.update_halfmove_clock(rook, was_capture=True)
        assert state.halfmove_clock == 0
        state.update_halfmove_clock(rook, was_capture=False)
        state.update_halfmove_clock(Piece(Color.WHITE, PieceType.PAWN, E4), False)
        assert state.halfmove_clock == 0

    def test_fullmove_number_after_black(self) -> None:
        state = PositionState()
        state.update_fullmove_number(Color.WHITE)
        assert state.fullmove_number == 1
        state.update_fullmove_number(Color.BLACK)
        assert state.fullmove_number == 2

    def test_toggle_and_reset(self) -> None:
        state = PositionState(Color.WHITE, 7, 12)
        state.toggle_active_color()
        assert state.active_color == Color.BLACK
        copy = state.copy()
        state.reset()
        assert state == PositionState()
        assert copy == PositionState(Color.BLACK, 7, 12)
