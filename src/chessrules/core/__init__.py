"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Move, parse_square

    board = Board.initial()
    pawn = board[parse_square("e2")]
    print(board.get_valid_moves(pawn))
    board.apply_move(Move(parse_square("e2"), parse_square("e4")))
    print(board.fen())
"""

from chessrules.core.board import Board
from chessrules.core.castling import CastlingRights
from chessrules.core.en_passant import EnPassantTracker
from chessrules.core.enums import CastlingSide, Color, GameResult, PieceType
from chessrules.core.legality import is_square_under_attack, would_leave_king_in_check
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    placement_field,
    position_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.state import PositionState
from chessrules.core.types import Square, is_valid_square, parse_square, square_name

__all__ = [
    # Enums
    "CastlingSide",
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "is_valid_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CastlingRights",
    "EnPassantTracker",
    "Move",
    "MoveGenerator",
    "Piece",
    "PositionState",
    "Rules",
    # Legality
    "is_square_under_attack",
    "would_leave_king_in_check",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "placement_field",
    "position_to_fen",
]
