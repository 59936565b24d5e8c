"""Attack detection and the simulate-then-revert self-check probe."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.move import Move
from chessrules.core.offsets import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ROOK_DIRS,
    ray,
    targets,
)
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece

_DIAGONAL_ATTACKERS = (PieceType.BISHOP, PieceType.QUEEN)
_STRAIGHT_ATTACKERS = (PieceType.ROOK, PieceType.QUEEN)


def is_square_under_attack(board: Board, sq: Square, defending_color: Color) -> bool:
    """Is *sq* attacked by any piece of the side opposing *defending_color*?"""
    attacker = defending_color.opposite

    # A pawn attacks diagonally forward, so look one step backwards from sq.
    back = -attacker.pawn_direction
    for d_col in (-1, 1):
        from_sq = sq.offset(back, d_col)
        if from_sq is not None:
            piece = board[from_sq]
            if piece is not None and piece.is_a(attacker, PieceType.PAWN):
                return True

    for from_sq in targets(sq, KNIGHT_OFFSETS):
        piece = board[from_sq]
        if piece is not None and piece.is_a(attacker, PieceType.KNIGHT):
            return True

    for dirs, sliders in (
        (BISHOP_DIRS, _DIAGONAL_ATTACKERS),
        (ROOK_DIRS, _STRAIGHT_ATTACKERS),
    ):
        for d_row, d_col in dirs:
            for from_sq in ray(sq, d_row, d_col):
                piece = board[from_sq]
                if piece is None:
                    continue
                if piece.color == attacker and piece.piece_type in sliders:
                    return True
                break

    for from_sq in targets(sq, KING_OFFSETS):
        piece = board[from_sq]
        if piece is not None and piece.is_a(attacker, PieceType.KING):
            return True

    return False


@contextmanager
def simulated_move(board: Board, piece: Piece, target: Square) -> Iterator[None]:
    """Temporarily play *piece* to *target*; restore the board on exit.

    Only the touched cells are snapshotted: the origin, the target and, for an
    en passant capture, the square of the captured pawn. The exact captured
    piece object is put back, on every exit path.
    """
    origin = piece.square
    move = Move(origin, target)
    capture_sq = target
    if board.en_passant.is_capture(piece, move) and board.is_empty(target):
        capture_sq = board.en_passant.capture_square(move)
    captured = board[capture_sq]

    try:
        if capture_sq != target and captured is not None:
            board.remove(capture_sq)
        board.move_piece(piece, target)
        yield
    finally:
        if piece.square != origin:
            board.move_piece(piece, origin)
        if captured is not None and board[captured.square] is not captured:
            board.place(captured)


def would_leave_king_in_check(board: Board, piece: Piece, target: Square) -> bool:
    """Would moving *piece* to *target* leave its own king attacked?"""
    with simulated_move(board, piece, target):
        king = board.king(piece.color)
        return is_square_under_attack(board, king.square, piece.color)
