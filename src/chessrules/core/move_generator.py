"""Pseudo-legal move generation, one routine per piece type."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import PieceType
from chessrules.core.legality import would_leave_king_in_check
from chessrules.core.offsets import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    ray,
    targets,
)
from chessrules.core.types import Square

if TYPE_CHECKING:
    from chessrules.core.board import Board
    from chessrules.core.piece import Piece

_SLIDER_DIRS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.BISHOP: BISHOP_DIRS,
    PieceType.ROOK: ROOK_DIRS,
    PieceType.QUEEN: QUEEN_DIRS,
}


class MoveGenerator:
    """Destination squares a piece may reach by its movement pattern.

    Results may still leave the mover's own king in check, except for plain
    king steps which are filtered here already. :meth:`Board.get_valid_moves`
    applies the full self-check filter.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    def pseudo_legal_moves(self, piece: Piece) -> list[Square]:
        moves: list[Square] = []
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(piece, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_knight(piece, moves)
        elif ptype == PieceType.KING:
            self._gen_king(piece, moves)
        else:
            self._gen_sliding(piece, _SLIDER_DIRS[ptype], moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, piece: Piece, moves: list[Square]) -> None:
        board = self._board
        sq = piece.square
        direction = piece.color.pawn_direction
        start_row = 1 if direction == 1 else 6

        one_step = sq.offset(direction, 0)
        if one_step is not None and board.is_empty(one_step):
            moves.append(one_step)
            if sq.row == start_row:
                two_step = Square(sq.row + 2 * direction, sq.col)
                if board.is_empty(two_step):
                    moves.append(two_step)

        ep_target = board.en_passant.target
        for d_col in (-1, 1):
            cap_sq = sq.offset(direction, d_col)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != piece.color:
                    moves.append(cap_sq)
            elif cap_sq == ep_target:
                victim = board[Square(sq.row, cap_sq.col)]
                if victim is not None and victim.is_a(
                    piece.color.opposite, PieceType.PAWN
                ):
                    moves.append(cap_sq)

    def _gen_knight(self, piece: Piece, moves: list[Square]) -> None:
        board = self._board
        for to_sq in targets(piece.square, KNIGHT_OFFSETS):
            target = board[to_sq]
            if target is None or target.color != piece.color:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        piece: Piece,
        dirs: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_row, d_col in dirs:
            for to_sq in ray(piece.square, d_row, d_col):
                target = board[to_sq]
                if target is None:
                    moves.append(to_sq)
                    continue
                if target.color != piece.color:
                    moves.append(to_sq)
                break

    def _gen_king(self, piece: Piece, moves: list[Square]) -> None:
        board = self._board
        for to_sq in targets(piece.square, KING_OFFSETS):
            target = board[to_sq]
            if target is not None and target.color == piece.color:
                continue
            if not would_leave_king_in_check(board, piece, to_sq):
                moves.append(to_sq)

        self._gen_castling(piece, moves)

    def _gen_castling(self, king: Piece, moves: list[Square]) -> None:
        board = self._board
        for kingside, d_col in ((True, 2), (False, -2)):
            if board.castling.can_castle(board, king.color, kingside):
                moves.append(Square(king.square.row, king.square.col + d_col))
