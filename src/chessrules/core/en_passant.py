"""En passant target tracking."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square, square_name


@dataclass(slots=True)
class EnPassantTracker:
    """The square a pawn skipped on the previous ply, if any.

    The target lives for exactly one ply: it is cleared at the start of every
    move and only a pawn double advance sets it again.
    """

    target: Square | None = None

    def clear(self) -> None:
        self.target = None

    def update_target(self, piece: Piece, move: Move) -> None:
        if piece.piece_type == PieceType.PAWN and abs(move.row_delta) == 2:
            self.target = Square((move.from_sq.row + move.to_sq.row) // 2, move.from_sq.col)
        else:
            self.target = None

    def is_capture(self, piece: Piece, move: Move) -> bool:
        """Whether *move* by *piece* is an en passant capture of the target."""
        return (
            self.target is not None
            and piece.piece_type == PieceType.PAWN
            and move.to_sq == self.target
            and move.col_delta != 0
        )

    @staticmethod
    def capture_square(move: Move) -> Square:
        """Square of the pawn taken by an en passant *move*."""
        return Square(move.from_sq.row, move.to_sq.col)

    def fen_field(self) -> str:
        return square_name(self.target) if self.target is not None else "-"

    def copy(self) -> EnPassantTracker:
        return EnPassantTracker(self.target)
