"""Castling rights and the compound king + rook move."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessrules.core.enums import CastlingSide, Color, PieceType
from chessrules.core.legality import is_square_under_attack
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import Square
from chessrules.errors import InvariantViolation

if TYPE_CHECKING:
    from chessrules.core.board import Board

_LOGGER = logging.getLogger(__name__)

KING_HOME_COL = 4
ROOK_HOME_COL: dict[CastlingSide, int] = {
    CastlingSide.KINGSIDE: 7,
    CastlingSide.QUEENSIDE: 0,
}
KING_TARGET_COL: dict[CastlingSide, int] = {
    CastlingSide.KINGSIDE: 6,
    CastlingSide.QUEENSIDE: 2,
}
ROOK_TARGET_COL: dict[CastlingSide, int] = {
    CastlingSide.KINGSIDE: 5,
    CastlingSide.QUEENSIDE: 3,
}
# Squares between king and rook; all must be empty.
_BETWEEN_COLS: dict[CastlingSide, tuple[int, ...]] = {
    CastlingSide.KINGSIDE: (5, 6),
    CastlingSide.QUEENSIDE: (1, 2, 3),
}
# Squares the king stands on or crosses; none may be attacked.
# The queenside b-file square only has to be empty.
_KING_PATH_COLS: dict[CastlingSide, tuple[int, ...]] = {
    CastlingSide.KINGSIDE: (4, 5, 6),
    CastlingSide.QUEENSIDE: (4, 3, 2),
}
_ROOK_CORNERS: dict[Square, tuple[Color, CastlingSide]] = {
    Square(0, 0): (Color.WHITE, CastlingSide.QUEENSIDE),
    Square(0, 7): (Color.WHITE, CastlingSide.KINGSIDE),
    Square(7, 0): (Color.BLACK, CastlingSide.QUEENSIDE),
    Square(7, 7): (Color.BLACK, CastlingSide.KINGSIDE),
}


@dataclass(slots=True)
class CastlingRights:
    """Four independent castling flags.

    Rights only ever go from ``True`` to ``False`` during a game.
    """

    white_kingside: bool = True
    white_queenside: bool = True
    black_kingside: bool = True
    black_queenside: bool = True

    @classmethod
    def none(cls) -> CastlingRights:
        return cls(False, False, False, False)

    @staticmethod
    def _field(color: Color, side: CastlingSide) -> str:
        return f"{color.name.lower()}_{side.value}"

    def has_right(self, color: Color, side: CastlingSide) -> bool:
        return getattr(self, self._field(color, side))

    def clear(self, color: Color, side: CastlingSide | None = None) -> None:
        """Drop one side's right, or both when *side* is ``None``."""
        sides = (side,) if side is not None else tuple(CastlingSide)
        for s in sides:
            name = self._field(color, s)
            if getattr(self, name):
                _LOGGER.debug("Castling right cleared: %s", name)
                setattr(self, name, False)

    # ── Legality ─────────────────────────────────────────────────────────

    def can_castle(self, board: Board, color: Color, kingside: bool) -> bool:
        """Whether *color* may castle on the given side right now.

        Requires the right, king and rook on their home squares, empty squares
        between them, and no attack on the squares the king passes through
        (its start and end square included).
        """
        side = CastlingSide.of(kingside)
        if not self.has_right(color, side):
            return False

        king = board.king(color)
        row = color.back_rank
        if king.square != Square(row, KING_HOME_COL):
            return False
        rook = board[Square(row, ROOK_HOME_COL[side])]
        if rook is None or not rook.is_a(color, PieceType.ROOK):
            return False

        for col in _BETWEEN_COLS[side]:
            if not board.is_empty(Square(row, col)):
                return False
        for col in _KING_PATH_COLS[side]:
            if is_square_under_attack(board, Square(row, col), color):
                return False
        return True

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply_castling_move(self, board: Board, color: Color, kingside: bool) -> None:
        """Relocate king and rook together, then drop both rights for *color*."""
        side = CastlingSide.of(kingside)
        row = color.back_rank
        king = board[Square(row, KING_HOME_COL)]
        rook = board[Square(row, ROOK_HOME_COL[side])]
        if king is None or rook is None:
            raise InvariantViolation(
                f"Castling {side.value} for {color.name} without king and rook at home"
            )
        board.move_piece(king, Square(row, KING_TARGET_COL[side]))
        board.move_piece(rook, Square(row, ROOK_TARGET_COL[side]))
        self.clear(color)

    def update_castling_rights(self, piece: Piece, move: Move) -> None:
        """Drop rights after a king move, or a move from/onto a rook corner.

        A move onto a corner is a capture of the rook standing there.
        """
        if piece.piece_type == PieceType.KING:
            self.clear(piece.color)
        for sq in (move.from_sq, move.to_sq):
            corner = _ROOK_CORNERS.get(sq)
            if corner is not None:
                self.clear(*corner)

    # ── Utilities ────────────────────────────────────────────────────────

    def fen_field(self) -> str:
        field = ""
        if self.white_kingside:
            field += "K"
        if self.white_queenside:
            field += "Q"
        if self.black_kingside:
            field += "k"
        if self.black_queenside:
            field += "q"
        return field or "-"

    def reset(self) -> None:
        self.white_kingside = True
        self.white_queenside = True
        self.black_kingside = True
        self.black_queenside = True

    def copy(self) -> CastlingRights:
        return CastlingRights(
            self.white_kingside,
            self.white_queenside,
            self.black_kingside,
            self.black_queenside,
        )
