"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.types import Square, square_name

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}


@dataclass(frozen=True, slots=True)
class Move:
    """A from/to square pair.

    Castling, en passant and promotion are inferred from the board when the
    move is applied. ``promotion`` only selects the piece a pawn turns into.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    @property
    def row_delta(self) -> int:
        return self.to_sq.row - self.from_sq.row

    @property
    def col_delta(self) -> int:
        return self.to_sq.col - self.from_sq.col

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base
