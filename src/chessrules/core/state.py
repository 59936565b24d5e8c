"""Position counters: side to move, halfmove clock, fullmove number."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece


@dataclass(slots=True)
class PositionState:
    active_color: Color = Color.WHITE
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def toggle_active_color(self) -> None:
        self.active_color = self.active_color.opposite

    def update_halfmove_clock(self, piece: Piece, was_capture: bool) -> None:
        """Reset on a pawn move or capture, otherwise count up."""
        if piece.piece_type == PieceType.PAWN or was_capture:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

    def update_fullmove_number(self, mover: Color) -> None:
        """Advance once Black has completed a move."""
        if mover == Color.BLACK:
            self.fullmove_number += 1

    def reset(self) -> None:
        self.active_color = Color.WHITE
        self.halfmove_clock = 0
        self.fullmove_number = 1

    def copy(self) -> PositionState:
        return PositionState(
            self.active_color, self.halfmove_clock, self.fullmove_number
        )
