"""Notation package: FEN parsing and serialization."""

from chessrules.core.notation.fen import (
    STARTING_FEN,
    board_from_fen,
    placement_field,
    position_to_fen,
)

__all__ = [
    "STARTING_FEN",
    "board_from_fen",
    "placement_field",
    "position_to_fen",
]
