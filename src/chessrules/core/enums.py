"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def back_rank(self) -> int:
        """Row index of this side's home rank."""
        return 0 if self == Color.WHITE else 7

    @property
    def pawn_direction(self) -> int:
        """Row delta of a single pawn advance."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingSide(Enum):
    KINGSIDE = "kingside"
    QUEENSIDE = "queenside"

    @classmethod
    def of(cls, kingside: bool) -> CastlingSide:
        return cls.KINGSIDE if kingside else cls.QUEENSIDE


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3
