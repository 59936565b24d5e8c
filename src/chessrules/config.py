"""Engine configuration."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.errors import InvalidArgument

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Behaviour switches for :class:`~chessrules.core.board.Board`.

    * ``validate_moves`` -- ``apply_move`` rejects moves that are out of turn
      or not in the piece's legal-move set.
    * ``evaluate_result`` -- ``apply_move`` re-evaluates checkmate, stalemate
      and automatic draws for the side to move after every move.
    * ``default_promotion`` -- piece a pawn becomes when the move does not
      name one.
    """

    validate_moves: bool = True
    evaluate_result: bool = True
    default_promotion: PieceType = PieceType.QUEEN

    def __post_init__(self) -> None:
        if self.default_promotion not in PROMOTION_TYPES:
            raise InvalidArgument(
                f"Invalid default promotion piece: {self.default_promotion!r}"
            )

    @classmethod
    def standard(cls) -> RulesConfig:
        return cls()

    @classmethod
    def permissive(cls) -> RulesConfig:
        """No validation and no result evaluation (bulk replays, perft)."""
        return cls(validate_moves=False, evaluate_result=False)

    def __repr__(self) -> str:
        return (
            f"RulesConfig(validate={self.validate_moves}, "
            f"evaluate={self.evaluate_result}, "
            f"promotion={self.default_promotion.name})"
        )
