"""chessrules: a chess rules engine with legal moves, check detection and FEN."""

from chessrules.core import (
    STARTING_FEN,
    Board,
    Color,
    GameResult,
    Move,
    Piece,
    PieceType,
    Square,
    board_from_fen,
    parse_square,
    position_to_fen,
)
from chessrules.config import RulesConfig
from chessrules.errors import (
    ChessError,
    IllegalMoveError,
    InvalidArgument,
    InvariantViolation,
)

__version__ = "0.1.0"

__all__ = [
    "STARTING_FEN",
    "Board",
    "ChessError",
    "Color",
    "GameResult",
    "IllegalMoveError",
    "InvalidArgument",
    "InvariantViolation",
    "Move",
    "Piece",
    "PieceType",
    "RulesConfig",
    "Square",
    "board_from_fen",
    "parse_square",
    "position_to_fen",
]
