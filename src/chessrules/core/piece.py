"""Piece: fixed identity plus the square it currently stands on."""

from __future__ import annotations

from chessrules.core.enums import Color, PieceType
from chessrules.core.types import Square
from chessrules.errors import InvalidArgument

# FEN character ↔ (Color, PieceType)
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}

FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


class Piece:
    """A chess piece owned by exactly one board cell.

    ``color`` and ``piece_type`` never change. ``square`` is rewritten by
    :class:`~chessrules.core.board.Board` only, together with the grid cell.
    Equality is identity: two white pawns are different pieces.
    """

    __slots__ = ("_color", "_piece_type", "square")

    def __init__(self, color: Color, piece_type: PieceType, square: Square) -> None:
        self._color = color
        self._piece_type = piece_type
        self.square = square

    @property
    def color(self) -> Color:
        return self._color

    @property
    def piece_type(self) -> PieceType:
        return self._piece_type

    def is_a(self, color: Color, piece_type: PieceType) -> bool:
        return self._color == color and self._piece_type == piece_type

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return FEN_CHARS[(self._color, self._piece_type)]

    def __repr__(self) -> str:
        return f"Piece({self._color.name}, {self._piece_type.name}, {self.square})"

    @classmethod
    def from_char(cls, char: str, square: Square) -> Piece:
        """Create piece from FEN character, e.g. 'N' -> white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise InvalidArgument(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, square)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self._color, self._piece_type)]
