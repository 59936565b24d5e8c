"""Board - the 8x8 grid plus the game state that travels with it."""

from __future__ import annotations

import logging

from chessrules.config import PROMOTION_TYPES, RulesConfig
from chessrules.core.castling import CastlingRights
from chessrules.core.en_passant import EnPassantTracker
from chessrules.core.enums import Color, GameResult, PieceType
from chessrules.core.legality import is_square_under_attack, would_leave_king_in_check
from chessrules.core.move import Move
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.state import PositionState
from chessrules.core.types import Square
from chessrules.errors import IllegalMoveError, InvalidArgument, InvariantViolation

_LOGGER = logging.getLogger(__name__)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable chess position: piece grid, counters, castling and en passant.

    The grid is the authority on placement. Every write to it goes through
    :meth:`place`, :meth:`remove` or :meth:`move_piece`, which keep each
    piece's own ``square`` in step with the cell holding it.
    """

    __slots__ = ("_grid", "config", "state", "castling", "en_passant", "result")

    def __init__(self, config: RulesConfig | None = None) -> None:
        self.config = config if config is not None else RulesConfig()
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        self.state = PositionState()
        self.castling = CastlingRights()
        self.en_passant = EnPassantTracker()
        self.result = GameResult.IN_PROGRESS

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, config: RulesConfig | None = None) -> Board:
        """Standard starting position."""
        b = cls(config)
        b.initialize()
        return b

    def initialize(self) -> None:
        """Reset to the standard 32-piece starting array, White to move."""
        self._grid = [[None] * 8 for _ in range(8)]
        for col, ptype in enumerate(_BACK_RANK):
            self.place(Piece(Color.WHITE, ptype, Square(0, col)))
            self.place(Piece(Color.WHITE, PieceType.PAWN, Square(1, col)))
            self.place(Piece(Color.BLACK, PieceType.PAWN, Square(6, col)))
            self.place(Piece(Color.BLACK, ptype, Square(7, col)))
        self.state.reset()
        self.castling.reset()
        self.en_passant.clear()
        self.result = GameResult.IN_PROGRESS

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self.piece_at(sq)

    def piece_at(self, sq: Square) -> Piece | None:
        return self._grid[sq.row][sq.col]

    def is_empty(self, sq: Square) -> bool:
        return self._grid[sq.row][sq.col] is None

    def contains(self, piece: Piece) -> bool:
        """Whether *piece* is the occupant of the cell it claims."""
        return self[piece.square] is piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Piece]:
        """All of *color*'s pieces, a1..h1 first, a8..h8 last."""
        return [
            piece
            for row in self._grid
            for piece in row
            if piece is not None and piece.color == color
        ]

    def king(self, color: Color) -> Piece:
        """Return the single king of *color*."""
        for row in self._grid:
            for piece in row:
                if piece is not None and piece.is_a(color, PieceType.KING):
                    return piece
        raise InvariantViolation(f"No {color.name} king on board")

    # -- Placement primitives -----------------------------------------------

    def place(self, piece: Piece) -> None:
        """Put *piece* on the (empty) cell named by its own ``square``."""
        occupant = self[piece.square]
        if occupant is not None and occupant is not piece:
            raise InvalidArgument(f"{piece.square} is already occupied by {occupant!r}")
        self._grid[piece.square.row][piece.square.col] = piece

    def remove(self, sq: Square) -> Piece | None:
        """Empty *sq* and return whatever stood there."""
        piece = self[sq]
        self._grid[sq.row][sq.col] = None
        return piece

    def move_piece(self, piece: Piece, target: Square) -> Piece | None:
        """Relocate *piece* to *target* without any legality checking.

        Whatever stood on *target* is dropped from the board (that is how a
        capture happens) and returned.
        """
        if not self.contains(piece):
            raise InvalidArgument(f"{piece!r} is not on this board")
        origin = piece.square
        if target == origin:
            return None
        captured = self[target]
        self._grid[origin.row][origin.col] = None
        self._grid[target.row][target.col] = piece
        piece.square = target
        return captured

    # -- Moves --------------------------------------------------------------

    def get_valid_moves(self, piece: Piece) -> list[Square]:
        """Legal destinations for *piece*: pseudo-legal minus self-check."""
        if not self.contains(piece):
            raise InvalidArgument(f"{piece!r} is not on this board")
        legal: list[Square] = []
        for to_sq in MoveGenerator(self).pseudo_legal_moves(piece):
            if to_sq in legal:
                continue
            if not would_leave_king_in_check(self, piece, to_sq):
                legal.append(to_sq)
        return legal

    def apply_move(self, move: Move) -> None:
        """Play *move* and run all post-move bookkeeping.

        An empty origin square is a no-op.
        """
        piece = self[move.from_sq]
        if piece is None:
            _LOGGER.debug("No piece on %s, ignoring %s", move.from_sq, move)
            return
        if move.promotion is not None and move.promotion not in PROMOTION_TYPES:
            raise InvalidArgument(f"Invalid promotion piece: {move.promotion!r}")
        if self.config.validate_moves:
            self._validate(piece, move)

        mover = piece.color
        is_en_passant = self.en_passant.is_capture(piece, move)
        self.en_passant.clear()

        kingside = move.col_delta > 0
        if (
            piece.piece_type == PieceType.KING
            and abs(move.col_delta) == 2
            and self.castling.can_castle(self, mover, kingside)
        ):
            self.castling.apply_castling_move(self, mover, kingside)
            was_capture = False
        else:
            was_capture = self._relocate(piece, move, is_en_passant)

        self.castling.update_castling_rights(piece, move)
        self.en_passant.update_target(piece, move)
        self.state.update_halfmove_clock(piece, was_capture)
        self.state.update_fullmove_number(mover)
        self.state.toggle_active_color()
        _LOGGER.debug("Applied %s for %s", move, mover)

        if self.config.evaluate_result:
            self.refresh_result()
            if self.result == GameResult.DRAW:
                _LOGGER.info("Game drawn after %s", move)
            elif self.result != GameResult.IN_PROGRESS:
                _LOGGER.info("%s is checkmated after %s", self.state.active_color, move)

    def _validate(self, piece: Piece, move: Move) -> None:
        if self.result != GameResult.IN_PROGRESS:
            raise IllegalMoveError(f"Game is over ({self.result.name}): {move}")
        if piece.color != self.state.active_color:
            to_move = self.state.active_color.name
            raise IllegalMoveError(
                f"Not {piece.color.name}'s turn ({to_move} to move): {move}"
            )
        if move.to_sq not in self.get_valid_moves(piece):
            raise IllegalMoveError(f"Illegal move: {move}")

    def _relocate(self, piece: Piece, move: Move, is_en_passant: bool) -> bool:
        """Plain (non-castling) move. Returns whether something was captured."""
        captured = None
        if is_en_passant:
            captured = self.remove(self.en_passant.capture_square(move))
        captured = self.move_piece(piece, move.to_sq) or captured

        if (
            piece.piece_type == PieceType.PAWN
            and move.to_sq.row == piece.color.opposite.back_rank
        ):
            ptype = move.promotion or self.config.default_promotion
            self.remove(move.to_sq)
            self.place(Piece(piece.color, ptype, move.to_sq))
        return captured is not None

    # -- Check / terminal detection -----------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        king = self.king(color)
        return is_square_under_attack(self, king.square, color)

    def has_legal_moves(self, color: Color) -> bool:
        return any(self.get_valid_moves(piece) for piece in self.pieces(color))

    def is_checkmate(self, color: Color) -> bool:
        return self.is_in_check(color) and not self.has_legal_moves(color)

    def is_stalemate(self, color: Color) -> bool:
        return not self.is_in_check(color) and not self.has_legal_moves(color)

    def refresh_result(self) -> GameResult:
        """Re-evaluate and store the result for the side to move."""
        self.result = Rules.game_result(self)
        return self.result

    # -- Serialisation / copying --------------------------------------------

    def fen(self) -> str:
        from chessrules.core.notation.fen import position_to_fen

        return position_to_fen(self)

    def copy(self) -> Board:
        """Independent deep copy (new piece objects, same config)."""
        b = Board(self.config)
        for row in self._grid:
            for piece in row:
                if piece is not None:
                    b.place(Piece(piece.color, piece.piece_type, piece.square))
        b.state = self.state.copy()
        b.castling = self.castling.copy()
        b.en_passant = self.en_passant.copy()
        b.result = self.result
        return b

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(7, -1, -1):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{row + 1} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
