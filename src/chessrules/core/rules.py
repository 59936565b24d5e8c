"""High-level chess rules: game result and draw detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, GameResult, PieceType

if TYPE_CHECKING:
    from chessrules.core.board import Board


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Checkmate and stalemate are judged for the side to move. Draws without a
    claim: insufficient material, 75-move rule. The 50-move rule is claimable
    only. Repetition needs game history, which the board does not keep.
    """

    @staticmethod
    def is_in_check(board: Board) -> bool:
        return board.is_in_check(board.state.active_color)

    @staticmethod
    def is_checkmate(board: Board) -> bool:
        return board.is_checkmate(board.state.active_color)

    @staticmethod
    def is_stalemate(board: Board) -> bool:
        return board.is_stalemate(board.state.active_color)

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-color bishops)."""
        pieces = board.pieces(Color.WHITE) + board.pieces(Color.BLACK)
        total = len(pieces)

        # K vs K
        if total == 2:
            return True

        # K+minor vs K
        if total == 3:
            return any(
                p.piece_type in (PieceType.KNIGHT, PieceType.BISHOP) for p in pieces
            )

        # K+B vs K+B with same-colour bishops
        if total == 4:
            bishops = [p for p in pieces if p.piece_type == PieceType.BISHOP]
            if len(bishops) == 2:
                first, second = (b.square for b in bishops)
                return (first.row + first.col) % 2 == (second.row + second.col) % 2

        return False

    @staticmethod
    def is_fifty_move_rule(board: Board) -> bool:
        return board.state.halfmove_clock >= 100  # 100 half-moves = 50 full moves

    @staticmethod
    def is_seventy_five_move_rule(board: Board) -> bool:
        return board.state.halfmove_clock >= 150  # 150 half-moves = 75 full moves

    @staticmethod
    def is_automatic_draw(board: Board) -> bool:
        """Whether the position is drawn without a player claim."""
        return Rules.is_insufficient_material(board) or Rules.is_seventy_five_move_rule(
            board
        )

    @staticmethod
    def game_result(board: Board) -> GameResult:
        """Determine the current game result."""
        side = board.state.active_color
        if not board.has_legal_moves(side):
            if board.is_in_check(side):
                return (
                    GameResult.BLACK_WINS
                    if side == Color.WHITE
                    else GameResult.WHITE_WINS
                )
            return GameResult.DRAW  # stalemate

        if Rules.is_automatic_draw(board):
            return GameResult.DRAW

        return GameResult.IN_PROGRESS
