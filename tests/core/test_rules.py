"""Tests for Rules: checkmate, stalemate, draw detection."""

from chessrules.core.enums import GameResult
from chessrules.core.notation import STARTING_FEN, board_from_fen
from chessrules.core.rules import Rules

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(board_from_fen(STARTING_FEN))

    def test_fools_mate_in_check(self) -> None:
        # After 1.f3 e5 2.g4 Qh4#, white is in check
        assert Rules.is_in_check(board_from_fen(FOOLS_MATE))


class TestCheckmate:
    def test_fools_mate(self) -> None:
        board = board_from_fen(FOOLS_MATE)
        assert Rules.is_checkmate(board)
        assert Rules.game_result(board) == GameResult.BLACK_WINS
        assert board.result == GameResult.BLACK_WINS

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        board = board_from_fen("R2k4/8/3K4/8/8/8/8/8 b - - 0 1")
        assert Rules.is_checkmate(board)
        assert Rules.game_result(board) == GameResult.WHITE_WINS

    def test_not_checkmate_when_can_escape(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
        assert Rules.is_in_check(board)
        assert not Rules.is_checkmate(board)

    def test_capture_of_checker_is_an_escape(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/3q4/4K3 w - - 0 1")
        assert not Rules.is_checkmate(board)
        assert Rules.game_result(board) == GameResult.IN_PROGRESS


class TestStalemate:
    def test_king_trapped(self) -> None:
        # Black king on h8, white K on f6, white Q on g6
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8 b - - 0 1")
        assert Rules.is_stalemate(board)
        assert not Rules.is_checkmate(board)
        assert Rules.game_result(board) == GameResult.DRAW

    def test_not_stalemate_when_has_moves(self) -> None:
        board = board_from_fen("7k/8/5K2/8/8/8/8/8 b - - 0 1")
        assert not Rules.is_stalemate(board)

    def test_only_side_to_move_is_judged(self) -> None:
        # Same trap, but White to move: nothing is stalemated
        board = board_from_fen("7k/8/5KQ1/8/8/8/8/8 w - - 0 1")
        assert not Rules.is_stalemate(board)
        assert Rules.game_result(board) == GameResult.IN_PROGRESS


class TestInsufficientMaterial:
    def test_k_vs_k(self) -> None:
        board = board_from_fen("8/8/4k3/8/8/4K3/8/8 w - - 0 1")
        assert Rules.is_insufficient_material(board)
        assert Rules.game_result(board) == GameResult.DRAW

    def test_k_bishop_vs_k(self) -> None:
        board = board_from_fen("8/8/4k3/8/8/4K3/3B4/8 w - - 0 1")
        assert Rules.is_insufficient_material(board)

    def test_k_knight_vs_k(self) -> None:
        board = board_from_fen("8/8/4k3/8/8/4K3/3N4/8 w - - 0 1")
        assert Rules.is_insufficient_material(board)

    def test_same_colour_bishops(self) -> None:
        board = board_from_fen("8/8/4k3/2b5/8/4K3/3B4/8 w - - 0 1")
        assert Rules.is_insufficient_material(board)

    def test_opposite_colour_bishops_sufficient(self) -> None:
        board = board_from_fen("8/8/4k3/8/2b5/4K3/3B4/8 w - - 0 1")
        assert not Rules.is_insufficient_material(board)

    def test_k_rook_vs_k_sufficient(self) -> None:
        board = board_from_fen("8/8/4k3/8/8/4K3/3R4/8 w - - 0 1")
        assert not Rules.is_insufficient_material(board)

    def test_kp_vs_k_sufficient(self) -> None:
        board = board_from_fen("8/8/4k3/8/4P3/4K3/8/8 w - - 0 1")
        assert not Rules.is_insufficient_material(board)


class TestMoveCounterDraws:
    def test_not_triggered_at_start(self) -> None:
        board = board_from_fen("8/8/4k3/8/8/4K3/8/8 w - - 0 1")
        assert not Rules.is_fifty_move_rule(board)

    def test_fifty_move_is_claimable_not_automatic(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/4K2R/7r w - - 100 51")
        assert Rules.is_fifty_move_rule(board)
        assert not Rules.is_automatic_draw(board)
        assert Rules.game_result(board) == GameResult.IN_PROGRESS

    def test_seventy_five_move_is_automatic(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/4K2R/7r w - - 150 76")
        assert Rules.is_seventy_five_move_rule(board)
        assert Rules.is_automatic_draw(board)
        assert Rules.game_result(board) == GameResult.DRAW

    def test_reached_by_play(self, play) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/4K2R/7r w - - 149 76")
        play(board, "h2h3")
        assert board.state.halfmove_clock == 150
        assert board.result == GameResult.DRAW


class TestGameResult:
    def test_in_progress_at_start(self) -> None:
        assert Rules.game_result(board_from_fen(STARTING_FEN)) == GameResult.IN_PROGRESS
