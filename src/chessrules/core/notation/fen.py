"""FEN parsing and serialization."""

from __future__ import annotations

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.castling import CastlingRights
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import FEN_CHARS, Piece
from chessrules.core.types import Square, parse_square
from chessrules.errors import InvalidArgument, InvariantViolation

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_CASTLING_FLAGS: dict[str, str] = {
    "K": "white_kingside",
    "Q": "white_queenside",
    "k": "black_kingside",
    "q": "black_queenside",
}


def placement_field(board: Board) -> str:
    """Piece placement, rank 8 first, runs of empty squares as digits."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Square(rank, file)]
            if piece is None:
                empty += 1
                continue
            char = FEN_CHARS.get((piece.color, piece.piece_type))
            if char is None:
                raise InvariantViolation(
                    f"Cannot encode piece type {piece.piece_type!r} on {piece.square}"
                )
            if empty:
                row += str(empty)
                empty = 0
            row += char
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def position_to_fen(board: Board) -> str:
    """Serialise a :class:`Board` to FEN."""
    side_str = "w" if board.state.active_color == Color.WHITE else "b"
    return (
        f"{placement_field(board)} {side_str} {board.castling.fen_field()} "
        f"{board.en_passant.fen_field()} {board.state.halfmove_clock} "
        f"{board.state.fullmove_number}"
    )


def board_from_fen(fen: str, config: RulesConfig | None = None) -> Board:
    """Parse a FEN string into a :class:`Board`."""
    parts = fen.split()
    if not (4 <= len(parts) <= 6):
        raise InvalidArgument(f"Invalid FEN (need 4-6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part = parts[:4]
    board = Board(config)

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise InvalidArgument(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isascii() and ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise InvalidArgument(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise InvalidArgument(f"Invalid FEN rank width: {fen!r}")
                board.place(Piece.from_char(ch, Square(rank, file)))
                file += 1
            if file > 8:
                raise InvalidArgument(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise InvalidArgument(f"Invalid FEN rank width: {fen!r}")

    for color in Color:
        kings = [p for p in board.pieces(color) if p.piece_type == PieceType.KING]
        if len(kings) != 1:
            raise InvalidArgument(
                f"Invalid FEN: expected one {color.name} king, found {len(kings)}"
            )

    # 2. Side to move
    if side_part == "w":
        board.state.active_color = Color.WHITE
    elif side_part == "b":
        board.state.active_color = Color.BLACK
    else:
        raise InvalidArgument(f"Invalid FEN side-to-move field: {side_part!r}")

    # 3. Castling
    board.castling = CastlingRights.none()
    if castling_part != "-":
        seen: set[str] = set()
        for ch in castling_part:
            flag = _CASTLING_FLAGS.get(ch)
            if flag is None or ch in seen:
                raise InvalidArgument(f"Invalid FEN castling field: {castling_part!r}")
            seen.add(ch)
            setattr(board.castling, flag, True)

    # 4. En passant
    if ep_part != "-":
        ep = parse_square(ep_part)
        expected_ep_rank = 5 if board.state.active_color == Color.WHITE else 2
        if ep.row != expected_ep_rank:
            raise InvalidArgument(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        board.en_passant.target = ep

    # 5-6. Clocks (optional)
    board.state.halfmove_clock = _parse_counter(parts, 4, default=0, minimum=0)
    board.state.fullmove_number = _parse_counter(parts, 5, default=1, minimum=1)

    if board.config.evaluate_result:
        board.refresh_result()
    return board


def _parse_counter(parts: list[str], index: int, default: int, minimum: int) -> int:
    if len(parts) <= index:
        return default
    try:
        value = int(parts[index])
    except ValueError:
        raise InvalidArgument(f"Invalid FEN counter: {parts[index]!r}") from None
    if value < minimum:
        raise InvalidArgument(f"Invalid FEN counter: {parts[index]!r}")
    return value
