"""Direction and offset tables shared by move generation and attack detection."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.types import Square, is_valid_square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS


def targets(sq: Square, offsets: tuple[tuple[int, int], ...]) -> Iterator[Square]:
    """On-board squares reached from *sq* by each offset, in table order."""
    for d_row, d_col in offsets:
        to_sq = sq.offset(d_row, d_col)
        if to_sq is not None:
            yield to_sq


def ray(sq: Square, d_row: int, d_col: int) -> Iterator[Square]:
    """Squares from *sq* (exclusive) towards the board edge."""
    row = sq.row + d_row
    col = sq.col + d_col
    while is_valid_square(row, col):
        yield Square(row, col)
        row += d_row
        col += d_col
