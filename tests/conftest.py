"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.config import RulesConfig
from chessrules.core.board import Board
from chessrules.core.move import Move
from chessrules.core.types import parse_square

PlayFn = Callable[..., Board]


def _play(board: Board, *moves: str) -> Board:
    """Apply moves written as 'e2e4' in order."""
    for text in moves:
        board.apply_move(Move(parse_square(text[:2]), parse_square(text[2:4])))
    return board


@pytest.fixture
def board() -> Board:
    """Fresh standard starting position with the default configuration."""
    return Board.initial()


@pytest.fixture
def permissive() -> RulesConfig:
    return RulesConfig.permissive()


@pytest.fixture
def play() -> PlayFn:
    """Helper that applies a sequence of long-algebraic moves to a board."""
    return _play
