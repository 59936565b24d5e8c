"""Exception hierarchy for the rules engine."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for every error raised by the rules engine."""


class InvalidArgument(ChessError, ValueError):
    """A caller broke an operation's contract (bad square, foreign piece, ...)."""


class IllegalMoveError(InvalidArgument):
    """A move was submitted that the current position does not allow."""


class InvariantViolation(ChessError, RuntimeError):
    """The board reached a state a valid chess position can never be in.

    Programming-error condition: surface it, never catch and retry.
    """
