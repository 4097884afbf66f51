"""Exceptions raised by the rules engine."""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base class for engine errors."""


class EmptySquareError(ChessRulesError, ValueError):
    """A move was applied from a square that holds no piece.

    This is a caller bug: legality has to be checked before applying.
    """


class IllegalMoveError(ChessRulesError, ValueError):
    """A requested move is not among the legal moves of the position."""
