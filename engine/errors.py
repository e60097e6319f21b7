from __future__ import annotations


class CheckersError(Exception):
    """Base class for rule and input errors raised by the engine."""


class OutOfBoundsError(CheckersError, ValueError):
    """A position has a coordinate outside the board."""


class IllegalMoveError(CheckersError, ValueError):
    """A move matches neither legal list, or skips a mandatory jump."""
