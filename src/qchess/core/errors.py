"""Exception types raised by the core domain layer."""

from __future__ import annotations


class ChessError(Exception):
    """Base class for all qchess errors."""


class FenError(ChessError, ValueError):
    """Malformed FEN text; no position is constructed."""


class MoveParseError(ChessError, ValueError):
    """Malformed long-algebraic move text."""


class IllegalMoveError(ChessError, ValueError):
    """A move that cannot be applied to the current position.

    Raised by :meth:`Position.make_move` before anything is mutated.
    """
