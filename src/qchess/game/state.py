"""Game session — one position plus the undo history of applied moves."""

from __future__ import annotations

import logging

from qchess.core.move import Move
from qchess.core.move_generator import MoveGenerator
from qchess.core.notation import (
    STARTING_FEN,
    move_from_uci,
    position_from_fen,
    position_to_fen,
)
from qchess.core.position import Position, StateDelta

_LOGGER = logging.getLogger(__name__)


class Game:
    """Owns a :class:`Position` and the LIFO stack of its :class:`StateDelta`.

    This is a pure data/logic class with no threading and no I/O.  A single caller
    is expected to drive it.
    """

    __slots__ = ("position", "start_fen", "_history")

    def __init__(self, position: Position | None = None) -> None:
        self.position = position if position is not None else Position()
        self.start_fen = position_to_fen(self.position)
        self._history: list[StateDelta] = []

    @classmethod
    def from_fen(cls, fen: str) -> Game:
        """Build a session from FEN text; raises :class:`FenError`."""
        return cls(position_from_fen(fen))

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Initialise (or reset) the game."""
        position = position_from_fen(STARTING_FEN if fen is None else fen)
        self.position = position
        self.start_fen = position_to_fen(position)
        self._history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> StateDelta:
        """Apply *move* and remember how to undo it.

        Legality is the caller's concern; the position only rejects moves it
        cannot apply consistently.
        """
        delta = self.position.make_move(move)
        self._history.append(delta)
        _LOGGER.debug("Applied %s (ply %d)", move, len(self._history))
        return delta

    def push_uci(self, text: str) -> StateDelta:
        """Parse long-algebraic *text* against the current position and apply it."""
        return self.apply_move(move_from_uci(self.position, text))

    def undo_move(self) -> StateDelta | None:
        """Undo the last move. Returns its delta, or None if history is empty."""
        if not self._history:
            return None
        delta = self._history.pop()
        self.position.unmake_move(delta)
        _LOGGER.debug("Undid %s", delta.move)
        return delta

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def fen(self) -> str:
        return position_to_fen(self.position)

    @property
    def history(self) -> tuple[StateDelta, ...]:
        return tuple(self._history)

    @property
    def moves(self) -> list[Move]:
        """Moves applied since setup, oldest first."""
        return [delta.move for delta in self._history]

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self._history)

    def pseudo_legal_moves(self) -> list[Move]:
        """Pseudo-legal moves in the current position."""
        return MoveGenerator(self.position).generate_pseudo_legal_moves()

    def __repr__(self) -> str:
        return f"Game({self.fen!r}, ply={self.ply_count})"
