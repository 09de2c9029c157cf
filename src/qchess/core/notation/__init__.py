"""Notation package: FEN and long-algebraic move text."""

from qchess.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen
from qchess.core.notation.uci import classify_move, move_from_uci, parse_move

__all__ = [
    "STARTING_FEN",
    "classify_move",
    "move_from_uci",
    "parse_move",
    "position_from_fen",
    "position_to_fen",
]
