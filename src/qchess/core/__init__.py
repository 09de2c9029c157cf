"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from qchess.core import Position, MoveGenerator, position_from_fen, STARTING_FEN

    pos = position_from_fen(STARTING_FEN)
    for move in MoveGenerator(pos).generate_pseudo_legal_moves():
        delta = pos.make_move(move)
        pos.unmake_move(delta)
"""

from qchess.core.board import Board
from qchess.core.enums import CastlingRights, Color, MoveFlag, PieceType
from qchess.core.errors import ChessError, FenError, IllegalMoveError, MoveParseError
from qchess.core.move import Move
from qchess.core.move_generator import MoveGenerator, generate_moves
from qchess.core.notation import (
    STARTING_FEN,
    classify_move,
    move_from_uci,
    parse_move,
    position_from_fen,
    position_to_fen,
)
from qchess.core.piece import Piece
from qchess.core.position import Position, StateDelta
from qchess.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_from_index,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "MoveFlag",
    "PieceType",
    # Errors
    "ChessError",
    "FenError",
    "IllegalMoveError",
    "MoveParseError",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_from_index",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Position",
    "StateDelta",
    "generate_moves",
    # Notation
    "STARTING_FEN",
    "classify_move",
    "move_from_uci",
    "parse_move",
    "position_from_fen",
    "position_to_fen",
]
