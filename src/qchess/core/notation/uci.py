"""Long-algebraic move text at the protocol boundary.

Text such as ``e5d6`` cannot say whether a move is a double push, an en
passant capture or a castle.  :func:`classify_move` recovers that from the
position with a best-effort heuristic; it assumes the move is valid and is
not a legality check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from qchess.core.enums import MoveFlag, PieceType
from qchess.core.errors import MoveParseError
from qchess.core.move import Move
from qchess.core.types import file_of, rank_of, square_name

if TYPE_CHECKING:
    from qchess.core.position import Position


def parse_move(text: str) -> Move:
    """Parse ``e2e4`` / ``e7e8q`` into a NORMAL or PROMOTION move."""
    return Move.from_uci(text)


def classify_move(position: Position, move: Move) -> Move:
    """Re-flag *move* using the piece that stands on its origin square."""
    piece = position.board[move.from_sq]
    if piece is None:
        raise MoveParseError(f"No piece on {square_name(move.from_sq)}: {move}")

    flag = move.flag
    if flag == MoveFlag.PROMOTION:
        return move
    if piece.piece_type == PieceType.PAWN:
        if abs(rank_of(move.from_sq) - rank_of(move.to_sq)) == 2:
            flag = MoveFlag.DOUBLE_PAWN
        elif (
            file_of(move.from_sq) != file_of(move.to_sq)
            and position.board.is_empty(move.to_sq)
        ):
            flag = MoveFlag.EN_PASSANT
    elif piece.piece_type == PieceType.KING:
        if abs(file_of(move.from_sq) - file_of(move.to_sq)) > 1:
            flag = MoveFlag.CASTLE

    if flag == move.flag:
        return move
    return Move(move.from_sq, move.to_sq, flag)


def move_from_uci(position: Position, text: str) -> Move:
    """Parse *text* and classify it against *position*."""
    return classify_move(position, parse_move(text))
