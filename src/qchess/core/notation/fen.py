"""FEN parsing and serialization."""

from __future__ import annotations

from qchess.core.board import Board
from qchess.core.enums import CastlingRights, Color
from qchess.core.errors import FenError
from qchess.core.piece import Piece
from qchess.core.position import Position
from qchess.core.types import file_of, make_square, parse_square, rank_of, square_name

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Only structure is validated: king counts, pawn placement and
    reachability are not checked.
    """
    parts = fen.split()
    if len(parts) != 6:
        raise FenError(f"Invalid FEN (need 6 fields): {fen!r}")

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    board = _parse_placement(placement, fen)

    side = _SIDES.get(side_part)
    if side is None:
        raise FenError(f"Invalid FEN side-to-move field: {side_part!r}")

    castling = CastlingRights.from_fen(castling_part)

    ep_file: int | None = None
    if ep_part != "-":
        try:
            ep = parse_square(ep_part)
        except ValueError as exc:
            raise FenError(f"Invalid FEN en-passant square: {ep_part!r}") from exc
        expected_ep_rank = 5 if side == Color.WHITE else 2
        if rank_of(ep) != expected_ep_rank:
            raise FenError(
                f"Invalid FEN en-passant square for side-to-move: {ep_part!r}"
            )
        ep_file = file_of(ep)

    halfmove = _parse_counter(half_part, "halfmove clock")
    fullmove = _parse_counter(full_part, "fullmove number")

    return Position(board, side, castling, ep_file, halfmove, fullmove)


def _parse_placement(placement: str, fen: str) -> Board:
    ranks = placement.split("/")
    if len(ranks) != 8:
        raise FenError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isascii() and ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise FenError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise FenError(f"Invalid FEN rank width: {fen!r}")
                try:
                    board[make_square(file, rank)] = Piece.from_char(ch)
                except ValueError as exc:
                    raise FenError(f"Invalid FEN piece {ch!r}: {fen!r}") from exc
                file += 1
            if file > 8:
                raise FenError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise FenError(f"Invalid FEN rank width: {fen!r}")
    return board


def _parse_counter(text: str, what: str) -> int:
    if not text.isascii() or not text.isdigit():
        raise FenError(f"Invalid FEN {what}: {text!r}")
    return int(text)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to FEN."""
    # 1. Board
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = pos.board[make_square(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    board_str = "/".join(rows)

    side_str = "w" if pos.side_to_move == Color.WHITE else "b"
    castling_str = pos.castling.fen()
    ep_sq = pos.en_passant
    ep_str = square_name(ep_sq) if ep_sq is not None else "-"

    return f"{board_str} {side_str} {castling_str} {ep_str} {pos.halfmove_clock} {pos.fullmove_number}"
