"""Pseudo-legal move generation.

Moves are generated from piece movement and occupancy alone; nothing checks
whether the mover's own king is left attacked.  Castling moves are never
generated and pawns promote only to a queen or a knight.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from qchess.core.enums import Color, MoveFlag, PieceType
from qchess.core.move import Move
from qchess.core.piece import Piece
from qchess.core.types import Square, down, left, offset, rank_of, relative_rank, right, up

if TYPE_CHECKING:
    from qchess.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# TODO: generate rook and bishop under-promotions as well.
GENERATED_PROMOTIONS: tuple[PieceType, ...] = (PieceType.QUEEN, PieceType.KNIGHT)

_PAWN_CAPTURE_SIDES: tuple[Callable[[Square, Color], Square | None], ...] = (left, right)


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in range(64):
        moves = (offset(sq, df, dr) for df, dr in offsets)
        targets.append(tuple(to_sq for to_sq in moves if to_sq is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in range(64):
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            to_sq = offset(sq, df, dr)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = offset(to_sq, df, dr)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Generates pseudo-legal moves for a given :class:`Position`.

    The position is only read, never mutated.  No ordering of the returned
    moves is promised.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_pseudo_legal_moves(self) -> list[Move]:
        """All pseudo-legal moves (may leave own king in check)."""
        moves: list[Move] = []
        color = self._pos.side_to_move

        for sq, piece in self._board.occupied(color):
            ptype = piece.piece_type
            if ptype == PieceType.PAWN:
                self._gen_pawn(sq, color, moves)
            elif ptype == PieceType.KNIGHT:
                self._gen_step(sq, color, _KNIGHT_TARGETS[sq], moves)
            elif ptype == PieceType.BISHOP:
                self._gen_sliding(sq, color, _BISHOP_RAYS[sq], moves)
            elif ptype == PieceType.ROOK:
                self._gen_sliding(sq, color, _ROOK_RAYS[sq], moves)
            elif ptype == PieceType.QUEEN:
                self._gen_sliding(sq, color, _QUEEN_RAYS[sq], moves)
            else:
                self._gen_step(sq, color, _KING_TARGETS[sq], moves)
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        one_step = up(sq, color)
        if one_step is None:
            return
        promotes = relative_rank(rank_of(one_step), color) == 7

        if board.is_empty(one_step):
            self._add_pawn_move(sq, one_step, promotes, moves)
            if relative_rank(rank_of(sq), color) == 1:
                two_step = up(one_step, color)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(Move(sq, two_step, MoveFlag.DOUBLE_PAWN))

        ep_sq = self._pos.en_passant
        for side in _PAWN_CAPTURE_SIDES:
            cap_sq = side(one_step, color)
            if cap_sq is None:
                continue
            if board.is_enemy(cap_sq, color):
                self._add_pawn_move(sq, cap_sq, promotes, moves)
            elif cap_sq == ep_sq and board.is_empty(cap_sq):
                victim_sq = down(cap_sq, color)
                if board[victim_sq] == Piece(color.opposite, PieceType.PAWN):
                    moves.append(Move(sq, cap_sq, MoveFlag.EN_PASSANT))

    @staticmethod
    def _add_pawn_move(
        sq: Square, to_sq: Square, promotes: bool, moves: list[Move]
    ) -> None:
        if promotes:
            for pt in GENERATED_PROMOTIONS:
                moves.append(Move(sq, to_sq, MoveFlag.PROMOTION, pt))
        else:
            moves.append(Move(sq, to_sq))

    def _gen_step(
        self,
        sq: Square,
        color: Color,
        targets: tuple[Square, ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for to_sq in targets:
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        rays: tuple[tuple[Square, ...], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for ray in rays:
            for to_sq in ray:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break


def generate_moves(position: Position) -> list[Move]:
    """Shorthand for ``MoveGenerator(position).generate_pseudo_legal_moves()``."""
    return MoveGenerator(position).generate_pseudo_legal_moves()
