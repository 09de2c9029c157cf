"""Position — complete game state (board + metadata) with make/unmake."""

from __future__ import annotations

from dataclasses import dataclass

from qchess.core.board import Board
from qchess.core.enums import CastlingRights, Color, MoveFlag, PieceType
from qchess.core.errors import IllegalMoveError
from qchess.core.move import Move
from qchess.core.piece import Piece
from qchess.core.types import (
    Square,
    down,
    file_of,
    make_square,
    rank_of,
    relative_rank,
    square_name,
    up,
)


@dataclass(frozen=True, slots=True)
class StateDelta:
    """What :meth:`Position.make_move` changed, enough to reverse it exactly.

    ``captured`` is whatever stood on the destination square (``None`` for a
    quiet move and for en passant, whose victim is restored from the flag).
    """

    move: Move
    captured: Piece | None
    en_passant_file: int | None
    castling: CastlingRights


class Position:
    """Full chess position: board + side to move + castling + en passant + clocks.

    Mutated in place by :meth:`make_move` / :meth:`unmake_move`.  The caller
    keeps the returned :class:`StateDelta` values and hands them back in
    strict reverse order; :class:`qchess.game.Game` does that bookkeeping.

    Not implemented here: castling execution, halfmove-clock updates and
    castling-rights updates on king/rook moves.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant_file",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant_file: int | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant_file = en_passant_file
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    @classmethod
    def empty(cls) -> Position:
        """Bare board, white to move, no castling rights."""
        return cls(Board(), castling=CastlingRights.NONE)

    # ── Derived state ────────────────────────────────────────────────────

    @property
    def en_passant(self) -> Square | None:
        """En-passant target square: rank 6 for white to move, rank 3 for black."""
        if self.en_passant_file is None:
            return None
        rank = 5 if self.side_to_move == Color.WHITE else 2
        return make_square(self.en_passant_file, rank)

    @property
    def fen(self) -> str:
        from qchess.core.notation.fen import position_to_fen

        return position_to_fen(self)

    def pseudo_legal_moves(self) -> list[Move]:
        from qchess.core.move_generator import MoveGenerator

        return MoveGenerator(self).generate_pseudo_legal_moves()

    # ── Core move operations ─────────────────────────────────────────────

    def make_move(self, move: Move) -> StateDelta:
        """Apply *move* and return the delta needed to undo it.

        Raises :class:`IllegalMoveError` (or ``NotImplementedError`` for
        castling) without touching the position when *move* does not fit it.
        """
        color = self.side_to_move
        piece = self._check_move(move)
        board = self.board

        delta = StateDelta(
            move=move,
            captured=board[move.to_sq],
            en_passant_file=self.en_passant_file,
            castling=self.castling,
        )

        board[move.to_sq] = piece
        board[move.from_sq] = None
        self.en_passant_file = None

        if move.flag == MoveFlag.DOUBLE_PAWN:
            self.en_passant_file = file_of(move.to_sq)
        elif move.flag == MoveFlag.EN_PASSANT:
            victim_sq = down(move.to_sq, color)
            assert victim_sq is not None
            board[victim_sq] = None
        elif move.flag == MoveFlag.PROMOTION:
            assert move.promotion is not None
            board[move.to_sq] = Piece(color, move.promotion)

        if color == Color.BLACK:
            self.fullmove_number += 1
        self.side_to_move = color.opposite
        return delta

    def unmake_move(self, delta: StateDelta) -> None:
        """Undo the move recorded in *delta*; must be the last one applied."""
        move = delta.move
        self.side_to_move = self.side_to_move.opposite
        color = self.side_to_move
        if color == Color.BLACK:
            self.fullmove_number -= 1

        self.en_passant_file = delta.en_passant_file
        self.castling = delta.castling

        board = self.board
        piece = board[move.to_sq]
        assert piece is not None

        # Restore pawn for promotion
        if move.flag == MoveFlag.PROMOTION:
            piece = Piece(color, PieceType.PAWN)

        board[move.from_sq] = piece
        board[move.to_sq] = delta.captured

        if move.flag == MoveFlag.EN_PASSANT:
            victim_sq = down(move.to_sq, color)
            assert victim_sq is not None
            board[victim_sq] = Piece(color.opposite, PieceType.PAWN)

    # ── Validation ───────────────────────────────────────────────────────

    def _check_move(self, move: Move) -> Piece:
        """Return the moving piece, or raise if *move* cannot be applied."""
        board = self.board
        color = self.side_to_move
        name = str(move)

        piece = board[move.from_sq]
        if piece is None:
            raise IllegalMoveError(f"No piece on {square_name(move.from_sq)}: {name}")
        if piece.color != color:
            raise IllegalMoveError(f"It is {color}'s turn, cannot move {piece}: {name}")
        if move.from_sq == move.to_sq:
            raise IllegalMoveError(f"Null move: {name}")
        target = board[move.to_sq]
        if target is not None and target.color == color:
            raise IllegalMoveError(f"Cannot capture own piece: {name}")

        flag = move.flag
        if flag == MoveFlag.CASTLE:
            raise NotImplementedError(f"Castling is not supported: {name}")
        if flag == MoveFlag.NORMAL:
            if piece.piece_type == PieceType.PAWN:
                self._check_plain_pawn_move(move, target)
            return piece

        if piece.piece_type != PieceType.PAWN:
            raise IllegalMoveError(f"{flag.name} move by a non-pawn: {name}")

        file_step = abs(file_of(move.from_sq) - file_of(move.to_sq))
        from_rank = relative_rank(rank_of(move.from_sq), color)
        if flag == MoveFlag.DOUBLE_PAWN:
            passed_sq = up(move.from_sq, color)
            if (
                file_step != 0
                or from_rank != 1
                or relative_rank(rank_of(move.to_sq), color) != 3
                or target is not None
                or passed_sq is None
                or not board.is_empty(passed_sq)
            ):
                raise IllegalMoveError(f"Bad double push geometry: {name}")
        elif flag == MoveFlag.EN_PASSANT:
            if self.en_passant is None or move.to_sq != self.en_passant:
                raise IllegalMoveError(f"Move does not match en-passant target: {name}")
            if file_step != 1 or from_rank != 4:
                raise IllegalMoveError(f"Bad en passant geometry: {name}")
            victim_sq = down(move.to_sq, color)
            assert victim_sq is not None
            if board[victim_sq] != Piece(color.opposite, PieceType.PAWN):
                raise IllegalMoveError(f"No pawn to capture en passant: {name}")
        elif flag == MoveFlag.PROMOTION:
            if relative_rank(rank_of(move.to_sq), color) != 7:
                raise IllegalMoveError(f"Promotion off the last rank: {name}")
            if from_rank != 6 or file_step > 1:
                raise IllegalMoveError(f"Bad promotion geometry: {name}")
            if (file_step == 1) != (target is not None):
                raise IllegalMoveError(f"Promotion must push straight or capture: {name}")
        return piece

    def _check_plain_pawn_move(self, move: Move, target: Piece | None) -> None:
        # A NORMAL pawn move that needs a special flag would be mis-applied.
        color = self.side_to_move
        name = str(move)
        if file_of(move.from_sq) != file_of(move.to_sq) and target is None:
            raise IllegalMoveError(f"Diagonal pawn move onto an empty square: {name}")
        if abs(rank_of(move.from_sq) - rank_of(move.to_sq)) == 2:
            raise IllegalMoveError(f"Two-square pawn push must be DOUBLE_PAWN: {name}")
        if relative_rank(rank_of(move.to_sq), color) == 7:
            raise IllegalMoveError(f"Pawn reaching the last rank must promote: {name}")

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy of board and metadata."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant_file=self.en_passant_file,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return (
            self.board == other.board
            and self.side_to_move == other.side_to_move
            and self.castling == other.castling
            and self.en_passant_file == other.en_passant_file
            and self.halfmove_clock == other.halfmove_clock
            and self.fullmove_number == other.fullmove_number
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.fen}"
