"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from qchess.core.enums import Color, PieceType
from qchess.core.piece import Piece
from qchess.core.types import FILE_NAMES, Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable array of 64 cells; each cell is a :class:`Piece` or ``None``."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def is_enemy(self, sq: Square, color: Color) -> bool:
        """Whether *sq* holds a piece of the side opposing *color*."""
        piece = self._squares[sq]
        return piece is not None and piece.color != color

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color) -> Iterator[tuple[Square, Piece]]:
        """(square, piece) pairs for every piece of *color*, a1 → h8."""
        for sq, piece in enumerate(self._squares):
            if piece is not None and piece.color == color:
                yield sq, piece

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Display ------------------------------------------------------------

    def render(self, unicode: bool = False) -> str:
        """Text diagram, rank 8 at the top; empty squares shown as '.'."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                if p is None:
                    row.append(".")
                else:
                    row.append(p.symbol if unicode else str(p))
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  " + " ".join(FILE_NAMES))
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return self.render()
