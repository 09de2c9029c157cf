"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto

from qchess.core.errors import FenError


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


PROMOTION_TYPES: frozenset[PieceType] = frozenset(
    {PieceType.KNIGHT, PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN}
)


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    CASTLE = 3
    PROMOTION = 4


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    def fen(self) -> str:
        """FEN castling field: letters in ``KQkq`` order, ``-`` when empty."""
        text = "".join(
            letter for letter, right in _FEN_LETTERS.items() if self & right
        )
        return text or "-"

    @classmethod
    def from_fen(cls, text: str) -> CastlingRights:
        """Parse ``-`` or any subset of ``KQkq`` (in any order)."""
        if text == "-":
            return cls.NONE
        if not text or len(text) > 4:
            raise FenError(f"Invalid FEN castling field: {text!r}")
        rights = cls.NONE
        for ch in text:
            right = _FEN_LETTERS.get(ch)
            if right is None or rights & right:
                raise FenError(f"Invalid FEN castling field: {text!r}")
            rights |= right
        return rights


_FEN_LETTERS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}
