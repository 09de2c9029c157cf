"""Move value object (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass

from qchess.core.enums import PROMOTION_TYPES, MoveFlag, PieceType
from qchess.core.errors import MoveParseError
from qchess.core.piece import piece_type_char, piece_type_from_char
from qchess.core.types import Square, parse_square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move.

    ``promotion`` is set exactly when ``flag`` is :attr:`MoveFlag.PROMOTION`.
    """

    from_sq: Square
    to_sq: Square
    flag: MoveFlag = MoveFlag.NORMAL
    promotion: PieceType | None = None

    def __post_init__(self) -> None:
        if (self.flag == MoveFlag.PROMOTION) != (self.promotion is not None):
            raise ValueError(
                f"Promotion piece must accompany the PROMOTION flag: {self!r}"
            )
        if self.promotion is not None and self.promotion not in PROMOTION_TYPES:
            raise ValueError(f"Cannot promote to {self.promotion.name}")

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{square_name(self.from_sq)}{square_name(self.to_sq)}"
        if self.promotion is not None:
            base += piece_type_char(self.promotion)
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)

    # ── Parsing ──────────────────────────────────────────────────────────

    @classmethod
    def from_uci(cls, text: str) -> Move:
        """Parse ``e2e4`` / ``e7e8q``.

        Only NORMAL and PROMOTION can be told apart from text alone; see
        :func:`qchess.core.notation.uci.classify_move` for the rest.
        """
        if len(text) not in (4, 5):
            raise MoveParseError(f"Invalid move text: {text!r}")
        try:
            from_sq = parse_square(text[:2])
            to_sq = parse_square(text[2:4])
            if len(text) == 5:
                promotion = piece_type_from_char(text[4])
                return cls(from_sq, to_sq, MoveFlag.PROMOTION, promotion)
        except ValueError as exc:
            raise MoveParseError(f"Invalid move text: {text!r}") from exc
        return cls(from_sq, to_sq)
