"""Tests for Piece."""

import pytest

from qchess.core.enums import Color, PieceType
from qchess.core.piece import Piece


class TestPiece:
    def test_twelve_distinct_letters(self) -> None:
        pieces = {Piece(c, pt) for c in Color for pt in PieceType}
        assert len(pieces) == 12
        assert len({str(p) for p in pieces}) == 12

    def test_letter_case(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.KNIGHT)) == "n"

    def test_from_char_roundtrip(self) -> None:
        for ch in "PNBRQKpnbrqk":
            assert str(Piece.from_char(ch)) == ch

    @pytest.mark.parametrize("ch", ["x", "", "1", "Kk"])
    def test_from_char_invalid(self, ch: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(ch)

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.WHITE, PieceType.PAWN).symbol == "♙"
        assert Piece(Color.BLACK, PieceType.QUEEN).symbol == "♛"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
