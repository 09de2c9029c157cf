"""Tests for Move value object and its text form."""

import pytest

from qchess.core.enums import MoveFlag, PieceType
from qchess.core.errors import MoveParseError
from qchess.core.move import Move
from qchess.core.types import E2, E4, E7, E8


class TestMoveText:
    def test_str(self) -> None:
        assert str(Move(E2, E4, MoveFlag.DOUBLE_PAWN)) == "e2e4"

    def test_promotion_str(self) -> None:
        move = Move(E7, E8, MoveFlag.PROMOTION, PieceType.KNIGHT)
        assert move.uci == "e7e8n"

    def test_parse_normal(self) -> None:
        assert Move.from_uci("e2e4") == Move(E2, E4)

    def test_parse_promotion(self) -> None:
        move = Move.from_uci("e7e8q")
        assert move.flag == MoveFlag.PROMOTION
        assert move.promotion == PieceType.QUEEN

    @pytest.mark.parametrize("text", ["", "e2", "e2e", "e2e4qq", "e2e9", "z2e4", "e7e8k", "e7e8p", "e7e8x"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(MoveParseError):
            Move.from_uci(text)


class TestMoveInvariants:
    def test_promotion_requires_piece(self) -> None:
        with pytest.raises(ValueError):
            Move(E7, E8, MoveFlag.PROMOTION)

    def test_piece_requires_promotion_flag(self) -> None:
        with pytest.raises(ValueError):
            Move(E7, E8, MoveFlag.NORMAL, PieceType.QUEEN)

    def test_no_king_promotion(self) -> None:
        with pytest.raises(ValueError):
            Move(E7, E8, MoveFlag.PROMOTION, PieceType.KING)

    def test_hashable_and_comparable(self) -> None:
        assert len({Move(E2, E4), Move(E2, E4)}) == 1
