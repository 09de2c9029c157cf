"""Tests for square/rank/file coordinate helpers."""

import pytest

from qchess.core.enums import Color
from qchess.core.types import (
    A1,
    D4,
    E2,
    E4,
    E7,
    H1,
    H8,
    down,
    file_name,
    file_of,
    left,
    make_square,
    offset,
    parse_file,
    parse_rank,
    parse_square,
    rank_name,
    rank_of,
    relative_rank,
    right,
    square_from_index,
    square_name,
    up,
)


class TestSquareBijection:
    def test_index_roundtrip(self) -> None:
        for index in range(64):
            sq = square_from_index(index)
            assert make_square(file_of(sq), rank_of(sq)) == index

    def test_name_roundtrip(self) -> None:
        for f in "abcdefgh":
            for r in "12345678":
                assert square_name(parse_square(f + r)) == f + r

    def test_corners(self) -> None:
        assert square_name(0) == "a1"
        assert square_name(7) == "h1"
        assert square_name(56) == "a8"
        assert square_name(63) == "h8"
        assert parse_square("e4") == 28

    def test_rank_file_pair(self) -> None:
        assert make_square(4, 3) == E4
        assert file_of(E4) == 4
        assert rank_of(E4) == 3


class TestRejection:
    @pytest.mark.parametrize("index", [-1, 64, 100])
    def test_index_out_of_range(self, index: int) -> None:
        with pytest.raises(ValueError):
            square_from_index(index)

    @pytest.mark.parametrize("file, rank", [(8, 0), (0, 8), (-1, 0), (0, -1)])
    def test_coords_out_of_range(self, file: int, rank: int) -> None:
        with pytest.raises(ValueError):
            make_square(file, rank)

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "e44", "E4", "4e"])
    def test_bad_square_names(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_square_name_rejects_index(self) -> None:
        with pytest.raises(ValueError):
            square_name(64)


class TestRankFileText:
    def test_file_text(self) -> None:
        assert [file_name(f) for f in range(8)] == list("abcdefgh")
        assert parse_file("h") == 7

    def test_rank_text(self) -> None:
        assert [rank_name(r) for r in range(8)] == list("12345678")
        assert parse_rank("1") == 0

    def test_bad_text(self) -> None:
        with pytest.raises(ValueError):
            parse_file("z")
        with pytest.raises(ValueError):
            parse_rank("0")
        with pytest.raises(ValueError):
            file_name(8)


class TestStepping:
    def test_offset_on_board(self) -> None:
        assert offset(D4, 1, 1) == make_square(4, 4)
        assert offset(D4, -3, -3) == A1

    def test_offset_off_board(self) -> None:
        assert offset(H1, 1, 0) is None
        assert offset(A1, 0, -1) is None
        assert offset(H8, 0, 1) is None

    def test_up_is_side_relative(self) -> None:
        assert up(E2, Color.WHITE) == parse_square("e3")
        assert up(E7, Color.BLACK) == parse_square("e6")
        assert up(H8, Color.WHITE) is None

    def test_down_is_side_relative(self) -> None:
        assert down(E4, Color.WHITE) == parse_square("e3")
        assert down(E4, Color.BLACK) == parse_square("e5")
        assert down(A1, Color.WHITE) is None

    def test_left_right_mirror(self) -> None:
        assert left(E4, Color.WHITE) == parse_square("d4")
        assert right(E4, Color.WHITE) == parse_square("f4")
        assert left(E4, Color.BLACK) == parse_square("f4")
        assert right(E4, Color.BLACK) == parse_square("d4")
        assert left(A1, Color.WHITE) is None
        assert right(H1, Color.WHITE) is None

    def test_relative_rank(self) -> None:
        assert relative_rank(1, Color.WHITE) == 1
        assert relative_rank(6, Color.BLACK) == 1
        assert relative_rank(0, Color.BLACK) == 7
