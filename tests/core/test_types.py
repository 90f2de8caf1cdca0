"""Tests for Square and coordinate helpers."""

import pytest

from ichess.core.types import (
    EMPTY_SQUARE,
    FILES,
    RANKS,
    Square,
    is_in_grid_range,
    make_square,
    offset,
    parse_square,
    square_name,
)


class TestGridRange:
    def test_every_board_square_in_range(self) -> None:
        for f in FILES:
            for r in RANKS:
                assert is_in_grid_range(Square(f, r))

    def test_sentinel_out_of_range(self) -> None:
        assert not is_in_grid_range(EMPTY_SQUARE)

    @pytest.mark.parametrize(
        "file, rank",
        [("`", "1"), ("i", "1"), ("a", "0"), ("a", "9"), ("h", " "), (" ", "4")],
    )
    def test_off_board(self, file: str, rank: str) -> None:
        assert not is_in_grid_range(Square(file, rank))


    def test_multi_char_fields_out_of_range(self) -> None:
        assert not is_in_grid_range(Square("ab", "1"))
        assert not is_in_grid_range(Square("a", "12"))


class TestMakeSquare:
    def test_valid(self) -> None:
        assert make_square("e", "4") == Square("e", "4")

    def test_bad_file_gives_full_sentinel(self) -> None:
        assert make_square("i", "4") == EMPTY_SQUARE

    def test_bad_rank_gives_full_sentinel(self) -> None:
        assert make_square("e", "9") == EMPTY_SQUARE

    def test_multi_char_rejected(self) -> None:
        assert make_square("ab", "1") == EMPTY_SQUARE


class TestOffset:
    def test_inside_board(self) -> None:
        assert offset(Square("d", "4"), 1, 2) == Square("e", "6")

    def test_past_edge_is_out_of_range(self) -> None:
        assert not is_in_grid_range(offset(Square("a", "1"), -1, 0))
        assert not is_in_grid_range(offset(Square("h", "8"), 0, 1))


class TestNames:
    def test_parse(self) -> None:
        assert parse_square("g7") == Square("g", "7")

    @pytest.mark.parametrize("name", ["", "e", "e44", "z1", "a9", "E4"])
    def test_parse_invalid(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)

    def test_name(self) -> None:
        assert square_name(Square("c", "5")) == "c5"

    def test_ordering_by_file_then_rank(self) -> None:
        squares = [parse_square(n) for n in ("b1", "a2", "a1")]
        assert sorted(squares) == [parse_square(n) for n in ("a1", "a2", "b1")]
