"""Tests for the board coordinate system."""

import pytest

from fishpond.core.coordinates import (
    AXIS_SIZE,
    SQUARE_PERCENT,
    InvalidIndexError,
    Margins,
    SquarePosition,
    axis_index_to_file_label,
    axis_index_to_rank_label,
    axis_positions,
    board_positions,
    position_to_square_label,
    square_color,
    square_label_margins,
    square_label_to_position,
    square_labels,
    square_position_margins,
)
from fishpond.core.enums import SquareColor


class TestAxisPositions:
    def test_ascending(self) -> None:
        assert axis_positions() == [0, 1, 2, 3, 4, 5, 6, 7]
        assert axis_positions(False) == list(range(8))

    def test_reversed_is_exact_reverse(self) -> None:
        assert axis_positions(reverse=True) == [7, 6, 5, 4, 3, 2, 1, 0]

    def test_returns_fresh_list(self) -> None:
        first = axis_positions()
        first.append(99)
        assert axis_positions() == list(range(8))


class TestBoardPositions:
    def test_sixty_four_unique(self) -> None:
        positions = board_positions()
        assert len(positions) == 64
        assert len(set(positions)) == 64

    def test_rank_major_order(self) -> None:
        positions = board_positions()
        assert positions[0] == SquarePosition(0, 0)
        assert positions[1] == SquarePosition(1, 0)
        assert positions[7] == SquarePosition(7, 0)
        assert positions[8] == SquarePosition(0, 1)
        assert positions[-1] == SquarePosition(7, 7)

    def test_labels_follow_same_order(self) -> None:
        labels = square_labels()
        assert labels[:3] == ["a1", "b1", "c1"]
        assert labels[8] == "a2"
        assert labels[-1] == "h8"


class TestSquareColor:
    def test_a1_is_dark(self) -> None:
        assert square_color(SquarePosition(0, 0)) == SquareColor.DARK

    def test_h1_is_light(self) -> None:
        assert square_color(SquarePosition(7, 0)) == SquareColor.LIGHT

    def test_alternates_along_files_and_ranks(self) -> None:
        for rank in range(AXIS_SIZE):
            for file in range(AXIS_SIZE - 1):
                here = square_color(SquarePosition(file, rank))
                assert here != square_color(SquarePosition(file + 1, rank))
        for file in range(AXIS_SIZE):
            for rank in range(AXIS_SIZE - 1):
                here = square_color(SquarePosition(file, rank))
                assert here != square_color(SquarePosition(file, rank + 1))

    def test_half_light_half_dark(self) -> None:
        colors = [square_color(p) for p in board_positions()]
        assert colors.count(SquareColor.LIGHT) == 32

    def test_position_property(self) -> None:
        assert SquarePosition(3, 0).color == SquareColor.LIGHT  # d1


class TestLabels:
    def test_rank_labels(self) -> None:
        assert [axis_index_to_rank_label(i) for i in range(8)] == list("12345678")

    def test_file_labels(self) -> None:
        assert [axis_index_to_file_label(i) for i in range(8)] == list("abcdefgh")

    @pytest.mark.parametrize("idx", [-1, 8, 100])
    def test_rank_out_of_range(self, idx: int) -> None:
        with pytest.raises(InvalidIndexError):
            axis_index_to_rank_label(idx)

    @pytest.mark.parametrize("idx", [-1, 8])
    def test_file_out_of_range(self, idx: int) -> None:
        with pytest.raises(InvalidIndexError):
            axis_index_to_file_label(idx)

    def test_invalid_index_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="Invalid rank index 8"):
            axis_index_to_rank_label(8)

    def test_label_to_position(self) -> None:
        assert square_label_to_position("c4") == SquarePosition(2, 3)
        assert square_label_to_position("a1") == SquarePosition(0, 0)
        assert square_label_to_position("h8") == SquarePosition(7, 7)

    def test_round_trip_every_square(self) -> None:
        for pos in board_positions():
            label = axis_index_to_file_label(pos.file) + axis_index_to_rank_label(pos.rank)
            assert square_label_to_position(label) == pos
            assert position_to_square_label(pos) == label == pos.label

    def test_permissive_decode_leaves_board(self) -> None:
        assert square_label_to_position("i9") == SquarePosition(8, 8)

    def test_strict_decode_rejects_off_board(self) -> None:
        for label in ("i1", "a9", "a0", "e", "e44", "E4"):
            with pytest.raises(InvalidIndexError):
                square_label_to_position(label, strict=True)

    def test_strict_decode_accepts_valid(self) -> None:
        assert square_label_to_position("g7", strict=True) == SquarePosition(6, 6)

    @pytest.mark.parametrize("label", ["", "e", "e44"])
    def test_wrong_length_rejected_without_strict(self, label: str) -> None:
        with pytest.raises(InvalidIndexError):
            square_label_to_position(label)

    def test_off_board_position_has_no_label(self) -> None:
        with pytest.raises(InvalidIndexError):
            _ = SquarePosition(8, 0).label


class TestMargins:
    def test_square_percent(self) -> None:
        assert SQUARE_PERCENT == 12.5

    def test_a1_white_side(self) -> None:
        margins = square_position_margins(SquarePosition(0, 0), False)
        assert margins == Margins(top=87.5, left=0)
        assert str(margins) == "top: 87.5%; left: 0%"

    def test_a1_flipped(self) -> None:
        margins = square_position_margins(SquarePosition(0, 0), True)
        assert margins.style() == "top: 0%; left: 0%"

    def test_c4_label(self) -> None:
        assert str(square_label_margins("c4", False)) == "top: 50%; left: 25%"

    def test_h8(self) -> None:
        assert str(square_label_margins("h8")) == "top: 0%; left: 87.5%"
        assert str(square_label_margins("h8", True)) == "top: 87.5%; left: 87.5%"

    def test_label_and_position_agree(self) -> None:
        for pos in board_positions():
            for flipped in (False, True):
                assert square_label_margins(pos.label, flipped) == square_position_margins(
                    pos, flipped
                )

    def test_every_square_has_distinct_placement(self) -> None:
        for flipped in (False, True):
            placed = {square_position_margins(p, flipped) for p in board_positions()}
            assert len(placed) == 64
            for m in placed:
                assert 0 <= m.top <= 100 - SQUARE_PERCENT
                assert 0 <= m.left <= 100 - SQUARE_PERCENT

    def test_style_never_uses_exponent_form(self) -> None:
        # "\U0010ffff1" decodes far off the board
        margins = square_label_margins("\U0010ffff1")
        assert margins.style() == "top: 87.5%; left: 13925175%"
        assert str(Margins(top=1e7, left=0.0)) == "top: 10000000%; left: 0%"
