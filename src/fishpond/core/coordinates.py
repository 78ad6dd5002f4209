"""Board coordinate system and display placement helpers.

Internal coordinates grow upward from White's side of the board:

    file 0–7  ↔  'a'–'h'
    rank 0–7  ↔  '1'–'8'

so ``SquarePosition(0, 0)`` is a1.  Display placement uses a top-left
origin expressed in percent of the board edge; see
:func:`square_position_margins`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from fishpond.core.enums import SquareColor

SquareLabel: TypeAlias = str  # e.g. "c4"

AXIS_SIZE = 8
SQUARE_PERCENT = 100 / AXIS_SIZE

FILE_LABELS = "abcdefgh"
RANK_LABELS = "12345678"


class InvalidIndexError(ValueError):
    """Axis index or label character outside the 8×8 board."""


@dataclass(frozen=True, slots=True)
class SquarePosition:
    """One of the 64 board cells as (file, rank) axis indices."""

    file: int
    rank: int

    @property
    def label(self) -> SquareLabel:
        return position_to_square_label(self)

    @property
    def color(self) -> SquareColor:
        return square_color(self)


@dataclass(frozen=True, slots=True)
class Margins:
    """Top-left display offset of a square, in percent of the board edge."""

    top: float
    left: float

    def style(self) -> str:
        """Inline style string consumed by the rendering layer."""
        return f"top: {_percent(self.top)}%; left: {_percent(self.left)}%"

    def __str__(self) -> str:
        return self.style()


def _percent(value: float) -> str:
    # 87.5 -> "87.5", 0.0 -> "0", never exponent form for off-board values
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


# ── Axis enumeration ────────────────────────────────────────────────────────


def axis_positions(reverse: bool = False) -> list[int]:
    """Axis indices 0–7, or 7–0 when *reverse* is set."""
    indexes = list(range(AXIS_SIZE))
    if reverse:
        indexes.reverse()
    return indexes


def board_positions() -> list[SquarePosition]:
    """All 64 positions, rank-major: a1, b1, …, h1, a2, …, h8.

    The order does not depend on orientation; flipping is applied only
    when computing margins.
    """
    return [
        SquarePosition(file, rank)
        for rank in range(AXIS_SIZE)
        for file in range(AXIS_SIZE)
    ]


def square_labels() -> list[SquareLabel]:
    """Labels of :func:`board_positions` in the same order."""
    return [position_to_square_label(pos) for pos in board_positions()]


def square_color(pos: SquarePosition) -> SquareColor:
    """Alternating shade; a1 is dark."""
    if (pos.rank + pos.file) % 2 == 0:
        return SquareColor.DARK
    return SquareColor.LIGHT


# ── Labels ──────────────────────────────────────────────────────────────────


def _check_index(idx: int, axis: str) -> None:
    if not 0 <= idx < AXIS_SIZE:
        raise InvalidIndexError(f"Invalid {axis} index {idx}")


def axis_index_to_rank_label(idx: int) -> str:
    """Rank digit for *idx*, e.g. 0 → '1'."""
    _check_index(idx, "rank")
    return RANK_LABELS[idx]


def axis_index_to_file_label(idx: int) -> str:
    """File letter for *idx*, e.g. 7 → 'h'."""
    _check_index(idx, "file")
    return FILE_LABELS[idx]


def position_to_square_label(pos: SquarePosition) -> SquareLabel:
    """``SquarePosition(2, 3)`` → ``'c4'``."""
    return axis_index_to_file_label(pos.file) + axis_index_to_rank_label(pos.rank)


def square_label_to_position(
    label: SquareLabel, *, strict: bool = False
) -> SquarePosition:
    """Decode a label such as ``'c4'`` into ``SquarePosition(2, 3)``.

    The label must be two characters long.  Beyond that no bounds check
    is made by default: ``'z9'`` decodes to an off-board position.  With
    *strict* the label must be one file letter followed by one rank digit.
    Violations raise :class:`InvalidIndexError`.
    """
    if len(label) != 2 or (
        strict and (label[0] not in FILE_LABELS or label[1] not in RANK_LABELS)
    ):
        raise InvalidIndexError(f"Invalid square label: {label!r}")
    file = ord(label[0]) - ord("a")
    rank = ord(label[1]) - ord("1")
    return SquarePosition(file, rank)


# ── Display placement ───────────────────────────────────────────────────────


def square_position_margins(pos: SquarePosition, flipped: bool = False) -> Margins:
    """Percentage offset of *pos* from the board's top-left corner.

    With White at the bottom the vertical axis is inverted so rank 8 is
    drawn first; a flipped board already has rank 1 at the top.
    """
    left = pos.file * SQUARE_PERCENT
    if flipped:
        top = pos.rank * SQUARE_PERCENT
    else:
        top = 100 - SQUARE_PERCENT - pos.rank * SQUARE_PERCENT
    return Margins(top=top, left=left)


def square_label_margins(label: SquareLabel, flipped: bool = False) -> Margins:
    """:func:`square_position_margins` for a square label."""
    return square_position_margins(square_label_to_position(label), flipped)
