"""Render model joining board coordinates and game indicators.

A :class:`BoardLayout` is everything a renderer needs to draw one
position: every square with its shade and placement, the pieces, the
last-move highlights, the check marker and, once the game is over, its
result.  Build a new one after each move; layouts are never updated in
place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fishpond.core.coordinates import (
    Margins,
    SquareLabel,
    SquarePosition,
    board_positions,
    square_color,
    square_label_margins,
    square_label_to_position,
    square_position_margins,
)
from fishpond.core.enums import SquareColor
from fishpond.core.indicators import (
    OutcomeIndicator,
    check_indicator_for,
    last_move_squares_for,
    outcome_indicator_for,
)
from fishpond.core.piece import Piece

if TYPE_CHECKING:
    from fishpond.game.interfaces import IRulesEngine

HIGHLIGHT_FROM = "from"
HIGHLIGHT_TO = "to"


@dataclass(frozen=True, slots=True)
class SquareLayout:
    label: SquareLabel
    position: SquarePosition
    color: SquareColor
    margins: Margins


@dataclass(frozen=True, slots=True)
class PieceLayout:
    label: SquareLabel
    piece: Piece
    margins: Margins


@dataclass(frozen=True, slots=True)
class HighlightLayout:
    """Last-move overlay; *color* is the shade of the square underneath."""

    label: SquareLabel
    role: str  # HIGHLIGHT_FROM or HIGHLIGHT_TO
    color: SquareColor
    margins: Margins


@dataclass(frozen=True, slots=True)
class CheckLayout:
    label: SquareLabel
    is_mate: bool
    margins: Margins


@dataclass(frozen=True, slots=True)
class BoardLayout:
    flipped: bool
    squares: tuple[SquareLayout, ...]
    pieces: tuple[PieceLayout, ...]
    highlights: tuple[HighlightLayout, ...]
    check: CheckLayout | None
    outcome: OutcomeIndicator | None = None


def square_layouts(flipped: bool = False) -> tuple[SquareLayout, ...]:
    """The 64 board cells in canonical order, placed for *flipped*."""
    return tuple(
        SquareLayout(
            label=pos.label,
            position=pos,
            color=square_color(pos),
            margins=square_position_margins(pos, flipped),
        )
        for pos in board_positions()
    )


def build_board_layout(engine: IRulesEngine, *, flipped: bool = False) -> BoardLayout:
    """Read the engine's current state into a fresh :class:`BoardLayout`."""
    snapshot = engine.board_snapshot()
    pieces = tuple(
        PieceLayout(
            label=label, piece=piece, margins=square_label_margins(label, flipped)
        )
        for label, piece in sorted(snapshot.items())
        if piece is not None
    )

    highlights = tuple(
        HighlightLayout(
            label=label,
            role=role,
            color=square_color(square_label_to_position(label)),
            margins=square_label_margins(label, flipped),
        )
        for role, label in zip(
            (HIGHLIGHT_FROM, HIGHLIGHT_TO), last_move_squares_for(engine)
        )
    )

    indicator = check_indicator_for(engine)
    check = None
    if indicator is not None:
        check = CheckLayout(
            label=indicator.square,
            is_mate=indicator.is_mate,
            margins=square_label_margins(indicator.square, flipped),
        )

    return BoardLayout(
        flipped=flipped,
        squares=square_layouts(flipped),
        pieces=pieces,
        highlights=highlights,
        check=check,
        outcome=outcome_indicator_for(engine),
    )
