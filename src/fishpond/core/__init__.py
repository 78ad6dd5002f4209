"""Core domain layer — board coordinates and game indicators.

Pure functions over explicit inputs, no Qt and no chess library.

Quick start::

    from fishpond.core import square_label_margins, last_move_squares

    str(square_label_margins("c4"))          # 'top: 50%; left: 25%'
    last_move_squares([{"from": "e2", "to": "e4"}])   # ['e2', 'e4']
"""

from fishpond.core.coordinates import (
    AXIS_SIZE,
    FILE_LABELS,
    RANK_LABELS,
    SQUARE_PERCENT,
    InvalidIndexError,
    Margins,
    SquareLabel,
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
from fishpond.core.enums import Color, PieceType, SquareColor, Termination
from fishpond.core.indicators import (
    CheckIndicator,
    GameOutcome,
    HistoryMove,
    MoveRecord,
    OutcomeIndicator,
    check_indicator,
    check_indicator_for,
    find_king,
    last_move_squares,
    last_move_squares_for,
    outcome_indicator,
    outcome_indicator_for,
)
from fishpond.core.piece import Piece

__all__ = [
    # Constants
    "AXIS_SIZE",
    "FILE_LABELS",
    "RANK_LABELS",
    "SQUARE_PERCENT",
    # Enums
    "Color",
    "PieceType",
    "SquareColor",
    "Termination",
    # Value objects
    "CheckIndicator",
    "GameOutcome",
    "HistoryMove",
    "Margins",
    "MoveRecord",
    "OutcomeIndicator",
    "Piece",
    "SquareLabel",
    "SquarePosition",
    # Errors
    "InvalidIndexError",
    # Coordinates
    "axis_index_to_file_label",
    "axis_index_to_rank_label",
    "axis_positions",
    "board_positions",
    "position_to_square_label",
    "square_color",
    "square_label_margins",
    "square_label_to_position",
    "square_labels",
    "square_position_margins",
    # Indicators
    "check_indicator",
    "check_indicator_for",
    "find_king",
    "last_move_squares",
    "last_move_squares_for",
    "outcome_indicator",
    "outcome_indicator_for",
]
