"""Last-move and check indicators derived from a rules-engine snapshot.

Nothing here is cached: every call reads the snapshot it is given, so
results always describe the current position.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

from fishpond.core.coordinates import SquareLabel
from fishpond.core.enums import Color, Termination

if TYPE_CHECKING:
    from fishpond.core.piece import Piece
    from fishpond.game.interfaces import IRulesEngine

_LOGGER = logging.getLogger(__name__)

BoardSnapshot = Mapping[SquareLabel, "Piece | None"]


class MoveRecord(Protocol):
    """Anything carrying the origin and destination labels of a move."""

    @property
    def from_square(self) -> SquareLabel: ...

    @property
    def to_square(self) -> SquareLabel: ...


@dataclass(frozen=True, slots=True)
class HistoryMove:
    """A played move as reported by the rules engine."""

    from_square: SquareLabel
    to_square: SquareLabel
    san: str | None = None


@dataclass(frozen=True, slots=True)
class CheckIndicator:
    """King square of the side to move and whether it is mated."""

    square: SquareLabel
    is_mate: bool


@dataclass(frozen=True, slots=True)
class GameOutcome:
    """Finished game as reported by the rules engine.

    *winner* is None for draws.
    """

    termination: Termination
    winner: Color | None = None

    @property
    def result(self) -> str:
        """PGN result tag: '1-0', '0-1' or '1/2-1/2'."""
        if self.winner is None:
            return "1/2-1/2"
        return "1-0" if self.winner == Color.WHITE else "0-1"


@dataclass(frozen=True, slots=True)
class OutcomeIndicator:
    """Game-over marker; *loser_king* is set only for decisive results."""

    result: str
    termination: Termination
    winner: Color | None
    loser_king: SquareLabel | None


def _move_squares(record: MoveRecord | Mapping[str, Any]) -> list[SquareLabel]:
    # Verbose history dicts use "from"/"to" keys.
    if isinstance(record, Mapping):
        return [record["from"], record["to"]]
    return [record.from_square, record.to_square]


def last_move_squares(
    history: Sequence[MoveRecord | Mapping[str, Any]],
) -> list[SquareLabel]:
    """Origin and destination of the most recent move, or ``[]``."""
    if not history:
        return []
    return _move_squares(history[-1])


def find_king(snapshot: BoardSnapshot, color: Color) -> SquareLabel | None:
    """Square of *color*'s king, scanning every occupied square."""
    for label, piece in snapshot.items():
        if piece is not None and piece.is_king and piece.color == color:
            return label
    return None


def check_indicator(
    is_check: bool,
    is_checkmate: bool,
    side_to_move: Color,
    snapshot: BoardSnapshot,
) -> CheckIndicator | None:
    """Marker for the king in check, if any.

    The side in check is always the side to move.  A snapshot with no
    such king yields ``None`` and a warning.
    """
    if not (is_check or is_checkmate):
        return None

    square = find_king(snapshot, side_to_move)
    if square is None:
        _LOGGER.warning(
            "Check reported but no %s king found on the board snapshot",
            side_to_move,
        )
        return None
    return CheckIndicator(square=square, is_mate=is_checkmate)


def last_move_squares_for(engine: IRulesEngine) -> list[SquareLabel]:
    return last_move_squares(engine.history())


def check_indicator_for(engine: IRulesEngine) -> CheckIndicator | None:
    return check_indicator(
        engine.is_check(),
        engine.is_checkmate(),
        engine.turn(),
        engine.board_snapshot(),
    )


def outcome_indicator(
    outcome: GameOutcome | None, snapshot: BoardSnapshot
) -> OutcomeIndicator | None:
    """Game-over marker for a finished game, ``None`` while play goes on."""
    if outcome is None:
        return None

    loser_king = None
    if outcome.winner is not None:
        loser = outcome.winner.opposite
        loser_king = find_king(snapshot, loser)
        if loser_king is None:
            _LOGGER.warning(
                "Game won by %s but no %s king found on the board snapshot",
                outcome.winner,
                loser,
            )
    return OutcomeIndicator(
        result=outcome.result,
        termination=outcome.termination,
        winner=outcome.winner,
        loser_king=loser_king,
    )


def outcome_indicator_for(engine: IRulesEngine) -> OutcomeIndicator | None:
    return outcome_indicator(engine.outcome(), engine.board_snapshot())
