"""Abstract interface of the rules engine the board layer reads from.

Board presentation depends on this ABC, not on a concrete chess
library.  Implementations answer for the current position only.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fishpond.core.coordinates import SquareLabel
    from fishpond.core.enums import Color
    from fishpond.core.indicators import GameOutcome, HistoryMove
    from fishpond.core.piece import Piece


class IRulesEngine(ABC):
    """Read-only view of a game held by a chess rules engine."""

    @abstractmethod
    def history(self) -> Sequence[HistoryMove]:
        """Played moves in play order, oldest first."""

    @abstractmethod
    def is_check(self) -> bool:
        """Is the side to move in check?"""

    @abstractmethod
    def is_checkmate(self) -> bool:
        """Is the side to move checkmated?"""

    @abstractmethod
    def turn(self) -> Color: ...

    @abstractmethod
    def board_snapshot(self) -> dict[SquareLabel, Piece]:
        """Occupied squares mapped to their pieces; empty squares omitted."""

    @abstractmethod
    def outcome(self) -> GameOutcome | None:
        """How the game ended, or None while it is still in progress."""
