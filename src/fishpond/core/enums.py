"""Core enumerations for board presentation."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class SquareColor(IntEnum):
    """Shade of a board cell. Derived from coordinates, never stored."""

    DARK = 0
    LIGHT = 1

    def __str__(self) -> str:
        return self.name.lower()


class Termination(IntEnum):
    """Why a game ended, as far as the position alone can tell."""

    CHECKMATE = 1
    STALEMATE = 2
    INSUFFICIENT_MATERIAL = 3
    SEVENTYFIVE_MOVES = 4
    FIVEFOLD_REPETITION = 5
    FIFTY_MOVES = 6
    THREEFOLD_REPETITION = 7

    @property
    def is_decisive(self) -> bool:
        return self == Termination.CHECKMATE
