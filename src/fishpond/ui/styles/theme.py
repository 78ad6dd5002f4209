"""Visual theme constants for the board viewer."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PyQt6.QtGui import QColor

from fishpond.core.enums import SquareColor

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    last_move_light: QColor  # last-move tint over a light square
    last_move_dark: QColor  # last-move tint over a dark square
    check: QColor  # king in check
    checkmate: QColor  # king checkmated
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    def square_fill(self, color: SquareColor) -> QColor:
        return self.light_square if color == SquareColor.LIGHT else self.dark_square

    def last_move_fill(self, color: SquareColor) -> QColor:
        return self.last_move_light if color == SquareColor.LIGHT else self.last_move_dark

    def coord_fill(self, color: SquareColor) -> QColor:
        """Coordinate text colour readable on a square of *color*."""
        return self.coord_dark if color == SquareColor.LIGHT else self.coord_light

    def check_fill(self, is_mate: bool) -> QColor:
        return self.checkmate if is_mate else self.check

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            last_move_light=QColor(205, 209, 106),
            last_move_dark=QColor(170, 162, 58),
            check=QColor(255, 0, 0, 120),  # red transparent
            checkmate=QColor(200, 0, 0, 190),
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            last_move_light=QColor(195, 216, 135),
            last_move_dark=QColor(151, 172, 98),
            check=QColor(255, 0, 0, 120),
            checkmate=QColor(200, 0, 0, 190),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def pond(cls) -> BoardTheme:
        return cls(
            light_square=QColor(237, 222, 179),
            dark_square=QColor(51, 77, 102),
            last_move_light=QColor(205, 209, 106),
            last_move_dark=QColor(170, 162, 58),
            check=QColor(255, 0, 0, 120),
            checkmate=QColor(200, 0, 0, 190),
            coord_light=QColor(51, 77, 102),
            coord_dark=QColor(237, 222, 179),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Look up a preset by its display name, falling back to Classic."""
        factory = THEMES.get(name)
        if factory is None:
            _LOGGER.warning("Unknown board theme %r, using Classic", name)
            return cls.default()
        return factory()


THEMES = {
    "Classic": BoardTheme.default,
    "Blue": BoardTheme.blue,
    "Pond": BoardTheme.pond,
}
