"""User-configurable viewer settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BoardSettings:
    """All viewer settings applied to a :class:`BoardScene`."""

    board_theme: str = "Classic"
    flipped: bool = False
    show_coordinates: bool = True
    show_last_move: bool = True
    show_check: bool = True
