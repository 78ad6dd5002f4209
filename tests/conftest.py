"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

from fishpond.core.enums import Color, PieceType
from fishpond.core.indicators import GameOutcome, HistoryMove
from fishpond.core.piece import Piece
from fishpond.game.interfaces import IRulesEngine

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


def _is_ui_test(request: pytest.FixtureRequest) -> bool:
    return "ui" in Path(str(request.node.fspath)).parts


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QApplication for UI tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture(autouse=True)
def _cleanup_qt_widgets(
    request: pytest.FixtureRequest,
) -> Iterator[None]:
    """Ensure UI tests do not leak top-level widgets into the next test."""
    if not _is_ui_test(request):
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in list(app.topLevelWidgets()):
        widget.close()
    app.processEvents()


class StubEngine(IRulesEngine):
    """Rules engine returning canned answers, for tests that need no chess library."""

    def __init__(
        self,
        *,
        history: list[HistoryMove] | None = None,
        check: bool = False,
        checkmate: bool = False,
        turn: Color = Color.WHITE,
        snapshot: dict[str, Piece] | None = None,
        outcome: GameOutcome | None = None,
    ) -> None:
        self._history = history or []
        self._check = check
        self._checkmate = checkmate
        self._turn = turn
        self._snapshot = snapshot or {}
        self._outcome = outcome

    def history(self) -> list[HistoryMove]:
        return list(self._history)

    def is_check(self) -> bool:
        return self._check

    def is_checkmate(self) -> bool:
        return self._checkmate

    def turn(self) -> Color:
        return self._turn

    def board_snapshot(self) -> dict[str, Piece]:
        return dict(self._snapshot)

    def outcome(self) -> GameOutcome | None:
        return self._outcome


@pytest.fixture
def kings_only() -> dict[str, Piece]:
    return {
        "e1": Piece(Color.WHITE, PieceType.KING),
        "e8": Piece(Color.BLACK, PieceType.KING),
    }


@pytest.fixture
def stub_engine_cls() -> type[StubEngine]:
    return StubEngine
