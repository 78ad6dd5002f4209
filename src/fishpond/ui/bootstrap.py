"""Qt application bootstrap helpers for the board viewer."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from fishpond.core.indicators import outcome_indicator_for
from fishpond.game.python_chess import PythonChessEngine
from fishpond.ui.settings import BoardSettings
from fishpond.ui.styles.theme import THEMES

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fishpond",
        description="Show a chess position with last-move and check highlights.",
    )
    parser.add_argument(
        "moves",
        nargs="*",
        help="moves to play from the start position, in UCI (e2e4) or SAN (e4)",
    )
    parser.add_argument("--fen", default=None, help="start position (default: initial)")
    parser.add_argument(
        "--flipped", action="store_true", help="draw the board from Black's side"
    )
    parser.add_argument(
        "--theme", default="Classic", choices=sorted(THEMES), help="board colours"
    )
    parser.add_argument(
        "--no-coordinates",
        dest="show_coordinates",
        action="store_false",
        help="hide rank and file labels",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> BoardSettings:
    return BoardSettings(
        board_theme=args.theme,
        flipped=args.flipped,
        show_coordinates=args.show_coordinates,
    )


def engine_from_args(args: argparse.Namespace) -> PythonChessEngine:
    """Play the requested moves. Illegal moves raise ``ValueError``."""
    engine = PythonChessEngine.from_moves(args.moves, fen=args.fen)
    _LOGGER.info("Loaded position %s after %d moves", engine.fen(), len(args.moves))
    outcome = outcome_indicator_for(engine)
    if outcome is not None:
        _LOGGER.info(
            "Game over: %s by %s", outcome.result, outcome.termination.name.lower()
        )
    return engine


def _configure_application(app: QApplication) -> None:
    app.setApplicationName("Fishpond")
    app.setStyle("Fusion")


def run_application(argv: list[str] | None = None) -> int:
    """Parse *argv*, then create and run the viewer window."""
    from PyQt6.QtWidgets import QApplication

    from fishpond.ui.board.board_view import BoardView

    argv = sys.argv if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv[1:])
    try:
        engine = engine_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    app = QApplication(argv)
    _configure_application(app)

    view = BoardView()
    view.board_scene.apply_settings(settings_from_args(args))
    view.board_scene.set_engine(engine)
    view.setWindowTitle("Fishpond")
    view.resize(640, 640)
    view.show()

    return app.exec()
