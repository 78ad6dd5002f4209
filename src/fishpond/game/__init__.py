"""Game layer — the rules-engine seam and its python-chess implementation.

Quick start::

    from fishpond.game import PythonChessEngine

    engine = PythonChessEngine.from_moves(["e4", "e5", "Qh5", "Nc6", "Bc4", "Nf6", "Qxf7#"])
    engine.is_checkmate()   # True
"""

from fishpond.game.interfaces import IRulesEngine
from fishpond.game.python_chess import PythonChessEngine

__all__ = [
    "IRulesEngine",
    "PythonChessEngine",
]
