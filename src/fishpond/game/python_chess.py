"""Rules engine backed by python-chess."""

from __future__ import annotations

import chess

from fishpond.core.coordinates import SquareLabel
from fishpond.core.enums import Color, PieceType, Termination
from fishpond.core.indicators import GameOutcome, HistoryMove
from fishpond.core.piece import Piece
from fishpond.game.interfaces import IRulesEngine


def _piece_from_chess(piece: chess.Piece) -> Piece:
    # python-chess numbers piece types PAWN=1 … KING=6 as well.
    return Piece(_color_from_chess(piece.color), PieceType(piece.piece_type))


def _color_from_chess(color: chess.Color) -> Color:
    return Color.WHITE if color == chess.WHITE else Color.BLACK


class PythonChessEngine(IRulesEngine):
    """Wraps a :class:`chess.Board` and exposes it as an :class:`IRulesEngine`.

    Illegal or malformed moves raise python-chess's own ``ValueError``
    subclasses unchanged.  With *claim_draw* the threefold-repetition and
    fifty-move draws count as game over as soon as they can be claimed.
    """

    def __init__(self, fen: str | None = None, *, claim_draw: bool = False) -> None:
        self._board = chess.Board(fen if fen is not None else chess.STARTING_FEN)
        self._claim_draw = claim_draw

    @classmethod
    def from_moves(
        cls, moves: list[str], fen: str | None = None, *, claim_draw: bool = False
    ) -> PythonChessEngine:
        """Build an engine and play *moves* (UCI or SAN) in order."""
        engine = cls(fen, claim_draw=claim_draw)
        for text in moves:
            engine.push(text)
        return engine

    # ── Moves ────────────────────────────────────────────────────────────

    def push_uci(self, uci: str) -> None:
        self._board.push_uci(uci)

    def push_san(self, san: str) -> None:
        self._board.push_san(san)

    def push(self, text: str) -> None:
        """Apply a move written in UCI (``e2e4``) or SAN (``Nf3``)."""
        try:
            self._board.push_uci(text)
        except chess.InvalidMoveError:
            self._board.push_san(text)

    def pop(self) -> None:
        self._board.pop()

    # ── IRulesEngine ─────────────────────────────────────────────────────

    def history(self) -> list[HistoryMove]:
        replay = self._board.root()
        records: list[HistoryMove] = []
        for move in self._board.move_stack:
            records.append(
                HistoryMove(
                    from_square=chess.square_name(move.from_square),
                    to_square=chess.square_name(move.to_square),
                    san=replay.san(move),
                )
            )
            replay.push(move)
        return records

    def is_check(self) -> bool:
        return self._board.is_check()

    def is_checkmate(self) -> bool:
        return self._board.is_checkmate()

    def turn(self) -> Color:
        return _color_from_chess(self._board.turn)

    def board_snapshot(self) -> dict[SquareLabel, Piece]:
        return {
            chess.square_name(sq): _piece_from_chess(piece)
            for sq, piece in self._board.piece_map().items()
        }

    def outcome(self) -> GameOutcome | None:
        outcome = self._board.outcome(claim_draw=self._claim_draw)
        if outcome is None:
            return None
        winner = None if outcome.winner is None else _color_from_chess(outcome.winner)
        return GameOutcome(Termination[outcome.termination.name], winner)

    def fen(self) -> str:
        return self._board.fen()
