"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from fishpond.core.enums import Color, PieceType

_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_LETTER_TYPES: dict[str, PieceType] = {v: k for k, v in _TYPE_LETTERS.items()}

# White glyphs; black ones sit six code points later (♔ -> ♚).
_WHITE_GLYPHS: dict[PieceType, str] = {
    PieceType.KING: "♔",
    PieceType.QUEEN: "♕",
    PieceType.ROOK: "♖",
    PieceType.BISHOP: "♗",
    PieceType.KNIGHT: "♘",
    PieceType.PAWN: "♙",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (side, kind) pair as read off a board snapshot."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = _TYPE_LETTERS[self.piece_type]
        return letter if self.color == Color.WHITE else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'n' → black knight."""
        try:
            ptype = _LETTER_TYPES[char.upper()]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(Color.WHITE if char.isupper() else Color.BLACK, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        glyph = _WHITE_GLYPHS[self.piece_type]
        if self.color == Color.BLACK:
            return chr(ord(glyph) + 6)
        return glyph

    @property
    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING
