"""Defines the types of chess pieces and the glyphs used to show (and save) them"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.exceptions import ParseError


class PieceType(Enum):
    EMPTY = auto()
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    NONE = auto()
    WHITE = auto()
    BLACK = auto()

    def opposite(self) -> "Color":
        if self == Color.WHITE:
            return Color.BLACK
        if self == Color.BLACK:
            return Color.WHITE
        return Color.NONE


# Unicode chess symbols. White: U+2654 - U+2659, Black: U+265A - U+265F
GLYPH_TO_PIECE: dict[str, tuple[PieceType, Color]] = {
    "♔": (PieceType.KING, Color.WHITE),
    "♕": (PieceType.QUEEN, Color.WHITE),
    "♖": (PieceType.ROOK, Color.WHITE),
    "♗": (PieceType.BISHOP, Color.WHITE),
    "♘": (PieceType.KNIGHT, Color.WHITE),
    "♙": (PieceType.PAWN, Color.WHITE),
    "♚": (PieceType.KING, Color.BLACK),
    "♛": (PieceType.QUEEN, Color.BLACK),
    "♜": (PieceType.ROOK, Color.BLACK),
    "♝": (PieceType.BISHOP, Color.BLACK),
    "♞": (PieceType.KNIGHT, Color.BLACK),
    "♟": (PieceType.PAWN, Color.BLACK),
}

PIECE_TO_GLYPH: dict[tuple[PieceType, Color], str] = {
    value: key for key, value in GLYPH_TO_PIECE.items()
}


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def empty(cls) -> Self:
        return cls(PieceType.EMPTY, Color.NONE)

    @classmethod
    def from_glyph(cls, glyph: str) -> Self:
        if glyph not in GLYPH_TO_PIECE:
            raise ParseError(f"Unknown piece glyph: {glyph!r}")
        piece_type, color = GLYPH_TO_PIECE[glyph]
        return cls(piece_type, color)

    @property
    def glyph(self) -> str:
        """What the square shows. An empty square shows nothing."""
        if self.is_empty():
            return ""
        return PIECE_TO_GLYPH[(self.type, self.color)]

    def is_empty(self) -> bool:
        return self.type == PieceType.EMPTY

    def is_king(self) -> bool:
        return self.type == PieceType.KING


EMPTY = Piece.empty()
