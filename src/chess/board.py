"""The Board owns the placement of the pieces (the only mutable state of the editor)"""

from dataclasses import dataclass
from typing import Self

from src.chess.layout import starting_layout
from src.chess.notation import board_to_text, parse_rows
from src.chess.pieces import EMPTY, Color, Piece
from src.chess.square import BOARD_DIMENSIONS, Cell, all_cells


@dataclass
class Board:
    position: dict[Cell, Piece]

    @classmethod
    def starting_position(cls) -> Self:
        return cls(starting_layout())

    @classmethod
    def empty(cls) -> Self:
        return cls({cell: EMPTY for cell in all_cells()})

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Construct a board from its saved (text) representation. Raises ParseError, never returns a partial board."""
        return cls(parse_rows(text))

    def to_text(self) -> str:
        return board_to_text(self)

    def piece(self, cell: Cell) -> Piece:
        return self.position[cell.validate()]

    # name used by the presentation layer
    get = piece

    def set_piece(self, cell: Cell, piece: Piece) -> None:
        self.position[cell.validate()] = piece

    def reset(self) -> None:
        """Put all pieces back on their starting squares (in place: holders of this board see the change)"""
        self.position = starting_layout()

    def replace_with(self, other: "Board") -> None:
        """Wholesale replacement of the position. `other` must already be complete, so the swap cannot fail halfway."""
        self.position = dict(other.position)

    def move_piece(self, source: Cell, dest: Cell) -> None:
        """Whatever stood on the source now stands on dest. The source is always left empty."""
        source.validate()
        dest.validate()
        moving = self.position[source]
        self.position[dest] = moving
        self.position[source] = EMPTY

    def locate_pieces(self, piece: Piece) -> list[Cell]:
        return [cell for cell, occupant in self.position.items() if occupant == piece]

    def count_pieces(self) -> dict[Color, int]:
        """Number of pieces each side still has on the board"""
        return {
            color: sum(1 for piece in self.position.values() if piece.color == color)
            for color in Color
            if color != Color.NONE
        }

    def rows(self) -> list[list[Piece]]:
        """The board as a list of rows, row 0 first"""
        num_rows, num_cols = BOARD_DIMENSIONS
        return [
            [self.position[Cell(row, col)] for col in range(num_cols)]
            for row in range(num_rows)
        ]
