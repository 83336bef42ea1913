"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import OutOfRangeError

# Board is always 8x8 (rows x columns). Row 0 is the top row, which holds the white pieces at the start.
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Cell:
    row: int
    col: int

    @classmethod
    def from_tuple(cls, coordinates: tuple[int, int]) -> Cell:
        row, col = coordinates
        return cls(row, col)

    def to_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)

    def has_integer_coordinates(self) -> bool:
        # bool is an int subclass, but True is not a row
        return all(
            isinstance(value, int) and not isinstance(value, bool)
            for value in (self.row, self.col)
        )

    def is_within_bounds(self) -> bool:
        return (
            self.has_integer_coordinates()
            and (0 <= self.row < BOARD_DIMENSIONS[0])
            and (0 <= self.col < BOARD_DIMENSIONS[1])
        )

    def validate(self) -> Cell:
        """Raise if the cell is not one of the board's cells, so callers can chain: `cell.validate()`"""
        if not self.has_integer_coordinates():
            raise OutOfRangeError(
                f"Cell coordinates must be integers, got {self.to_tuple()!r}."
            )
        if not self.is_within_bounds():
            raise OutOfRangeError(
                f"Cell {self.to_tuple()} is outside of the {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} board."
            )
        return self


def all_cells() -> list[Cell]:
    """Every cell on the board, row by row."""
    return [
        Cell(row, col)
        for row in range(BOARD_DIMENSIONS[0])
        for col in range(BOARD_DIMENSIONS[1])
    ]
