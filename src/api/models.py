"""Requests and Response models exchanged with the presentation layer"""

from typing import Optional

from pydantic import BaseModel, field_validator

from src.chess.square import Cell
from src.core.exceptions import OutOfRangeError
from src.core.shared_types import ErrorKind, Status

Coordinates = tuple[int, int]
ColorName = str


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    """A completed drag gesture, as (row, col) pairs"""

    source: Coordinates
    dest: Coordinates

    @field_validator(*["source", "dest"])
    @classmethod
    def validate_cell(cls, value: Coordinates) -> Coordinates:
        if not Cell.from_tuple(value).is_within_bounds():
            raise OutOfRangeError(f"Cell {value} is outside of the board.")
        return value

    def source_cell(self) -> Cell:
        return Cell.from_tuple(self.source)

    def dest_cell(self) -> Cell:
        return Cell.from_tuple(self.dest)


# --- RESPONSE MODELS ---
class BoardResponse(BaseModel):
    """Everything needed to (re-)render the board: glyph per square (empty string for empty squares), row 0 first"""

    squares: list[list[str]]
    status: Status
    piece_counts: dict[ColorName, int]
    kings_on_board: dict[ColorName, bool]
    winner: Optional[ColorName] = None


class MoveResponse(BaseModel):
    moved: str
    captured: str
    game_over: bool
    winner: Optional[ColorName] = None
    board: BoardResponse


class PersistenceResult(BaseModel):
    """Outcome of a save or load. Failures leave the board untouched."""

    success: bool
    error: Optional[ErrorKind] = None
    message: str = ""
