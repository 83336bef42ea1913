"""
A move is a completed drag: whatever stood on the source square gets dropped on the destination square.

No movement rules: every piece may go anywhere.
"""

from dataclasses import dataclass
from typing import Optional

from src.chess.pieces import Color, Piece
from src.chess.square import Cell


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    source: Cell
    dest: Cell


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of applying a move.
    ----
    * `winner is None`: the game continues
    * otherwise a king got overwritten: game over, with `winner` the color of the side that captured it
    """

    move: Move
    moved: Piece
    captured: Piece
    winner: Optional[Color] = None

    @property
    def is_game_over(self) -> bool:
        return self.winner is not None
