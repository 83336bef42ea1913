"""
Boundary layer data model(s).

Transport-safe representation of a saved board, passed between the Service and the repositories
(decouples the domain objects from what actually gets stored).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class BoardModel:
    """Saved board: the text encoding of the position + the state of the game at that moment."""

    board_text: str
    status: str
    winner: Optional[str] = None
