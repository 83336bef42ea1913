"""
The Game class is the entrypoint into the domain layer for the service layer.
It applies moves to the board it owns and keeps track of whether the game has ended (a king got captured).

There is no legality check at all: any square may be dragged onto any other square.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.chess.board import Board
from src.chess.moves import Move, MoveOutcome
from src.chess.pieces import Color
from src.chess.square import Cell
from src.core.exceptions import GameStateError
from src.core.shared_types import Status

_LOGGER = logging.getLogger(__name__)


@dataclass
class Game:
    board: Board
    status: Status = Status.PLAYING
    winner: Optional[Color] = None
    moves: list[Move] = field(default_factory=list)

    @classmethod
    def new_game(cls) -> Self:
        return cls(Board.starting_position())

    def apply_move(self, source: Cell, dest: Cell) -> MoveOutcome:
        """
        Drop whatever stood on source onto dest
        ----

        1. make sure both cells are on the board and the game has not ended yet (board untouched otherwise)
        2. look at what gets overwritten: a king means the other side wins
        3. update the board: dest gets the source's occupant, source becomes empty (also for the winning move)
        4. update the (history of) moves and the status

        NOTE: an empty source is allowed. It simply clears dest.
        """
        source.validate()
        dest.validate()
        if self.status != Status.PLAYING:
            raise GameStateError(
                f"Game is over, no more moves allowed. status: {self.status}"
            )

        moved = self.board.piece(source)
        captured = self.board.piece(dest)
        winner = captured.color.opposite() if captured.is_king() else None

        move = Move(source, dest)
        self.board.move_piece(source, dest)
        self.moves.append(move)
        _LOGGER.debug(
            "Moved %r from %s to %s", moved.glyph, source.to_tuple(), dest.to_tuple()
        )

        if winner is not None:
            self._end_game(winner)
        return MoveOutcome(move=move, moved=moved, captured=captured, winner=winner)

    def reset_board(self) -> None:
        """Start over: standard layout, game back in progress"""
        self.board.reset()
        self._restart()
        _LOGGER.info("Board reset to the starting position")

    def load_board(self, board: Board, winner: Optional[Color] = None) -> None:
        """
        Replace the complete position (ex. with one read from a saved file).
        ----
        Without a winner the game continues on the loaded board. A board saved after a king got captured
        comes back with its winner, and stays finished.
        """
        if winner == Color.NONE:
            raise GameStateError("Winner must be white or black.")
        self.board.replace_with(board)
        self._restart()
        if winner is not None:
            self.status = Status.GAME_OVER
            self.winner = winner

    # -- PRIVATE HELPERS ---
    def _restart(self) -> None:
        self.status = Status.PLAYING
        self.winner = None
        self.moves.clear()

    def _end_game(self, winner: Color) -> None:
        self.status = Status.GAME_OVER
        self.winner = winner
        _LOGGER.info(
            "Game over: %s wins, the %s king has been captured",
            winner.name.lower(),
            winner.opposite().name.lower(),
        )
