"""Orchestration of communication from the presentation layer to the game logic and persistence layers (and the reverse direction)."""

import logging
from pathlib import Path
from typing import Optional, Self

from src.api.models import (
    BoardResponse,
    MoveRequest,
    MoveResponse,
    PersistenceResult,
)
from src.chess.board import Board
from src.chess.game import Game
from src.chess.moves import MoveOutcome
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Cell
from src.core.config import EditorConfig
from src.core.exceptions import IOFailure, ParseError, RepositoryError
from src.core.models import BoardModel
from src.core.shared_types import ErrorKind, Status
from src.db.file_repository import FileBoardStore
from src.db.repository import BoardRepository

_LOGGER = logging.getLogger(__name__)


class BoardEditorService:
    """
    The interface the presentation layer talks to.
    ----
    Moves raise on bad input (OutOfRangeError, GameStateError): the board is left unchanged and the caller must know.
    Saving / loading report failures as a PersistenceResult instead, again leaving the board unchanged.
    """

    def __init__(
        self,
        config: Optional[EditorConfig] = None,
        repository: Optional[BoardRepository] = None,
        game: Optional[Game] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.repo = repository
        self.game = game or Game.new_game()

    @property
    def status(self) -> Status:
        return self.game.status

    @property
    def winner(self) -> Optional[Color]:
        return self.game.winner

    # -- Board / moves --
    def get_display_value(self, cell: Cell) -> str:
        """Glyph of the piece on the cell, empty string for an empty square"""
        return self.game.board.get(cell).glyph

    def board_snapshot(self) -> BoardResponse:
        board = self.game.board
        return BoardResponse(
            squares=[[piece.glyph for piece in row] for row in board.rows()],
            status=self.game.status,
            winner=_color_name(self.game.winner),
            piece_counts={
                _color_name(color): count
                for color, count in board.count_pieces().items()
            },
            kings_on_board={
                _color_name(color): bool(
                    board.locate_pieces(Piece(PieceType.KING, color))
                )
                for color in (Color.WHITE, Color.BLACK)
            },
        )

    def apply_move(self, source: Cell, dest: Cell) -> MoveOutcome:
        return self.game.apply_move(source, dest)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Same as apply_move, for a validated request. Returns everything needed to re-render."""
        outcome = self.apply_move(request.source_cell(), request.dest_cell())
        return MoveResponse(
            moved=outcome.moved.glyph,
            captured=outcome.captured.glyph,
            game_over=outcome.is_game_over,
            winner=_color_name(outcome.winner),
            board=self.board_snapshot(),
        )

    def reset_board(self) -> None:
        self.game.reset_board()

    # -- Flat file --
    def save_to_file(self, path: Optional[Path] = None) -> PersistenceResult:
        store = FileBoardStore(path or self.config.save_path)
        try:
            store.write(self.game.board.to_text())
        except IOFailure as e:
            return self._failure(ErrorKind.IO_FAILURE, e)
        return PersistenceResult(success=True, message=f"Board saved to {store.path}")

    def load_from_file(self, path: Optional[Path] = None) -> PersistenceResult:
        """All or nothing: the file gets fully parsed into a new board before that replaces the current one."""
        store = FileBoardStore(path or self.config.save_path)
        try:
            board = Board.from_text(store.read())
        except IOFailure as e:
            return self._failure(ErrorKind.IO_FAILURE, e)
        except ParseError as e:
            return self._failure(ErrorKind.PARSE_ERROR, e)
        self.game.load_board(board)
        _LOGGER.info("Board loaded from %s", store.path)
        return PersistenceResult(success=True, message=f"Board loaded from {store.path}")

    # -- Save slots (repository) --
    def save_snapshot(self, name: str) -> PersistenceResult:
        repo = self._require_repository()
        model = BoardModel(
            board_text=self.game.board.to_text(),
            status=self.game.status,
            winner=_color_name(self.game.winner),
        )
        try:
            repo.save_board(name, model)
        except IOFailure as e:
            return self._failure(ErrorKind.IO_FAILURE, e)
        _LOGGER.info("Board saved to slot %r", name)
        return PersistenceResult(success=True, message=f"Board saved as {name!r}")

    def load_snapshot(self, name: str) -> PersistenceResult:
        """
        Load a saved slot.
        ----
        Unlike a file, a slot also stores the state of the game: a board saved after a king got captured
        comes back as a finished game, with the same winner.
        """
        repo = self._require_repository()
        try:
            model = self._fetch_board(repo, name)
            board = Board.from_text(model.board_text)
            winner = _stored_winner(model)
        except IOFailure as e:
            return self._failure(ErrorKind.IO_FAILURE, e)
        except RepositoryError as e:
            return self._failure(ErrorKind.NOT_FOUND, e)
        except ParseError as e:
            return self._failure(ErrorKind.PARSE_ERROR, e)
        self.game.load_board(board, winner=winner)
        _LOGGER.info("Board loaded from slot %r", name)
        return PersistenceResult(success=True, message=f"Board {name!r} loaded")

    def delete_snapshot(self, name: str) -> PersistenceResult:
        repo = self._require_repository()
        try:
            deleted = repo.delete_board(name)
        except IOFailure as e:
            return self._failure(ErrorKind.IO_FAILURE, e)
        if deleted is None:
            return self._failure(
                ErrorKind.NOT_FOUND, RepositoryError(f"No saved board named {name!r}.")
            )
        return PersistenceResult(success=True, message=f"Board {name!r} deleted")

    def list_snapshots(self) -> list[str]:
        """Names of all save slots. Raises IOFailure when the storage cannot be read."""
        return self._require_repository().list_names()

    def close(self) -> None:
        """Release the save-slot storage. Call once, when the editor shuts down."""
        if self.repo is not None:
            self.repo.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- Internal helpers --
    def _require_repository(self) -> BoardRepository:
        if self.repo is None:
            raise RepositoryError("No repository configured for save slots.")
        return self.repo

    def _fetch_board(self, repo: BoardRepository, name: str) -> BoardModel:
        """Attempt to find the board in the repository and raise error if it fails."""
        model = repo.get_board(name)
        if model is None:
            raise RepositoryError(f"No saved board named {name!r}.")
        return model

    def _failure(self, kind: ErrorKind, error: Exception) -> PersistenceResult:
        _LOGGER.warning("%s: %s", kind, error)
        return PersistenceResult(success=False, error=kind, message=str(error))


def _color_name(color: Optional[Color]) -> Optional[str]:
    return color.name.lower() if color is not None else None


def _stored_winner(model: BoardModel) -> Optional[Color]:
    """Winner of a saved game, None if it was still being played. Raises ParseError for inconsistent records."""
    if model.status == Status.PLAYING and model.winner is None:
        return None
    winner_name = (model.winner or "").upper()
    if model.status != Status.GAME_OVER or winner_name not in (
        Color.WHITE.name,
        Color.BLACK.name,
    ):
        raise ParseError(
            f"Inconsistent saved game state: status={model.status!r}, winner={model.winner!r}"
        )
    return Color[winner_name]
