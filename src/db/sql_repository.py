"""Implementation of (Board)Repository using SQLAlchemy"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import IOFailure
from src.core.models import BoardModel
from src.db.schema import DBSavedBoard


class SQLBoardRepository:
    """
    Data stored using SQL / methods implemented using SQLAlchemy
    ----
    Database errors are rolled back and re-raised as IOFailure, so the session stays usable
    and the service layer does not need to know about SQLAlchemy.
    """

    def __init__(self, db_session: Session, owns_engine: bool = False) -> None:
        self.db = db_session
        # when True, close() also disposes the engine the session is bound to
        self.owns_engine = owns_engine

    def get_board(self, name: str) -> BoardModel | None:
        """Get saved board by slot name, if record exists."""
        with self._database_errors(f"read saved board {name!r}"):
            board_db = self._fetch_board(name)
            if board_db:
                return self._to_model(board_db)
            return None

    def save_board(self, name: str, board: BoardModel) -> BoardModel:
        """Store the board under the given name (overwrites an existing slot)."""
        with self._database_errors(f"save board {name!r}"):
            board_db = self._fetch_board(name)
            if board_db is None:
                board_db = DBSavedBoard(name=name)
                self.db.add(board_db)
            board_db.board_text = board.board_text
            board_db.status = board.status
            board_db.winner = board.winner
            self.db.commit()
            self.db.refresh(board_db)
            return self._to_model(board_db)

    def delete_board(self, name: str) -> BoardModel | None:
        """Remove a saved board."""
        with self._database_errors(f"delete saved board {name!r}"):
            board_db = self._fetch_board(name)
            if not board_db:
                return None
            board_model = self._to_model(board_db)
            self.db.delete(board_db)
            self.db.commit()
            return board_model

    def list_names(self) -> list[str]:
        with self._database_errors("list saved boards"):
            query = select(DBSavedBoard.name).order_by(DBSavedBoard.name)
            return list(self.db.scalars(query))

    def close(self) -> None:
        engine = self.db.get_bind()
        self.db.close()
        if self.owns_engine:
            engine.dispose()

    @contextmanager
    def _database_errors(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            self.db.rollback()
            raise IOFailure(f"Cannot {action}: {e}") from e

    def _fetch_board(self, name: str) -> DBSavedBoard | None:
        query = select(DBSavedBoard).where(DBSavedBoard.name == name)
        return self.db.scalar(query)

    def _to_model(self, board_db: DBSavedBoard) -> BoardModel:
        """Convert SQLAlchemy model to data transfer model."""
        return BoardModel(
            board_text=board_db.board_text,
            status=board_db.status,
            winner=board_db.winner,
        )
