"""Protocol repository for named save slots (implemented using SQLAlchemy, see sql_repository.py).

Storage failures are raised as IOFailure."""

from typing import Protocol

from src.core.models import BoardModel


class BoardRepository(Protocol):
    """Persistence layer orchestration"""

    def get_board(self, name: str) -> BoardModel | None:
        """Get saved board by slot name, if record exists."""
        ...

    def save_board(self, name: str, board: BoardModel) -> BoardModel:
        """Store the board under the given name (overwrites an existing slot)."""
        ...

    def delete_board(self, name: str) -> BoardModel | None:
        """Remove a saved board."""
        ...

    def list_names(self) -> list[str]:
        """Names of all save slots."""
        ...

    def close(self) -> None:
        """Release the connection to the storage."""
        ...
