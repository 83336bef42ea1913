"""
Wiring of the layers at process launch.

The presentation layer calls `create_service()` once, keeps the handle, and closes it on shutdown:

    with create_service() as service:
        ...
"""

from typing import Optional

from src.core.config import EditorConfig
from src.core.log_config import configure_logging
from src.db.database import create_session
from src.db.sql_repository import SQLBoardRepository
from src.services.board_service import BoardEditorService


def create_service(config: Optional[EditorConfig] = None) -> BoardEditorService:
    config = config or EditorConfig.from_env()
    configure_logging(config.log_level)
    # the engine was created for this service only: closing the service disposes it
    repository = SQLBoardRepository(create_session(config), owns_engine=True)
    return BoardEditorService(config=config, repository=repository)
