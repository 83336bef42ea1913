"""Settings of the board editor. The core itself never reads the environment, the outer application does (see `from_env`)."""

import os
from pathlib import Path
from typing import Self

from pydantic import BaseModel, field_validator

ENV_PREFIX = "BOARD_EDITOR_"
DEFAULT_SAVE_FILE = "saved_game.txt"
DEFAULT_DATABASE_URL = "sqlite:///saved_boards.db"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class EditorConfig(BaseModel):
    save_path: Path = Path(DEFAULT_SAVE_FILE)
    database_url: str = DEFAULT_DATABASE_URL
    echo_sql: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {value!r}. Pick one from {','.join(LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls) -> Self:
        """Overrides from environment variables, ex. BOARD_EDITOR_SAVE_PATH=/tmp/board.txt"""
        overrides = {
            name: os.environ[f"{ENV_PREFIX}{name.upper()}"]
            for name in cls.model_fields
            if f"{ENV_PREFIX}{name.upper()}" in os.environ
        }
        return cls(**overrides)
