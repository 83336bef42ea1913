"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    PLAYING = "playing"
    GAME_OVER = "game over"


class ErrorKind(StrEnum):
    """Reported back to the presentation layer when saving/loading did not work out."""

    IO_FAILURE = "io failure"
    PARSE_ERROR = "parse error"
    NOT_FOUND = "not found"
