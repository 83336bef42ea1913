"""
Errors raised by the board editor.

Domain code raises these. The service layer turns the recoverable ones (I/O, parsing, unknown save slots)
into result values for the presentation layer.
"""


class BoardEditorError(Exception):
    """Base class for every error raised by the board editor."""


class OutOfRangeError(BoardEditorError, ValueError):
    """A cell coordinate outside of the board."""


class ParseError(BoardEditorError, ValueError):
    """Saved board text that cannot be interpreted."""


class IOFailure(BoardEditorError):
    """Saved board file could not be read or written."""


class GameStateError(BoardEditorError):
    """Operation not allowed in the current state of the game (ex. moving after a king got captured)."""


class RepositoryError(BoardEditorError):
    """Requested record does not exist in the repository."""
