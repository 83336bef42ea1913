"""Save / load the board text to a flat file (one file per board, `saved_game.txt` by default)"""

import logging
from pathlib import Path

from src.core.exceptions import IOFailure, ParseError

_LOGGER = logging.getLogger(__name__)

ENCODING = "utf-8"
TEMP_SUFFIX = ".tmp"


class FileBoardStore:
    """Reads and writes the text encoding of a board. Parsing the text is not its business (see src/chess/notation.py)."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def write(self, board_text: str) -> None:
        """
        Write next to the target first, then swap it in.
        ----
        A write that fails halfway leaves the previously saved board intact.
        """
        temp_path = self.path.with_name(self.path.name + TEMP_SUFFIX)
        try:
            temp_path.write_text(board_text, encoding=ENCODING)
            temp_path.replace(self.path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise IOFailure(f"Cannot write board to {self.path}: {e}") from e
        _LOGGER.info("Board saved to %s", self.path)

    def read(self) -> str:
        try:
            # newline="" keeps the text as written, the parser deals with line endings
            with self.path.open(encoding=ENCODING, newline="") as file:
                return file.read()
        except UnicodeDecodeError as e:
            raise ParseError(f"{self.path} is not a {ENCODING} text file: {e}") from e
        except OSError as e:
            raise IOFailure(f"Cannot read board from {self.path}: {e}") from e
