"""
Text representation of the board, used for saving and loading.

Eight lines, one per row (row 0 first), each holding eight tokens separated by a single space:
* "." denotes an empty square
* any other token is the glyph of the piece on that square

ex. standard starting position:
♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖
♙ ♙ ♙ ♙ ♙ ♙ ♙ ♙
. . . . . . . .
. . . . . . . .
. . . . . . . .
. . . . . . . .
♟ ♟ ♟ ♟ ♟ ♟ ♟ ♟
♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜
"""

from typing import Protocol

from src.chess.pieces import EMPTY, GLYPH_TO_PIECE, Piece
from src.chess.square import BOARD_DIMENSIONS, Cell
from src.core.exceptions import ParseError

EMPTY_TOKEN = "."
TOKEN_SEPARATOR = " "


class Board(Protocol):
    """Just the part of the board the serializer needs"""

    def rows(self) -> list[list[Piece]]: ...


def piece_to_token(piece: Piece) -> str:
    return EMPTY_TOKEN if piece.is_empty() else piece.glyph


def token_to_piece(token: str) -> Piece:
    if token == EMPTY_TOKEN:
        return EMPTY
    return Piece.from_glyph(token)


def board_to_text(board: Board) -> str:
    return "".join(
        TOKEN_SEPARATOR.join(piece_to_token(piece) for piece in row) + "\n"
        for row in board.rows()
    )


def parse_rows(text: str) -> dict[Cell, Piece]:
    """
    Parse the saved text into a complete position.
    ----
    Everything gets parsed before anything is returned: on any problem a ParseError is raised
    and the caller never sees a partially filled position.
    """
    num_rows, num_cols = BOARD_DIMENSIONS
    lines = _split_lines(text)
    if len(lines) != num_rows:
        raise ParseError(f"Expected {num_rows} lines, found {len(lines)}.")

    position: dict[Cell, Piece] = {}
    for row, line in enumerate(lines):
        tokens = line.split(TOKEN_SEPARATOR)
        if len(tokens) != num_cols:
            raise ParseError(
                f"Line {row + 1}: expected {num_cols} tokens, found {len(tokens)}: {line!r}"
            )
        for col, token in enumerate(tokens):
            try:
                position[Cell(row, col)] = token_to_piece(token)
            except ParseError as e:
                raise ParseError(f"Line {row + 1}, token {col + 1}: {e}") from e
    return position


def _split_lines(text: str) -> list[str]:
    """A single trailing newline is allowed (that's how the file gets written)"""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    # files written on Windows
    return [line.removesuffix("\r") for line in lines]
