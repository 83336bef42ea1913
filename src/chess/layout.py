"""
Starting layout of the pieces.

Row 0 holds the white back rank, row 1 the white pawns, row 6 the black pawns and row 7 the black back rank.
Both back ranks read the same from column 0 to 7: R N B Q K B N R
"""

from src.chess.pieces import EMPTY, Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Cell, all_cells

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

WHITE_BACK_ROW = 0
WHITE_PAWN_ROW = 1
BLACK_PAWN_ROW = BOARD_DIMENSIONS[0] - 2
BLACK_BACK_ROW = BOARD_DIMENSIONS[0] - 1


def initial_piece_at(cell: Cell) -> Piece:
    """The piece standing on a cell before anything was moved."""
    cell.validate()
    if cell.row in (WHITE_BACK_ROW, BLACK_BACK_ROW):
        color = Color.WHITE if cell.row == WHITE_BACK_ROW else Color.BLACK
        return Piece(BACK_RANK[cell.col], color)
    if cell.row in (WHITE_PAWN_ROW, BLACK_PAWN_ROW):
        color = Color.WHITE if cell.row == WHITE_PAWN_ROW else Color.BLACK
        return Piece(PieceType.PAWN, color)
    return EMPTY


def starting_layout() -> dict[Cell, Piece]:
    return {cell: initial_piece_at(cell) for cell in all_cells()}
