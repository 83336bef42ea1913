"""Unit tests for /src/chess/game.py"""

from copy import deepcopy
from itertools import product

import pytest

from src.chess.board import Board
from src.chess.game import Game
from src.chess.moves import Move
from src.chess.pieces import EMPTY, Color, Piece, PieceType
from src.chess.square import Cell, all_cells
from src.core.exceptions import GameStateError, OutOfRangeError
from src.core.shared_types import Status

WHITE_KING = Piece(PieceType.KING, Color.WHITE)
BLACK_KING = Piece(PieceType.KING, Color.BLACK)
WHITE_PAWN = Piece(PieceType.PAWN, Color.WHITE)


@pytest.fixture
def kings_only_game() -> Game:
    """Only kings on their starting squares, plus a white rook on (4, 0)"""
    board = Board.empty()
    board.set_piece(Cell(0, 4), WHITE_KING)
    board.set_piece(Cell(7, 4), BLACK_KING)
    board.set_piece(Cell(4, 0), Piece(PieceType.ROOK, Color.WHITE))
    return Game(board)


def test_new_game(new_game: Game) -> None:
    assert new_game.board == Board.starting_position()
    assert new_game.status == Status.PLAYING
    assert new_game.winner is None
    assert new_game.moves == []


# -- MOVES ---
def test_pawn_forward(new_game: Game) -> None:
    outcome = new_game.apply_move(Cell(1, 4), Cell(3, 4))
    assert new_game.board.piece(Cell(3, 4)) == WHITE_PAWN
    assert new_game.board.piece(Cell(1, 4)) == EMPTY
    assert not outcome.is_game_over
    assert outcome.winner is None
    assert outcome.moved == WHITE_PAWN
    assert outcome.captured == EMPTY
    assert new_game.status == Status.PLAYING
    assert new_game.moves == [Move(Cell(1, 4), Cell(3, 4))]


@pytest.mark.parametrize(
    "source, dest",
    [
        (source, dest)
        for source, dest in product(
            [Cell(0, 1), Cell(1, 0), Cell(6, 6), Cell(7, 0)], repeat=2
        )
        if source != dest
    ],
)
def test_move_clears_origin_and_fills_destination(
    new_game: Game, source: Cell, dest: Cell
) -> None:
    """No legality checks: any piece goes anywhere, also onto pieces of the same color"""
    moving = new_game.board.piece(source)
    new_game.apply_move(source, dest)
    assert new_game.board.piece(dest) == moving
    assert new_game.board.piece(source) == EMPTY


def test_capture_non_king_continues(new_game: Game) -> None:
    outcome = new_game.apply_move(Cell(0, 3), Cell(7, 3))
    assert outcome.captured == Piece(PieceType.QUEEN, Color.BLACK)
    assert not outcome.is_game_over
    assert new_game.status == Status.PLAYING
    assert new_game.board.count_pieces() == {Color.WHITE: 16, Color.BLACK: 15}


def test_moving_empty_square_deletes_destination(new_game: Game) -> None:
    """Dragging an empty square onto a piece silently removes that piece"""
    outcome = new_game.apply_move(Cell(4, 4), Cell(6, 0))
    assert new_game.board.piece(Cell(6, 0)) == EMPTY
    assert new_game.board.piece(Cell(4, 4)) == EMPTY
    assert outcome.moved == EMPTY
    assert not outcome.is_game_over


def test_board_total_after_every_move(new_game: Game) -> None:
    moves = [((1, 4), (3, 4)), ((6, 3), (4, 3)), ((3, 4), (4, 3)), ((2, 2), (0, 0))]
    for source, dest in moves:
        new_game.apply_move(Cell.from_tuple(source), Cell.from_tuple(dest))
        assert set(new_game.board.position.keys()) == set(all_cells())


# -- GAME OVER ---
def test_black_king_captures_white_king(new_game: Game) -> None:
    outcome = new_game.apply_move(Cell(7, 4), Cell(0, 4))
    assert outcome.is_game_over
    assert outcome.winner == Color.BLACK
    assert outcome.captured == WHITE_KING
    assert new_game.board.piece(Cell(0, 4)) == BLACK_KING
    assert new_game.board.piece(Cell(7, 4)) == EMPTY
    assert new_game.status == Status.GAME_OVER
    assert new_game.winner == Color.BLACK


def test_capturing_black_king_white_wins(kings_only_game: Game) -> None:
    outcome = kings_only_game.apply_move(Cell(4, 0), Cell(7, 4))
    assert outcome.winner == Color.WHITE
    white_rook = Piece(PieceType.ROOK, Color.WHITE)
    assert kings_only_game.board.piece(Cell(7, 4)) == white_rook
    assert kings_only_game.winner == Color.WHITE


def test_own_piece_onto_own_king_counts_as_capture(new_game: Game) -> None:
    """Color of the capturing piece does not matter, only the color of the king that got overwritten"""
    outcome = new_game.apply_move(Cell(1, 4), Cell(0, 4))
    assert outcome.winner == Color.BLACK


def test_empty_square_onto_king_ends_game(kings_only_game: Game) -> None:
    outcome = kings_only_game.apply_move(Cell(3, 3), Cell(7, 4))
    assert outcome.winner == Color.WHITE
    assert kings_only_game.board.locate_pieces(BLACK_KING) == []


def test_no_moves_after_game_over(new_game: Game) -> None:
    new_game.apply_move(Cell(7, 4), Cell(0, 4))
    before = deepcopy(new_game.board)
    with pytest.raises(GameStateError):
        new_game.apply_move(Cell(1, 0), Cell(2, 0))
    assert new_game.board == before
    assert new_game.status == Status.GAME_OVER


# -- INVALID INPUT ---
@pytest.mark.parametrize(
    "source, dest",
    [
        (Cell(-1, 0), Cell(0, 0)),
        (Cell(0, 0), Cell(8, 0)),
        (Cell(0, 8), Cell(0, 0)),
        (Cell(7, 4), Cell(0, -1)),
    ],
)
def test_out_of_range_move_rejected(new_game: Game, source: Cell, dest: Cell) -> None:
    before = deepcopy(new_game.board)
    with pytest.raises(OutOfRangeError):
        new_game.apply_move(source, dest)
    assert new_game.board == before
    assert new_game.moves == []
    assert new_game.status == Status.PLAYING


# -- RESET / LOAD ---
def test_reset_after_game_over(new_game: Game) -> None:
    new_game.apply_move(Cell(7, 4), Cell(0, 4))
    new_game.reset_board()
    assert new_game.status == Status.PLAYING
    assert new_game.winner is None
    assert new_game.moves == []
    assert new_game.board == Board.starting_position()
    # can play again
    assert not new_game.apply_move(Cell(1, 0), Cell(2, 0)).is_game_over


def test_reset_keeps_same_board_instance(new_game: Game) -> None:
    """Whoever holds a handle to the board sees the reset"""
    board = new_game.board
    new_game.apply_move(Cell(1, 0), Cell(3, 0))
    new_game.reset_board()
    assert new_game.board is board
    assert board.piece(Cell(1, 0)) == WHITE_PAWN


def test_load_board(new_game: Game, kings_only_game: Game) -> None:
    new_game.apply_move(Cell(7, 4), Cell(0, 4))
    new_game.load_board(kings_only_game.board)
    assert new_game.board == kings_only_game.board
    assert new_game.status == Status.PLAYING
    assert new_game.winner is None


def test_load_finished_game(new_game: Game, kings_only_game: Game) -> None:
    """A board that was saved after a king got captured stays finished"""
    new_game.load_board(kings_only_game.board, winner=Color.WHITE)
    assert new_game.status == Status.GAME_OVER
    assert new_game.winner == Color.WHITE
    with pytest.raises(GameStateError):
        new_game.apply_move(Cell(0, 4), Cell(1, 4))


def test_load_with_invalid_winner(new_game: Game, kings_only_game: Game) -> None:
    before = deepcopy(new_game.board)
    with pytest.raises(GameStateError):
        new_game.load_board(kings_only_game.board, winner=Color.NONE)
    assert new_game.board == before
    assert new_game.status == Status.PLAYING
