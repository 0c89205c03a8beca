import pytest

from tetris_board import empty_board, is_valid_move, place_piece, clear_lines, filled_rows
from tetris_piece import BY_NAME, COLS, ROWS, Piece
from tests.helpers import fill_row


def _piece(name, x, y):
    p = Piece.spawn(BY_NAME[name])
    p.x, p.y = x, y
    return p


def test_empty_board_dimensions():
    board = empty_board()
    assert len(board) == ROWS
    assert all(len(row) == COLS for row in board)
    assert filled_rows(board) == 0


@pytest.mark.parametrize("x", [-1, COLS - 1])
def test_o_piece_rejected_outside_columns(x):
    board = empty_board()
    # O is 2 wide: x=-1 puts its left column at -1, x=COLS-1 its right at COLS
    assert not is_valid_move(board, _piece("O", x, 5), 0, 0)


def test_rejects_below_floor():
    board = empty_board()
    p = _piece("O", 4, ROWS - 2)
    assert is_valid_move(board, p, 0, 0)
    assert not is_valid_move(board, p, 0, 1)


def test_offsets_are_applied_to_candidate_position():
    board = empty_board()
    p = _piece("O", 0, 0)
    assert not is_valid_move(board, p, -1, 0)
    assert is_valid_move(board, p, 1, 0)
    assert (p.x, p.y) == (0, 0)


def test_rows_above_board_are_open():
    board = empty_board()
    fill_row(board, 0)
    p = _piece("O", 4, -2)
    assert is_valid_move(board, p, 0, 0)
    assert not is_valid_move(board, p, 0, 1)


def test_occupied_cell_blocks():
    board = empty_board()
    board[10][5] = "#FF0000"
    p = _piece("O", 4, 8)
    assert is_valid_move(board, p, 0, 0)
    assert not is_valid_move(board, p, 0, 1)
    assert is_valid_move(board, p, -2, 1)


def test_candidate_shape_overrides_piece_shape():
    board = empty_board()
    p = _piece("I", 0, 0)
    vertical = [[0, 0, 1, 0]] * 4
    assert is_valid_move(board, p, -2, 0, vertical)
    assert not is_valid_move(board, p, -2, 0)


def test_place_piece_writes_color_and_skips_negative_rows():
    board = empty_board()
    p = _piece("O", 3, -1)
    place_piece(board, p)
    assert board[0][3] == board[0][4] == "#FFFF00"
    assert filled_rows(board) == 1


def test_clear_lines_removes_full_rows_and_keeps_shape():
    board = empty_board()
    fill_row(board, ROWS - 1)
    fill_row(board, ROWS - 2, holes=[0])
    fill_row(board, ROWS - 3)
    board[ROWS - 4][7] = "#00FF00"
    before = filled_rows(board)

    assert clear_lines(board) == 2
    assert len(board) == ROWS
    assert all(len(row) == COLS for row in board)
    assert filled_rows(board) <= before
    assert board[0] == [None] * COLS and board[1] == [None] * COLS
    # surviving rows shifted down in order
    assert board[ROWS - 1][0] is None and board[ROWS - 1][1] is not None
    assert board[ROWS - 2][7] == "#00FF00"


def test_clear_lines_rechecks_shifted_row():
    board = empty_board()
    for y in range(ROWS - 4, ROWS):
        fill_row(board, y)
    assert clear_lines(board) == 4
    assert filled_rows(board) == 0


def test_clear_lines_without_full_rows_is_noop():
    board = empty_board()
    fill_row(board, ROWS - 1, holes=[9])
    snapshot = [row[:] for row in board]
    assert clear_lines(board) == 0
    assert board == snapshot
