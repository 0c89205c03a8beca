
"""Board helpers: validity check, lock, line clear"""
from typing import Optional, List
from tetris_piece import Piece, Shape, COLS, ROWS

Board = List[List[Optional[str]]]


def empty_board() -> Board:
    return [[None] * COLS for _ in range(ROWS)]


def is_valid_move(board: Board, piece: Piece, dx: int, dy: int,
                  shape: Optional[Shape] = None) -> bool:
    s = shape if shape is not None else piece.shape
    nx, ny = piece.x + dx, piece.y + dy
    for y, row in enumerate(s):
        for x, v in enumerate(row):
            if not v: continue
            bx, by = nx + x, ny + y
            if bx < 0 or bx >= COLS or by >= ROWS: return False
            # rows above the top are open
            if by >= 0 and board[by][bx] is not None: return False
    return True


def place_piece(board: Board, piece: Piece):
    for y, r in enumerate(piece.shape):
        for x, v in enumerate(r):
            if v:
                by = piece.y + y
                if by >= 0: board[by][piece.x + x] = piece.color


def clear_lines(board: Board) -> int:
    c = 0; y = ROWS - 1
    while y >= 0:
        if all(cell is not None for cell in board[y]):
            # y is not decremented: the row shifted into y gets re-tested
            del board[y]; board.insert(0, [None] * COLS); c += 1
        else: y -= 1
    return c


def filled_rows(board: Board) -> int:
    """Number of rows holding at least one block."""
    return sum(1 for row in board if any(cell is not None for cell in row))
