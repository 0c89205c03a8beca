
"""Tetromino catalog, piece model, naive rotation"""
from dataclasses import dataclass
from typing import List, Tuple

COLS, ROWS = 10, 20

Shape = List[List[int]]


@dataclass(frozen=True)
class Tetromino:
    name: str
    shape: Tuple[Tuple[int, ...], ...]
    color: str

    @property
    def width(self) -> int:
        return len(self.shape[0])


TETROMINOS = (
    Tetromino("I", ((0,0,0,0),(1,1,1,1),(0,0,0,0),(0,0,0,0)), "#00FFFF"),
    Tetromino("J", ((1,0,0),(1,1,1),(0,0,0)), "#0000FF"),
    Tetromino("L", ((0,0,1),(1,1,1),(0,0,0)), "#FFA500"),
    Tetromino("O", ((1,1),(1,1)), "#FFFF00"),
    Tetromino("S", ((0,1,1),(1,1,0),(0,0,0)), "#00FF00"),
    Tetromino("T", ((0,1,0),(1,1,1),(0,0,0)), "#800080"),
    Tetromino("Z", ((1,1,0),(0,1,1),(0,0,0)), "#FF0000"),
)

BY_NAME = {t.name: t for t in TETROMINOS}


def rotate_cw(m: Shape) -> Shape:
    """rotated[i][j] = m[N-1-j][i]; returns a new matrix."""
    return [list(r) for r in zip(*m[::-1])]


@dataclass
class Piece:
    name: str
    shape: Shape
    x: int
    y: int
    color: str

    @staticmethod
    def spawn(t: Tetromino) -> "Piece":
        s = [list(r) for r in t.shape]
        return Piece(t.name, s, COLS // 2 - t.width // 2, 0, t.color)

    def copy(self) -> "Piece":
        return Piece(self.name, [r[:] for r in self.shape], self.x, self.y, self.color)

    def cells(self):
        """Board coordinates (x, y) of every filled cell, including rows above 0."""
        return [(self.x + c, self.y + r)
                for r, row in enumerate(self.shape)
                for c, v in enumerate(row) if v]
