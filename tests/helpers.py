from __future__ import annotations

from typing import Iterable

from tetris_piece import BY_NAME, Piece


class ScriptedGenerator:
    """Hands out pieces by name in order, then repeats the last one."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = list(names)
        self.issued = 0

    def next_piece(self) -> Piece:
        idx = min(self.issued, len(self.names) - 1)
        self.issued += 1
        return Piece.spawn(BY_NAME[self.names[idx]])


def fill_row(board, y: int, color: str = "#888888", holes: Iterable[int] = ()) -> None:
    skip = set(holes)
    for x in range(len(board[y])):
        board[y][x] = None if x in skip else color
