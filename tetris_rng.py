
"""Uniform piece randomizer"""
import random
from typing import Optional

from tetris_piece import TETROMINOS, Piece


class PieceGenerator:
    """Picks each piece uniformly from the 7 templates.

    No bag and no repeat rejection: the same piece can come up any number
    of times in a row.
    """
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next_piece(self) -> Piece:
        return Piece.spawn(self.rng.choice(TETROMINOS))
