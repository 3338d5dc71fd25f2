"""Random piece generator with sequential ids.

Kinds are drawn uniformly at random from the four piece kinds; ids come from
a counter owned by the factory, so every piece it creates has an id strictly
greater than the previous one.
"""

import random
from typing import Optional

from tetris_stack.piece import Piece, PIECE_KINDS


class PieceFactory:
    """Seedable piece generator."""

    KINDS = PIECE_KINDS

    def __init__(self, seed: Optional[int] = None, start_id: int = 0):
        """Initialize the factory.

        Args:
            seed: Random seed for reproducible kinds (None = system entropy)
            start_id: Id given to the first generated piece
        """
        self.seed = seed
        self.rng = random.Random(seed)
        self._next_id = start_id

    @property
    def next_id(self) -> int:
        """Id the next generated piece will receive."""
        return self._next_id

    def generate(self) -> Piece:
        """Create a new piece.

        Returns:
            Piece with a random kind and the next unused id
        """
        piece = Piece(self.rng.choice(self.KINDS), self._next_id)
        self._next_id += 1
        return piece

    def reset(self, seed: Optional[int] = None) -> None:
        """Reseed the factory and restart ids at 0.

        Only meant for starting a new session; ids are never reused within one.

        Args:
            seed: New random seed
        """
        self.seed = seed
        self.rng = random.Random(seed)
        self._next_id = 0
