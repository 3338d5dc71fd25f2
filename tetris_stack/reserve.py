"""Reserve stack: pieces set aside by the player, last in first out."""

from typing import List, Optional, Tuple

from tetris_stack.errors import StackEmpty, StackFull
from tetris_stack.piece import Piece


class ReserveStack:
    """Array-backed stack holding at most 3 pieces."""

    CAPACITY = 3

    def __init__(self):
        """Initialize an empty stack."""
        # slots[0] is the bottom; slots[0..top] are valid, top == -1 when empty
        self.slots: List[Optional[Piece]] = [None] * self.CAPACITY
        self.top = -1

    def __len__(self) -> int:
        return self.top + 1

    def is_full(self) -> bool:
        return self.top == self.CAPACITY - 1

    def is_empty(self) -> bool:
        return self.top == -1

    def push(self, piece: Piece) -> None:
        """Put a piece on top of the stack.

        Args:
            piece: Piece to reserve

        Raises:
            StackFull: If the stack is at capacity
        """
        if self.is_full():
            raise StackFull()
        self.top += 1
        self.slots[self.top] = piece

    def pop(self) -> Piece:
        """Remove and return the top piece.

        Raises:
            StackEmpty: If the stack has no pieces
        """
        if self.is_empty():
            raise StackEmpty()
        piece = self.slots[self.top]
        self.top -= 1
        return piece

    def peek(self) -> Piece:
        """Return the top piece without removing it."""
        if self.is_empty():
            raise StackEmpty()
        return self.slots[self.top]

    def snapshot(self) -> Tuple[Piece, ...]:
        """Get the reserved pieces top-to-bottom."""
        return tuple(self.slots[i] for i in range(self.top, -1, -1))

    def __repr__(self) -> str:
        return f"ReserveStack({' '.join(str(p) for p in self.snapshot())})"
