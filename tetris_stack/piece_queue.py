"""Fixed-capacity circular queue of upcoming pieces."""

from typing import List, Optional, Tuple

from tetris_stack.errors import QueueEmpty, QueueFull
from tetris_stack.piece import Piece


class PieceQueue:
    """Lookahead queue of 5 pieces backed by a circular buffer."""

    CAPACITY = 5

    def __init__(self):
        """Initialize an empty queue."""
        # Only the `count` slots starting at `head` (wrapping) are meaningful;
        # the rest may hold stale pieces and are never read.
        self.slots: List[Optional[Piece]] = [None] * self.CAPACITY
        self.head = 0
        self.tail = 0
        self.count = 0

    def __len__(self) -> int:
        return self.count

    def is_full(self) -> bool:
        return self.count == self.CAPACITY

    def is_empty(self) -> bool:
        return self.count == 0

    def enqueue(self, piece: Piece) -> None:
        """Add a piece at the back of the queue.

        Args:
            piece: Piece to add

        Raises:
            QueueFull: If the queue is at capacity
        """
        if self.is_full():
            raise QueueFull()
        self.slots[self.tail] = piece
        self.tail = (self.tail + 1) % self.CAPACITY
        self.count += 1

    def dequeue(self) -> Piece:
        """Remove and return the front piece.

        Returns:
            The piece that was at the front

        Raises:
            QueueEmpty: If the queue has no pieces
        """
        if self.is_empty():
            raise QueueEmpty()
        piece = self.slots[self.head]
        self.head = (self.head + 1) % self.CAPACITY
        self.count -= 1
        return piece

    def insert_front(self, piece: Piece) -> None:
        """Put a piece in front of the current front piece.

        Used by the exchange operations to hand pieces back to the queue
        without sending them to the back.

        Args:
            piece: Piece that becomes the new front

        Raises:
            QueueFull: If the queue is at capacity
        """
        if self.is_full():
            raise QueueFull()
        self.head = (self.head - 1 + self.CAPACITY) % self.CAPACITY
        self.slots[self.head] = piece
        self.count += 1

    def peek(self) -> Piece:
        """Return the front piece without removing it."""
        if self.is_empty():
            raise QueueEmpty()
        return self.slots[self.head]

    def snapshot(self) -> Tuple[Piece, ...]:
        """Get the queued pieces front-to-back.

        Returns:
            Tuple of `count` pieces, front first
        """
        return tuple(
            self.slots[(self.head + i) % self.CAPACITY] for i in range(self.count)
        )

    def __repr__(self) -> str:
        return f"PieceQueue({' '.join(str(p) for p in self.snapshot())})"
