"""Exchange engine: compound moves over the piece queue and reserve stack.

Every operation checks all of its preconditions before touching either
container, so a rejected call raises a ``SupplyError`` and leaves the queue
and the stack exactly as they were.
"""

import logging
from typing import List, Optional, Tuple

from tetris_stack.errors import (
    ConsistencyError,
    InsufficientQueueDepth,
    QueueEmpty,
    QueueFull,
    StackEmpty,
    StackFull,
    StackNotFull,
)
from tetris_stack.factory import PieceFactory
from tetris_stack.piece import Piece
from tetris_stack.piece_queue import PieceQueue
from tetris_stack.reserve import ReserveStack

logger = logging.getLogger(__name__)


class ExchangeEngine:
    """Moves pieces between the lookahead queue and the reserve stack."""

    # Pieces exchanged by swap_triple; also the minimum reserve depth (top >= 2)
    TRIPLE = 3

    def __init__(
        self,
        factory: PieceFactory,
        queue: Optional[PieceQueue] = None,
        stack: Optional[ReserveStack] = None,
    ):
        """Initialize the engine.

        Args:
            factory: Source of new pieces for refilling the queue
            queue: Lookahead queue (a new empty one if None)
            stack: Reserve stack (a new empty one if None)
        """
        self.factory = factory
        self.queue = queue if queue is not None else PieceQueue()
        self.stack = stack if stack is not None else ReserveStack()

    def fill_queue(self) -> int:
        """Top up the queue with generated pieces until it is full.

        Returns:
            Number of pieces added
        """
        added = 0
        while not self.queue.is_full():
            self.queue.enqueue(self.factory.generate())
            added += 1
        return added

    def _refill(self) -> None:
        try:
            self.queue.enqueue(self.factory.generate())
        except QueueFull as e:
            raise ConsistencyError("Queue full right after a dequeue") from e

    def play(self) -> Piece:
        """Play the front piece and refill the queue.

        Returns:
            The played piece

        Raises:
            QueueEmpty: If there is no piece to play
        """
        if self.queue.is_empty():
            logger.info("[Engine] Play rejected: queue empty")
            raise QueueEmpty()

        piece = self.queue.dequeue()
        self._refill()
        logger.debug(f"[Engine] Played {piece}")
        return piece

    def reserve(self) -> Piece:
        """Move the front piece onto the reserve stack and refill the queue.

        Returns:
            The reserved piece

        Raises:
            StackFull: If the reserve has no room
            QueueEmpty: If there is no piece to reserve
        """
        if self.stack.is_full():
            logger.info("[Engine] Reserve rejected: stack full")
            raise StackFull()
        if self.queue.is_empty():
            logger.info("[Engine] Reserve rejected: queue empty")
            raise QueueEmpty()

        piece = self.queue.dequeue()
        self.stack.push(piece)
        self._refill()
        logger.debug(f"[Engine] Reserved {piece}")
        return piece

    def use_reserved(self) -> Piece:
        """Use the top reserved piece. The reserve is never refilled.

        Raises:
            StackEmpty: If nothing is reserved
        """
        if self.stack.is_empty():
            logger.info("[Engine] Use reserved rejected: stack empty")
            raise StackEmpty()

        piece = self.stack.pop()
        logger.debug(f"[Engine] Used reserved {piece}")
        return piece

    def swap_front(self) -> Tuple[Piece, Piece]:
        """Exchange the queue's front piece with the stack's top piece.

        No piece is consumed or generated; applying it twice restores the
        previous state.

        Returns:
            (piece moved to the stack, piece moved to the queue)

        Raises:
            QueueEmpty: If the queue has no front piece
            StackEmpty: If the stack has no top piece
        """
        if self.queue.is_empty():
            logger.info("[Engine] Swap rejected: queue empty")
            raise QueueEmpty()
        if self.stack.is_empty():
            logger.info("[Engine] Swap rejected: stack empty")
            raise StackEmpty()

        from_queue = self.queue.dequeue()
        from_stack = self.stack.pop()
        self.queue.insert_front(from_stack)
        self.stack.push(from_queue)
        logger.debug(f"[Engine] Swapped {from_queue} <-> {from_stack}")
        return from_queue, from_stack

    def swap_triple(self) -> Tuple[List[Piece], List[Piece]]:
        """Exchange the first three queued pieces with the three reserved ones.

        The reserved pieces enter the queue front in stack order (former top
        first); the queued pieces are pushed in queue order, so the former
        third piece of the queue ends on top of the stack.

        Returns:
            (pieces moved to the stack front-most first,
             pieces moved to the queue top-most first)

        Raises:
            InsufficientQueueDepth: If the queue holds fewer than three pieces
            StackNotFull: If the stack does not hold three pieces
        """
        if self.queue.count < self.TRIPLE:
            logger.info(f"[Engine] Triple swap rejected: queue holds {self.queue.count}")
            raise InsufficientQueueDepth()
        if self.stack.top < self.TRIPLE - 1:
            logger.info(f"[Engine] Triple swap rejected: stack holds {len(self.stack)}")
            raise StackNotFull()

        qbuf = [self.queue.dequeue() for _ in range(self.TRIPLE)]
        sbuf = [self.stack.pop() for _ in range(self.TRIPLE)]

        for piece in reversed(sbuf):
            self.queue.insert_front(piece)
        for piece in qbuf:
            self.stack.push(piece)

        logger.debug(
            f"[Engine] Triple swap: queue front {[str(p) for p in sbuf]}, "
            f"stack top {[str(p) for p in reversed(qbuf)]}"
        )
        return qbuf, sbuf

    def queue_snapshot(self) -> Tuple[Piece, ...]:
        return self.queue.snapshot()

    def reserve_snapshot(self) -> Tuple[Piece, ...]:
        return self.stack.snapshot()
