"""Error types raised by the piece queue, reserve stack and exchange engine.

Every ``SupplyError`` is recoverable: the operation that raised it has left
both containers exactly as they were. ``ConsistencyError`` is not: it means
an internal invariant was broken and the session should not continue.
"""


class SupplyError(Exception):
    """Base class for rejected queue/stack operations."""

    code = "SUPPLY_ERROR"
    message = "Operation rejected"

    def __init__(self, message: str = ""):
        super().__init__(message or self.message)


class QueueFull(SupplyError):
    code = "QUEUE_FULL"
    message = "Piece queue is full"


class QueueEmpty(SupplyError):
    code = "QUEUE_EMPTY"
    message = "Piece queue is empty"


class StackFull(SupplyError):
    code = "STACK_FULL"
    message = "Reserve stack is full"


class StackEmpty(SupplyError):
    code = "STACK_EMPTY"
    message = "Reserve stack is empty"


class InsufficientQueueDepth(SupplyError):
    code = "INSUFFICIENT_QUEUE_DEPTH"
    message = "Not enough pieces in the queue"


class StackNotFull(SupplyError):
    code = "STACK_NOT_FULL"
    message = "Reserve stack must be full"


class ConsistencyError(RuntimeError):
    """Raised when the engine finds its containers in an impossible state."""
