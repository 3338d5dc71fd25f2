"""Game session with a gym-like interface.

Provides reset() and step() so a front end can drive the exchange engine one
command at a time and render the resulting observation.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from tetris_stack.engine import ExchangeEngine
from tetris_stack.errors import SupplyError
from tetris_stack.factory import PieceFactory
from tetris_stack.piece import Piece

logger = logging.getLogger(__name__)


class Command(int, Enum):
    """Menu commands, numbered as the player types them."""
    QUIT = 0
    PLAY = 1
    RESERVE = 2
    USE_RESERVED = 3
    SWAP_FRONT = 4
    SWAP_TRIPLE = 5


@dataclass
class Observation:
    """Snapshot of the session state."""
    queue: List[Piece]
    reserve: List[Piece]
    seed: int
    next_id: int
    actions: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert observation to dictionary for serialization."""
        return {
            "queue": [p.to_dict() for p in self.queue],
            "reserve": [p.to_dict() for p in self.reserve],
            "session": {
                "seed": self.seed,
                "next_id": self.next_id,
                "actions": self.actions,
            },
        }


@dataclass
class StepResult:
    """Result of a step() call."""
    obs: Observation
    done: bool
    info: Dict[str, Any]


class StackSession:
    """A single player's queue and reserve, driven by menu commands."""

    def __init__(self):
        self.engine: Optional[ExchangeEngine] = None
        self.seed = 0
        self.actions = 0
        self.done = False

    def reset(self, seed: Optional[int] = None) -> Observation:
        """Start a new session with an empty reserve and a full queue.

        Args:
            seed: Random seed for reproducibility (generates one if None)

        Returns:
            Initial observation
        """
        if seed is None:
            seed = random.randint(0, 1_000_000)

        self.seed = seed
        self.engine = ExchangeEngine(PieceFactory(seed))
        self.engine.fill_queue()
        self.actions = 0
        self.done = False

        logger.info(f"[Session] Reset with seed={seed}")
        return self._build_observation()

    def step(self, command: Command) -> StepResult:
        """Execute one menu command.

        Rejected operations do not raise: the state is left unchanged and the
        reason is reported in ``info["error"]`` and ``info["message"]``.

        Args:
            command: Command to execute

        Returns:
            Step result with observation, done flag and info

        Raises:
            ValueError: If the session was not reset or has already ended
        """
        if self.engine is None:
            raise ValueError("Session not initialized. Call reset first.")
        if self.done:
            raise ValueError("Session already ended.")

        command = Command(command)
        info: Dict[str, Any] = {"event": command.name.lower()}

        if command == Command.QUIT:
            self.done = True
            logger.info(f"[Session] Quit after {self.actions} actions")
            return StepResult(self._build_observation(), True, info)

        try:
            info["pieces"] = self._dispatch(command)
        except SupplyError as e:
            info["error"] = e.code
            info["message"] = str(e)
        else:
            self.actions += 1

        return StepResult(self._build_observation(), False, info)

    def _dispatch(self, command: Command) -> List[Piece]:
        if command == Command.PLAY:
            return [self.engine.play()]
        elif command == Command.RESERVE:
            return [self.engine.reserve()]
        elif command == Command.USE_RESERVED:
            return [self.engine.use_reserved()]
        elif command == Command.SWAP_FRONT:
            return list(self.engine.swap_front())
        elif command == Command.SWAP_TRIPLE:
            to_stack, to_queue = self.engine.swap_triple()
            return to_stack + to_queue
        raise ValueError(f"Unhandled command: {command}")

    def _build_observation(self) -> Observation:
        return Observation(
            queue=list(self.engine.queue_snapshot()),
            reserve=list(self.engine.reserve_snapshot()),
            seed=self.seed,
            next_id=self.engine.factory.next_id,
            actions=self.actions,
        )
