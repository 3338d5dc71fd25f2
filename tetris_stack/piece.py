"""Piece value type.

A piece in the supply only carries its kind and a sequential id; shapes,
rotation and placement live outside this package.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

# The four kinds dealt by the factory, in menu/display order
PIECE_KINDS: List[str] = ["I", "O", "T", "L"]


@dataclass(frozen=True)
class Piece:
    """An immutable piece with a unique, increasing id."""

    kind: str
    id: int

    def __post_init__(self):
        if self.kind not in PIECE_KINDS:
            raise ValueError(f"Invalid piece kind: {self.kind}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert piece to dictionary for serialization."""
        return {"kind": self.kind, "id": self.id}

    def __str__(self) -> str:
        return f"[{self.kind} {self.id}]"
