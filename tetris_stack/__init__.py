"""Piece queue and reserve stack for Tetris Stack."""

from tetris_stack.engine import ExchangeEngine
from tetris_stack.factory import PieceFactory
from tetris_stack.piece import Piece, PIECE_KINDS
from tetris_stack.piece_queue import PieceQueue
from tetris_stack.reserve import ReserveStack
from tetris_stack.session import Command, StackSession

__all__ = [
    "ExchangeEngine",
    "PieceFactory",
    "Piece",
    "PIECE_KINDS",
    "PieceQueue",
    "ReserveStack",
    "Command",
    "StackSession",
]
