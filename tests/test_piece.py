"""Tests for piece values."""

import dataclasses

import pytest

from tetris_stack.piece import Piece, PIECE_KINDS


def test_piece_creation():
    """Test creating a piece."""
    piece = Piece("T", 7)
    assert piece.kind == "T"
    assert piece.id == 7


def test_piece_is_immutable():
    """Test that pieces cannot be changed after creation."""
    piece = Piece("I", 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        piece.kind = "O"


def test_invalid_piece_kind():
    """Test that only the four supply kinds are accepted."""
    with pytest.raises(ValueError):
        Piece("S", 0)


def test_piece_display():
    """Test the [KIND ID] display form."""
    assert str(Piece("L", 12)) == "[L 12]"
    assert Piece("O", 3).to_dict() == {"kind": "O", "id": 3}


def test_all_piece_kinds_defined():
    """Test the kind set."""
    assert PIECE_KINDS == ["I", "O", "T", "L"]
