"""Tests for the piece factory."""

from tetris_stack.factory import PieceFactory
from tetris_stack.piece import PIECE_KINDS


def test_factory_deterministic():
    """Test that same seed produces same sequence."""
    factory1 = PieceFactory(12345)
    factory2 = PieceFactory(12345)

    sequence1 = [factory1.generate() for _ in range(20)]
    sequence2 = [factory2.generate() for _ in range(20)]

    assert sequence1 == sequence2, "Same seed should produce identical sequences"


def test_factory_ids_strictly_increasing():
    """Test that ids are unique and increase by one per piece."""
    factory = PieceFactory(42)
    ids = [factory.generate().id for _ in range(100)]

    assert ids == list(range(100)), "Ids should start at 0 and increase by 1"
    assert len(set(ids)) == len(ids), "Ids should never repeat"


def test_factory_start_id():
    """Test starting the id counter elsewhere."""
    factory = PieceFactory(1, start_id=5)
    assert factory.next_id == 5
    assert factory.generate().id == 5
    assert factory.next_id == 6, "Counter advances once per piece"


def test_factory_kinds_in_range():
    """Test that every kind is dealt and nothing else."""
    factory = PieceFactory(7)
    kinds = {factory.generate().kind for _ in range(200)}

    assert kinds == set(PIECE_KINDS), "All four kinds should appear"


def test_factory_reset():
    """Test resetting with new seed."""
    factory = PieceFactory(111)
    first_piece = factory.generate()
    factory.generate()

    factory.reset(111)
    reset_piece = factory.generate()

    assert first_piece == reset_piece, "Reset should restart sequence and ids"
