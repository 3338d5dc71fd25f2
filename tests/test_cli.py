"""Tests for the console menu."""

import io

from tetris_stack.cli import main, parse_args, render_menu, render_state, run
from tetris_stack.piece import Piece
from tetris_stack.session import Command, Observation


def play(commands, **kwargs):
    stdout = io.StringIO()
    status = run(io.StringIO(commands), stdout, **kwargs)
    return status, stdout.getvalue()


def test_render_state():
    """Test queue and reserve display lines."""
    obs = Observation(
        queue=[Piece("I", 0), Piece("O", 1)],
        reserve=[],
        seed=0,
        next_id=2,
        actions=0,
    )
    text = render_state(obs)
    assert "Piece queue: [I 0] [O 1]" in text
    assert "Reserve (top -> bottom): (empty)" in text

    obs.reserve = [Piece("T", 4), Piece("L", 3)]
    assert "Reserve (top -> bottom): [T 4] [L 3]" in render_state(obs)


def test_render_menu_variants():
    """Test each variant lists only its commands."""
    basic = render_menu(Command.RESERVE)
    assert "2 - Reserve piece" in basic
    assert "3 -" not in basic
    assert "0 - Quit" in basic

    full = render_menu(Command.SWAP_TRIPLE)
    assert "5 - Swap first 3" in full


def test_quit():
    """Test quitting exits with status 0."""
    status, output = play("0\n", seed=1)
    assert status == 0
    assert "Thanks for playing!" in output


def test_play_and_reserve():
    """Test a short session of play, reserve and use."""
    status, output = play("1\n2\n3\n0\n", seed=1)
    assert status == 0
    assert "Played piece: [" in output
    assert "moved to the reserve stack" in output
    assert "taken from the reserve and used" in output


def test_rejected_operation_message():
    """Test rejected operations print a message and the loop continues."""
    status, output = play("3\n0\n", seed=1)
    assert status == 0
    assert "Error: Reserve stack is empty!" in output
    assert "Thanks for playing!" in output


def test_invalid_option_continues():
    """Test out-of-range numbers are refused per variant."""
    status, output = play("4\n0\n", seed=1, variant="classic")
    assert status == 0
    assert "Invalid option! Choose between 0 and 3." in output
    assert "Thanks for playing!" in output


def test_malformed_input_exits():
    """Test non-numeric input ends the program normally."""
    status, output = play("abc\n1\n", seed=1)
    assert status == 0
    assert "Invalid input. Exiting." in output
    assert "Played piece" not in output


def test_end_of_input_exits():
    """Test running out of input ends the program normally."""
    status, output = play("1\n", seed=1)
    assert status == 0
    assert "Invalid input. Exiting." in output


def test_parse_args_env_defaults(monkeypatch):
    """Test environment variables provide defaults."""
    monkeypatch.setenv("TETRIS_STACK_SEED", "77")
    monkeypatch.setenv("TETRIS_STACK_LOG_LEVEL", "debug")

    args = parse_args([])
    assert args.seed == 77
    assert args.log_level == "debug"
    assert args.variant == "full"

    args = parse_args(["--seed", "3", "--variant", "basic"])
    assert args.seed == 3
    assert args.variant == "basic"


def test_main(monkeypatch, capsys):
    """Test the console entry point."""
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0\n"))

    assert main(["--seed", "5"]) == 0
    assert "Played piece" in capsys.readouterr().out
