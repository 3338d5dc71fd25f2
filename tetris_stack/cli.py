"""Console menu for the Tetris Stack piece manager."""

import argparse
import logging
import os
import sys
from typing import List, Optional, Sequence, TextIO

from tetris_stack.piece import Piece
from tetris_stack.session import Command, Observation, StackSession, StepResult

logger = logging.getLogger(__name__)

# Highest command number accepted by each menu variant
VARIANTS = {
    "basic": Command.RESERVE,
    "classic": Command.USE_RESERVED,
    "full": Command.SWAP_TRIPLE,
}

MENU_LABELS = {
    Command.PLAY: "Play piece (dequeue)",
    Command.RESERVE: "Reserve piece (push)",
    Command.USE_RESERVED: "Use reserved piece (pop)",
    Command.SWAP_FRONT: "Swap queue front with reserve top",
    Command.SWAP_TRIPLE: "Swap first 3 queued pieces with the reserve",
    Command.QUIT: "Quit",
}


def format_pieces(pieces: Sequence[Piece]) -> str:
    return " ".join(str(p) for p in pieces)


def render_state(obs: Observation) -> str:
    """Render the queue and reserve as two display lines."""
    reserve = format_pieces(obs.reserve) if obs.reserve else "(empty)"
    return f"Piece queue: {format_pieces(obs.queue)}\nReserve (top -> bottom): {reserve}\n"


def render_menu(max_command: Command) -> str:
    commands = [c for c in Command if Command.QUIT < c <= max_command]
    lines = [f"{c.value} - {MENU_LABELS[c]}" for c in commands]
    lines.append(f"{Command.QUIT.value} - {MENU_LABELS[Command.QUIT]}")
    return "\n".join(lines) + "\n\nOption: "


def describe_result(result: StepResult) -> str:
    """One-line outcome message for a step."""
    info = result.info
    if "error" in info:
        return f"Error: {info['message']}!"

    event = info["event"]
    pieces = info.get("pieces", [])
    if event == "play":
        return f"Played piece: {pieces[0]}. New piece generated automatically!"
    elif event == "reserve":
        return f"Piece {pieces[0]} moved to the reserve stack. New piece generated automatically!"
    elif event == "use_reserved":
        return f"Piece {pieces[0]} taken from the reserve and used!"
    elif event == "swap_front":
        return f"Swapped {pieces[0]} (queue) with {pieces[1]} (reserve)."
    elif event == "swap_triple":
        return (
            f"Swapped {format_pieces(pieces[:3])} (queue) "
            f"with {format_pieces(pieces[3:])} (reserve)."
        )
    elif event == "quit":
        return "Thanks for playing!"
    return event


def run(
    stdin: TextIO,
    stdout: TextIO,
    seed: Optional[int] = None,
    variant: str = "full",
) -> int:
    """Run the interactive menu loop until quit or unreadable input.

    Args:
        stdin: Stream the commands are read from
        stdout: Stream the menu and state are written to
        seed: Random seed for the session
        variant: Menu variant name, one of VARIANTS

    Returns:
        Process exit status (always 0)
    """
    max_command = VARIANTS[variant]
    session = StackSession()
    obs = session.reset(seed)

    while True:
        stdout.write("\n===== TETRIS STACK - PIECE MANAGER =====\n\n")
        stdout.write(render_state(obs))
        stdout.write("\n" + render_menu(max_command))

        line = stdin.readline()
        try:
            option = int(line.strip())
        except ValueError:
            logger.info(f"[CLI] Unreadable input: {line!r}")
            stdout.write("\nInvalid input. Exiting.\n")
            return 0

        if not Command.QUIT <= option <= max_command:
            stdout.write(f"\nInvalid option! Choose between 0 and {max_command.value}.\n")
            continue

        result = session.step(Command(option))
        stdout.write("\n" + describe_result(result) + "\n")
        if result.done:
            return 0
        obs = result.obs


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    seed_env = os.getenv("TETRIS_STACK_SEED")
    parser = argparse.ArgumentParser(
        prog="tetris-stack",
        description="Manage a Tetris piece queue and reserve stack.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=int(seed_env) if seed_env else None,
        help="Random seed (default: $TETRIS_STACK_SEED or random)",
    )
    parser.add_argument(
        "--variant",
        choices=sorted(VARIANTS),
        default="full",
        help="Menu variant: basic (0-2), classic (0-3) or full (0-5)",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("TETRIS_STACK_LOG_LEVEL", "WARNING"),
        help="Logging level (default: $TETRIS_STACK_LOG_LEVEL or WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())
    return run(sys.stdin, sys.stdout, seed=args.seed, variant=args.variant)


if __name__ == "__main__":
    sys.exit(main())
