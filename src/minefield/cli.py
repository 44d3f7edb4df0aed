"""
Play Minesweeper in a terminal.

Usage:
    minefield [--height H] [--width W] [--mines N] [--seed S] [--verbose]

Commands at the prompt:
    r X Y   reveal a cell
    f X Y   flag or unflag a cell
    c X Y   chord on a number
    n       new game
    h       help
    q       quit
"""
import argparse
import logging
from typing import Callable, List, NamedTuple, Optional

from .board import BoardConfig
from .errors import InvalidCoordinate
from .game import Game

logger = logging.getLogger(__name__)

HELP = "commands: r X Y (reveal), f X Y (flag), c X Y (chord), n (new game), q (quit)"

_ALIASES = {
    "r": "reveal",
    "reveal": "reveal",
    "f": "flag",
    "flag": "flag",
    "c": "chord",
    "chord": "chord",
    "n": "new",
    "new": "new",
    "h": "help",
    "help": "help",
    "?": "help",
    "q": "quit",
    "quit": "quit",
}

_POSITIONAL = {"reveal", "flag", "chord"}


class Command(NamedTuple):
    """A parsed prompt command."""

    name: str
    x: int = 0
    y: int = 0


def parse_command(line: str) -> Command:
    """
    Parse one line typed at the prompt.

    Raises:
        ValueError: If the command is unknown or its arguments are wrong.
    """
    parts = line.split()
    if not parts:
        raise ValueError("empty command")

    name = _ALIASES.get(parts[0].lower())
    if name is None:
        raise ValueError(f"unknown command {parts[0]!r}")

    if name not in _POSITIONAL:
        if len(parts) != 1:
            raise ValueError(f"{name} takes no arguments")
        return Command(name)

    if len(parts) != 3:
        raise ValueError(f"{name} needs X and Y")
    try:
        x, y = int(parts[1]), int(parts[2])
    except ValueError:
        raise ValueError(f"X and Y must be integers, got {parts[1:]}") from None
    return Command(name, x, y)


def play(
    game: Game,
    read: Optional[Callable[[str], str]] = None,
    write: Callable[[str], None] = print,
) -> None:
    """Run the prompt loop until the player quits or input ends."""
    read = read or input
    write(game.caption)
    write(game.render(coordinates=True))

    actions = {
        "reveal": game.reveal,
        "flag": game.toggle_flag,
        "chord": game.chord,
    }

    while True:
        try:
            line = read("> ")
        except EOFError:
            break

        try:
            command = parse_command(line)
        except ValueError as error:
            write(f"error: {error}")
            continue

        if command.name == "quit":
            break
        if command.name == "help":
            write(HELP)
            continue

        if command.name == "new":
            game.new_game()
        else:
            try:
                changed = actions[command.name](command.x, command.y)
            except InvalidCoordinate as error:
                write(f"error: {error}")
                continue
            if not changed:
                write("nothing to do")
                continue

        write(game.caption)
        write(game.render(coordinates=True))


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="Play Minesweeper in the terminal"
    )
    parser.add_argument("--height", type=int, default=9, help="Number of rows")
    parser.add_argument("--width", type=int, default=9, help="Number of columns")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Seed for mine placement")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log engine activity")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the minefield command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = BoardConfig(args.height, args.width, args.mines, seed=args.seed)
    except ValueError as error:
        parser.error(str(error))

    logger.debug("starting with %s", config)
    play(Game(config))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
