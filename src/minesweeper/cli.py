"""
Minesweeper - command line front end.

Usage:
    minesweeper play [--difficulty {easy,medium,hard}] [--seed S]
    minesweeper play --rows R --cols C --mines M [--seed S]
    minesweeper show [--difficulty ...|--rows R --cols C --mines M] [--seed S]
"""
import argparse
import logging
from typing import Optional

from .game import (
    Board,
    BoardConfig,
    ConfigurationError,
    Difficulty,
    Ended,
    GameController,
    SelectingDifficulty,
)
from .ui.renderer import TextRenderer

MENU_HELP = "Pick 1-4, or q to quit."
ENTRY_HELP = "Type a number and press enter, 'back' to erase a digit, m for the menu."
GAME_HELP = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new round), m (menu), q (quit)."


def config_from_args(args: argparse.Namespace) -> Optional[BoardConfig]:
    """
    Board requested on the command line, or None to start on the menu.

    Raises:
        ConfigurationError: If the dimensions cannot form a board.
    """
    sizes = (args.rows, args.cols, args.mines)
    if any(value is not None for value in sizes):
        if any(value is None for value in sizes):
            raise ConfigurationError("--rows, --cols and --mines must be given together")
        return BoardConfig(args.rows, args.cols, args.mines)
    if args.difficulty:
        return Difficulty[args.difficulty.upper()].config
    return None


def run_command(controller: GameController, line: str) -> bool:
    """
    Apply one line of player input.

    Returns:
        False when the player asked to quit, True otherwise.
    """
    tokens = line.split()
    command = tokens[0].lower() if tokens else ""
    if command in ("q", "quit"):
        return False

    mode = controller.mode
    if isinstance(mode, Ended):
        controller.return_to_menu()
        return True

    if isinstance(mode, SelectingDifficulty):
        _menu_command(controller, mode, command)
        return True

    if command == "n":
        controller.restart()
    elif command == "m":
        controller.return_to_menu()
    elif command in ("r", "f") and len(tokens) == 3:
        try:
            row, col = int(tokens[1]), int(tokens[2])
        except ValueError:
            print(GAME_HELP)
            return True
        if command == "r":
            controller.reveal(row, col)
        else:
            controller.flag(row, col)
    else:
        print(GAME_HELP)
    return True


def _menu_command(
    controller: GameController, mode: SelectingDifficulty, command: str
) -> None:
    if mode.entry.active:
        if command == "m":
            controller.return_to_menu()
        elif command == "back":
            controller.key("backspace")
        elif command.isdigit():
            for digit in command:
                controller.key(digit)
            controller.key("enter")
        else:
            print(ENTRY_HELP)
        return

    choices = {str(number): choice for number, choice in enumerate(Difficulty, start=1)}
    if command in choices:
        controller.select_difficulty(choices[command])
    else:
        print(MENU_HELP)


def play(args: argparse.Namespace, config: Optional[BoardConfig]) -> None:
    """Run an interactive game in the terminal."""
    controller = GameController(config=config, seed=args.seed)
    renderer = TextRenderer()

    while True:
        print()
        print(renderer.render(controller))
        try:
            line = input("> ")
        except EOFError:
            break
        if not run_command(controller, line):
            break


def show(args: argparse.Namespace, config: Optional[BoardConfig]) -> None:
    """Print a generated board with every cell uncovered."""
    board = Board(config or Difficulty.EASY.config, seed=args.seed)
    print(TextRenderer().render_solution(board))


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard"],
        help="Preset board size",
    )
    parser.add_argument("--rows", type=int, help="Custom number of rows")
    parser.add_argument("--cols", type=int, help="Custom number of columns")
    parser.add_argument("--mines", type=int, help="Custom number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main(argv: Optional[list] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log game events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    add_board_arguments(play_parser)

    show_parser = subparsers.add_parser("show", help="Print a solved board")
    add_board_arguments(show_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command not in ("play", "show"):
        parser.print_help()
        return

    try:
        config = config_from_args(args)
    except ConfigurationError as exc:
        parser.error(str(exc))

    if args.command == "play":
        play(args, config)
    else:
        show(args, config)


if __name__ == "__main__":
    main()
