"""
Interactive console game.

Reads commands from the player, feeds them to the Board and prints
the board after each move until the game is won, lost or left.
"""
from typing import Callable, TypeVar

from .board import Board, BoardConfig, GameOutcome, OutOfBoundsError
from .commands import Action, is_valid_command, parse_command
from .display import render_board

T = TypeVar("T")

MINES_PROMPT = "How many mines do you want on the field? > "
COMMAND_PROMPT = "Set/unset mines marks or claim a cell as free: > "

OUTCOME_MESSAGES = {
    GameOutcome.WON: "Congratulations! You found all the mines!",
    GameOutcome.LOST: "You stepped on a mine and failed!",
    GameOutcome.EXITED: "Bye!",
}


def prompt_user(
    title: str,
    checker: Callable[[str], bool],
    converter: Callable[[str], T],
    read: Callable[[str], str] = input,
) -> T:
    """
    Prompt until the answer passes the checker, then convert it.

    Args:
        title: Prompt shown before each read.
        checker: Validation of a raw line.
        converter: Conversion of the accepted line.
        read: Line reader, input() by default.
    """
    line = read(title)
    while not checker(line):
        line = read(title)
    return converter(line)


def _is_valid_mine_count(line: str, width: int, height: int) -> bool:
    try:
        BoardConfig(width, height, int(line))
    except ValueError:
        return False
    return True


def prompt_mine_count(
    width: int = 9,
    height: int = 9,
    read: Callable[[str], str] = input,
) -> int:
    """Ask for a mine count that fits a width x height board."""
    return prompt_user(
        MINES_PROMPT,
        lambda line: _is_valid_mine_count(line, width, height),
        int,
        read,
    )


def play(
    board: Board,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> GameOutcome:
    """
    Run the game loop on a board.

    Args:
        board: Fresh board to play on.
        read: Line reader, input() by default.
        write: Output sink, print() by default.

    Returns:
        The terminal outcome.
    """
    write(render_board(board.get_snapshot()))
    outcome = GameOutcome.KEEP_GOING

    while not outcome.terminal:
        command = prompt_user(COMMAND_PROMPT, is_valid_command, parse_command, read)
        try:
            result = board.apply_command(command)
        except OutOfBoundsError as exc:
            write(str(exc))
            continue

        if result.notice:
            write(result.notice)
        if result.redisplay:
            reveal_all = command.action is Action.REVEAL_ALL
            write(render_board(board.get_snapshot(reveal_all=reveal_all)))
        outcome = result.outcome

    write(OUTCOME_MESSAGES[outcome])
    return outcome


def main() -> None:
    """Play one game on a 9x9 board."""
    config = BoardConfig()
    try:
        num_mines = prompt_mine_count(config.width, config.height, input)
        play(Board.new(num_mines, config.width, config.height), input, print)
    except (EOFError, KeyboardInterrupt):
        print()
        print(OUTCOME_MESSAGES[GameOutcome.EXITED])


if __name__ == "__main__":
    main()
