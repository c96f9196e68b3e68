"""
Command parsing for the Minesweeper console.

Turns a raw line typed by the player into a validated Command. Lines
look like ``3 5 free``, ``3 5 mine``, ``reveal`` or ``exit``.
Coordinates are 1-based and are not checked against the board here.
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


# ============================================================================
# Constants
# ============================================================================

class Action(Enum):
    """Player actions, valued by the keyword typed to request them."""

    FREE = "free"
    FLAG = "mine"
    REVEAL_ALL = "reveal"
    EXIT = "exit"

    @property
    def needs_coordinates(self) -> bool:
        """Check if the action targets a cell."""
        return self in (Action.FREE, Action.FLAG)

    @classmethod
    def from_keyword(cls, keyword: str) -> Optional["Action"]:
        """Case-insensitive lookup, None for unknown keywords."""
        try:
            return cls(keyword.lower())
        except ValueError:
            return None


class CommandError(ValueError):
    """Raised when an input line is not a valid command."""


@dataclass(frozen=True)
class Command:
    """
    A parsed player command.

    Attributes:
        action: What to do.
        coords: 1-based (x, y) target, only set for FREE and FLAG.
    """

    action: Action
    coords: Optional[Tuple[int, int]] = None


# ============================================================================
# Parsing
# ============================================================================

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


def _parse_integer(token: str) -> int:
    """Plain decimal integer, no underscores or non-ASCII digits."""
    if not _INTEGER.fullmatch(token):
        raise CommandError(f"Not a coordinate: {token!r}")
    return int(token)


def parse_command(line: str) -> Command:
    """
    Parse an input line into a Command.

    A line of three or more tokens must read ``x y action``; a shorter
    line must start with ``reveal`` or ``exit``.

    Args:
        line: Raw text typed by the player.

    Returns:
        The parsed command.

    Raises:
        CommandError: If the line is not a valid command.
    """
    tokens = line.split()
    if not tokens:
        raise CommandError("Empty command")

    if len(tokens) >= 3:
        x = _parse_integer(tokens[0])
        y = _parse_integer(tokens[1])
        action = Action.from_keyword(tokens[2])
        if action is None:
            raise CommandError(f"Unknown action: {tokens[2]!r}")
        if not action.needs_coordinates:
            return Command(action)
        if x < 1 or y < 1:
            raise CommandError(f"Coordinates start at 1, got ({x}, {y})")
        return Command(action, (x, y))

    action = Action.from_keyword(tokens[0])
    if action is None or action.needs_coordinates:
        raise CommandError(f"Expected 'reveal' or 'exit', got {tokens[0]!r}")
    return Command(action)


def is_valid_command(line: str) -> bool:
    """Check if a line parses as a command."""
    try:
        parse_command(line)
    except CommandError:
        return False
    return True
