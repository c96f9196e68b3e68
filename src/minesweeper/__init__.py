"""
Minesweeper game module.

Provides the minefield engine, command parsing and console rendering.
"""
from .cell import AdjacentCount, Cell, CellContent, Content
from .board import (
    Board,
    BoardConfig,
    GameOutcome,
    OutOfBoundsError,
    TurnResult,
)
from .commands import Action, Command, CommandError, parse_command
from .display import render_board

__all__ = [
    "AdjacentCount",
    "Cell",
    "CellContent",
    "Content",
    "Board",
    "BoardConfig",
    "GameOutcome",
    "OutOfBoundsError",
    "TurnResult",
    "Action",
    "Command",
    "CommandError",
    "parse_command",
    "render_board",
]
