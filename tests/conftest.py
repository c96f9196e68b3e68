"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Iterable, Optional, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, Content


class ScriptedRandom(random.Random):
    """Random source that draws mine positions from a fixed list."""

    def __init__(self, positions: Iterable[Tuple[int, int]]) -> None:
        super().__init__(0)
        self._values = iter([value for pos in positions for value in pos])

    def randrange(self, start, stop=None, step=1):
        return next(self._values)


def make_board(
    width: int,
    height: int,
    mines: Iterable[Tuple[int, int]],
    draws: Optional[Iterable[Tuple[int, int]]] = None,
) -> Board:
    """
    Board whose mines land on the given 0-based (x, y) positions.

    draws lists the raw random picks when they should include rejected
    positions; it defaults to the mines themselves.
    """
    mines = list(mines)
    rng = ScriptedRandom(mines if draws is None else draws)
    return Board(BoardConfig(width, height, len(mines)), rng)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines and a fixed seed."""
    return Board.new(10, rng=random.Random(42))


@pytest.fixture
def board_factory():
    """Build boards with scripted mine layouts."""
    return make_board


@pytest.fixture
def walled_board() -> Board:
    """
    5x3 board with mines at (2, 0) and (2, 2).

    Opening the left edge explores the two left columns only.
    """
    return make_board(5, 3, [(2, 0), (2, 2)])


@pytest.fixture
def corner_board() -> Board:
    """3x3 board with a single mine in the bottom-right corner."""
    return make_board(3, 3, [(2, 2)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create an unexplored empty cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(content=Content.MINE)
