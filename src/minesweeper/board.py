"""
Board module for Minesweeper game.

Implements the minefield engine: lazy mine placement, flood-fill
exploration, flag bookkeeping and game-over detection.
"""
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from .cell import AdjacentCount, Cell, Content
from .commands import Action, Command

Coords = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameOutcome(Enum):
    """Result of applying a command."""

    KEEP_GOING = "keep_going"
    WON = "won"
    LOST = "lost"
    EXITED = "exited"

    @property
    def terminal(self) -> bool:
        """Check if the game is over."""
        return self is not GameOutcome.KEEP_GOING


ALREADY_EXPLORED_NOTICE = "Field already explored!"


class OutOfBoundsError(ValueError):
    """Raised when a command targets a cell outside the board."""


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 1:
            raise ValueError("Number of mines must be positive")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class TurnResult:
    """
    What a command did.

    Attributes:
        outcome: Game outcome after the command.
        redisplay: Whether the board should be drawn again.
        notice: Informational message for the player, if any.
    """

    outcome: GameOutcome
    redisplay: bool = True
    notice: Optional[str] = None


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Cells are addressed with 0-based (x, y) coordinates, x being the
    column. Commands carry 1-based coordinates and are translated by
    apply_command.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _mine_positions: Set[Coords] = field(default_factory=set, repr=False)
    _flagged_positions: Dict[Coords, Cell] = field(
        default_factory=dict, repr=False
    )
    _mines_placed: int = 0
    _explored_count: int = 0
    _move_count: int = 0
    _outcome: GameOutcome = GameOutcome.KEEP_GOING

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    @classmethod
    def new(
        cls,
        num_mines: int,
        width: int = 9,
        height: int = 9,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Create a board, failing if num_mines is not in (0, width*height)."""
        config = BoardConfig(width, height, num_mines)
        return cls(config, rng if rng is not None else random.Random())

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_mines(self, safe: Coords) -> None:
        """
        Place every mine at random, never on the safe cell.

        Draws are retried until they land on a free cell, so this does
        not terminate on a board with no free cell left; BoardConfig
        guarantees at least one safe cell.

        Args:
            safe: (x, y) position to keep mine-free.
        """
        while self._mines_placed < self.config.num_mines:
            x = self.rng.randrange(self.config.width)
            y = self.rng.randrange(self.config.height)
            if (x, y) == safe or (x, y) in self._mine_positions:
                continue
            self._grid[y][x].content = Content.MINE
            self._mine_positions.add((x, y))
            self._surround_mine(x, y)
            self._mines_placed += 1

    def _surround_mine(self, x: int, y: int) -> None:
        """Bump the adjacent count of every non-mine neighbour."""
        for nx, ny in self.neighbors(x, y):
            cell = self._grid[ny][nx]
            if cell.is_mine:
                continue
            if isinstance(cell.content, AdjacentCount):
                cell.content = cell.content.increased()
            else:
                cell.content = AdjacentCount(1)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Coords]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.in_bounds(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _open_neighbors(self, x: int, y: int) -> List[Coords]:
        """Unexplored neighbors, or none at all if any neighbor is a mine."""
        open_neighbors = []
        for nx, ny in self.neighbors(x, y):
            cell = self._grid[ny][nx]
            if cell.is_mine:
                return []
            if not cell.explored:
                open_neighbors.append((nx, ny))
        return open_neighbors

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> None:
        """
        Explore from a safe cell, cascading through mine-free regions.

        A cell bordered by a mine is explored but stops the cascade.
        Mines are never explored here. On a board without mines yet,
        mines are placed first, away from (x, y).

        Args:
            x: Column to explore.
            y: Row to explore.
        """
        if self._mines_placed == 0:
            self._place_mines((x, y))
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            cell = self._grid[cy][cx]
            if cell.is_mine:
                continue
            if (cx, cy) != (x, y) and cell.explored:
                continue
            self._explore_cell(cx, cy)
            stack.extend(self._open_neighbors(cx, cy))

    def _explore_cell(self, x: int, y: int) -> None:
        if self._grid[y][x].explore():
            self._flagged_positions.pop((x, y), None)
            if not self._grid[y][x].is_mine:
                self._explored_count += 1

    def reveal_mines(self) -> None:
        """Explore every mine. Does not count toward explored cells."""
        for x, y in self._mine_positions:
            self._explore_cell(x, y)

    def flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            x: Column index.
            y: Row index.

        Returns:
            True if flag was toggled, False if the cell is explored.
        """
        cell = self._grid[y][x]
        if not cell.toggle_flag():
            return False
        if cell.flagged:
            self._flagged_positions[(x, y)] = cell
        else:
            del self._flagged_positions[(x, y)]
        return True

    def _clamp(self, coords: Coords) -> Coords:
        x, y = coords
        return (
            max(0, min(x - 1, self.config.width - 1)),
            max(0, min(y - 1, self.config.height - 1)),
        )

    def _free_target(self, coords: Coords) -> Coords:
        x, y = coords[0] - 1, coords[1] - 1
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"Cell ({coords[0]}, {coords[1]}) is outside the "
                f"{self.config.width}x{self.config.height} board"
            )
        return x, y

    def apply_command(self, command: Command) -> TurnResult:
        """
        Apply a player command and report what happened.

        Mines are placed on the first FREE command, away from its target.

        Args:
            command: Parsed command with 1-based coordinates.

        Returns:
            The turn result holding the game outcome.

        Raises:
            ValueError: If FREE or FLAG comes without coordinates.
            OutOfBoundsError: If FREE targets a cell outside the board.
        """
        action = command.action
        if action is Action.EXIT:
            return TurnResult(GameOutcome.EXITED, redisplay=False)
        if self._outcome.terminal:
            return TurnResult(self._outcome, redisplay=False)
        if action.needs_coordinates and command.coords is None:
            raise ValueError(f"{action.name} needs coordinates")

        if action is Action.REVEAL_ALL:
            self._move_count += 1
            self.reveal_mines()
            return TurnResult(GameOutcome.KEEP_GOING)

        if action is Action.FLAG:
            x, y = self._clamp(command.coords)
            self._move_count += 1
            if not self.flag(x, y):
                return TurnResult(
                    self._outcome,
                    redisplay=False,
                    notice=ALREADY_EXPLORED_NOTICE,
                )
        else:
            x, y = self._free_target(command.coords)
            self._move_count += 1
            if self._mines_placed == 0:
                self._place_mines((x, y))
            if self._grid[y][x].is_mine:
                self.reveal_mines()
            else:
                self.reveal(x, y)

        self._outcome = self._check_game_over(action, self._grid[y][x])
        return TurnResult(self._outcome)

    def _check_game_over(self, action: Action, target: Cell) -> GameOutcome:
        """Decide the outcome after a FREE or FLAG command."""
        if self._explored_count + self._mines_placed == self.config.total_cells:
            return GameOutcome.WON
        if self._all_mines_flagged():
            return GameOutcome.WON
        if action is Action.FREE and target.is_mine:
            return GameOutcome.LOST
        return GameOutcome.KEEP_GOING

    def _all_mines_flagged(self) -> bool:
        flagged = self._flagged_positions
        return (
            len(flagged) == self.config.num_mines
            and bool(flagged)
            and all(cell.is_mine for cell in flagged.values())
        )

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def outcome(self) -> GameOutcome:
        """Outcome of the last FREE or FLAG command."""
        return self._outcome

    @property
    def mines_total(self) -> int:
        return self.config.num_mines

    @property
    def mines_placed(self) -> int:
        return self._mines_placed

    @property
    def mine_positions(self) -> Set[Coords]:
        return set(self._mine_positions)

    @property
    def flagged_positions(self) -> Dict[Coords, Cell]:
        return dict(self._flagged_positions)

    @property
    def explored_count(self) -> int:
        return self._explored_count

    @property
    def move_count(self) -> int:
        return self._move_count

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(x, y):
            return None
        return self._grid[y][x]

    def get_snapshot(self, reveal_all: bool = False) -> np.ndarray:
        """
        Get board as an array of display characters.

        Args:
            reveal_all: Show every cell's true content.

        Returns:
            (height, width) array of one-character strings, indexed
            [y, x].
        """
        snapshot = np.full(
            (self.config.height, self.config.width), ".", dtype="<U1"
        )
        for y in range(self.config.height):
            for x in range(self.config.width):
                snapshot[y, x] = self._grid[y][x].glyph(reveal_all)
        return snapshot
