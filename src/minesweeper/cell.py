"""
Cell module for Minesweeper game.

Represents individual cells of the minefield: what they hold
(nothing, a mine or a count of neighbouring mines) and whether the
player has explored or flagged them.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union


# ============================================================================
# Cell Content
# ============================================================================

class Content(Enum):
    """Cell contents that carry no count."""

    EMPTY = "/"
    MINE = "X"

    @property
    def glyph(self) -> str:
        return self.value


@dataclass(frozen=True)
class AdjacentCount:
    """
    Content of a safe cell bordered by at least one mine.

    Attributes:
        mines: Number of mines in the 8-neighbourhood (1-8).
    """

    mines: int

    def __post_init__(self) -> None:
        if not 1 <= self.mines <= 8:
            raise ValueError(
                f"Adjacent mine count must be between 1 and 8, got {self.mines}"
            )

    @property
    def glyph(self) -> str:
        return str(self.mines)

    def increased(self) -> "AdjacentCount":
        """Return the count with one more neighbouring mine."""
        return AdjacentCount(self.mines + 1)


CellContent = Union[Content, AdjacentCount]


def content_glyph(content: CellContent) -> str:
    """Display character for a cell content."""
    if isinstance(content, (Content, AdjacentCount)):
        return content.glyph
    raise TypeError(f"Unknown cell content: {content!r}")


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        content: Empty, a mine, or the adjacent mine count.
        explored: Whether the cell has been opened. Never reset.
        flagged: Whether the player marked the cell as a suspected mine.
    """

    content: CellContent = Content.EMPTY
    explored: bool = False
    flagged: bool = False

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.content is Content.MINE

    @property
    def adjacent_mines(self) -> int:
        """Count of neighbouring mines, 0 for empty cells and mines."""
        if isinstance(self.content, AdjacentCount):
            return self.content.mines
        return 0

    def explore(self) -> bool:
        """
        Explore this cell, dropping any flag on it.

        Returns:
            True if the cell was unexplored before the call.
        """
        if self.explored:
            return False
        self.explored = True
        self.flagged = False
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is explored.
        """
        if self.explored:
            return False
        self.flagged = not self.flagged
        return True

    def glyph(self, reveal_all: bool = False) -> str:
        """
        Character used to draw this cell.

        Args:
            reveal_all: Show the true content whatever the cell state.

        Returns:
            '.' unexplored, '*' flagged, otherwise the content glyph
            ('X' mine, '/' empty, '1'-'8' adjacent count).
        """
        if reveal_all or self.explored:
            return content_glyph(self.content)
        if self.flagged:
            return "*"
        return "."
