"""
Cell module for Minesweeper.

A cell knows whether it holds a mine, whether the player has uncovered or
flagged it, how many of its neighbors are mines, and where those
neighbors sit on the grid.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Tuple

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Visible state of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()


HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single square of the board.

    Attributes:
        is_mine: Whether this cell contains a mine. Fixed once the board
            has placed its mines.
        adjacent_mines: Number of mine neighbors (0-8).
        state: Hidden, flagged or revealed.
        neighbors: Grid coordinates of the adjacent cells. The board owns
            the cells; a cell only refers to its neighbors by position.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN
    neighbors: Tuple[Position, ...] = ()

    def reveal(self) -> bool:
        """
        Uncover this cell.

        Returns:
            True if the cell changed to revealed, False if it was already
            revealed or is flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def force_reveal(self) -> None:
        """Uncover the cell even if it carries a flag."""
        self.state = CellState.REVEALED

    def toggle_flag(self) -> bool:
        """
        Place or remove a flag.

        Returns:
            True if the flag was toggled, False if the cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def count_neighbor_mines(self, neighbor_cells: Iterable["Cell"]) -> int:
        """
        Recompute ``adjacent_mines`` from the given neighbor cells.

        Must run after every mine on the board has been placed.
        """
        self.adjacent_mines = sum(1 for other in neighbor_cells if other.is_mine)
        return self.adjacent_mines

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    @property
    def cascades(self) -> bool:
        """Whether uncovering this cell should open its neighbors too."""
        return not self.is_mine and self.adjacent_mines == 0

    def to_observation(self) -> int:
        """
        Encode the visible state as a small integer.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_OBSERVATION
        if self.state == CellState.FLAGGED:
            return FLAGGED_OBSERVATION
        if self.is_mine:
            return MINE_OBSERVATION
        return self.adjacent_mines
