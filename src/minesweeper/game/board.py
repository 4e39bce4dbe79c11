"""
Board module for Minesweeper.

Implements the grid of cells with mine placement, neighbor wiring,
flood-fill revealing and the aggregate queries the controller needs to
decide wins and refresh its counters.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Optional, Protocol, Set, Tuple

import numpy as np

from .cell import Cell, Position

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class RevealOutcome(Enum):
    """Result of asking the board to reveal a cell."""

    NOOP = auto()
    CONTINUE = auto()
    HIT_MINE = auto()


class ConfigurationError(ValueError):
    """Raised when a board cannot be built from the requested dimensions."""


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in ``[0, high)``."""

    def integers(self, high: int) -> int:
        ...


@dataclass(frozen=True)
class BoardConfig:
    """
    Dimensions of a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place. At least one cell must stay safe.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.num_mines > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


# Preset difficulty levels
EASY = BoardConfig(9, 9, 10)
MEDIUM = BoardConfig(16, 16, 40)
HARD = BoardConfig(16, 30, 99)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    The grid is rebuilt from fresh cells every time :meth:`initialize`
    runs, so a board never carries state from one round into the next.
    Pass ``seed`` for a reproducible layout or ``rng`` to share one random
    stream between several boards.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    seed: Optional[int] = None
    rng: Optional[RandomSource] = field(default=None, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Build the grid after dataclass creation."""
        self.initialize()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def initialize(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
    ) -> "Board":
        """
        (Re)build the grid from scratch.

        Args:
            config: New dimensions; keeps the current ones if omitted.
            seed: Reseed the random source before drawing mines.
            rng: Replace the random source entirely.

        Returns:
            The board itself, to allow chaining.
        """
        if config is not None:
            self.config = config
        if rng is not None:
            self.rng = rng
        elif seed is not None:
            self.seed = seed
            self.rng = np.random.default_rng(seed)
        elif self.rng is None:
            self.rng = np.random.default_rng(self.seed)

        self._init_grid()
        self._place_mines()
        self._wire_neighbors()
        self._calculate_adjacent_mines()
        logger.debug(
            "Initialized %dx%d board with %d mines",
            self.config.rows, self.config.cols, self.config.num_mines,
        )
        return self

    def _init_grid(self) -> None:
        """Create an empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def _place_mines(self) -> None:
        """
        Mark ``num_mines`` distinct cells as mines.

        Each draw picks an index into the list of positions that are still
        free and removes it, so exactly ``num_mines`` draws are made no
        matter how dense the board is.
        """
        remaining = list(range(self.config.total_cells))
        for _ in range(self.config.num_mines):
            index = int(self.rng.integers(len(remaining)))
            position = remaining.pop(index)
            row, col = divmod(position, self.config.cols)
            self._grid[row][col].is_mine = True

    def _wire_neighbors(self) -> None:
        """Record the in-bounds neighbors of every cell."""
        for row, col, cell in self.cells():
            cell.neighbors = tuple(self._neighbor_positions(row, col))

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row, col, cell in self.cells():
            cell.count_neighbor_mines(self.neighbors_of(row, col))

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _neighbor_positions(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def neighbors_of(self, row: int, col: int) -> List[Cell]:
        """Cells adjacent to ``(row, col)``."""
        return [self._grid[r][c] for r, c in self._grid[row][col].neighbors]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_at(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal the cell at the given position.

        Out-of-bounds, already revealed and flagged cells are ignored. A
        cell with no adjacent mines opens its whole connected empty region
        together with the numbered cells bordering it.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            ``NOOP`` if nothing changed, ``HIT_MINE`` if the cell was a mine,
            ``CONTINUE`` otherwise.
        """
        cell = self.get_cell(row, col)
        if cell is None or not cell.reveal():
            return RevealOutcome.NOOP

        if cell.is_mine:
            return RevealOutcome.HIT_MINE

        if cell.cascades:
            self._flood_reveal(row, col)
        return RevealOutcome.CONTINUE

    def _flood_reveal(self, row: int, col: int) -> None:
        """Open neighbors outward from an empty cell using an explicit stack."""
        stack = [(row, col)]
        while stack:
            current_row, current_col = stack.pop()
            for neighbor_row, neighbor_col in self._grid[current_row][current_col].neighbors:
                neighbor = self._grid[neighbor_row][neighbor_col]
                # reveal() refuses revealed and flagged cells, so each cell
                # is pushed at most once
                if neighbor.reveal() and neighbor.cascades:
                    stack.append((neighbor_row, neighbor_col))

    def toggle_flag_at(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        cell = self.get_cell(row, col)
        if cell is None:
            return False
        return cell.toggle_flag()

    def reveal_all_mines(self) -> None:
        """Uncover every mine, leaving safe cells as they are."""
        for _, _, cell in self.cells():
            if cell.is_mine:
                cell.force_reveal()

    # ========================================================================
    # Queries (High-level)
    # ========================================================================

    def check_win(self) -> bool:
        """True once every non-mine cell is revealed. Flags are ignored."""
        return all(
            cell.is_revealed for _, _, cell in self.cells() if not cell.is_mine
        )

    def count_revealed(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.is_revealed)

    def count_flagged(self) -> int:
        return sum(1 for _, _, cell in self.cells() if cell.is_flagged)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over ``(row, col, cell)`` in row-major order."""
        for row, line in enumerate(self._grid):
            for col, cell in enumerate(line):
                yield row, col, cell

    def mine_positions(self) -> Set[Position]:
        """Positions of every mine on the board."""
        return {(row, col) for row, col, cell in self.cells() if cell.is_mine}

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    def get_observation(self) -> np.ndarray:
        """
        Get the visible board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row, col, cell in self.cells():
            obs[row, col] = cell.to_observation()
        return obs
