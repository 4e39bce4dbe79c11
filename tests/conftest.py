"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper.game import Board, BoardConfig, Cell, GameController


class ScriptedRandom:
    """Random source that returns a fixed sequence of draws."""

    def __init__(self, *draws: int) -> None:
        self.draws = list(draws)
        self.bounds = []

    def integers(self, high: int) -> int:
        self.bounds.append(high)
        return self.draws.pop(0)


def board_with_mines(rows: int, cols: int, mines) -> Board:
    """
    Build a board whose mines sit exactly at the given positions.

    Each position is translated into the index the placement procedure
    would have to draw from the shrinking list of free positions.
    """
    remaining = list(range(rows * cols))
    draws = []
    for row, col in mines:
        index = remaining.index(row * cols + col)
        draws.append(index)
        remaining.pop(index)
    return Board(BoardConfig(rows, cols, len(draws)), rng=ScriptedRandom(*draws))


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board(seed=7)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_mine_board() -> Board:
    """
    5x5 board with a single mine in the bottom-right corner.

    Layout (row-major, * = mine):
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 0 0
        0 0 0 1 1
        0 0 0 1 *
    """
    return board_with_mines(5, 5, [(4, 4)])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board with a column of mines splitting it in two.

    Layout:
        0 2 * 2 0
        0 3 * 3 0
        0 3 * 3 0
        0 3 * 3 0
        0 2 * 2 0
    """
    return board_with_mines(5, 5, [(r, 2) for r in range(5)])


@pytest.fixture
def tiny_board() -> Board:
    """2x2 board with a single mine."""
    return Board(BoardConfig(2, 2, 1), seed=2)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def menu_controller() -> GameController:
    """Controller showing the difficulty menu."""
    return GameController(seed=11)


@pytest.fixture
def playing_controller() -> GameController:
    """Controller playing a 5x5 board whose only mine is at (4, 4)."""
    return GameController(BoardConfig(5, 5, 1), rng=ScriptedRandom(24))


@pytest.fixture
def walled_controller() -> GameController:
    """Controller playing the walled board (mines down column 2)."""
    draws = [2, 6, 10, 14, 18]
    return GameController(BoardConfig(5, 5, 5), rng=ScriptedRandom(*draws))
