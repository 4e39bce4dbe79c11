"""
Minesweeper game module.

Provides core game logic including board management, cell state and the
controller that turns player input into board operations.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    ConfigurationError,
    RevealOutcome,
    EASY,
    MEDIUM,
    HARD,
)
from .session import (
    CustomEntry,
    Difficulty,
    Ended,
    GameState,
    Playing,
    SelectingDifficulty,
)
from .controller import GameController, MouseButton

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "ConfigurationError",
    "RevealOutcome",
    "EASY",
    "MEDIUM",
    "HARD",
    "CustomEntry",
    "Difficulty",
    "Ended",
    "GameState",
    "Playing",
    "SelectingDifficulty",
    "GameController",
    "MouseButton",
]
