"""
Session modes for a Minesweeper round.

The controller is always in exactly one of three modes: choosing a
difficulty (optionally typing a custom board size), playing a board, or
looking at a finished board until the player clicks again.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Union

from .board import EASY as EASY_CONFIG
from .board import HARD as HARD_CONFIG
from .board import MEDIUM as MEDIUM_CONFIG
from .board import Board, BoardConfig


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a round."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Difficulty(Enum):
    """Menu choices, in the order they are shown."""

    EASY = ("Easy (9x9, 10)", EASY_CONFIG)
    MEDIUM = ("Medium (16x16, 40)", MEDIUM_CONFIG)
    HARD = ("Hard (30x16, 99)", HARD_CONFIG)
    CUSTOM = ("Custom", None)

    def __init__(self, label: str, config: Optional[BoardConfig]) -> None:
        self.label = label
        self.config = config


CUSTOM_FIELDS = ("rows", "cols", "mines")
BACKSPACE = "backspace"
ENTER = "enter"
DIGITS = "0123456789"


# ============================================================================
# Custom Board Entry
# ============================================================================

@dataclass
class CustomEntry:
    """
    Keyboard entry of a custom board size.

    Values are typed one field at a time (rows, then cols, then mines) and
    committed with ``enter``. The entry is inactive until the player picks
    the custom menu item.

    Attributes:
        rows: Last committed row count.
        cols: Last committed column count.
        mines: Last committed mine count.
        editing: Field currently being typed, or None while inactive.
        text: Digits typed so far for the current field.
    """

    rows: int = 10
    cols: int = 10
    mines: int = 10
    editing: Optional[str] = None
    text: str = ""

    @property
    def active(self) -> bool:
        return self.editing is not None

    def begin(self) -> None:
        """Start typing from the first field."""
        self.editing = CUSTOM_FIELDS[0]
        self.text = ""

    def press(self, key: str) -> Optional[BoardConfig]:
        """
        Feed one key token.

        Returns:
            The finished configuration once the mine count is committed,
            otherwise None.

        Raises:
            ConfigurationError: If the committed values cannot form a board.
        """
        if not self.active:
            return None
        if key == BACKSPACE:
            self.text = self.text[:-1]
            return None
        if key == ENTER:
            return self._commit()
        if len(key) == 1 and key in DIGITS:
            self.text += key
        return None

    def _commit(self) -> Optional[BoardConfig]:
        if not self.text:
            return None
        value = int(self.text)
        self.text = ""
        if self.editing == "rows":
            self.rows = value
            self.editing = "cols"
            return None
        if self.editing == "cols":
            self.cols = value
            self.editing = "mines"
            return None

        self.mines = value
        self.editing = None
        return BoardConfig(self.rows, self.cols, self.mines)


# ============================================================================
# Modes
# ============================================================================

@dataclass
class SelectingDifficulty:
    """Menu screen, with any pending custom entry and the last error."""

    entry: CustomEntry = field(default_factory=CustomEntry)
    message: Optional[str] = None


@dataclass
class Playing:
    """A round in progress."""

    board: Board


@dataclass
class Ended:
    """A finished round, kept on screen until the next click."""

    board: Board
    outcome: GameState


Mode = Union[SelectingDifficulty, Playing, Ended]
