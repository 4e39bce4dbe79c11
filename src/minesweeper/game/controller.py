"""
Game controller for Minesweeper.

Translates pointer clicks and key presses into board operations, keeps the
session counters shown in the header and moves between the menu, playing
and finished modes.
"""
import logging
from enum import Enum
from typing import Optional

import numpy as np

from ..ui.layout import ScreenLayout
from .board import (
    Board,
    BoardConfig,
    ConfigurationError,
    RandomSource,
    RevealOutcome,
)
from .session import (
    Difficulty,
    Ended,
    GameState,
    Mode,
    Playing,
    SelectingDifficulty,
)

logger = logging.getLogger(__name__)


class MouseButton(Enum):
    """Pointer buttons understood by the controller."""

    LEFT = "LeftButton"
    RIGHT = "RightButton"


# ============================================================================
# Game Controller
# ============================================================================

class GameController:
    """
    Drives one player's sessions.

    A single random stream is shared by every board the controller builds,
    so a seeded controller replays the same sequence of rounds.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        layout: Optional[ScreenLayout] = None,
    ) -> None:
        """
        Initialize the controller.

        Args:
            config: Start playing this board right away instead of showing
                the difficulty menu.
            seed: Random seed for reproducible mine layouts.
            rng: Random source to use instead of a seeded generator.
            layout: Pixel geometry used to interpret clicks.
        """
        self.layout = layout or ScreenLayout()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.mode: Mode = SelectingDifficulty()
        self._reset_counters()

        if config is not None:
            self.start_round(config)

    # ========================================================================
    # Round Management
    # ========================================================================

    def _reset_counters(self) -> None:
        self.flags_placed = 0
        self.cells_revealed = 0
        self.click_count = 0

    def start_round(self, config: BoardConfig) -> Board:
        """Build a fresh board and start playing it."""
        board = Board(config, rng=self.rng)
        self.mode = Playing(board)
        self._reset_counters()
        logger.debug("Started round on %dx%d board", config.rows, config.cols)
        return board

    def restart(self) -> Optional[Board]:
        """Start a new round with the current board's dimensions."""
        if self.board is None:
            return None
        return self.start_round(self.board.config)

    def return_to_menu(self) -> None:
        """Drop the current board and show the difficulty menu."""
        self.mode = SelectingDifficulty()
        self._reset_counters()

    def select_difficulty(self, difficulty: Difficulty) -> None:
        """Handle a menu choice."""
        if not isinstance(self.mode, SelectingDifficulty):
            return
        if difficulty.config is None:
            self.mode.entry.begin()
            self.mode.message = None
            return
        self.start_round(difficulty.config)

    # ========================================================================
    # Board Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell of the board in play.

        Hitting a mine uncovers every mine and ends the round as lost;
        uncovering the last safe cell ends it as won.
        """
        if not self._register_click(row, col):
            return RevealOutcome.NOOP

        board = self.mode.board
        outcome = board.reveal_at(row, col)
        if outcome is RevealOutcome.HIT_MINE:
            board.reveal_all_mines()
            self.mode = Ended(board, GameState.LOST)
            logger.info("Hit a mine at (%d, %d) after %d clicks", row, col, self.click_count)
        elif outcome is RevealOutcome.CONTINUE and board.check_win():
            self.mode = Ended(board, GameState.WON)
            logger.info("Cleared the board in %d clicks", self.click_count)

        self._refresh_counters(board)
        return outcome

    def flag(self, row: int, col: int) -> bool:
        """Toggle the flag on a cell of the board in play."""
        if not self._register_click(row, col):
            return False

        board = self.mode.board
        toggled = board.toggle_flag_at(row, col)
        self._refresh_counters(board)
        return toggled

    def _register_click(self, row: int, col: int) -> bool:
        """Count a click on the board; False if it cannot act on a cell."""
        if not isinstance(self.mode, Playing):
            return False
        if not self.mode.board.is_valid_position(row, col):
            return False
        self.click_count += 1
        return True

    def _refresh_counters(self, board: Board) -> None:
        self.cells_revealed = board.count_revealed()
        self.flags_placed = board.count_flagged()

    # ========================================================================
    # Input Events
    # ========================================================================

    def click(self, x: int, y: int, button: str) -> None:
        """
        Handle a pointer click.

        Args:
            x: Horizontal pixel position.
            y: Vertical pixel position.
            button: ``"LeftButton"`` or ``"RightButton"``; anything else is
                ignored.
        """
        try:
            pressed = MouseButton(button)
        except ValueError:
            return

        if isinstance(self.mode, SelectingDifficulty):
            index = self.layout.menu_button_at(x, y)
            if index is not None:
                self.select_difficulty(list(Difficulty)[index])
            return

        if isinstance(self.mode, Ended):
            self.return_to_menu()
            return

        board = self.mode.board
        position = self.layout.cell_at(x, y, board.rows, board.cols)
        if position is None:
            return
        if pressed is MouseButton.LEFT:
            self.reveal(*position)
        else:
            self.flag(*position)

    def key(self, token: str) -> None:
        """
        Handle a key press while typing a custom board size.

        Digits extend the current field, ``backspace`` removes the last
        digit and ``enter`` commits it. Committing the mine count starts
        the round, unless the values cannot form a board, in which case the
        menu shows why and entry starts over from the row count.
        """
        if not isinstance(self.mode, SelectingDifficulty):
            return
        entry = self.mode.entry
        try:
            config = entry.press(token)
        except ConfigurationError as exc:
            logger.warning(
                "Rejected custom board %dx%d with %d mines: %s",
                entry.rows, entry.cols, entry.mines, exc,
            )
            self.mode.message = str(exc)
            entry.begin()
            return
        if config is not None:
            self.start_round(config)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Optional[Board]:
        """Board being played or shown, or None on the menu."""
        if isinstance(self.mode, (Playing, Ended)):
            return self.mode.board
        return None

    @property
    def game_state(self) -> Optional[GameState]:
        """State of the current round, or None on the menu."""
        if isinstance(self.mode, Playing):
            return GameState.PLAYING
        if isinstance(self.mode, Ended):
            return self.mode.outcome
        return None

    @property
    def selecting_difficulty(self) -> bool:
        return isinstance(self.mode, SelectingDifficulty)

    @property
    def game_over(self) -> bool:
        return self.game_state is GameState.LOST

    @property
    def won(self) -> bool:
        return self.game_state is GameState.WON
