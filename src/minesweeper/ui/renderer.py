"""
Text rendering of the menu and board screens.
"""
from typing import TYPE_CHECKING, List

import numpy as np

from ..game.board import Board
from ..game.cell import FLAGGED_OBSERVATION, HIDDEN_OBSERVATION, MINE_OBSERVATION
from ..game.session import Difficulty, Ended, GameState, SelectingDifficulty

if TYPE_CHECKING:
    from ..game.controller import GameController


LOST_BANNER = "Game Over! Click to play again."
WON_BANNER = "You Win! Click to play again."


class TextRenderer:
    """
    Builds printable frames from the controller's state.

    Board glyphs:
        . hidden
        F flagged
        * revealed mine
        (blank) revealed, no adjacent mines
        1-8 revealed with adjacent count
    """

    def __init__(self, show_coordinates: bool = True) -> None:
        self.show_coordinates = show_coordinates

    def render(self, controller: "GameController") -> str:
        """Render whichever screen the controller is on."""
        mode = controller.mode
        if isinstance(mode, SelectingDifficulty):
            return self.render_menu(mode)

        board = mode.board
        lines = [self.render_header(controller), ""]
        lines.extend(self._board_lines(board.get_observation()))
        if isinstance(mode, Ended):
            banner = WON_BANNER if mode.outcome is GameState.WON else LOST_BANNER
            lines.extend(["", banner])
        return "\n".join(lines)

    def render_header(self, controller: "GameController") -> str:
        board = controller.board
        return (
            f"Mines: {board.num_mines}  Flags: {controller.flags_placed}  "
            f"Revealed: {controller.cells_revealed}  Clicks: {controller.click_count}"
        )

    def render_menu(self, mode: SelectingDifficulty) -> str:
        lines = ["Select Difficulty", ""]
        for number, difficulty in enumerate(Difficulty, start=1):
            lines.append(f"  {number}. {difficulty.label}")

        entry = mode.entry
        if entry.active:
            lines.append("")
            lines.append(f"Rows: {entry.rows}  Cols: {entry.cols}  Mines: {entry.mines}")
            lines.append(f"Type {entry.editing}: {entry.text}")
        if mode.message:
            lines.extend(["", mode.message])
        return "\n".join(lines)

    def render_solution(self, board: Board) -> str:
        """Render the board with every cell uncovered, leaving it untouched."""
        solution = np.zeros((board.rows, board.cols), dtype=np.int8)
        for row, col, cell in board.cells():
            solution[row, col] = MINE_OBSERVATION if cell.is_mine else cell.adjacent_mines
        return "\n".join(self._board_lines(solution))

    def _board_lines(self, obs: np.ndarray) -> List[str]:
        rows, cols = obs.shape
        label_width = len(str(rows - 1))
        lines = []
        if self.show_coordinates:
            digits = "".join(f"{col % 10} " for col in range(cols))
            lines.append(" " * (label_width + 1) + digits.rstrip())

        for row in range(rows):
            row_str = "".join(f"{self._glyph(obs[row, col])} " for col in range(cols))
            if self.show_coordinates:
                row_str = f"{row:>{label_width}} " + row_str
            lines.append(row_str.rstrip())
        return lines

    @staticmethod
    def _glyph(val: int) -> str:
        if val == HIDDEN_OBSERVATION:
            return "."
        if val == FLAGGED_OBSERVATION:
            return "F"
        if val == MINE_OBSERVATION:
            return "*"
        if val == 0:
            return " "
        return str(val)
