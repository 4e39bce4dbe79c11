"""
Screen geometry for pointer input.

Maps raw click coordinates to board cells or menu buttons. The board is
drawn below a header strip and centered horizontally in a window that
never shrinks below a minimum size.
"""
from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ScreenLayout:
    """
    Pixel layout of the menu and board screens.

    Attributes:
        cell_size: Side of one square cell.
        header_height: Height of the counter strip above the board.
        min_width: Smallest board window width.
        min_height: Smallest board window height.
        menu_width: Width of the difficulty menu window.
        menu_height: Height of the difficulty menu window.
        button_width: Width of a menu button.
        button_height: Height of a menu button.
        button_centers: Vertical center of each menu button, top to bottom.
    """

    cell_size: int = 30
    header_height: int = 40
    min_width: int = 400
    min_height: int = 300
    menu_width: int = 500
    menu_height: int = 500
    button_width: int = 120
    button_height: int = 40
    button_centers: Tuple[int, ...] = (90, 140, 190, 240)

    def board_window(self, rows: int, cols: int) -> Tuple[int, int]:
        """Window ``(width, height)`` for a board of the given size."""
        width = max(cols * self.cell_size, self.min_width)
        height = max(rows * self.cell_size + self.header_height, self.min_height)
        return width, height

    def board_x_offset(self, rows: int, cols: int) -> int:
        """Left edge of the board inside its window."""
        width, _ = self.board_window(rows, cols)
        return (width - cols * self.cell_size) // 2

    def cell_at(self, x: int, y: int, rows: int, cols: int) -> Optional[Tuple[int, int]]:
        """
        Cell under a click.

        Returns:
            ``(row, col)``, or None when the click lands on the header or
            outside the board.
        """
        col = (x - self.board_x_offset(rows, cols)) // self.cell_size
        row = (y - self.header_height) // self.cell_size
        if 0 <= row < rows and 0 <= col < cols:
            return row, col
        return None

    def cell_center(self, row: int, col: int, rows: int, cols: int) -> Tuple[int, int]:
        """Pixel center of a cell, the inverse of :meth:`cell_at`."""
        x = self.board_x_offset(rows, cols) + col * self.cell_size + self.cell_size // 2
        y = self.header_height + row * self.cell_size + self.cell_size // 2
        return x, y

    def menu_button_at(self, x: int, y: int) -> Optional[int]:
        """Index of the menu button under a click, or None."""
        center_x = self.menu_width // 2
        half_width = self.button_width // 2
        half_height = self.button_height // 2
        if not center_x - half_width < x < center_x + half_width:
            return None
        for index, center_y in enumerate(self.button_centers):
            if center_y - half_height < y < center_y + half_height:
                return index
        return None

    def menu_button_center(self, index: int) -> Tuple[int, int]:
        return self.menu_width // 2, self.button_centers[index]
