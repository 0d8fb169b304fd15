"""
Board renderer for the TicTacToe game.
Draws a board snapshot as an image for the UI.
"""

import cv2
import numpy as np
from typing import Optional, Tuple

from engine.board import Board, Mark
from .config import DisplayConfig


class BoardRenderer:
    """
    Renders a board to a BGR image with OpenCV.

    Cell i sits at row i // 3, column i % 3.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if None.
        """
        self.config = config or DisplayConfig()
        self.size = self.config.BOARD_IMAGE_SIZE
        self.cell_size = self.size // self.config.BOARD_SIZE

    def render(
        self,
        board: Board,
        highlight: Optional[Tuple[int, int, int]] = None
    ) -> np.ndarray:
        """
        Draw the board.

        Args:
            board: The board to draw.
            highlight: Winning line to strike through, if any.

        Returns:
            BGR image of shape (size, size, 3).
        """
        cfg = self.config
        image = np.zeros((self.size, self.size, 3), dtype=np.uint8)
        image[:] = cfg.BOARD_COLOR

        # Grid lines
        for i in range(1, cfg.BOARD_SIZE):
            offset = i * self.cell_size
            cv2.line(image, (offset, 0), (offset, self.size), cfg.GRID_COLOR, cfg.GRID_THICKNESS)
            cv2.line(image, (0, offset), (self.size, offset), cfg.GRID_COLOR, cfg.GRID_THICKNESS)

        for index, cell in enumerate(board):
            if cell == Mark.PLAYER:
                self._draw_x(image, index)
            elif cell == Mark.OPPONENT:
                self._draw_o(image, index)
            elif cfg.SHOW_CELL_NUMBERS:
                self._draw_hint(image, index)

        if highlight is not None:
            start = self.cell_center(highlight[0])
            end = self.cell_center(highlight[-1])
            cv2.line(image, start, end, cfg.WIN_LINE_COLOR, cfg.WIN_LINE_THICKNESS)
            cv2.circle(image, start, cfg.WIN_LINE_THICKNESS, cfg.WIN_LINE_COLOR, -1)
            cv2.circle(image, end, cfg.WIN_LINE_THICKNESS, cfg.WIN_LINE_COLOR, -1)

        return image

    def cell_center(self, index: int) -> Tuple[int, int]:
        """Pixel (x, y) of a cell's center."""
        row, col = divmod(index, self.config.BOARD_SIZE)
        return (
            col * self.cell_size + self.cell_size // 2,
            row * self.cell_size + self.cell_size // 2,
        )

    def cell_at(self, x: float, y: float) -> Optional[int]:
        """
        Map a pixel to a cell index.

        Args:
            x: Horizontal pixel position in the board image.
            y: Vertical pixel position in the board image.

        Returns:
            Cell index (0-8), or None if the pixel is off the board.
        """
        if not (0 <= x < self.size and 0 <= y < self.size):
            return None

        col = min(int(x) // self.cell_size, self.config.BOARD_SIZE - 1)
        row = min(int(y) // self.cell_size, self.config.BOARD_SIZE - 1)
        return row * self.config.BOARD_SIZE + col

    def _draw_x(self, image: np.ndarray, index: int):
        cx, cy = self.cell_center(index)
        half = self.cell_size // 2 - self.config.MARK_MARGIN
        color = self.config.PLAYER_COLOR
        thickness = self.config.MARK_THICKNESS

        cv2.line(image, (cx - half, cy - half), (cx + half, cy + half), color, thickness)
        cv2.line(image, (cx + half, cy - half), (cx - half, cy + half), color, thickness)

    def _draw_o(self, image: np.ndarray, index: int):
        cx, cy = self.cell_center(index)
        radius = self.cell_size // 2 - self.config.MARK_MARGIN
        cv2.circle(image, (cx, cy), radius, self.config.OPPONENT_COLOR, self.config.MARK_THICKNESS)

    def _draw_hint(self, image: np.ndarray, index: int):
        # Cells are numbered 1-9 for the player
        cx, cy = self.cell_center(index)
        cv2.putText(
            image, str(index + 1), (cx - 10, cy + 10),
            cv2.FONT_HERSHEY_SIMPLEX, 0.9, self.config.HINT_COLOR, 2
        )

    def to_rgb(self, image: np.ndarray) -> np.ndarray:
        """Convert a rendered BGR image to RGB (for PIL)."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
