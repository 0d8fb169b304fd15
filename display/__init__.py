"""
Display module for the TicTacToe game.
Handles display settings and drawing the board.
"""

from .config import DisplayConfig
from .board_renderer import BoardRenderer
