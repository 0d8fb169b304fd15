"""
Display configuration for the TicTacToe game.
All the settings for the window, board image and opponent pacing.
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the game!
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    WINDOW_WIDTH = 820
    WINDOW_HEIGHT = 560
    BACKGROUND = '#1a1a2e'

    # ==================== BOARD IMAGE SETTINGS ====================
    # The board is a 3x3 grid drawn on a square image
    BOARD_SIZE = 3
    BOARD_IMAGE_SIZE = 480
    CELL_IMAGE_SIZE = BOARD_IMAGE_SIZE // BOARD_SIZE  # 160 pixels per cell

    # Colors are BGR (OpenCV order)
    BOARD_COLOR = (62, 33, 22)
    GRID_COLOR = (200, 200, 200)
    PLAYER_COLOR = (255, 212, 0)       # X
    OPPONENT_COLOR = (107, 107, 255)   # O
    WIN_LINE_COLOR = (136, 255, 0)
    HINT_COLOR = (110, 110, 110)       # Cell numbers on empty cells

    GRID_THICKNESS = 4
    MARK_THICKNESS = 10
    WIN_LINE_THICKNESS = 12

    # Space between a mark and its cell border
    MARK_MARGIN = CELL_IMAGE_SIZE // 5

    # ==================== GAME SETTINGS ====================
    DEFAULT_DIFFICULTY = "easy"

    # Pause before the opponent replies
    OPPONENT_DELAY_MS = 400

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
    SHOW_CELL_NUMBERS = True
