"""
TicTacToe engine.
Board model, outcome evaluation, and the computer opponent's move selection.
No rendering or I/O lives here.
"""

__version__ = "1.0.0"

from .board import Board, Mark, LINES, empty_board, board_from_string, place, empty_cells
from .outcome import GameOutcome, evaluate, winner, winning_line
from .move_engine import Difficulty, MoveEngine, select_move, best_move
from .move_validator import MoveValidator, ValidationResult
from .game_session import GameSession, TurnState, Scoreboard
