"""
Outcome evaluator for the TicTacToe engine.
Checks if a side has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple

from .board import Board, Mark, LINES, is_full


class GameOutcome(Enum):
    """Result of a board, derived from the cells every time."""
    IN_PROGRESS = "in_progress"
    PLAYER_WINS = "player_wins"
    OPPONENT_WINS = "opponent_wins"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self != GameOutcome.IN_PROGRESS


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """
    Get the first complete line, if there is one.

    A line is complete when all 3 cells hold the same non-empty mark.
    Lines are checked in LINES order (rows, columns, diagonals).

    Args:
        board: The board to check.

    Returns:
        The line as an index triple, or None.
    """
    for line in LINES:
        a, b, c = line
        if board[a] != Mark.EMPTY and board[a] == board[b] == board[c]:
            return line
    return None


def winner(board: Board) -> Optional[Mark]:
    """Get the mark occupying the first complete line, or None."""
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def evaluate(board: Board) -> GameOutcome:
    """
    Evaluate a board.

    Works on any 9 cell board, legal or not. No side effects.

    Args:
        board: The board to evaluate.

    Returns:
        PLAYER_WINS / OPPONENT_WINS if a line is complete, DRAW if the
        board is full without a complete line, IN_PROGRESS otherwise.
    """
    mark = winner(board)

    if mark == Mark.PLAYER:
        return GameOutcome.PLAYER_WINS
    elif mark == Mark.OPPONENT:
        return GameOutcome.OPPONENT_WINS
    elif is_full(board):
        return GameOutcome.DRAW

    return GameOutcome.IN_PROGRESS
