"""
Move engine for the TicTacToe opponent.
Picks the computer's next cell using random, rule-based or minimax play.
"""

import random
from enum import Enum
from typing import Optional, Protocol, Sequence, Tuple, TypeVar

from .board import Board, Mark, CENTER, CORNERS, empty_cells, place
from .outcome import GameOutcome, evaluate, winner

T = TypeVar("T")

# Minimax scores, from the opponent's point of view
WIN_SCORE = 10
LOSS_SCORE = -10
DRAW_SCORE = 0


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Random moves
    MEDIUM = "medium"    # Win, block, center, corners
    HARD = "hard"        # Full minimax

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """Parse a difficulty name such as "medium" (any case)."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty {name!r}. Choose from: {choices}") from None


class RandomSource(Protocol):
    """Anything that can pick an item from a sequence, like random.Random."""

    def choice(self, seq: Sequence[T]) -> T:
        ...


class MoveEngine:
    """
    Chooses moves for the opponent (O).

    - EASY picks any empty cell at random.
    - MEDIUM wins if it can, blocks the player's win, then takes the
      center, then the first free corner, then a random cell.
    - HARD searches the whole remaining game tree and never loses.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.HARD,
        rng: Optional[RandomSource] = None,
        verbose: bool = False
    ):
        """
        Initialize the move engine.

        Args:
            difficulty: Which strategy to use.
            rng: Random source for EASY and the MEDIUM fallback.
                 A fresh random.Random() is used if not given.
            verbose: Print a summary line after each HARD search.
        """
        self.difficulty = difficulty
        self.rng = rng if rng is not None else random.Random()
        self.verbose = verbose

        # Nodes visited by the last search (for debugging)
        self.positions_evaluated = 0

    def select_move(self, board: Board) -> Optional[int]:
        """
        Get the opponent's move for the current board.

        Args:
            board: Current board. Should have an empty cell and no winner.

        Returns:
            Index of the chosen cell, or None if the game is already over.
        """
        board = tuple(board)

        if evaluate(board).is_terminal:
            return None

        if self.difficulty == Difficulty.EASY:
            return self._easy_move(board)
        elif self.difficulty == Difficulty.MEDIUM:
            return self._medium_move(board)

        return self._hard_move(board)

    def _easy_move(self, board: Board) -> Optional[int]:
        cells = empty_cells(board)
        return self.rng.choice(cells) if cells else None

    def _medium_move(self, board: Board) -> Optional[int]:
        # Win if possible
        move = find_winning_move(board, Mark.OPPONENT)
        if move is not None:
            return move

        # Block the player's win
        move = find_winning_move(board, Mark.PLAYER)
        if move is not None:
            return move

        if board[CENTER] == Mark.EMPTY:
            return CENTER

        for corner in CORNERS:
            if board[corner] == Mark.EMPTY:
                return corner

        return self._easy_move(board)

    def _hard_move(self, board: Board) -> Optional[int]:
        score, move = self.search(board, Mark.OPPONENT)

        if self.verbose:
            print(f"AI evaluated {self.positions_evaluated} positions. Best move: {move} (score: {score})")

        return move

    def search(self, board: Board, mover: Mark) -> Tuple[int, Optional[int]]:
        """
        Run a full minimax search for `mover`.

        Args:
            board: Position to search from.
            mover: Side to move. OPPONENT maximizes, PLAYER minimizes.

        Returns:
            (score, move). Move is None when the position is already over.

        Raises:
            ValueError: If `mover` is EMPTY.
        """
        if mover == Mark.EMPTY:
            raise ValueError("Search needs a side to move, not an empty mark")

        self.positions_evaluated = 0
        return self._minimax(tuple(board), mover)

    def _minimax(self, board: Board, mover: Mark) -> Tuple[int, Optional[int]]:
        """
        Plain minimax, no pruning and no depth discount.

        Ties keep the lowest index, since a move only replaces the current
        best when it is strictly better.
        """
        self.positions_evaluated += 1

        outcome = evaluate(board)
        if outcome == GameOutcome.PLAYER_WINS:
            return LOSS_SCORE, None
        elif outcome == GameOutcome.OPPONENT_WINS:
            return WIN_SCORE, None

        moves = empty_cells(board)
        if not moves:
            return DRAW_SCORE, None

        maximizing = mover == Mark.OPPONENT
        best_score = float('-inf') if maximizing else float('inf')
        best_move = None

        for index in moves:
            score, _ = self._minimax(place(board, index, mover), mover.opposite())

            if (maximizing and score > best_score) or (not maximizing and score < best_score):
                best_score = score
                best_move = index

        return best_score, best_move


def find_winning_move(board: Board, mark: Mark) -> Optional[int]:
    """
    Find a cell that completes a line for `mark` right away.

    Args:
        board: Current board.
        mark: The side looking for a win.

    Returns:
        The lowest such index, or None.
    """
    for index in empty_cells(board):
        if winner(place(board, index, mark)) == mark:
            return index
    return None


def select_move(
    board: Board,
    difficulty: Difficulty,
    rng: Optional[RandomSource] = None
) -> Optional[int]:
    """Pick the opponent's next cell for `board` at the given difficulty."""
    return MoveEngine(difficulty, rng).select_move(board)


def best_move(board: Board, mover: Mark) -> Optional[int]:
    """
    Get the minimax move for either side (None if the game is over).

    Raises:
        ValueError: If `mover` is EMPTY.
    """
    return MoveEngine(Difficulty.HARD).search(board, mover)[1]
