"""
Game session for TicTacToe.
Sequences turns between the player and the engine-driven opponent.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .board import Board, Mark, empty_board, place
from .outcome import GameOutcome, evaluate
from .move_engine import Difficulty, MoveEngine, RandomSource
from .move_validator import MoveValidator, ValidationResult


class TurnState(Enum):
    """Where the game is in its turn cycle."""
    PLAYER_TURN = "player_turn"
    OPPONENT_TURN = "opponent_turn"
    PLAYER_WON = "player_won"
    OPPONENT_WON = "opponent_won"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self in (TurnState.PLAYER_WON, TurnState.OPPONENT_WON, TurnState.DRAW)


# Terminal outcome -> state the game ends in
_END_STATES = {
    GameOutcome.PLAYER_WINS: TurnState.PLAYER_WON,
    GameOutcome.OPPONENT_WINS: TurnState.OPPONENT_WON,
    GameOutcome.DRAW: TurnState.DRAW,
}

STATUS_MESSAGES = {
    TurnState.PLAYER_TURN: "Your Turn (X)",
    TurnState.OPPONENT_TURN: "Opponent is thinking...",
    TurnState.PLAYER_WON: "Congratulations, you won!",
    TurnState.OPPONENT_WON: "You lost the game",
    TurnState.DRAW: "It's a tie!",
}


@dataclass
class Move:
    """A move in the game."""
    mark: Mark       # Who made the move
    index: int       # Cell (0-8)


@dataclass
class Scoreboard:
    """Results of finished games in this session."""
    wins: int = 0
    losses: int = 0
    draws: int = 0

    def record(self, outcome: GameOutcome):
        """Count a finished game. IN_PROGRESS is ignored."""
        if outcome == GameOutcome.PLAYER_WINS:
            self.wins += 1
        elif outcome == GameOutcome.OPPONENT_WINS:
            self.losses += 1
        elif outcome == GameOutcome.DRAW:
            self.draws += 1


class GameSession:
    """
    One game against the computer, plus the score across restarts.

    Game flow:
    1. Player (X) picks an empty cell
    2. If the game is not over, the opponent (O) replies via the MoveEngine
    3. Repeat until someone wins or the board is full

    The board is replaced by a new snapshot on every move.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.EASY,
        rng: Optional[RandomSource] = None,
        verbose: bool = False
    ):
        """
        Initialize a session.

        Args:
            difficulty: Opponent difficulty for this game.
            rng: Random source handed to the MoveEngine.
            verbose: Let the engine print search summaries.
        """
        self.engine = MoveEngine(difficulty, rng, verbose)
        self.validator = MoveValidator()
        self.scores = Scoreboard()

        self.board: Board = empty_board()
        self.state = TurnState.PLAYER_TURN
        self.moves: List[Move] = []

    @property
    def difficulty(self) -> Difficulty:
        return self.engine.difficulty

    @property
    def outcome(self) -> GameOutcome:
        """Outcome of the current board (always recomputed)."""
        return evaluate(self.board)

    @property
    def is_game_over(self) -> bool:
        return self.state.is_terminal

    @property
    def status_message(self) -> str:
        return STATUS_MESSAGES[self.state]

    def reset(self):
        """Start a new game with an empty board. Scores are kept."""
        self.board = empty_board()
        self.state = TurnState.PLAYER_TURN
        self.moves = []

    def set_difficulty(self, difficulty: Difficulty):
        """Change difficulty. This always restarts the game."""
        self.engine.difficulty = difficulty
        self.reset()

    def play_player_move(self, index: int) -> ValidationResult:
        """
        Place the player's mark.

        Args:
            index: Cell to play (0-8).

        Returns:
            ValidationResult. The board is unchanged when it is not valid.
        """
        if self.state != TurnState.PLAYER_TURN:
            message = "Game is already over!" if self.is_game_over else "It's not your turn!"
            return ValidationResult(is_valid=False, error_message=message)

        result = self.validator.validate_move(self.board, index)
        if not result.is_valid:
            return result

        self._apply(index, Mark.PLAYER)
        return result

    def play_opponent_move(self) -> Optional[int]:
        """
        Let the engine play for the opponent.

        Returns:
            The cell played, or None if it was not the opponent's turn.
        """
        if self.state != TurnState.OPPONENT_TURN:
            return None

        index = self.engine.select_move(self.board)
        if index is None:
            return None

        self._apply(index, Mark.OPPONENT)
        return index

    def play_turn(self, index: int) -> ValidationResult:
        """Play the player's move and, if the game goes on, the opponent's reply."""
        result = self.play_player_move(index)
        if result.is_valid:
            self.play_opponent_move()
        return result

    def _apply(self, index: int, mark: Mark):
        self.board = place(self.board, index, mark)
        self.moves.append(Move(mark=mark, index=index))

        outcome = evaluate(self.board)
        if outcome.is_terminal:
            self.state = _END_STATES[outcome]
            self.scores.record(outcome)
        elif mark == Mark.PLAYER:
            self.state = TurnState.OPPONENT_TURN
        else:
            self.state = TurnState.PLAYER_TURN
