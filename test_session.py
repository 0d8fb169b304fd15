"""
Tests for the game session (turn sequencing) and the move validator.

Usage:
    pytest test_session.py
"""

from engine.board import Mark, empty_board, board_from_string, empty_cells
from engine.game_session import GameSession, TurnState, Scoreboard
from engine.move_engine import Difficulty
from engine.move_validator import MoveValidator
from engine.outcome import GameOutcome


class LastChoice:
    def choice(self, seq):
        return seq[-1]


def play_all(session, moves):
    for index in moves:
        result = session.play_turn(index)
        assert result.is_valid, result.error_message


# ==================== VALIDATOR ====================

def test_validator_accepts_empty_cell():
    result = MoveValidator().validate_move(empty_board(), 4)
    assert result.is_valid
    assert result.error_message is None


def test_validator_rejects_bad_moves():
    validator = MoveValidator()
    board = board_from_string("X   O    ")

    result = validator.validate_move(board, 0)
    assert not result.is_valid
    assert result.error_message == "Cell 0 is already occupied by X"

    result = validator.validate_move(board, 9)
    assert not result.is_valid
    assert "Invalid cell 9" in result.error_message

    result = validator.validate_move(board_from_string("XXXOO    "), 8)
    assert result.error_message == "Game is already over!"


# ==================== SESSION ====================

def test_new_session():
    session = GameSession()
    assert session.difficulty == Difficulty.EASY
    assert session.state == TurnState.PLAYER_TURN
    assert session.board == empty_board()
    assert session.outcome == GameOutcome.IN_PROGRESS
    assert session.status_message == "Your Turn (X)"


def test_player_move_then_opponent_reply():
    session = GameSession(Difficulty.MEDIUM)

    result = session.play_player_move(0)
    assert result.is_valid
    assert session.state == TurnState.OPPONENT_TURN
    assert session.board[0] == Mark.PLAYER

    # Player cannot move twice
    result = session.play_player_move(1)
    assert not result.is_valid
    assert result.error_message == "It's not your turn!"

    assert session.play_opponent_move() == 4
    assert session.state == TurnState.PLAYER_TURN
    assert [(m.mark, m.index) for m in session.moves] == [(Mark.PLAYER, 0), (Mark.OPPONENT, 4)]


def test_opponent_does_not_move_out_of_turn():
    session = GameSession()
    assert session.play_opponent_move() is None
    assert session.board == empty_board()


def test_rejected_move_leaves_board_unchanged():
    session = GameSession(Difficulty.MEDIUM)
    play_all(session, [0])
    board = session.board

    result = session.play_turn(4)
    assert not result.is_valid
    assert session.board is board
    assert session.state == TurnState.PLAYER_TURN


def test_player_wins():
    session = GameSession(Difficulty.EASY, rng=LastChoice())
    play_all(session, [0, 1, 2])

    assert session.board == board_from_string("XXX    OO")
    assert session.state == TurnState.PLAYER_WON
    assert session.outcome == GameOutcome.PLAYER_WINS
    assert session.status_message == "Congratulations, you won!"
    assert session.scores == Scoreboard(wins=1)

    result = session.play_player_move(3)
    assert result.error_message == "Game is already over!"
    assert session.play_opponent_move() is None
    assert session.scores.wins == 1


def test_opponent_wins():
    session = GameSession(Difficulty.MEDIUM)
    play_all(session, [0, 1, 3])

    assert session.board == board_from_string("XXOXO O  ")
    assert session.state == TurnState.OPPONENT_WON
    assert session.status_message == "You lost the game"
    assert session.scores == Scoreboard(losses=1)


def test_draw():
    session = GameSession(Difficulty.MEDIUM)
    play_all(session, [4, 8, 1, 3, 6])

    assert session.board == board_from_string("OXOXXOXOX")
    assert session.state == TurnState.DRAW
    assert session.outcome == GameOutcome.DRAW
    assert session.status_message == "It's a tie!"
    assert session.scores == Scoreboard(draws=1)


def test_hard_session_never_loses_to_simple_player():
    session = GameSession(Difficulty.HARD)

    for _ in range(5):
        if session.is_game_over:
            break
        play_all(session, [empty_cells(session.board)[-1]])

    assert session.is_game_over
    assert session.state != TurnState.PLAYER_WON
    assert session.scores.wins == 0


def test_state_always_matches_outcome():
    session = GameSession(Difficulty.EASY, rng=LastChoice())
    expected = {
        GameOutcome.PLAYER_WINS: TurnState.PLAYER_WON,
        GameOutcome.OPPONENT_WINS: TurnState.OPPONENT_WON,
        GameOutcome.DRAW: TurnState.DRAW,
    }

    while not session.is_game_over:
        play_all(session, [empty_cells(session.board)[0]])
        if session.outcome.is_terminal:
            assert session.state == expected[session.outcome]
        else:
            assert session.state == TurnState.PLAYER_TURN


def test_reset_keeps_scores():
    session = GameSession(Difficulty.EASY, rng=LastChoice())
    play_all(session, [0, 1, 2])

    session.reset()
    assert session.board == empty_board()
    assert session.state == TurnState.PLAYER_TURN
    assert session.moves == []
    assert session.scores.wins == 1


def test_changing_difficulty_resets_board():
    session = GameSession(Difficulty.EASY)
    play_all(session, [4])

    session.set_difficulty(Difficulty.HARD)
    assert session.difficulty == Difficulty.HARD
    assert session.engine.difficulty == Difficulty.HARD
    assert session.board == empty_board()
    assert session.state == TurnState.PLAYER_TURN


def test_scoreboard_ignores_games_in_progress():
    scores = Scoreboard()
    scores.record(GameOutcome.IN_PROGRESS)
    scores.record(GameOutcome.DRAW)
    assert scores == Scoreboard(draws=1)
