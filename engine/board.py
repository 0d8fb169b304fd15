"""
Board model for the TicTacToe engine.
A board is an immutable snapshot of 9 cells, indexed 0-8 row by row.
"""

from enum import Enum
from typing import Optional, List, Sequence, Tuple


class Mark(Enum):
    """What a cell can hold."""
    EMPTY = " "
    PLAYER = "X"      # Human, moves first
    OPPONENT = "O"    # Computer

    def opposite(self) -> "Mark":
        """Get the other side (EMPTY has no opposite and maps to itself)."""
        if self == Mark.PLAYER:
            return Mark.OPPONENT
        if self == Mark.OPPONENT:
            return Mark.PLAYER
        return Mark.EMPTY


# A board is a tuple of exactly 9 marks
Board = Tuple[Mark, ...]

BOARD_CELLS = 9

# All 8 winning lines, in the order they are checked
LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

CENTER = 4
CORNERS = (0, 2, 6, 8)

# Characters accepted by board_from_string
_CHAR_TO_MARK = {
    "X": Mark.PLAYER,
    "O": Mark.OPPONENT,
    " ": Mark.EMPTY,
    ".": Mark.EMPTY,
    "-": Mark.EMPTY,
    "_": Mark.EMPTY,
}


def empty_board() -> Board:
    """Create a board with every cell empty."""
    return (Mark.EMPTY,) * BOARD_CELLS


def board_from_string(text: str) -> Board:
    """
    Build a board from a 9 character string, e.g. "XX OO    ".

    Args:
        text: One character per cell, row by row. "X" and "O" are marks,
              space, ".", "-" and "_" are empty cells.

    Returns:
        The board.

    Raises:
        ValueError: If the string is not 9 characters or has an unknown character.
    """
    if len(text) != BOARD_CELLS:
        raise ValueError(f"Board string must have {BOARD_CELLS} characters, got {len(text)}")

    cells = []
    for char in text:
        mark = _CHAR_TO_MARK.get(char.upper())
        if mark is None:
            raise ValueError(f"Unknown board character {char!r}")
        cells.append(mark)
    return tuple(cells)


def board_from_rows(rows: Sequence[Sequence[Optional[str]]]) -> Board:
    """
    Build a board from a 3x3 grid of None / "X" / "O".

    Args:
        rows: Three rows of three cells each.

    Returns:
        The board.
    """
    if len(rows) != 3 or any(len(row) != 3 for row in rows):
        raise ValueError("Board grid must be 3x3")

    cells = []
    for row in rows:
        for value in row:
            cells.append(Mark.EMPTY if value is None else Mark(value))
    return tuple(cells)


def to_rows(board: Board) -> List[List[Optional[str]]]:
    """Convert a board to a 3x3 grid of None / "X" / "O"."""
    return [
        [None if cell == Mark.EMPTY else cell.value for cell in board[row * 3:row * 3 + 3]]
        for row in range(3)
    ]


def place(board: Board, index: int, mark: Mark) -> Board:
    """
    Return a new board with `mark` placed at `index`.

    The input board is left untouched. Any 9 item sequence is accepted;
    the result is always a tuple.

    Raises:
        ValueError: If the index is out of range, the cell is taken,
                    or `mark` is EMPTY.
    """
    if not 0 <= index < BOARD_CELLS:
        raise ValueError(f"Invalid cell {index}. Must be 0-{BOARD_CELLS - 1}.")
    if mark == Mark.EMPTY:
        raise ValueError("Cannot place an empty mark")
    if board[index] != Mark.EMPTY:
        raise ValueError(f"Cell {index} is already occupied by {board[index].value}")

    board = tuple(board)
    return board[:index] + (mark,) + board[index + 1:]


def empty_cells(board: Board) -> List[int]:
    """Get the indices of all empty cells, in index order."""
    return [index for index, cell in enumerate(board) if cell == Mark.EMPTY]


def is_full(board: Board) -> bool:
    return all(cell != Mark.EMPTY for cell in board)


def format_board(board: Board) -> str:
    """
    Render the board as a text grid for the console.

    Empty cells show their 1-9 number so the player knows what to type.
    """
    lines = ["┌───┬───┬───┐"]
    for row in range(3):
        row_str = "│"
        for col in range(3):
            index = row * 3 + col
            cell = board[index]
            symbol = str(index + 1) if cell == Mark.EMPTY else cell.value
            row_str += f" {symbol} │"
        lines.append(row_str)
        if row < 2:
            lines.append("├───┼───┼───┤")
    lines.append("└───┴───┴───┘")
    return "\n".join(lines)
