"""
Tests for the display module: configuration and board rendering.

Usage:
    pytest test_display.py
"""

import numpy as np

from display import DisplayConfig, BoardRenderer
from engine.board import empty_board, board_from_string
from engine.move_engine import Difficulty
from engine.outcome import winning_line


class PlainConfig(DisplayConfig):
    SHOW_CELL_NUMBERS = False


def pixel(image, point):
    x, y = point
    return tuple(int(v) for v in image[y, x])


def test_default_difficulty_is_valid():
    assert Difficulty.from_name(DisplayConfig.DEFAULT_DIFFICULTY) == Difficulty.EASY


def test_render_shape():
    renderer = BoardRenderer()
    image = renderer.render(empty_board())

    size = DisplayConfig.BOARD_IMAGE_SIZE
    assert image.shape == (size, size, 3)
    assert image.dtype == np.uint8


def test_empty_board_is_background_and_grid():
    renderer = BoardRenderer(PlainConfig())
    image = renderer.render(empty_board())

    assert pixel(image, renderer.cell_center(4)) == PlainConfig.BOARD_COLOR
    assert pixel(image, (renderer.cell_size, 10)) == PlainConfig.GRID_COLOR


def test_marks_are_drawn():
    renderer = BoardRenderer(PlainConfig())
    image = renderer.render(board_from_string("X   O    "))

    # X crosses at the cell center, O is a ring around it
    assert pixel(image, renderer.cell_center(0)) == PlainConfig.PLAYER_COLOR
    cx, cy = renderer.cell_center(4)
    radius = renderer.cell_size // 2 - PlainConfig.MARK_MARGIN
    assert pixel(image, (cx, cy)) == PlainConfig.BOARD_COLOR
    assert pixel(image, (cx + radius, cy)) == PlainConfig.OPPONENT_COLOR


def test_winning_line_is_highlighted():
    renderer = BoardRenderer(PlainConfig())
    board = board_from_string("XXXOO    ")
    image = renderer.render(board, highlight=winning_line(board))

    assert pixel(image, renderer.cell_center(1)) == PlainConfig.WIN_LINE_COLOR


def test_render_does_not_change_board():
    board = board_from_string("XO       ")
    BoardRenderer().render(board)
    assert board == board_from_string("XO       ")


def test_cell_center():
    renderer = BoardRenderer()
    assert renderer.cell_center(0) == (80, 80)
    assert renderer.cell_center(4) == (240, 240)
    assert renderer.cell_center(5) == (400, 240)


def test_cell_at():
    renderer = BoardRenderer()
    assert renderer.cell_at(0, 0) == 0
    assert renderer.cell_at(170, 10) == 1
    assert renderer.cell_at(10, 170) == 3
    assert renderer.cell_at(479, 479) == 8
    assert renderer.cell_at(-1, 5) is None
    assert renderer.cell_at(480, 0) is None


def test_to_rgb_swaps_channels():
    renderer = BoardRenderer()
    image = renderer.render(empty_board())
    rgb = renderer.to_rgb(image)
    assert tuple(rgb[0, 0]) == tuple(image[0, 0][::-1])
