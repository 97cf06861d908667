from __future__ import annotations

from typing import List, Optional

import numpy as np

from gostop.core import Board, Color, Stone, String, find_liberties, get_strings

EMPTY_LIBERTIES = -1


def board_to_array(board: Board) -> np.ndarray:
    """Return the board as an int8 array of shape (size, size), indexed [y, x]."""
    grid = np.zeros((board.size, board.size), dtype=np.int8)
    for stone in board:
        grid[stone.y, stone.x] = int(stone.color)
    return grid


def board_from_array(grid: np.ndarray, last_taker: Optional[Stone] = None) -> Board:
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        raise ValueError(f"Expected a square 2D array, got shape {grid.shape}.")
    stones = [
        Stone(int(x), int(y), Color(int(grid[y, x])))
        for y, x in np.argwhere(grid != Color.EMPTY)
    ]
    return Board(int(grid.shape[0]), stones, last_taker)


def string_labels(board: Board) -> np.ndarray:
    """Label each point with its string's 1-based index; 0 marks empty points."""
    labels = np.zeros((board.size, board.size), dtype=np.int32)
    for index, string in enumerate(get_strings(board), start=1):
        for stone in string:
            labels[stone.y, stone.x] = index
    return labels


def liberty_map(board: Board) -> np.ndarray:
    libs = np.full((board.size, board.size), EMPTY_LIBERTIES, dtype=np.int16)
    for string in get_strings(board):
        _, count = find_liberties(board, string)
        for stone in string:
            libs[stone.y, stone.x] = count
    return libs


def strings_in_atari(board: Board, color: Optional[Color] = None) -> List[String]:
    atari: List[String] = []
    for string in get_strings(board):
        if color is not None and string[0].color != color:
            continue
        if find_liberties(board, string)[1] == 1:
            atari.append(string)
    return atari
