from __future__ import annotations

from typing import Iterable, Set

from gostop.core.state import Board, Color, Point, Stone


class BoardDataError(ValueError):
    pass


def _check_stone(size: int, stone: Stone) -> None:
    if not (0 <= stone.x < size and 0 <= stone.y < size):
        raise BoardDataError(f"stone at {stone.point} is outside a {size}x{size} board")
    if stone.color == Color.EMPTY:
        raise BoardDataError(f"stone at {stone.point} has no player color")


def validate_stones(size: int, stones: Iterable[Stone]) -> None:
    if size <= 0:
        raise BoardDataError("board size must be positive")
    seen: Set[Point] = set()
    for stone in stones:
        _check_stone(size, stone)
        if stone.point in seen:
            raise BoardDataError(f"more than one stone at {stone.point}")
        seen.add(stone.point)


def validate_board(board: Board) -> None:
    validate_stones(board.size, board)
    taker = board.last_taker
    if taker is not None and not board.in_bounds(taker.x, taker.y):
        raise BoardDataError(f"last taker at {taker.point} is outside the board")


def validate_placement(board: Board, stone: Stone) -> None:
    """Check a move against the board as it was before the move."""
    _check_stone(board.size, stone)
    if board.is_occupied(stone.x, stone.y):
        raise BoardDataError(f"point {stone.point} is already occupied")
