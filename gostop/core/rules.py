"""Capture and self-capture rules for a single stone placement.

The rules follow the British Go Association introduction: a string with no
liberties is removed, and a placement that leaves only the mover's own string
without liberties is suicidal.
"""

from __future__ import annotations

from typing import List, Set, Tuple

from gostop.logger import logger

from .state import Board, MoveRecord, Point, Stone, String, reading_order

# up, down, left, right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))


class SelfCaptureError(ValueError):
    def __init__(self, stone: Stone) -> None:
        super().__init__("Move is suicidal")
        self.stone = stone


def neighbors(board: Board, stone: Stone) -> List[Stone]:
    """Return the in-bounds neighbours of ``stone``, empty points as empty stones."""
    resolved: List[Stone] = []
    for dx, dy in DIRECTIONS:
        x, y = stone.x + dx, stone.y + dy
        if board.in_bounds(x, y):
            resolved.append(board.stone_at(x, y))
    return resolved


def get_string(board: Board, stone: Stone) -> String:
    stack = [stone]
    seen: Set[Point] = set()
    members: List[Stone] = []
    while stack:
        current = stack.pop()
        if current.point in seen or current.color != stone.color:
            continue
        seen.add(current.point)
        members.append(current)
        stack.extend(neighbors(board, current))
    return tuple(sorted(members, key=reading_order))


def get_strings(board: Board) -> List[String]:
    strings: List[String] = []
    assigned: Set[Point] = set()
    for stone in board:
        if stone.point in assigned:
            continue
        string = get_string(board, stone)
        assigned.update(member.point for member in string)
        strings.append(string)
    return strings


def find_liberties(board: Board, string: String) -> Tuple[Tuple[Stone, ...], int]:
    liberties: List[Stone] = []
    seen: Set[Point] = set()
    for stone in string:
        for neighbor in neighbors(board, stone):
            if neighbor.is_empty and neighbor.point not in seen:
                seen.add(neighbor.point)
                liberties.append(neighbor)
    return tuple(liberties), len(liberties)


def evaluate(board: Board, stone: Stone) -> List[String]:
    """Return the strings to remove after ``stone`` was placed on ``board``.

    ``board`` must already contain ``stone``. Raises ``SelfCaptureError`` when
    the only string left without liberties is the one holding ``stone``. When
    opponent strings are captured as well, the mover's string is kept since
    captures are resolved before the mover's own liberties are counted.
    """
    strings = get_strings(board)
    to_remove = [string for string in strings if find_liberties(board, string)[1] == 0]
    logger.debug(
        "Evaluating %s: %d strings, %d without liberties", stone, len(strings), len(to_remove)
    )

    if len(to_remove) == 1 and stone in to_remove[0]:
        logger.debug("Rejecting suicidal move at %s", stone.point)
        raise SelfCaptureError(stone)
    if len(to_remove) > 1:
        to_remove = [string for string in to_remove if stone not in string]
    return to_remove


def apply_stone(board: Board, stone: Stone, *, in_place: bool = False) -> Tuple[Board, MoveRecord]:
    """Place ``stone``, remove whatever it captures and record the taker.

    The input board is left untouched on ``SelfCaptureError``, even with
    ``in_place=True``.
    """
    candidate = board.copy()
    candidate.place(stone)
    captured = evaluate(candidate, stone)

    target = board if in_place else candidate
    if in_place:
        target.place(stone)
    for string in captured:
        target.remove(string)
    if captured:
        target.last_taker = stone

    record = MoveRecord(stone=stone, captured=tuple(captured))
    if captured:
        logger.debug("%s captured %d stones", stone, record.captured_count)
    return target, record
