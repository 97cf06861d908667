from typing import Iterable, Set, Tuple

import numpy as np
import pytest

from gostop.analysis import board_from_array
from gostop.core import (
    Board,
    Color,
    SelfCaptureError,
    Stone,
    apply_stone,
    evaluate,
    find_liberties,
    get_string,
    get_strings,
    neighbors,
)

B = Color.BLACK
W = Color.WHITE


def make_board(size: int, stones: Iterable[Tuple[int, int, Color]]) -> Board:
    return Board(size, [Stone(x, y, color) for x, y, color in stones])


def place(board: Board, x: int, y: int, color: Color) -> Stone:
    stone = Stone(x, y, color)
    board.place(stone)
    return stone


def random_board(rng: np.random.Generator, size: int = 7) -> Board:
    grid = rng.integers(0, 3, size=(size, size)).astype(np.int8)
    return board_from_array(grid)


def test_neighbors_in_centre_resolve_stones_and_empties() -> None:
    board = make_board(5, [(2, 3, B), (1, 2, W)])
    result = neighbors(board, Stone(2, 2, B))

    assert result == [
        Stone(2, 3, B),
        Stone(2, 1, Color.EMPTY),
        Stone(1, 2, W),
        Stone(3, 2, Color.EMPTY),
    ]


@pytest.mark.parametrize(
    "x,y,expected",
    [
        (0, 0, {(0, 1), (1, 0)}),
        (4, 4, {(4, 3), (3, 4)}),
        (2, 0, {(2, 1), (1, 0), (3, 0)}),
        (0, 2, {(0, 3), (0, 1), (1, 2)}),
    ],
    ids=["corner_low", "corner_high", "bottom_edge", "left_edge"],
)
def test_neighbors_clipped_to_board(x, y, expected) -> None:
    board = Board(5)
    assert {stone.point for stone in neighbors(board, Stone(x, y, B))} == expected


def test_get_string_follows_same_colour_only() -> None:
    board = make_board(5, [(1, 1, B), (1, 2, B), (2, 2, B), (3, 2, W), (0, 0, B)])
    string = get_string(board, Stone(1, 1, B))

    assert string == (Stone(1, 1, B), Stone(1, 2, B), Stone(2, 2, B))


def test_get_string_is_sorted_by_row_then_column() -> None:
    board = make_board(5, [(3, 0, W), (2, 0, W), (2, 1, W), (1, 1, W)])
    string = get_string(board, Stone(2, 1, W))

    assert [stone.point for stone in string] == [(2, 0), (3, 0), (1, 1), (2, 1)]


def test_get_string_handles_board_filling_group() -> None:
    size = 19
    board = make_board(size, [(x, y, B) for x in range(size) for y in range(size)])
    string = get_string(board, Stone(0, 0, B))

    assert len(string) == size * size


def test_get_strings_partitions_board() -> None:
    rng = np.random.default_rng(7)
    for _ in range(25):
        board = random_board(rng)
        strings = get_strings(board)

        seen: Set[Tuple[int, int]] = set()
        for string in strings:
            assert len({stone.color for stone in string}) == 1
            points = {stone.point for stone in string}
            assert len(points) == len(string)
            assert not points & seen
            seen |= points
            assert list(string) == sorted(string, key=lambda s: (s.y, s.x))
        assert seen == {stone.point for stone in board}
        assert {stone for string in strings for stone in string} == set(board.stones)


def test_get_strings_members_are_connected() -> None:
    rng = np.random.default_rng(11)
    board = random_board(rng, size=9)
    for string in get_strings(board):
        points = {stone.point for stone in string}
        start = next(iter(points))
        reached = {start}
        stack = [start]
        while stack:
            x, y = stack.pop()
            for nxt in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
                if nxt in points and nxt not in reached:
                    reached.add(nxt)
                    stack.append(nxt)
        assert reached == points


def test_get_strings_is_repeatable() -> None:
    rng = np.random.default_rng(3)
    board = random_board(rng)
    assert get_strings(board) == get_strings(board)


def test_find_liberties_counts_distinct_points() -> None:
    board = make_board(5, [(1, 1, B), (2, 1, B)])
    liberties, count = find_liberties(board, get_string(board, Stone(1, 1, B)))

    assert count == 6
    assert len({stone.point for stone in liberties}) == 6
    assert all(stone.color == Color.EMPTY for stone in liberties)


def test_find_liberties_shared_point_counted_once() -> None:
    # (1, 1) touches both arms of the L-shaped string.
    board = make_board(3, [(0, 1, B), (0, 0, B), (1, 0, B)])
    liberties, count = find_liberties(board, get_string(board, Stone(0, 0, B)))

    assert {stone.point for stone in liberties} == {(0, 2), (1, 1), (2, 0)}
    assert count == 3


def test_liberties_shrink_when_opponent_fills_one() -> None:
    rng = np.random.default_rng(5)
    for _ in range(10):
        board = random_board(rng)
        for string in get_strings(board):
            liberties, before = find_liberties(board, string)
            if not liberties:
                continue
            target = liberties[0]
            board_after = board.copy()
            board_after.place(Stone(target.x, target.y, string[0].color.opponent()))
            _, after = find_liberties(board_after, string)
            assert after <= before


def test_liberties_grow_when_neighbour_removed() -> None:
    rng = np.random.default_rng(9)
    for _ in range(10):
        board = random_board(rng)
        for string in get_strings(board):
            _, before = find_liberties(board, string)
            members = {stone.point for stone in string}
            blockers = [
                n for stone in string for n in neighbors(board, stone)
                if not n.is_empty and n.point not in members
            ]
            if not blockers:
                continue
            board_after = board.copy()
            board_after.remove([blockers[0]])
            _, after = find_liberties(board_after, string)
            assert after >= before


def test_lone_stone_on_empty_board_captures_nothing() -> None:
    board = Board(5)
    stone = place(board, 2, 2, B)

    assert evaluate(board, stone) == []
    assert find_liberties(board, get_string(board, stone))[1] == 4


def test_corner_suicide_raises() -> None:
    board = make_board(5, [(0, 1, W), (1, 0, W)])
    stone = place(board, 0, 0, B)

    with pytest.raises(SelfCaptureError) as excinfo:
        evaluate(board, stone)
    assert excinfo.value.stone == stone
    assert str(excinfo.value) == "Move is suicidal"


def test_suicide_of_larger_group_raises() -> None:
    # Black (0, 0)-(1, 0) fills its last liberty at (2, 0).
    board = make_board(5, [(0, 0, B), (1, 0, B), (0, 1, W), (1, 1, W), (2, 1, W), (3, 0, W)])
    stone = place(board, 2, 0, B)

    with pytest.raises(SelfCaptureError):
        evaluate(board, stone)


def test_single_capture_returns_captured_string() -> None:
    board = make_board(5, [(3, 3, W), (3, 2, B), (2, 3, B), (4, 3, B)])
    stone = place(board, 3, 4, B)

    assert evaluate(board, stone) == [(Stone(3, 3, W),)]


def test_two_strings_captured_by_one_move() -> None:
    board = make_board(5, [(0, 0, W), (1, 0, B), (0, 2, W), (0, 3, B), (1, 2, B)])
    stone = place(board, 0, 1, B)

    removed = evaluate(board, stone)
    assert len(removed) == 2
    assert set(removed) == {(Stone(0, 0, W),), (Stone(0, 2, W),)}


def test_capture_takes_precedence_over_own_zero_liberties() -> None:
    board = make_board(5, [(0, 2, B), (1, 1, B), (2, 0, B), (0, 1, W), (1, 0, W)])
    stone = place(board, 0, 0, B)

    removed = evaluate(board, stone)
    assert len(removed) == 2
    assert all(stone not in string for string in removed)
    assert {string[0].color for string in removed} == {W}


def test_filling_own_eye_with_liberties_left_is_legal() -> None:
    board = make_board(5, [(1, 0, B), (0, 1, B), (1, 1, B)])
    stone = place(board, 0, 0, B)

    assert evaluate(board, stone) == []


def test_evaluate_does_not_mutate_board() -> None:
    board = make_board(5, [(3, 3, W), (3, 2, B), (2, 3, B), (4, 3, B)])
    stone = place(board, 3, 4, B)
    before = board.copy()

    evaluate(board, stone)
    assert board == before


def test_apply_stone_removes_captures_and_records_taker() -> None:
    board = make_board(5, [(3, 3, W), (3, 2, B), (2, 3, B), (4, 3, B)])
    stone = Stone(3, 4, B)

    next_board, record = apply_stone(board, stone)

    assert not next_board.is_occupied(3, 3)
    assert stone in next_board
    assert next_board.last_taker == stone
    assert record.captured == ((Stone(3, 3, W),),)
    assert record.captured_count == 1
    assert record.captured_points == ((3, 3),)
    # input board untouched
    assert board.is_occupied(3, 3)
    assert not board.is_occupied(3, 4)


def test_apply_stone_in_place() -> None:
    board = make_board(5, [(3, 3, W), (3, 2, B), (2, 3, B), (4, 3, B)])
    next_board, record = apply_stone(board, Stone(3, 4, B), in_place=True)

    assert next_board is board
    assert not board.is_occupied(3, 3)
    assert record.captured_count == 1


def test_apply_stone_keeps_last_taker_without_capture() -> None:
    taker = Stone(4, 4, W)
    board = Board(5, [taker], last_taker=taker)

    next_board, record = apply_stone(board, Stone(0, 0, B))
    assert record.captured == ()
    assert next_board.last_taker == taker


def test_apply_stone_suicide_leaves_board_unchanged() -> None:
    board = make_board(5, [(0, 1, W), (1, 0, W)])
    before = board.copy()

    with pytest.raises(SelfCaptureError):
        apply_stone(board, Stone(0, 0, B), in_place=True)
    assert board == before
