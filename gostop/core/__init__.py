"""Core game logic for gostop."""

from .state import Board, Color, MoveRecord, Point, Stone, String, reading_order
from .rules import (
    DIRECTIONS,
    SelfCaptureError,
    apply_stone,
    evaluate,
    find_liberties,
    get_string,
    get_strings,
    neighbors,
)
from .snapshot import (
    board_from_dict,
    board_to_dict,
    stone_from_dict,
    stone_to_dict,
    string_to_list,
)

__all__ = [
    "Board",
    "Color",
    "MoveRecord",
    "Point",
    "Stone",
    "String",
    "DIRECTIONS",
    "SelfCaptureError",
    "apply_stone",
    "evaluate",
    "find_liberties",
    "get_string",
    "get_strings",
    "neighbors",
    "reading_order",
    "board_from_dict",
    "board_to_dict",
    "stone_from_dict",
    "stone_to_dict",
    "string_to_list",
]
