"""Array views over a board for renderers and bots."""

from .board_maps import (
    EMPTY_LIBERTIES,
    board_from_array,
    board_to_array,
    liberty_map,
    string_labels,
    strings_in_atari,
)

__all__ = [
    "EMPTY_LIBERTIES",
    "board_from_array",
    "board_to_array",
    "liberty_map",
    "string_labels",
    "strings_in_atari",
]
