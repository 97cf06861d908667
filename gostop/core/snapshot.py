"""JSON-friendly encoding of boards, matching the game service's Board/Stone shape."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from gostop.validation.data_checks import BoardDataError, validate_stones

from .state import Board, Color, Stone, String


def stone_to_dict(stone: Stone) -> Dict[str, Any]:
    return {"x": stone.x, "y": stone.y, "color": stone.color.label}


def _as_int(value: Any, field: str) -> int:
    # bool is an int subclass; true must not decode as 1.
    if isinstance(value, bool):
        raise BoardDataError(f"{field} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise BoardDataError(f"{field} must be an integer, got {value!r}")


def stone_from_dict(data: Mapping[str, Any]) -> Stone:
    if not isinstance(data, Mapping):
        raise BoardDataError(f"stone must be an object, got {data!r}")
    try:
        x = _as_int(data["x"], "x")
        y = _as_int(data["y"], "y")
        color = Color.parse(data.get("color"))
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise BoardDataError(f"invalid stone {data!r}: {exc}") from exc
    return Stone(x, y, color)


def string_to_list(string: String) -> List[Dict[str, Any]]:
    return [stone_to_dict(stone) for stone in string]


def board_to_dict(board: Board) -> Dict[str, Any]:
    taker = board.last_taker
    return {
        "size": board.size,
        "lastTaker": stone_to_dict(taker) if taker is not None else None,
        "stones": [stone_to_dict(stone) for stone in board],
    }


def board_from_dict(data: Mapping[str, Any], *, default_size: int = 19) -> Board:
    """Decode a snapshot, rejecting duplicate points and out-of-bounds or colourless stones.

    These checks always run: a duplicate point cannot be detected once the
    stones are indexed by coordinate.
    """
    if not isinstance(data, Mapping):
        raise BoardDataError("snapshot must be an object")
    size = _as_int(data.get("size", default_size), "size")
    raw_stones = data.get("stones") or []
    if not isinstance(raw_stones, list):
        raise BoardDataError("stones must be a list")
    stones = [stone_from_dict(entry) for entry in raw_stones]
    validate_stones(size, stones)

    last_taker: Optional[Stone] = None
    if data.get("lastTaker"):
        last_taker = stone_from_dict(data["lastTaker"])
    return Board(size, stones, last_taker)
