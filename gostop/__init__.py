"""gostop: capture and self-capture rules for Go boards."""

from . import analysis, core, validation
from .config import EvaluatorConfig, load_config
from .core import (
    Board,
    Color,
    MoveRecord,
    SelfCaptureError,
    Stone,
    String,
    apply_stone,
    evaluate,
    find_liberties,
    get_string,
    get_strings,
    neighbors,
)
from .logger import logger, set_log_level
from .validation import BoardDataError, validate_board, validate_placement

__all__ = [
    "analysis",
    "core",
    "validation",
    "EvaluatorConfig",
    "load_config",
    "Board",
    "Color",
    "MoveRecord",
    "SelfCaptureError",
    "Stone",
    "String",
    "apply_stone",
    "evaluate",
    "find_liberties",
    "get_string",
    "get_strings",
    "neighbors",
    "logger",
    "set_log_level",
    "BoardDataError",
    "validate_board",
    "validate_placement",
]
