"""Input checks callers run before handing a board to the rules."""

from .data_checks import BoardDataError, validate_board, validate_placement, validate_stones

__all__ = ["BoardDataError", "validate_board", "validate_placement", "validate_stones"]
