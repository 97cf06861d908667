import logging
from typing import Union

import colorlog

# Create logger
logger = logging.getLogger("gostop")
logger.setLevel(logging.WARNING)

# Create console handler with colorlog
handler = colorlog.StreamHandler()
handler.setLevel(logging.DEBUG)

formatter = colorlog.ColoredFormatter(
    "%(log_color)s%(levelname)s%(reset)s: %(message)s",
    log_colors={
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "red,bg_white",
    },
    secondary_log_colors={},
    style="%",
)

handler.setFormatter(formatter)
logger.addHandler(handler)

# Prevent duplicate handlers
if len(logger.handlers) > 1:
    logger.handlers = [handler]


def set_log_level(level: Union[int, str]) -> None:
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved
    logger.setLevel(level)
