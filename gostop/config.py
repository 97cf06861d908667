from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

DEFAULT_CONFIG_PATH = "configs/evaluate.yaml"


@dataclass
class EvaluatorConfig:
    default_board_size: int = 19
    # Placement and lastTaker checks only; snapshot decoding always rejects
    # duplicate points and out-of-bounds or colourless stones.
    validate_input: bool = True
    log_level: str = "WARNING"


def load_config(path: Optional[Union[str, Path]] = DEFAULT_CONFIG_PATH) -> EvaluatorConfig:
    cfg = {}
    if path:
        cfg_path = Path(path)
        if cfg_path.exists():
            cfg = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    return EvaluatorConfig(**cfg)
