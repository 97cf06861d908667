#!/usr/bin/env python3
"""Evaluate a single stone placement against a board snapshot stored as JSON."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from gostop import (
    BoardDataError,
    EvaluatorConfig,
    SelfCaptureError,
    apply_stone,
    load_config,
    logger,
    set_log_level,
    validate_board,
    validate_placement,
)
from gostop.core import board_from_dict, board_to_dict, stone_from_dict, string_to_list


def evaluate_snapshot(
    data: Mapping[str, Any],
    move: Mapping[str, Any],
    *,
    config: Optional[EvaluatorConfig] = None,
    apply: bool = False,
) -> Dict[str, Any]:
    config = config or EvaluatorConfig()
    verdict: Dict[str, Any] = {"legal": False, "error": None, "captured": [], "captured_stones": 0}
    try:
        board = board_from_dict(data, default_size=config.default_board_size)
        stone = stone_from_dict(move)
        if config.validate_input:
            validate_board(board)
            validate_placement(board, stone)
        next_board, record = apply_stone(board, stone)
    except (BoardDataError, SelfCaptureError) as exc:
        logger.info("Rejected move %r: %s", move, exc)
        verdict["error"] = str(exc)
        return verdict

    verdict["legal"] = True
    verdict["captured"] = [string_to_list(string) for string in record.captured]
    verdict["captured_stones"] = record.captured_count
    if apply:
        verdict["board"] = board_to_dict(next_board)
    return verdict


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("snapshot", help="Path to a board snapshot JSON file")
    parser.add_argument("--x", type=int, required=True)
    parser.add_argument("--y", type=int, required=True)
    parser.add_argument("--color", required=True, help="black/white (or B/W)")
    parser.add_argument("--config", type=str, default="configs/evaluate.yaml")
    parser.add_argument("--apply", action="store_true", help="Include the resulting board")
    parser.add_argument("--log-level")
    args = parser.parse_args()

    config = load_config(args.config)
    set_log_level(args.log_level or config.log_level)

    data = json.loads(Path(args.snapshot).read_text())
    move = {"x": args.x, "y": args.y, "color": args.color}
    verdict = evaluate_snapshot(data, move, config=config, apply=args.apply)
    print(json.dumps(verdict, indent=2))
    if not verdict["legal"]:
        sys.exit(1)


if __name__ == "__main__":
    main()
