"""Command line interface for the SGF diagram tool.

Reads an SGF record, replays its main line and prints a text diagram with
move numbers, followed by the list of labels hidden by later moves::

    python main.py game.sgf --range 16-18
    python main.py game.sgf --move 50 --last-move-label --coordinates
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

from core.diagram import Diagram, DiagramOptions, build_diagram
from core.show_board import diagram_to_string
from input.sgf_parser import parse_sgf


def _load_config(path: str | None) -> Dict[str, Any]:
    """Load optional YAML/JSON configuration file."""

    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            if path.endswith(".json"):
                data = json.load(fh)
            else:
                data = yaml.safe_load(fh)
    except FileNotFoundError:
        logging.warning("Config file %s not found", path)
        return {}
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logging.warning("Failed to load config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logging.warning("Ignoring config %s: expected a mapping", path)
        return {}
    return data


def parse_range(range_str: str) -> Tuple[int, int]:
    """Parse a range like ``"1-5"`` into ``(1, 5)``."""
    parts = str(range_str).split("-")
    if len(parts) != 2:
        raise ValueError(
            f'Invalid range format: {range_str}. Expected format: "start-end" (e.g., "1-5")'
        )
    try:
        start, end = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(
            f"Invalid range values: {range_str}. Both start and end must be numbers"
        ) from None
    if start < 1 or end < 1:
        raise ValueError(
            f"Invalid range values: {range_str}. Range values must be positive integers"
        )
    if start > end:
        raise ValueError(
            f"Invalid range: {range_str}. Start value must be less than or equal to end value"
        )
    return start, end


def _positive_int(value: str) -> int:
    try:
        num = int(value)
    except ValueError:
        num = 0
    if num < 1:
        raise argparse.ArgumentTypeError("Move number must be a positive integer")
    return num


def build_options(args: argparse.Namespace, config: Dict[str, Any]) -> DiagramOptions:
    """Merge command line arguments over ``config`` defaults."""
    range_str = args.range
    move = args.move
    if range_str is None and move is None:
        range_str = config.get("range")
        move = config.get("move")
    move_range = parse_range(range_str) if range_str is not None else None
    return DiagramOptions(
        move_range=move_range,
        move=int(move) if move is not None else None,
        last_move_label=bool(args.last_move_label or config.get("last_move_label", False)),
        show_coordinates=bool(args.coordinates or config.get("coordinates", False)),
    )


def diagram_summary(diagram: Diagram) -> Dict[str, Any]:
    """Return a JSON friendly description of ``diagram``."""
    return {
        "board_size": diagram.board_size,
        "total_moves": diagram.total_moves,
        "labels": [
            {"x": pos.x, "y": pos.y, "number": number}
            for pos, number in sorted(diagram.labels.items(), key=lambda item: item[1])
        ],
        "overwritten_labels": diagram.caption,
        "last_move": list(diagram.last_move) if diagram.last_move else None,
    }


def _report(diagram: Diagram, output: Optional[str]) -> List[str]:
    lines = [
        f"Board size: {diagram.board_size}x{diagram.board_size}",
        f"Total moves: {diagram.total_moves}",
    ]
    if output:
        lines.append(f"Output: {output}")
    if diagram.caption:
        lines.append(f"Note: Some labels were overwritten: {', '.join(diagram.caption)}")
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sgf-diagram",
        description="Render a numbered Go diagram from an SGF file",
    )
    parser.add_argument("input", help="SGF file path to convert")
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument("-r", "--range", help='Move range to label (e.g., "1-10")')
    selection.add_argument(
        "-m", "--move", type=_positive_int, help="Show board state after this move (1-based)"
    )
    parser.add_argument("--last-move-label", action="store_true", help="Mark the last move")
    parser.add_argument("--coordinates", action="store_true", help="Show coordinates around the board")
    parser.add_argument("-o", "--output", help="Write the diagram to this file")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of the diagram")
    parser.add_argument("--config", help="Optional configuration YAML/JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``sgf-diagram`` command line tool."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config = _load_config(args.config)
    logging.debug("Loaded config: %s", config)

    try:
        options = build_options(args, config)
        game = parse_sgf(args.input)
        diagram = build_diagram(game.board_size, game.moves, options)
        if args.json:
            text = json.dumps(diagram_summary(diagram), indent=2)
        else:
            text = diagram_to_string(diagram)
        if args.output:
            with open(args.output, "w", encoding="utf-8") as fh:
                fh.write(text + "\n")
        print(text)
        if not args.json:
            print("\n".join(_report(diagram, args.output)))
    except (ValueError, OSError) as exc:
        logging.error("Error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
