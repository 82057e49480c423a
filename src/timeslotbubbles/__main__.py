"""Command-line interface."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from timeslotbubbles.config import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH
from timeslotbubbles.layout.engine import compute_layout, find_bubble
from timeslotbubbles.logging_config import setup_logging
from timeslotbubbles.model.geometry_primitives import Canvas
from timeslotbubbles.model.timeslots import PlacedBubble, SuggestionPayloadError, parse_suggestions

logger = logging.getLogger("timeslotbubbles.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timeslotbubbles",
        description="Lay out time-slot suggestions as bubbles sized by busyness.",
    )
    parser.add_argument("payload", help="JSON file with a suggestions response ('-' for stdin)")
    parser.add_argument("--width", type=float, default=DEFAULT_CANVAS_WIDTH, help="canvas width")
    parser.add_argument("--height", type=float, default=DEFAULT_CANVAS_HEIGHT, help="canvas height")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible placement")
    parser.add_argument("--selected", default=None, help="label of the highlighted slot")
    parser.add_argument("--output", default=None, help="write a rendered image to this path")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    return parser


def format_rows(bubbles: Sequence[PlacedBubble]) -> List[str]:
    """One tab-separated line per bubble: label, busy count, x, y, diameter."""
    return [
        f"{b.candidate.label}\t{b.candidate.weight}\t{b.center.x:.1f}\t{b.center.y:.1f}\t{b.diameter:.1f}"
        for b in bubbles
    ]


def _load_payload(source: str) -> object:
    if source == "-":
        return json.load(sys.stdin)
    with open(source, encoding="utf-8") as f:
        return json.load(f)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        candidates = parse_suggestions(_load_payload(args.payload))
    except (OSError, json.JSONDecodeError, SuggestionPayloadError) as e:
        logger.error(f"Could not read suggestions from '{args.payload}': {e}")
        return 1

    canvas = Canvas(width=args.width, height=args.height)
    bubbles = compute_layout(candidates, canvas, rng=args.seed)
    logger.info(f"Placed {len(bubbles)} of {len(candidates)} suggestions.")

    if args.selected is not None and find_bubble(bubbles, args.selected) is None:
        logger.warning(f"Selected slot '{args.selected}' is not among the suggestions.")

    for row in format_rows(bubbles):
        print(row)

    if args.output:
        from timeslotbubbles.view.bubble_plot import save_layout_image
        try:
            save_layout_image(args.output, bubbles, canvas, args.selected)
        except (OSError, ValueError) as e:
            logger.error(f"Could not render layout to '{args.output}': {e}")
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
