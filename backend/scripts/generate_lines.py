"""
Run one branching fill and print the line stream to stdout.
Defaults reproduce the reference canvas: 10800 × 7200, radius 40, 10 children, 90° wedge.

  python scripts/generate_lines.py --seed 7 > veins.txt
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

# backend/scripts -> backend
BACKEND = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BACKEND))

from branchfill.services.branching_sampler import generate_branching
from branchfill.services.segment_emitter import render_text

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a branching Poisson-disk line stream")
    parser.add_argument("--size-x", type=float, default=10800.0, help="Domain width (default: 10800)")
    parser.add_argument("--size-y", type=float, default=7200.0, help="Domain height (default: 7200)")
    parser.add_argument("--radius", type=float, default=40.0, help="Minimum sample distance (default: 40)")
    parser.add_argument(
        "--children-limit",
        type=int,
        default=10,
        help="Children per sample, 0 = unlimited (default: 10)",
    )
    parser.add_argument("--angle", type=float, default=90.0, help="Wedge width in degrees (default: 90)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run")
    parser.add_argument(
        "--samples",
        action="store_true",
        help="Also print a `C 1 1 5 x,y` marker per sample",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    try:
        result = generate_branching(
            size_x=args.size_x,
            size_y=args.size_y,
            radius=args.radius,
            children_limit=args.children_limit,
            angle_deg=args.angle,
            seed=args.seed,
        )
    except ValueError as exc:
        logger.error("Invalid parameters: %s", exc)
        return 2

    sys.stdout.write(render_text(result.segments, result.samples if args.samples else None))
    return 0


if __name__ == "__main__":
    sys.exit(main())
