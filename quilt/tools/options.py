"""
Granny Square Quilt - Shared CLI Options

Argument definitions and quilt construction shared by the generate,
preview and analyze tools.
"""

import argparse
import random
import sys

from quilt.core.combinations import GENERATION_METHODS
from quilt.core.config import DEFAULT_USAGE_CAP, QuiltConfig
from quilt.core.palettes import PALETTES, get_palette
from quilt.core.quilt import Quilt
from quilt.core.rules import DEFAULT_RULE_NAMES, RULES, rules_by_name
from quilt.rendering.pil_renderer import RING_INSET, SQUARE_SIZE


def add_quilt_arguments(parser: argparse.ArgumentParser):
    """Add the quilt dimensions and construction flags to a parser."""
    parser.add_argument("width", type=int, help="Quilt width in squares")
    parser.add_argument("height", type=int, help="Quilt height in squares")
    parser.add_argument(
        "-p",
        "--palette",
        default="default",
        help=f"Built-in palette ({', '.join(PALETTES)}) or path to palette JSON "
        "(default: default)",
    )
    parser.add_argument(
        "-r",
        "--rules",
        nargs="*",
        choices=sorted(RULES),
        default=list(DEFAULT_RULE_NAMES),
        help=f"Placement rules to apply (default: {' '.join(DEFAULT_RULE_NAMES)}); "
        "pass --rules with no names for usage cap only",
    )
    parser.add_argument(
        "--usage-cap",
        type=int,
        default=DEFAULT_USAGE_CAP,
        help=f"Maximum uses of any one square (default: {DEFAULT_USAGE_CAP})",
    )
    parser.add_argument(
        "--max-passes",
        type=int,
        default=0,
        help="Give up after this many repair passes (default: 0 = never)",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible quilts")
    parser.add_argument(
        "--method",
        choices=GENERATION_METHODS,
        default="random",
        help="How squares are enumerated (default: random)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Print generation progress"
    )


def build_quilt(args, seed: int | None = None) -> Quilt:
    """Construct a Quilt from parsed arguments, exiting on bad settings."""
    config = QuiltConfig(
        width=args.width,
        height=args.height,
        usage_cap=args.usage_cap,
        max_passes=args.max_passes,
    )
    if seed is None:
        seed = args.seed

    try:
        colors = get_palette(args.palette)
        return Quilt(
            colors,
            config,
            rules=rules_by_name(args.rules),
            rng=random.Random(seed),
            method=args.method,
            debug=args.verbose,
        )
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}")
        sys.exit(1)


def ring_inset_for(square_size: int) -> int:
    """
    Ring inset that keeps the default proportions at this square size.

    Exits with an error if the square is too small to show three rings.
    """
    ring_inset = max(1, square_size * RING_INSET // SQUARE_SIZE)
    if ring_inset * 4 >= square_size:
        print(f"Error: --square-size {square_size} is too small to draw three rings")
        sys.exit(1)
    return ring_inset
