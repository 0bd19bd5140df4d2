#!/usr/bin/env python3
"""
Granny Square Quilt - Live Preview

Generates a quilt while drawing every change in a pygame window.
"""

import argparse

from quilt.core.quilt import RepairBudgetExceeded
from quilt.rendering.pil_renderer import SQUARE_SIZE
from quilt.rendering.pygame_viewer import QuiltViewer
from quilt.tools.options import add_quilt_arguments, build_quilt, ring_inset_for


def main():
    parser = argparse.ArgumentParser(
        description="Watch a granny square quilt being generated",
    )
    add_quilt_arguments(parser)
    parser.add_argument(
        "--fps",
        type=int,
        default=60,
        help="Redraw rate limit while generating (default: 60, 0 = unthrottled)",
    )
    parser.add_argument(
        "--square-size",
        type=int,
        default=SQUARE_SIZE,
        help=f"Pixel size of each square (default: {SQUARE_SIZE})",
    )

    args = parser.parse_args()
    ring_inset = ring_inset_for(args.square_size)

    quilt = build_quilt(args)
    viewer = QuiltViewer(quilt.grid, args.square_size, ring_inset, fps=args.fps)
    quilt.grid.add_listener(viewer)

    print(f"quilt has {quilt.combinations()} combinations...")
    try:
        stats = quilt.generate_quilt()
        print(f"Done after {stats.passes} passes ({stats.mutations} changes)")
    except RepairBudgetExceeded as e:
        print(f"Stopped: {e}")

    quilt.grid.remove_listener(viewer)
    viewer.wait_for_close(quilt.grid)


if __name__ == "__main__":
    main()
