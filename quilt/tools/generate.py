#!/usr/bin/env python3
"""
Granny Square Quilt - Quilt Generator

Generates a quilt that satisfies the placement rules and saves it as a PNG,
optionally with an animated GIF of the generation and a JSON quilt file.
"""

import argparse
import sys

from quilt.core.quilt import RepairBudgetExceeded
from quilt.formats.quilt_data import QuiltData
from quilt.rendering.pil_renderer import SQUARE_SIZE, FrameRecorder, save_quilt_image
from quilt.tools.options import add_quilt_arguments, build_quilt, ring_inset_for


def save_outputs(args, quilt, recorder, ring_inset: int, passes: int, settled: bool):
    """Write the PNG plus any requested GIF and JSON for the current grid."""
    img = save_quilt_image(quilt.grid, args.output, args.square_size, ring_inset)
    print(f"Saved: {args.output} ({img.width}x{img.height})")

    if recorder is not None:
        recorder.finish(quilt.grid)
        recorder.save(args.animate, duration_ms=args.frame_ms)
        print(f"Saved: {args.animate} ({len(recorder.frames)} frames)")

    if args.json:
        data = QuiltData.from_grid(
            quilt.grid,
            quilt.colors,
            metadata={
                "seed": args.seed,
                "rules": args.rules,
                "usage_cap": args.usage_cap,
                "passes": passes,
                "settled": settled,
            },
        )
        data.save(args.json)
        print(f"Saved: {args.json}")


def main():
    parser = argparse.ArgumentParser(
        description="Generate a granny square quilt and render it as a PNG",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  16x20 quilt with the default yarns and rules:
    granny-generate 16 20 /tmp/granny.png

  Reproducible quilt plus an animation of every 5th change:
    granny-generate 16 20 granny.png --seed 7 --animate granny.gif --frame-step 5

  Custom palette, stricter rules, give up after 50000 passes:
    granny-generate 10 10 out.png -p autumn.json -r outer middle-inner-2 inner \\
        --max-passes 50000

  Save the quilt for later rendering:
    granny-generate 16 20 granny.png --json granny.json
        """,
    )
    add_quilt_arguments(parser)
    parser.add_argument("output", help="Output PNG file")
    parser.add_argument("--animate", metavar="GIF", help="Also write an animated GIF")
    parser.add_argument(
        "--frame-step",
        type=int,
        default=1,
        help="Capture every Nth grid change in the animation (default: 1)",
    )
    parser.add_argument(
        "--frame-ms", type=int, default=40, help="Milliseconds per frame (default: 40)"
    )
    parser.add_argument("--json", metavar="FILE", help="Also save the quilt as JSON")
    parser.add_argument(
        "--square-size",
        type=int,
        default=SQUARE_SIZE,
        help=f"Pixel size of each square (default: {SQUARE_SIZE})",
    )

    args = parser.parse_args()

    if args.frame_step < 1:
        print("Error: --frame-step must be at least 1")
        sys.exit(1)
    ring_inset = ring_inset_for(args.square_size)

    quilt = build_quilt(args)

    print(f"quilt has {quilt.combinations()} combinations...")
    print(f"generated {len(quilt.squares)} squares")

    recorder = None
    if args.animate:
        recorder = FrameRecorder(args.square_size, ring_inset, args.frame_step)
        quilt.grid.add_listener(recorder)

    try:
        stats = quilt.generate_quilt()
    except RepairBudgetExceeded as e:
        print(f"Error: {e}")
        print("Saving the partial quilt (empty cells are transparent)")
        save_outputs(args, quilt, recorder, ring_inset, passes=e.passes, settled=False)
        sys.exit(1)

    print(
        f"filled {quilt.size()} squares in {stats.passes} repair passes "
        f"({stats.repairs} repairs, {stats.evictions} evictions)"
    )
    save_outputs(args, quilt, recorder, ring_inset, passes=stats.passes, settled=True)


if __name__ == "__main__":
    main()
