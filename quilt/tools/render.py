#!/usr/bin/env python3
"""
Granny Square Quilt - Quilt Renderer

Renders saved quilt JSON files as PNG images.
"""

import argparse
import sys
from pathlib import Path

from quilt.formats.quilt_data import QuiltData
from quilt.rendering.pil_renderer import RING_INSET, SQUARE_SIZE, save_quilt_image


def render_quilt_file(quilt_path: str, output_path: str, square_size: int, ring_inset: int):
    """Render a single quilt file to PNG."""
    data = QuiltData()
    data.load(quilt_path)

    img = save_quilt_image(data.to_grid(), output_path, square_size, ring_inset)
    print(f"Saved: {output_path} ({img.width}x{img.height})")


def render_directory(input_dir: str, output_dir: str, square_size: int, ring_inset: int):
    """Render every quilt file in a directory."""
    input_path = Path(input_dir)
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    quilt_files = sorted(input_path.glob("*.json"))

    if not quilt_files:
        print(f"No quilt files found in {input_dir}")
        return

    print(f"Rendering {len(quilt_files)} quilts from {input_dir}...")

    for quilt_file in quilt_files:
        out_file = output_path / f"{quilt_file.stem}.png"
        render_quilt_file(str(quilt_file), str(out_file), square_size, ring_inset)


def main():
    parser = argparse.ArgumentParser(
        description="Render saved granny square quilts as PNG images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Render one quilt:
    granny-render granny.json
    granny-render granny.json granny.png

  Render a directory of quilts:
    granny-render quilts/ renders/
        """,
    )
    parser.add_argument("input", help="Quilt JSON file or directory")
    parser.add_argument("output", nargs="?", help="Output PNG file or directory (optional)")
    parser.add_argument(
        "--square-size",
        type=int,
        default=SQUARE_SIZE,
        help=f"Pixel size of each square (default: {SQUARE_SIZE})",
    )
    parser.add_argument(
        "--ring-inset",
        type=int,
        default=RING_INSET,
        help=f"Pixel gap between rings (default: {RING_INSET})",
    )

    args = parser.parse_args()

    input_p = Path(args.input)
    if not input_p.exists():
        print(f"Error: {args.input} not found")
        sys.exit(1)

    try:
        if input_p.is_file():
            output_path = args.output if args.output else input_p.stem + ".png"
            render_quilt_file(args.input, output_path, args.square_size, args.ring_inset)
        else:
            output_dir = args.output if args.output else f"renders/{input_p.name}"
            render_directory(args.input, output_dir, args.square_size, args.ring_inset)
    except (KeyError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
