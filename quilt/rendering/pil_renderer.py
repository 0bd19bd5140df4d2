"""
Granny Square Quilt - PIL Renderer

PIL-based rendering for generating PNG images and animated GIFs of quilts.
Each square is drawn as three nested rectangles: the outer ring fills the
square, the middle ring is inset once and the inner ring twice.
"""

from typing import List

import numpy as np

try:
    from PIL import Image
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.grid import QuiltGrid

SQUARE_SIZE = 40  # Pixels per square
RING_INSET = 5  # Pixels between rings


def render_quilt_to_image(
    grid: QuiltGrid,
    square_size: int = SQUARE_SIZE,
    ring_inset: int = RING_INSET,
) -> Image.Image:
    """
    Render a quilt grid to a PIL Image.

    Args:
        grid: Quilt grid to draw (x = column, y = row)
        square_size: Pixel size of each square
        ring_inset: Pixel gap between successive rings

    Returns:
        PIL RGBA Image (empty cells are transparent)
    """
    if ring_inset * 2 * 2 >= square_size:
        raise ValueError(
            f"ring_inset {ring_inset} leaves no inner ring in a {square_size}px square"
        )

    img_width = grid.width * square_size
    img_height = grid.height * square_size
    pixels = np.zeros((img_height, img_width, 4), dtype=np.uint8)

    for y in range(grid.height):
        for x in range(grid.width):
            square = grid.get(x, y)

            base_x = x * square_size
            base_y = y * square_size

            for depth, color in enumerate(square.colors()):
                inset = depth * ring_inset
                pixels[
                    base_y + inset : base_y + square_size - inset,
                    base_x + inset : base_x + square_size - inset,
                ] = color

    return Image.fromarray(pixels)


def save_quilt_image(
    grid: QuiltGrid,
    path: str,
    square_size: int = SQUARE_SIZE,
    ring_inset: int = RING_INSET,
) -> Image.Image:
    """Render a grid and save it (format from the file extension)."""
    img = render_quilt_to_image(grid, square_size, ring_inset)
    img.save(path)
    return img


class FrameRecorder:
    """
    Grid listener that captures animation frames.

    Register with QuiltGrid.add_listener(). Every frame_step-th mutation is
    rendered; call finish() after generation so the final quilt is always
    the last frame.
    """

    def __init__(
        self,
        square_size: int = SQUARE_SIZE,
        ring_inset: int = RING_INSET,
        frame_step: int = 1,
    ):
        if frame_step < 1:
            raise ValueError(f"frame_step must be >= 1, got {frame_step}")
        self.square_size = square_size
        self.ring_inset = ring_inset
        self.frame_step = frame_step
        self.frames: List[Image.Image] = []
        self.mutations = 0
        self._last_captured = 0

    def __call__(self, grid: QuiltGrid) -> None:
        self.mutations += 1
        if self.mutations % self.frame_step == 0:
            self._capture(grid)

    def _capture(self, grid: QuiltGrid) -> None:
        self.frames.append(render_quilt_to_image(grid, self.square_size, self.ring_inset))
        self._last_captured = self.mutations

    def finish(self, grid: QuiltGrid) -> None:
        """Capture the final state unless the last mutation was already captured."""
        if not self.frames or self._last_captured != self.mutations:
            self._capture(grid)

    def save(self, path: str, duration_ms: int = 40, final_hold_ms: int = 2000):
        """
        Write the captured frames as an animated GIF.

        Args:
            path: Output file path
            duration_ms: Display time per frame
            final_hold_ms: Display time for the last frame
        """
        if not self.frames:
            raise ValueError("No frames captured")

        durations = [duration_ms] * len(self.frames)
        durations[-1] = final_hold_ms

        self.frames[0].save(
            path,
            save_all=True,
            append_images=self.frames[1:],
            duration=durations,
            loop=0,
            disposal=2,
        )
