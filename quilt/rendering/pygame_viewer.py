"""
Granny Square Quilt - Pygame Viewer

Live window that redraws the quilt on every grid mutation, so generation
can be watched as it happens.
"""

import pygame
from pygame import Surface

from ..core.grid import QuiltGrid
from ..core.square import EMPTY_SQUARE
from .pil_renderer import RING_INSET, SQUARE_SIZE

COLOR_BG = (48, 48, 48)
COLOR_EMPTY = (100, 100, 100)


def render_quilt_to_surface(
    grid: QuiltGrid,
    square_size: int = SQUARE_SIZE,
    ring_inset: int = RING_INSET,
) -> Surface:
    """Render a quilt grid to a Pygame surface. Empty cells are drawn grey."""
    surf = Surface((grid.width * square_size, grid.height * square_size))
    surf.fill(COLOR_BG)

    for y in range(grid.height):
        for x in range(grid.width):
            square = grid.get(x, y)
            base_x = x * square_size
            base_y = y * square_size

            if square == EMPTY_SQUARE:
                pygame.draw.rect(
                    surf,
                    COLOR_EMPTY,
                    (base_x + 1, base_y + 1, square_size - 2, square_size - 2),
                    1,
                )
                continue

            for depth, color in enumerate(square.colors()):
                inset = depth * ring_inset
                rect = (
                    base_x + inset,
                    base_y + inset,
                    square_size - 2 * inset,
                    square_size - 2 * inset,
                )
                surf.fill(color[:3], rect)

    return surf


class QuiltViewer:
    """
    Pygame window that follows a quilt grid.

    Register with QuiltGrid.add_listener(). Each mutation redraws the window
    and pumps the event queue; closing the window stops further redraws but
    generation carries on.
    """

    def __init__(
        self,
        grid: QuiltGrid,
        square_size: int = SQUARE_SIZE,
        ring_inset: int = RING_INSET,
        fps: int = 60,
        title: str = "Granny Square Quilt",
    ):
        pygame.init()

        self.square_size = square_size
        self.ring_inset = ring_inset
        self.fps = fps
        self.screen = pygame.display.set_mode(
            (grid.width * square_size, grid.height * square_size)
        )
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.frames = 0

    def __call__(self, grid: QuiltGrid) -> None:
        if not self.running:
            return
        self._handle_events()
        self._render(grid)
        if self.fps > 0:
            self.clock.tick(self.fps)

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

    def _render(self, grid: QuiltGrid):
        if not self.running:
            return
        self.screen.blit(
            render_quilt_to_surface(grid, self.square_size, self.ring_inset), (0, 0)
        )
        pygame.display.flip()
        self.frames += 1

    def wait_for_close(self, grid: QuiltGrid):
        """Show the final quilt until the window is closed."""
        while self.running:
            self._handle_events()
            self._render(grid)
            self.clock.tick(30)

        pygame.quit()
