"""
Granny Square Quilt - Quilt Grid

Fixed-size grid of granny squares. Coordinates are clamped rather than
wrapped or rejected: anything off the edge resolves to the nearest edge or
corner cell. Every write notifies the registered listeners.
"""

from collections import Counter
from typing import Callable, Iterator, List, Sequence, Tuple

from .config import ConfigurationError
from .square import EMPTY_SQUARE, GrannySquare

Offset = Tuple[int, int]

# Relative (dx, dy) positions of the 8 surrounding cells
SURROUNDING_OFFSETS: Tuple[Offset, ...] = (
    (-1, 1), (0, 1), (1, 1),
    (-1, 0), (1, 0),
    (-1, -1), (0, -1), (1, -1),
)

# Up, left, right, down
ORTHOGONAL_OFFSETS: Tuple[Offset, ...] = (
    (0, 1),
    (-1, 0), (1, 0),
    (0, -1),
)

# Orthogonal cells two steps away
ORTHOGONAL_OFFSETS_2: Tuple[Offset, ...] = (
    (0, 2),
    (-2, 0), (2, 0),
    (0, -2),
)


def clamp(value: int, maximum: int) -> int:
    """Clamp value into [0, maximum]."""
    return max(0, min(value, maximum))


def orthogonal_offsets(radius: int) -> Tuple[Offset, ...]:
    """Orthogonal offsets out to the given distance (1 or 2)."""
    if radius == 1:
        return ORTHOGONAL_OFFSETS
    if radius == 2:
        return ORTHOGONAL_OFFSETS + ORTHOGONAL_OFFSETS_2
    raise ConfigurationError(f"Neighbour radius must be 1 or 2, got {radius}")


class QuiltGrid:
    """
    Width x height grid of GrannySquares, indexed (x, y).

    Cells start as EMPTY_SQUARE. A usage counter tracks how many times each
    square is placed so cap checks don't rescan the grid.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        # Stored as rows: cells[y][x]
        self.cells: List[List[GrannySquare]] = [
            [EMPTY_SQUARE] * width for _ in range(height)
        ]
        self._usage: Counter = Counter({EMPTY_SQUARE: width * height})
        self._listeners: List[Callable[["QuiltGrid"], None]] = []

    def clamp(self, x: int, y: int) -> Tuple[int, int]:
        """Clamp a coordinate onto the grid."""
        return clamp(x, self.width - 1), clamp(y, self.height - 1)

    def get(self, x: int, y: int) -> GrannySquare:
        x, y = self.clamp(x, y)
        return self.cells[y][x]

    def set(self, x: int, y: int, square: GrannySquare) -> None:
        """Place a square and notify listeners."""
        x, y = self.clamp(x, y)
        old = self.cells[y][x]
        self.cells[y][x] = square
        self._usage[old] -= 1
        self._usage[square] += 1

        for listener in list(self._listeners):
            listener(self)

    def clear(self, x: int, y: int) -> None:
        """Reset a cell to empty (still counts as a mutation)."""
        self.set(x, y, EMPTY_SQUARE)

    def count(self, square: GrannySquare) -> int:
        """Number of cells currently holding this square."""
        return self._usage[square]

    def neighbours(
        self, x: int, y: int, offsets: Sequence[Offset]
    ) -> Iterator[Tuple[int, int, GrannySquare]]:
        """
        Yield (nx, ny, square) for each offset, clamped onto the grid.

        Clamped positions may repeat, or land back on (x, y) itself; callers
        decide how to treat that.
        """
        for dx, dy in offsets:
            nx, ny = self.clamp(x + dx, y + dy)
            yield nx, ny, self.cells[ny][nx]

    def coords(self) -> Iterator[Tuple[int, int]]:
        """All coordinates in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def empty_cells(self) -> List[Tuple[int, int]]:
        return [(x, y) for x, y in self.coords() if self.cells[y][x] == EMPTY_SQUARE]

    def is_full(self) -> bool:
        return self._usage[EMPTY_SQUARE] == 0

    def rows(self) -> List[List[GrannySquare]]:
        """Row-major snapshot of the grid."""
        return [list(row) for row in self.cells]

    def add_listener(self, listener: Callable[["QuiltGrid"], None]) -> None:
        """Register a callback fired after every set()."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[["QuiltGrid"], None]) -> None:
        self._listeners.remove(listener)

    @property
    def size(self) -> int:
        return self.width * self.height
