"""
Granny Square Quilt - Square Combinations

Enumerates every distinct granny square that can be made from a palette.
Squares never repeat a color across their rings, and ring order matters,
so n colors give n! / (n - 3)! squares.
"""

import itertools
import math
import random
from typing import Iterator, List, Optional

from .config import COLORS_PER_SQUARE, ConfigurationError
from .square import GrannySquare, RGBAColor

GENERATION_METHODS = ("random", "exhaustive")


def combination_count(num_colors: int, colors_per_square: int = COLORS_PER_SQUARE) -> int:
    """Number of distinct non-repeating squares from num_colors yarns."""
    if colors_per_square > num_colors:
        return 0
    return math.perm(num_colors, colors_per_square)


class SquareSet:
    """
    Immutable collection of candidate squares.

    Iteration follows generation order, which is how the solver scans for
    candidates. Membership tests are O(1).
    """

    def __init__(self, squares: List[GrannySquare]):
        self._order = tuple(squares)
        self._members = frozenset(self._order)
        if len(self._members) != len(self._order):
            raise ValueError("SquareSet squares must be distinct")

    def __iter__(self) -> Iterator[GrannySquare]:
        return iter(self._order)

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, square: object) -> bool:
        return square in self._members

    def __repr__(self) -> str:
        return f"SquareSet({len(self)} squares)"


def random_square(
    colors: List[RGBAColor], rng: random.Random, colors_per_square: int = COLORS_PER_SQUARE
) -> GrannySquare:
    """Draw one square with distinct colors (inner, middle, outer in draw order)."""
    inner, middle, outer = rng.sample(colors, colors_per_square)
    return GrannySquare(outer=outer, middle=middle, inner=inner)


def generate_squares(
    colors: List[RGBAColor],
    colors_per_square: int = COLORS_PER_SQUARE,
    rng: Optional[random.Random] = None,
    method: str = "random",
) -> SquareSet:
    """
    Build the full set of distinct squares for a palette.

    Args:
        colors: Palette of distinct colors
        colors_per_square: Rings per square (must be 3)
        rng: Random source (default: fresh unseeded Random)
        method: "random" draws squares until every combination has been
            seen; "exhaustive" enumerates permutations and shuffles them.
            Both produce the same set of squares.

    Returns:
        SquareSet with exactly combination_count() squares

    Raises:
        ConfigurationError: If the palette cannot make squares, or the
            method is unknown.
    """
    if colors_per_square != COLORS_PER_SQUARE:
        raise ConfigurationError(
            f"Granny squares have {COLORS_PER_SQUARE} rings, got {colors_per_square}"
        )
    if colors_per_square > len(colors):
        raise ConfigurationError(
            f"Need at least {colors_per_square} colors, palette has {len(colors)}"
        )
    if len(set(colors)) != len(colors):
        raise ConfigurationError("Palette colors must be distinct")
    if method not in GENERATION_METHODS:
        raise ConfigurationError(
            f"Unknown generation method {method!r}, expected one of {GENERATION_METHODS}"
        )

    if rng is None:
        rng = random.Random()

    target = combination_count(len(colors), colors_per_square)

    if method == "exhaustive":
        squares = [
            GrannySquare(outer=outer, middle=middle, inner=inner)
            for inner, middle, outer in itertools.permutations(colors, colors_per_square)
        ]
        rng.shuffle(squares)
        return SquareSet(squares)

    # Generate-and-test: keep drawing until every combination has turned up
    seen: set[GrannySquare] = set()
    squares = []
    while len(squares) < target:
        square = random_square(colors, rng, colors_per_square)
        if square not in seen:
            seen.add(square)
            squares.append(square)

    return SquareSet(squares)
