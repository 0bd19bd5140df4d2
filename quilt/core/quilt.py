"""
Granny Square Quilt - Quilt Generator

Fills a grid with granny squares so every square passes the placement
rules. Generation runs in two phases:

1. Seed: walk the grid in row-major order, placing a candidate that
   passes validation. Cells with no passing candidate stay empty.
2. Repair: scan for the first square that fails validation and replace it,
   or clear its 8 neighbours if nothing fits. Restart the scan from the top
   after every repair and stop after a scan that finds no offenders.

Repair can loop forever if the rules are too restrictive. Set
QuiltConfig.max_passes to give up after a fixed number of scans.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .combinations import SquareSet, combination_count, generate_squares
from .config import DEFAULT_HEIGHT, DEFAULT_WIDTH, QuiltConfig
from .grid import SURROUNDING_OFFSETS, QuiltGrid
from .palettes import validate_palette
from .rules import Rule, default_rules
from .square import EMPTY_SQUARE, GrannySquare, RGBAColor


class RepairBudgetExceeded(RuntimeError):
    """Raised when the repair phase runs past QuiltConfig.max_passes."""

    def __init__(self, passes: int):
        super().__init__(f"Quilt did not settle within {passes} repair passes")
        self.passes = passes


@dataclass
class GenerationStats:
    """Counters from a single generate_quilt() run."""

    seeded: int = 0
    seed_misses: int = 0
    passes: int = 0
    repairs: int = 0
    evictions: int = 0
    mutations: int = 0


class Quilt:
    """Generates a quilt of granny squares from a palette and a rule set."""

    def __init__(
        self,
        colors: List[RGBAColor],
        config: Optional[QuiltConfig] = None,
        rules: Optional[List[Rule]] = None,
        rng: Optional[random.Random] = None,
        method: str = "random",
        debug: bool = False,
    ):
        """
        Args:
            colors: Palette of at least 3 distinct colors
            config: Dimensions and solver limits (default: 16x20, no pass limit)
            rules: Placement rules, checked in order (default: default_rules())
            rng: Random source for square generation and candidate order
            method: Square generation method, "random" or "exhaustive"
            debug: Print progress while generating

        Raises:
            ConfigurationError: If the config or palette is unusable.
        """
        if config is None:
            config = QuiltConfig(width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT)
        self.colors = validate_palette(colors)
        config.validate(len(self.colors))
        self.config = config
        self.rules: List[Rule] = default_rules() if rules is None else list(rules)
        self.rng = rng if rng is not None else random.Random()
        self.debug = debug

        self.grid = QuiltGrid(config.width, config.height)
        self.squares: SquareSet = generate_squares(
            self.colors, config.colors_per_square, self.rng, method
        )

        self._mutations = 0
        self.grid.add_listener(self._count_mutation)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def combinations(self) -> int:
        """Number of distinct non-repeating squares from the palette."""
        return combination_count(len(self.colors), self.config.colors_per_square)

    def size(self) -> int:
        """Number of cells in the quilt."""
        return self.config.size

    def _count_mutation(self, grid: QuiltGrid) -> None:
        self._mutations += 1

    def used_more_than(
        self, n: int, square: GrannySquare, exclude: Optional[Tuple[int, int]] = None
    ) -> bool:
        """
        True if square would appear more than n times.

        With exclude set, the square is treated as placed at that cell: the
        cell's current contents are discounted and the proposal counted once.
        """
        seen = self.grid.count(square)
        if exclude is not None:
            if self.grid.get(*exclude) == square:
                seen -= 1
            seen += 1
        return seen > n

    def passes_validation(self, x: int, y: int, proposed: GrannySquare) -> bool:
        """Check the empty sentinel, the usage cap, then each rule in order."""
        if proposed == EMPTY_SQUARE:
            return False
        if self.used_more_than(self.config.usage_cap, proposed, exclude=(x, y)):
            return False
        for rule in self.rules:
            if not rule.validates(x, y, proposed, self.grid):
                return False
        return True

    def find_suitable_square(self, x: int, y: int) -> Optional[GrannySquare]:
        """
        A candidate that passes validation at (x, y), or None.

        Candidates are tried in a fresh order drawn from self.rng on every
        call, so repeated repairs of the same cell do not cycle through the
        same squares.
        """
        candidates = list(self.squares)
        self.rng.shuffle(candidates)
        for square in candidates:
            if self.passes_validation(x, y, square):
                return square
        return None

    def delete_neighbours(self, x: int, y: int) -> None:
        """Clear the 8 squares around (x, y), leaving (x, y) itself alone."""
        for nx, ny, _ in self.grid.neighbours(x, y, SURROUNDING_OFFSETS):
            if nx == x and ny == y:
                continue
            self.grid.clear(nx, ny)

    def generate_quilt(self) -> GenerationStats:
        """
        Seed the grid, then repair it until every square passes validation.

        Returns:
            GenerationStats for this run

        Raises:
            RepairBudgetExceeded: If config.max_passes > 0 and repair has not
                settled within that many passes.
        """
        stats = GenerationStats()
        start_mutations = self._mutations

        # Pre-seed
        for x, y in self.grid.coords():
            square = self.find_suitable_square(x, y)
            if square is None:
                stats.seed_misses += 1
                continue
            self.grid.set(x, y, square)
            stats.seeded += 1

        if self.debug:
            print(f"Seeded {stats.seeded}/{self.size()} squares ({stats.seed_misses} empty)")

        # This can run forever if the rules are too restrictive
        self._repair(stats)
        stats.mutations = self._mutations - start_mutations

        if self.debug:
            print(
                f"Settled after {stats.passes} passes: {stats.repairs} repairs, "
                f"{stats.evictions} evictions, {stats.mutations} mutations"
            )

        return stats

    def find_rule_offenders(self) -> int:
        """
        Run only the repair phase against the current grid.

        Returns:
            Number of passes until the grid was clean
        """
        stats = GenerationStats()
        self._repair(stats)
        return stats.passes

    def _repair(self, stats: GenerationStats) -> None:
        max_passes = self.config.max_passes

        while True:
            if max_passes and stats.passes >= max_passes:
                raise RepairBudgetExceeded(stats.passes)
            stats.passes += 1

            offender = self._first_offender()
            if offender is None:
                return

            x, y = offender
            square = self.find_suitable_square(x, y)
            if square is not None:
                self.grid.set(x, y, square)
                stats.repairs += 1
            else:
                if self.debug:
                    print(f"  No square fits ({x}, {y}), clearing neighbours")
                self.delete_neighbours(x, y)
                stats.evictions += 1

    def _first_offender(self) -> Optional[Tuple[int, int]]:
        for x, y in self.grid.coords():
            if not self.passes_validation(x, y, self.grid.get(x, y)):
                return x, y
        return None
