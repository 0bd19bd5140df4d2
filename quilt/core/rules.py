"""
Granny Square Quilt - Placement Rules

Rules decide whether a proposed square may sit at (x, y) given the squares
around it. The solver ANDs them together in registration order.

Neighbour lookups are clamped, so cells on an edge see themselves (or a
repeated edge cell) in place of a missing neighbour. Rules differ in how
they handle landing on themselves: some accept the square outright, the
rest skip that offset and keep checking. Each rule documents which.
"""

from typing import Callable, Dict, List, Protocol

from .grid import (
    ORTHOGONAL_OFFSETS,
    SURROUNDING_OFFSETS,
    QuiltGrid,
    orthogonal_offsets,
)
from .square import GrannySquare


class Rule(Protocol):
    """Protocol for placement rules.

    Rules don't need to inherit from this - they just need a name and a
    validates() method. validates() must not modify the grid, and must cope
    with a grid that is still partly empty.
    """

    name: str

    def validates(self, x: int, y: int, proposed: GrannySquare, grid: QuiltGrid) -> bool:
        """Return True if proposed may be placed at (x, y)."""
        ...


class NoMatchingOuterRings:
    """
    Outer ring must differ from the outer ring of all 8 surrounding squares.

    The first offset that clamps back onto (x, y) accepts the square
    without checking the remaining offsets.
    """

    name = "No sides with the same colour"

    def validates(self, x: int, y: int, proposed: GrannySquare, grid: QuiltGrid) -> bool:
        for nx, ny, neighbour in grid.neighbours(x, y, SURROUNDING_OFFSETS):
            if nx == x and ny == y:
                return True

            if proposed.outer == neighbour.outer:
                return False
        return True


class NoSameMiddleAndInner:
    """
    The (middle, inner) pair must not match any orthogonal neighbour's pair.

    radius=1 checks adjacent cells; radius=2 also checks cells two away.
    Offsets that clamp onto (x, y) are skipped.
    """

    name = "No neighbours with the same middle and inner"

    def __init__(self, radius: int = 1):
        self.radius = radius
        self.offsets = orthogonal_offsets(radius)

    def validates(self, x: int, y: int, proposed: GrannySquare, grid: QuiltGrid) -> bool:
        for nx, ny, neighbour in grid.neighbours(x, y, self.offsets):
            if nx == x and ny == y:
                continue

            if proposed.middle == neighbour.middle and proposed.inner == neighbour.inner:
                return False
        return True


class NoRepeatedInner:
    """Inner ring must differ from the four orthogonal neighbours' inner rings."""

    name = "No neighbours with the same inner"

    def validates(self, x: int, y: int, proposed: GrannySquare, grid: QuiltGrid) -> bool:
        for nx, ny, neighbour in grid.neighbours(x, y, ORTHOGONAL_OFFSETS):
            if nx == x and ny == y:
                continue

            if proposed.inner == neighbour.inner:
                return False
        return True


class NoRepeatedMiddleOrInner:
    """
    Neither the middle nor the inner ring may repeat within two orthogonal
    steps. Stricter than NoSameMiddleAndInner, which needs both to match.
    """

    name = "No middle or inner repeats nearby"

    def __init__(self, radius: int = 2):
        self.radius = radius
        self.offsets = orthogonal_offsets(radius)

    def validates(self, x: int, y: int, proposed: GrannySquare, grid: QuiltGrid) -> bool:
        for nx, ny, neighbour in grid.neighbours(x, y, self.offsets):
            if nx == x and ny == y:
                continue

            if proposed.middle == neighbour.middle or proposed.inner == neighbour.inner:
                return False
        return True


class NoSharedColours:
    """
    Experimental: no color of the proposed square may appear anywhere in an
    orthogonal neighbour. Off by default - with small palettes it is
    usually unsatisfiable and the repair loop never settles.

    Like NoMatchingOuterRings, landing on (x, y) accepts the square.
    """

    name = "No colours shared with neighbours"

    def validates(self, x: int, y: int, proposed: GrannySquare, grid: QuiltGrid) -> bool:
        for nx, ny, neighbour in grid.neighbours(x, y, ORTHOGONAL_OFFSETS):
            if nx == x and ny == y:
                return True

            neighbour_colors = neighbour.colors()
            for color in proposed.colors():
                if color in neighbour_colors:
                    return False
        return True


# CLI name -> factory
RULES: Dict[str, Callable[[], Rule]] = {
    "outer": NoMatchingOuterRings,
    "middle-inner": NoSameMiddleAndInner,
    "middle-inner-2": lambda: NoSameMiddleAndInner(radius=2),
    "inner": NoRepeatedInner,
    "middle-or-inner": NoRepeatedMiddleOrInner,
    "shared-colours": NoSharedColours,
}

DEFAULT_RULE_NAMES = ("outer", "middle-inner")


def default_rules() -> List[Rule]:
    """The rule set used unless told otherwise."""
    return [NoMatchingOuterRings(), NoSameMiddleAndInner()]


def rules_by_name(names: List[str]) -> List[Rule]:
    """
    Build rules from CLI names.

    Raises:
        KeyError: If a name is not in RULES.
    """
    rules = []
    for name in names:
        if name not in RULES:
            raise KeyError(f"Unknown rule {name!r}, expected one of {sorted(RULES)}")
        rules.append(RULES[name]())
    return rules
