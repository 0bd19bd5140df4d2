"""
Core quilt functionality.

This package contains the square and palette definitions, square
enumeration, placement rules, the quilt grid and the quilt generator.
"""

from .config import ConfigurationError, QuiltConfig
from .combinations import SquareSet, combination_count, generate_squares
from .grid import QuiltGrid, clamp
from .quilt import GenerationStats, Quilt, RepairBudgetExceeded
from .rules import Rule, default_rules, rules_by_name
from .square import EMPTY_SQUARE, NO_COLOR, GrannySquare

__all__ = [
    "ConfigurationError",
    "QuiltConfig",
    "SquareSet",
    "combination_count",
    "generate_squares",
    "QuiltGrid",
    "clamp",
    "GenerationStats",
    "Quilt",
    "RepairBudgetExceeded",
    "Rule",
    "default_rules",
    "rules_by_name",
    "EMPTY_SQUARE",
    "NO_COLOR",
    "GrannySquare",
]
