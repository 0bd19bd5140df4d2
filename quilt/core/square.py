"""
Granny Square Quilt - Square Data Type

A granny square is three concentric rings of yarn. Colors are RGBA tuples,
and the all-zero color is reserved to mark an unfilled cell.
"""

from dataclasses import dataclass
from typing import Tuple

# Type alias for RGBA color
RGBAColor = Tuple[int, int, int, int]

# Reserved "no yarn" value; never part of a palette
NO_COLOR: RGBAColor = (0, 0, 0, 0)


def color_hex(color: RGBAColor) -> str:
    """Format a color as #rrggbb (alpha dropped)."""
    return f"#{color[0]:02x}{color[1]:02x}{color[2]:02x}"


@dataclass(frozen=True)
class GrannySquare:
    """A single square: outer, middle and inner ring colors.

    Field order is significant. Two squares with the same three colors in
    different rings are different squares.
    """

    outer: RGBAColor
    middle: RGBAColor
    inner: RGBAColor

    def colors(self) -> tuple[RGBAColor, RGBAColor, RGBAColor]:
        return (self.outer, self.middle, self.inner)

    def is_empty(self) -> bool:
        return self == EMPTY_SQUARE

    def __str__(self) -> str:
        return (
            f"{{outer:{color_hex(self.outer)}, "
            f"middle:{color_hex(self.middle)}, "
            f"inner:{color_hex(self.inner)}}}"
        )


# Sentinel for an unfilled cell
EMPTY_SQUARE = GrannySquare(NO_COLOR, NO_COLOR, NO_COLOR)
