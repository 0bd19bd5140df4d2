"""
Granny Square Quilt - Hex String Utilities

Utilities for parsing and formatting the hex strings used in palette and
quilt files.
"""

import string
from typing import List, Tuple

# Same shape as quilt.core.square.RGBAColor
RGBAColor = Tuple[int, int, int, int]


def parse_color(hex_str: str) -> RGBAColor:
    """
    Parse a hex color string to an RGBA tuple.

    Args:
        hex_str: "#RRGGBB" or "#RRGGBBAA" (leading # optional). Alpha
            defaults to 0xFF when omitted.

    Returns:
        (r, g, b, a) tuple

    Raises:
        ValueError: If the string is not 6 or 8 hex digits.

    Example:
        >>> parse_color("#FF0000")
        (255, 0, 0, 255)
    """
    digits = hex_str.strip().lstrip("#")
    if len(digits) not in (6, 8) or not all(c in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color: {hex_str!r}")

    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) if len(digits) == 8 else 0xFF
    return (r, g, b, a)


def format_color(color: RGBAColor) -> str:
    """
    Format an RGBA tuple as an uppercase "#RRGGBBAA" string.

    Example:
        >>> format_color((255, 0, 0, 255))
        '#FF0000FF'
    """
    return "#" + "".join(f"{c:02X}" for c in color)


def parse_index_token(token: str) -> List[int]:
    """
    Split a square token into palette indices, two hex digits each.
    Only hex digits are accepted, so indices are never negative.

    Example:
        >>> parse_index_token("020100")
        [2, 1, 0]
    """
    if len(token) % 2 != 0 or not all(c in string.hexdigits for c in token):
        raise ValueError(f"Invalid square token: {token!r}")
    return [int(token[i : i + 2], 16) for i in range(0, len(token), 2)]


def format_index_token(indices: List[int]) -> str:
    """
    Format palette indices as one token, two uppercase hex digits each.

    Example:
        >>> format_index_token([2, 1, 0])
        '020100'
    """
    return "".join(f"{i:02X}" for i in indices)
