"""
Granny Square Quilt - Yarn Palettes

Shared yarn colors and palette loading used across all tools (generator,
renderer, viewer, analyzer).
"""

import json
from pathlib import Path
from typing import List

from ..formats.hex_utils import parse_color
from .config import COLORS_PER_SQUARE, ConfigurationError
from .square import NO_COLOR, RGBAColor

RED: RGBAColor = (0xFF, 0x00, 0x00, 0xFF)
WHITE: RGBAColor = (0xFF, 0xFF, 0xFF, 0xFF)
BLUE: RGBAColor = (0x00, 0x00, 0xFF, 0xFF)
GREEN: RGBAColor = (0x00, 0xFF, 0x00, 0xFF)
PURPLE: RGBAColor = (80, 0, 80, 0xFF)
YELLOW: RGBAColor = (0xFF, 0xFF, 0x00, 0xFF)
PINK: RGBAColor = (0xFF, 0xC0, 0xCB, 0xFF)
GREY: RGBAColor = (0x80, 0x80, 0x80, 0xFF)
FOREST_GREEN: RGBAColor = (0x22, 0x8B, 0x22, 0xFF)
BROWN: RGBAColor = (0xD2, 0x69, 0x1E, 0xFF)
ORANGE: RGBAColor = (0xFF, 0xA5, 0x00, 0xFF)

# Six yarns: 120 distinct squares
DEFAULT_YARNS: List[RGBAColor] = [RED, WHITE, BLUE, GREEN, PURPLE, YELLOW]

# All eleven yarns: 990 distinct squares
EXTENDED_YARNS: List[RGBAColor] = DEFAULT_YARNS + [
    PINK,
    GREY,
    FOREST_GREEN,
    BROWN,
    ORANGE,
]

PALETTES = {
    "default": DEFAULT_YARNS,
    "extended": EXTENDED_YARNS,
}


def validate_palette(colors: List[RGBAColor]) -> List[RGBAColor]:
    """
    Check that a palette can build granny squares.

    Returns:
        The palette as a new list

    Raises:
        ConfigurationError: If the palette is too short, repeats a color, or
            uses the reserved no-color value.
    """
    colors = [tuple(c) for c in colors]
    if len(colors) < COLORS_PER_SQUARE:
        raise ConfigurationError(
            f"Palette needs at least {COLORS_PER_SQUARE} colors, got {len(colors)}"
        )
    if len(set(colors)) != len(colors):
        raise ConfigurationError("Palette colors must be distinct")
    if NO_COLOR in colors:
        raise ConfigurationError("Palette may not contain the reserved color (0, 0, 0, 0)")
    return colors


def load_palette(path: str) -> List[RGBAColor]:
    """
    Load a palette from a JSON file.

    Accepts either a bare list of hex strings or an object with a "colors"
    list, e.g. {"name": "autumn", "colors": ["#D2691E", "#FFA500", ...]}.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the contents are not a usable palette.
    """
    palette_path = Path(path)
    if not palette_path.exists():
        raise FileNotFoundError(f"Palette file not found: {palette_path}")

    with open(palette_path) as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("colors")
    if not isinstance(data, list):
        raise ConfigurationError(f"No color list in palette file: {palette_path}")

    try:
        colors = [parse_color(c) for c in data]
    except (AttributeError, ValueError) as e:
        raise ConfigurationError(f"Bad color in {palette_path}: {e}") from e

    return validate_palette(colors)


def get_palette(name_or_path: str) -> List[RGBAColor]:
    """Resolve a built-in palette name, or load a palette file."""
    if name_or_path in PALETTES:
        return list(PALETTES[name_or_path])
    return load_palette(name_or_path)
