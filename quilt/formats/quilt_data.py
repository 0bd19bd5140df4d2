"""
Granny Square Quilt - Quilt Data File

Saves a generated quilt to JSON and loads it back. Each row is a string of
space-separated square tokens; a token is the palette index of the outer,
middle and inner ring as two hex digits each ("------" for an empty cell).

    {
      "width": 2, "height": 1,
      "palette": ["#FF0000FF", "#FFFFFFFF", "#0000FFFF"],
      "rows": ["000102 020100"],
      "metadata": {"seed": 7}
    }
"""

import json
from typing import Any, Dict, List, Optional

from ..core.grid import QuiltGrid
from ..core.square import EMPTY_SQUARE, GrannySquare, RGBAColor
from . import hex_utils

EMPTY_TOKEN = "------"


class QuiltData:
    """A finished quilt: palette, squares and free-form metadata."""

    def __init__(self):
        self.width: int = 0
        self.height: int = 0
        self.palette: List[RGBAColor] = []
        self.rows: List[List[GrannySquare]] = []
        self.metadata: Dict[str, Any] = {}
        self.filepath: Optional[str] = None

    @classmethod
    def from_grid(
        cls,
        grid: QuiltGrid,
        palette: List[RGBAColor],
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "QuiltData":
        """Snapshot a grid. Every non-empty square must use palette colors."""
        data = cls()
        data.width = grid.width
        data.height = grid.height
        data.palette = list(palette)
        data.rows = grid.rows()
        data.metadata = dict(metadata or {})
        return data

    def to_grid(self) -> QuiltGrid:
        """Rebuild a QuiltGrid holding these squares."""
        grid = QuiltGrid(self.width, self.height)
        for y, row in enumerate(self.rows):
            for x, square in enumerate(row):
                if square != EMPTY_SQUARE:
                    grid.set(x, y, square)
        return grid

    def load(self, path: str):
        """
        Load quilt data from JSON file.

        Raises:
            ValueError: If a row has the wrong width, a token is malformed or
                repeats a color, or an index is outside the palette.
        """
        with open(path, "r") as f:
            data = json.load(f)

        self.width = data["width"]
        self.height = data["height"]
        self.palette = [hex_utils.parse_color(c) for c in data["palette"]]
        if len(set(self.palette)) != len(self.palette):
            raise ValueError("Palette colors must be distinct")

        if len(data["rows"]) != self.height:
            raise ValueError(
                f"Expected {self.height} rows, found {len(data['rows'])}"
            )

        self.rows = []
        for y, row_str in enumerate(data["rows"]):
            tokens = row_str.split()
            if len(tokens) != self.width:
                raise ValueError(
                    f"Row {y}: expected {self.width} squares, found {len(tokens)}"
                )
            self.rows.append([self._parse_square(token) for token in tokens])

        self.metadata = data.get("metadata", {})
        self.filepath = path

    def save(self, path: Optional[str] = None):
        """Save quilt data to JSON file."""
        if path is None:
            path = self.filepath
        if path is None:
            raise ValueError("No save path specified")

        data = {
            "width": self.width,
            "height": self.height,
            "palette": [hex_utils.format_color(c) for c in self.palette],
            "rows": [
                " ".join(self._format_square(square) for square in row)
                for row in self.rows
            ],
            "metadata": self.metadata,
        }

        with open(path, "w") as f:
            json.dump(data, f, indent=2)
            f.write("\n")

        self.filepath = path

    def _parse_square(self, token: str) -> GrannySquare:
        if token == EMPTY_TOKEN:
            return EMPTY_SQUARE

        if len(token) != len(EMPTY_TOKEN):
            raise ValueError(f"Square token needs 3 colors: {token!r}")
        indices = hex_utils.parse_index_token(token)
        if len(set(indices)) != len(indices):
            raise ValueError(f"Square token repeats a color: {token!r}")
        for idx in indices:
            if idx >= len(self.palette):
                raise ValueError(
                    f"Color index {idx} out of range for {len(self.palette)}-color palette"
                )

        outer, middle, inner = (self.palette[i] for i in indices)
        return GrannySquare(outer=outer, middle=middle, inner=inner)

    def _format_square(self, square: GrannySquare) -> str:
        if square == EMPTY_SQUARE:
            return EMPTY_TOKEN

        try:
            indices = [self.palette.index(c) for c in square.colors()]
        except ValueError:
            raise ValueError(f"Square {square} uses a color outside the palette")
        return hex_utils.format_index_token(indices)
