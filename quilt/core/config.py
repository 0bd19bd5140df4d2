"""
Granny Square Quilt - Configuration

Quilt dimensions and solver limits, validated once at construction so
bad settings never surface mid-solve.
"""

from dataclasses import dataclass

# Rings per granny square (outer, middle, inner)
COLORS_PER_SQUARE = 3

# Size of a quilt when none is given
DEFAULT_WIDTH = 16
DEFAULT_HEIGHT = 20

# A square may appear at most this many times in one quilt
DEFAULT_USAGE_CAP = 3

# 0 = repair until clean, however long it takes
UNLIMITED_PASSES = 0


class ConfigurationError(ValueError):
    """Raised when quilt settings or palette data cannot produce a quilt."""

    pass


@dataclass
class QuiltConfig:
    """Settings for a single quilt."""

    width: int
    height: int
    colors_per_square: int = COLORS_PER_SQUARE
    usage_cap: int = DEFAULT_USAGE_CAP
    max_passes: int = UNLIMITED_PASSES

    def validate(self, num_colors: int) -> None:
        """
        Check the settings against a palette size.

        Args:
            num_colors: Number of colors in the palette

        Raises:
            ConfigurationError: On any unusable setting.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Quilt dimensions must be positive, got {self.width}x{self.height}"
            )
        if self.colors_per_square != COLORS_PER_SQUARE:
            raise ConfigurationError(
                f"Granny squares have {COLORS_PER_SQUARE} rings, "
                f"got colors_per_square={self.colors_per_square}"
            )
        if self.colors_per_square > num_colors:
            raise ConfigurationError(
                f"Need at least {self.colors_per_square} colors, palette has {num_colors}"
            )
        if self.usage_cap < 1:
            raise ConfigurationError(f"usage_cap must be >= 1, got {self.usage_cap}")
        if self.max_passes < 0:
            raise ConfigurationError(
                f"max_passes must be >= 0 (0 = unlimited), got {self.max_passes}"
            )

    @property
    def size(self) -> int:
        return self.width * self.height
