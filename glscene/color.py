"""RGB colours stored as floats in the range 0..1."""

from __future__ import annotations

from dataclasses import dataclass


def _clamp(value, low, high):
    return low if value <= low else high if value >= high else value


@dataclass
class Color:
    """A colour whose channels are clamped to 0.0..1.0."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0

    def __post_init__(self) -> None:
        self.set_color(self.red, self.green, self.blue)

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Color:
        """Build a colour from 0..255 channel values."""
        color = cls()
        color.set_color_rgb(red, green, blue)
        return color

    def set_color(self, red: float, green: float, blue: float) -> None:
        """Set the channels from floats, clamping each to 0.0..1.0."""
        self.red = float(_clamp(red, 0.0, 1.0))
        self.green = float(_clamp(green, 0.0, 1.0))
        self.blue = float(_clamp(blue, 0.0, 1.0))

    def set_color_rgb(self, red: int, green: int, blue: int) -> None:
        """Set the channels from 0..255 values, clamping out-of-range input."""
        self.red = _clamp(red, 0, 255) / 255.0
        self.green = _clamp(green, 0, 255) / 255.0
        self.blue = _clamp(blue, 0, 255) / 255.0

    def as_tuple(self) -> tuple[float, float, float]:
        """Return the channels as floats."""
        return (self.red, self.green, self.blue)

    def as_rgb(self) -> tuple[int, int, int]:
        """Return the channels scaled to 0..255, truncated."""
        return (int(self.red * 255.0), int(self.green * 255.0), int(self.blue * 255.0))