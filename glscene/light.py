"""A simple light with a colour and an ambient intensity."""

from __future__ import annotations

from dataclasses import dataclass

from glscene.geometry import Vector3


def clamp(minimum, maximum, value):
    """Return ``value`` limited to the range ``minimum..maximum``."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


@dataclass
class Light:
    """A light colour (as a vector of channels) and ambient intensity."""

    color: Vector3
    ambient_intensity: float

    @classmethod
    def from_floats(cls, red: float, green: float, blue: float, ambient_intensity: float) -> Light:
        """Build a light from 0..1 channel values and a 0..1 intensity."""
        return cls(
            Vector3(clamp(0.0, 1.0, red), clamp(0.0, 1.0, green), clamp(0.0, 1.0, blue)),
            clamp(0.0, 1.0, ambient_intensity),
        )

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int, ambient_intensity: float) -> Light:
        """Build a light from 0..256 channel values and a 0..1 intensity."""
        return cls(
            Vector3(
                clamp(0, 256, red) / 256.0,
                clamp(0, 256, green) / 256.0,
                clamp(0, 256, blue) / 256.0,
            ),
            clamp(0.0, 1.0, ambient_intensity),
        )