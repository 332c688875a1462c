"""Layout of hexagonal cell centres in rows and columns."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from glscene.geometry import Vector3


@dataclass
class HexGrid:
    """A grid of hexagon centres on the XZ plane."""

    rows: int = 0
    columns: int = 0
    cell_size: float = 1.0
    centers: list[list[Vector3]] = field(default_factory=list)

    def cell_width(self) -> float:
        """Distance between the two parallel sides of a cell."""
        return math.sqrt(3) * self.cell_size

    def cell_height(self) -> float:
        """Distance between two opposite corners of a cell."""
        return 2.0 * self.cell_size

    def compute_centers(self, pointy: bool) -> list[list[Vector3]]:
        """Compute the cell centres row by row, store and return them.

        Pointy-top rows run along X and step along Z; flat-top grids swap
        the two axes. Every other row is offset by half a cell width.
        """
        width = self.cell_width()
        row_step = self.cell_height() * 0.75
        centers: list[list[Vector3]] = []

        for row in range(self.rows):
            start = width / 2.0 if row % 2 else 0.0
            across = row * row_step
            if pointy:
                centers.append(
                    [Vector3(start + col * width, 0.0, across) for col in range(self.columns)]
                )
            else:
                centers.append(
                    [Vector3(across, 0.0, start + col * width) for col in range(self.columns)]
                )

        self.centers = centers
        return centers