"""Basic 3D geometry: vectors, planes and 2D axis-aligned boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector3:
    """An immutable 3-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vector3) -> float:
        """Return the scalar product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        """Return the vector product ``self x other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """Return a unit vector pointing the same way.

        Raises ValueError for the zero vector.
        """
        size = self.length()
        if size == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / size


@dataclass
class Plane:
    """A plane given by the equation ``a*x + b*y + c*z + d = 0``.

    Planes built from points have a unit normal ``(a, b, c)``.
    """

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    @classmethod
    def from_points(cls, pt0: Vector3, pt1: Vector3, pt2: Vector3) -> Plane:
        """Build the plane through three points given counter-clockwise."""
        plane = cls()
        plane.set_points(pt0, pt1, pt2)
        return plane

    @property
    def normal(self) -> Vector3:
        return Vector3(self.a, self.b, self.c)

    def set_points(self, pt0: Vector3, pt1: Vector3, pt2: Vector3) -> None:
        """Recompute the plane from three points given counter-clockwise.

        Raises ValueError if the points are collinear.
        """
        edge_a = pt0 - pt1
        edge_b = pt2 - pt1
        try:
            normal = edge_b.cross(edge_a).normalized()
        except ValueError:
            raise ValueError("points are collinear and do not define a plane") from None
        self.a, self.b, self.c = normal
        self.d = -normal.dot(pt1)

    def distance_to_point(self, point: Vector3) -> float:
        """Signed distance from the plane; positive on the normal's side."""
        return self.a * point.x + self.b * point.y + self.c * point.z + self.d

    def project_point(self, point: Vector3) -> Vector3:
        """Return the orthogonal projection of ``point`` onto the plane."""
        return point - self.normal * self.distance_to_point(point)


def _default_corners() -> tuple[Vector3, ...]:
    return (Vector3(), Vector3(), Vector3(), Vector3())


@dataclass
class AABB2D:
    """An axis-aligned box described by its four corner points."""

    corners: tuple[Vector3, ...] = field(default_factory=_default_corners)

    def __post_init__(self) -> None:
        self.corners = tuple(self.corners)
        if len(self.corners) != 4:
            raise ValueError(f"an AABB2D needs exactly 4 corners, got {len(self.corners)}")