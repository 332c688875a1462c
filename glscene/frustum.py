"""View frustum built from camera parameters, with point and box tests."""

from __future__ import annotations

import enum
import math

from glscene.geometry import AABB2D, Plane, Vector3


class Visibility(enum.Enum):
    """Result of a frustum visibility test."""

    INSIDE = "inside"
    INTERSECT = "intersect"
    OUTSIDE = "outside"


class _Side(enum.IntEnum):
    TOP = 0
    BOTTOM = 1
    LEFT = 2
    RIGHT = 3
    NEAR = 4
    FAR = 5


class Frustum:
    """Six planes whose normals point towards the inside of the frustum."""

    def __init__(self) -> None:
        self.planes: list[Plane] = [Plane() for _ in _Side]

    def update(
        self,
        eye_pos: Vector3,
        look_at: Vector3,
        up: Vector3,
        right: Vector3,
        near_distance: float,
        far_distance: float,
        fov: float,
        aspect_ratio: float,
    ) -> None:
        """Rebuild the planes from a camera description.

        ``fov`` is the vertical field of view in degrees. Raises ValueError
        if the eye and look-at positions coincide.
        """
        forward = (look_at - eye_pos).normalized()
        tan_half_fov = math.tan(math.radians(fov) / 2.0)

        near_height = 2.0 * tan_half_fov * near_distance
        near_width = near_height * aspect_ratio
        far_height = 2.0 * tan_half_fov * far_distance
        far_width = far_height * aspect_ratio

        far_center = eye_pos + forward * far_distance
        far_up = up * (far_height / 2.0)
        far_right = right * (far_width / 2.0)

        near_center = eye_pos + forward * near_distance
        near_up = up * (near_height / 2.0)
        near_right = right * (near_width / 2.0)

        self.set_plane_points(
            far_center + far_up - far_right,
            far_center + far_up + far_right,
            far_center - far_up - far_right,
            far_center - far_up + far_right,
            near_center + near_up - near_right,
            near_center + near_up + near_right,
            near_center - near_up - near_right,
            near_center - near_up + near_right,
        )

    def set_plane_points(
        self,
        far_top_left: Vector3,
        far_top_right: Vector3,
        far_bottom_left: Vector3,
        far_bottom_right: Vector3,
        near_top_left: Vector3,
        near_top_right: Vector3,
        near_bottom_left: Vector3,
        near_bottom_right: Vector3,
    ) -> None:
        """Compute the six planes from the eight corner points."""
        self.planes[_Side.TOP].set_points(near_top_right, near_top_left, far_top_left)
        self.planes[_Side.BOTTOM].set_points(near_bottom_left, near_bottom_right, far_bottom_right)
        self.planes[_Side.LEFT].set_points(near_top_left, near_bottom_left, far_bottom_left)
        self.planes[_Side.RIGHT].set_points(near_bottom_right, near_top_right, far_bottom_right)
        self.planes[_Side.NEAR].set_points(near_top_left, near_top_right, near_bottom_right)
        self.planes[_Side.FAR].set_points(far_top_right, far_top_left, far_bottom_left)

    def is_point_visible(self, point: Vector3) -> Visibility:
        """Return INSIDE if the point lies on the inner side of every plane."""
        if any(plane.distance_to_point(point) < 0.0 for plane in self.planes):
            return Visibility.OUTSIDE
        return Visibility.INSIDE

    def is_aabb_visible(self, aabb: AABB2D) -> Visibility:
        """Classify a box as inside, intersecting or outside the frustum."""
        total = len(aabb.corners)
        visible = sum(
            1 for corner in aabb.corners if self.is_point_visible(corner) is Visibility.INSIDE
        )

        if visible == total:
            return Visibility.INSIDE
        if visible > 0:
            return Visibility.INTERSECT

        # No corner is inside, but a large box may still straddle the frustum.
        result = Visibility.OUTSIDE
        for plane in self.planes:
            outside = sum(1 for corner in aabb.corners if plane.distance_to_point(corner) < 0.0)
            if outside == total:
                return Visibility.OUTSIDE
            if outside > 0:
                result = Visibility.INTERSECT
        return result