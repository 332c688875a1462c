"""A camera that can test boxes against its view frustum."""

from __future__ import annotations

from dataclasses import dataclass, field

from glscene.frustum import Frustum, Visibility
from glscene.geometry import AABB2D, Vector3


@dataclass
class Camera:
    """Camera position and orientation plus the frustum derived from them."""

    eye_pos: Vector3 = field(default_factory=Vector3)
    look_at: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, -1.0))
    up: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    right: Vector3 = field(default_factory=lambda: Vector3(1.0, 0.0, 0.0))
    world_up: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    field_of_view: float = 45.0
    near_plane: float = 0.5
    far_plane: float = 1000.0
    frame_buffer_width: int = 0
    frame_buffer_height: int = 0
    cache_valid: bool = False
    view_frustum: Frustum = field(default_factory=Frustum)

    def recalculate_view_frustum(self) -> None:
        """Rebuild the frustum; does nothing while the framebuffer height is zero."""
        if self.frame_buffer_height > 0:
            self.view_frustum.update(
                self.eye_pos,
                self.look_at,
                self.up,
                self.right,
                self.near_plane,
                self.far_plane,
                self.field_of_view,
                self.frame_buffer_width / self.frame_buffer_height,
            )

    def is_aabb_visible(self, aabb: AABB2D) -> bool:
        """Return True if the box is fully or partly inside the view frustum."""
        if not self.cache_valid:
            self.recalculate_view_frustum()
        return self.view_frustum.is_aabb_visible(aabb) in (
            Visibility.INSIDE,
            Visibility.INTERSECT,
        )