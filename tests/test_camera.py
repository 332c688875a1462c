from glscene.camera import Camera
from glscene.frustum import Visibility
from glscene.geometry import AABB2D, Vector3


def _box(x0, x1, z0, z1):
    return AABB2D(
        (Vector3(x0, 0.0, z0), Vector3(x1, 0.0, z0), Vector3(x0, 0.0, z1), Vector3(x1, 0.0, z1))
    )


def _camera():
    return Camera(frame_buffer_width=800, frame_buffer_height=600)


def test_box_in_front_is_visible():
    assert _camera().is_aabb_visible(_box(-1.0, 1.0, -11.0, -9.0)) is True


def test_box_behind_is_not_visible():
    assert _camera().is_aabb_visible(_box(-1.0, 1.0, 5.0, 10.0)) is False


def test_box_partly_in_view_is_visible():
    assert _camera().is_aabb_visible(_box(-1.0, 1.0, -10.0, 5.0)) is True


def test_zero_height_leaves_frustum_untouched():
    camera = Camera(frame_buffer_width=800, frame_buffer_height=0)
    camera.recalculate_view_frustum()
    assert all(plane.normal == Vector3() for plane in camera.view_frustum.planes)
    assert camera.is_aabb_visible(_box(-1.0, 1.0, 5.0, 10.0)) is True


def test_recalculate_builds_frustum():
    camera = _camera()
    camera.recalculate_view_frustum()
    assert camera.view_frustum.is_point_visible(Vector3(0.0, 0.0, -10.0)) is Visibility.INSIDE
    assert camera.view_frustum.is_point_visible(Vector3(0.0, 0.0, -2000.0)) is Visibility.OUTSIDE


def test_valid_cache_skips_recalculation():
    camera = _camera()
    camera.cache_valid = True
    # Frustum was never built, so the default one accepts everything.
    assert camera.is_aabb_visible(_box(-1.0, 1.0, 5.0, 10.0)) is True