import math

import pytest

from camera.camera import Camera

from conftest import as_tuple, v

def test_basis_is_orthonormal():
    cam = Camera(v(1.6, 0.5, 1.2), v(0.1, -0.2, -1.5), v(0, 1, 0), 75.0, 4 / 3)
    for a in (cam.u, cam.v, cam.w):
        assert a.length() == pytest.approx(1.0)
    assert cam.u.dot(cam.v) == pytest.approx(0.0, abs=1e-12)
    assert cam.u.dot(cam.w) == pytest.approx(0.0, abs=1e-12)
    assert cam.v.dot(cam.w) == pytest.approx(0.0, abs=1e-12)

def test_default_camera_basis():
    cam = Camera(v(0, 0, 0), v(0, 0, -1), v(0, 1, 0), 90.0, 2.0)
    assert as_tuple(cam.w) == pytest.approx((0, 0, 1))
    assert as_tuple(cam.u) == pytest.approx((1, 0, 0))
    assert as_tuple(cam.v) == pytest.approx((0, 1, 0))
    assert as_tuple(cam.horizontal) == pytest.approx((4, 0, 0))
    assert as_tuple(cam.vertical) == pytest.approx((0, 2, 0))

def test_center_ray_points_at_look_at():
    cam = Camera(v(0, 0, 0), v(0, 0, -1), v(0, 1, 0), 90.0, 2.0)
    ray = cam.get_ray(0.5, 0.5)
    assert as_tuple(ray.origin) == (0, 0, 0)
    assert as_tuple(ray.direction) == pytest.approx((0, 0, -1))

def test_t_zero_is_the_top_row():
    cam = Camera(v(0, 0, 0), v(0, 0, -1), v(0, 1, 0), 90.0, 2.0)
    top_left = cam.get_ray(0.0, 0.0).direction
    bottom_right = cam.get_ray(1.0, 1.0).direction
    assert as_tuple(top_left) == pytest.approx((-2, 1, -1))
    assert as_tuple(bottom_right) == pytest.approx((2, -1, -1))

def test_field_of_view_sets_the_vertical_extent():
    cam = Camera(v(0, 0, 0), v(0, 0, -1), v(0, 1, 0), 60.0, 1.0)
    top = cam.get_ray(0.5, 0.0).direction.normalize()
    angle = math.degrees(math.atan2(top.y, -top.z))
    assert angle == pytest.approx(30.0)

def test_rays_are_not_normalized():
    cam = Camera(v(0, 0, 0), v(0, 0, -1), v(0, 1, 0), 90.0, 1.0)
    assert cam.get_ray(0.0, 0.0).direction.length() > 1.0

@pytest.mark.parametrize("kwargs", [
    dict(look_from=v(0, 0, 0), look_at=v(0, 0, 0), vup=v(0, 1, 0), vfov=90.0, aspect_ratio=1.0),
    dict(look_from=v(0, 0, 0), look_at=v(0, -1, 0), vup=v(0, 1, 0), vfov=90.0, aspect_ratio=1.0),
    dict(look_from=v(0, 0, 0), look_at=v(0, 0, -1), vup=v(0, 1, 0), vfov=0.0, aspect_ratio=1.0),
    dict(look_from=v(0, 0, 0), look_at=v(0, 0, -1), vup=v(0, 1, 0), vfov=90.0, aspect_ratio=0.0),
])
def test_degenerate_camera_is_rejected(kwargs):
    with pytest.raises(ValueError):
        Camera(**kwargs)
