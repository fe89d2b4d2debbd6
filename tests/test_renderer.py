import numpy as np
import pytest

from core.ray import Ray
from core.vector import Color
from geometry.light import PointLight
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.material import Material
from renderer.raytracer import Renderer
from renderer.tone_mapping import quantize

from conftest import v

class RecordingCamera:
    """Encodes the requested screen coordinate in the ray origin."""
    def get_ray(self, s, t):
        return Ray(v(s, t, 0), v(0, 0, -1))

class CoordinateShader:
    def trace(self, ray, scene, depth=0):
        return Color(ray.origin.x, ray.origin.y, 0.0)

def test_single_sample_uses_pixel_centers_top_row_first():
    renderer = Renderer(4, 3, samples_per_pixel=1, shader=CoordinateShader())
    buffer = renderer.render(None, RecordingCamera())
    assert buffer.shape == (3, 4, 3)
    for y in range(3):
        for x in range(4):
            assert buffer[y, x, 0] == pytest.approx((x + 0.5) / 4)
            assert buffer[y, x, 1] == pytest.approx((y + 0.5) / 3)

def test_jittered_samples_stay_inside_the_pixel():
    renderer = Renderer(5, 4, samples_per_pixel=8, shader=CoordinateShader(), seed=3)
    buffer = renderer.render(None, RecordingCamera())
    for y in range(4):
        for x in range(5):
            assert x / 5 <= buffer[y, x, 0] <= (x + 1) / 5
            assert y / 4 <= buffer[y, x, 1] <= (y + 1) / 4

def test_same_seed_same_image():
    a = Renderer(6, 4, samples_per_pixel=4, shader=CoordinateShader(), seed=11)
    b = Renderer(6, 4, samples_per_pixel=4, shader=CoordinateShader(), seed=11)
    np.testing.assert_array_equal(a.render(None, RecordingCamera()), b.render(None, RecordingCamera()))

def test_bands_cover_every_row_once():
    renderer = Renderer(3, 10, workers=3)
    rows = [y for start, stop in renderer.bands() for y in range(start, stop)]
    assert rows == list(range(10))

def test_invalid_settings_are_rejected():
    with pytest.raises(ValueError):
        Renderer(0, 10)
    with pytest.raises(ValueError):
        Renderer(10, 10, samples_per_pixel=0)

def test_dimmer_light_gives_a_darker_sphere(single_sphere_scene, default_camera):
    width, height = 40, 30
    camera = default_camera(width, height)
    renderer = Renderer(width, height, samples_per_pixel=1)
    bright = renderer.render_frame(single_sphere_scene((1.0, 1.0, 1.0)), camera)
    dim = renderer.render_frame(single_sphere_scene((0.6, 0.6, 0.6)), camera)
    cy, cx = height // 2, width // 2
    assert bright.dtype == np.uint8
    assert bright[cy, cx, 0] > dim[cy, cx, 0]
    # Rays that miss the sphere see the black background.
    assert tuple(bright[0, 0]) == (0, 0, 0)

def test_worker_pool_matches_sequential_render(default_camera):
    scene = Scene(PointLight(v(5, 5, -2)), [
        Plane(v(0, -0.5, 0), v(0, 1, 0), Material(v(0.82, 0.82, 0.82), 0.15)),
        Sphere(v(0, 0, -1.3), 0.5, Material(v(0.9, 0.2, 0.2), 0.05)),
    ])
    camera = default_camera(12, 9)
    sequential = Renderer(12, 9, samples_per_pixel=2, seed=5).render(scene, camera)
    parallel = Renderer(12, 9, samples_per_pixel=2, seed=5, workers=2).render(scene, camera)
    np.testing.assert_array_equal(sequential, parallel)

def test_quantize_clamps_and_rounds():
    linear = np.array([[[-0.5, 0.2, 1.5], [0.0, 0.25, 1.0]]])
    out = quantize(linear)
    assert out.dtype == np.uint8
    assert out.tolist() == [[[0, 51, 255], [0, 64, 255]]]
