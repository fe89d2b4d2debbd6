import pytest

from camera.camera import Camera
from core.vector import Vector3
from geometry.light import PointLight
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.material import Material

def v(x, y, z):
    return Vector3(x, y, z)

def as_tuple(vec):
    return (vec.x, vec.y, vec.z)

@pytest.fixture
def red():
    return Material(v(0.9, 0.2, 0.2), 0.0)

@pytest.fixture
def default_camera():
    def make(width, height):
        return Camera(v(0, 0, 0), v(0, 0, -1), v(0, 1, 0), 90.0, width / height)
    return make

@pytest.fixture
def single_sphere_scene():
    def make(intensity=(1.0, 1.0, 1.0)):
        sphere = Sphere(v(0, 0, -1.3), 0.5, Material(v(0.9, 0.2, 0.2), 0.0))
        return Scene(PointLight(v(5, 5, -2), v(*intensity)), [sphere])
    return make
