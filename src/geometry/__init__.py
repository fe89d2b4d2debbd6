from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere
from geometry.plane import Plane
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.light import PointLight
from geometry.world import Scene

__all__ = [
    "Hittable", "HitRecord",
    "Sphere", "Plane", "Cube", "Cylinder",
    "PointLight", "Scene",
]
