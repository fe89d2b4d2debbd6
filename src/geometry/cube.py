# geometry/cube.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord
from materials.material import Material

class Cube(Hittable):
    """
    Axis-aligned cube, stored as its bounding box.
    """
    def __init__(self, center: Vector3, size: float, material: Material):
        if not size > 0:
            raise ValueError(f"Cube edge size must be positive, got {size}")
        self.center = center
        self.size = float(size)
        self.bounds = AABB.from_center_size(center, self.size)
        self.material = material

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        found = self.bounds.hit(ray, t_min, t_max)
        if found is None:
            return None
        t, outward_normal = found
        return HitRecord.build(ray, t, outward_normal, self.material)

    def __repr__(self) -> str:
        return f"Cube(center={self.center!r}, size={self.size})"
