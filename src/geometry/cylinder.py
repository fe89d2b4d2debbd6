# geometry/cylinder.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from materials.material import Material

EPS = 1e-6

class Cylinder(Hittable):
    """
    Finite cylinder aligned with the Y axis, closed by two disk caps.
    `center` sits at mid-height; total height is 2 * half_height.
    """
    def __init__(self, center: Vector3, radius: float, half_height: float, material: Material):
        if not radius > 0:
            raise ValueError(f"Cylinder radius must be positive, got {radius}")
        if not half_height > 0:
            raise ValueError(f"Cylinder half-height must be positive, got {half_height}")
        self.center = center
        self.radius = float(radius)
        self.half_height = float(half_height)
        self.material = material

    @property
    def y_min(self) -> float:
        return self.center.y - self.half_height

    @property
    def y_max(self) -> float:
        return self.center.y + self.half_height

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        ro = ray.origin - self.center
        rd = ray.direction
        closest = t_max
        best_t = None
        best_normal = None

        # Lateral surface: (ro.x + t rd.x)^2 + (ro.z + t rd.z)^2 = r^2
        a = rd.x * rd.x + rd.z * rd.z
        if abs(a) > EPS:
            half_b = ro.x * rd.x + ro.z * rd.z
            c = ro.x * ro.x + ro.z * ro.z - self.radius * self.radius
            disc = half_b * half_b - a * c
            if disc > 0:
                sqrt_d = math.sqrt(disc)
                for root in ((-half_b - sqrt_d) / a, (-half_b + sqrt_d) / a):
                    if root < t_min or root > closest:
                        continue
                    y = ro.y + rd.y * root
                    if -self.half_height - EPS <= y <= self.half_height + EPS:
                        closest = best_t = root
                        best_normal = Vector3(ro.x + rd.x * root, 0.0, ro.z + rd.z * root).normalize()
                        break

        # Caps: planes y = y_min / y_max clipped to the disk
        if abs(rd.y) > EPS:
            for y_cap, normal in ((-self.half_height, Vector3(0, -1, 0)),
                                  (self.half_height, Vector3(0, 1, 0))):
                t = (y_cap - ro.y) / rd.y
                if t < t_min or t > closest:
                    continue
                dx = ro.x + rd.x * t
                dz = ro.z + rd.z * t
                if dx * dx + dz * dz <= self.radius * self.radius + 1e-12:
                    closest = best_t = t
                    best_normal = normal

        if best_t is None:
            return None
        return HitRecord.build(ray, best_t, best_normal, self.material)

    def __repr__(self) -> str:
        return (f"Cylinder(center={self.center!r}, radius={self.radius}, "
                f"half_height={self.half_height})")
