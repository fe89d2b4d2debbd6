# geometry/hittable.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("point", "normal", "t", "front_face", "material")

    def __init__(self, point: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material = None):
        self.point = point      # Intersection point
        self.normal = normal    # Unit normal, facing the incoming ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face
        self.material = material

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    @classmethod
    def build(cls, ray: Ray, t: float, outward_normal: Vector3, material) -> "HitRecord":
        rec = cls(t=t, material=material)
        rec.point = ray.at(t)
        rec.set_face_normal(ray, outward_normal)
        return rec

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    material = None

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("intersect() must be implemented by subclasses.")
