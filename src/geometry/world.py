# src/geometry/world.py
from typing import Iterable, List, Optional
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from geometry.light import PointLight

class Scene:
    """
    Ordered list of primitives lit by a single point light.
    Queries are a linear scan; scenes are expected to be small.
    """
    def __init__(self, light: PointLight, objects: Iterable[Hittable] = ()):
        self.light = light
        self.objects: List[Hittable] = list(objects)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def closest_hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.intersect(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def count(self, kind: type) -> int:
        return sum(1 for obj in self.objects if isinstance(obj, kind))
