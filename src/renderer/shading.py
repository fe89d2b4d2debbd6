# renderer/shading.py
from typing import Optional
from core.vector import Vector3, Color
from core.ray import Ray
from core.utils import reflect
from geometry.hittable import HitRecord
from geometry.world import Scene

AMBIENT = 0.12
MAX_DEPTH = 5
# Offset along the normal for secondary rays, and the lower t bound of every query.
EPSILON = 1e-4
INFINITY = float("inf")

BACKGROUND = Color(0.0, 0.0, 0.0)
SKY_HORIZON = Color(1.0, 1.0, 1.0)
SKY_ZENITH = Color(0.5, 0.7, 1.0)

class Shader:
    """
    Whitted-style integrator: ambient + shadowed Lambert diffuse from one point
    light, blended with a recursively traced mirror reflection.
    """
    def __init__(self, ambient: float = AMBIENT, max_depth: int = MAX_DEPTH,
                 background: Color = BACKGROUND, sky: bool = False):
        self.ambient = ambient
        self.max_depth = max_depth
        self.background = background
        self.sky = sky

    def trace(self, ray: Ray, scene: Scene, depth: int = 0) -> Color:
        if depth > self.max_depth:
            return self.background

        hit = scene.closest_hit(ray, EPSILON, INFINITY)
        if hit is None:
            return self.miss_color(ray)

        direct = self.direct_light(hit, scene)
        k = hit.material.reflectivity
        if k <= 0.0:
            return direct

        reflect_dir = reflect(ray.direction.normalize(), hit.normal)
        reflect_ray = Ray(hit.point + hit.normal * EPSILON, reflect_dir)
        reflected = self.trace(reflect_ray, scene, depth + 1)
        return direct * (1.0 - k) + reflected * k

    def miss_color(self, ray: Ray) -> Color:
        if not self.sky:
            return self.background
        unit_dir = ray.direction.normalize()
        t = 0.5 * (unit_dir.y + 1.0)
        return SKY_HORIZON * (1.0 - t) + SKY_ZENITH * t

    def direct_light(self, hit: HitRecord, scene: Scene) -> Color:
        return self.ambient_term(hit, scene) + self.diffuse_term(hit, scene)

    def ambient_term(self, hit: HitRecord, scene: Scene) -> Color:
        """Unshadowed floor brightness, tinted by the light color."""
        return hit.material.albedo * self.ambient * scene.light.intensity

    def diffuse_term(self, hit: HitRecord, scene: Scene) -> Color:
        to_light = scene.light.position - hit.point
        distance = to_light.length()
        if distance == 0:
            return Color(0.0, 0.0, 0.0)
        light_dir = to_light / distance
        if self.in_shadow(hit, scene, light_dir, distance):
            return Color(0.0, 0.0, 0.0)
        cos_theta = max(0.0, hit.normal.dot(light_dir))
        return hit.material.albedo * cos_theta * scene.light.intensity

    def in_shadow(self, hit: HitRecord, scene: Scene,
                  light_dir: Optional[Vector3] = None,
                  distance: Optional[float] = None) -> bool:
        """True when any primitive lies between the hit point and the light."""
        if light_dir is None or distance is None:
            to_light = scene.light.position - hit.point
            distance = to_light.length()
            light_dir = to_light.normalize()
        shadow_ray = Ray(hit.point + hit.normal * EPSILON, light_dir)
        return scene.closest_hit(shadow_ray, EPSILON, distance - EPSILON) is not None
