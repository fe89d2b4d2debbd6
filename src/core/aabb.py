# src/core/aabb.py
from typing import Optional, Tuple
from core.vector import Vector3

# Direction components smaller than this are treated as parallel to the slab.
PARALLEL_EPS = 1e-12

_AXIS_NORMALS = (
    Vector3(1, 0, 0),
    Vector3(0, 1, 0),
    Vector3(0, 0, 1),
)

class AABB:
    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    @staticmethod
    def from_center_size(center: Vector3, size: float) -> "AABB":
        h = size * 0.5
        offset = Vector3(h, h, h)
        return AABB(center - offset, center + offset)

    def hit(self, ray, t_min: float, t_max: float) -> Optional[Tuple[float, Vector3]]:
        """
        Slab test. Returns (t, outward_normal) of the first boundary crossing
        inside [t_min, t_max], or None.
        """
        t_near, t_far = -float("inf"), float("inf")
        near_normal = far_normal = None

        for axis in range(3):
            origin = ray.origin[axis]
            d = ray.direction[axis]
            lo = self.minimum[axis]
            hi = self.maximum[axis]

            if abs(d) < PARALLEL_EPS:
                # Parallel to this slab: no constraint, unless we are outside it.
                if origin < lo or origin > hi:
                    return None
                continue

            inv_d = 1.0 / d
            t0 = (lo - origin) * inv_d
            t1 = (hi - origin) * inv_d
            enter_normal = _AXIS_NORMALS[axis] * -1
            exit_normal = _AXIS_NORMALS[axis]
            if inv_d < 0:
                t0, t1 = t1, t0
                enter_normal, exit_normal = exit_normal, enter_normal

            if t0 > t_near:
                t_near, near_normal = t0, enter_normal
            if t1 < t_far:
                t_far, far_normal = t1, exit_normal
            if t_far < t_near:
                return None

        if near_normal is None or far_normal is None:
            # Zero direction with the origin inside the box.
            return None
        if t_min <= t_near <= t_max:
            return t_near, near_normal
        # Origin inside the box: the exit face is the visible one.
        if t_min <= t_far <= t_max:
            return t_far, far_normal
        return None

