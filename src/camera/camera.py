# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray

class Camera:
    """
    Look-at pinhole camera. vfov is the vertical field of view in degrees and
    aspect_ratio is width / height.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float):
        if not 0 < vfov < 180:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {vfov}")
        if not aspect_ratio > 0:
            raise ValueError(f"Aspect ratio must be positive, got {aspect_ratio}")
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        forward = self.look_from - self.look_at
        if forward.length() == 0:
            raise ValueError("Camera look-from and look-at must differ")

        # w points from the scene back toward the camera
        self.w = forward.normalize()
        side = self.vup.cross(self.w)
        if side.length() == 0:
            raise ValueError("Camera up vector must not be parallel to the view direction")
        self.u = side.normalize()
        self.v = self.w.cross(self.u)

        half_height = math.tan(math.radians(self.vfov) / 2)
        viewport_height = 2.0 * half_height
        viewport_width = self.aspect_ratio * viewport_height

        self.origin = self.look_from
        self.horizontal = self.u * viewport_width
        self.vertical = self.v * viewport_height
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w)

    def get_ray(self, s: float, t: float) -> Ray:
        """
        Ray through normalized screen coordinate (s, t). s runs left to right
        and t runs top to bottom, so t = 0 is the image's top row.
        """
        direction = (self.lower_left_corner +
                     self.horizontal * s +
                     self.vertical * (1.0 - t) -
                     self.origin)
        return Ray(self.origin, direction)

    def __repr__(self) -> str:
        return (f"Camera(look_from={self.look_from!r}, look_at={self.look_at!r}, "
                f"vfov={self.vfov}, aspect_ratio={self.aspect_ratio})")
