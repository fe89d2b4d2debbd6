# scenes/presets.py
from typing import List, Optional, Tuple

from camera.camera import Camera
from core.vector import Vector3
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.hittable import Hittable
from geometry.light import PointLight
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.world import Scene
from materials.material import Material
from materials.presets import ColorPresets
from scenes.errors import SceneConfigError

SCENE_NAMES = ("sphere", "cube_plane_dim", "all", "all_alt_cam", "custom")
DEFAULT_SCENE = "all"

DEFAULT_LIGHT_POS = Vector3(5.0, 5.0, -2.0)
DEFAULT_VUP = Vector3(0.0, 1.0, 0.0)

class CameraOverride:
    """Optional user values replacing a preset's camera defaults field by field."""
    def __init__(self, look_from: Optional[Vector3] = None, look_at: Optional[Vector3] = None,
                 vup: Optional[Vector3] = None, fov: Optional[float] = None):
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup
        self.fov = fov

    def any(self) -> bool:
        return any(v is not None for v in (self.look_from, self.look_at, self.vup, self.fov))

class LightOverride:
    def __init__(self, position: Optional[Vector3] = None, intensity: Optional[Vector3] = None):
        self.position = position
        self.intensity = intensity

    def any(self) -> bool:
        return self.position is not None or self.intensity is not None

def _floor(reflectivity: float) -> Plane:
    return Plane(Vector3(0.0, -0.5, 0.0), Vector3(0.0, 1.0, 0.0),
                 Material(ColorPresets.FLOOR_GRAY, reflectivity))

def _lineup(sphere_refl: float, cylinder_refl: float) -> List[Hittable]:
    return [
        _floor(0.05),
        Sphere(Vector3(-0.8, 0.0, -1.3), 0.5, Material(ColorPresets.RED, sphere_refl)),
        Cube(Vector3(0.3, -0.2, -1.4), 0.6, ColorPresets.matte(ColorPresets.STEEL_BLUE)),
        Cylinder(Vector3(1.4, -0.1, -1.6), 0.3, 0.4, Material(ColorPresets.GREEN, cylinder_refl)),
    ]

# name -> (objects factory, light intensity, look_from, look_at, vfov)
PRESETS = {
    "sphere": (
        lambda: [
            _floor(0.15),
            Sphere(Vector3(0.0, 0.0, -1.3), 0.5, Material(ColorPresets.RED, 0.05)),
        ],
        ColorPresets.WHITE, Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0), 90.0,
    ),
    # Matte cube, dimmer light than the sphere scene.
    "cube_plane_dim": (
        lambda: [
            _floor(0.05),
            Cube(Vector3(0.0, -0.2, -1.3), 0.6, ColorPresets.matte(ColorPresets.SLATE)),
        ],
        ColorPresets.DIM_WHITE, Vector3(0.0, 0.0, 0.0), Vector3(0.0, -0.1, -1.3), 90.0,
    ),
    "all": (
        lambda: _lineup(0.10, 0.05),
        ColorPresets.WHITE, Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0), 90.0,
    ),
    "all_alt_cam": (
        lambda: _lineup(0.02, 0.08),
        ColorPresets.WHITE, Vector3(1.6, 0.5, 1.2), Vector3(0.1, -0.2, -1.5), 75.0,
    ),
    "custom": (
        lambda: [],
        ColorPresets.WHITE, Vector3(0.0, 0.5, 1.0), Vector3(0.0, 0.0, -1.0), 75.0,
    ),
}

def default_output_name(scene_name: str) -> str:
    return f"scene_{scene_name}.ppm"

def build_scene(name: str, width: int, height: int,
                objects: Optional[List[Hittable]] = None,
                camera: Optional[CameraOverride] = None,
                light: Optional[LightOverride] = None) -> Tuple[Scene, Camera]:
    """
    Builds a named preset. For "custom", `objects` are the user's primitives;
    a default floor is added when none of them is a plane.
    """
    if name not in PRESETS:
        raise SceneConfigError(
            f"Unknown scene {name!r}; expected one of: {', '.join(SCENE_NAMES)}")
    factory, intensity, look_from, look_at, vfov = PRESETS[name]
    camera = camera or CameraOverride()
    light = light or LightOverride()

    if name == "custom":
        scene_objects = list(objects or [])
        if not any(isinstance(o, Plane) for o in scene_objects):
            scene_objects.append(_floor(0.05))
    else:
        scene_objects = factory()

    point_light = PointLight(
        light.position if light.position is not None else DEFAULT_LIGHT_POS,
        light.intensity if light.intensity is not None else intensity,
    )

    try:
        cam = Camera(
            camera.look_from if camera.look_from is not None else look_from,
            camera.look_at if camera.look_at is not None else look_at,
            camera.vup if camera.vup is not None else DEFAULT_VUP,
            camera.fov if camera.fov is not None else vfov,
            width / height,
        )
    except ValueError as e:
        raise SceneConfigError(f"Invalid camera: {e}") from e

    return Scene(point_light, scene_objects), cam
