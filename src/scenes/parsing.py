# scenes/parsing.py
"""
Parsing of the command-line value syntax.

Vectors and colors are comma separated triples ("0,1.5,-2"). Object
definitions use semicolon separated fields:

    plane     point;normal;color;reflectivity
    sphere    center;radius;color;reflectivity
    cube      center;edge_size;color;reflectivity
    cylinder  center;radius;half_height;color;reflectivity

Any value or field may be wrapped in single or double quotes.
"""
from typing import List, Tuple

from core.vector import Vector3
from core.utils import clamp01, clamp_color
from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.hittable import Hittable
from geometry.plane import Plane
from geometry.sphere import Sphere
from materials.material import Material
from scenes.errors import SceneConfigError

def dequote(s: str) -> str:
    s = s.strip()
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        return s[1:-1]
    return s

def parse_float(s: str, what: str = "value") -> float:
    try:
        return float(dequote(s))
    except ValueError:
        raise SceneConfigError(f"Invalid {what}: {s!r} is not a number") from None

def parse_vec3(s: str, what: str = "vector") -> Vector3:
    parts = dequote(s).split(",")
    if len(parts) != 3:
        raise SceneConfigError(f"Invalid {what}: expected x,y,z but got {s!r}")
    return Vector3(*(parse_float(p, what) for p in parts))

def parse_color(s: str) -> Vector3:
    """Albedo colors are clamped to [0, 1]."""
    return clamp_color(parse_vec3(s, "color"))

def parse_intensity(s: str) -> Vector3:
    """Light intensity is clamped to be non-negative."""
    return clamp_color(parse_vec3(s, "light intensity"), 0.0, float("inf"))

def parse_resolution(s: str) -> Tuple[int, int]:
    parts = dequote(s).lower().split("x")
    if len(parts) != 2:
        raise SceneConfigError(f"Invalid resolution {s!r}: expected WIDTHxHEIGHT")
    try:
        width, height = int(parts[0]), int(parts[1])
    except ValueError:
        raise SceneConfigError(f"Invalid resolution {s!r}: expected WIDTHxHEIGHT") from None
    if width < 1 or height < 1:
        raise SceneConfigError(f"Invalid resolution {s!r}: dimensions must be positive")
    return width, height

def _split_fields(s: str, kind: str, count: int) -> List[str]:
    fields = [dequote(f) for f in dequote(s).split(";")]
    if len(fields) != count:
        raise SceneConfigError(
            f"Invalid {kind} definition {s!r}: expected {count} ';'-separated fields, got {len(fields)}")
    return fields

def _positive(value: float, kind: str, what: str) -> float:
    if not value > 0:
        raise SceneConfigError(f"Invalid {kind}: {what} must be positive, got {value}")
    return value

def _material(color: str, reflectivity: str) -> Material:
    return Material(parse_color(color), clamp01(parse_float(reflectivity, "reflectivity")))

def parse_plane(s: str) -> Plane:
    point, normal, color, refl = _split_fields(s, "plane", 4)
    n = parse_vec3(normal, "plane normal")
    if n.length() == 0:
        raise SceneConfigError(f"Invalid plane {s!r}: normal must be non-zero")
    return Plane(parse_vec3(point, "plane point"), n, _material(color, refl))

def parse_sphere(s: str) -> Sphere:
    center, radius, color, refl = _split_fields(s, "sphere", 4)
    r = _positive(parse_float(radius, "sphere radius"), "sphere", "radius")
    return Sphere(parse_vec3(center, "sphere center"), r, _material(color, refl))

def parse_cube(s: str) -> Cube:
    center, size, color, refl = _split_fields(s, "cube", 4)
    edge = _positive(parse_float(size, "cube size"), "cube", "edge size")
    return Cube(parse_vec3(center, "cube center"), edge, _material(color, refl))

def parse_cylinder(s: str) -> Cylinder:
    center, radius, half_height, color, refl = _split_fields(s, "cylinder", 5)
    r = _positive(parse_float(radius, "cylinder radius"), "cylinder", "radius")
    hh = _positive(parse_float(half_height, "cylinder half-height"), "cylinder", "half-height")
    return Cylinder(parse_vec3(center, "cylinder center"), r, hh, _material(color, refl))

OBJECT_PARSERS = {
    "plane": parse_plane,
    "sphere": parse_sphere,
    "cube": parse_cube,
    "cylinder": parse_cylinder,
}

def parse_object(kind: str, s: str) -> Hittable:
    try:
        parser = OBJECT_PARSERS[kind]
    except KeyError:
        raise SceneConfigError(f"Unknown object kind {kind!r}") from None
    return parser(s)
