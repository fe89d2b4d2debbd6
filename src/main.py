# main.py
import argparse
import sys
import time

from geometry.cube import Cube
from geometry.cylinder import Cylinder
from geometry.plane import Plane
from geometry.sphere import Sphere
from renderer.image_writer import check_destination, save_image
from renderer.raytracer import DEFAULT_SAMPLES, Renderer
from renderer.shading import AMBIENT, MAX_DEPTH, Shader
from materials.presets import ColorPresets
from scenes.errors import SceneConfigError
from scenes.parsing import (dequote, parse_float, parse_intensity, parse_object,
                            parse_resolution, parse_vec3)
from scenes.presets import (DEFAULT_SCENE, SCENE_NAMES, CameraOverride,
                            LightOverride, build_scene, default_output_name)

DEFAULT_RESOLUTION = "800x600"

def log(message: str):
    # stdout may carry the image, so status goes to stderr
    print(message, file=sys.stderr)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a small scene of spheres, planes, cubes and cylinders to a PPM image.")
    parser.add_argument("--scene", default=DEFAULT_SCENE,
                        help=f"Scene preset: {', '.join(SCENE_NAMES)} (default: {DEFAULT_SCENE})")
    parser.add_argument("--res", default=DEFAULT_RESOLUTION, help="Resolution as WIDTHxHEIGHT")
    parser.add_argument("--spp", type=int, default=DEFAULT_SAMPLES, help="Samples per pixel")
    parser.add_argument("--out", default=None,
                        help="Output path; '-' for stdout, '.png' suffix for PNG (default: scene_<name>.ppm)")

    cam = parser.add_argument_group("camera")
    cam.add_argument("--lookfrom", help="Camera position x,y,z")
    cam.add_argument("--lookat", help="Point the camera looks at, x,y,z")
    cam.add_argument("--vup", help="Camera up vector x,y,z")
    cam.add_argument("--fov", help="Vertical field of view in degrees")

    light = parser.add_argument_group("light")
    light.add_argument("--light-pos", help="Light position x,y,z")
    light.add_argument("--light-int", help="Light intensity r,g,b")

    objs = parser.add_argument_group("objects (repeatable; any of these selects the custom scene)")
    objs.add_argument("--add-plane", action="append", default=[], metavar="POINT;NORMAL;COLOR;REFL")
    objs.add_argument("--add-sphere", action="append", default=[], metavar="CENTER;RADIUS;COLOR;REFL")
    objs.add_argument("--add-cube", action="append", default=[], metavar="CENTER;SIZE;COLOR;REFL")
    objs.add_argument("--add-cylinder", action="append", default=[],
                      metavar="CENTER;RADIUS;HALF_HEIGHT;COLOR;REFL")

    render = parser.add_argument_group("rendering")
    render.add_argument("--workers", type=int, default=1, help="Worker processes (default: 1)")
    render.add_argument("--seed", type=int, default=0, help="Seed for antialiasing jitter")
    render.add_argument("--ambient", type=float, default=AMBIENT, help=f"Ambient constant (default: {AMBIENT})")
    render.add_argument("--max-depth", type=int, default=MAX_DEPTH,
                        help=f"Maximum reflection depth (default: {MAX_DEPTH})")
    render.add_argument("--sky", action="store_true", help="Use a sky gradient instead of black for missed rays")
    render.add_argument("--preview", action="store_true", help="Show the result in a pygame window")
    return parser

def load_config(args: argparse.Namespace):
    """Turns parsed arguments into (scene_name, scene, camera, renderer, out_path)."""
    width, height = parse_resolution(args.res)
    if args.spp < 1:
        raise SceneConfigError(f"Samples per pixel must be at least 1, got {args.spp}")
    if args.max_depth < 0:
        raise SceneConfigError(f"Maximum depth must not be negative, got {args.max_depth}")

    objects = []
    for kind, values in (("plane", args.add_plane), ("sphere", args.add_sphere),
                         ("cube", args.add_cube), ("cylinder", args.add_cylinder)):
        objects.extend(parse_object(kind, v) for v in values)

    requested = dequote(args.scene)
    if requested not in SCENE_NAMES:
        raise SceneConfigError(
            f"Unknown scene preset '{requested}'; choose one of: {', '.join(SCENE_NAMES)}")
    scene_name = "custom" if objects else requested

    camera = CameraOverride(
        look_from=parse_vec3(args.lookfrom, "look-from") if args.lookfrom else None,
        look_at=parse_vec3(args.lookat, "look-at") if args.lookat else None,
        vup=parse_vec3(args.vup, "up vector") if args.vup else None,
        fov=parse_float(args.fov, "field of view") if args.fov else None,
    )
    light = LightOverride(
        position=parse_vec3(args.light_pos, "light position") if args.light_pos else None,
        intensity=parse_intensity(args.light_int) if args.light_int else None,
    )

    scene, cam = build_scene(scene_name, width, height, objects, camera, light)
    log(f"Scene '{scene_name}': spheres={scene.count(Sphere)} planes={scene.count(Plane)} "
        f"cubes={scene.count(Cube)} cylinders={scene.count(Cylinder)}  "
        f"camera override: {camera.any()}  light override: {light.any()}")
    shader = Shader(ambient=args.ambient, max_depth=args.max_depth,
                    background=ColorPresets.BLACK, sky=args.sky)
    renderer = Renderer(width, height, samples_per_pixel=args.spp, shader=shader,
                        workers=args.workers, seed=args.seed)
    out = dequote(args.out) if args.out else default_output_name(scene_name)
    try:
        check_destination(out)
    except FileNotFoundError as e:
        raise SceneConfigError(str(e)) from None
    return scene_name, scene, cam, renderer, out

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        scene_name, scene, camera, renderer, out = load_config(args)
    except SceneConfigError as e:
        parser.error(str(e))

    log(f"Rendering {renderer.width}x{renderer.height}, {renderer.samples_per_pixel} spp, "
        f"{len(scene)} objects, {renderer.workers} worker(s)")
    start = time.perf_counter()
    pixels = renderer.render_frame(scene, camera)
    log(f"Rendered in {time.perf_counter() - start:.2f}s")

    destination = save_image(pixels, out)
    log(f"Wrote {destination}")

    if args.preview:
        from renderer.preview import show_preview
        show_preview(pixels, title=f"Ray Tracer - {scene_name}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
