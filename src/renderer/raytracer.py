# renderer/raytracer.py
import random
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Tuple

import numpy as np

from camera.camera import Camera
from core.vector import Color
from geometry.world import Scene
from renderer.shading import Shader
from renderer.tone_mapping import quantize

DEFAULT_SAMPLES = 4

class Renderer:
    """
    CPU pixel loop. Pixels are independent, so rows can be handed out to a
    process pool in contiguous bands and written back into a preallocated
    buffer without any locking.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = DEFAULT_SAMPLES,
                 shader: Optional[Shader] = None, workers: int = 1, seed: int = 0):
        if width < 1 or height < 1:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError(f"Samples per pixel must be at least 1, got {samples_per_pixel}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.shader = shader if shader is not None else Shader()
        self.workers = max(1, workers)
        self.seed = seed

    def render(self, scene: Scene, camera: Camera) -> np.ndarray:
        """
        Returns the averaged linear colors as a (height, width, 3) float array,
        top row first.
        """
        buffer = np.zeros((self.height, self.width, 3), dtype=np.float64)
        if self.workers == 1:
            for y in range(self.height):
                buffer[y] = self.render_row(scene, camera, y)
            return buffer

        with ProcessPoolExecutor(max_workers=self.workers) as pool:
            jobs = [(self, scene, camera, start, stop) for start, stop in self.bands()]
            for start, rows in pool.map(_render_band, jobs):
                buffer[start:start + len(rows)] = rows
        return buffer

    def render_frame(self, scene: Scene, camera: Camera) -> np.ndarray:
        """Renders and quantizes to a (height, width, 3) uint8 image."""
        return quantize(self.render(scene, camera))

    def bands(self) -> List[Tuple[int, int]]:
        n_bands = min(self.height, self.workers * 4)
        step = -(-self.height // n_bands)
        return [(start, min(start + step, self.height))
                for start in range(0, self.height, step)]

    def render_row(self, scene: Scene, camera: Camera, y: int) -> List[Tuple[float, float, float]]:
        rng = random.Random(self.seed * 1_000_003 + y)
        spp = self.samples_per_pixel
        row = []
        for x in range(self.width):
            pixel_color = Color(0.0, 0.0, 0.0)
            for _ in range(spp):
                if spp == 1:
                    dx = dy = 0.5
                else:
                    dx, dy = rng.random(), rng.random()
                s = (x + dx) / self.width
                t = (y + dy) / self.height
                ray = camera.get_ray(s, t)
                pixel_color = pixel_color + self.shader.trace(ray, scene, 0)
            pixel_color = pixel_color / spp
            row.append((pixel_color.x, pixel_color.y, pixel_color.z))
        return row

def _render_band(job) -> Tuple[int, list]:
    renderer, scene, camera, start, stop = job
    return start, [renderer.render_row(scene, camera, y) for y in range(start, stop)]
