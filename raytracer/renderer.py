from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from raytracer.camera import Camera
from raytracer.canvas import Canvas
from raytracer.world import MAX_RECURSIONS, World

Pixel = Tuple[int, int]


def render(camera: Camera, world: World, remaining: int = MAX_RECURSIONS) -> Iterator[Tuple[Pixel, np.ndarray]]:
    """Yields ((x, y), colour) for every pixel, row by row. Each pixel is independent of the others."""
    for y in range(camera.vsize):
        for x in range(camera.hsize):
            ray = camera.ray_for_pixel(x, y)
            yield (x, y), world.colour_at(ray, remaining)


def render_canvas(camera: Camera, world: World, remaining: int = MAX_RECURSIONS) -> Canvas:
    """Render the scene with full ray tracing: Phong shading, hard shadows, reflection, refraction."""
    canvas = Canvas(camera.hsize, camera.vsize)
    for (x, y), color_rgb in render(camera, world, remaining):
        canvas.write_pixel(x, y, color_rgb)
    return canvas
