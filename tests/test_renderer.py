import math

import numpy as np

from raytracer.camera import Camera
from raytracer.renderer import render, render_canvas
from raytracer.utils.matrix_operations import view_transform
from raytracer.utils.vector_operations import colour, point, vector


def looking_at_origin(size: int = 11) -> Camera:
    camera = Camera(size, size, math.pi / 2)
    return camera.with_transform(view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)))


class TestRender:
    def test_yields_every_pixel_row_by_row(self, world):
        pixels = [xy for xy, _ in render(looking_at_origin(3), world)]
        assert pixels == [(x, y) for y in range(3) for x in range(3)]

    def test_canvas_centre(self, world):
        canvas = render_canvas(looking_at_origin(), world)
        assert (canvas.width, canvas.height) == (11, 11)
        np.testing.assert_allclose(canvas.pixel_at(5, 5), colour(0.38066, 0.47583, 0.2855), atol=1e-5)

    def test_corner_misses_everything(self, world):
        canvas = render_canvas(looking_at_origin(), world)
        np.testing.assert_array_equal(canvas.pixel_at(0, 0), colour(0, 0, 0))
