from __future__ import annotations

import math

import numpy as np

from raytracer.typings.ray import Ray
from raytracer.utils.matrix_operations import IDENTITY, invert
from raytracer.utils.vector_operations import normalize_vector, point


class Camera:
    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
    ) -> None:
        self.hsize: int = int(hsize)
        self.vsize: int = int(vsize)
        self.field_of_view: float = float(field_of_view)
        self.transform: np.ndarray = IDENTITY
        self.inverse: np.ndarray = IDENTITY

        self._recompute_canvas()

    def _recompute_canvas(self) -> None:
        """The canvas sits one unit in front of the eye. half_width/half_height are its
        extents and pixel_size the world size of one (square) pixel."""
        half_view = math.tan(self.field_of_view / 2.0)
        aspect_ratio = float(self.hsize) / float(self.vsize)
        if aspect_ratio >= 1.0:
            half_width = half_view
            half_height = half_view / aspect_ratio
        else:
            half_width = half_view * aspect_ratio
            half_height = half_view

        self.half_width: float = half_width
        self.half_height: float = half_height
        self.pixel_size: float = half_width * 2.0 / float(self.hsize)

    def with_transform(self, transform: np.ndarray) -> Camera | None:
        """Copy of the camera placed by `transform`, or None when it cannot be inverted."""
        inverse = invert(transform)
        if inverse is None:
            return None
        camera = Camera(self.hsize, self.vsize, self.field_of_view)
        camera.transform = np.asarray(transform, dtype=float)
        camera.inverse = inverse
        return camera

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        # offset from the canvas edge to the pixel's centre
        x_offset = (float(px) + 0.5) * self.pixel_size
        y_offset = (float(py) + 0.5) * self.pixel_size

        # the camera looks toward -z, so +x is to the left
        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        pixel_point = self.inverse @ point(world_x, world_y, -1.0)
        origin = self.inverse @ point(0.0, 0.0, 0.0)
        direction = normalize_vector(pixel_point - origin)
        return Ray(origin=origin, direction=direction)
