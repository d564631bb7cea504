from __future__ import annotations

import math
from typing import List, Tuple

import numpy as np

from raytracer.typings.ray import Ray
from raytracer.utils.vector_operations import EPSILON, vector


def check_axis(origin: float, direction: float) -> Tuple[float, float]:
    """Entry and exit t of one [-1, 1] slab."""
    t_min_numerator = -1.0 - origin
    t_max_numerator = 1.0 - origin

    if abs(direction) >= EPSILON:
        t_near = t_min_numerator / direction
        t_far = t_max_numerator / direction
    else:
        t_near = math.copysign(math.inf, t_min_numerator)
        t_far = math.copysign(math.inf, t_max_numerator)

    if t_near > t_far:
        t_near, t_far = t_far, t_near
    return t_near, t_far


class Cube:
    """Axis-aligned cube spanning [-1, 1] on every object-space axis."""

    def local_intersect(self, ray: Ray) -> List[float]:
        ray_origin = ray.origin
        ray_direction = ray.direction
        t_entry = -math.inf
        t_exit = math.inf

        for axis in range(3):
            t_near, t_far = check_axis(float(ray_origin[axis]), float(ray_direction[axis]))
            t_entry = max(t_entry, t_near)
            t_exit = min(t_exit, t_far)

        if t_entry > t_exit:
            return []
        return [t_entry, t_exit]

    def local_normal_at(self, object_point: np.ndarray) -> np.ndarray:
        # the face is the axis whose coordinate has the largest magnitude
        magnitudes = np.abs(object_point[:3])
        closest_axis = int(np.argmax(magnitudes))

        surface_normal = vector(0.0, 0.0, 0.0)
        surface_normal[closest_axis] = 1.0 if object_point[closest_axis] >= 0 else -1.0
        return surface_normal

    def __repr__(self) -> str:
        return "Cube()"
