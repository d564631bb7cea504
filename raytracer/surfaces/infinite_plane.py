from typing import List

import numpy as np

from raytracer.typings.ray import Ray
from raytracer.utils.vector_operations import EPSILON, vector


class InfinitePlane:
    """The xz plane (y = 0) in object space."""

    normal: np.ndarray = vector(0.0, 1.0, 0.0)
    normal.setflags(write=False)

    def local_intersect(self, ray: Ray) -> List[float]:
        direction_y = float(ray.direction[1])
        # parallel and coplanar rays both miss
        if abs(direction_y) < EPSILON:
            return []
        return [-float(ray.origin[1]) / direction_y]

    def local_normal_at(self, object_point: np.ndarray) -> np.ndarray:
        return self.normal.copy()

    def __repr__(self) -> str:
        return "InfinitePlane()"
