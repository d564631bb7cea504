from __future__ import annotations

from typing import List

import numpy as np

from raytracer.typings.ray import Ray
from raytracer.utils.vector_operations import point, vector_dot


class Sphere:
    """Unit sphere centred on the object-space origin."""

    center: np.ndarray = point(0.0, 0.0, 0.0)
    center.setflags(write=False)

    def local_intersect(self, ray: Ray) -> List[float]:
        ray_origin = ray.origin
        ray_direction = ray.direction

        origin_to_center = ray_origin - self.center
        quadratic_a = vector_dot(ray_direction, ray_direction)
        quadratic_b = 2.0 * vector_dot(ray_direction, origin_to_center)
        quadratic_c = vector_dot(origin_to_center, origin_to_center) - 1.0

        discriminant = quadratic_b * quadratic_b - 4.0 * quadratic_a * quadratic_c
        if discriminant < 0.0:
            return []

        # a tangent ray still reports two (equal) roots
        sqrt_discriminant = float(np.sqrt(discriminant))
        t_near = (-quadratic_b - sqrt_discriminant) / (2.0 * quadratic_a)
        t_far = (-quadratic_b + sqrt_discriminant) / (2.0 * quadratic_a)
        return [t_near, t_far]

    def local_normal_at(self, object_point: np.ndarray) -> np.ndarray:
        return object_point - self.center

    def __repr__(self) -> str:
        return "Sphere()"
