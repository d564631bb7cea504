from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from raytracer.patterns.ring import radial_distance


@dataclass(frozen=True, slots=True, eq=False)
class RadialGradient:
    """Gradient from a to b repeating with every unit of distance from the y axis."""

    a: np.ndarray
    b: np.ndarray

    def pattern_at(self, pattern_point: np.ndarray) -> np.ndarray:
        distance = radial_distance(pattern_point)
        return self.a + (self.b - self.a) * (distance - math.floor(distance))
