from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


def radial_distance(pattern_point: np.ndarray) -> float:
    """Distance from the y axis."""
    return math.sqrt(float(pattern_point[0]) ** 2 + float(pattern_point[2]) ** 2)


@dataclass(frozen=True, slots=True, eq=False)
class Ring:
    """Concentric unit-width rings around the y axis."""

    a: np.ndarray
    b: np.ndarray

    def pattern_at(self, pattern_point: np.ndarray) -> np.ndarray:
        if math.floor(radial_distance(pattern_point)) % 2 == 0:
            return self.a
        return self.b
