from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True, eq=False)
class Gradient:
    """Linear blend from a to b over each unit interval of x."""

    a: np.ndarray
    b: np.ndarray

    def pattern_at(self, pattern_point: np.ndarray) -> np.ndarray:
        x = float(pattern_point[0])
        return self.a + (self.b - self.a) * (x - math.floor(x))
