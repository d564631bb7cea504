from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True, eq=False)
class Checker:
    """Three dimensional checkerboard of unit cubes."""

    a: np.ndarray
    b: np.ndarray

    def pattern_at(self, pattern_point: np.ndarray) -> np.ndarray:
        cell_sum = math.floor(pattern_point[0]) + math.floor(pattern_point[1]) + math.floor(pattern_point[2])
        if cell_sum % 2 == 0:
            return self.a
        return self.b
