from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True, eq=False)
class Stripe:
    """Alternates between two colours on every unit step along x."""

    a: np.ndarray
    b: np.ndarray

    def pattern_at(self, pattern_point: np.ndarray) -> np.ndarray:
        if math.floor(pattern_point[0]) % 2 == 0:
            return self.a
        return self.b
