from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Ray:
    origin: np.ndarray
    direction: np.ndarray

    def position(self, t: float) -> np.ndarray:
        return self.origin + self.direction * t

    def transform(self, matrix: np.ndarray) -> Ray:
        return Ray(origin=matrix @ self.origin, direction=matrix @ self.direction)
