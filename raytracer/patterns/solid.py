from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True, eq=False)
class Solid:
    colour: np.ndarray

    def pattern_at(self, pattern_point: np.ndarray) -> np.ndarray:
        return self.colour
