from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from raytracer.utils.perlin_noise import noise
from raytracer.utils.vector_operations import point

if TYPE_CHECKING:
    from raytracer.patterns.pattern import InnerPattern


@dataclass(frozen=True, slots=True, eq=False)
class Perlin:
    """Jitters the lookup point of an inner pattern with smooth noise."""

    inner: InnerPattern
    scale: float

    def displace(self, pattern_point: np.ndarray) -> np.ndarray:
        x, y, z = (float(c) for c in pattern_point[:3])
        # each axis samples the noise field with rotated coordinates so the offsets differ
        return point(
            x + noise(x, y, z) * self.scale,
            y + noise(z, x, y) * self.scale,
            z + noise(y, z, x) * self.scale,
        )

    def pattern_at(self, pattern_point: np.ndarray) -> np.ndarray:
        return self.inner.pattern_at(self.displace(pattern_point))
