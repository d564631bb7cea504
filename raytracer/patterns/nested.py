from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

import numpy as np

if TYPE_CHECKING:
    from raytracer.patterns.pattern import InnerPattern


@dataclass(frozen=True, slots=True, eq=False)
class Nested:
    """Blends a chain of patterns by averaging their colours at the same point."""

    patterns: Tuple[InnerPattern, ...]

    def __post_init__(self) -> None:
        if not self.patterns:
            raise ValueError("Nested pattern needs at least one inner pattern")
        object.__setattr__(self, "patterns", tuple(self.patterns))

    def pattern_at(self, pattern_point: np.ndarray) -> np.ndarray:
        total = np.zeros(3, dtype=float)
        for pattern in self.patterns:
            total = total + pattern.pattern_at(pattern_point)
        return total / len(self.patterns)
