from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

import numpy as np

from raytracer.patterns.checker import Checker
from raytracer.patterns.gradient import Gradient
from raytracer.patterns.nested import Nested
from raytracer.patterns.perlin import Perlin
from raytracer.patterns.radial_gradient import RadialGradient
from raytracer.patterns.ring import Ring
from raytracer.patterns.solid import Solid
from raytracer.patterns.stripe import Stripe
from raytracer.utils.matrix_operations import IDENTITY, invert

if TYPE_CHECKING:
    from raytracer.surfaces.shape import Shape

PatternKind = Union[Solid, Stripe, Gradient, Ring, Checker, RadialGradient, Perlin, Nested]

# what Perlin and Nested accept as inner entries
InnerPattern = Union[PatternKind, "Pattern"]


@dataclass(frozen=True, slots=True, eq=False)
class Pattern:
    """A pattern kind with its own transform, independent of the shape it is painted on."""

    kind: PatternKind
    transform: np.ndarray
    inverse: np.ndarray

    @classmethod
    def new(cls, kind: PatternKind, transform: np.ndarray = IDENTITY) -> Pattern | None:
        """Returns None when the transform cannot be inverted."""
        inverse = invert(transform)
        if inverse is None:
            return None
        return cls(kind=kind, transform=np.asarray(transform, dtype=float), inverse=inverse)

    @classmethod
    def identity(cls, kind: PatternKind) -> Pattern:
        return cls(kind=kind, transform=IDENTITY, inverse=IDENTITY)

    def at(self, object_point: np.ndarray) -> np.ndarray:
        return self.kind.pattern_at(self.inverse @ object_point)

    def pattern_at(self, pattern_point: np.ndarray) -> np.ndarray:
        """Evaluates through this transform, so a placed pattern can sit inside Perlin or Nested."""
        return self.at(pattern_point)

    def at_shape(self, shape: Shape, world_point: np.ndarray) -> np.ndarray:
        object_point = shape.inverse @ world_point
        return self.at(object_point)
