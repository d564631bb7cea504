from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Union

import numpy as np

from raytracer.surfaces.cube import Cube
from raytracer.surfaces.infinite_plane import InfinitePlane
from raytracer.surfaces.sphere import Sphere
from raytracer.typings.intersection import Intersection
from raytracer.typings.material import Material
from raytracer.typings.ray import Ray
from raytracer.utils.matrix_operations import IDENTITY, invert, transpose
from raytracer.utils.vector_operations import normalize_vector

ShapeKind = Union[Sphere, InfinitePlane, Cube]


@dataclass(frozen=True, slots=True, eq=False)
class Shape:
    """A shape kind placed in the world.

    Instances are compared by identity: every Intersection produced by a shape
    refers back to that same object, which the refractive index walk relies on.
    Use the ``with_*`` builders to derive modified copies.
    """

    kind: ShapeKind
    transform: np.ndarray
    inverse: np.ndarray
    inverse_transpose: np.ndarray
    material: Material = field(default_factory=Material)
    cast_shadows: bool = True

    @classmethod
    def new(cls, kind: ShapeKind, transform: np.ndarray = IDENTITY) -> Shape | None:
        """Returns None when the transform cannot be inverted."""
        inverse = invert(transform)
        if inverse is None:
            return None
        return cls(
            kind=kind,
            transform=np.asarray(transform, dtype=float),
            inverse=inverse,
            inverse_transpose=transpose(inverse),
        )

    @classmethod
    def sphere(cls, transform: np.ndarray = IDENTITY) -> Shape | None:
        return cls.new(Sphere(), transform)

    @classmethod
    def plane(cls, transform: np.ndarray = IDENTITY) -> Shape | None:
        return cls.new(InfinitePlane(), transform)

    @classmethod
    def cube(cls, transform: np.ndarray = IDENTITY) -> Shape | None:
        return cls.new(Cube(), transform)

    def with_transform(self, transform: np.ndarray) -> Shape | None:
        inverse = invert(transform)
        if inverse is None:
            return None
        return replace(
            self,
            transform=np.asarray(transform, dtype=float),
            inverse=inverse,
            inverse_transpose=transpose(inverse),
        )

    def with_material(self, material: Material) -> Shape:
        return replace(self, material=material)

    def with_shadows(self) -> Shape:
        return replace(self, cast_shadows=True)

    def without_shadows(self) -> Shape:
        return replace(self, cast_shadows=False)

    def intersect(self, ray: Ray) -> List[Intersection]:
        local_ray = ray.transform(self.inverse)
        return [Intersection(t, self) for t in self.kind.local_intersect(local_ray)]

    def normal_at(self, world_point: np.ndarray) -> np.ndarray:
        object_point = self.inverse @ world_point
        object_normal = self.kind.local_normal_at(object_point)
        # the inverse transpose keeps normals perpendicular under non-uniform scaling
        world_normal = self.inverse_transpose @ object_normal
        world_normal[3] = 0.0
        return normalize_vector(world_normal)
