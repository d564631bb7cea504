from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, List, Sequence

import numpy as np

from raytracer.typings.intersection import Intersection
from raytracer.typings.ray import Ray
from raytracer.utils.vector_operations import EPSILON, reflect_vector, vector_dot

if TYPE_CHECKING:
    from raytracer.surfaces.shape import Shape


@dataclass(frozen=True, slots=True)
class RefractiveIndices:
    """Snell's law terms at a hit.

    n1 is the index of the material being exited and n2 of the one being entered.
    cos1, cos2 and sin2_squared are filled in by refract().
    """

    n1: float
    n2: float
    cos1: float = 0.0
    cos2: float = 0.0
    sin2_squared: float = 0.0

    @property
    def ratio(self) -> float:
        return self.n1 / self.n2

    @property
    def total_internal_reflection(self) -> bool:
        return self.sin2_squared > 1.0

    @classmethod
    def from_intersections(cls, hit: Intersection, intersections: Sequence[Intersection]) -> RefractiveIndices:
        """Walks the sorted intersections keeping a stack of the shapes the ray is inside."""
        n1 = 1.0
        n2 = 1.0
        containers: List[Shape] = []
        for intersection in intersections:
            if intersection is hit:
                n1 = containers[-1].material.refractive_index if containers else 1.0

            # entering a shape pushes it, leaving removes it
            for index, container in enumerate(containers):
                if container is intersection.shape:
                    del containers[index]
                    break
            else:
                containers.append(intersection.shape)

            if intersection is hit:
                n2 = containers[-1].material.refractive_index if containers else 1.0
                break
        return cls(n1=n1, n2=n2)

    def refract(self, eye: np.ndarray, normal: np.ndarray) -> RefractiveIndices:
        # sin2^2 = (n1 / n2)^2 * (1 - cos1^2)
        cos1 = vector_dot(eye, normal)
        sin2_squared = (1.0 - cos1 * cos1) * self.ratio * self.ratio
        cos2 = math.sqrt(1.0 - sin2_squared) if sin2_squared <= 1.0 else 0.0
        return replace(self, cos1=cos1, cos2=cos2, sin2_squared=sin2_squared)

    def reflectance(self) -> float:
        """Schlick's approximation of the Fresnel reflectance."""
        if self.total_internal_reflection:
            return 1.0
        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        cos = self.cos2 if self.n1 > self.n2 else self.cos1
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5


@dataclass(frozen=True, slots=True, eq=False)
class Computations:
    """Everything shading needs to know about one hit."""

    intersection: Intersection
    point: np.ndarray
    over_point: np.ndarray
    under_point: np.ndarray
    eye: np.ndarray
    normal: np.ndarray
    reflect: np.ndarray
    inside: bool
    indices: RefractiveIndices

    @property
    def t(self) -> float:
        return self.intersection.t

    @property
    def shape(self) -> Shape:
        return self.intersection.shape

    @classmethod
    def prepare(
        cls,
        hit: Intersection,
        ray: Ray,
        intersections: Sequence[Intersection] | None = None,
    ) -> Computations:
        if intersections is None:
            intersections = [hit]

        hit_point = ray.position(hit.t)
        eye = -ray.direction
        normal = hit.shape.normal_at(hit_point)
        inside = vector_dot(normal, eye) < 0.0
        if inside:
            normal = -normal

        # nudged along the normal so secondary rays do not hit the surface they start on
        over_point = hit_point + normal * EPSILON
        under_point = hit_point - normal * EPSILON

        indices = RefractiveIndices.from_intersections(hit, intersections).refract(eye, normal)
        return cls(
            intersection=hit,
            point=hit_point,
            over_point=over_point,
            under_point=under_point,
            eye=eye,
            normal=normal,
            reflect=reflect_vector(ray.direction, normal),
            inside=inside,
            indices=indices,
        )

    def reflectance(self) -> float:
        return self.indices.reflectance()
