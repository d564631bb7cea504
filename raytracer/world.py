from __future__ import annotations

from typing import List, Sequence

import numpy as np

from raytracer.surfaces.shape import Shape
from raytracer.typings.computations import Computations
from raytracer.typings.intersection import Intersection, hit, sort_intersections
from raytracer.typings.light import PointLight
from raytracer.typings.material import Material
from raytracer.typings.ray import Ray
from raytracer.utils.matrix_operations import scaling
from raytracer.utils.vector_operations import BLACK, EPSILON, WHITE, colour, point, vector_length

MAX_RECURSIONS: int = 5


class World:
    """A scene: shapes and point lights, shaded recursively with reflection and refraction.

    `remaining` is the bounce budget shared by reflected and refracted rays;
    recursion stops when it reaches zero, so mirror halls always terminate.
    """

    def __init__(
        self,
        shapes: Sequence[Shape] = (),
        lights: Sequence[PointLight] = (),
        background_color: np.ndarray = BLACK,
    ) -> None:
        self.shapes: List[Shape] = list(shapes)
        self.lights: List[PointLight] = list(lights)
        self.background_color: np.ndarray = np.asarray(background_color, dtype=float)

    def intersect(self, ray: Ray) -> List[Intersection]:
        intersections: List[Intersection] = []
        for shape in self.shapes:
            intersections.extend(shape.intersect(ray))
        return sort_intersections(intersections)

    def colour_at(self, ray: Ray, remaining: int = MAX_RECURSIONS) -> np.ndarray:
        intersections = self.intersect(ray)
        best_hit = hit(intersections)
        if best_hit is None:
            return self.background_color.copy()

        comps = Computations.prepare(best_hit, ray, intersections)
        return self.shade_hit(comps, remaining)

    def shade_hit(self, comps: Computations, remaining: int = MAX_RECURSIONS) -> np.ndarray:
        material = comps.shape.material

        # Local lighting with hard shadows
        surface_color = np.zeros(3, dtype=float)
        for light in self.lights:
            surface_color += material.lightning(
                comps.shape,
                light,
                comps.over_point,
                comps.eye,
                comps.normal,
                self.is_shadowed(comps.over_point, light),
            )

        reflected = self.reflected_colour(comps, remaining)
        refracted = self.refracted_colour(comps, remaining)
        return surface_color + reflected + refracted

    def reflected_colour(self, comps: Computations, remaining: int = MAX_RECURSIONS) -> np.ndarray:
        reflective = comps.shape.material.reflective
        if remaining <= 0 or reflective == 0.0:
            return np.zeros(3, dtype=float)

        reflect_ray = Ray(origin=comps.over_point, direction=comps.reflect)
        return self.colour_at(reflect_ray, remaining - 1) * reflective

    def refracted_colour(self, comps: Computations, remaining: int = MAX_RECURSIONS) -> np.ndarray:
        transparency = comps.shape.material.transparency
        indices = comps.indices
        if remaining <= 0 or transparency == 0.0 or indices.total_internal_reflection:
            return np.zeros(3, dtype=float)

        # Snell's law: bend the eye ray through the surface
        direction = comps.normal * (indices.ratio * indices.cos1 - indices.cos2) - comps.eye * indices.ratio
        refract_ray = Ray(origin=comps.under_point, direction=direction)
        return self.colour_at(refract_ray, remaining - 1) * transparency

    def is_shadowed(self, hit_point: np.ndarray, light: PointLight) -> bool:
        """Check if a shadow ray from hit_point toward the light is blocked by a shadow-casting shape."""
        to_light = light.position - hit_point
        distance_to_light = vector_length(to_light)
        if distance_to_light < EPSILON: # the point is at the light source
            return False

        shadow_ray = Ray(origin=hit_point, direction=to_light / distance_to_light)
        intersections: List[Intersection] = []
        for shape in self.shapes:
            if shape.cast_shadows:
                intersections.extend(shape.intersect(shadow_ray))
        shadow_hit = hit(sort_intersections(intersections))
        return shadow_hit is not None and shadow_hit.t < distance_to_light


def default_world() -> World:
    """Two concentric spheres lit from the upper left, the usual reference scene."""
    light = PointLight(point(-10.0, 10.0, -10.0), WHITE)
    outer_material = Material(colour=colour(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
    outer = Shape.sphere().with_material(outer_material)
    inner = Shape.sphere(scaling(0.5, 0.5, 0.5)) or Shape.sphere()
    return World(shapes=[outer, inner], lights=[light])
