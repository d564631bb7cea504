from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

import numpy as np

from raytracer.typings.light import PointLight
from raytracer.utils.vector_operations import WHITE, normalize_vector, reflect_vector, vector_dot

if TYPE_CHECKING:
    from raytracer.patterns.pattern import Pattern
    from raytracer.surfaces.shape import Shape


@dataclass(frozen=True, slots=True, eq=False)
class Material:
    """Phong coefficients plus the optical properties used for recursion.

    ambient, diffuse, specular and shininess are stored as absolute values.
    """

    colour: np.ndarray = field(default_factory=WHITE.copy)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    pattern: Pattern | None = None
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = 1.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "colour", np.asarray(self.colour, dtype=float))
        object.__setattr__(self, "ambient", abs(float(self.ambient)))
        object.__setattr__(self, "diffuse", abs(float(self.diffuse)))
        object.__setattr__(self, "specular", abs(float(self.specular)))
        object.__setattr__(self, "shininess", abs(float(self.shininess)))
        object.__setattr__(self, "reflective", float(self.reflective))
        object.__setattr__(self, "transparency", float(self.transparency))
        object.__setattr__(self, "refractive_index", float(self.refractive_index))

    def with_colour(self, colour: np.ndarray) -> Material:
        return replace(self, colour=colour)

    def with_ambient(self, ambient: float) -> Material:
        return replace(self, ambient=ambient)

    def with_diffuse(self, diffuse: float) -> Material:
        return replace(self, diffuse=diffuse)

    def with_specular(self, specular: float) -> Material:
        return replace(self, specular=specular)

    def with_shininess(self, shininess: float) -> Material:
        return replace(self, shininess=shininess)

    def with_pattern(self, pattern: Pattern | None) -> Material:
        return replace(self, pattern=pattern)

    def with_reflective(self, reflective: float) -> Material:
        return replace(self, reflective=reflective)

    def with_transparency(self, transparency: float) -> Material:
        return replace(self, transparency=transparency)

    def with_refractive_index(self, refractive_index: float) -> Material:
        return replace(self, refractive_index=refractive_index)

    def lightning(
        self,
        shape: Shape,
        light: PointLight,
        hit_point: np.ndarray,
        eye: np.ndarray,
        normal: np.ndarray,
        in_shadow: bool = False,
    ) -> np.ndarray:
        """Phong shading of one light at a surface point. The result is not clamped."""
        if self.pattern is not None:
            base_colour = self.pattern.at_shape(shape, hit_point)
        else:
            base_colour = self.colour

        effective_colour = base_colour * light.intensity
        ambient = effective_colour * self.ambient
        if in_shadow:
            return ambient

        light_direction = normalize_vector(light.position - hit_point)

        # Diffuse component: kd * effective_colour * dot(L, N)
        light_dot_normal = vector_dot(light_direction, normal)
        if light_dot_normal < 0.0:
            # light is on the other side of the surface
            return ambient
        diffuse = effective_colour * self.diffuse * light_dot_normal

        # Specular component (Phong): ks * light_intensity * dot(R, E)^shininess
        reflect_direction = reflect_vector(-light_direction, normal)
        reflect_dot_eye = vector_dot(reflect_direction, eye)
        if reflect_dot_eye <= 0.0:
            specular = np.zeros(3, dtype=float)
        else:
            specular = light.intensity * self.specular * (reflect_dot_eye ** self.shininess)

        return ambient + diffuse + specular
