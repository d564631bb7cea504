"""Pytest configuration and shared fixtures."""

import pytest

from raytracer.surfaces.shape import Shape
from raytracer.typings.material import Material
from raytracer.utils.matrix_operations import IDENTITY
from raytracer.world import World, default_world


def make_glass_sphere(transform=IDENTITY, refractive_index: float = 1.5) -> Shape:
    material = Material(transparency=1.0, refractive_index=refractive_index)
    return Shape.sphere(transform).with_material(material)


@pytest.fixture
def world() -> World:
    """The two concentric spheres reference scene."""
    return default_world()


@pytest.fixture
def glass_sphere() -> Shape:
    return make_glass_sphere()


@pytest.fixture
def make_glass():
    """Factory for glass spheres with a given transform and refractive index."""
    return make_glass_sphere
