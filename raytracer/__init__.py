"""Whitted-style ray tracer: shapes, patterns, Phong shading, shadows, reflection and refraction."""

from raytracer.camera import Camera
from raytracer.canvas import Canvas
from raytracer.renderer import render, render_canvas
from raytracer.surfaces.shape import Shape
from raytracer.typings.light import PointLight
from raytracer.typings.material import Material
from raytracer.typings.ray import Ray
from raytracer.world import World, default_world

__version__ = "0.1.0"

__all__ = [
    "Camera",
    "Canvas",
    "Material",
    "PointLight",
    "Ray",
    "Shape",
    "World",
    "default_world",
    "render",
    "render_canvas",
]
