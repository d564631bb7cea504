from __future__ import annotations

import math
from typing import Callable, Dict, List, Sequence, Tuple, TypeVar

import numpy as np

from raytracer.camera import Camera
from raytracer.patterns import Checker, Gradient, Nested, Pattern, PatternKind, Perlin, RadialGradient, Ring, Solid, Stripe
from raytracer.scene_settings import SceneSettings
from raytracer.surfaces.cube import Cube
from raytracer.surfaces.infinite_plane import InfinitePlane
from raytracer.surfaces.shape import Shape, ShapeKind
from raytracer.surfaces.sphere import Sphere
from raytracer.typings.light import PointLight
from raytracer.typings.material import Material
from raytracer.utils.matrix_operations import rotation_x, rotation_y, rotation_z, scaling, translation, view_transform
from raytracer.utils.vector_operations import colour, point, vector
from raytracer.world import World

T = TypeVar("T")

TWO_COLOUR_PATTERNS: Dict[str, Callable[[np.ndarray, np.ndarray], PatternKind]] = {
    "stripe": Stripe,
    "gradient": Gradient,
    "ring": Ring,
    "checker": Checker,
    "radial": RadialGradient,
}

SHAPE_KINDS: Dict[str, Callable[[], ShapeKind]] = {
    "sph": Sphere,
    "pln": InfinitePlane,
    "box": Cube,
}


def _require(params: Sequence[float], count: int, obj_type: str) -> None:
    if len(params) < count:
        raise ValueError("{} expects at least {} values, got {}".format(obj_type, count, len(params)))


def _lookup(table: Sequence[T], one_based_index: float, what: str) -> T:
    index = int(one_based_index)
    if not 1 <= index <= len(table):
        raise ValueError("{} index {} out of range (1..{})".format(what, index, len(table)))
    return table[index - 1]


def _parse_camera(params: List[float]) -> Camera:
    _require(params, 12, "cam")
    camera = Camera(int(params[0]), int(params[1]), math.radians(params[2]))
    transform = view_transform(point(*params[3:6]), point(*params[6:9]), vector(*params[9:12]))
    # a degenerate view falls back to the default camera orientation
    return camera.with_transform(transform) or camera


def _parse_pattern(tokens: List[str], patterns: List[Pattern]) -> Pattern:
    if not tokens:
        raise ValueError("pat expects a pattern kind")
    kind_name = tokens[0]
    params = [float(p) for p in tokens[1:]]

    kind: PatternKind
    transform = np.identity(4)
    if kind_name == "solid":
        _require(params, 3, "pat solid")
        kind = Solid(colour(*params[:3]))
    elif kind_name in TWO_COLOUR_PATTERNS:
        _require(params, 6, "pat " + kind_name)
        kind = TWO_COLOUR_PATTERNS[kind_name](colour(*params[:3]), colour(*params[3:6]))
        if len(params) >= 9:
            transform = scaling(*params[6:9])
    elif kind_name == "perlin":
        _require(params, 2, "pat perlin")
        kind = Perlin(_lookup(patterns, params[0], "pattern"), params[1])
    elif kind_name == "nested":
        _require(params, 1, "pat nested")
        kind = Nested(tuple(_lookup(patterns, index, "pattern") for index in params))
    else:
        raise ValueError("unknown pattern kind: {}".format(kind_name))
    return Pattern.new(kind, transform) or Pattern.identity(kind)


def _parse_material(params: List[float], patterns: List[Pattern]) -> Material:
    _require(params, 10, "mtl")
    material = Material(
        colour=colour(*params[:3]),
        ambient=params[3],
        diffuse=params[4],
        specular=params[5],
        shininess=params[6],
        reflective=params[7],
        transparency=params[8],
        refractive_index=params[9],
    )
    if len(params) >= 11 and int(params[10]) != 0:
        material = material.with_pattern(_lookup(patterns, params[10], "pattern"))
    return material


def _parse_shape(obj_type: str, params: List[float], materials: List[Material]) -> Shape:
    _require(params, 10, obj_type)
    kind = SHAPE_KINDS[obj_type]()
    transform = (
        translation(*params[0:3])
        @ rotation_x(math.radians(params[6]))
        @ rotation_y(math.radians(params[7]))
        @ rotation_z(math.radians(params[8]))
        @ scaling(*params[3:6])
    )
    shape = Shape.new(kind, transform) or Shape.new(kind)
    shape = shape.with_material(_lookup(materials, params[9], "material"))
    if len(params) >= 11 and int(params[10]) == 0:
        shape = shape.without_shadows()
    return shape


def parse_scene_file(file_path: str) -> Tuple[Camera | None, SceneSettings, World]:
    camera: Camera | None = None
    scene_settings = SceneSettings()
    patterns: List[Pattern] = []
    materials: List[Material] = []
    shapes: List[Shape] = []
    lights: List[PointLight] = []
    with open(file_path, 'r') as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            obj_type = parts[0]
            try:
                if obj_type == "pat":
                    patterns.append(_parse_pattern(parts[1:], patterns))
                    continue
                params = [float(p) for p in parts[1:]]
                if obj_type == "cam":
                    camera = _parse_camera(params)
                elif obj_type == "set":
                    _require(params, 4, "set")
                    scene_settings = SceneSettings(colour(*params[:3]), params[3])
                elif obj_type == "mtl":
                    materials.append(_parse_material(params, patterns))
                elif obj_type in SHAPE_KINDS:
                    shapes.append(_parse_shape(obj_type, params, materials))
                elif obj_type == "lgt":
                    _require(params, 6, "lgt")
                    lights.append(PointLight(point(*params[:3]), colour(*params[3:6])))
                else:
                    raise ValueError("unknown object type: {}".format(obj_type))
            except ValueError as error:
                raise ValueError("{}:{}: {}".format(file_path, line_number, error)) from error

    world = World(shapes=shapes, lights=lights, background_color=scene_settings.background_color)
    return camera, scene_settings, world
