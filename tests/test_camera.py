import math

import numpy as np
import pytest

from raytracer.camera import Camera
from raytracer.utils.matrix_operations import IDENTITY, rotation_y, scaling, translation
from raytracer.utils.vector_operations import point, vector

HALF_SQRT_2 = math.sqrt(2) / 2


class TestCamera:
    def test_construction(self):
        camera = Camera(160, 120, math.pi / 2)
        assert camera.hsize == 160
        assert camera.vsize == 120
        assert camera.field_of_view == pytest.approx(math.pi / 2)
        np.testing.assert_array_equal(camera.transform, IDENTITY)

    @pytest.mark.parametrize("hsize, vsize", [(200, 125), (125, 200)])
    def test_pixel_size(self, hsize, vsize):
        assert Camera(hsize, vsize, math.pi / 2).pixel_size == pytest.approx(0.01)

    def test_singular_transform_gives_none(self):
        assert Camera(10, 10, math.pi / 2).with_transform(scaling(0, 1, 1)) is None

    def test_with_transform_keeps_original(self):
        camera = Camera(10, 10, math.pi / 2)
        moved = camera.with_transform(translation(0, 0, 5))
        assert moved is not camera
        np.testing.assert_array_equal(camera.transform, IDENTITY)
        np.testing.assert_allclose(moved.inverse, translation(0, 0, -5))


class TestRayForPixel:
    def test_through_centre(self):
        ray = Camera(201, 101, math.pi / 2).ray_for_pixel(100, 50)
        np.testing.assert_allclose(ray.origin, point(0, 0, 0))
        np.testing.assert_allclose(ray.direction, vector(0, 0, -1), atol=1e-12)

    def test_through_corner(self):
        ray = Camera(201, 101, math.pi / 2).ray_for_pixel(0, 0)
        np.testing.assert_allclose(ray.origin, point(0, 0, 0))
        np.testing.assert_allclose(ray.direction, vector(0.66519, 0.33259, -0.66851), atol=1e-5)

    def test_transformed_camera(self):
        camera = Camera(201, 101, math.pi / 2).with_transform(rotation_y(math.pi / 4) @ translation(0, -2, 5))
        ray = camera.ray_for_pixel(100, 50)
        np.testing.assert_allclose(ray.origin, point(0, 2, -5), atol=1e-12)
        np.testing.assert_allclose(ray.direction, vector(HALF_SQRT_2, 0, -HALF_SQRT_2), atol=1e-12)
