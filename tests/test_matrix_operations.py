import math

import numpy as np
import pytest

from raytracer.utils.matrix_operations import (
    IDENTITY,
    cofactor,
    determinant,
    invert,
    is_invertible,
    minor,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    submatrix,
    translation,
    transpose,
    view_transform,
)
from raytracer.utils.vector_operations import point, vector

HALF_SQRT_2 = math.sqrt(2) / 2


class TestDeterminant:
    def test_two_by_two(self):
        assert determinant(np.array([[1, 5], [-3, 2]])) == 17.0

    def test_submatrix_of_three_by_three(self):
        m = np.array([[1, 5, 0], [-3, 2, 7], [0, 6, -3]])
        np.testing.assert_array_equal(submatrix(m, 0, 2), np.array([[-3, 2], [0, 6]]))

    def test_submatrix_of_four_by_four(self):
        m = np.array([[-6, 1, 1, 6], [-8, 5, 8, 6], [-1, 0, 8, 2], [-7, 1, -1, 1]])
        expected = np.array([[-6, 1, 6], [-8, 8, 6], [-7, -1, 1]])
        np.testing.assert_array_equal(submatrix(m, 2, 1), expected)

    def test_minor_and_cofactor(self):
        m = np.array([[3, 5, 0], [2, -1, -7], [6, -1, 5]])
        assert minor(m, 0, 0) == -12.0
        assert cofactor(m, 0, 0) == -12.0
        assert minor(m, 1, 0) == 25.0
        assert cofactor(m, 1, 0) == -25.0

    def test_three_by_three(self):
        m = np.array([[1, 2, 6], [-5, 8, -4], [2, 6, 4]])
        assert cofactor(m, 0, 0) == 56.0
        assert cofactor(m, 0, 1) == 12.0
        assert cofactor(m, 0, 2) == -46.0
        assert determinant(m) == -196.0

    def test_four_by_four(self):
        m = np.array([[-2, -8, 3, 5], [-3, 1, 7, 3], [1, 2, -9, 6], [-6, 7, 7, -9]])
        assert cofactor(m, 0, 0) == 690.0
        assert cofactor(m, 0, 1) == 447.0
        assert cofactor(m, 0, 2) == 210.0
        assert cofactor(m, 0, 3) == 51.0
        assert determinant(m) == -4071.0


class TestInvert:
    def test_invertible(self):
        m = np.array([[6, 4, 4, 4], [5, 5, 7, 6], [4, -9, 3, -7], [9, 1, 7, -6]])
        assert determinant(m) == -2120.0
        assert is_invertible(m)

    def test_singular_has_no_inverse(self):
        m = np.array([[-4, 2, -2, -3], [9, 6, 2, 6], [0, -5, 1, -5], [0, 0, 0, 0]])
        assert not is_invertible(m)
        assert invert(m) is None

    def test_inverse_values(self):
        m = np.array([[-5, 2, 6, -8], [1, -5, 1, 8], [7, 7, -6, -7], [1, -3, 7, 4]])
        inverse = invert(m)
        assert determinant(m) == 532.0
        assert cofactor(m, 2, 3) == -160.0
        assert inverse[3, 2] == pytest.approx(-160 / 532)
        assert cofactor(m, 3, 2) == 105.0
        assert inverse[2, 3] == pytest.approx(105 / 532)
        expected = np.array(
            [
                [0.21805, 0.45113, 0.24060, -0.04511],
                [-0.80827, -1.45677, -0.44361, 0.52068],
                [-0.07895, -0.22368, -0.05263, 0.19737],
                [-0.52256, -0.81391, -0.30075, 0.30639],
            ]
        )
        np.testing.assert_allclose(inverse, expected, atol=1e-5)

    @pytest.mark.parametrize(
        "m",
        [
            np.array([[8, -5, 9, 2], [7, 5, 6, 1], [-6, 0, 9, 6], [-3, 0, -9, -4]]),
            np.array([[9, 3, 0, 9], [-5, -2, -6, -3], [-4, 9, 6, 4], [-7, 6, 6, 2]]),
            translation(1, -2, 3) @ rotation_y(0.7) @ scaling(2, 0.5, 3),
        ],
    )
    def test_inverse_times_matrix_is_identity(self, m):
        np.testing.assert_allclose(invert(m) @ m, IDENTITY, atol=1e-9)

    def test_product_times_inverse_restores(self):
        a = np.array([[3, -9, 7, 3], [3, -8, 2, -9], [-4, 4, 4, 1], [-6, 5, -1, 1]], dtype=float)
        b = np.array([[8, 2, 2, 2], [3, -1, 7, 0], [7, 0, 5, 4], [6, -2, 0, 5]], dtype=float)
        np.testing.assert_allclose((a @ b) @ invert(b), a, atol=1e-9)

    def test_inverts_three_by_three(self):
        m = np.array([[2, 0, 0], [0, 4, 0], [1, 0, 1]], dtype=float)
        np.testing.assert_allclose(invert(m) @ m, np.identity(3), atol=1e-12)


class TestTranspose:
    def test_transpose(self):
        m = np.array([[0, 9, 3, 0], [9, 8, 0, 8], [1, 8, 5, 3], [0, 0, 5, 8]])
        expected = np.array([[0, 9, 1, 0], [9, 8, 8, 0], [3, 0, 5, 5], [0, 8, 3, 8]])
        np.testing.assert_array_equal(transpose(m), expected)

    def test_transpose_twice_is_original(self):
        m = np.array([[1, 2, 3], [4, 5, 6], [7, 8, 9]], dtype=float)
        np.testing.assert_array_equal(transpose(transpose(m)), m)

    def test_transpose_identity(self):
        np.testing.assert_array_equal(transpose(IDENTITY), IDENTITY)


class TestTransforms:
    def test_translation_moves_points(self):
        np.testing.assert_allclose(translation(5, -3, 2) @ point(-3, 4, 5), point(2, 1, 7))

    def test_inverse_translation_moves_back(self):
        np.testing.assert_allclose(invert(translation(5, -3, 2)) @ point(-3, 4, 5), point(-8, 7, 3))

    def test_translation_ignores_vectors(self):
        v = vector(-3, 4, 5)
        np.testing.assert_allclose(translation(5, -3, 2) @ v, v)

    def test_scaling(self):
        np.testing.assert_allclose(scaling(2, 3, 4) @ point(-4, 6, 8), point(-8, 18, 32))
        np.testing.assert_allclose(scaling(2, 3, 4) @ vector(-4, 6, 8), vector(-8, 18, 32))
        np.testing.assert_allclose(scaling(-1, 1, 1) @ point(2, 3, 4), point(-2, 3, 4))

    def test_rotation_x(self):
        p = point(0, 1, 0)
        np.testing.assert_allclose(rotation_x(math.pi / 4) @ p, point(0, HALF_SQRT_2, HALF_SQRT_2), atol=1e-12)
        np.testing.assert_allclose(rotation_x(math.pi / 2) @ p, point(0, 0, 1), atol=1e-12)

    def test_rotation_y(self):
        p = point(0, 0, 1)
        np.testing.assert_allclose(rotation_y(math.pi / 4) @ p, point(HALF_SQRT_2, 0, HALF_SQRT_2), atol=1e-12)
        np.testing.assert_allclose(rotation_y(math.pi / 2) @ p, point(1, 0, 0), atol=1e-12)

    def test_rotation_z(self):
        p = point(0, 1, 0)
        np.testing.assert_allclose(rotation_z(math.pi / 4) @ p, point(-HALF_SQRT_2, HALF_SQRT_2, 0), atol=1e-12)
        np.testing.assert_allclose(rotation_z(math.pi / 2) @ p, point(-1, 0, 0), atol=1e-12)

    @pytest.mark.parametrize(
        "coefficients, expected",
        [
            ((1, 0, 0, 0, 0, 0), point(5, 3, 4)),
            ((0, 1, 0, 0, 0, 0), point(6, 3, 4)),
            ((0, 0, 1, 0, 0, 0), point(2, 5, 4)),
            ((0, 0, 0, 1, 0, 0), point(2, 7, 4)),
            ((0, 0, 0, 0, 1, 0), point(2, 3, 6)),
            ((0, 0, 0, 0, 0, 1), point(2, 3, 7)),
        ],
    )
    def test_shearing(self, coefficients, expected):
        np.testing.assert_allclose(shearing(*coefficients) @ point(2, 3, 4), expected)

    def test_chained_transforms_apply_right_to_left(self):
        transform = translation(10, 5, 7) @ scaling(5, 5, 5) @ rotation_x(math.pi / 2)
        np.testing.assert_allclose(transform @ point(1, 0, 1), point(15, 0, 7), atol=1e-12)


class TestViewTransform:
    def test_default_orientation(self):
        t = view_transform(point(0, 0, 0), point(0, 0, -1), vector(0, 1, 0))
        np.testing.assert_allclose(t, IDENTITY, atol=1e-12)

    def test_looking_in_positive_z(self):
        t = view_transform(point(0, 0, 0), point(0, 0, 1), vector(0, 1, 0))
        np.testing.assert_allclose(t, scaling(-1, 1, -1), atol=1e-12)

    def test_moves_the_world(self):
        t = view_transform(point(0, 0, 8), point(0, 0, 0), vector(0, 1, 0))
        np.testing.assert_allclose(t, translation(0, 0, -8), atol=1e-12)

    def test_arbitrary(self):
        t = view_transform(point(1, 3, 2), point(4, -2, 8), vector(1, 1, 0))
        expected = np.array(
            [
                [-0.50709, 0.50709, 0.67612, -2.36643],
                [0.76772, 0.60609, 0.12122, -2.82843],
                [-0.35857, 0.59761, -0.71714, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        np.testing.assert_allclose(t, expected, atol=1e-5)
