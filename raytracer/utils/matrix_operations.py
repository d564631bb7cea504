"""4x4 transform matrices for homogeneous points and vectors.

Matrices are plain numpy arrays and compose with ``@`` (``M @ p`` applies M to
a point or vector). The determinant and inverse are computed by cofactor
expansion rather than LU decomposition so that a singular matrix is detected
by an exact zero determinant.
"""

from __future__ import annotations

import math

import numpy as np

from raytracer.utils.vector_operations import normalize_vector, vector_cross

IDENTITY: np.ndarray = np.identity(4, dtype=float)
IDENTITY.setflags(write=False)


def submatrix(matrix: np.ndarray, row: int, column: int) -> np.ndarray:
    reduced = np.delete(np.asarray(matrix, dtype=float), row, axis=0)
    return np.delete(reduced, column, axis=1)


def determinant(matrix: np.ndarray) -> float:
    """Determinant by recursive cofactor expansion along the first row."""
    matrix_array = np.asarray(matrix, dtype=float)
    size = matrix_array.shape[0]
    if size == 1:
        return float(matrix_array[0, 0])
    if size == 2:
        return float(matrix_array[0, 0] * matrix_array[1, 1] - matrix_array[0, 1] * matrix_array[1, 0])
    return sum(float(matrix_array[0, column]) * cofactor(matrix_array, 0, column) for column in range(size))


def minor(matrix: np.ndarray, row: int, column: int) -> float:
    return determinant(submatrix(matrix, row, column))


def cofactor(matrix: np.ndarray, row: int, column: int) -> float:
    value = minor(matrix, row, column)
    return -value if (row + column) % 2 == 1 else value


def is_invertible(matrix: np.ndarray) -> bool:
    return determinant(matrix) != 0.0


def transpose(matrix: np.ndarray) -> np.ndarray:
    matrix_array = np.asarray(matrix, dtype=float)
    size = matrix_array.shape[0]
    transposed = np.empty_like(matrix_array)
    for row in range(size):
        for column in range(size):
            transposed[column, row] = matrix_array[row, column]
    return transposed


def invert(matrix: np.ndarray) -> np.ndarray | None:
    """Inverse via the adjugate, or None when the matrix is singular."""
    matrix_array = np.asarray(matrix, dtype=float)
    det = determinant(matrix_array)
    if det == 0.0:
        return None

    size = matrix_array.shape[0]
    inverse = np.empty_like(matrix_array)
    for row in range(size):
        for column in range(size):
            # transposed on write
            inverse[column, row] = cofactor(matrix_array, row, column) / det
    return inverse


def translation(x: float, y: float, z: float) -> np.ndarray:
    matrix = np.identity(4, dtype=float)
    matrix[:3, 3] = (x, y, z)
    return matrix


def scaling(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([float(x), float(y), float(z), 1.0])


def rotation_x(radians: float) -> np.ndarray:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, cos_r, -sin_r, 0.0],
            [0.0, sin_r, cos_r, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> np.ndarray:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [cos_r, 0.0, sin_r, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-sin_r, 0.0, cos_r, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> np.ndarray:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return np.array(
        [
            [cos_r, -sin_r, 0.0, 0.0],
            [sin_r, cos_r, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> np.ndarray:
    """Each coefficient moves the first axis in proportion to the second."""
    return np.array(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(eye: np.ndarray, to: np.ndarray, up: np.ndarray) -> np.ndarray:
    """Orients the world relative to an eye looking at `to`.
       left (perpendicular to) forward (perpendicular to) true_up"""
    forward = normalize_vector(to - eye)
    left = vector_cross(forward, normalize_vector(up))
    true_up = vector_cross(left, forward)

    orientation = np.identity(4, dtype=float)
    orientation[0, :3] = left[:3]
    orientation[1, :3] = true_up[:3]
    orientation[2, :3] = -forward[:3]
    return orientation @ translation(-eye[0], -eye[1], -eye[2])
