from __future__ import annotations

import numpy as np

EPSILON: float = 1e-5 # small offset for floating point comparisons (parallel rays, shadow acne, cube slabs)


def point(x: float, y: float, z: float) -> np.ndarray:
    """Homogeneous position, w = 1."""
    return np.array([x, y, z, 1.0], dtype=float)


def vector(x: float, y: float, z: float) -> np.ndarray:
    """Homogeneous direction, w = 0."""
    return np.array([x, y, z, 0.0], dtype=float)


def colour(r: float, g: float, b: float) -> np.ndarray:
    return np.array([r, g, b], dtype=float)


BLACK: np.ndarray = colour(0.0, 0.0, 0.0)
WHITE: np.ndarray = colour(1.0, 1.0, 1.0)
BLACK.setflags(write=False)
WHITE.setflags(write=False)


def vector_length(v: np.ndarray) -> float: # Euclidean length (magnitude) of a vector
    return float(np.sqrt(vector_dot(v, v)))


def normalize_vector(v: np.ndarray) -> np.ndarray:
    vector_array = np.asarray(v, dtype=float)
    return vector_array / vector_length(vector_array)


def vector_dot(a: np.ndarray, b: np.ndarray) -> float:
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return float(np.dot(vector_a, vector_b))


def vector_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray: # right-handed cross product, result keeps w = 0
    vector_a = np.asarray(a, dtype=float)
    vector_b = np.asarray(b, dtype=float)
    return vector(*np.cross(vector_a[:3], vector_b[:3]))


def reflect_vector(I: np.ndarray, N: np.ndarray) -> np.ndarray:
    """Mirrors I about the normal N: I - 2(I.N)N. Pass the direction travelling into
    the surface, e.g. a ray direction or the negated direction toward a light."""
    vector_I = np.asarray(I, dtype=float)
    vector_N = np.asarray(N, dtype=float)
    return vector_I - vector_N * 2.0 * vector_dot(vector_I, vector_N)
