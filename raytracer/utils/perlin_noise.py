"""Ken Perlin's improved gradient noise (https://mrl.cs.nyu.edu/~perlin/noise/)."""

from __future__ import annotations

import math
from typing import Tuple

_PERMUTATION: Tuple[int, ...] = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30,
    69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94,
    252, 219, 203, 117, 35, 11, 32, 57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171,
    168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122, 60,
    211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54, 65, 25, 63, 161, 1,
    216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169, 200, 196, 135, 130, 116, 188, 159, 86,
    164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118,
    126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170,
    213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9, 129, 22, 39,
    253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228, 251, 34,
    242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107, 49,
    192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

# doubled so that PERMS[i + 1] never wraps
PERMS: Tuple[int, ...] = _PERMUTATION + _PERMUTATION


def fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def grad(hash_value: int, x: float, y: float, z: float) -> float:
    """Dot product with one of 12 gradient directions picked by the low 4 bits."""
    h = hash_value & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h == 12 or h == 14:
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


def noise(x: float, y: float, z: float) -> float:
    """Smooth noise in [-1, 1], zero on every integer lattice point."""
    floor_x, floor_y, floor_z = math.floor(x), math.floor(y), math.floor(z)
    xi, yi, zi = floor_x & 255, floor_y & 255, floor_z & 255
    xf, yf, zf = x - floor_x, y - floor_y, z - floor_z

    u = fade(xf)
    v = fade(yf)
    w = fade(zf)

    a = PERMS[xi] + yi
    aa = PERMS[a] + zi
    ab = PERMS[a + 1] + zi
    b = PERMS[xi + 1] + yi
    ba = PERMS[b] + zi
    bb = PERMS[b + 1] + zi

    near = lerp(
        v,
        lerp(u, grad(PERMS[aa], xf, yf, zf), grad(PERMS[ba], xf - 1.0, yf, zf)),
        lerp(u, grad(PERMS[ab], xf, yf - 1.0, zf), grad(PERMS[bb], xf - 1.0, yf - 1.0, zf)),
    )
    far = lerp(
        v,
        lerp(u, grad(PERMS[aa + 1], xf, yf, zf - 1.0), grad(PERMS[ba + 1], xf - 1.0, yf, zf - 1.0)),
        lerp(u, grad(PERMS[ab + 1], xf, yf - 1.0, zf - 1.0), grad(PERMS[bb + 1], xf - 1.0, yf - 1.0, zf - 1.0)),
    )
    return min(1.0, max(-1.0, lerp(w, near, far)))
