"""Small linear-algebra helpers for 3D rendering.

Matrices are 4x4 numpy arrays in mathematical layout: they act on column
vectors, so ``m @ v`` transforms ``v``. Angles are in radians.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

Vector = Iterable[float]


def _vec(value: Vector) -> np.ndarray:
    return np.asarray(value, dtype=np.float64)


def identity() -> np.ndarray:
    """Return a 4x4 identity matrix."""
    return np.identity(4, dtype=np.float64)


def normalize(v: Vector) -> np.ndarray:
    """Return ``v`` scaled to unit length."""
    arr = _vec(v)
    norm = float(np.linalg.norm(arr))
    if norm == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return arr / norm


def cross(a: Vector, b: Vector) -> np.ndarray:
    """Return the cross product of two 3-vectors."""
    return np.cross(_vec(a), _vec(b))


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = 1.0 / (aspect * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = -(far + near) / (far - near)
    m[2, 3] = -(2.0 * far * near) / (far - near)
    m[3, 2] = -1.0
    return m


def look_at(eye: Vector, center: Vector, up: Vector) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye_v = _vec(eye)
    f = normalize(_vec(center) - eye_v)
    s = normalize(np.cross(f, _vec(up)))
    u = np.cross(s, f)
    m = identity()
    m[0, :3] = s
    m[1, :3] = u
    m[2, :3] = -f
    m[0, 3] = -float(np.dot(s, eye_v))
    m[1, 3] = -float(np.dot(u, eye_v))
    m[2, 3] = float(np.dot(f, eye_v))
    return m


def translate(matrix: np.ndarray, offset: Vector) -> np.ndarray:
    """Return ``matrix`` multiplied by a translation by ``offset``."""
    t = identity()
    t[:3, 3] = _vec(offset)
    return np.asarray(matrix, dtype=np.float64) @ t


def rotate(matrix: np.ndarray, angle: float, axis: Vector) -> np.ndarray:
    """Return ``matrix`` multiplied by a rotation of ``angle`` about ``axis``."""
    a = normalize(axis)
    c = math.cos(angle)
    s = math.sin(angle)
    skew = np.array(
        [[0.0, -a[2], a[1]], [a[2], 0.0, -a[0]], [-a[1], a[0], 0.0]],
        dtype=np.float64,
    )
    r = identity()
    r[:3, :3] = c * np.identity(3) + s * skew + (1.0 - c) * np.outer(a, a)
    return np.asarray(matrix, dtype=np.float64) @ r