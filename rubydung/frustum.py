"""View frustum culling and ray stepping."""

from __future__ import annotations

from itertools import product
from typing import Iterable

import numpy as np

from .aabb import AABB


def ray_point(step: float, origin: Iterable[float], direction: Iterable[float]) -> np.ndarray:
    """Point reached after ``step`` along ``direction`` from ``origin``."""
    return np.asarray(origin, dtype=np.float64) + np.asarray(direction, dtype=np.float64) * step


class Frustum:
    """Six clipping planes extracted from a projection-view matrix.

    Each plane is stored as ``(a, b, c, d)`` with a unit normal; a point is on
    the inner side when ``a*x + b*y + c*z + d > 0``.
    """

    def __init__(self) -> None:
        self.planes = np.zeros((6, 4), dtype=np.float64)

    def calculate(self, proj: np.ndarray, view: np.ndarray) -> None:
        """Recompute the planes from a projection and a view matrix."""
        clip = np.asarray(proj, dtype=np.float64) @ np.asarray(view, dtype=np.float64)
        w = clip[3]
        planes = np.array(
            [
                w - clip[0],
                w + clip[0],
                w + clip[1],
                w - clip[1],
                w - clip[2],
                w + clip[2],
            ]
        )
        norms = np.linalg.norm(planes[:, :3], axis=1)
        if np.any(norms == 0.0):
            raise ValueError("matrix yields a degenerate frustum plane")
        self.planes = planes / norms[:, None]

    def _distances(self, points: np.ndarray) -> np.ndarray:
        # rows: planes, columns: points
        return self.planes[:, :3] @ points.T + self.planes[:, 3:4]

    @staticmethod
    def _corners(box: AABB) -> np.ndarray:
        return np.array(list(product(*zip(box.p0, box.p1))), dtype=np.float64)

    def point_inside(self, pos: Iterable[float]) -> bool:
        """Whether the point lies strictly inside every plane."""
        point = np.asarray(pos, dtype=np.float64).reshape(1, 3)
        return bool(np.all(self._distances(point) > 0.0))

    def cube_inside(self, box: AABB) -> bool:
        """Whether any part of the box may be visible."""
        d = self._distances(self._corners(box))
        return bool(np.all(np.any(d > 0.0, axis=1)))

    def cube_fully_inside(self, box: AABB) -> bool:
        """Whether every corner of the box is inside."""
        return bool(np.all(self._distances(self._corners(box)) > 0.0))

    def sphere_inside(self, pos: Iterable[float], radius: float) -> bool:
        """Whether a sphere touches the inside of the frustum."""
        point = np.asarray(pos, dtype=np.float64).reshape(1, 3)
        return bool(np.all(self._distances(point) > -radius))