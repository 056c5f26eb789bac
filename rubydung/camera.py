"""First-person camera with yaw/pitch rotation and frustum culling."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from .aabb import AABB
from .frustum import Frustum
from .math3d import cross, look_at, normalize, perspective

WORLD_UP = (0.0, 1.0, 0.0)


class Camera:
    """Position, orientation and projection settings of the viewer.

    ``rot`` holds yaw and pitch in degrees. ``fov`` is handed to the
    projection unchanged, as radians.
    """

    def __init__(self, pos: Iterable[float] = (0.0, 0.0, 0.0)) -> None:
        self.pos = np.array(pos, dtype=np.float64)
        self.rot = np.zeros(2, dtype=np.float64)
        self.front = np.zeros(3, dtype=np.float64)
        self.up = np.zeros(3, dtype=np.float64)
        self.right = np.zeros(3, dtype=np.float64)
        self.aspect = 0.0
        self.near = 0.0
        self.far = 0.0
        self.fov = 0.0
        self.frustum = Frustum()

    def in_frustum(self, box: AABB) -> bool:
        """Whether any part of ``box`` may be visible."""
        return self.frustum.cube_inside(box)

    def update(self) -> None:
        """Recompute the direction vectors and the frustum."""
        yaw = math.radians(float(self.rot[0]))
        pitch = math.radians(float(self.rot[1]))
        self.front = normalize(
            (
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            )
        )
        self.right = normalize(cross(self.front, WORLD_UP))
        self.up = normalize(cross(self.right, self.front))
        self.frustum.calculate(self.projection(), self.view())

    def view(self) -> np.ndarray:
        """View matrix looking along ``front``."""
        return look_at(self.pos, self.pos + self.front, self.up)

    def projection(self) -> np.ndarray:
        """Perspective projection matrix."""
        return perspective(self.fov, self.aspect, self.near, self.far)