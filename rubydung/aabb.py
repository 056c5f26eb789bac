"""Axis-aligned bounding boxes with swept collision clipping."""

from __future__ import annotations

from typing import Iterable

import numpy as np


class AABB:
    """A box spanning from corner ``p0`` to corner ``p1``."""

    __slots__ = ("p0", "p1", "epsilon")

    def __init__(self, p0: Iterable[float], p1: Iterable[float], epsilon: float = 0.0) -> None:
        self.p0 = np.array(p0, dtype=np.float64)
        self.p1 = np.array(p1, dtype=np.float64)
        self.epsilon = float(epsilon)

    def __repr__(self) -> str:
        return f"AABB(p0={self.p0.tolist()}, p1={self.p1.tolist()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AABB):
            return NotImplemented
        return (
            np.array_equal(self.p0, other.p0)
            and np.array_equal(self.p1, other.p1)
            and self.epsilon == other.epsilon
        )

    def expand(self, delta: Iterable[float]) -> AABB:
        """Return a box stretched in the direction of ``delta``."""
        d = np.asarray(delta, dtype=np.float64)
        p0 = self.p0 + np.minimum(d, 0.0)
        p1 = self.p1 + np.maximum(d, 0.0)
        return AABB(p0, p1)

    def grow(self, delta: Iterable[float]) -> AABB:
        """Return a box enlarged by ``delta`` on every side."""
        d = np.asarray(delta, dtype=np.float64)
        return AABB(self.p0 - d, self.p1 + d)

    def _clip(self, other: AABB, amount: float, axis: int) -> float:
        for side in range(3):
            if side == axis:
                continue
            if other.p1[side] <= self.p0[side] or other.p0[side] >= self.p1[side]:
                return amount
        if amount > 0.0 and other.p1[axis] <= self.p0[axis]:
            limit = float(self.p0[axis] - other.p1[axis] - self.epsilon)
            if limit < amount:
                amount = limit
        if amount < 0.0 and other.p0[axis] >= self.p1[axis]:
            limit = float(self.p1[axis] - other.p0[axis] + self.epsilon)
            if limit > amount:
                amount = limit
        return amount

    def clip_x_collide(self, other: AABB, x: float) -> float:
        """Limit a movement of ``other`` along x so it stops at this box."""
        return self._clip(other, x, 0)

    def clip_y_collide(self, other: AABB, y: float) -> float:
        """Limit a movement of ``other`` along y so it stops at this box."""
        return self._clip(other, y, 1)

    def clip_z_collide(self, other: AABB, z: float) -> float:
        """Limit a movement of ``other`` along z so it stops at this box."""
        return self._clip(other, z, 2)

    def intersects(self, other: AABB) -> bool:
        """Whether the interiors of the two boxes overlap."""
        return bool(np.all(other.p1 > self.p0) and np.all(other.p0 < self.p1))

    def move(self, delta: Iterable[float]) -> None:
        """Shift the box in place by ``delta``."""
        d = np.asarray(delta, dtype=np.float64)
        self.p0 += d
        self.p1 += d