import math

import numpy as np
import pytest

from rubydung.aabb import AABB
from rubydung.frustum import Frustum, ray_point
from rubydung.math3d import identity, look_at, perspective


@pytest.fixture
def unit_frustum():
    f = Frustum()
    f.calculate(identity(), identity())
    return f


@pytest.fixture
def camera_frustum():
    f = Frustum()
    f.calculate(
        perspective(math.pi / 2, 1.0, 0.1, 100.0),
        look_at((0.0, 0.0, 0.0), (0.0, 0.0, -1.0), (0.0, 1.0, 0.0)),
    )
    return f


def test_planes_have_unit_normals(camera_frustum):
    norms = np.linalg.norm(camera_frustum.planes[:, :3], axis=1)
    assert np.allclose(norms, 1.0)


def test_identity_point_inside_and_outside(unit_frustum):
    assert unit_frustum.point_inside((0.0, 0.0, 0.0))
    assert not unit_frustum.point_inside((2.0, 0.0, 0.0))


def test_point_on_boundary_is_outside(unit_frustum):
    assert not unit_frustum.point_inside((1.0, 0.0, 0.0))


def test_cube_partial_and_full(unit_frustum):
    partial = AABB((0.5, 0.5, 0.5), (3.0, 3.0, 3.0))
    assert unit_frustum.cube_inside(partial)
    assert not unit_frustum.cube_fully_inside(partial)
    inner = AABB((-0.5, -0.5, -0.5), (0.5, 0.5, 0.5))
    assert unit_frustum.cube_inside(inner)
    assert unit_frustum.cube_fully_inside(inner)


def test_cube_far_away_not_inside(unit_frustum):
    assert not unit_frustum.cube_inside(AABB((5.0, 5.0, 5.0), (6.0, 6.0, 6.0)))


def test_sphere_reach(unit_frustum):
    assert unit_frustum.sphere_inside((1.5, 0.0, 0.0), 1.0)
    assert not unit_frustum.sphere_inside((1.5, 0.0, 0.0), 0.4)


def test_perspective_front_and_back(camera_frustum):
    assert camera_frustum.point_inside((0.0, 0.0, -5.0))
    assert not camera_frustum.point_inside((0.0, 0.0, 5.0))
    assert not camera_frustum.point_inside((0.0, 0.0, -200.0))


def test_perspective_cube_behind_is_culled(camera_frustum):
    assert camera_frustum.cube_inside(AABB((-1.0, -1.0, -6.0), (1.0, 1.0, -4.0)))
    assert not camera_frustum.cube_inside(AABB((-1.0, -1.0, 4.0), (1.0, 1.0, 6.0)))


def test_degenerate_matrix_rejected():
    with pytest.raises(ValueError):
        Frustum().calculate(np.zeros((4, 4)), np.zeros((4, 4)))


def test_ray_point_at_zero_is_origin():
    origin = (1.0, 2.0, 3.0)
    assert np.allclose(ray_point(0.0, origin, (0.0, 1.0, 0.0)), origin)


def test_ray_point_is_linear_in_step():
    origin = np.array([1.0, 2.0, 3.0])
    direction = np.array([0.5, -1.0, 2.0])
    a = ray_point(1.0, origin, direction)
    b = ray_point(2.0, origin, direction)
    assert np.allclose(b - a, direction)
    assert np.allclose(a - origin, direction)