import math

import numpy as np
import pytest

from rubydung import math3d


def _apply(m, point):
    v = np.append(np.asarray(point, dtype=float), 1.0)
    out = m @ v
    return out[:3] / out[3]


def test_identity_leaves_points_unchanged():
    assert np.allclose(_apply(math3d.identity(), (3.0, -2.0, 5.0)), (3.0, -2.0, 5.0))


def test_normalize_gives_unit_length_same_direction():
    v = math3d.normalize((3.0, 4.0, 12.0))
    assert math.isclose(np.linalg.norm(v), 1.0)
    assert np.allclose(np.cross(v, (3.0, 4.0, 12.0)), 0.0)


def test_normalize_zero_vector_raises():
    with pytest.raises(ValueError):
        math3d.normalize((0.0, 0.0, 0.0))


def test_cross_is_orthogonal_to_inputs():
    a = (1.0, 2.0, 3.0)
    b = (-4.0, 0.5, 2.0)
    c = math3d.cross(a, b)
    assert math.isclose(np.dot(c, a), 0.0, abs_tol=1e-12)
    assert math.isclose(np.dot(c, b), 0.0, abs_tol=1e-12)


def test_cross_of_x_and_y_is_z():
    assert np.allclose(math3d.cross((1, 0, 0), (0, 1, 0)), (0, 0, 1))


def test_perspective_maps_near_and_far_planes_to_ndc_bounds():
    near, far = 0.05, 100.0
    m = math3d.perspective(math.radians(70.0), 4 / 3, near, far)
    assert math.isclose(_apply(m, (0.0, 0.0, -near))[2], -1.0, abs_tol=1e-9)
    assert math.isclose(_apply(m, (0.0, 0.0, -far))[2], 1.0, abs_tol=1e-9)


def test_perspective_rejects_degenerate_arguments():
    with pytest.raises(ValueError):
        math3d.perspective(1.0, 0.0, 0.1, 10.0)
    with pytest.raises(ValueError):
        math3d.perspective(1.0, 1.0, 5.0, 5.0)


def test_look_at_moves_eye_to_origin_and_center_onto_negative_z():
    eye = (4.0, 2.0, -3.0)
    center = (10.0, 2.0, -3.0)
    m = math3d.look_at(eye, center, (0.0, 1.0, 0.0))
    assert np.allclose(_apply(m, eye), 0.0)
    mapped = _apply(m, center)
    assert np.allclose(mapped[:2], 0.0)
    assert mapped[2] < 0.0
    assert math.isclose(np.linalg.norm(mapped), 6.0)


def test_translate_moves_origin_to_offset():
    m = math3d.translate(math3d.identity(), (1.5, -2.0, 7.0))
    assert np.allclose(_apply(m, (0.0, 0.0, 0.0)), (1.5, -2.0, 7.0))


def test_rotate_preserves_length_and_axis():
    m = math3d.rotate(math3d.identity(), 1.1, (0.0, 0.0, 2.0))
    p = _apply(m, (3.0, 4.0, 0.0))
    assert math.isclose(np.linalg.norm(p), 5.0)
    assert np.allclose(_apply(m, (0.0, 0.0, 9.0)), (0.0, 0.0, 9.0))


def test_rotate_quarter_turn_about_z():
    m = math3d.rotate(math3d.identity(), math.pi / 2, (0.0, 0.0, 1.0))
    assert np.allclose(_apply(m, (1.0, 0.0, 0.0)), (0.0, 1.0, 0.0))


def test_translate_then_rotate_composes_right_to_left():
    m = math3d.rotate(math3d.translate(math3d.identity(), (5.0, 0.0, 0.0)), 0.7, (0, 1, 0))
    assert np.allclose(_apply(m, (0.0, 0.0, 0.0)), (5.0, 0.0, 0.0))