import numpy as np
import pytest

from rubydung.aabb import AABB
from rubydung.camera import Camera


def make_camera(pos=(0.0, 0.0, 0.0), rot=(0.0, 0.0)):
    cam = Camera(pos)
    cam.aspect = 1.0
    cam.fov = 1.0
    cam.near = 0.05
    cam.far = 100.0
    cam.rot = np.array(rot, dtype=float)
    cam.update()
    return cam


def test_zero_rotation_looks_along_x():
    cam = make_camera()
    assert np.allclose(cam.front, [1.0, 0.0, 0.0])


def test_yaw_quarter_turn_looks_along_z():
    cam = make_camera(rot=(90.0, 0.0))
    assert np.allclose(cam.front, [0.0, 0.0, 1.0])


@pytest.mark.parametrize("rot", [(0.0, 0.0), (37.0, 20.0), (-120.0, -60.0)])
def test_basis_is_orthonormal(rot):
    cam = make_camera(rot=rot)
    for v in (cam.front, cam.right, cam.up):
        assert np.isclose(np.linalg.norm(v), 1.0)
    assert np.isclose(np.dot(cam.front, cam.right), 0.0)
    assert np.isclose(np.dot(cam.front, cam.up), 0.0)
    assert np.isclose(np.dot(cam.right, cam.up), 0.0)


def test_view_maps_position_to_origin():
    cam = make_camera(pos=(3.0, 4.0, -2.0), rot=(30.0, 10.0))
    result = cam.view() @ np.array([3.0, 4.0, -2.0, 1.0])
    assert np.allclose(result, [0.0, 0.0, 0.0, 1.0])


def test_box_in_front_is_visible_and_behind_is_not():
    cam = make_camera()
    assert cam.in_frustum(AABB((5.0, -0.5, -0.5), (6.0, 0.5, 0.5)))
    assert not cam.in_frustum(AABB((-6.0, -0.5, -0.5), (-5.0, 0.5, 0.5)))


def test_culling_follows_rotation():
    box = AABB((-0.5, -0.5, 5.0), (0.5, 0.5, 6.0))
    assert not make_camera().in_frustum(box)
    assert make_camera(rot=(90.0, 0.0)).in_frustum(box)


def test_update_without_aspect_fails():
    cam = Camera((0.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        cam.update()