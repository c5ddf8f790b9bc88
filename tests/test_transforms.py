import numpy as np
import pytest

from softrender.transforms import (
    projection_matrix,
    rotate_z,
    spot_model_matrix,
    view_matrix,
)


def _project(matrix, point):
    out = matrix @ np.array([*point, 1.0])
    return out[:3] / out[3]


def test_view_matrix_moves_eye_to_origin():
    eye = (1.0, -2.0, 5.0)
    out = view_matrix(eye) @ np.array([*eye, 1.0])
    assert np.allclose(out[:3], 0.0)
    assert out[3] == 1.0


def test_view_matrix_keeps_directions():
    direction = np.array([1.0, 2.0, 3.0, 0.0])
    out = view_matrix((4.0, 5.0, 6.0)) @ direction
    np.testing.assert_allclose(out, direction)


def test_rotate_zero_is_identity():
    np.testing.assert_allclose(rotate_z(0), np.identity(4))


@pytest.mark.parametrize("angle", [10.0, 45.0, 130.0, -70.0])
def test_rotate_is_orthogonal_and_invertible(angle):
    m = rotate_z(angle)
    np.testing.assert_allclose(m @ m.T, np.identity(4), atol=1e-12)
    np.testing.assert_allclose(m @ rotate_z(-angle), np.identity(4), atol=1e-12)


def test_rotate_leaves_z_axis_alone():
    point = np.array([0.0, 0.0, 7.0, 1.0])
    np.testing.assert_allclose(rotate_z(33.0) @ point, point, atol=1e-12)


def test_rotate_full_turn_is_close_to_identity():
    np.testing.assert_allclose(rotate_z(360.0), np.identity(4), atol=1e-6)


def test_spot_model_at_zero_is_pure_scale():
    np.testing.assert_allclose(spot_model_matrix(0.0), np.diag([2.5, 2.5, 2.5, 1.0]))


@pytest.mark.parametrize("angle", [0.0, 140.0, 275.5])
def test_spot_model_scales_lengths(angle):
    m = spot_model_matrix(angle)
    v = np.array([0.3, -1.2, 0.8])
    assert np.linalg.norm(m[:3, :3] @ v) == pytest.approx(2.5 * np.linalg.norm(v))
    assert m[1, 1] == pytest.approx(2.5)


def test_projection_maps_near_and_far_planes():
    near, far = 0.1, 50.0
    p = projection_matrix(45.0, 1.0, near, far)
    assert _project(p, (0.0, 0.0, near))[2] == pytest.approx(1.0)
    assert _project(p, (0.0, 0.0, far))[2] == pytest.approx(-1.0)


def test_projection_keeps_axis_centred():
    p = projection_matrix(60.0, 1.5, 0.1, 50.0)
    ndc = _project(p, (0.0, 0.0, 3.0))
    assert ndc[0] == pytest.approx(0.0)
    assert ndc[1] == pytest.approx(0.0)


def test_flip_mirrors_x_and_y_only():
    point = (0.02, -0.03, 0.5)
    plain = _project(projection_matrix(45.0, 1.0, 0.1, 50.0), point)
    flipped = _project(projection_matrix(45.0, 1.0, 0.1, 50.0, True), point)
    np.testing.assert_allclose(flipped[:2], -plain[:2])
    assert flipped[2] == pytest.approx(plain[2])