"""Model, view and projection matrices for the rasterizers."""

import math

import numpy as np

MY_PI = 3.1415926
TWO_PI = 2.0 * MY_PI


def view_matrix(eye_pos):
    """Return the view matrix that moves ``eye_pos`` to the origin."""
    ex, ey, ez = (float(c) for c in eye_pos)
    view = np.identity(4)
    view[:3, 3] = (-ex, -ey, -ez)
    return view


def rotate_z(angle_deg):
    """Return a model matrix rotating by ``angle_deg`` degrees about the z axis."""
    angle = angle_deg / 180 * MY_PI
    c, s = math.cos(angle), math.sin(angle)
    return np.array(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def spot_model_matrix(angle_deg):
    """Return the model matrix for the spot model: rotation about y, then scale 2.5."""
    angle = angle_deg * MY_PI / 180.0
    c, s = math.cos(angle), math.sin(angle)
    rotation = np.array(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    scale = np.diag([2.5, 2.5, 2.5, 1.0])
    translate = np.identity(4)
    return translate @ rotation @ scale


def projection_matrix(eye_fov, aspect_ratio, z_near, z_far, flip_xy=False):
    """Return a perspective projection matrix.

    ``z_near`` maps to NDC depth 1 and ``z_far`` to -1. With ``flip_xy`` the
    x and y axes of the result are mirrored.
    """
    n, f = float(z_near), float(z_far)
    pers2ortho = np.array(
        [
            [n, 0.0, 0.0, 0.0],
            [0.0, n, 0.0, 0.0],
            [0.0, 0.0, n + f, -n * f],
            [0.0, 0.0, 1.0, 0.0],
        ]
    )
    half_fov = eye_fov / 360 * MY_PI
    top = n * math.tan(half_fov)
    bottom = -top
    right = top * aspect_ratio
    left = -right
    sign = -1.0 if flip_xy else 1.0
    zoom = np.diag(
        [sign * 2 / (right - left), sign * 2 / (top - bottom), 2 / (n - f), 1.0]
    )
    trans = np.identity(4)
    trans[0, 3] = -(right + left) / 2
    trans[1, 3] = -(top + bottom) / 2
    trans[2, 3] = -(f + n) / 2
    return zoom @ trans @ pers2ortho