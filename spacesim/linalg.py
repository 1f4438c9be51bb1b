"""Small vector and 4x4 matrix helpers for the camera and scene transforms.

Matrices are row-major numpy arrays meant to be applied as ``matrix @ vector``.
"""

import math

import numpy as np


def vec3(x, y, z):
    """Return a three-component float vector."""
    return np.array([x, y, z], dtype=float)


def normalize(vector):
    """Return ``vector`` scaled to unit length."""
    v = np.asarray(vector, dtype=float)
    length = np.linalg.norm(v)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def look_at(eye, center, up):
    """Return a right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = normalize(np.asarray(center, dtype=float) - eye)
    s = normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)

    view = np.eye(4)
    view[0, :3] = s
    view[1, :3] = u
    view[2, :3] = -f
    view[0, 3] = -np.dot(s, eye)
    view[1, 3] = -np.dot(u, eye)
    view[2, 3] = np.dot(f, eye)
    return view


def perspective(fovy, aspect, near, far):
    """Return a right-handed perspective projection with depth mapped to [-1, 1].

    ``fovy`` is the vertical field of view in radians.
    """
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0.0:
        raise ValueError("field of view must not be zero")

    projection = np.zeros((4, 4))
    projection[0, 0] = 1.0 / (aspect * tan_half)
    projection[1, 1] = 1.0 / tan_half
    projection[2, 2] = -(far + near) / (far - near)
    projection[2, 3] = -(2.0 * far * near) / (far - near)
    projection[3, 2] = -1.0
    return projection


def translate(matrix, offset):
    """Return ``matrix`` followed on the right by a translation by ``offset``."""
    translation = np.eye(4)
    translation[:3, 3] = np.asarray(offset, dtype=float)
    return np.asarray(matrix, dtype=float) @ translation


def scale(matrix, factors):
    """Return ``matrix`` followed on the right by a scale by ``factors``.

    ``factors`` may be a single number for a uniform scale.
    """
    diagonal = np.ones(4)
    diagonal[:3] = np.broadcast_to(np.asarray(factors, dtype=float), (3,))
    return np.asarray(matrix, dtype=float) @ np.diag(diagonal)