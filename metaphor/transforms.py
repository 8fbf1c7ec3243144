"""4x4 matrix helpers for view, projection and model transforms.

Matrices are numpy arrays that act on column vectors (``matrix @ point``).
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def _vec3(values: Sequence[float]) -> np.ndarray:
    array = np.asarray(values, dtype=np.float64)
    if array.shape != (3,):
        raise ValueError(f"expected three components, got shape {array.shape}")
    return array


def _unit(values: Sequence[float]) -> np.ndarray:
    vector = _vec3(values)
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return vector / length


def look_at(
    eye: Sequence[float], target: Sequence[float], up: Sequence[float]
) -> np.ndarray:
    """Return a right-handed view matrix looking from ``eye`` towards ``target``."""
    eye_v = _vec3(eye)
    forward = _unit(_vec3(target) - eye_v)
    side = _unit(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    view = np.identity(4)
    view[0, :3] = side
    view[1, :3] = upward
    view[2, :3] = -forward
    view[0, 3] = -side @ eye_v
    view[1, 3] = -upward @ eye_v
    view[2, 3] = forward @ eye_v
    return view


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a right-handed perspective projection with a -1..1 depth range."""
    if aspect == 0:
        raise ValueError("aspect ratio must be non-zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    focal = 1.0 / math.tan(fovy / 2.0)
    projection = np.zeros((4, 4))
    projection[0, 0] = focal / aspect
    projection[1, 1] = focal
    projection[2, 2] = -(far + near) / (far - near)
    projection[2, 3] = -(2.0 * far * near) / (far - near)
    projection[3, 2] = -1.0
    return projection


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Return a right-handed orthographic projection with a -1..1 depth range."""
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic volume must have non-zero extent")
    projection = np.identity(4)
    projection[0, 0] = 2.0 / (right - left)
    projection[1, 1] = 2.0 / (top - bottom)
    projection[2, 2] = -2.0 / (far - near)
    projection[0, 3] = -(right + left) / (right - left)
    projection[1, 3] = -(top + bottom) / (top - bottom)
    projection[2, 3] = -(far + near) / (far - near)
    return projection


def translate(matrix: np.ndarray, offset: Sequence[float]) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    translation = np.identity(4)
    translation[:3, 3] = _vec3(offset)
    return np.asarray(matrix, dtype=np.float64) @ translation


def scale(matrix: np.ndarray, factors: Sequence[float]) -> np.ndarray:
    """Return ``matrix`` followed by a per-axis scale."""
    scaling = np.diag([*_vec3(factors), 1.0])
    return np.asarray(matrix, dtype=np.float64) @ scaling


def rotate(matrix: np.ndarray, angle: float, axis: Sequence[float]) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    unit = _unit(axis)
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    cross = np.array(
        [
            [0.0, -unit[2], unit[1]],
            [unit[2], 0.0, -unit[0]],
            [-unit[1], unit[0], 0.0],
        ]
    )
    rotation = np.identity(4)
    rotation[:3, :3] = (
        cos_a * np.identity(3) + (1.0 - cos_a) * np.outer(unit, unit) + sin_a * cross
    )
    return np.asarray(matrix, dtype=np.float64) @ rotation