"""A renderable model's transform and camera state."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from metaphor.transforms import look_at, perspective, rotate, scale, translate

_AXES = {"x": "rot_x", "y": "rot_y", "z": "rot_z"}
_STEPS = {0: 1.0, 1: -1.0}


def _vec3(values: Sequence[float]) -> np.ndarray:
    return np.array(values, dtype=np.float64).reshape(3)


class Model3D:
    """Position, scale, rotation, colour and camera matrices of one model."""

    def __init__(self, position: Sequence[float] = (0.0, 0.0, 0.0)) -> None:
        self.position = position
        self.scale = (0.1, 0.1, 0.1)
        self.rot_x = 0.0
        self.rot_y = 0.0
        self.rot_z = 0.0
        self.color = np.ones(4)

        self.projection = perspective(math.radians(60.0), 800.0 / 800.0, 0.1, 1000.0)
        self.camera_pos = np.array([0.0, 0.0, 2.0])
        self.world_up = np.array([0.0, 1.0, 0.0])
        self.front = np.array([0.0, 0.0, -1.0])
        self.view_matrix = look_at(
            self.camera_pos, self.camera_pos + self.front, self.world_up
        )

    @property
    def position(self) -> np.ndarray:
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = _vec3(value)

    @property
    def scale(self) -> np.ndarray:
        return self._scale

    @scale.setter
    def scale(self, value: Sequence[float]) -> None:
        self._scale = _vec3(value)

    def rotate(self, axis: str, direction: int) -> None:
        """Turn one degree about ``axis``: direction 0 adds, 1 subtracts.

        Unknown axes or directions leave the model unchanged.
        """
        attribute = _AXES.get(axis)
        step = _STEPS.get(direction)
        if attribute is None or step is None:
            return
        setattr(self, attribute, getattr(self, attribute) + step)

    def transform(self) -> np.ndarray:
        """Return the model matrix: translate, scale, then rotate about X, Y, Z."""
        matrix = translate(np.identity(4), self.position)
        matrix = scale(matrix, self.scale)
        matrix = rotate(matrix, math.radians(self.rot_x), (1.0, 0.0, 0.0))
        matrix = rotate(matrix, math.radians(self.rot_y), (0.0, 1.0, 0.0))
        matrix = rotate(matrix, math.radians(self.rot_z), (0.0, 0.0, 1.0))
        return matrix

    def set_camera(
        self,
        projection: np.ndarray,
        camera_pos: Sequence[float],
        front: Sequence[float],
    ) -> None:
        """Adopt a camera's projection and orientation and rebuild the view."""
        self.projection = np.array(projection, dtype=np.float64)
        self.camera_pos = _vec3(camera_pos)
        self.front = _vec3(front)
        self.view_matrix = look_at(
            self.camera_pos, self.camera_pos + self.front, self.world_up
        )

    def position_from_matrix(self) -> np.ndarray:
        """Return the position read back through the model matrix."""
        row = np.array([*self.position, 1.0]) @ self.transform()
        return np.array([row[0] * -10.0, row[1] * 10.0, row[2] * -10.0])