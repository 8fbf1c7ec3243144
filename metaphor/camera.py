"""Cameras holding a position, orientation and projection."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from metaphor.transforms import look_at, ortho, perspective


def _vec3(values: Sequence[float]) -> np.ndarray:
    return np.array(values, dtype=np.float64).reshape(3)


class Camera:
    """A camera looking along ``front`` from ``position``."""

    def __init__(self, position: Sequence[float]) -> None:
        self.position = _vec3(position)
        self.world_up = np.array([0.0, 1.0, 0.0])
        self.front = np.array([0.0, 0.0, -1.0])

    @property
    def view_matrix(self) -> np.ndarray:
        """The view matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.world_up)


class OrthoCamera(Camera):
    """Camera with a fixed 800x800 orthographic volume."""

    def __init__(self, position: Sequence[float]) -> None:
        super().__init__(position)
        self.projection = ortho(-400.0, 400.0, -400.0, 400.0, -0.1, 800.0)
        self.world_up = np.array([0.0, 1.0, 0.0])
        self.front = np.array([0.0, 0.0, -1.0])


class PerspectiveCamera(Camera):
    """Camera with a 60 degree perspective projection."""

    def __init__(self, position: Sequence[float], height: float, width: float) -> None:
        super().__init__(position)
        self.projection = perspective(math.radians(60.0), height / width, 0.1, 1000.0)
        self.world_up = np.array([0.0, 1.0, 0.0])
        self.front = np.array([0.0, 0.0, 1.0])