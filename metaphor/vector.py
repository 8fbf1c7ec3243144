"""Three-component vector used by the particle physics engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

import numpy as np


@dataclass(frozen=True)
class Vector:
    """An immutable 3D vector of floats."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union[Vector, float]) -> Vector:
        """Scale by a number, or take the component product with a vector."""
        if isinstance(other, Vector):
            return self.component_product(other)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector:
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def scale(self, scalar: float) -> Vector:
        """Return this vector multiplied by a scalar."""
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def component_product(self, other: Vector) -> Vector:
        """Return the element-wise product of two vectors."""
        return Vector(self.x * other.x, self.y * other.y, self.z * other.z)

    def dot(self, other: Vector) -> float:
        """Return the scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Return the vector product."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def direction(self) -> Vector:
        """Return the unit vector in the same direction, or zero for a zero vector."""
        length = self.magnitude()
        if length == 0:
            return Vector(0.0, 0.0, 0.0)
        return Vector(self.x / length, self.y / length, self.z / length)

    def normalize(self) -> Vector:
        """Return the normalised vector; the zero vector stays zero."""
        return self.direction()

    def to_array(self) -> np.ndarray:
        """Return the components as a numpy array."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)