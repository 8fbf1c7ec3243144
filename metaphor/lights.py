"""Light descriptions expressed as shader uniform values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence

import numpy as np


def _vec3(values: Sequence[float]) -> np.ndarray:
    return np.array(values, dtype=np.float64).reshape(3)


class Light(ABC):
    """Position, colour, ambient and specular terms shared by all lights."""

    def __init__(
        self,
        position: Sequence[float],
        color: Sequence[float],
        ambient_strength: float,
        spec_strength: float,
        spec_phong: float,
    ) -> None:
        self.position = _vec3(position)
        self.color = _vec3(color)
        self.ambient_strength = ambient_strength
        self.ambient_color = self.color.copy()
        self.spec_strength = spec_strength
        self.spec_phong = spec_phong

    def fundamentals(self) -> Dict[str, Any]:
        """Return the uniforms common to every light."""
        return {
            "lightPos": self.position,
            "lightColor": self.color,
            "ambientStr": self.ambient_strength,
            "ambientColor": self.ambient_color,
            "specStr": self.spec_strength,
            "specPhong": self.spec_phong,
        }

    @abstractmethod
    def specifics(self) -> Dict[str, Any]:
        """Return the uniforms particular to this kind of light."""

    def uniforms(self) -> Dict[str, Any]:
        """Return all uniforms, common first and then specific."""
        return {**self.fundamentals(), **self.specifics()}


class DirectionLight(Light):
    """A light shining along a direction.

    The ambient colour follows the light colour; the ``ambient_color``
    argument is accepted but not used.
    """

    def __init__(
        self,
        position: Sequence[float],
        color: Sequence[float],
        ambient_strength: float,
        ambient_color: Sequence[float],
        spec_strength: float,
        spec_phong: float,
        direction: Sequence[float],
        brightness: float,
    ) -> None:
        super().__init__(position, color, ambient_strength, spec_strength, spec_phong)
        self.direction = _vec3(direction)
        self.brightness = brightness

    def specifics(self) -> Dict[str, Any]:
        return {"direction": self.direction, "dl_brightness": self.brightness}


class PointLight(Light):
    """A light radiating from its position.

    The ambient colour follows the light colour; the ``ambient_color``
    argument is accepted but not used.
    """

    def __init__(
        self,
        position: Sequence[float],
        color: Sequence[float],
        ambient_strength: float,
        ambient_color: Sequence[float],
        spec_strength: float,
        spec_phong: float,
        brightness: float,
    ) -> None:
        super().__init__(position, color, ambient_strength, spec_strength, spec_phong)
        self.brightness = brightness

    def specifics(self) -> Dict[str, Any]:
        return {"brightness": self.brightness}


class ColorLight:
    """A plain RGB tint, white by default."""

    def __init__(self) -> None:
        self.red = 1.0
        self.green = 1.0
        self.blue = 1.0

    def set_color(self, red: float, green: float, blue: float) -> None:
        """Set all three channels."""
        self.red = red
        self.green = green
        self.blue = blue

    def uniforms(self) -> Dict[str, float]:
        """Return the channels as shader uniforms."""
        return {"red": self.red, "green": self.green, "blue": self.blue}