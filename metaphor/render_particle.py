"""Binding between a physics particle and the model that shows it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from metaphor.model import Model3D
from metaphor.particle import Particle
from metaphor.vector import Vector


@dataclass
class RenderParticle:
    """A particle drawn with a model in a given colour and, optionally, size."""

    particle: Particle
    model: Model3D
    color: Vector = field(default_factory=lambda: Vector(1.0, 1.0, 1.0))
    size: Optional[float] = None

    def sync(self) -> Model3D:
        """Copy the particle's position, colour and size onto the model.

        The model's scale is only changed when a size was given.
        """
        self.model.position = tuple(self.particle.position)
        self.model.color = np.array([*self.color, 1.0], dtype=np.float64)
        if self.size is not None:
            self.model.scale = (self.size, self.size, self.size)
        return self.model