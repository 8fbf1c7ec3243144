"""Pairs of particles and the force generators acting on them."""

from __future__ import annotations

from typing import List, Tuple

from metaphor.forces import ForceGenerator
from metaphor.particle import Particle


class ForceRegistry:
    """Keeps particle/generator pairs and applies them in order."""

    def __init__(self) -> None:
        self._entries: List[Tuple[Particle, ForceGenerator]] = []

    def add(self, particle: Particle, generator: ForceGenerator) -> None:
        """Register ``generator`` to act on ``particle``."""
        self._entries.append((particle, generator))

    def remove(self, particle: Particle, generator: ForceGenerator) -> None:
        """Remove every registration of this exact pair."""
        self._entries = [
            (p, g)
            for p, g in self._entries
            if not (p is particle and g is generator)
        ]

    def clear(self) -> None:
        """Remove all registrations."""
        self._entries.clear()

    def update_forces(self, time: float) -> None:
        """Let each generator apply its force to its particle."""
        for particle, generator in self._entries:
            generator.update_force(particle, time)

    def __len__(self) -> int:
        return len(self._entries)