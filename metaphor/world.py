"""A world that holds particles and steps them under gravity."""

from __future__ import annotations

from typing import List

from metaphor.forces import GravityForceGenerator
from metaphor.particle import Particle
from metaphor.registry import ForceRegistry
from metaphor.vector import Vector


class PhysicsWorld:
    """Particles under a shared gravity generator."""

    def __init__(self) -> None:
        self.force_registry = ForceRegistry()
        self.particles: List[Particle] = []
        self.gravity = GravityForceGenerator(Vector(0.0, -980.0, 0.0))

    def add_particle(self, particle: Particle) -> None:
        """Add a particle and subject it to gravity."""
        self.particles.append(particle)
        self.force_registry.add(particle, self.gravity)

    def update(self, time: float) -> None:
        """Drop destroyed particles, apply forces, then advance every particle."""
        self.particles = [p for p in self.particles if not p.is_destroyed()]
        self.force_registry.update_forces(time)
        for particle in self.particles:
            particle.update(time)