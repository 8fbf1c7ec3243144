"""A self-contained collection of particles that age and expire."""

from __future__ import annotations

from typing import Iterator, List

from metaphor.model import Model3D
from metaphor.particle import Particle
from metaphor.render_particle import RenderParticle
from metaphor.vector import Vector


class ParticleSystem:
    """Emits particles, steps them and discards those that have expired."""

    def __init__(self) -> None:
        self._particles: List[RenderParticle] = []

    def emit(
        self, position: Vector, velocity: Vector, lifespan: float, model: Model3D
    ) -> RenderParticle:
        """Create a particle at ``position`` moving with ``velocity``."""
        particle = Particle(position.x, position.y, position.z)
        particle.velocity = velocity
        particle.lifespan = lifespan
        render = RenderParticle(particle, model)
        self._particles.append(render)
        return render

    def update(self, delta_time: float) -> None:
        """Advance every particle and drop the destroyed ones."""
        alive: List[RenderParticle] = []
        for render in self._particles:
            render.particle.update(delta_time)
            if not render.particle.is_destroyed():
                alive.append(render)
        self._particles = alive

    def __iter__(self) -> Iterator[RenderParticle]:
        return iter(list(self._particles))

    def __len__(self) -> int:
        return len(self._particles)