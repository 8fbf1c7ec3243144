"""A point mass integrated with a simple fixed-step scheme."""

from __future__ import annotations

from metaphor.vector import Vector


class Particle:
    """A point mass with position, velocity, damping and a finite lifespan."""

    def __init__(self, x: float, y: float, z: float) -> None:
        self.mass: float = 1.0
        self.position = Vector(x, y, z)
        self.velocity = Vector(0.0, 0.0, 0.0)
        self.acceleration = Vector(0.0, 0.0, 0.0)
        self.damping: float = 0.9
        self.lifespan: float = 5.0
        self.accumulated_force = Vector(0.0, 0.0, 0.0)
        self._destroyed = False

    def _update_position(self, time: float) -> None:
        self.position += self.velocity * time + (self.acceleration * time * time) * 0.5

    def _update_velocity(self, time: float) -> None:
        self.acceleration += self.accumulated_force * (1.0 / self.mass)
        self.velocity += self.acceleration * time
        self.velocity *= self.damping**time

    def add_force(self, force: Vector) -> None:
        """Accumulate a force to be applied on the next update."""
        self.accumulated_force += force

    def reset_force(self) -> None:
        """Clear the accumulated force and the acceleration."""
        self.accumulated_force = Vector(0.0, 0.0, 0.0)
        self.acceleration = Vector(0.0, 0.0, 0.0)

    def update(self, time: float) -> None:
        """Advance the particle by ``time`` seconds and age it."""
        self._update_position(time)
        self._update_velocity(time)
        self.lifespan -= time
        if self.lifespan <= 0.0:
            self.destroy()
        self.reset_force()

    def destroy(self) -> None:
        """Mark the particle as destroyed."""
        self._destroyed = True

    def is_destroyed(self) -> bool:
        """Return whether the particle has been destroyed."""
        return self._destroyed