"""Force generators that act on particles."""

from __future__ import annotations

import random
from typing import Optional

from metaphor.particle import Particle
from metaphor.vector import Vector


class ForceGenerator:
    """Base generator; applies no force."""

    def update_force(self, particle: Particle, time: float) -> None:
        particle.add_force(Vector(0.0, 0.0, 0.0))


class DragForceGenerator(ForceGenerator):
    """Drag opposing a particle's velocity."""

    def __init__(self, k1: float = 0.74, k2: float = 0.57) -> None:
        self.k1 = k1
        self.k2 = k2

    def update_force(self, particle: Particle, time: float) -> None:
        velocity = particle.velocity
        speed = velocity.magnitude()
        if speed <= 0.0:
            return
        drag = self.k1 * speed + self.k2 * speed
        particle.add_force(velocity.normalize() * -drag)


class GravityForceGenerator(ForceGenerator):
    """Constant gravitational acceleration scaled by mass."""

    def __init__(self, gravity: Vector = Vector(0.0, -9.8, 0.0)) -> None:
        self.gravity = gravity

    def update_force(self, particle: Particle, time: float) -> None:
        if particle.mass <= 0:
            return
        particle.add_force(self.gravity * particle.mass)


class SpeedBoostGenerator(ForceGenerator):
    """Constant push along X that is boosted once a particle has travelled far enough."""

    MULTIPLIER = 100
    START_POINT = -800.0
    TRIGGER_DISTANCE = 600.0

    def __init__(self, accel_point: int, rng: Optional[random.Random] = None) -> None:
        self.rand_accel = float(accel_point) * self.MULTIPLIER
        self.triggered = False
        self.start_point = self.START_POINT
        self.boost = 0.0
        self._rng = rng if rng is not None else random.Random()

    def get_boost(self) -> float:
        """Return a random boost factor between 1 and 6."""
        low, high = 1.1, 8.0
        result = abs(int(low) - self._rng.randrange(int(high - low + 1)))
        return 1.0 if result == 0 else float(result)

    def update_force(self, particle: Particle, time: float) -> None:
        if particle.mass <= 0:
            return
        if (
            not self.triggered
            and particle.position.x - self.start_point >= self.TRIGGER_DISTANCE
        ):
            self.triggered = True
            self.boost = self.get_boost()
            self.rand_accel *= self.boost
        particle.add_force(Vector(self.rand_accel, 0.0, 0.0) * particle.mass)


class RandomSprayForceGenerator(ForceGenerator):
    """Random upward force with a little sideways spread."""

    def __init__(
        self,
        min_force: float,
        max_force: float,
        variance: float,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.min_force = min_force
        self.max_force = max_force
        self.variance = variance
        self._rng = rng if rng is not None else random.Random()

    def update_force(self, particle: Particle, time: float) -> None:
        if particle.mass <= 0:
            return
        upward = self._rng.uniform(self.min_force, self.max_force)
        side_x = self._rng.uniform(-self.variance, self.variance)
        side_z = self._rng.uniform(-self.variance, self.variance)
        particle.add_force(Vector(side_x, upward, side_z))