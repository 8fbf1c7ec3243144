"""A fountain that keeps spawning short-lived sparks into a physics world."""

from __future__ import annotations

import random
from typing import Iterator, List, Optional

from metaphor.model import Model3D
from metaphor.particle import Particle
from metaphor.render_particle import RenderParticle
from metaphor.vector import Vector
from metaphor.world import PhysicsWorld


class FountainDemo:
    """Spawns randomised sparks at a fixed spot until ``max_sparks`` are alive."""

    SPAWN_COOLDOWN = 0.05
    ORIGIN = Vector(0.0, -320.0, 0.0)

    def __init__(
        self,
        world: PhysicsWorld,
        model: Model3D,
        max_sparks: int,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.world = world
        self.model = model
        self.max_sparks = max_sparks
        self.spawn_cooldown = self.SPAWN_COOLDOWN
        self.spawn_timer = 0.0
        self._rng = rng if rng is not None else random.Random()
        self._sparks: List[RenderParticle] = []

    def _spawn(self) -> RenderParticle:
        roll = self._rng.randrange
        spark = Particle(0.0, 0.0, 0.0)
        spark.position = self.ORIGIN
        spark.velocity = Vector(
            (roll(200) - 100) / 100.0,
            roll(200) / 100.0 + 4.0,
            (roll(200) - 100) / 100.0,
        )
        spark.lifespan = 1.0 + roll(900) / 100.0
        radius = 2.0 + roll(800) / 100.0
        spark.mass = 1.0
        spark.add_force(
            Vector(
                float((roll(200) - 100) * 1000),
                float((roll(200) + 300) * 1000),
                float((roll(200) - 100) * 1000),
            )
        )
        self.world.add_particle(spark)
        color = Vector(roll(100) / 100.0, roll(100) / 100.0, roll(100) / 100.0)
        return RenderParticle(spark, self.model, color, radius)

    def update(self, delta_time: float) -> None:
        """Advance the spawn timer, spawn sparks when due and drop dead ones."""
        self.spawn_timer += delta_time
        while (
            len(self._sparks) < self.max_sparks
            and self.spawn_timer >= self.spawn_cooldown
        ):
            self.spawn_timer = 0.0
            self._sparks.append(self._spawn())
        self._sparks = [s for s in self._sparks if not s.particle.is_destroyed()]

    def __iter__(self) -> Iterator[RenderParticle]:
        return iter(list(self._sparks))

    def __len__(self) -> int:
        return len(self._sparks)