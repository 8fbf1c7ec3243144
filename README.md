# metaphor

A compact particle physics engine with the pieces needed to describe a
particle fountain: three-component vectors, particles with lifespans and
damping, force generators, a force registry, a physics world, cameras, lights
and model transforms built on numpy.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Physics

```python
from metaphor.vector import Vector
from metaphor.particle import Particle
from metaphor.world import PhysicsWorld
from metaphor.forces import DragForceGenerator

world = PhysicsWorld()
ball = Particle(0.0, 100.0, 0.0)
ball.velocity = Vector(5.0, 0.0, 0.0)
world.add_particle(ball)          # gravity (0, -980, 0) is registered automatically

world.force_registry.add(ball, DragForceGenerator(0.74, 0.57))

for _ in range(10):
    world.update(0.016)

print(ball.position, ball.is_destroyed())
```

`PhysicsWorld.update(time)` first drops particles that are already destroyed,
then lets every registered generator add its force, then advances each
particle. `Particle.update(time)` moves the particle, turns the accumulated
force into acceleration and velocity, applies damping (`damping ** time`,
0.9 by default), counts down `lifespan` (5 seconds by default), destroys the
particle once it reaches zero, and clears the accumulated force and
acceleration.

`Vector` is an immutable dataclass with `x`, `y`, `z`. It supports `+`, `-`,
unary `-`, `*` with a number (scaling) or with another vector (component
product), iteration, and the methods `scale`, `component_product`, `dot`,
`cross`, `magnitude`, `direction`, `normalize` and `to_array`. A zero vector
normalises to zero.

Force generators in `metaphor.forces`:

- `ForceGenerator`: the base class; it applies no force.
- `GravityForceGenerator(gravity)`: a constant acceleration scaled by mass
  (default `Vector(0, -9.8, 0)`); particles with non-positive mass are skipped.
- `DragForceGenerator(k1, k2)`: a force of `(k1 + k2) * speed` against the
  direction of motion (defaults 0.74 and 0.57).
- `SpeedBoostGenerator(accel_point, rng)`: a push along X of
  `accel_point * 100` scaled by mass, multiplied once by a random factor from
  `get_boost()` when a particle's X has moved 600 units past -800.
- `RandomSprayForceGenerator(min_force, max_force, variance, rng)`: a random
  upward force between `min_force` and `max_force` with a random sideways
  spread of up to `variance` on X and Z.

`ForceRegistry` keeps particle/generator pairs with `add`, `remove`, `clear`,
`update_forces` and `len()`.

## Fountain

```python
import random
from metaphor.world import PhysicsWorld
from metaphor.model import Model3D
from metaphor.fountain import FountainDemo

world = PhysicsWorld()
fountain = FountainDemo(world, Model3D((0.0, 0.0, 0.0)), 1000, random.Random(1))

for _ in range(60):
    fountain.update(0.016)
    world.update(0.0016)

for spark in fountain:
    spark.sync()
print(len(fountain), "sparks alive")
```

`FountainDemo.update(delta_time)` spawns sparks at `(0, -320, 0)` every
0.05 seconds while fewer than `max_sparks` are alive, each with a random
velocity, lifespan (1 to 10 seconds), size, colour and initial upward force,
and adds them to the world. Destroyed sparks are dropped from the fountain.
Each spark is a `RenderParticle`, whose `sync()` copies the particle's
position, colour and size onto its `Model3D`.

`ParticleSystem` manages particles on its own, without a world or forces:
`emit(position, velocity, lifespan, model)` creates one, `update(delta_time)`
advances them and discards the expired ones.

## Cameras, models and lights

`OrthoCamera(position)` uses an 800x800 orthographic volume and
`PerspectiveCamera(position, height, width)` a 60 degree perspective
projection; both expose `position`, `front`, `world_up`, `projection` and a
`view_matrix` property.

`Model3D` keeps position, scale, rotation angles (`rotate(axis, direction)`
turns one degree about `"x"`, `"y"` or `"z"`, direction 0 adding and 1
subtracting), colour and camera matrices. `transform()` returns the model
matrix (translate, scale, then rotate about X, Y and Z), and `set_camera`
adopts a camera's projection, position and front.

`DirectionLight`, `PointLight` and `ColorLight` return the shader uniform
values they describe from `uniforms()`, as a mapping from uniform name to
value.

The matrix helpers in `metaphor.transforms` (`look_at`, `perspective`,
`ortho`, `translate`, `scale`, `rotate`) return 4x4 numpy arrays for column
vectors, following the usual OpenGL conventions.

## What this package does not do

It does not open a window, draw anything, load meshes or textures, or handle
keyboard input. Models, cameras and lights only compute the matrices and
uniform values; handing them to a renderer is left to the caller. There is no
command-line program.