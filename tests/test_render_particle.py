import numpy as np

from metaphor.model import Model3D
from metaphor.particle import Particle
from metaphor.render_particle import RenderParticle
from metaphor.vector import Vector


def test_default_color_is_white():
    rp = RenderParticle(Particle(0, 0, 0), Model3D())
    assert rp.color == Vector(1.0, 1.0, 1.0)
    assert rp.size is None


def test_sync_copies_position():
    particle = Particle(3.0, -4.0, 5.0)
    model = Model3D()
    RenderParticle(particle, model).sync()
    assert np.allclose(model.position, [3.0, -4.0, 5.0])


def test_sync_sets_color_with_opaque_alpha():
    model = Model3D()
    RenderParticle(Particle(0, 0, 0), model, Vector(0.2, 0.4, 0.6)).sync()
    assert np.allclose(model.color, [0.2, 0.4, 0.6, 1.0])


def test_sync_applies_size_as_uniform_scale():
    model = Model3D()
    RenderParticle(Particle(0, 0, 0), model, Vector(1, 1, 1), 7.0).sync()
    assert np.allclose(model.scale, [7.0, 7.0, 7.0])


def test_sync_without_size_keeps_scale():
    model = Model3D()
    before = model.scale.copy()
    RenderParticle(Particle(0, 0, 0), model).sync()
    assert np.allclose(model.scale, before)


def test_sync_follows_moving_particle():
    particle = Particle(0.0, 0.0, 0.0)
    particle.velocity = Vector(2.0, 0.0, 0.0)
    model = Model3D()
    rp = RenderParticle(particle, model)
    particle.update(0.5)
    returned = rp.sync()
    assert returned is model
    assert np.allclose(model.position, list(particle.position))