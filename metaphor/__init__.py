"""Particle physics, force generators, cameras, lights and model transforms for a particle fountain."""

__version__ = "0.1.0"