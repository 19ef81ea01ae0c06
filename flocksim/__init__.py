"""Boids flocking: a 3D vector, steering boids, a wrapping flock container and an oscillator."""

__version__ = "0.1.0"
__all__ = ["boid", "oscillator", "system", "vector"]