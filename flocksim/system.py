"""Flock container that steps every boid and wraps positions in a box."""

from __future__ import annotations

import math

from .boid import Boid
from .vector import Vector3


def _wrap_axis(value: float, low: float, high: float) -> float:
    size = high - low
    if size <= 0.0:
        return low
    if value < low:
        value = high - math.fmod(low - value, size)
    elif value > high:
        value = low + math.fmod(value - high, size)
    if value == high:
        value = low
    return value


class BoidSystem:
    """Holds registered boids inside a wrapping bounding box."""

    def __init__(
        self,
        min_bound: Vector3 = Vector3(-100.0, -100.0, -100.0),
        max_bound: Vector3 = Vector3(100.0, 100.0, 100.0),
    ) -> None:
        self._boids: list[Boid] = []
        self.min_bound = min_bound
        self.max_bound = max_bound

    @property
    def boids(self) -> list[Boid]:
        """A copy of the registered boids, in registration order."""
        return list(self._boids)

    def __len__(self) -> int:
        return len(self._boids)

    def register_boid(self, boid: Boid) -> None:
        """Add a boid to the flock."""
        self._boids.append(boid)

    def unregister_boid(self, boid: Boid | None) -> None:
        """Remove the first registration of this boid; unknown boids are ignored."""
        if boid is None:
            return
        for index, existing in enumerate(self._boids):
            if existing is boid:
                del self._boids[index]
                return

    def update_boids_cpu(self, delta: float) -> None:
        """Steer each boid in turn against the flock and wrap its position."""
        for boid in list(self._boids):
            neighbors = boid.find_neighbors(self._boids)
            boid.update(delta, neighbors)
            boid.position = self.wrap_position(boid.position)

    def set_bounds(self, min_bound: Vector3, max_bound: Vector3) -> None:
        """Set the corners of the wrapping box."""
        self.min_bound = min_bound
        self.max_bound = max_bound

    def wrap_position(self, pos: Vector3) -> Vector3:
        """Map a point back into the box, toroidally on each axis."""
        return Vector3(
            _wrap_axis(pos.x, self.min_bound.x, self.max_bound.x),
            _wrap_axis(pos.y, self.min_bound.y, self.max_bound.y),
            _wrap_axis(pos.z, self.min_bound.z, self.max_bound.z),
        )