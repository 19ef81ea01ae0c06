"""A single boid following separation, alignment and cohesion rules."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable

from .vector import Vector3


@dataclass(eq=False)
class Boid:
    """One member of a flock; compared by identity."""

    position: Vector3 = field(default_factory=Vector3)
    velocity: Vector3 = field(default_factory=Vector3)
    max_speed: float = 5.0
    min_speed: float = 0.5
    neighbor_distance: float = 5.0
    separation_weight: float = 3.0
    alignment_weight: float = 1.0
    cohesion_weight: float = 2.0
    max_force: float = 10.0

    @classmethod
    def spawn(cls, position: Vector3 | None = None, rng: random.Random | None = None) -> Boid:
        """Create a boid heading in a random direction at the mean of its speed limits."""
        rng = rng if rng is not None else random.Random()
        boid = cls(position=position if position is not None else Vector3())
        direction = Vector3(
            rng.random() * 2.0 - 1.0,
            rng.random() * 2.0 - 1.0,
            rng.random() * 2.0 - 1.0,
        ).normalized()
        boid.velocity = direction * ((boid.max_speed + boid.min_speed) / 2.0)
        return boid

    def find_neighbors(self, boids: Iterable[Boid]) -> list[Boid]:
        """Return the other boids strictly closer than the neighbour distance."""
        return [
            other
            for other in boids
            if isinstance(other, Boid)
            and other is not self
            and self.position.distance_to(other.position) < self.neighbor_distance
        ]

    def update(self, delta: float, neighbors: Iterable[Boid]) -> None:
        """Steer the velocity by the flocking forces and clamp its speed."""
        neighbors = list(neighbors)
        separation = Vector3()
        alignment = Vector3()
        cohesion_center = Vector3()

        for other in neighbors:
            diff = self.position - other.position
            dist_sq = diff.length_squared()
            # Coincident boids give no defined repulsion direction.
            if dist_sq > 0.0:
                separation = separation + diff / dist_sq
            alignment = alignment + other.velocity
            cohesion_center = cohesion_center + other.position

        total_force = Vector3()
        count = len(neighbors)
        if count:
            separation = (separation / count - self.velocity) * self.separation_weight
            alignment = (alignment / count - self.velocity) * self.alignment_weight
            cohesion = (
                (cohesion_center / count - self.position) - self.velocity
            ) * self.cohesion_weight

            total_force = separation + alignment + cohesion
            if total_force.length_squared() > self.max_force * self.max_force:
                total_force = total_force.normalized() * self.max_force

        self.velocity = self.velocity + total_force * delta

        speed_sq = self.velocity.length_squared()
        if speed_sq > self.max_speed * self.max_speed:
            self.velocity = self.velocity.normalized() * self.max_speed
        elif speed_sq < self.min_speed * self.min_speed:
            self.velocity = self.velocity.normalized() * self.min_speed