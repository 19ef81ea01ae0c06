"""A point that traces a Lissajous-like path over time."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Oscillator:
    """Moves a 2D position along sine and cosine waves as time passes."""

    time_passed: float = 0.0
    position: tuple[float, float] = (0.0, 0.0)

    def process(self, delta: float) -> tuple[float, float]:
        """Advance time by delta and return the new position."""
        self.time_passed += delta
        self.position = (
            10.0 + 10.0 * math.sin(self.time_passed * 2.0),
            10.0 + 10.0 * math.cos(self.time_passed * 1.5),
        )
        return self.position