# flocksim

Boids flocking rules in pure Python. Each boid steers by three rules:
separation, alignment and cohesion. A `BoidSystem` holds a flock, steers every
boid against the others and keeps positions inside an axis-aligned box whose
sides wrap around.

## Installation

```
pip install .
```

There are no runtime dependencies. To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
import random

from flocksim.vector import Vector3
from flocksim.boid import Boid
from flocksim.system import BoidSystem

rng = random.Random(42)
system = BoidSystem()
system.set_bounds(Vector3(-50, -50, -50), Vector3(50, 50, 50))

for _ in range(100):
    position = Vector3(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(-50, 50))
    system.register_boid(Boid.spawn(position, rng))

dt = 1 / 60
for _ in range(600):
    system.update_boids_cpu(dt)
    # update_boids_cpu steers velocities; moving the boids is up to you.
    for boid in system.boids:
        boid.position = system.wrap_position(boid.position + boid.velocity * dt)
```

### Vectors (`flocksim.vector`)

`Vector3` is an immutable dataclass with `x`, `y` and `z`. It supports `+`,
`-`, unary `-`, multiplication by a number on either side, division by a
number, and iteration over its three components. It provides `length()`,
`length_squared()`, `normalized()` (the zero vector stays zero) and
`distance_to(other)`.

### Boids (`flocksim.boid`)

A `Boid` is a dataclass holding a `position`, a `velocity` and its steering
settings. Boids compare by identity. The defaults are `max_speed` 5,
`min_speed` 0.5, `neighbor_distance` 5, `separation_weight` 3,
`alignment_weight` 1, `cohesion_weight` 2 and `max_force` 10.

- `Boid.spawn(position=None, rng=None)` creates a boid at `position` (the
  origin if omitted). Its velocity points in a random direction drawn from
  `rng` (a `random.Random`), with a speed equal to the mean of the minimum and
  maximum speeds.
- `boid.find_neighbors(boids)` returns the other boids strictly closer than
  `neighbor_distance`, in the order given.
- `boid.update(delta, neighbors)` computes the combined steering force from
  the neighbours, limits it to `max_force`, adds `force * delta` to the
  velocity and then clamps the speed between `min_speed` and `max_speed`.
  A neighbour at exactly the same position adds no separation. Only the
  velocity changes; the position is left alone.

### The system (`flocksim.system`)

`BoidSystem(min_bound, max_bound)` keeps the flock in registration order. The
default box runs from -100 to 100 on each axis.

- `register_boid(boid)` adds a boid; `unregister_boid(boid)` removes its first
  registration and ignores boids that are not registered (or `None`).
- `boids` returns a copy of the registered list; `len(system)` gives its size.
- `update_boids_cpu(delta)` goes through the boids in turn, updates each one
  against its current neighbours in the flock and then wraps its position
  into the box. It does not advance positions by the velocity.
- `set_bounds(min_bound, max_bound)` sets the box.
- `wrap_position(pos)` folds a point back into the box on each axis. A point
  on the upper face maps to the lower face, and an axis whose size is zero or
  negative collapses to its lower bound.

### Oscillator (`flocksim.oscillator`)

`Oscillator` is a small time-driven 2D point starting at `(0, 0)`. Each call
to `process(delta)` advances `time_passed` and sets and returns `position` as
`(10 + 10*sin(2t), 10 + 10*cos(1.5t))`.

## What it does not do

flocksim only computes the flocking math. It has no rendering or display, no
command-line program, no accelerated batch path for large flocks, and it does
not integrate positions for you: callers move the boids by their velocities.