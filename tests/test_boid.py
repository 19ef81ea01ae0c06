import random

import pytest

from flocksim.boid import Boid
from flocksim.vector import Vector3


def test_defaults_match_documented_parameters():
    boid = Boid()
    assert boid.max_speed == 5.0
    assert boid.min_speed == 0.5
    assert boid.neighbor_distance == 5.0
    assert boid.max_force == 10.0


def test_spawn_speed_is_mean_of_limits():
    boid = Boid.spawn(Vector3(1.0, 2.0, 3.0), random.Random(42))
    assert boid.position == Vector3(1.0, 2.0, 3.0)
    assert boid.velocity.length() == pytest.approx((boid.max_speed + boid.min_speed) / 2.0)


def test_spawn_is_deterministic_with_seed():
    a = Boid.spawn(Vector3(), random.Random(7))
    b = Boid.spawn(Vector3(), random.Random(7))
    assert a.velocity == b.velocity


def test_find_neighbors_excludes_self_and_distant():
    me = Boid(position=Vector3())
    near = Boid(position=Vector3(1.0, 0.0, 0.0))
    far = Boid(position=Vector3(50.0, 0.0, 0.0))
    result = me.find_neighbors([me, near, far])
    assert result == [near]


def test_find_neighbors_boundary_is_exclusive():
    me = Boid(position=Vector3())
    edge = Boid(position=Vector3(me.neighbor_distance, 0.0, 0.0))
    assert me.find_neighbors([edge]) == []


def test_find_neighbors_skips_non_boids():
    me = Boid()
    near = Boid(position=Vector3(0.5, 0.0, 0.0))
    assert me.find_neighbors([object(), near]) == [near]


def test_update_without_neighbors_keeps_velocity_in_range():
    boid = Boid(velocity=Vector3(1.0, 1.0, 0.0))
    before = boid.velocity
    boid.update(0.1, [])
    assert boid.velocity == before


def test_update_clamps_to_max_speed():
    boid = Boid(velocity=Vector3(100.0, 0.0, 0.0))
    boid.update(0.1, [])
    assert boid.velocity.length() == pytest.approx(boid.max_speed)


def test_update_raises_to_min_speed():
    boid = Boid(velocity=Vector3(0.0, 0.01, 0.0))
    boid.update(0.1, [])
    assert boid.velocity.length() == pytest.approx(boid.min_speed)


def test_update_limits_force():
    boid = Boid(velocity=Vector3(1.0, 0.0, 0.0), max_speed=1000.0, min_speed=0.0, max_force=2.0)
    other = Boid(position=Vector3(0.1, 0.0, 0.0), velocity=Vector3(-3.0, 0.0, 0.0))
    before = boid.velocity
    delta = 0.5
    boid.update(delta, [other])
    change = (boid.velocity - before).length()
    assert change <= boid.max_force * delta + 1e-9


def test_update_separation_pushes_away():
    boid = Boid(velocity=Vector3(0.0, 0.0, 0.0), max_speed=1000.0, min_speed=0.0,
                alignment_weight=0.0, cohesion_weight=0.0, max_force=1000.0)
    other = Boid(position=Vector3(1.0, 0.0, 0.0))
    boid.update(0.1, [other])
    assert boid.velocity.x < 0.0


def test_update_with_coincident_neighbor_stays_finite():
    boid = Boid(velocity=Vector3(1.0, 0.0, 0.0))
    other = Boid(position=Vector3(), velocity=Vector3(1.0, 0.0, 0.0))
    boid.update(0.1, [other])
    assert all(abs(c) < float("inf") for c in boid.velocity)
    assert boid.velocity.length() <= boid.max_speed + 1e-9