import math

import numpy as np
import pytest

from bulwark.config import SpawnConfig
from bulwark.sim.context import ManualClock, SimulationContext
from bulwark.sim.spawner import EntitySpawner


def make_spawner(seed: int = 0, probability: float = 0.01) -> EntitySpawner:
    return EntitySpawner(
        SimulationContext(clock=ManualClock()),
        np.random.default_rng(seed),
        spawn=SpawnConfig(probability=probability),
    )


def test_spawn_one_ranges():
    spawner = make_spawner(3)
    for m in spawner.initial(500):
        assert 0.0 <= m.origin[0] < 3840.0
        assert m.origin[1] == 0.0
        np.testing.assert_array_equal(m.position, m.origin)
        assert -1.5 <= m.velocity[0] <= 1.5
        assert 3.0 <= m.velocity[1] < 6.0
        assert m.airborne and m.flash_radius is None


def test_ids_are_unique_and_monotonic():
    spawner = make_spawner()
    ids = [m.missile_id for m in spawner.initial(5)] + [spawner.spawn_one().missile_id]
    assert ids == [0, 1, 2, 3, 4, 5]


def test_independent_contexts_do_not_share_ids():
    a, b = make_spawner(), make_spawner()
    assert a.spawn_one().missile_id == b.spawn_one().missile_id == 0


def test_initial_rejects_negative_count():
    with pytest.raises(ValueError):
        make_spawner().initial(-1)
    assert make_spawner().initial(0) == ()


def test_spawn_rate_is_consistent_with_one_percent():
    spawner = make_spawner(seed=2024)
    n = 10_000
    spawned = 0
    for _ in range(n):
        if spawner.maybe_spawn(()):
            spawned += 1
    p = 0.01
    sigma = math.sqrt(n * p * (1 - p))
    assert abs(spawned - n * p) <= 4 * sigma


def test_maybe_spawn_appends_without_mutating():
    spawner = make_spawner(probability=1.0)
    before = spawner.initial(2)
    after = spawner.maybe_spawn(before)
    assert len(before) == 2
    assert len(after) == 3
    assert after[:2] == before
    assert make_spawner(probability=0.0).maybe_spawn(before) == before


def test_seeded_spawners_agree():
    a, b = make_spawner(seed=9), make_spawner(seed=9)
    for ma, mb in zip(a.initial(10), b.initial(10)):
        np.testing.assert_array_equal(ma.origin, mb.origin)
        np.testing.assert_array_equal(ma.velocity, mb.velocity)


def test_spawn_config_validation():
    with pytest.raises(ValueError):
        SpawnConfig(probability=1.5)
    with pytest.raises(ValueError):
        SpawnConfig(initial_count=-2)
