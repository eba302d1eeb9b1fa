import numpy as np
import pytest

from bulwark.config import SimConfig, SpawnConfig
from bulwark.sim.context import ManualClock, SimulationContext
from bulwark.sim.loop import SimulationLoop
from bulwark.sim.missile import Missile


@pytest.fixture
def make_missile():
    ids = iter(range(1000, 2000))

    def _make(pos: list, vel: list, impact_time: float | None = None) -> Missile:
        return Missile(
            missile_id=next(ids),
            origin=(pos[0], 0.0),
            position=pos,
            velocity=vel,
            impact_time=impact_time,
            flash_radius=None if impact_time is None else 100.0,
        )

    return _make


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def make_loop(clock):
    """Loop on a manual clock with no initial missiles and spawning off."""

    def _make(seed: int = 0, initial: int = 0, probability: float = 0.0, **kwargs) -> SimulationLoop:
        cfg = SimConfig(spawn=SpawnConfig(initial_count=initial, probability=probability))
        return SimulationLoop(
            cfg,
            context=SimulationContext(clock=clock),
            rng=np.random.default_rng(seed),
            **kwargs,
        )

    return _make
