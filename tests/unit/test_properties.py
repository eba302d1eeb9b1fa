import numpy as np
from hypothesis import strategies as st
from hypothesis.stateful import RuleBasedStateMachine, invariant, rule

from bulwark.config import SimConfig
from bulwark.sim.context import ManualClock, SimulationContext
from bulwark.sim.loop import SimulationLoop

canvas_x = st.floats(min_value=0.0, max_value=3840.0)
canvas_y = st.floats(min_value=0.0, max_value=2160.0)


class LoopStateMachine(RuleBasedStateMachine):
    def __init__(self):
        super().__init__()
        self.clock = ManualClock()
        self.loop = SimulationLoop(
            SimConfig(), context=SimulationContext(clock=self.clock), rng=np.random.default_rng(42)
        )

    @rule(x=canvas_x, y=canvas_y)
    def trigger(self, x, y):
        self.loop.on_trigger((x, y))

    @rule(dt=st.floats(min_value=0.0, max_value=0.2), ticks=st.integers(min_value=1, max_value=20))
    def advance(self, dt, ticks):
        for _ in range(ticks):
            self.clock.advance(dt)
            prev = self.loop.snapshot
            snap = self.loop.tick()
            self._check_step(prev, snap)

    def _check_step(self, prev, snap):
        before = {m.missile_id: m for m in prev.missiles}
        for m in snap.missiles:
            old = before.get(m.missile_id)
            if old is None:
                # Newly spawned this tick.
                assert m.airborne
                continue
            if old.impacted:
                # 1. Impacted missiles never move again.
                np.testing.assert_array_equal(m.position, old.position)
                assert m.impact_time == old.impact_time
            else:
                np.testing.assert_allclose(m.position, old.position + old.velocity)

        # 2. Missiles linger strictly less than the flash window.
        for m in snap.missiles:
            if m.impacted:
                assert snap.time - m.impact_time < 0.5

        # 3. Expired flashes are gone.
        current = {m.missile_id for m in snap.missiles}
        for m in prev.missiles:
            if m.impacted and snap.time - m.impact_time >= 0.5:
                assert m.missile_id not in current

    @invariant()
    def explosions_in_range(self):
        for b in self.loop.snapshot.explosions:
            assert 0.0 < b.radius <= 300.0
            if b.expanding:
                assert b.radius < 300.0

    @invariant()
    def ids_unique(self):
        ids = [m.missile_id for m in self.loop.snapshot.missiles]
        assert len(ids) == len(set(ids))


TestLoop = LoopStateMachine.TestCase
