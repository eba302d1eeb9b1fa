# ruff: noqa: E402
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bulwark import FrameQueue, ManualClock, SimConfig, SimulationContext, SimulationLoop
from bulwark.sim.snapshot import Snapshot


def check_tick(prev: Snapshot, snap: Snapshot, cfg: SimConfig) -> None:
    prev_missiles = {m.missile_id: m for m in prev.missiles}
    for m in snap.missiles:
        before = prev_missiles.get(m.missile_id)
        if before is not None and before.impacted:
            assert np.array_equal(before.position, m.position), f"missile {m.missile_id} moved after impact"
            assert before.impact_time == m.impact_time, f"missile {m.missile_id} impact time changed"
        if m.impacted:
            age = snap.time - m.impact_time
            assert age < cfg.missile.impact_flash_s, f"missile {m.missile_id} outlived its flash ({age:.3f}s)"
    for b in snap.explosions:
        assert b.radius > 0.0 or b.expanding, f"dead explosion published: {b}"
        assert b.radius <= cfg.explosion.max_radius, f"radius overshoot: {b.radius}"


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--frames", type=int, default=3000)
    args = parser.parse_args()

    cfg = SimConfig()
    clock = ManualClock()
    frames = FrameQueue(clock)
    loop = SimulationLoop(
        cfg, context=SimulationContext(clock=clock), rng=np.random.default_rng(args.seed), scheduler=frames
    )
    trigger_rng = np.random.default_rng(args.seed + 1)

    prev = loop.snapshot

    def on_snapshot(snap: Snapshot) -> None:
        nonlocal prev
        check_tick(prev, snap, cfg)
        prev = snap

    loop.subscribe(on_snapshot)
    loop.start()
    for _ in range(args.frames):
        if trigger_rng.random() < 0.02:
            loop.on_trigger((trigger_rng.uniform(0, cfg.terrain.width), trigger_rng.uniform(0, cfg.terrain.ground_y)))
        frames.run_frame()
    loop.stop()
    print("ok")


if __name__ == "__main__":
    main()
