# ruff: noqa: E402
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bulwark import FrameQueue, ManualClock, SimConfig, SimulationContext, SimulationLoop, ViewportMapper
from bulwark.settings import settings


def run_episode(seed: int, frames: int, triggers_per_second: float, frame_rate: float) -> dict:
    clock = ManualClock()
    frames_q = FrameQueue(clock, frame_rate=frame_rate)
    cfg = SimConfig.from_settings(settings)
    loop = SimulationLoop(
        cfg,
        context=SimulationContext(clock=clock),
        rng=np.random.default_rng(seed),
        scheduler=frames_q,
        mapper=ViewportMapper.fit(1920, 1080),
    )

    stats = {"impacts": 0, "peak_missiles": 0, "peak_explosions": 0}
    seen_impacts: set[int] = set()

    def on_snapshot(snap) -> None:
        for m in snap.missiles:
            if m.impacted and m.missile_id not in seen_impacts:
                seen_impacts.add(m.missile_id)
                stats["impacts"] += 1
        stats["peak_missiles"] = max(stats["peak_missiles"], len(snap.missiles))
        stats["peak_explosions"] = max(stats["peak_explosions"], len(snap.explosions))

    loop.subscribe(on_snapshot)
    # Scripted "player" clicking at random screen positions.
    click_rng = np.random.default_rng(seed + 1)
    p_click = triggers_per_second / frame_rate

    loop.start()
    for _ in range(frames):
        if click_rng.random() < p_click:
            loop.on_pointer((click_rng.uniform(0, 1920), click_rng.uniform(0, 1000)))
        frames_q.run_frame()
    loop.stop()

    return {"seed": seed, "ticks": loop.snapshot.tick, "time": round(loop.snapshot.time, 3), **stats}


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--episodes", type=int, default=3)
    parser.add_argument("--seed", type=int, default=settings.SEED or 0)
    parser.add_argument("--frames", type=int, default=1800, help="Frames per episode")
    parser.add_argument("--clicks", type=float, default=0.5, help="Player triggers per second")
    parser.add_argument("--frame-rate", type=float, default=settings.FRAME_RATE)
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    for ep in range(args.episodes):
        seed = args.seed + ep
        result = run_episode(seed, args.frames, args.clicks, args.frame_rate)
        print(f"episode {ep}: {result}")


if __name__ == "__main__":
    main()
