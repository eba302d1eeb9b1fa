from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import numpy as np

from ..config import SimConfig
from .context import SimulationContext
from .explosion import ExplosionManager
from .projectile import ProjectileSimulator
from .snapshot import Snapshot
from .spawner import EntitySpawner
from .terrain import TerrainProfile
from .vector import is_finite_point

logger = logging.getLogger(__name__)

FrameCallback = Callable[[], None]
Scheduler = Callable[[FrameCallback], None]  # requestAnimationFrame-style
Listener = Callable[[Snapshot], None]
PointMapper = Callable[[Any], np.ndarray]


class SimulationLoop:
    """
    Drives the simulation one tick per host frame.

    Each tick merges queued triggers, advances explosions, advances missiles
    against the updated explosions, maybe spawns a missile, publishes the new
    snapshot and asks the host scheduler for another frame. Listeners only
    ever see whole snapshots.
    """

    def __init__(
        self,
        config: SimConfig | None = None,
        *,
        context: SimulationContext | None = None,
        rng: np.random.Generator | None = None,
        scheduler: Scheduler | None = None,
        mapper: PointMapper | None = None,
    ):
        self.config = config or SimConfig()
        self.context = context or SimulationContext()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.scheduler = scheduler
        self.mapper = mapper

        cfg = self.config
        self.terrain = TerrainProfile(cfg.terrain)
        self.explosion_manager = ExplosionManager(cfg.explosion)
        self.projectile_sim = ProjectileSimulator(self.terrain, cfg.missile, self.rng)
        self.spawner = EntitySpawner(self.context, self.rng, cfg.missile, cfg.spawn, width=cfg.terrain.width)

        self._listeners: list[Listener] = []
        self._pending: list[np.ndarray] = []
        self._running = False
        self._frame_requested = False

        self.snapshot = Snapshot(
            tick=0,
            time=0.0,
            missiles=self.spawner.initial(cfg.spawn.initial_count),
            explosions=(),
        )

    @property
    def running(self) -> bool:
        return self._running

    @property
    def pending_triggers(self) -> int:
        return len(self._pending)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def on_trigger(self, point: Any) -> None:
        """Queue a blast at ``point`` (canvas units). Applied at the start of the next tick."""
        if not is_finite_point(point):
            logger.warning(f"Ignoring trigger at invalid or non-finite point {point!r}")
            return
        self._pending.append(np.asarray(point, dtype=np.float64).reshape(2))

    def on_pointer(self, client_point: Any) -> None:
        """Map a host pointer position into canvas space and trigger there."""
        if self.mapper is None:
            logger.debug("Pointer input before mapper is attached, ignoring")
            return
        self.on_trigger(self.mapper(client_point))

    def tick(self) -> Snapshot:
        prev = self.snapshot
        now = self.context.elapsed()

        explosions = prev.explosions
        if self._pending:
            pending, self._pending = self._pending, []
            for point in pending:
                explosions = self.explosion_manager.spawn(explosions, point)

        explosions = self.explosion_manager.tick(explosions)
        missiles = self.projectile_sim.tick(prev.missiles, explosions, now)
        missiles = self.spawner.maybe_spawn(missiles)

        snap = Snapshot(tick=prev.tick + 1, time=now, missiles=missiles, explosions=explosions)
        self.snapshot = snap
        try:
            for listener in list(self._listeners):
                listener(snap)
        finally:
            # A failing listener still propagates, but the next frame stays booked.
            if self._running:
                self._request_frame()
        return snap

    def advance(self, ticks: int) -> Snapshot:
        for _ in range(ticks):
            self.tick()
        return self.snapshot

    def start(self) -> None:
        if self.scheduler is None:
            raise RuntimeError("SimulationLoop.start() needs a scheduler")
        if self._running:
            return
        self._running = True
        logger.info(f"Simulation started with {len(self.snapshot.missiles)} missiles")
        self._request_frame()

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        logger.info(f"Simulation stopped at tick {self.snapshot.tick}")

    def _request_frame(self) -> None:
        # At most one outstanding frame, even across stop()/start().
        if self._frame_requested:
            return
        if self.scheduler is None:
            raise RuntimeError("SimulationLoop needs a scheduler to request frames")
        self._frame_requested = True
        self.scheduler(self._on_frame)

    def _on_frame(self) -> None:
        self._frame_requested = False
        # A frame requested before stop() still arrives; drop it.
        if self._running:
            self.tick()
