from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from ..config import MissileConfig, SpawnConfig
from ..constants import CANVAS_WIDTH
from .context import SimulationContext
from .missile import Missile

logger = logging.getLogger(__name__)


class EntitySpawner:
    def __init__(
        self,
        context: SimulationContext,
        rng: np.random.Generator,
        missile: MissileConfig | None = None,
        spawn: SpawnConfig | None = None,
        width: float = CANVAS_WIDTH,
    ):
        self.context = context
        self.rng = rng
        self.missile = missile or MissileConfig()
        self.spawn = spawn or SpawnConfig()
        self.width = float(width)

    def spawn_one(self) -> Missile:
        cfg = self.missile
        x0 = float(self.rng.uniform(0.0, self.width))
        vx = float(self.rng.uniform(-cfg.vx_max, cfg.vx_max))
        vy = float(self.rng.uniform(cfg.vy_min, cfg.vy_max))
        origin = (x0, self.spawn.spawn_y)
        return Missile(
            missile_id=self.context.next_id(),
            origin=origin,
            position=origin,
            velocity=(vx, vy),
        )

    def initial(self, count: int) -> tuple[Missile, ...]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return tuple(self.spawn_one() for _ in range(count))

    def maybe_spawn(self, missiles: Sequence[Missile]) -> tuple[Missile, ...]:
        # One independent draw per call.
        if self.rng.random() < self.spawn.probability:
            m = self.spawn_one()
            logger.debug(f"spawned missile {m.missile_id} at x={m.origin[0]:.0f}")
            return (*missiles, m)
        return tuple(missiles)
