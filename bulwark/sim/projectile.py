from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from ..config import MissileConfig
from .explosion import Explosion
from .missile import Missile
from .terrain import TerrainProfile

logger = logging.getLogger(__name__)


def _inside_blasts(points: np.ndarray, explosions: Sequence[Explosion]) -> np.ndarray:
    """bool[N]: point lies strictly inside at least one blast radius."""
    if not explosions or len(points) == 0:
        return np.zeros(len(points), dtype=bool)
    centers = np.stack([b.center for b in explosions])  # [M, 2]
    radii = np.asarray([b.radius for b in explosions], dtype=np.float64)  # [M]
    dist = np.linalg.norm(points[:, None, :] - centers[None, :, :], axis=-1)  # [N, M]
    return np.any(dist < radii[None, :], axis=1)


class ProjectileSimulator:
    """
    Advances missiles one tick and resolves their collisions.

    Missiles fly in straight lines at constant velocity. A missile whose next
    position lands inside a blast or below ground is frozen there with an
    impact flash, and is pruned once the flash has run its course.
    """

    def __init__(self, terrain: TerrainProfile, config: MissileConfig | None, rng: np.random.Generator):
        self.terrain = terrain
        self.config = config or MissileConfig()
        self.rng = rng

    def collision_cause(self, point: np.ndarray, explosions: Sequence[Explosion]) -> str | None:
        pts = np.asarray(point, dtype=np.float64).reshape(1, 2)
        if bool(_inside_blasts(pts, explosions)[0]):
            return "explosion"
        if bool(self.terrain.below_ground(pts)[0]):
            return "terrain"
        return None

    def has_collided(self, point: np.ndarray, explosions: Sequence[Explosion]) -> bool:
        return self.collision_cause(point, explosions) is not None

    def tick(
        self, missiles: Sequence[Missile], explosions: Sequence[Explosion], now: float
    ) -> tuple[Missile, ...]:
        """
        Move airborne missiles and resolve collisions against ``explosions``.

        ``explosions`` must already be advanced for this tick so a blast that
        just grew can catch a missile on the same tick.
        """
        airborne = [i for i, m in enumerate(missiles) if m.airborne]
        updated = list(missiles)

        if airborne:
            pos = np.stack([missiles[i].position for i in airborne])
            vel = np.stack([missiles[i].velocity for i in airborne])
            nxt = pos + vel
            blast_hit = _inside_blasts(nxt, explosions)
            hit = blast_hit | self.terrain.below_ground(nxt)

            for k, i in enumerate(airborne):
                m = missiles[i]
                if hit[k]:
                    flash = float(self.rng.random()) * self.config.flash_radius_max
                    updated[i] = m.impacted_at(nxt[k], now, flash)
                    cause = "explosion" if blast_hit[k] else "terrain"
                    logger.debug(
                        f"missile {m.missile_id} hit {cause} at ({nxt[k, 0]:.1f}, {nxt[k, 1]:.1f}) t={now:.3f}"
                    )
                else:
                    updated[i] = m.moved_to(nxt[k])

        flash_s = self.config.impact_flash_s
        return tuple(m for m in updated if not m.flash_expired(now, flash_s))
