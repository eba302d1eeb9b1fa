from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

import numpy as np

from ..config import ExplosionConfig
from .vector import frozen_vec, is_finite_point

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Explosion:
    center: np.ndarray  # float64[2], canvas units
    radius: float
    expanding: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", frozen_vec(self.center))

    @property
    def phase(self) -> str:
        return "expanding" if self.expanding else "contracting"


class ExplosionManager:
    """Creates blasts and advances their expand-then-contract lifecycle."""

    def __init__(self, config: ExplosionConfig | None = None):
        self.config = config or ExplosionConfig()

    def create(self, point: Any) -> Explosion:
        if not is_finite_point(point):
            raise ValueError(f"explosion center must be a finite (x, y) point, got {point!r}")
        return Explosion(center=point, radius=self.config.initial_radius, expanding=True)

    def spawn(self, explosions: tuple[Explosion, ...], point: Any) -> tuple[Explosion, ...]:
        """Return ``explosions`` with a freshly created blast appended."""
        return (*explosions, self.create(point))

    def step(self, blast: Explosion) -> Explosion | None:
        """Advance one blast by a tick, or None once it has burned out."""
        cfg = self.config
        if blast.expanding:
            radius = blast.radius + cfg.radius_step
            # Growth and the phase flip land on the same tick.
            return replace(blast, radius=radius, expanding=radius < cfg.max_radius)
        radius = blast.radius - cfg.radius_step
        if radius <= 0.0:
            return None
        return replace(blast, radius=radius)

    def tick(self, explosions: tuple[Explosion, ...]) -> tuple[Explosion, ...]:
        out = []
        for blast in explosions:
            nxt = self.step(blast)
            if nxt is None:
                logger.debug(f"explosion at ({blast.center[0]:.0f}, {blast.center[1]:.0f}) burned out")
                continue
            out.append(nxt)
        return tuple(out)
