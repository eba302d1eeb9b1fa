from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np

from .vector import frozen_vec


@dataclass(frozen=True, eq=False)
class Missile:
    missile_id: int
    origin: np.ndarray  # float64[2], spawn point
    position: np.ndarray  # float64[2], canvas units
    velocity: np.ndarray  # float64[2], canvas units / tick

    # Impact flash (both unset while airborne, set together exactly once).
    impact_time: float | None = None
    flash_radius: float | None = None

    def __post_init__(self) -> None:
        for name in ("origin", "position", "velocity"):
            object.__setattr__(self, name, frozen_vec(getattr(self, name)))

    @property
    def airborne(self) -> bool:
        return self.impact_time is None

    @property
    def impacted(self) -> bool:
        return self.impact_time is not None

    @property
    def trail(self) -> np.ndarray:
        """Segment from origin to current position, float64[2, 2]."""
        return np.stack([self.origin, self.position])

    def moved_to(self, position: np.ndarray) -> Missile:
        return replace(self, position=position)

    def impacted_at(self, position: np.ndarray, now: float, flash_radius: float) -> Missile:
        if self.impacted:
            raise ValueError(f"missile {self.missile_id} already impacted at t={self.impact_time}")
        return replace(self, position=position, impact_time=float(now), flash_radius=float(flash_radius))

    def flash_expired(self, now: float, flash_s: float) -> bool:
        return self.impact_time is not None and (now - self.impact_time) >= flash_s
