from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .explosion import Explosion
from .missile import Missile


@dataclass(frozen=True, eq=False)
class Snapshot:
    """One complete published simulation state. Never mutated after publish."""

    tick: int
    time: float
    missiles: tuple[Missile, ...] = ()
    explosions: tuple[Explosion, ...] = ()

    def missile(self, missile_id: int) -> Missile | None:
        for m in self.missiles:
            if m.missile_id == missile_id:
                return m
        return None

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly view for renderers."""
        return {
            "tick": self.tick,
            "time": self.time,
            "missiles": [
                {
                    "id": m.missile_id,
                    "origin": [float(m.origin[0]), float(m.origin[1])],
                    "pos": [float(m.position[0]), float(m.position[1])],
                    "vel": [float(m.velocity[0]), float(m.velocity[1])],
                    "impact_time": m.impact_time,
                    "flash_radius": m.flash_radius,
                }
                for m in self.missiles
            ],
            "explosions": [
                {
                    "center": [float(b.center[0]), float(b.center[1])],
                    "radius": float(b.radius),
                    "expanding": bool(b.expanding),
                }
                for b in self.explosions
            ],
        }
