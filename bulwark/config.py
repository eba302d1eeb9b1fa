from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .constants import (
    BLAST_INITIAL_RADIUS,
    BLAST_MAX_RADIUS,
    BLAST_RADIUS_STEP,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    FLASH_RADIUS_MAX,
    GROUND_Y,
    IMPACT_FLASH_S,
    INITIAL_MISSILES,
    LEFT_PEAK_SPAN,
    MISSILE_VX_MAX,
    MISSILE_VY_MAX,
    MISSILE_VY_MIN,
    RIGHT_PEAK_SPAN,
    SPAWN_PROBABILITY,
)

if TYPE_CHECKING:
    from .settings import Settings


@dataclass(frozen=True)
class TerrainConfig:
    width: float = CANVAS_WIDTH
    height: float = CANVAS_HEIGHT
    ground_y: float = GROUND_Y
    peaks: tuple[tuple[float, float], ...] = (LEFT_PEAK_SPAN, RIGHT_PEAK_SPAN)

    def __post_init__(self) -> None:
        for left, right in self.peaks:
            if not left < right:
                raise ValueError(f"peak span must have left < right, got ({left}, {right})")
        spans = sorted(self.peaks)
        for (_, prev_right), (next_left, _) in zip(spans, spans[1:]):
            if next_left < prev_right:
                raise ValueError(f"peak spans overlap: {spans}")


@dataclass(frozen=True)
class ExplosionConfig:
    initial_radius: float = BLAST_INITIAL_RADIUS
    radius_step: float = BLAST_RADIUS_STEP
    max_radius: float = BLAST_MAX_RADIUS

    def __post_init__(self) -> None:
        if self.radius_step <= 0.0:
            raise ValueError(f"radius_step must be positive, got {self.radius_step}")
        if not 0.0 <= self.initial_radius < self.max_radius:
            raise ValueError(
                f"initial_radius must be in [0, max_radius), got {self.initial_radius} (max {self.max_radius})"
            )


@dataclass(frozen=True)
class MissileConfig:
    vx_max: float = MISSILE_VX_MAX
    vy_min: float = MISSILE_VY_MIN
    vy_max: float = MISSILE_VY_MAX
    impact_flash_s: float = IMPACT_FLASH_S
    flash_radius_max: float = FLASH_RADIUS_MAX

    def __post_init__(self) -> None:
        if self.vx_max < 0.0:
            raise ValueError(f"vx_max must be non-negative, got {self.vx_max}")
        if not self.vy_min < self.vy_max:
            raise ValueError(f"vy_min must be < vy_max, got [{self.vy_min}, {self.vy_max})")
        if self.impact_flash_s < 0.0:
            raise ValueError(f"impact_flash_s must be non-negative, got {self.impact_flash_s}")
        if self.flash_radius_max < 0.0:
            raise ValueError(f"flash_radius_max must be non-negative, got {self.flash_radius_max}")


@dataclass(frozen=True)
class SpawnConfig:
    initial_count: int = INITIAL_MISSILES
    probability: float = SPAWN_PROBABILITY
    spawn_y: float = 0.0

    def __post_init__(self) -> None:
        if self.initial_count < 0:
            raise ValueError(f"initial_count must be non-negative, got {self.initial_count}")
        if not 0.0 <= self.probability <= 1.0 or math.isnan(self.probability):
            raise ValueError(f"probability must be in [0, 1], got {self.probability}")


@dataclass(frozen=True)
class SimConfig:
    terrain: TerrainConfig = field(default_factory=TerrainConfig)
    explosion: ExplosionConfig = field(default_factory=ExplosionConfig)
    missile: MissileConfig = field(default_factory=MissileConfig)
    spawn: SpawnConfig = field(default_factory=SpawnConfig)
    seed: int | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> SimConfig:
        return cls(
            spawn=SpawnConfig(initial_count=settings.INITIAL_MISSILES, probability=settings.SPAWN_PROBABILITY),
            seed=settings.SEED,
        )
