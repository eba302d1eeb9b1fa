from __future__ import annotations

import numpy as np

from ..config import TerrainConfig
from ..constants import SILHOUETTE_OVERHANG


class TerrainProfile:
    """
    Static ground silhouette: a flat baseline with triangular peaks.

    Canvas y grows downwards, so a point is below ground when its y is at or
    past the surface height at that x. Each peak spans ``(left, right)`` and
    rises 1:1 to an apex at the midpoint. Points exactly on a span edge sit
    on the baseline.
    """

    def __init__(self, config: TerrainConfig | None = None):
        self.config = config or TerrainConfig()
        self._spans = np.asarray(self.config.peaks, dtype=np.float64).reshape(-1, 2)

    def elevation(self, x: np.ndarray | float) -> np.ndarray:
        """Height of the terrain above the baseline at x (0 on the plains)."""
        xs = np.asarray(x, dtype=np.float64)
        out = np.zeros_like(xs)
        for left, right in self._spans:
            # Distance to the nearest span edge, clipped to zero outside the span.
            rise = np.minimum(xs - left, right - xs)
            out = np.maximum(out, rise)
        return out

    def ground_height(self, x: np.ndarray | float) -> np.ndarray | float:
        h = self.config.ground_y - self.elevation(x)
        if np.ndim(h) == 0:
            return float(h)
        return h

    def is_below_ground(self, x: float, y: float) -> bool:
        return bool(y >= self.ground_height(x))

    def below_ground(self, points: np.ndarray) -> np.ndarray:
        """Vectorized ``is_below_ground`` over an (N, 2) array of points."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        return pts[:, 1] >= self.config.ground_y - self.elevation(pts[:, 0])

    def silhouette(self) -> np.ndarray:
        """Closed polyline vertices (float64[K, 2]) for drawing the ground."""
        cfg = self.config
        pad = SILHOUETTE_OVERHANG
        verts = [(-pad, cfg.height), (0.0, cfg.ground_y)]
        for left, right in sorted(cfg.peaks):
            apex = (left + right) * 0.5
            verts.append((left, cfg.ground_y))
            verts.append((apex, cfg.ground_y - (apex - left)))
            verts.append((right, cfg.ground_y))
        verts.append((cfg.width, cfg.ground_y))
        verts.append((cfg.width + pad, cfg.height))
        return np.asarray(verts, dtype=np.float64)
