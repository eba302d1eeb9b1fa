"""Host-side helpers: pointer-to-canvas mapping and a headless frame scheduler."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import numpy as np

from .constants import CANVAS_HEIGHT, CANVAS_WIDTH, NOMINAL_FRAME_RATE
from .sim.context import ManualClock

logger = logging.getLogger(__name__)


class ViewportMapper:
    """
    Maps client (screen pixel) coordinates into canvas units.

    ``screen_ctm`` is the 3x3 homogeneous canvas-to-screen transform; client
    points are pushed through its inverse.
    """

    def __init__(self, screen_ctm: np.ndarray):
        ctm = np.asarray(screen_ctm, dtype=np.float64)
        if ctm.shape != (3, 3):
            raise ValueError(f"screen_ctm must be 3x3, got shape {ctm.shape}")
        if abs(float(np.linalg.det(ctm))) <= 1e-12:
            raise ValueError("screen_ctm is singular")
        self.screen_ctm = ctm
        self._inverse = np.linalg.inv(ctm)

    @classmethod
    def fit(
        cls,
        client_width: float,
        client_height: float,
        *,
        offset: tuple[float, float] = (0.0, 0.0),
        canvas: tuple[float, float] = (CANVAS_WIDTH, CANVAS_HEIGHT),
    ) -> ViewportMapper:
        """Uniform scale, centered letterbox of the canvas in a client box."""
        cw, ch = canvas
        if client_width <= 0 or client_height <= 0:
            raise ValueError(f"client box must be positive, got {client_width}x{client_height}")
        scale = min(client_width / cw, client_height / ch)
        tx = offset[0] + (client_width - cw * scale) * 0.5
        ty = offset[1] + (client_height - ch * scale) * 0.5
        ctm = np.asarray([[scale, 0.0, tx], [0.0, scale, ty], [0.0, 0.0, 1.0]], dtype=np.float64)
        return cls(ctm)

    def __call__(self, client_point: Any) -> np.ndarray:
        x, y = np.asarray(client_point, dtype=np.float64).reshape(2)
        out = self._inverse @ np.asarray([x, y, 1.0])
        return out[:2] / out[2]


class FrameQueue:
    """
    Headless stand-in for a display refresh callback.

    Callbacks requested during a frame run on the next frame, and the clock
    moves forward one frame interval before each frame.
    """

    def __init__(self, clock: ManualClock | None = None, frame_rate: float = NOMINAL_FRAME_RATE):
        if frame_rate <= 0.0:
            raise ValueError(f"frame_rate must be positive, got {frame_rate}")
        self.clock = clock or ManualClock()
        self.frame_rate = float(frame_rate)
        self.frames = 0
        self._pending: list[Callable[[], None]] = []

    def __call__(self, callback: Callable[[], None]) -> None:
        self._pending.append(callback)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_frame(self) -> int:
        """Advance the clock one frame and run queued callbacks. Returns how many ran."""
        self.clock.advance(1.0 / self.frame_rate)
        self.frames += 1
        callbacks, self._pending = self._pending, []
        for cb in callbacks:
            cb()
        return len(callbacks)

    def run(self, frames: int) -> int:
        ran = 0
        for _ in range(frames):
            ran += self.run_frame()
        if not self._pending:
            logger.debug(f"frame queue drained after {self.frames} frames")
        return ran
