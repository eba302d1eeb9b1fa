from __future__ import annotations

import itertools
import time
from collections.abc import Callable
from dataclasses import dataclass, field


class ManualClock:
    """Clock that only moves when told to. Used by tests and headless hosts."""

    def __init__(self, start: float = 0.0):
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, dt: float) -> float:
        if dt < 0.0:
            raise ValueError(f"clock cannot run backwards (dt={dt})")
        self.now += float(dt)
        return self.now


@dataclass
class SimulationContext:
    """
    Per-simulation identity and time.

    Holds the missile id counter and the clock origin so that independent
    simulations do not share ids or start times.
    """

    clock: Callable[[], float] = time.monotonic
    first_id: int = 0
    origin: float = field(init=False)

    def __post_init__(self) -> None:
        self.origin = float(self.clock())
        self._ids = itertools.count(self.first_id)

    def next_id(self) -> int:
        return next(self._ids)

    def elapsed(self) -> float:
        """Seconds since the simulation started."""
        return float(self.clock()) - self.origin
