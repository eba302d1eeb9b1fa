from __future__ import annotations

from typing import Any

import numpy as np


def frozen_vec(value: Any) -> np.ndarray:
    """Copy ``value`` into a read-only float64[2] array."""
    arr = np.array(value, dtype=np.float64).reshape(2)
    arr.flags.writeable = False
    return arr


def is_finite_point(value: Any) -> bool:
    try:
        arr = np.asarray(value, dtype=np.float64)
    except (TypeError, ValueError):
        return False
    return arr.shape == (2,) and bool(np.all(np.isfinite(arr)))
