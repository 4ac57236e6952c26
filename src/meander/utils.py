from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

PI2 = 2.0 * np.pi


def haversine(theta: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
    """Map an angle in radians onto [0, 1] via (1 - cos(theta)) / 2."""
    return (1.0 - np.cos(theta)) / 2.0


def to_byte(value: float) -> int:
    """Scale a value in [0, 1] to an integer channel in [0, 255]."""
    return min(int(value * 256.0), 255)
