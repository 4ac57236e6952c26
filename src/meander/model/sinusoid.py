"""
Unit Sinusoid
=============
A single oscillator whose output varies between 0 and 1.

The raw cosine (range [-1, 1]) is passed through the haversine transform,
which maps it onto [0, 1] without discontinuities. Averaging several such
oscillators therefore stays inside [0, 1] as well.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
import logging
import math
from typing import Any, Dict, TYPE_CHECKING

import numpy as np

from meander.config import FREQUENCY_MIN, FREQUENCY_MAX
from meander.utils import PI2, haversine

if TYPE_CHECKING:
    import numpy.typing as npt
    from meander.model.random_source import RandomSource

logger = logging.getLogger(__name__)

# Smallest float above FREQUENCY_MIN, so a single draw from [low, high)
# never returns the lower bound itself.
_FREQUENCY_LOW = float(np.nextafter(FREQUENCY_MIN, np.inf))


@dataclass(frozen=True)
class UnitSinusoid:
    """
    Represents a sinusoid that varies between 0 and 1.

    Attributes:
        frequency: The number of cycles the function makes per unit time.
        phase: The location in the cycle the function is at t = 0, in units of
            time. Must lie within one period, [0, 1/frequency).
    """
    frequency: float
    phase: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.frequency) or self.frequency <= 0.0:
            raise ValueError(f"Frequency must be a positive finite number, got {self.frequency}.")
        if not 0.0 <= self.phase < 1.0 / self.frequency:
            raise ValueError(
                f"Phase must lie in [0, {1.0 / self.frequency}) for frequency {self.frequency}, got {self.phase}."
            )

    @staticmethod
    def sample(source: RandomSource) -> UnitSinusoid:
        """
        Draw a random sinusoid.

        Exactly two draws are consumed from the source: first the frequency
        from (FREQUENCY_MIN, FREQUENCY_MAX), then the phase from [0, 1/frequency).

        Args:
            source: Any object with a uniform(low, high) method.

        Returns:
            A new UnitSinusoid.
        """
        frequency = float(source.uniform(_FREQUENCY_LOW, FREQUENCY_MAX))
        # fmod folds a draw rounded up to the period itself back to 0
        phase = math.fmod(float(source.uniform(0.0, 1.0 / frequency)), 1.0 / frequency)
        return UnitSinusoid(frequency=frequency, phase=phase)

    def evaluate(self, t: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Find the value of the sinusoid at a given point in time.

        Args:
            t: Time, either a scalar or an array of times.

        Returns:
            Value(s) in [0, 1]; a float for scalar input.
        """
        value = haversine(PI2 * self.frequency * (np.asarray(t, dtype=np.float64) + self.phase))
        if np.ndim(value) == 0:
            return float(value)
        return value

    @property
    def period(self) -> float:
        return 1.0 / self.frequency

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> UnitSinusoid:
        return UnitSinusoid(frequency=float(data["frequency"]), phase=float(data["phase"]))
