"""
Meander Curves
==============
Random but continuous trajectories through the unit cube.

Classes:
    Meander1D: A 1-dimensional curve, the average of three UnitSinusoids.
    Meander: A D-dimensional curve, one independent Meander1D per dimension.
    TimeSteps: Iterator yielding a Meander's values at intervals of dt.

Nothing here is ever mutated after construction. All motion comes from the
time value passed in by the caller.
"""
from __future__ import annotations

from dataclasses import dataclass
import itertools as it
import logging
from typing import Any, Dict, Iterator, Optional, Tuple, TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from meander.config import COMPONENTS_PER_CURVE
from meander.model.random_source import default_source
from meander.model.sinusoid import UnitSinusoid

if TYPE_CHECKING:
    import numpy.typing as npt
    from meander.model.random_source import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Meander1D:
    """
    Represents a curve that meanders through 1-dimensional space.

    Consists of three sinusoids whose values are averaged. The average of
    oscillators with different random frequencies does not repeat with the
    simple period of any single one of them.
    """
    components: Tuple[UnitSinusoid, ...]

    def __post_init__(self) -> None:
        components = tuple(self.components)
        if len(components) != COMPONENTS_PER_CURVE:
            raise ValueError(
                f"Meander1D needs exactly {COMPONENTS_PER_CURVE} components, got {len(components)}."
            )
        for component in components:
            if not isinstance(component, UnitSinusoid):
                raise TypeError(f"Expected UnitSinusoid, got {type(component).__name__}.")
        object.__setattr__(self, "components", components)

    @staticmethod
    def sample(source: RandomSource) -> Meander1D:
        """Draw three independent sinusoids from the source."""
        return Meander1D(tuple(UnitSinusoid.sample(source) for _ in range(COMPONENTS_PER_CURVE)))

    def evaluate(self, t: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Find the value of the curve at a given point in time.

        Args:
            t: Time, either a scalar or an array of times.

        Returns:
            Mean of the component values, in [0, 1]; a float for scalar input.
        """
        a, b, c = self.components
        return (a.evaluate(t) + b.evaluate(t) + c.evaluate(t)) / 3.0

    def to_dict(self) -> Dict[str, Any]:
        return {"components": [component.to_dict() for component in self.components]}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Meander1D:
        return Meander1D(tuple(UnitSinusoid.from_dict(c) for c in data["components"]))


@dataclass(frozen=True)
class Meander:
    """
    Represents a curve that meanders through D-dimensional space.

    Attributes:
        curves: Each variable is controlled by a separate 1-dimensional
            curve. The number of curves is the dimension count D and is
            fixed for the lifetime of the object.
    """
    curves: Tuple[Meander1D, ...] = ()

    def __post_init__(self) -> None:
        curves = tuple(self.curves)
        for curve in curves:
            if not isinstance(curve, Meander1D):
                raise TypeError(f"Expected Meander1D, got {type(curve).__name__}.")
        object.__setattr__(self, "curves", curves)

    @staticmethod
    def sample(source: RandomSource, dimensions: int) -> Meander:
        """
        Draw a random meander.

        Args:
            source: Any object with a uniform(low, high) method.
            dimensions: Number of independent output variables (D >= 0).

        Returns:
            A Meander with `dimensions` independently sampled curves.
        """
        if dimensions < 0:
            raise ValueError(f"Dimension count must be non-negative, got {dimensions}.")
        meander = Meander(tuple(Meander1D.sample(source) for _ in range(dimensions)))
        logger.debug(f"Sampled {dimensions}-dimensional meander.")
        return meander

    @staticmethod
    def random(dimensions: int, seed: Optional[int] = None) -> Meander:
        """Sample a meander from the default numpy source."""
        return Meander.sample(default_source(seed), dimensions)

    @property
    def dimensions(self) -> int:
        return len(self.curves)

    def __len__(self) -> int:
        return len(self.curves)

    def evaluate(self, t: float | npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """
        Find the value of each of the variables at a particular point in time.

        Args:
            t: Time, either a scalar or an array of N times.

        Returns:
            Array of shape (D,) for scalar input or (N, D) for array input.
            Every entry lies in [0, 1].
        """
        times = np.asarray(t, dtype=np.float64)
        if not self.curves:
            return np.empty(times.shape + (0,), dtype=np.float64)
        return np.stack([np.asarray(curve.evaluate(times), dtype=np.float64) for curve in self.curves], axis=-1)

    def time_steps(self, dt: float) -> Iterator[npt.NDArray[np.float64]]:
        """
        Return an iterator yielding the values of the variables at intervals of dt.

        The sequence starts at t = 0 and never ends. Each call returns a new,
        independent sequence.
        """
        return (self.evaluate(i * dt) for i in it.count())

    def into_time_steps(self, dt: float) -> TimeSteps:
        """
        Return an iterator yielding the values of the variables at intervals of dt.

        The returned TimeSteps holds this meander, so the caller may drop its
        own reference and keep only the iterator.
        """
        return TimeSteps(self, dt)

    def trajectory(self, steps: int, dt: float) -> Tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Evaluate the first `steps` time steps at once.

        Returns:
            Tuple (times, values) with shapes (steps,) and (steps, D).
        """
        times = np.arange(steps, dtype=np.float64) * dt
        return times, self.evaluate(times)

    def plot(self, duration: float = 2.0, dt: float = 0.01) -> None:
        """
        Plot every variable against time over [0, duration].

        Raises:
            ValueError: If dt is not positive or duration is negative.
        """
        if not dt > 0.0:
            raise ValueError(f"Plotting needs a positive time step, got dt={dt}.")
        if duration < 0.0:
            raise ValueError(f"Plot duration must be non-negative, got {duration}.")
        steps = int(round(duration / dt)) + 1
        times, values = self.trajectory(steps, dt)

        plt.rcParams["figure.constrained_layout.use"] = True
        plt.figure(figsize=(7, 5))

        for dim in range(self.dimensions):
            plt.plot(times, values[:, dim], lw=2, label=f"x{dim}")

        plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
        plt.minorticks_on()
        plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

        plt.title(f"{self.dimensions}-dimensional Meander")
        plt.xlabel("Time")
        plt.ylabel("Value")
        if self.dimensions:
            plt.legend()

        plt.ylim(-0.05, 1.05)
        plt.show()

    def to_dict(self) -> Dict[str, Any]:
        return {"curves": [curve.to_dict() for curve in self.curves]}

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Meander:
        return Meander(tuple(Meander1D.from_dict(c) for c in data.get("curves", [])))


class TimeSteps:
    """
    Stateful, single-pass iterator over a Meander sampled at t = 0, dt, 2*dt, ...

    dt is not validated: zero gives a constant sequence and a negative value
    walks backward in time. The iterator never raises StopIteration; to start
    over, ask the meander for a new one.
    """

    def __init__(self, meander: Meander, dt: float) -> None:
        self.meander = meander
        self.dt = dt
        self.index = 0

    @property
    def time(self) -> float:
        """Time of the next value to be yielded."""
        return self.index * self.dt

    def __iter__(self) -> TimeSteps:
        return self

    def __next__(self) -> npt.NDArray[np.float64]:
        value = self.meander.evaluate(self.index * self.dt)
        self.index += 1
        return value
