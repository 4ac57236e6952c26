"""
Slow, natural-looking change in several variables at once.

Each variable is driven by its own curve, the average of three random
sinusoids, so the values explore [0, 1] fairly well while appearing
organic rather than mechanical. All values lie between 0 and 1; scale them
to suit your purposes.

Usage:
    from meander import Meander

    meander = Meander.random(3, seed=42)
    for r, g, b in itertools.islice(meander.into_time_steps(0.01), 100):
        ...
"""
from meander.model.random_source import RandomSource, default_source
from meander.model.sinusoid import UnitSinusoid
from meander.model.meander import Meander, Meander1D, TimeSteps
from meander.utils import haversine

__all__ = [
    "Meander",
    "Meander1D",
    "RandomSource",
    "TimeSteps",
    "UnitSinusoid",
    "default_source",
    "haversine",
]
