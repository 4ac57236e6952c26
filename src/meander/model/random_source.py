"""
Randomness Source
=================
Defines the capability the model samples from.

Why is this file needed?
------------------------
Sampling only needs "a uniform float in [low, high)". Depending on that
capability rather than on a concrete generator keeps the model testable with
scripted, deterministic sources. ``numpy.random.Generator`` already provides
``uniform(low, high)`` and can be passed in directly.
"""
from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

import numpy as np

logger = logging.getLogger(__name__)


@runtime_checkable
class RandomSource(Protocol):
    def uniform(self, low: float, high: float) -> float:
        """Return a uniformly distributed float in [low, high)."""
        ...


def default_source(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the default randomness source.

    Args:
        seed: Optional seed. Two sources created with the same seed produce
            the same draws, so sampled meanders are reproducible.

    Returns:
        A numpy Generator, which satisfies RandomSource.
    """
    logger.debug(f"Creating numpy random source (seed={seed}).")
    return np.random.default_rng(seed)
