import matplotlib

matplotlib.use("Agg")

import logging

import numpy as np
import pytest


class ScriptedSource:
    """Randomness source replaying fixed fractions of each requested range."""

    def __init__(self, fractions):
        self.fractions = list(fractions)
        self.calls = []

    def uniform(self, low, high):
        u = self.fractions[len(self.calls) % len(self.fractions)]
        self.calls.append((low, high))
        return low + u * (high - low)


@pytest.fixture
def scripted_source():
    return ScriptedSource


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture(autouse=True)
def reset_meander_logger():
    yield
    logger = logging.getLogger("meander")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
