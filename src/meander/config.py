"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (frequency bounds, oscillator
   counts) being scattered throughout the model.
2. Demo defaults: The command-line demo reads its defaults from here.

Exports:
    FREQUENCY_RANGE (tuple): Bounds of the oscillator frequency, in cycles per unit time.
    COMPONENTS_PER_CURVE (int): Number of oscillators averaged by a 1D curve.
    FILE_FORMAT_VERSION (str): Version tag written into saved HDF5 files.
"""
from typing import Tuple

# Oscillators
FREQUENCY_MIN: float = 1.0
FREQUENCY_MAX: float = 10.0
FREQUENCY_RANGE: Tuple[float, float] = (FREQUENCY_MIN, FREQUENCY_MAX)
COMPONENTS_PER_CURVE: int = 3

# Demo defaults
DEFAULT_DIMENSIONS: int = 3
DEFAULT_TIME_STEP: float = 0.01
DEFAULT_STEPS: int = 10
DEFAULT_PLOT_DURATION: float = 2.0

# Persistence
FILE_FORMAT_VERSION: str = "1"
