"""
Oscillators, the curves built from them, and their HDF5 persistence.

Every class here is an immutable value sampled from an injected randomness
source and evaluated at caller-chosen times.
"""
