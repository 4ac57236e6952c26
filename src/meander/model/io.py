"""
Input/Output Manager (HDF5)
Handles saving and loading Meanders to .h5 files.

Layout:
    attrs: version, format_version, dimensions
    /oscillators/frequency  (D, 3) float64
    /oscillators/phase      (D, 3) float64
    /trajectory/times       (N,)   float64   optional
    /trajectory/values      (N, D) float64   optional
"""
import logging
from importlib.metadata import version, PackageNotFoundError
from typing import Optional, Tuple

import h5py
import numpy as np

from meander.config import COMPONENTS_PER_CURVE, FILE_FORMAT_VERSION
from meander.model.meander import Meander, Meander1D
from meander.model.sinusoid import UnitSinusoid

# Get module logger
logger = logging.getLogger(__name__)

try:
    APP_VERSION = version("meander")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"


class MeanderIO:

    @staticmethod
    def save_meander(
        meander: Meander,
        filepath: str,
        trajectory_steps: Optional[int] = None,
        dt: Optional[float] = None,
    ) -> None:
        """
        Save the oscillator parameters of a meander, and optionally a
        rendered trajectory, to an HDF5 file.

        Args:
            meander: The meander to save.
            filepath: Target .h5 path; overwritten if it exists.
            trajectory_steps: If given together with dt, also store the
                first `trajectory_steps` time steps.
            dt: Time step of the stored trajectory.
        """
        logger.info(f"Saving meander to: {filepath}")
        if (trajectory_steps is None) != (dt is None):
            raise ValueError("trajectory_steps and dt must be given together.")

        frequency, phase = MeanderIO._to_arrays(meander)
        try:
            with h5py.File(filepath, "w") as f:
                f.attrs["version"] = APP_VERSION
                f.attrs["format_version"] = FILE_FORMAT_VERSION
                f.attrs["dimensions"] = meander.dimensions

                grp_osc = f.create_group("oscillators")
                grp_osc.create_dataset("frequency", data=frequency)
                grp_osc.create_dataset("phase", data=phase)

                if trajectory_steps is not None:
                    times, values = meander.trajectory(trajectory_steps, dt)
                    grp_traj = f.create_group("trajectory")
                    grp_traj.attrs["dt"] = dt
                    grp_traj.create_dataset("times", data=times)
                    grp_traj.create_dataset("values", data=values, compression="gzip")
                    logger.debug(f"Saved {trajectory_steps} trajectory steps.")

            logger.info(f"Meander saved to: {filepath}")

        except Exception as e:
            logger.exception(f"Failed to save meander: {e}")
            raise e

    @staticmethod
    def load_meander(filepath: str) -> Meander:
        logger.info(f"Loading meander from: {filepath}")
        MeanderIO._require_hdf5(filepath)

        with h5py.File(filepath, "r") as f:
            grp_osc = MeanderIO._require_group(f, filepath, "oscillators", ("frequency", "phase"))
            frequency = grp_osc["frequency"][:]
            phase = grp_osc["phase"][:]

        meander = MeanderIO._from_arrays(frequency, phase)
        logger.debug(f"Loaded {meander.dimensions}-dimensional meander.")
        return meander

    @staticmethod
    def load_trajectory(filepath: str) -> Tuple[np.ndarray, np.ndarray]:
        """Return the (times, values) stored alongside a meander."""
        logger.info(f"Loading trajectory from: {filepath}")
        MeanderIO._require_hdf5(filepath)

        with h5py.File(filepath, "r") as f:
            grp_traj = MeanderIO._require_group(f, filepath, "trajectory", ("times", "values"))
            return grp_traj["times"][:], grp_traj["values"][:]

    @staticmethod
    def _require_hdf5(filepath: str) -> None:
        if not h5py.is_hdf5(filepath):
            msg = f"File '{filepath}' is not a valid HDF5 file."
            logger.error(msg)
            raise ValueError(msg)

    @staticmethod
    def _require_group(f: h5py.File, filepath: str, name: str, datasets: Tuple[str, ...]) -> h5py.Group:
        """Return group `name`, raising ValueError if it or any of its datasets is missing."""
        if name not in f:
            msg = f"File '{filepath}' has no '{name}' group."
            logger.error(msg)
            raise ValueError(msg)
        group = f[name]
        missing = [key for key in datasets if key not in group]
        if missing:
            msg = f"Group '{name}' in '{filepath}' is missing datasets: {', '.join(missing)}."
            logger.error(msg)
            raise ValueError(msg)
        return group

    @staticmethod
    def _to_arrays(meander: Meander) -> Tuple[np.ndarray, np.ndarray]:
        shape = (meander.dimensions, COMPONENTS_PER_CURVE)
        frequency = np.empty(shape, dtype=np.float64)
        phase = np.empty(shape, dtype=np.float64)
        for i, curve in enumerate(meander.curves):
            for j, component in enumerate(curve.components):
                frequency[i, j] = component.frequency
                phase[i, j] = component.phase
        return frequency, phase

    @staticmethod
    def _from_arrays(frequency: np.ndarray, phase: np.ndarray) -> Meander:
        if frequency.shape != phase.shape or frequency.ndim != 2 or frequency.shape[1] != COMPONENTS_PER_CURVE:
            msg = f"Oscillator arrays have unexpected shapes {frequency.shape} and {phase.shape}."
            logger.error(msg)
            raise ValueError(msg)

        curves = tuple(
            Meander1D(tuple(
                UnitSinusoid(frequency=float(f), phase=float(p))
                for f, p in zip(freq_row, phase_row)
            ))
            for freq_row, phase_row in zip(frequency, phase)
        )
        return Meander(curves)
