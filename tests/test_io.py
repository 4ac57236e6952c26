import h5py
import numpy as np
import pytest

from meander import Meander
from meander.model.io import MeanderIO


def test_save_and_load(tmp_path, rng):
    meander = Meander.sample(rng, 4)
    path = str(tmp_path / "meander.h5")
    MeanderIO.save_meander(meander, path)
    loaded = MeanderIO.load_meander(path)
    assert loaded == meander
    assert np.array_equal(loaded.evaluate(1.23), meander.evaluate(1.23))


def test_save_empty(tmp_path):
    path = str(tmp_path / "empty.h5")
    MeanderIO.save_meander(Meander(), path)
    assert MeanderIO.load_meander(path).dimensions == 0


def test_save_with_trajectory(tmp_path, rng):
    meander = Meander.sample(rng, 2)
    path = str(tmp_path / "traj.h5")
    MeanderIO.save_meander(meander, path, trajectory_steps=15, dt=0.1)
    times, values = MeanderIO.load_trajectory(path)
    assert times.shape == (15,)
    assert values.shape == (15, 2)
    assert values[7] == pytest.approx(meander.evaluate(0.7))
    with h5py.File(path, "r") as f:
        assert int(f.attrs["dimensions"]) == 2


def test_trajectory_needs_dt(tmp_path, rng):
    with pytest.raises(ValueError):
        MeanderIO.save_meander(Meander.sample(rng, 1), str(tmp_path / "x.h5"), trajectory_steps=5)


def test_load_trajectory_missing(tmp_path, rng):
    path = str(tmp_path / "no_traj.h5")
    MeanderIO.save_meander(Meander.sample(rng, 1), path)
    with pytest.raises(ValueError):
        MeanderIO.load_trajectory(path)


def test_load_rejects_non_hdf5(tmp_path):
    path = tmp_path / "bogus.h5"
    path.write_text("not hdf5")
    with pytest.raises(ValueError):
        MeanderIO.load_meander(str(path))


def test_load_rejects_foreign_hdf5(tmp_path):
    path = str(tmp_path / "other.h5")
    with h5py.File(path, "w") as f:
        f.create_dataset("data", data=np.zeros(3))
    with pytest.raises(ValueError):
        MeanderIO.load_meander(path)


def test_load_rejects_bad_shapes(tmp_path):
    path = str(tmp_path / "bad.h5")
    with h5py.File(path, "w") as f:
        grp = f.create_group("oscillators")
        grp.create_dataset("frequency", data=np.full((2, 2), 2.0))
        grp.create_dataset("phase", data=np.zeros((2, 2)))
    with pytest.raises(ValueError):
        MeanderIO.load_meander(path)


def test_load_trajectory_rejects_non_hdf5(tmp_path):
    path = tmp_path / "bogus.h5"
    path.write_text("not hdf5")
    with pytest.raises(ValueError):
        MeanderIO.load_trajectory(str(path))


@pytest.mark.parametrize("present", ["frequency", "phase"])
def test_load_rejects_missing_oscillator_dataset(tmp_path, present):
    path = str(tmp_path / "partial.h5")
    with h5py.File(path, "w") as f:
        grp = f.create_group("oscillators")
        grp.create_dataset(present, data=np.full((1, 3), 2.0))
    with pytest.raises(ValueError, match="missing datasets"):
        MeanderIO.load_meander(path)


def test_load_trajectory_rejects_missing_values(tmp_path):
    path = str(tmp_path / "partial_traj.h5")
    with h5py.File(path, "w") as f:
        grp = f.create_group("trajectory")
        grp.create_dataset("times", data=np.arange(3.0))
    with pytest.raises(ValueError, match="values"):
        MeanderIO.load_trajectory(path)
