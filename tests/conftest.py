import numpy as np
import pytest

from acoustic.core.grid import GridInfo
from acoustic.physics import AcousticModel


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def small_grid():
    return GridInfo(shape=(21, 25), delx=5.0)


@pytest.fixture
def constant_model(small_grid):
    return AcousticModel.constant(small_grid, velocity=1500.0, density=1000.0)


@pytest.fixture
def config_dict(tmp_path):
    return {
        "grid": {"rows": 21, "cols": 21, "delx": 5.0},
        "model": {
            "layers": [
                {"top": 0.0, "velocity": 1500.0, "density": 1000.0},
                {"top": 50.0, "velocity": 2000.0, "density": 2000.0},
            ]
        },
        "time": {"dt": 0.001, "nsteps": 6, "snapshot_interval": 3},
        "initial_condition": {"type": "none"},
        "source": {"enabled": True, "row": 2, "col": 10, "fdom": 30.0, "tlength": 0.04},
        "receivers": {"row": 1},
        "output": {"directory": str(tmp_path / "out"), "save_snapshots": True, "plot": False},
        "logging": {"level": "debug", "console": False, "file": True},
    }
