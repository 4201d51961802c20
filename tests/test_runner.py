from pathlib import Path

import numpy as np
import pytest
import yaml

from acoustic.logger import LogConfig, SimulationLogger
from acoustic.main import main
from acoustic.simulations import (
    CheckpointManager,
    SimulationConfig,
    SimulationRunner,
    SimulationState,
)


def make_logger(name, tmp_path):
    config = LogConfig(level="debug", log_dir=tmp_path / "logs")
    config.console_logging["enabled"] = False
    return SimulationLogger(name, config)


def test_runner_writes_snapshots_and_seismogram(config_dict, tmp_path):
    config = SimulationConfig.from_dict(config_dict)
    logger = make_logger("test_runner_outputs", tmp_path)
    runner = SimulationRunner(config, logger)

    summary = runner.run()
    logger.close()

    out = Path(config.output.directory)
    snapshots = sorted((out / "snapshots").glob("snapshot_*.npz"))
    assert [p.name for p in snapshots] == [
        "snapshot_000000.npz",
        "snapshot_000003.npz",
        "snapshot_000006.npz",
    ]
    assert summary["step"] == 6
    assert summary["max_abs"] > 0

    traces, dt, delx = CheckpointManager(out).load_seismogram()
    assert traces.shape == (7, 21)
    assert dt == 0.001
    assert delx == 5.0

    latest = CheckpointManager(out).latest()
    assert latest.step == 6
    np.testing.assert_array_equal(latest.current, runner.state.current)

    assert any("シミュレーション正常終了" in log for log in logger.get_recent_logs())


def test_runner_initial_condition_without_source(config_dict, tmp_path):
    config_dict["source"]["enabled"] = False
    config_dict["initial_condition"] = {
        "type": "gaussian",
        "parameters": {"row": 10, "col": 10, "width": 10.0},
    }
    config_dict["output"]["save_snapshots"] = False
    config = SimulationConfig.from_dict(config_dict)
    runner = SimulationRunner(config)

    initial = runner.create_initial_field()
    summary = runner.run()

    assert initial[10, 10] == 1.0
    assert runner.source is None
    assert summary["step"] == 6
    assert not list((Path(config.output.directory) / "snapshots").glob("*.npz"))


def test_runner_plots(config_dict, tmp_path):
    config_dict["output"]["plot"] = True
    config = SimulationConfig.from_dict(config_dict)
    SimulationRunner(config).run()

    plots = Path(config.output.directory) / "plots"
    assert (plots / "snapshot_000006.png").exists()
    assert (plots / "seismogram.png").exists()


def test_checkpoint_roundtrip(tmp_path):
    manager = CheckpointManager(tmp_path)
    state = SimulationState(3, 0.003, np.zeros((2, 3)), np.ones((2, 3)))

    path = manager.save(state)
    loaded = manager.load(path)

    assert loaded.step == 3
    assert loaded.time == 0.003
    np.testing.assert_array_equal(loaded.current, state.current)


def test_checkpoint_latest_orders_by_step(tmp_path):
    manager = CheckpointManager(tmp_path)
    zeros = np.zeros((2, 2))
    for step in (999999, 1000000, 20):
        manager.save(SimulationState(step, step * 0.001, zeros, np.full((2, 2), step)))
    manager.save(SimulationState(5, 0.005, zeros, np.ones((2, 2))), name="snapshot_final")

    latest = manager.latest()

    assert latest.step == 1000000
    assert latest.current[0, 0] == 1000000


def test_main_success(config_dict, tmp_path):
    path = tmp_path / "config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config_dict, f)

    assert main(["--config", str(path)]) == 0
    assert (Path(config_dict["output"]["directory"]) / "seismogram.npz").exists()
    assert (Path(config_dict["output"]["directory"]) / "acoustic.log").exists()


def test_main_missing_config(tmp_path):
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1


def test_main_unstable_configuration(config_dict, tmp_path):
    config_dict["time"]["dt"] = 0.01
    path = tmp_path / "config.yaml"
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(config_dict, f)

    assert main(["--config", str(path), "--output", str(tmp_path / "unstable")]) == 1


@pytest.mark.parametrize(
    "text",
    [
        "grid: [1, 2\n",
        "grid:\n",
        "time:\n  nsteps: null\n",
        "grid: 5\n",
    ],
)
def test_main_malformed_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")

    assert main(["--config", str(path)]) == 1
