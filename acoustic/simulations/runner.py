"""シミュレーションの実行を管理するモジュール"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional

from acoustic.physics import (
    AcousticPropagator,
    PointSource,
    build_layered_model,
    gaussian_pulse,
    impulse,
    ricker,
)
from acoustic.visualization import plot_seismogram, plot_snapshot
from .checkpoint import CheckpointManager
from .config import SimulationConfig
from .state import SimulationState


class SimulationRunner:
    """設定に従って音響波動伝播を実行するクラス"""

    def __init__(self, config: SimulationConfig, logger=None):
        """
        Args:
            config: シミュレーション設定
            logger: ロガー
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.output_dir = Path(config.output.directory)

        self.grid = config.grid.to_grid()
        self.model = build_layered_model(self.grid, config.model.layers)
        self.source = self._create_source()
        self.propagator = AcousticPropagator(
            self.model, config.time.dt, source=self.source, logger=self.logger
        )
        self.checkpoints: Optional[CheckpointManager] = None
        self.state: Optional[SimulationState] = None

    def _create_source(self) -> Optional[PointSource]:
        """設定から点震源を作成"""
        cfg = self.config.source
        if not cfg.enabled:
            return None
        wavelet, _ = ricker(self.config.time.dt, cfg.fdom, cfg.tlength)
        return PointSource(row=cfg.row, col=cfg.col, wavelet=wavelet)

    def create_initial_field(self):
        """設定から初期場を作成"""
        cfg = self.config.initial
        params = cfg.parameters
        if cfg.type == "impulse":
            return impulse(
                self.grid,
                int(params["row"]),
                int(params["col"]),
                float(params.get("amplitude", 1.0)),
            )
        if cfg.type == "gaussian":
            return gaussian_pulse(
                self.grid,
                int(params["row"]),
                int(params["col"]),
                float(params["width"]),
                float(params.get("amplitude", 1.0)),
            )
        return self.grid.zeros()

    def _save(self, state: SimulationState):
        if self.config.output.save_snapshots:
            path = self.checkpoints.save(state)
            self.logger.debug(f"スナップショットを保存: {path}")
        if self.config.output.plot:
            plot_snapshot(
                state.current,
                self.grid,
                self.output_dir / "plots" / f"snapshot_{state.step:06d}.png",
                title=f"pressure (t = {state.time:.3f}s)",
            )

    def run(self) -> Dict[str, Any]:
        """シミュレーションを実行

        Returns:
            実行結果の要約
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.checkpoints = CheckpointManager(self.output_dir)

        time_cfg = self.config.time
        self.logger.info(
            f"シミュレーションを開始: shape={self.grid.shape}, delx={self.grid.delx}, "
            f"dt={time_cfg.dt}, nsteps={time_cfg.nsteps}, "
            f"vmax*dt/dx={self.propagator.stability:.4f}"
        )

        initial = self.create_initial_field()
        self.state = SimulationState(0, 0.0, initial.copy(), initial.copy())
        self._save(self.state)

        started = time.perf_counter()
        for step, t, previous, current in self.propagator.run(
            initial,
            time_cfg.nsteps,
            snapshot_interval=time_cfg.snapshot_interval,
            receiver_row=self.config.receivers.row,
        ):
            self.state = SimulationState(step, t, previous, current)
            self.logger.info(
                f"ステップ {step}/{time_cfg.nsteps}: t={t:.4f}, "
                f"max|p|={self.state.summary()['max_abs']:.3e}"
            )
            self._save(self.state)
        elapsed = time.perf_counter() - started

        if hasattr(self.logger, "log_performance"):
            self.logger.log_performance("propagation", elapsed)

        seismogram_path = None
        if self.propagator.seismogram is not None:
            seismogram_path = self.checkpoints.save_seismogram(
                self.propagator.seismogram, time_cfg.dt, self.grid.delx
            )
            if self.config.output.plot:
                plot_seismogram(
                    self.propagator.seismogram,
                    time_cfg.dt,
                    self.grid,
                    self.output_dir / "plots" / "seismogram.png",
                )

        summary = self.state.summary()
        summary.update(
            {
                "elapsed": elapsed,
                "output_dir": str(self.output_dir),
                "seismogram": None if seismogram_path is None else str(seismogram_path),
            }
        )
        self.logger.info("シミュレーション正常終了")
        return summary
