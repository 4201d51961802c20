"""音響波動伝播を計算するモジュール

空間微分項を4次精度差分、時間発展をLeapfrog法で計算します。
"""

import logging
from typing import Any, Dict, Iterator, Optional, Tuple
import numpy as np

from acoustic.core.errors import InvalidArgumentError
from acoustic.numerics.spatial import AcousticSpatialOperator
from acoustic.numerics.time_evolution import LeapfrogConfig, LeapfrogIntegrator
from .model import AcousticModel
from .sources import PointSource


class AcousticPropagator:
    """音響波動伝播の時間発展を計算するクラス"""

    def __init__(
        self,
        model: AcousticModel,
        dt: float,
        source: Optional[PointSource] = None,
        logger=None,
    ):
        """
        Args:
            model: 速度・密度モデル
            dt: 時間刻み幅 [s]
            source: 点震源（省略時は初期場のみで伝播）
            logger: ロガー
        """
        self.model = model
        self.source = source
        self.logger = logger or logging.getLogger(__name__)

        self.operator = AcousticSpatialOperator(model.grid.delx)
        self.integrator = LeapfrogIntegrator(LeapfrogConfig(dt=dt))
        self.stability = self.integrator.check_stability(model.vmax, model.grid.delx)

        if source is not None:
            source.validate(model.grid)

        # 震源の振幅係数は時間積分と同じ (v dt)²
        self._source_scale = (model.velocity * dt) ** 2
        self.seismogram = None

        self.logger.debug(
            f"伝播計算を初期化: shape={model.grid.shape}, dt={dt}, "
            f"vmax*dt/dx={self.stability:.4f}"
        )

    @property
    def dt(self) -> float:
        return self.integrator.dt

    def step(
        self, previous: np.ndarray, current: np.ndarray, step_index: int = 0
    ) -> np.ndarray:
        """1時間ステップを進める

        Args:
            previous: 1ステップ前の場
            current: 現在の場
            step_index: 現在のステップ番号（震源波形の参照に使用）

        Returns:
            次の時刻の場
        """
        derivative = self.operator(current, self.model.log_density)
        next_field = self.integrator.integrate(
            previous, current, derivative, self.model.velocity
        )
        if self.source is not None:
            self.source.inject(next_field, step_index, self._source_scale)
        return next_field

    def run(
        self,
        initial: np.ndarray,
        nsteps: int,
        snapshot_interval: int = 0,
        receiver_row: Optional[int] = None,
    ) -> Iterator[Tuple[int, float, np.ndarray, np.ndarray]]:
        """時間発展を実行

        初期時刻では場の時間微分をゼロとみなし、前ステップの場を初期場と
        同一に設定します。

        Args:
            initial: 初期場
            nsteps: 時間ステップ数
            snapshot_interval: スナップショットを返す間隔（0の場合は最終ステップのみ）
            receiver_row: 受振点を並べる行（Noneの場合は記録しない）

        Yields:
            (step, time, previous, current) のタプル
        """
        grid = self.model.grid
        initial = np.asarray(initial, dtype=float)
        if initial.shape != tuple(grid.shape):
            raise InvalidArgumentError(
                f"初期場の形状が一致しません: {initial.shape} != {grid.shape}"
            )
        if nsteps < 1:
            raise InvalidArgumentError("時間ステップ数は1以上である必要があります")
        if snapshot_interval < 0:
            raise InvalidArgumentError("スナップショット間隔は非負である必要があります")
        if receiver_row is not None and not 0 <= receiver_row < grid.rows:
            raise InvalidArgumentError(f"受振点の行がグリッド外です: {receiver_row}")

        previous = initial.copy()
        current = initial.copy()

        if receiver_row is not None:
            self.seismogram = np.zeros((nsteps + 1, grid.cols))
            self.seismogram[0] = current[receiver_row]

        for step in range(1, nsteps + 1):
            next_field = self.step(previous, current, step - 1)
            previous, current = current, next_field

            if receiver_row is not None:
                self.seismogram[step] = current[receiver_row]

            is_last = step == nsteps
            if is_last or (snapshot_interval and step % snapshot_interval == 0):
                yield step, step * self.dt, previous, current

    def get_diagnostics(self) -> Dict[str, Any]:
        """診断情報を取得"""
        return {
            "model": self.model.get_diagnostics(),
            "operator": self.operator.get_diagnostics(),
            "integrator": self.integrator.get_stability_diagnostics(),
            "stability_number": self.stability,
            "source": None
            if self.source is None
            else {"row": self.source.row, "col": self.source.col},
        }
