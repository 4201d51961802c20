"""
Leapfrog法による時間積分

2階の時間微分を持つ波動方程式 ∂²p/∂t² = v² L[p] に対する
2次精度の明示的時間積分スキーム
"""

from dataclasses import dataclass
from typing import Any, Dict
import math
import numpy as np

from acoustic.core.errors import InvalidArgumentError

# 4次精度ラプラシアン（2次元）とLeapfrog法の組み合わせに対する安定限界
# 波数πでのシンボルの大きさは軸あたり 64/12 であり、(v dt/dx)² * 2 * 16/3 <= 4 となる
STABILITY_LIMIT = math.sqrt(3.0 / 8.0)


def stability_number(vmax: float, dt: float, delx: float) -> float:
    """安定性の指標 vmax * dt / delx を計算"""
    if not delx > 0:
        raise InvalidArgumentError("格子間隔は正の値である必要があります")
    return vmax * dt / delx


@dataclass
class LeapfrogConfig:
    """Leapfrog積分の設定

    Attributes:
        dt: 時間刻み幅 [s]
        stability_limit: 許容する安定性指標の上限
    """

    dt: float
    stability_limit: float = STABILITY_LIMIT

    def validate(self):
        """設定値の妥当性を検証"""
        if not self.dt > 0:
            raise InvalidArgumentError("時間刻み幅は正である必要があります")
        if not 0 < self.stability_limit <= STABILITY_LIMIT:
            raise InvalidArgumentError(
                f"安定限界は0から{STABILITY_LIMIT:.4f}の間である必要があります"
            )


class LeapfrogIntegrator:
    """
    Leapfrog法による時間積分器

    数値スキーム: p(t+Δt) = 2p(t) - p(t-Δt) + (vΔt)² L[p(t)]
    """

    def __init__(self, config: LeapfrogConfig):
        """
        Args:
            config: 時間積分の設定パラメータ
        """
        config.validate()
        self.config = config
        self._step_count = 0
        self._max_amplitude = None

    @property
    def dt(self) -> float:
        return self.config.dt

    def check_stability(self, vmax: float, delx: float) -> float:
        """安定条件を検証

        Args:
            vmax: 最大速度
            delx: 格子間隔

        Returns:
            安定性指標

        Raises:
            InvalidArgumentError: 安定条件を満たさない場合
        """
        number = stability_number(vmax, self.dt, delx)
        if number > self.config.stability_limit:
            raise InvalidArgumentError(
                f"安定条件を満たしません: vmax*dt/dx = {number:.4f} > "
                f"{self.config.stability_limit:.4f}"
            )
        return number

    def integrate(
        self,
        previous: np.ndarray,
        current: np.ndarray,
        derivative: np.ndarray,
        velocity: np.ndarray,
    ) -> np.ndarray:
        """1ステップ分の時間積分を実行

        Args:
            previous: 1ステップ前の場 p(t-Δt)
            current: 現在の場 p(t)
            derivative: 空間微分項 L[p(t)]
            velocity: 速度場（スカラーまたは場と同じ形状）

        Returns:
            次の時刻の場 p(t+Δt)
        """
        next_field = 2.0 * current - previous + (velocity * self.dt) ** 2 * derivative

        self._step_count += 1
        amplitude = float(np.max(np.abs(next_field)))
        if self._max_amplitude is None or amplitude > self._max_amplitude:
            self._max_amplitude = amplitude
        return next_field

    def get_stability_diagnostics(self) -> Dict[str, Any]:
        """安定性に関する診断情報を取得"""
        return {
            "method": "Leapfrog",
            "order": 2,
            "dt": self.dt,
            "stability_limit": self.config.stability_limit,
            "steps": self._step_count,
            "max_amplitude": self._max_amplitude,
        }
