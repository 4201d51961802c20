"""
シミュレーションの状態を管理するモジュール

Leapfrog法で必要な2時刻分の圧力場と時刻情報を保持します。
"""

from dataclasses import dataclass, field
from typing import Any, Dict
import numpy as np

from acoustic.core.errors import InvalidArgumentError


@dataclass
class SimulationState:
    """シミュレーションの状態を保持するクラス

    Attributes:
        step: 時間ステップ番号
        time: 現在の時刻 [s]
        previous: 1ステップ前の圧力場
        current: 現在の圧力場
        diagnostics: 診断情報
    """

    step: int
    time: float
    previous: np.ndarray
    current: np.ndarray
    diagnostics: Dict[str, Any] = field(default_factory=dict)

    def validate(self) -> None:
        """状態の妥当性を検証"""
        if self.step < 0:
            raise InvalidArgumentError("ステップ番号は非負である必要があります")
        if self.time < 0:
            raise InvalidArgumentError("時刻は非負である必要があります")
        if np.shape(self.previous) != np.shape(self.current):
            raise InvalidArgumentError(
                f"場の形状が一致しません: previous={np.shape(self.previous)}, "
                f"current={np.shape(self.current)}"
            )

    def copy(self) -> "SimulationState":
        """状態の深いコピーを作成"""
        return SimulationState(
            step=self.step,
            time=self.time,
            previous=np.array(self.previous, copy=True),
            current=np.array(self.current, copy=True),
            diagnostics=dict(self.diagnostics),
        )

    def summary(self) -> Dict[str, Any]:
        """ログ出力用の要約を取得"""
        current = np.asarray(self.current)
        return {
            "step": self.step,
            "time": self.time,
            "max_abs": float(np.max(np.abs(current))),
            "rms": float(np.sqrt(np.mean(current**2))),
        }
