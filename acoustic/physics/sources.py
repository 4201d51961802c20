"""震源と初期条件を提供するモジュール"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np

from acoustic.core.errors import InvalidArgumentError
from acoustic.core.grid import GridInfo


def ricker(dt: float, fdom: float, tlength: float) -> Tuple[np.ndarray, np.ndarray]:
    """ゼロ位相のRicker波形を作成

    w(t) = (1 - 2(π f t)²) exp(-(π f t)²)

    Args:
        dt: サンプリング間隔 [s]
        fdom: 卓越周波数 [Hz]
        tlength: 波形の長さ [s]

    Returns:
        (wavelet, t) - 波形と時刻ベクトル（t=0 が中央、最大値は1）
    """
    if not dt > 0:
        raise InvalidArgumentError("サンプリング間隔は正である必要があります")
    if not fdom > 0:
        raise InvalidArgumentError("卓越周波数は正である必要があります")
    if not tlength > 0:
        raise InvalidArgumentError("波形の長さは正である必要があります")

    half = int(round(tlength / (2.0 * dt)))
    t = np.arange(-half, half + 1) * dt
    arg = (np.pi * fdom * t) ** 2
    wavelet = (1.0 - 2.0 * arg) * np.exp(-arg)
    return wavelet, t


@dataclass
class PointSource:
    """点震源

    Attributes:
        row: 震源の行インデックス
        col: 震源の列インデックス
        wavelet: 時間ステップごとの震源波形
    """

    row: int
    col: int
    wavelet: np.ndarray

    def validate(self, grid: GridInfo):
        """震源位置の妥当性を検証"""
        if not (0 <= self.row < grid.rows and 0 <= self.col < grid.cols):
            raise InvalidArgumentError(
                f"震源位置がグリッド外です: ({self.row}, {self.col}), shape={grid.shape}"
            )

    def inject(self, field: np.ndarray, step: int, scale) -> np.ndarray:
        """震源項を場に加算（fieldを直接更新）

        Args:
            field: 更新する場
            step: 時間ステップ番号
            scale: 震源振幅の係数（スカラーまたは場と同じ形状）

        Returns:
            更新された場
        """
        if step < 0 or step >= len(self.wavelet):
            return field
        s = scale[self.row, self.col] if np.ndim(scale) == 2 else scale
        field[self.row, self.col] += self.wavelet[step] * s
        return field


def _check_position(grid: GridInfo, row: int, col: int):
    if not (0 <= row < grid.rows and 0 <= col < grid.cols):
        raise InvalidArgumentError(f"位置がグリッド外です: ({row}, {col})")


def impulse(grid: GridInfo, row: int, col: int, amplitude: float = 1.0) -> np.ndarray:
    """1点のみ値を持つ初期場を作成"""
    _check_position(grid, row, col)
    field = grid.zeros()
    field[row, col] = amplitude
    return field


def gaussian_pulse(
    grid: GridInfo, row: int, col: int, width: float, amplitude: float = 1.0
) -> np.ndarray:
    """ガウス型の初期場を作成

    Args:
        grid: 計算グリッドの情報
        row, col: 中心位置のインデックス
        width: ガウス関数の幅 [m]
        amplitude: 中心での振幅

    Returns:
        初期場
    """
    _check_position(grid, row, col)
    if not width > 0:
        raise InvalidArgumentError("パルス幅は正の値である必要があります")

    z = grid.depths()[:, np.newaxis] - row * grid.delx
    x = grid.offsets()[np.newaxis, :] - col * grid.delx
    return amplitude * np.exp(-(x**2 + z**2) / width**2)
