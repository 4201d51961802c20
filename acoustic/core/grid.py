"""計算グリッドの情報を提供するモジュール

音響波動計算で使用する2次元の等間隔直交格子を表現します。
軸0が深さ方向（下向き正）、軸1が水平方向です。
"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class GridInfo:
    """計算グリッドの情報を保持する不変クラス

    Attributes:
        shape: グリッドの2次元形状 (rows, cols)
        delx: 格子間隔（両軸で共通）
    """

    shape: Tuple[int, int]
    delx: float

    def __post_init__(self):
        """初期化後の検証"""
        if len(self.shape) != 2:
            raise InvalidArgumentError("GridInfoは2次元データのみ対応しています")
        if any(int(s) <= 0 for s in self.shape):
            raise InvalidArgumentError("グリッドサイズは正の値である必要があります")
        if not self.delx > 0:
            raise InvalidArgumentError("格子間隔は正の値である必要があります")

    @property
    def rows(self) -> int:
        return int(self.shape[0])

    @property
    def cols(self) -> int:
        return int(self.shape[1])

    def depths(self) -> np.ndarray:
        """各行の深さ座標を取得"""
        return np.arange(self.rows) * self.delx

    def offsets(self) -> np.ndarray:
        """各列の水平座標を取得"""
        return np.arange(self.cols) * self.delx

    def extent(self) -> Tuple[float, float, float, float]:
        """imshow用の描画範囲 (left, right, bottom, top) を取得"""
        return (
            0.0,
            (self.cols - 1) * self.delx,
            (self.rows - 1) * self.delx,
            0.0,
        )

    def zeros(self) -> np.ndarray:
        """グリッド形状のゼロ配列を作成"""
        return np.zeros(self.shape, dtype=float)
