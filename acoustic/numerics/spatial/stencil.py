"""差分ステンシルを定義するモジュール

このモジュールは、音響波動方程式の空間微分で使用する4次精度中心差分の
ステンシルを定義します。係数は整数のまま保持し、正規化（分母と格子間隔）は
呼び出し側で行います。
"""

import numpy as np
from dataclasses import dataclass

from acoustic.core.errors import InvalidArgumentError


@dataclass(frozen=True)
class StencilCoefficients:
    """差分ステンシルの係数を保持するクラス

    Attributes:
        points: ステンシル点の相対位置
        coefficients: 各点での係数（正規化前）
        denominator: 係数の共通分母
    """

    points: np.ndarray
    coefficients: np.ndarray
    denominator: float = 1.0

    def validate(self):
        """ステンシル係数の妥当性を検証"""
        if len(self.points) != len(self.coefficients):
            raise InvalidArgumentError("点の数と係数の数が一致しません")
        if self.denominator == 0:
            raise InvalidArgumentError("分母はゼロ以外である必要があります")

    @property
    def half_width(self) -> int:
        """ステンシルの片側の幅"""
        return int(np.max(np.abs(self.points)))


class DifferenceStencils:
    """差分ステンシルの定義を提供するクラス"""

    # 1階微分の中心差分ステンシル: (f[-2] - 8f[-1] + 8f[+1] - f[+2]) / 12
    CENTRAL_FIRST = {
        4: StencilCoefficients(
            points=np.array([-2, -1, 0, 1, 2]),
            coefficients=np.array([1.0, -8.0, 0.0, 8.0, -1.0]),
            denominator=12.0,
        ),
    }

    # 2階微分の中心差分ステンシル: (-f[-2] + 16f[-1] - 30f[0] + 16f[+1] - f[+2]) / 12
    CENTRAL_SECOND = {
        4: StencilCoefficients(
            points=np.array([-2, -1, 0, 1, 2]),
            coefficients=np.array([-1.0, 16.0, -30.0, 16.0, -1.0]),
            denominator=12.0,
        ),
    }

    @classmethod
    def get_first_derivative_stencil(cls, order: int) -> StencilCoefficients:
        """1階微分のステンシルを取得

        Args:
            order: 精度次数

        Returns:
            ステンシル係数
        """
        if order not in cls.CENTRAL_FIRST:
            raise InvalidArgumentError(f"未対応の次数です: {order}")
        return cls.CENTRAL_FIRST[order]

    @classmethod
    def get_second_derivative_stencil(cls, order: int) -> StencilCoefficients:
        """2階微分のステンシルを取得"""
        if order not in cls.CENTRAL_SECOND:
            raise InvalidArgumentError(f"未対応の次数です: {order}")
        return cls.CENTRAL_SECOND[order]

    @staticmethod
    def apply_stencil(
        padded: np.ndarray,
        stencil: StencilCoefficients,
        axis: int,
        width: int,
    ) -> np.ndarray:
        """パディング済み配列にステンシルを適用（正規化なし）

        周期境界を仮定するnp.rollではなく、ゴーストセルを含むスライスで
        各点をずらして重み付き和を取ります。係数がゼロの点は加算しません。

        Args:
            padded: 各辺にwidth個のゴーストセルを持つ配列
            stencil: 適用するステンシル
            axis: 微分を計算する軸（0または1）
            width: ゴーストセルの幅

        Returns:
            内部領域と同じ形状の、正規化前の差分値
        """
        if axis not in (0, 1):
            raise InvalidArgumentError(f"無効な軸です: {axis}")
        if stencil.half_width > width:
            raise InvalidArgumentError("ステンシル幅がゴーストセルの幅を超えています")

        rows = padded.shape[0] - 2 * width
        cols = padded.shape[1] - 2 * width
        result = np.zeros((rows, cols), dtype=float)

        for point, coef in zip(stencil.points, stencil.coefficients):
            if coef == 0:
                continue
            start = width + int(point)
            if axis == 0:
                shifted = padded[start : start + rows, width : width + cols]
            else:
                shifted = padded[width : width + rows, start : start + cols]
            result += coef * shifted

        return result
