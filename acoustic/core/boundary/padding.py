"""ゴーストセルによるパディングを提供するモジュール

差分ステンシルが境界近傍でも配列外参照なしに評価できるよう、
入力配列の周囲にゴーストセルを付加します。

境界値は内部の最外周の行・列を複製して埋めます。ただし圧力場の上端
（自由表面側）のゴーストセルはゼロのまま残します。ここに内部の値を
複製すると強い表面波が発生するためです。対称化しないでください。
"""

from dataclasses import dataclass
import numpy as np

from ..errors import InvalidArgumentError

# 4次精度中心差分に必要なゴーストセルの幅
GHOST_WIDTH = 2

TOP_MODES = ("replicate", "zero")


@dataclass(frozen=True)
class GhostPadding:
    """ゴーストセルのパディング設定

    Attributes:
        width: 各辺に付加するゴーストセルの数
        top: 上端の処理（"replicate": 最上行を複製, "zero": ゼロのまま）
    """

    width: int = GHOST_WIDTH
    top: str = "replicate"

    def __post_init__(self):
        if self.width < 1:
            raise InvalidArgumentError("パディング幅は1以上である必要があります")
        if self.top not in TOP_MODES:
            raise InvalidArgumentError(
                f"無効な上端モードです: {self.top}。選択肢: {TOP_MODES}"
            )

    def apply(self, data: np.ndarray) -> np.ndarray:
        """パディングを適用

        Args:
            data: 2次元の入力配列（変更されません）

        Returns:
            形状 (rows + 2*width, cols + 2*width) の新しい配列
        """
        data = np.asarray(data, dtype=float)
        if data.ndim != 2:
            raise InvalidArgumentError("パディングは2次元配列のみ対応しています")
        rows, cols = data.shape
        w = self.width

        padded = np.zeros((rows + 2 * w, cols + 2 * w), dtype=float)
        padded[w : rows + w, w : cols + w] = data

        # 行方向（上端はモードに依存）
        if self.top == "replicate":
            padded[:w, :] = padded[w, :]
        padded[rows + w :, :] = padded[rows + w - 1, :]

        # 列方向は行の処理後に全高さで複製するため、角のセルも埋まる
        padded[:, :w] = padded[:, w : w + 1]
        padded[:, cols + w :] = padded[:, cols + w - 1 : cols + w]

        return padded

    def interior(self, padded: np.ndarray) -> np.ndarray:
        """パディング済み配列から内部領域のビューを取得"""
        w = self.width
        return padded[w:-w, w:-w]


PRESSURE_PADDING = GhostPadding(width=GHOST_WIDTH, top="zero")
LOG_DENSITY_PADDING = GhostPadding(width=GHOST_WIDTH, top="replicate")


def pad_field(
    data: np.ndarray, width: int = GHOST_WIDTH, top: str = "replicate"
) -> np.ndarray:
    """2次元配列にゴーストセルを付加

    Args:
        data: 入力配列
        width: ゴーストセルの幅
        top: 上端の処理（"replicate" または "zero"）

    Returns:
        パディングされた新しい配列
    """
    return GhostPadding(width=width, top=top).apply(data)


def pad_pressure(pressure: np.ndarray) -> np.ndarray:
    """圧力場用のパディング（上端はゼロ）"""
    return PRESSURE_PADDING.apply(pressure)


def pad_log_density(log_density: np.ndarray) -> np.ndarray:
    """対数密度場用のパディング（全辺で複製）"""
    return LOG_DENSITY_PADDING.apply(log_density)
