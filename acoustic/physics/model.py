"""速度・密度モデルを提供するモジュール

音響波動計算で使用する速度場と密度場を保持し、
水平成層モデルの構築機能を提供します。
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List
import numpy as np

from acoustic.core.errors import InvalidArgumentError
from acoustic.core.grid import GridInfo


@dataclass
class LayerSpec:
    """水平層の物性値

    Attributes:
        top: 層上面の深さ [m]
        velocity: 音速 [m/s]
        density: 密度 [kg/m³]
    """

    top: float
    velocity: float
    density: float

    def validate(self):
        """設定値の妥当性を検証"""
        if self.top < 0:
            raise InvalidArgumentError("層上面の深さは非負である必要があります")
        if not self.velocity > 0:
            raise InvalidArgumentError("音速は正の値である必要があります")
        if not self.density > 0:
            raise InvalidArgumentError("密度は正の値である必要があります")


class AcousticModel:
    """速度場と密度場を保持するクラス"""

    def __init__(self, velocity: np.ndarray, density: np.ndarray, grid: GridInfo):
        """
        Args:
            velocity: 音速場 [m/s]
            density: 密度場 [kg/m³]
            grid: 計算グリッドの情報
        """
        self.velocity = np.asarray(velocity, dtype=float)
        self.density = np.asarray(density, dtype=float)
        self.grid = grid
        self.validate()
        self._log_density = np.log(self.density)

    def validate(self):
        """モデルの妥当性を検証"""
        shapes = {
            "grid": tuple(self.grid.shape),
            "velocity": self.velocity.shape,
            "density": self.density.shape,
        }
        if len(set(shapes.values())) > 1:
            raise InvalidArgumentError(f"場の形状が一致しません: {shapes}")
        if not np.all(self.velocity > 0):
            raise InvalidArgumentError("音速は全点で正の値である必要があります")
        if not np.all(self.density > 0):
            raise InvalidArgumentError("密度は全点で正の値である必要があります")

    @property
    def log_density(self) -> np.ndarray:
        """密度の自然対数"""
        return self._log_density

    @property
    def vmax(self) -> float:
        return float(self.velocity.max())

    @property
    def vmin(self) -> float:
        return float(self.velocity.min())

    @classmethod
    def constant(
        cls, grid: GridInfo, velocity: float, density: float = 1000.0
    ) -> "AcousticModel":
        """一様なモデルを作成"""
        return cls(
            np.full(grid.shape, velocity, dtype=float),
            np.full(grid.shape, density, dtype=float),
            grid,
        )

    def get_diagnostics(self) -> Dict[str, Any]:
        """モデルの診断情報を取得"""
        return {
            "shape": self.grid.shape,
            "delx": self.grid.delx,
            "vmin": self.vmin,
            "vmax": self.vmax,
            "density_min": float(self.density.min()),
            "density_max": float(self.density.max()),
        }


def build_layered_model(grid: GridInfo, layers: Iterable[LayerSpec]) -> AcousticModel:
    """水平成層モデルを構築

    深さ i*delx が層上面以上の行にその層の物性値を割り当てます。
    層は上面の深さ順に処理され、深い層が浅い層を上書きします。

    Args:
        grid: 計算グリッドの情報
        layers: 層の定義（最初の層は深さ0から始まる必要があります）

    Returns:
        構築されたモデル
    """
    layers: List[LayerSpec] = sorted(layers, key=lambda layer: layer.top)
    if not layers:
        raise InvalidArgumentError("少なくとも1つの層が必要です")
    for layer in layers:
        layer.validate()
    if layers[0].top != 0:
        raise InvalidArgumentError("最初の層は深さ0から始まる必要があります")

    velocity = grid.zeros()
    density = grid.zeros()
    depths = grid.depths()

    for layer in layers:
        rows = depths >= layer.top
        velocity[rows, :] = layer.velocity
        density[rows, :] = layer.density

    return AcousticModel(velocity, density, grid)
