"""4次精度差分による音響波動計算パッケージ

変密度音響波動方程式の空間微分項 ∇²p - ∇(ln ρ)・∇p を計算する
差分演算子と、それを用いた時間発展計算を提供します。
"""

from .core import GridInfo, InvalidArgumentError
from .numerics.spatial import AcousticSpatialOperator, spatial_derivs_order4

__all__ = [
    "GridInfo",
    "InvalidArgumentError",
    "AcousticSpatialOperator",
    "spatial_derivs_order4",
]

__version__ = "0.1.0"
