"""空間微分計算パッケージ

このパッケージは、音響波動方程式の空間微分に必要なステンシルと演算子を提供します。
"""

from .stencil import DifferenceStencils, StencilCoefficients
from .acoustic import (
    AcousticSpatialOperator,
    spatial_derivs_order4,
    laplacian_order4,
    gradient_order4,
)

__all__ = [
    # ステンシル定義
    "DifferenceStencils",
    "StencilCoefficients",
    # 空間微分演算子
    "AcousticSpatialOperator",
    "spatial_derivs_order4",
    "laplacian_order4",
    "gradient_order4",
]
