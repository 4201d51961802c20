"""境界処理パッケージ

差分計算用のゴーストセルパディングを提供します。
"""

from .padding import (
    GHOST_WIDTH,
    GhostPadding,
    PRESSURE_PADDING,
    LOG_DENSITY_PADDING,
    pad_field,
    pad_pressure,
    pad_log_density,
)

__all__ = [
    "GHOST_WIDTH",
    "GhostPadding",
    "PRESSURE_PADDING",
    "LOG_DENSITY_PADDING",
    "pad_field",
    "pad_pressure",
    "pad_log_density",
]
