"""
時間発展スキームのパッケージ

音響波動方程式の時間積分法を提供します。
"""

from .leapfrog import (
    LeapfrogConfig,
    LeapfrogIntegrator,
    STABILITY_LIMIT,
    stability_number,
)

__all__ = [
    "LeapfrogConfig",
    "LeapfrogIntegrator",
    "STABILITY_LIMIT",
    "stability_number",
]
