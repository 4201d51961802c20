"""物理モデルパッケージ

速度・密度モデル、震源、音響波動伝播計算を提供します。
"""

from .model import AcousticModel, LayerSpec, build_layered_model
from .sources import PointSource, ricker, impulse, gaussian_pulse
from .acoustic import AcousticPropagator

__all__ = [
    "AcousticModel",
    "LayerSpec",
    "build_layered_model",
    "PointSource",
    "ricker",
    "impulse",
    "gaussian_pulse",
    "AcousticPropagator",
]
