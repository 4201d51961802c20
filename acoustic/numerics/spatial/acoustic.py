"""音響波動方程式の空間微分項を計算するモジュール

変密度音響波動方程式の空間微分項

    L[p] = ∇²p - ∇(ln ρ)・∇p

を4次精度の中心差分で計算します。両軸の格子間隔は等しい必要があります。

軸0（深さ方向）の上端は自由表面側として扱い、圧力場の上端ゴーストセルは
ゼロのままにします（acoustic.core.boundary.padding を参照）。
"""

from typing import Any, Dict
import numpy as np

from acoustic.core.boundary import GHOST_WIDTH, pad_pressure, pad_log_density
from acoustic.core.errors import InvalidArgumentError
from .stencil import DifferenceStencils

ORDER = 4


def _validate_spacing(delx: float):
    if not delx > 0:
        raise InvalidArgumentError(f"格子間隔は正の値である必要があります: {delx}")


def _validate_grid(name: str, data: np.ndarray):
    if data.ndim != 2:
        raise InvalidArgumentError(
            f"{name}は2次元配列である必要があります: ndim={data.ndim}"
        )
    if data.size == 0:
        raise InvalidArgumentError(f"{name}が空の配列です: shape={data.shape}")


def validate_inputs(pressure: np.ndarray, log_density: np.ndarray, delx: float):
    """入力の前提条件を検証

    Raises:
        InvalidArgumentError: 形状の不一致、または非正の格子間隔
    """
    _validate_spacing(delx)
    _validate_grid("pressure", pressure)
    _validate_grid("log_density", log_density)
    if pressure.shape != log_density.shape:
        raise InvalidArgumentError(
            f"場の形状が一致しません: pressure={pressure.shape}, "
            f"log_density={log_density.shape}"
        )


def spatial_derivs_order4(
    pressure: np.ndarray, log_density: np.ndarray, delx: float
) -> np.ndarray:
    """空間微分項 ∇²p - ∇(ln ρ)・∇p を4次精度で計算

    ラプラシアンは軸ごとの5点ステンシルをそれぞれ 12*delx² で割ってから
    足し合わせます。勾配の内積項は正規化前の差分同士の積に
    1/(144*delx²) を一度だけ掛けます。

    Args:
        pressure: 圧力場 (rows, cols)
        log_density: 対数密度場（pressureと同じ形状）
        delx: 格子間隔（両軸共通）

    Returns:
        空間微分項を格納した新しい配列 (rows, cols)

    Raises:
        InvalidArgumentError: 形状の不一致、または非正の格子間隔
    """
    pressure = np.asarray(pressure, dtype=float)
    log_density = np.asarray(log_density, dtype=float)
    validate_inputs(pressure, log_density, delx)

    pres = pad_pressure(pressure)
    dens = pad_log_density(log_density)

    second = DifferenceStencils.get_second_derivative_stencil(ORDER)
    first = DifferenceStencils.get_first_derivative_stencil(ORDER)
    w = GHOST_WIDTH

    # 4次精度ラプラシアン
    lap_norm = second.denominator * delx**2
    pressure_out = DifferenceStencils.apply_stencil(pres, second, 0, w) / lap_norm
    pressure_out = (
        DifferenceStencils.apply_stencil(pres, second, 1, w) / lap_norm + pressure_out
    )

    # ∇(ln ρ)・∇p（正規化は最後にまとめて行う）
    factor = 1.0 / delx**2
    factor = factor / first.denominator**2
    # 両軸とも積は出力セル[i, j]を中心に評価する。1セルずらしてはならない
    for axis in (0, 1):
        dd = DifferenceStencils.apply_stencil(dens, first, axis, w)
        dp = DifferenceStencils.apply_stencil(pres, first, axis, w)
        pressure_out = pressure_out - (dd * dp) * factor

    return pressure_out


def laplacian_order4(pressure: np.ndarray, delx: float) -> np.ndarray:
    """圧力場の4次精度ラプラシアン（上端ゴーストセルはゼロ）"""
    pressure = np.asarray(pressure, dtype=float)
    _validate_spacing(delx)
    _validate_grid("pressure", pressure)

    pres = pad_pressure(pressure)
    stencil = DifferenceStencils.get_second_derivative_stencil(ORDER)
    norm = stencil.denominator * delx**2
    return sum(
        DifferenceStencils.apply_stencil(pres, stencil, axis, GHOST_WIDTH) / norm
        for axis in (0, 1)
    )


def gradient_order4(
    field: np.ndarray, delx: float, axis: int, top: str = "replicate"
) -> np.ndarray:
    """4次精度中心差分による1階微分

    Args:
        field: 入力場
        delx: 格子間隔
        axis: 微分を計算する軸
        top: 上端の処理（"replicate" または "zero"）

    Returns:
        微分値を格納した新しい配列
    """
    field = np.asarray(field, dtype=float)
    _validate_spacing(delx)
    _validate_grid("field", field)

    if top not in ("zero", "replicate"):
        raise InvalidArgumentError(f"無効な上端モードです: {top}")

    padded = pad_pressure(field) if top == "zero" else pad_log_density(field)
    stencil = DifferenceStencils.get_first_derivative_stencil(ORDER)
    return DifferenceStencils.apply_stencil(padded, stencil, axis, GHOST_WIDTH) / (
        stencil.denominator * delx
    )


class AcousticSpatialOperator:
    """音響波動方程式の空間微分演算子

    格子間隔を保持し、呼び出しごとに spatial_derivs_order4 を評価します。
    状態を持たないため、同じインスタンスを時間ステップ間で再利用できます。
    """

    def __init__(self, delx: float):
        """
        Args:
            delx: 格子間隔（両軸共通）
        """
        _validate_spacing(delx)
        self.delx = float(delx)
        self.order = ORDER

    def __call__(self, pressure: np.ndarray, log_density: np.ndarray) -> np.ndarray:
        return spatial_derivs_order4(pressure, log_density, self.delx)

    def get_padding_width(self) -> int:
        """必要なパディング幅を取得"""
        return GHOST_WIDTH

    def get_diagnostics(self) -> Dict[str, Any]:
        """診断情報を取得"""
        second = DifferenceStencils.get_second_derivative_stencil(self.order)
        first = DifferenceStencils.get_first_derivative_stencil(self.order)
        return {
            "order": self.order,
            "delx": self.delx,
            "padding_width": self.get_padding_width(),
            "top_boundary": {"pressure": "zero", "log_density": "replicate"},
            "laplacian_coefficients": (second.coefficients / second.denominator).tolist(),
            "gradient_coefficients": (first.coefficients / first.denominator).tolist(),
        }
