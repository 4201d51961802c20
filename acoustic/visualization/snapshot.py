"""波動場スナップショットと受振記録の可視化を提供するモジュール"""

from pathlib import Path
from typing import Tuple, Union
import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.colors import Normalize  # noqa: E402

from acoustic.core.grid import GridInfo  # noqa: E402


def compute_data_range(data: np.ndarray, symmetric: bool = True) -> Tuple[float, float]:
    """カラースケールの範囲を計算

    Args:
        data: 対象データ
        symmetric: ゼロを中心とした対称な範囲にするかどうか

    Returns:
        (vmin, vmax)
    """
    finite = data[np.isfinite(data)]
    if finite.size == 0:
        return -1.0, 1.0
    if symmetric:
        vmax = float(np.max(np.abs(finite)))
        vmax = vmax if vmax > 0 else 1.0
        return -vmax, vmax
    vmin, vmax = float(finite.min()), float(finite.max())
    if vmin == vmax:
        vmin, vmax = vmin - 1.0, vmax + 1.0
    return vmin, vmax


def plot_snapshot(
    snapshot: np.ndarray,
    grid: GridInfo,
    path: Union[str, Path],
    title: str = "pressure",
) -> Path:
    """圧力場のスナップショットを画像として保存

    深さ方向（軸0）を下向きに描画します。

    Args:
        snapshot: 圧力場
        grid: 計算グリッドの情報
        path: 保存先のファイルパス
        title: 図のタイトル

    Returns:
        保存された画像のファイルパス
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = np.nan_to_num(np.asarray(snapshot, dtype=float))
    vmin, vmax = compute_data_range(data)

    fig, ax = plt.subplots(figsize=(8, 6))
    im = ax.imshow(
        data,
        cmap="seismic",
        norm=Normalize(vmin=vmin, vmax=vmax),
        extent=grid.extent(),
        aspect="equal",
        interpolation="nearest",
    )
    fig.colorbar(im, ax=ax, label="pressure")
    ax.set_xlabel("x [m]")
    ax.set_ylabel("depth [m]")
    ax.set_title(title)

    plt.savefig(path, dpi=100, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_seismogram(
    traces: np.ndarray, dt: float, grid: GridInfo, path: Union[str, Path]
) -> Path:
    """受振記録を画像として保存

    Args:
        traces: 受振記録 (nt, ncols)
        dt: 時間サンプリング間隔 [s]
        grid: 計算グリッドの情報
        path: 保存先のファイルパス
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = np.nan_to_num(np.asarray(traces, dtype=float))
    vmin, vmax = compute_data_range(data)
    tmax = (data.shape[0] - 1) * dt

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.imshow(
        data,
        cmap="gray",
        norm=Normalize(vmin=vmin, vmax=vmax),
        extent=(0.0, (grid.cols - 1) * grid.delx, tmax, 0.0),
        aspect="auto",
    )
    ax.set_xlabel("x [m]")
    ax.set_ylabel("time [s]")
    ax.set_title("seismogram")

    plt.savefig(path, dpi=100, bbox_inches="tight")
    plt.close(fig)
    return path
