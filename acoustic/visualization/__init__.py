"""可視化パッケージ"""

from .snapshot import plot_snapshot, plot_seismogram, compute_data_range

__all__ = ["plot_snapshot", "plot_seismogram", "compute_data_range"]
