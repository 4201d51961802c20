"""スナップショットの保存と読み込みを提供するモジュール"""

from pathlib import Path
from typing import Optional, Tuple, Union
import numpy as np

from .state import SimulationState


class CheckpointManager:
    """スナップショットの保存と読み込みを管理"""

    def __init__(self, directory: Union[str, Path]):
        """
        Args:
            directory: 保存先ディレクトリ
        """
        self.checkpoint_dir = Path(directory) / "snapshots"
        self.checkpoint_dir.mkdir(parents=True, exist_ok=True)

    def save(self, state: SimulationState, name: Optional[str] = None) -> Path:
        """スナップショットを保存

        Args:
            state: シミュレーション状態
            name: ファイル名（省略時はステップ番号を使用）

        Returns:
            保存したファイルのパス
        """
        if name is None:
            name = f"snapshot_{state.step:06d}"
        filepath = self.checkpoint_dir / f"{name}.npz"
        np.savez(
            filepath,
            previous=state.previous,
            current=state.current,
            step=state.step,
            time=state.time,
        )
        return filepath

    def load(self, path: Union[str, Path]) -> SimulationState:
        """スナップショットを読み込み"""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"スナップショットが見つかりません: {path}")
        with np.load(path) as data:
            state = SimulationState(
                step=int(data["step"]),
                time=float(data["time"]),
                previous=data["previous"].copy(),
                current=data["current"].copy(),
            )
        state.validate()
        return state

    def latest(self) -> SimulationState:
        """最新のスナップショットを読み込み"""
        # 6桁を超えるステップ番号もあるため数値で比較する
        numbered = [
            p
            for p in self.checkpoint_dir.glob("snapshot_*.npz")
            if p.stem[len("snapshot_") :].isdigit()
        ]
        snapshots = sorted(numbered, key=lambda p: int(p.stem[len("snapshot_") :]))
        if not snapshots:
            raise FileNotFoundError("スナップショットが見つかりません")
        return self.load(snapshots[-1])

    def save_seismogram(self, traces: np.ndarray, dt: float, delx: float) -> Path:
        """受振記録を保存

        Args:
            traces: 受振記録 (nt, ncols)
            dt: 時間サンプリング間隔
            delx: 受振点間隔
        """
        filepath = self.checkpoint_dir.parent / "seismogram.npz"
        np.savez(filepath, traces=traces, dt=dt, delx=delx)
        return filepath

    def load_seismogram(self) -> Tuple[np.ndarray, float, float]:
        """受振記録を読み込み"""
        filepath = self.checkpoint_dir.parent / "seismogram.npz"
        if not filepath.exists():
            raise FileNotFoundError(f"受振記録が見つかりません: {filepath}")
        with np.load(filepath) as data:
            return data["traces"].copy(), float(data["dt"]), float(data["delx"])
