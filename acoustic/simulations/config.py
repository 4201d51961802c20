"""シミュレーション設定を管理するモジュール

このモジュールは、YAMLフォーマットの設定ファイルを読み込み、
各設定クラスのインスタンスに変換する機能を提供します。
"""

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import yaml

from acoustic.core.errors import InvalidArgumentError
from acoustic.core.grid import GridInfo
from acoustic.logger import LogConfig
from acoustic.physics.model import LayerSpec


@dataclass
class GridConfig:
    """計算領域の設定

    Attributes:
        rows: 深さ方向のグリッド数
        cols: 水平方向のグリッド数
        delx: 格子間隔 [m]
    """

    rows: int = 101
    cols: int = 101
    delx: float = 10.0

    def validate(self):
        """設定値の妥当性を検証"""
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidArgumentError("グリッド数は正の整数である必要があります")
        if not self.delx > 0:
            raise InvalidArgumentError("格子間隔は正の値である必要があります")

    def to_grid(self) -> GridInfo:
        return GridInfo(shape=(self.rows, self.cols), delx=self.delx)


@dataclass
class ModelConfig:
    """速度・密度モデルの設定

    Attributes:
        layers: 水平層の定義（top, velocity, density）
    """

    layers: List[LayerSpec] = field(
        default_factory=lambda: [LayerSpec(top=0.0, velocity=2000.0, density=2000.0)]
    )

    def validate(self):
        if not self.layers:
            raise InvalidArgumentError("少なくとも1つの層が必要です")
        for layer in self.layers:
            layer.validate()
        if min(layer.top for layer in self.layers) != 0:
            raise InvalidArgumentError("最初の層は深さ0から始まる必要があります")


@dataclass
class TimeConfig:
    """時間発展の設定

    Attributes:
        dt: 時間刻み幅 [s]
        nsteps: 時間ステップ数
        snapshot_interval: スナップショットを保存するステップ間隔（0は最終のみ）
    """

    dt: float = 0.001
    nsteps: int = 500
    snapshot_interval: int = 100

    def validate(self):
        if not self.dt > 0:
            raise InvalidArgumentError("時間刻み幅は正である必要があります")
        if self.nsteps < 1:
            raise InvalidArgumentError("時間ステップ数は1以上である必要があります")
        if self.snapshot_interval < 0:
            raise InvalidArgumentError("スナップショット間隔は非負である必要があります")


@dataclass
class InitialConditionConfig:
    """初期条件の設定

    Attributes:
        type: 初期条件の種類（none, impulse, gaussian）
        parameters: 各種パラメータ（row, col, amplitude, width）
    """

    type: str = "none"
    parameters: Dict[str, Any] = field(default_factory=dict)

    def validate(self):
        valid_types = ["none", "impulse", "gaussian"]
        if self.type not in valid_types:
            raise InvalidArgumentError(f"未対応の初期条件です: {self.type}")
        if self.type != "none":
            missing = [k for k in ("row", "col") if k not in self.parameters]
            if missing:
                raise InvalidArgumentError(f"初期条件のパラメータが不足しています: {missing}")
        if self.type == "gaussian" and "width" not in self.parameters:
            raise InvalidArgumentError("gaussian初期条件にはwidthが必要です")


@dataclass
class SourceConfig:
    """震源の設定

    Attributes:
        enabled: 震源を使用するかどうか
        row, col: 震源位置のインデックス
        fdom: Ricker波形の卓越周波数 [Hz]
        tlength: 波形の長さ [s]
    """

    enabled: bool = True
    row: int = 1
    col: int = 50
    fdom: float = 20.0
    tlength: float = 0.1

    def validate(self):
        if not self.enabled:
            return
        if self.row < 0 or self.col < 0:
            raise InvalidArgumentError("震源位置は非負である必要があります")
        if not self.fdom > 0 or not self.tlength > 0:
            raise InvalidArgumentError("卓越周波数と波形長は正である必要があります")


@dataclass
class ReceiverConfig:
    """受振点の設定

    Attributes:
        row: 受振点を並べる行（Noneの場合は記録しない）
    """

    row: Optional[int] = 0

    def validate(self):
        if self.row is not None and self.row < 0:
            raise InvalidArgumentError("受振点の行は非負である必要があります")


@dataclass
class OutputConfig:
    """出力の設定

    Attributes:
        directory: 出力ディレクトリ
        save_snapshots: スナップショットをnpzで保存するかどうか
        plot: スナップショットと記録を画像で保存するかどうか
    """

    directory: str = "output"
    save_snapshots: bool = True
    plot: bool = False

    def validate(self):
        if not str(self.directory):
            raise InvalidArgumentError("出力ディレクトリが指定されていません")


@dataclass
class LoggingSection:
    """ロギングの設定

    Attributes:
        level: ログレベル
        log_dir: ログ出力ディレクトリ（Noneの場合は出力ディレクトリ）
        console: コンソール出力を行うかどうか
        file: ファイル出力を行うかどうか
    """

    level: str = "info"
    log_dir: Optional[str] = None
    console: bool = True
    file: bool = True

    def to_log_config(self, default_dir: Union[str, Path]) -> LogConfig:
        config = LogConfig(level=self.level, log_dir=Path(self.log_dir or default_dir))
        config.file_logging["enabled"] = self.file
        config.console_logging["enabled"] = self.console
        config.console_logging["level"] = self.level
        return config

    def validate(self):
        self.to_log_config(".").validate()


class SimulationConfig:
    """シミュレーション全体の設定

    YAMLから読み込んだ辞書を各コンポーネントの設定クラスに変換します。
    """

    def __init__(
        self,
        grid: GridConfig,
        model: ModelConfig,
        time: TimeConfig,
        initial: InitialConditionConfig,
        source: SourceConfig,
        receivers: ReceiverConfig,
        output: OutputConfig,
        logging: LoggingSection,
    ):
        self.grid = grid
        self.model = model
        self.time = time
        self.initial = initial
        self.source = source
        self.receivers = receivers
        self.output = output
        self.logging = logging
        self.validate()

    @classmethod
    def from_file(cls, config_file: Union[str, Path]) -> "SimulationConfig":
        """設定ファイルから読み込み

        Args:
            config_file: 設定ファイルのパス
        """
        config_file = Path(config_file)
        if not config_file.exists():
            raise FileNotFoundError(f"設定ファイルが見つかりません: {config_file}")

        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        return cls.from_dict(config)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "SimulationConfig":
        """辞書から設定を作成"""
        if not isinstance(config, dict):
            raise InvalidArgumentError("設定はマッピングである必要があります")
        try:
            return cls(
                grid=cls._parse_grid(cls._section(config, "grid")),
                model=cls._parse_model(cls._section(config, "model")),
                time=cls._parse_time(cls._section(config, "time")),
                initial=cls._parse_initial(cls._section(config, "initial_condition")),
                source=cls._parse_source(cls._section(config, "source")),
                receivers=cls._parse_receivers(cls._section(config, "receivers")),
                output=cls._parse_output(cls._section(config, "output")),
                logging=cls._parse_logging(cls._section(config, "logging")),
            )
        except InvalidArgumentError:
            raise
        except (TypeError, ValueError, AttributeError) as e:
            # null値や型の合わない値（int(None)、非マッピングの層など）
            raise InvalidArgumentError(f"設定値の型が不正です: {e}") from e

    @staticmethod
    def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
        """セクションを取得（省略時は空の辞書、中身のないセクションはエラー）"""
        if name not in config:
            return {}
        section = config[name]
        if not isinstance(section, dict):
            raise InvalidArgumentError(
                f"{name}セクションはマッピングである必要があります: {section!r}"
            )
        return section

    @staticmethod
    def _parse_grid(config: Dict) -> GridConfig:
        grid = GridConfig(
            rows=int(config.get("rows", 101)),
            cols=int(config.get("cols", 101)),
            delx=float(config.get("delx", 10.0)),
        )
        grid.validate()
        return grid

    @staticmethod
    def _parse_model(config: Dict) -> ModelConfig:
        if "layers" not in config:
            return ModelConfig()
        try:
            layers = [
                LayerSpec(
                    top=float(layer.get("top", 0.0)),
                    velocity=float(layer["velocity"]),
                    density=float(layer.get("density", 1000.0)),
                )
                for layer in config["layers"]
            ]
        except KeyError as e:
            raise InvalidArgumentError(f"層の定義に必要な項目がありません: {e}") from e
        model = ModelConfig(layers=layers)
        model.validate()
        return model

    @staticmethod
    def _parse_time(config: Dict) -> TimeConfig:
        time = TimeConfig(
            dt=float(config.get("dt", 0.001)),
            nsteps=int(config.get("nsteps", 500)),
            snapshot_interval=int(config.get("snapshot_interval", 100)),
        )
        time.validate()
        return time

    @staticmethod
    def _parse_initial(config: Dict) -> InitialConditionConfig:
        initial = InitialConditionConfig(
            type=config.get("type", "none"),
            parameters=dict(config.get("parameters", {})),
        )
        initial.validate()
        return initial

    @staticmethod
    def _parse_source(config: Dict) -> SourceConfig:
        source = SourceConfig(
            enabled=bool(config.get("enabled", True)),
            row=int(config.get("row", 1)),
            col=int(config.get("col", 50)),
            fdom=float(config.get("fdom", 20.0)),
            tlength=float(config.get("tlength", 0.1)),
        )
        source.validate()
        return source

    @staticmethod
    def _parse_receivers(config: Dict) -> ReceiverConfig:
        row = config.get("row", 0)
        receivers = ReceiverConfig(row=None if row is None else int(row))
        receivers.validate()
        return receivers

    @staticmethod
    def _parse_output(config: Dict) -> OutputConfig:
        output = OutputConfig(
            directory=str(config.get("directory", "output")),
            save_snapshots=bool(config.get("save_snapshots", True)),
            plot=bool(config.get("plot", False)),
        )
        output.validate()
        return output

    @staticmethod
    def _parse_logging(config: Dict) -> LoggingSection:
        section = LoggingSection(
            level=str(config.get("level", "info")),
            log_dir=config.get("log_dir"),
            console=bool(config.get("console", True)),
            file=bool(config.get("file", True)),
        )
        section.validate()
        return section

    def validate(self):
        """設定全体の整合性を検証"""
        grid = self.grid
        if self.source.enabled and not (
            self.source.row < grid.rows and self.source.col < grid.cols
        ):
            raise InvalidArgumentError("震源位置がグリッド外です")
        if self.receivers.row is not None and self.receivers.row >= grid.rows:
            raise InvalidArgumentError("受振点の行がグリッド外です")
        if self.initial.type != "none":
            row = int(self.initial.parameters["row"])
            col = int(self.initial.parameters["col"])
            if not (0 <= row < grid.rows and 0 <= col < grid.cols):
                raise InvalidArgumentError("初期条件の位置がグリッド外です")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": asdict(self.grid),
            "model": {"layers": [asdict(layer) for layer in self.model.layers]},
            "time": asdict(self.time),
            "initial_condition": asdict(self.initial),
            "source": asdict(self.source),
            "receivers": asdict(self.receivers),
            "output": asdict(self.output),
            "logging": asdict(self.logging),
        }

    def save(self, filename: Union[str, Path]):
        """設定をYAMLファイルとして保存"""
        with open(filename, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, allow_unicode=True)
