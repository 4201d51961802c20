"""ロギング設定を管理するモジュール"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from pathlib import Path

from acoustic.core.errors import InvalidArgumentError

VALID_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass
class LogConfig:
    """ロギング設定を管理するクラス

    Attributes:
        level: 基本ログレベル
        log_dir: ログファイル出力ディレクトリ
        file_logging: ファイルへのログ出力設定
        console_logging: コンソールへのログ出力設定
    """

    level: str = "info"
    log_dir: Path = Path("logs")
    file_logging: Dict[str, Any] = field(
        default_factory=lambda: {
            "enabled": True,
            "filename": "acoustic.log",
            "level": "debug",
            "max_bytes": 10_000_000,  # 10MB
            "backup_count": 5,
        }
    )
    console_logging: Dict[str, Any] = field(
        default_factory=lambda: {"enabled": True, "level": "info", "color": True}
    )

    def __post_init__(self):
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)

    def validate(self):
        """設定の妥当性を検証

        Raises:
            InvalidArgumentError: 無効な設定値が検出された場合
        """
        levels = [self.level]
        if self.file_logging.get("enabled"):
            levels.append(self.file_logging.get("level", self.level))
        if self.console_logging.get("enabled"):
            levels.append(self.console_logging.get("level", self.level))
        for level in levels:
            if str(level).lower() not in VALID_LEVELS:
                raise InvalidArgumentError(f"Invalid log level: {level}")

    def get_file_path(self, filename: Optional[str] = None) -> Path:
        """ログファイルのパスを取得"""
        filename = filename or self.file_logging["filename"]
        return self.log_dir / filename

    def create_directories(self):
        """必要なディレクトリを作成"""
        if self.file_logging.get("enabled"):
            self.log_dir.mkdir(parents=True, exist_ok=True)
