"""シミュレーション用ロガーを提供するモジュール"""

import logging
from pathlib import Path
from typing import Optional, Dict, Any, Union

from .config import LogConfig
from .handlers import FileLogHandler, ConsoleLogHandler, BufferedLogHandler
from .formatters import DetailedFormatter


class SimulationLogger:
    """シミュレーション用ロガークラス

    ファイル・コンソール・メモリバッファへの出力を一括で設定します。
    start_section() で作成した子ロガーは親のハンドラへ伝播します。
    """

    def __init__(
        self,
        name: str,
        config: Optional[LogConfig] = None,
        parent: Optional["SimulationLogger"] = None,
    ):
        """
        Args:
            name: ロガーの名前
            config: ロギング設定
            parent: 親ロガー（階層的ロギング用）
        """
        self.name = name
        self.config = config or LogConfig()
        self.parent = parent

        self.config.validate()

        if parent is None:
            self.config.create_directories()
            self._debug_buffer = BufferedLogHandler()
            self._logger = self._create_logger()
            self.info(f"ロギングシステムを初期化: {name}")
        else:
            self._debug_buffer = parent._debug_buffer
            self._logger = logging.getLogger(name)
            self._logger.setLevel(logging.NOTSET)
            self._logger.propagate = True

    def _create_logger(self) -> logging.Logger:
        """ロガーを生成して設定"""
        logger = logging.getLogger(self.name)
        logger.setLevel(getattr(logging, self.config.level.upper()))
        logger.propagate = False

        # 既存のハンドラを閉じてからクリア
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        if self.config.file_logging.get("enabled"):
            logger.addHandler(
                FileLogHandler(
                    filename=self.config.get_file_path(),
                    formatter=DetailedFormatter(),
                    max_bytes=self.config.file_logging.get("max_bytes", 10_000_000),
                    backup_count=self.config.file_logging.get("backup_count", 5),
                    level=self.config.file_logging.get("level", self.config.level),
                )
            )

        if self.config.console_logging.get("enabled"):
            logger.addHandler(
                ConsoleLogHandler(
                    level=self.config.console_logging.get("level", self.config.level),
                    use_color=self.config.console_logging.get("color", True),
                )
            )

        logger.addHandler(self._debug_buffer)
        return logger

    @property
    def logger(self) -> logging.Logger:
        """内部の標準ロガー"""
        return self._logger

    def debug(self, msg: str, *args, **kwargs):
        self._logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self._logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self._logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self._logger.error(msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs):
        self._logger.critical(msg, *args, **kwargs)

    def start_section(self, name: str) -> "SimulationLogger":
        """新しいログセクションを開始

        Args:
            name: セクション名

        Returns:
            セクション用の子ロガー
        """
        return SimulationLogger(f"{self.name}.{name}", self.config, self)

    def get_recent_logs(self, n: int = 100) -> list:
        """最近のログメッセージを取得"""
        return self._debug_buffer.get_logs()[-n:]

    def save_debug_info(self, path: Union[str, Path]):
        """バッファ内のログをファイルに保存"""
        path = Path(path)
        with path.open("w", encoding="utf-8") as f:
            for log in self._debug_buffer.get_logs():
                f.write(f"{log}\n")

    def log_error_with_context(
        self, msg: str, error: Exception, context: Optional[Dict[str, Any]] = None
    ):
        """エラー情報をコンテキスト付きでログ出力"""
        error_info = {
            "message": msg,
            "error_type": type(error).__name__,
            "error_msg": str(error),
            "context": context or {},
        }
        self._logger.error(
            f"Error occurred: {error_info}",
            exc_info=(type(error), error, error.__traceback__),
        )

    def log_performance(self, section: str, elapsed: float):
        """処理時間をログ出力"""
        self._logger.info(f"Performance - {section}: {elapsed:.3f} seconds")

    def log_simulation_state(self, state: Dict[str, Any], level: str = "info"):
        """シミュレーション状態をログ出力"""
        log_func = getattr(self._logger, level.lower())
        log_func(f"Simulation State: {state}")

    def close(self):
        """ハンドラを閉じる（ルートロガーのみ）"""
        if self.parent is not None:
            return
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """エラーが発生した場合はログに記録し、例外を伝播させる"""
        if exc_type is not None:
            self.log_error_with_context(
                "Error in simulation section", exc_val, {"section": self.name}
            )
        return False
