"""ログフォーマッタを提供するモジュール"""

import copy
import datetime
import logging

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
)


class DefaultFormatter(logging.Formatter):
    """標準的なログフォーマッタ"""

    def __init__(self, fmt: str = None):
        super().__init__(fmt or DEFAULT_FORMAT)


class DetailedFormatter(logging.Formatter):
    """詳細なログフォーマッタ

    ファイル名と行番号を含み、時刻はミリ秒単位で出力します。
    """

    def __init__(self, fmt: str = None):
        super().__init__(fmt or DETAILED_FORMAT)

    def formatTime(self, record: logging.LogRecord, datefmt: str = None) -> str:
        ct = datetime.datetime.fromtimestamp(record.created)
        if datefmt:
            return ct.strftime(datefmt)
        return ct.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


class ColoredFormatter(logging.Formatter):
    """カラー対応のログフォーマッタ

    ログレベルに応じて異なる色でレベル名を表示します。
    """

    # ANSIエスケープシーケンス
    COLORS = {
        "DEBUG": "\033[36m",  # シアン
        "INFO": "\033[32m",  # 緑
        "WARNING": "\033[33m",  # 黄
        "ERROR": "\033[31m",  # 赤
        "CRITICAL": "\033[35m",  # マゼンタ
        "RESET": "\033[0m",
    }

    def __init__(self, fmt: str = None, use_color: bool = True):
        super().__init__(fmt or DEFAULT_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_color:
            return super().format(record)

        # 他のハンドラに影響しないようレコードを複製して色付けする
        record = copy.copy(record)
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        record.levelname = f"{color}{record.levelname}{self.COLORS['RESET']}"
        return super().format(record)
