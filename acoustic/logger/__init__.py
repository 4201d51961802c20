"""シミュレーション用ロギングパッケージ"""

from .logger import SimulationLogger
from .handlers import FileLogHandler, ConsoleLogHandler, BufferedLogHandler
from .formatters import DefaultFormatter, DetailedFormatter, ColoredFormatter
from .config import LogConfig

__all__ = [
    "SimulationLogger",
    "FileLogHandler",
    "ConsoleLogHandler",
    "BufferedLogHandler",
    "DefaultFormatter",
    "DetailedFormatter",
    "ColoredFormatter",
    "LogConfig",
]
