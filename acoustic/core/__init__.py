"""コアパッケージ

グリッド情報、境界のパディング、例外クラスを提供します。
"""

from .errors import InvalidArgumentError
from .grid import GridInfo

__all__ = [
    "InvalidArgumentError",
    "GridInfo",
]
