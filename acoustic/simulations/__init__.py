"""シミュレーション管理パッケージ"""

from .config import (
    SimulationConfig,
    GridConfig,
    ModelConfig,
    TimeConfig,
    InitialConditionConfig,
    SourceConfig,
    ReceiverConfig,
    OutputConfig,
    LoggingSection,
)
from .state import SimulationState
from .checkpoint import CheckpointManager
from .runner import SimulationRunner

__all__ = [
    "SimulationConfig",
    "GridConfig",
    "ModelConfig",
    "TimeConfig",
    "InitialConditionConfig",
    "SourceConfig",
    "ReceiverConfig",
    "OutputConfig",
    "LoggingSection",
    "SimulationState",
    "CheckpointManager",
    "SimulationRunner",
]
