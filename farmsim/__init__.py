"""
异构服务器集群调度仿真器

比较不同调度策略在频率分档服务器集群上的利用率与能耗
"""

__version__ = "0.1.0"

from .config import ConfigurationError, SimulationConfig
from .simulation import SimulationResult, Simulator, run_simulation

__all__ = [
    "ConfigurationError",
    "SimulationConfig",
    "SimulationResult",
    "Simulator",
    "run_simulation",
]
