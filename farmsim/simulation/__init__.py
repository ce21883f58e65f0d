"""仿真引擎层"""

from .arrival import ArrivalProcess
from .clock import Clock
from .state import SimulationState
from .simulator import SimulationResult, Simulator, run_simulation

__all__ = [
    "ArrivalProcess",
    "Clock",
    "SimulationResult",
    "SimulationState",
    "Simulator",
    "run_simulation",
]
