"""基线调度算法"""

from .greedy import GreedyScheduler
from .random_scheduler import RandomScheduler

__all__ = ["GreedyScheduler", "RandomScheduler"]
