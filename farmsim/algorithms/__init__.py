"""调度算法层"""

from ..models.farm import ServerFarm
from ..utils.rng import RandomSource
from .base import BaseScheduler
from .baseline import GreedyScheduler, RandomScheduler


def create_scheduler(policy: str, farm: ServerFarm, rng: RandomSource) -> BaseScheduler:
    """根据策略名称创建调度器"""
    if policy == "greedy":
        return GreedyScheduler(farm)
    elif policy == "random":
        return RandomScheduler(farm, rng)
    else:
        raise ValueError(f"Unknown policy: {policy}")


__all__ = ["BaseScheduler", "GreedyScheduler", "RandomScheduler", "create_scheduler"]
