"""
任务到达过程：每个时刻做一次伯努利抽样
"""

from typing import Optional

from ..config.farm_configs import MIN_EXECUTION, SimulationConfig
from ..models.job import Job
from ..utils.rng import RandomSource


class ArrivalProcess:
    """
    伯努利到达过程

    每个时刻抽取 u ∈ [0, 1)，u < 1/arrival_rate 时有任务到达；
    到达后依次抽取基础执行时间和频率敏感比例。
    """

    def __init__(self, rng: RandomSource, config: SimulationConfig):
        """
        Args:
            rng: 随机源
            config: 仿真配置，构造时校验

        Raises:
            ConfigurationError: 配置无效
        """
        config.validate()
        self.rng = rng
        self.arrival_rate = config.arrival_rate
        self.max_execution = config.max_execution
        self.arrival_probability = config.arrival_probability

    def sample(self, tick: int) -> Optional[Job]:
        """
        对当前时刻抽样

        Args:
            tick: 当前时刻

        Returns:
            到达的任务，没有任务到达返回 None
        """
        if self.rng.random() >= self.arrival_probability:
            return None

        base_duration = MIN_EXECUTION + (self.max_execution - MIN_EXECUTION) * self.rng.random()
        factor = self.rng.random()
        return Job(arrival_tick=tick, base_duration=base_duration, factor=factor)

    def __repr__(self) -> str:
        return f"ArrivalProcess(rate=1/{self.arrival_rate}, max_execution={self.max_execution})"
