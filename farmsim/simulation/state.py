"""
仿真状态：由时钟驱动的主循环独占修改
"""

from dataclasses import dataclass
from typing import Optional

from ..models.farm import ServerFarm


@dataclass
class SimulationState:
    """
    仿真状态

    属性:
        farm: 服务器集群
        jobs_scheduled: 已调度任务数
        first_arrival: 第一个任务到达时刻，没有任务时为 None
        current_tick: 当前时刻
        finalized: 主循环结束后置为 True，之后状态只读
    """

    farm: ServerFarm
    jobs_scheduled: int = 0
    first_arrival: Optional[int] = None
    current_tick: int = 0
    finalized: bool = False

    def advance(self, tick: int) -> None:
        """推进到指定时刻"""
        self._check_mutable()
        self.current_tick = tick

    def record_scheduled(self, tick: int) -> None:
        """记录一次任务调度"""
        self._check_mutable()
        self.jobs_scheduled += 1
        if self.first_arrival is None:
            self.first_arrival = tick

    def finalize(self) -> None:
        """结束仿真，冻结状态和集群"""
        self.finalized = True
        self.farm.freeze()

    def _check_mutable(self) -> None:
        if self.finalized:
            raise RuntimeError("Simulation state is finalized and read-only")
