"""
Job 类：表示一个到达的计算任务
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .server import Server


@dataclass(frozen=True)
class Job:
    """
    任务类：到达后立即被调度，调度完成即丢弃

    属性:
        arrival_tick: int - 到达时刻
        base_duration: float - 基础执行时间 [10, max_execution)
        factor: float - 频率敏感比例 [0, 1)
    """

    arrival_tick: int
    base_duration: float
    factor: float

    def get_execution_time(self, server: "Server") -> float:
        """
        计算在指定服务器上的执行时间

        (1 - factor) 部分与频率无关（访存/IO），factor 部分与频率成反比（计算）

        Args:
            server: 服务器对象

        Returns:
            执行时间 = base_duration * (1 + factor * (1/f - 1))
        """
        return execution_time(self.base_duration, self.factor, server.frequency)

    def __repr__(self) -> str:
        return f"Job(t={self.arrival_tick}, base={self.base_duration:.2f}, factor={self.factor:.3f})"


def execution_time(base_duration: float, factor: float, frequency: float) -> float:
    """按频率计算任务执行时间"""
    return base_duration * (1.0 + factor * (1.0 / frequency - 1.0))
