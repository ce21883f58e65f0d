"""
Server 类：表示一台固定频率的服务器
"""

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .job import Job


@dataclass
class Server:
    """
    服务器类

    属性:
        server_id: int - 服务器编号
        frequency: float - 运行频率倍率
        tier: int - 频率档位

    状态属性:
        next_available_time: int - 最早空闲时刻，单调不减
        busy_time: float - 累计忙碌时间，单调不减
        job_count: int - 已分配任务数
        frozen: bool - 仿真结束后冻结，冻结后不允许修改
    """

    server_id: int
    frequency: float
    tier: int = 0

    next_available_time: int = 0
    busy_time: float = 0.0
    job_count: int = 0
    frozen: bool = field(default=False, repr=False, compare=False)

    def get_start_time(self, tick: int) -> int:
        """任务在该服务器上的最早开始时刻"""
        return max(tick, self.next_available_time)

    def get_completion_time(self, job: "Job", tick: int) -> float:
        """
        计算任务在该服务器上的预计完成时间

        Args:
            job: 任务对象
            tick: 当前时刻

        Returns:
            完成时间 = 执行时间 + max(tick, next_available_time)
        """
        return job.get_execution_time(self) + self.get_start_time(tick)

    def assign(self, task_duration: float, tick: int) -> None:
        """
        分配任务，更新忙碌时间和下次空闲时刻

        Args:
            task_duration: 任务在本服务器上的执行时间
            tick: 分配时刻

        Raises:
            RuntimeError: 服务器已冻结
        """
        self._check_mutable()
        self.busy_time += task_duration
        # 空闲时刻取整到不早于实际完成的整数时刻
        self.next_available_time = math.ceil(self.get_start_time(tick) + task_duration)
        self.job_count += 1

    def is_idle(self) -> bool:
        """从未分配过任务"""
        return self.job_count == 0

    def get_utilization(self, total_time: float) -> float:
        """
        计算时间利用率

        Args:
            total_time: 总仿真时间

        Returns:
            busy_time / total_time
        """
        if total_time == 0:
            return 0.0
        return self.busy_time / total_time

    def get_energy(self, total_time: float, idle_power: float) -> float:
        """
        计算能耗：忙碌部分按频率计，空闲部分按空闲功耗常数计

        Args:
            total_time: 有效仿真时长
            idle_power: 空闲功耗常数

        Returns:
            能耗
        """
        return self.busy_time * self.frequency + idle_power * (total_time - self.busy_time)

    def reset(self) -> None:
        """重置运行状态"""
        self._check_mutable()
        self.next_available_time = 0
        self.busy_time = 0.0
        self.job_count = 0

    def freeze(self) -> None:
        """冻结服务器状态"""
        self.frozen = True

    def _check_mutable(self) -> None:
        if self.frozen:
            raise RuntimeError(f"Server {self.server_id} is frozen and read-only")

    def __repr__(self) -> str:
        return f"Server({self.server_id}, f={self.frequency}, next={self.next_available_time}, busy={self.busy_time:.2f})"
