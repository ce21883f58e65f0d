"""
调度器基类：定义所有调度策略的统一接口
"""

from abc import ABC, abstractmethod
from typing import Tuple

from ..models.farm import ServerFarm
from ..models.job import Job
from ..models.server import Server


class BaseScheduler(ABC):
    """
    调度器基类：为每个到达的任务选择一台服务器
    """

    def __init__(self, farm: ServerFarm):
        self.farm = farm
        self.scheduled_count = 0

    @abstractmethod
    def select_server(self, job: Job, tick: int) -> Tuple[int, float]:
        """
        选择目标服务器

        Args:
            job: 到达的任务
            tick: 当前时刻

        Returns:
            (服务器编号, 任务在该服务器上的执行时间)
        """
        pass

    def schedule(self, job: Job, tick: int) -> Server:
        """
        调度单个任务并更新服务器状态

        Args:
            job: 到达的任务
            tick: 当前时刻

        Returns:
            被分配的服务器
        """
        index, task_duration = self.select_server(job, tick)
        server = self.farm.get_server(index)
        server.assign(task_duration, tick)
        self.scheduled_count += 1
        return server

    def get_algorithm_name(self) -> str:
        """返回算法名称"""
        return self.__class__.__name__

    def reset(self) -> None:
        """重置调度器状态"""
        self.scheduled_count = 0
