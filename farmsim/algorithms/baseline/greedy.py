"""
贪心调度器：按最早完成时间 (EFT) 选择服务器
"""

from typing import Tuple

from ..base import BaseScheduler
from ...models.job import Job


class GreedyScheduler(BaseScheduler):
    """
    贪心调度器：按最早完成时间选择服务器

    策略：
    对每台服务器 i 计算 finish_i = 执行时间_i + max(tick, next_available_time_i)，
    选择 finish 最小的服务器；严格小于比较，相同时取编号最小者。
    """

    def select_server(self, job: Job, tick: int) -> Tuple[int, float]:
        """
        执行 EFT 选择

        Args:
            job: 到达的任务
            tick: 当前时刻

        Returns:
            (服务器编号, 执行时间)
        """
        best_index = -1
        best_duration = 0.0
        earliest_completion = float('inf')

        for index, server in enumerate(self.farm.servers):
            completion_time = server.get_completion_time(job, tick)

            if completion_time < earliest_completion:
                earliest_completion = completion_time
                best_duration = job.get_execution_time(server)
                best_index = index

        if best_index < 0:
            raise RuntimeError("Server farm is empty, cannot schedule job")

        return best_index, best_duration
