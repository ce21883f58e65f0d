"""
随机调度器：均匀随机选择服务器
"""

import logging
from typing import Tuple

from ..base import BaseScheduler
from ...models.farm import ServerFarm
from ...models.job import Job
from ...utils.rng import RandomSource


class RandomScheduler(BaseScheduler):
    """
    随机调度器：在 [0, N) 中均匀抽取服务器编号，无条件分配

    抽样结果会被限制在 [0, N-1] 范围内
    """

    def __init__(self, farm: ServerFarm, rng: RandomSource):
        super().__init__(farm)
        self.rng = rng

    def select_server(self, job: Job, tick: int) -> Tuple[int, float]:
        server_count = self.farm.get_server_count()
        index = int(server_count * self.rng.random())

        if not 0 <= index < server_count:
            clamped = min(max(index, 0), server_count - 1)
            logging.warning(f"Server index {index} out of bounds at t={tick}, clamped to {clamped}")
            index = clamped

        return index, job.get_execution_time(self.farm.get_server(index))
