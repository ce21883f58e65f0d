"""
能耗与利用率计算器
"""

from dataclasses import dataclass, asdict
from typing import TYPE_CHECKING, Dict, Optional, Tuple

import pandas as pd

from ..config.farm_configs import DEFAULT_IDLE_POWER
from ..models.farm import ServerFarm
from ..models.server import Server

if TYPE_CHECKING:
    from ..simulation.simulator import SimulationResult
    from ..simulation.state import SimulationState


@dataclass
class Metrics:
    """
    评估指标数据类

    属性:
        jobs_scheduled: 已调度任务数
        first_arrival: 第一个任务到达时刻（没有任务时为 0）
        last_finish: 最晚完成时刻
        effective_duration: 有效仿真时长 max(duration, last_finish)
        overall_utilization: 总体利用率
        energy: 总能耗
        idle_servers: 从未分配任务的服务器数
    """
    jobs_scheduled: int
    first_arrival: int
    last_finish: int
    effective_duration: int
    overall_utilization: float
    energy: float
    idle_servers: int

    def to_dict(self) -> Dict[str, float]:
        """转换为字典"""
        return asdict(self)


class MetricsCalculator:
    """
    能耗与利用率计算器

    仿真结束后根据服务器最终状态计算汇总指标
    """

    @staticmethod
    def calculate(
        state: "SimulationState",
        duration: int,
        idle_power: float = DEFAULT_IDLE_POWER,
    ) -> Metrics:
        """
        计算所有指标

        Args:
            state: 已结束的仿真状态
            duration: 配置的仿真时长
            idle_power: 空闲功耗常数

        Returns:
            Metrics 对象
        """
        farm = state.farm
        last_finish = MetricsCalculator.last_finish_time(farm)
        effective_duration = MetricsCalculator.effective_duration(farm, duration)

        return Metrics(
            jobs_scheduled=state.jobs_scheduled,
            first_arrival=state.first_arrival if state.first_arrival is not None else 0,
            last_finish=last_finish,
            effective_duration=effective_duration,
            overall_utilization=MetricsCalculator.overall_utilization(farm, effective_duration),
            energy=MetricsCalculator.energy(farm, effective_duration, idle_power),
            idle_servers=sum(1 for s in farm.servers if s.is_idle()),
        )

    @staticmethod
    def last_finish_time(farm: ServerFarm) -> int:
        """
        最晚完成时刻

        max(next_available_time)
        """
        return farm.get_last_finish_time()

    @staticmethod
    def effective_duration(farm: ServerFarm, duration: int) -> int:
        """
        有效仿真时长：任务在名义时长之后完成时向后延伸
        """
        return max(duration, farm.get_last_finish_time())

    @staticmethod
    def overall_utilization(farm: ServerFarm, effective_duration: float) -> float:
        """
        总体利用率

        Σ busy_time / (effective_duration × N)
        """
        if effective_duration == 0 or not farm.servers:
            return 0.0
        return farm.get_total_busy_time() / (effective_duration * farm.get_server_count())

    @staticmethod
    def server_energy(server: Server, effective_duration: float, idle_power: float = DEFAULT_IDLE_POWER) -> float:
        """
        单台服务器能耗

        busy_time × frequency + idle_power × (effective_duration - busy_time)
        """
        return server.get_energy(effective_duration, idle_power)

    @staticmethod
    def energy(farm: ServerFarm, effective_duration: float, idle_power: float = DEFAULT_IDLE_POWER) -> float:
        """
        总能耗
        """
        return sum(
            MetricsCalculator.server_energy(server, effective_duration, idle_power)
            for server in farm.servers
        )

    @staticmethod
    def tier_breakdown(
        farm: ServerFarm,
        effective_duration: float,
        idle_power: float = DEFAULT_IDLE_POWER,
    ) -> pd.DataFrame:
        """
        按频率档位统计

        Args:
            farm: 服务器集群
            effective_duration: 有效仿真时长
            idle_power: 空闲功耗常数

        Returns:
            DataFrame，每行一个档位，列为 frequency/servers/jobs/busy_time/utilization/energy
        """
        df = pd.DataFrame(
            [
                {
                    "tier": s.tier,
                    "frequency": s.frequency,
                    "jobs": s.job_count,
                    "busy_time": s.busy_time,
                    "utilization": s.get_utilization(effective_duration),
                    "energy": MetricsCalculator.server_energy(s, effective_duration, idle_power),
                }
                for s in farm.servers
            ],
            columns=["tier", "frequency", "jobs", "busy_time", "utilization", "energy"],
        )

        # 各服务器统计时长相同，单机利用率的平均值即档位利用率
        return df.groupby("tier").agg(
            frequency=("frequency", "first"),
            servers=("frequency", "size"),
            jobs=("jobs", "sum"),
            busy_time=("busy_time", "sum"),
            utilization=("utilization", "mean"),
            energy=("energy", "sum"),
        )


class ResultComparator:
    """
    多策略结果对比工具
    """

    @staticmethod
    def compare_policies(results: Dict[str, "SimulationResult"]) -> pd.DataFrame:
        """
        生成对比表格

        Args:
            results: 策略名 -> 仿真结果的字典

        Returns:
            DataFrame，行为策略，列为指标
        """
        data = {policy: result.metrics.to_dict() for policy, result in results.items()}
        return pd.DataFrame(data).T

    @staticmethod
    def find_best_policy(results: Dict[str, "SimulationResult"], metric: str) -> Tuple[Optional[str], Optional[float]]:
        """
        根据指定指标找到取值最小的策略

        Args:
            results: 策略名 -> 仿真结果的字典
            metric: 指标名称

        Returns:
            (策略名, 指标值) 元组
        """
        best_policy = None
        best_value = None

        for policy, result in results.items():
            value = result.metrics.to_dict().get(metric)

            if value is None:
                continue

            if best_value is None or value < best_value:
                best_value = value
                best_policy = policy

        return best_policy, best_value
