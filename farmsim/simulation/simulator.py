"""
仿真引擎：管理调度仿真的整个生命周期
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..algorithms import create_scheduler
from ..config.farm_configs import SimulationConfig
from ..metrics.calculator import Metrics, MetricsCalculator
from ..models.farm import create_server_farm
from ..utils.rng import RandomSource, create_rng
from .arrival import ArrivalProcess
from .clock import Clock
from .state import SimulationState


@dataclass
class SimulationResult:
    """
    仿真结果

    属性:
        state: 结束后的仿真状态（只读）
        metrics: 汇总指标
        metadata: 其他元数据
    """
    state: SimulationState
    metrics: Metrics
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def farm(self):
        return self.state.farm


class Simulator:
    """
    仿真引擎

    时钟逐时刻驱动到达过程；任务到达后由调度器选择服务器并更新其状态，
    循环结束后由指标计算器汇总利用率和能耗。
    """

    def __init__(self, config: SimulationConfig, rng: Optional[RandomSource] = None):
        """
        初始化仿真引擎

        Args:
            config: 仿真配置，构造时校验
            rng: 外部注入的随机源；为 None 时每次运行按 config.seed 重新创建

        Raises:
            ConfigurationError: 配置无效
        """
        self.config = config.validate()
        self._injected_rng = rng
        self.clock = Clock(config.duration)
        self.clock.register_handler(self._handle_tick)
        self.state: Optional[SimulationState] = None
        self.reset()

    def reset(self) -> None:
        """
        重置仿真状态

        每次运行使用新的集群、调度器和随机源，之前结果中的集群保持不变；
        注入的随机源不会被重新播种，重复运行会继续消费其序列。
        """
        config = self.config
        self.rng = self._injected_rng if self._injected_rng is not None else create_rng(config.seed)
        self.farm = create_server_farm(config.servers, config.frequency_tiers)
        self.arrival_process = ArrivalProcess(self.rng, config)
        self.scheduler = create_scheduler(config.policy, self.farm, self.rng)
        self.clock.reset()
        self.state = SimulationState(farm=self.farm)

    def run(self) -> SimulationResult:
        """
        运行仿真

        Returns:
            仿真结果对象
        """
        self.reset()
        logging.info(
            f"Running {self.scheduler.get_algorithm_name()} on {self.farm.get_server_count()} servers "
            f"for {self.config.duration} ticks (arrival_rate={self.config.arrival_rate}, "
            f"max_execution={self.config.max_execution})"
        )

        self.clock.run()
        self.state.finalize()

        return self._compute_result()

    def _handle_tick(self, tick: int) -> None:
        """
        处理单个时刻：抽样到达，有任务时立即调度

        Args:
            tick: 当前时刻
        """
        self.state.advance(tick)
        job = self.arrival_process.sample(tick)
        if job is None:
            return

        self.state.record_scheduled(tick)
        server = self.scheduler.schedule(job, tick)
        logging.debug(f"t={tick}: {job} -> server {server.server_id} (next={server.next_available_time})")

    def _compute_result(self) -> SimulationResult:
        """
        计算并返回仿真结果

        Returns:
            仿真结果对象
        """
        metrics = MetricsCalculator.calculate(self.state, self.config.duration, self.config.idle_power)

        if metrics.jobs_scheduled == 0:
            logging.warning("No jobs arrived during the simulation.")

        return SimulationResult(
            state=self.state,
            metrics=metrics,
            metadata={
                "scheduler": self.scheduler.get_algorithm_name(),
                "policy": self.config.policy,
                "server_count": self.farm.get_server_count(),
                "arrival_rate": self.config.arrival_rate,
                "max_execution": self.config.max_execution,
                "duration": self.config.duration,
                "seed": self.config.seed,
            },
        )


def run_simulation(config: SimulationConfig, rng: Optional[RandomSource] = None) -> SimulationResult:
    """使用独立的集群和随机源运行一次仿真"""
    return Simulator(config, rng).run()
