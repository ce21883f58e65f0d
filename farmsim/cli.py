"""
命令行入口

用法:
    farmsim ARRIVAL_RATE MAX_EXECUTION [--seed SEED] [--policy {greedy,random}]

    # 平均每 5 个时刻到达一个任务，基础执行时间上限 200
    farmsim 5 200

    # 固定种子，使用随机调度
    farmsim 5 200 --seed 42 --policy random
"""

import argparse
import sys
from typing import List, Optional

from .config.farm_configs import (
    AVAILABLE_POLICIES,
    DEFAULT_POLICY,
    MIN_EXECUTION,
    ConfigurationError,
    SimulationConfig,
)
from .metrics.calculator import Metrics
from .simulation.simulator import run_simulation
from .utils.logging_config import LOG_LEVELS, configure_logging


def format_report(metrics: Metrics) -> str:
    """
    格式化输出统计结果

    Args:
        metrics: 汇总指标

    Returns:
        报告文本（以空行结尾）
    """
    lines = [
        f"Number of Jobs Scheduled: {metrics.jobs_scheduled}",
        f"First job arrived at time: {metrics.first_arrival}",
        f"Last job finished at: {metrics.last_finish}",
        f"Overall utilization: {metrics.overall_utilization:.12f}",
        f"Energy: {metrics.energy:f}",
    ]
    return "\n".join(lines) + "\n\n"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="farmsim",
        description="Heterogeneous server farm scheduling simulator",
    )
    parser.add_argument("arrival_rate", type=int,
                        help="Average ticks between arrivals (arrival probability per tick is 1/arrival_rate)")
    parser.add_argument("max_execution", type=int,
                        help=f"Upper bound of the base job duration (at least {MIN_EXECUTION})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (default: seeded from system entropy)")
    parser.add_argument("--policy", type=str, default=DEFAULT_POLICY, choices=AVAILABLE_POLICIES,
                        help="Scheduling policy")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=LOG_LEVELS,
                        help="Logging level (logs go to stderr)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    主函数

    Returns:
        退出码：max_execution 过小时沿用原有行为返回 0；其他配置错误返回 1
    """
    args = build_parser().parse_args(argv)

    configure_logging(args.log_level)

    config = SimulationConfig(
        arrival_rate=args.arrival_rate,
        max_execution=args.max_execution,
        policy=args.policy,
        seed=args.seed,
    )

    try:
        config.validate()
    except ConfigurationError as e:
        if config.max_execution < MIN_EXECUTION:
            print(e)
            return 0
        print(f"error: {e}", file=sys.stderr)
        return 1

    result = run_simulation(config)
    sys.stdout.write(format_report(result.metrics))
    return 0


def run() -> None:
    """控制台脚本入口"""
    sys.exit(main())


if __name__ == "__main__":
    run()
