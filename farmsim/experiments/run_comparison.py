"""
策略对比实验脚本

在一组到达率下运行多种调度策略，生成对比表格和可视化结果

使用示例:
    farmsim-compare --arrival-rates 1 2 5 10 --max-execution 100 --seed 7
"""

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from ..config.farm_configs import (
    AVAILABLE_POLICIES,
    DEFAULT_DURATION,
    DEFAULT_FREQUENCY_TIERS,
    DEFAULT_IDLE_POWER,
    DEFAULT_SERVERS,
    SimulationConfig,
)
from ..metrics.calculator import ResultComparator
from ..simulation.simulator import SimulationResult, run_simulation
from ..utils.logging_config import LOG_LEVELS, configure_logging
from ..visualization.plots import PlotGenerator


def setup_logging(results_dir: str, experiment_name: Optional[str] = None, level: str = "INFO") -> Path:
    """
    配置 logging 模块，将日志输出到结果目录下的文件和控制台

    Args:
        results_dir: 结果输出目录
        experiment_name: 实验名称（可选）
        level: 日志级别，与 farmsim 命令行的 --log-level 取值相同

    Returns:
        日志文件路径
    """
    logs_dir = Path(results_dir) / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"{experiment_name or 'experiment'}_{timestamp}.log"

    configure_logging(level, log_file=log_file)
    logging.info(f"Logging initialized at {level.upper()}. Log file: {log_file}")
    return log_file


def run_experiment(
    arrival_rate: int,
    max_execution: int,
    policies: Optional[Sequence[str]] = None,
    seed: int = 42,
    servers: int = DEFAULT_SERVERS,
    duration: int = DEFAULT_DURATION,
    frequency_tiers: Sequence[float] = DEFAULT_FREQUENCY_TIERS,
) -> Dict[str, SimulationResult]:
    """
    运行单组参数下的所有策略

    每个策略使用独立的集群和相同种子的独立随机源

    Args:
        arrival_rate: 到达率参数
        max_execution: 基础执行时间上限
        policies: 要运行的策略列表
        seed: 随机种子

    Returns:
        Dict[策略名, 仿真结果]
    """
    if policies is None:
        policies = list(AVAILABLE_POLICIES)

    results = {}
    for policy in policies:
        logging.info(f"Running {policy} (arrival_rate={arrival_rate}, max_execution={max_execution})...")

        config = SimulationConfig(
            arrival_rate=arrival_rate,
            max_execution=max_execution,
            servers=servers,
            duration=duration,
            frequency_tiers=frequency_tiers,
            policy=policy,
            seed=seed,
        )
        result = run_simulation(config)
        results[policy] = result

        metrics = result.metrics
        logging.info(f"  Jobs Scheduled: {metrics.jobs_scheduled}")
        logging.info(f"  Last Finish: {metrics.last_finish}")
        logging.info(f"  Utilization: {metrics.overall_utilization:.2%}")
        logging.info(f"  Energy: {metrics.energy:.2f}")

    return results


def run_sweep(
    arrival_rates: Sequence[int],
    max_execution: int,
    policies: Optional[Sequence[str]] = None,
    seed: int = 42,
    servers: int = DEFAULT_SERVERS,
    duration: int = DEFAULT_DURATION,
) -> Tuple[pd.DataFrame, Dict[int, Dict[str, SimulationResult]]]:
    """
    在多个到达率下依次运行实验

    Returns:
        (对比表格, Dict[到达率, Dict[策略名, 仿真结果]])
        表格每行对应一个 (arrival_rate, policy) 组合
    """
    rows = []
    results_by_rate = {}

    for arrival_rate in arrival_rates:
        logging.info(f"{'=' * 60}")
        logging.info(f"Experiment: arrival_rate={arrival_rate}")
        logging.info(f"{'=' * 60}")

        results = run_experiment(arrival_rate, max_execution, policies, seed, servers, duration)
        results_by_rate[arrival_rate] = results

        comparison = ResultComparator.compare_policies(results)
        for policy, metrics in comparison.iterrows():
            rows.append({"arrival_rate": arrival_rate, "policy": policy, **metrics.to_dict()})

        best_policy, best_energy = ResultComparator.find_best_policy(results, "energy")
        logging.info(f"  Lowest energy: {best_policy} ({best_energy:.2f})")

    return pd.DataFrame(rows), results_by_rate


def save_results(
    sweep: pd.DataFrame,
    results_by_rate: Dict[int, Dict[str, SimulationResult]],
    output_dir: str,
    experiment_name: str,
    idle_power: float = DEFAULT_IDLE_POWER,
) -> None:
    """
    保存实验结果

    Args:
        sweep: 对比表格
        results_by_rate: Dict[到达率, Dict[策略名, 仿真结果]]
        output_dir: 输出目录
        experiment_name: 实验名称
        idle_power: 空闲功耗常数
    """
    output_path = Path(output_dir)

    metrics_dir = output_path / "metrics"
    figures_dir = output_path / "figures"
    for dir_path in [metrics_dir, figures_dir]:
        dir_path.mkdir(parents=True, exist_ok=True)

    logging.info(f"Saving results for {experiment_name}...")

    # 1. 对比表格
    csv_path = metrics_dir / f"{experiment_name}_comparison.csv"
    sweep.to_csv(csv_path, index=False)
    logging.info(f"  Saved comparison table to {csv_path}")

    # 2. 指标 JSON
    json_path = metrics_dir / f"{experiment_name}_metrics.json"
    with open(json_path, "w") as f:
        json.dump(json.loads(sweep.to_json(orient="records")), f, indent=2)
    logging.info(f"  Saved metrics JSON to {json_path}")

    # 3. 策略对比曲线
    comparison_path = figures_dir / f"{experiment_name}_comparison.png"
    PlotGenerator.plot_policy_comparison(sweep, save_path=str(comparison_path), show=False)
    logging.info(f"  Saved comparison plot to {comparison_path}")

    # 4. 每个到达率的档位利用率
    for arrival_rate, results in results_by_rate.items():
        tier_path = figures_dir / f"{experiment_name}_tiers_rate{arrival_rate}.png"
        PlotGenerator.plot_tier_utilization(results, idle_power, save_path=str(tier_path), show=False)
        logging.info(f"  Saved tier utilization plot for arrival_rate={arrival_rate}")


def main(argv: Optional[List[str]] = None) -> None:
    """主函数"""
    parser = argparse.ArgumentParser(description="Server Farm Scheduling Policy Comparison")
    parser.add_argument("--arrival-rates", type=int, nargs="+", default=[1, 2, 5, 10, 20, 50],
                        help="Arrival rates to sweep")
    parser.add_argument("--max-execution", type=int, default=100,
                        help="Upper bound of the base job duration")
    parser.add_argument("--policies", type=str, nargs="+", default=list(AVAILABLE_POLICIES),
                        choices=AVAILABLE_POLICIES, help="Policies to run")
    parser.add_argument("--seed", type=int, default=42, help="Random seed shared by all runs")
    parser.add_argument("--servers", type=int, default=DEFAULT_SERVERS, help="Number of servers")
    parser.add_argument("--duration", type=int, default=DEFAULT_DURATION, help="Simulation ticks")
    parser.add_argument("--output", type=str, default="results", help="Output directory")
    parser.add_argument("--name", type=str, default=None, help="Experiment name")
    parser.add_argument("--log-level", type=str, default="INFO", choices=LOG_LEVELS,
                        help="Logging level for console and log file")

    args = parser.parse_args(argv)

    experiment_name = args.name or f"sweep_exec{args.max_execution}_seed{args.seed}"
    setup_logging(args.output, experiment_name, args.log_level)

    sweep, results_by_rate = run_sweep(
        args.arrival_rates,
        args.max_execution,
        args.policies,
        args.seed,
        args.servers,
        args.duration,
    )

    save_results(sweep, results_by_rate, args.output, experiment_name)


if __name__ == "__main__":
    main()
