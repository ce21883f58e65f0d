"""
结果可视化工具
"""

from typing import Dict, Optional

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from ..metrics.calculator import MetricsCalculator
from ..simulation.simulator import SimulationResult


class PlotGenerator:
    """
    结果可视化工具

    生成策略对比曲线、频率档位利用率对比图
    """

    # 设置风格
    sns.set_style("whitegrid")
    plt.rcParams["figure.figsize"] = (12, 6)
    plt.rcParams["font.size"] = 10

    @staticmethod
    def plot_policy_comparison(
        sweep: pd.DataFrame,
        save_path: Optional[str] = None,
        show: bool = True,
    ) -> None:
        """
        绘制不同到达率下各策略的利用率与能耗

        Args:
            sweep: run_sweep 生成的表格，需包含 arrival_rate/policy/overall_utilization/energy 列
            save_path: 保存路径
            show: 是否显示图表
        """
        fig, axes = plt.subplots(1, 2, figsize=(14, 5))
        fig.suptitle("Scheduling Policy Comparison", fontsize=16)

        plot_metrics = [
            ("overall_utilization", "Overall Utilization"),
            ("energy", "Energy"),
        ]

        for ax, (metric, title) in zip(axes.flat, plot_metrics):
            sns.lineplot(data=sweep, x="arrival_rate", y=metric, hue="policy", marker="o", ax=ax)
            ax.set_title(title)
            ax.set_xlabel("Arrival Rate (ticks per job)")
            ax.set_ylabel(title)

        axes[0].set_ylim([0, 1])

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=300, bbox_inches="tight")

        if show:
            plt.show()
        else:
            plt.close()

    @staticmethod
    def plot_tier_utilization(
        results: Dict[str, SimulationResult],
        idle_power: float,
        save_path: Optional[str] = None,
        show: bool = True,
    ) -> None:
        """
        绘制各频率档位的利用率对比

        Args:
            results: 策略名 -> 仿真结果的字典
            idle_power: 空闲功耗常数
            save_path: 保存路径
            show: 是否显示图表
        """
        frames = []
        for policy, result in results.items():
            tiers = MetricsCalculator.tier_breakdown(
                result.farm, result.metrics.effective_duration, idle_power
            )
            tiers = tiers.reset_index()
            tiers["policy"] = policy
            frames.append(tiers)

        df = pd.concat(frames, ignore_index=True)

        fig, ax = plt.subplots(figsize=(10, 6))
        sns.barplot(data=df, x="frequency", y="utilization", hue="policy", ax=ax)

        ax.set_xlabel("Server Frequency")
        ax.set_ylabel("Utilization")
        ax.set_title("Utilization by Frequency Tier")
        ax.set_ylim([0, 1])

        # 添加数值标签
        for container in ax.containers:
            ax.bar_label(container, fmt="%.2f", fontsize=8)

        plt.tight_layout()

        if save_path:
            plt.savefig(save_path, dpi=300, bbox_inches="tight")

        if show:
            plt.show()
        else:
            plt.close()
