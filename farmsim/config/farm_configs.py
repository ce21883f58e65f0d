"""
服务器集群配置定义
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Sequence

# 默认集群规模与仿真时长
DEFAULT_SERVERS = 100
DEFAULT_DURATION = 10000

# 频率档位：服务器按顺序均分到各档位，档位频率单调不减
DEFAULT_FREQUENCY_TIERS = (0.6, 0.7, 0.8, 0.9, 1.0)

# 空闲功耗常数（与频率档位无关）
DEFAULT_IDLE_POWER = 0.4

# 任务基础执行时间下限
MIN_EXECUTION = 10

DEFAULT_POLICY = "greedy"
AVAILABLE_POLICIES = ("greedy", "random")


class ConfigurationError(ValueError):
    """仿真配置无效，仿真不会启动"""


def get_tier_index(server_index: int, servers: int, tier_count: int) -> int:
    """
    计算服务器所属的频率档位

    Args:
        server_index: 服务器编号 (0..servers-1)
        servers: 服务器总数
        tier_count: 档位数量

    Returns:
        档位编号
    """
    return server_index * tier_count // servers


def get_tier_frequencies(
    servers: int = DEFAULT_SERVERS,
    tiers: Sequence[float] = DEFAULT_FREQUENCY_TIERS,
) -> List[float]:
    """
    获取每台服务器的运行频率

    Args:
        servers: 服务器总数
        tiers: 各档位频率

    Returns:
        长度为 servers 的频率列表
    """
    return [tiers[get_tier_index(i, servers, len(tiers))] for i in range(servers)]


def get_farm_config(
    servers: int = DEFAULT_SERVERS,
    tiers: Sequence[float] = DEFAULT_FREQUENCY_TIERS,
) -> List[Dict]:
    """
    获取集群中每台服务器的配置

    Args:
        servers: 服务器总数
        tiers: 各档位频率

    Returns:
        服务器配置列表，每个配置包含 server_id、tier、frequency
    """
    return [
        {
            "server_id": i,
            "tier": get_tier_index(i, servers, len(tiers)),
            "frequency": frequency,
        }
        for i, frequency in enumerate(get_tier_frequencies(servers, tiers))
    ]


@dataclass
class SimulationConfig:
    """
    单次仿真的配置

    属性:
        arrival_rate: 平均到达间隔，每个时刻到达概率为 1/arrival_rate
        max_execution: 任务基础执行时间上限
        servers: 服务器数量
        duration: 仿真时长（时刻数）
        frequency_tiers: 各档位频率
        idle_power: 空闲功耗常数
        policy: 调度策略名称 (greedy/random)
        seed: 随机种子，None 表示使用系统熵源
    """

    arrival_rate: int
    max_execution: int
    servers: int = DEFAULT_SERVERS
    duration: int = DEFAULT_DURATION
    frequency_tiers: Sequence[float] = field(default=DEFAULT_FREQUENCY_TIERS)
    idle_power: float = DEFAULT_IDLE_POWER
    policy: str = DEFAULT_POLICY
    seed: Optional[int] = None

    def validate(self) -> "SimulationConfig":
        """
        校验配置，任何一项无效都会在仿真开始前被拒绝

        Returns:
            配置自身

        Raises:
            ConfigurationError: 配置无效
        """
        if self.max_execution < MIN_EXECUTION:
            raise ConfigurationError(f"max execution should be at least {MIN_EXECUTION}")
        if self.arrival_rate <= 0:
            raise ConfigurationError(f"arrival rate must be positive, got {self.arrival_rate}")
        if self.servers <= 0:
            raise ConfigurationError(f"server count must be positive, got {self.servers}")
        if self.duration <= 0:
            raise ConfigurationError(f"duration must be positive, got {self.duration}")
        if not self.frequency_tiers:
            raise ConfigurationError("at least one frequency tier is required")
        if any(f <= 0 for f in self.frequency_tiers):
            raise ConfigurationError(f"frequencies must be positive, got {list(self.frequency_tiers)}")
        if self.idle_power < 0:
            raise ConfigurationError(f"idle power must be non-negative, got {self.idle_power}")
        if self.policy not in AVAILABLE_POLICIES:
            raise ConfigurationError(f"Unknown policy: {self.policy}")
        return self

    @property
    def arrival_probability(self) -> float:
        """每个时刻有任务到达的概率"""
        return 1.0 / self.arrival_rate

    def to_dict(self) -> Dict:
        """转换为字典"""
        data = asdict(self)
        data["frequency_tiers"] = list(self.frequency_tiers)
        return data
