"""
ServerFarm 类：管理多台异构服务器
"""

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ..config.farm_configs import (
    DEFAULT_FREQUENCY_TIERS,
    DEFAULT_SERVERS,
    get_farm_config,
)
from .server import Server


@dataclass
class ServerFarm:
    """
    服务器集群：按档位划分频率的服务器集合

    属性:
        servers: List[Server] - 服务器列表，下标即服务器编号
    """

    servers: List[Server] = field(default_factory=list)

    @classmethod
    def from_configs(cls, configs: List[Dict]) -> "ServerFarm":
        """
        从配置列表创建集群

        Args:
            configs: 服务器配置列表，每个配置包含：
                - server_id: 服务器编号
                - tier: 频率档位
                - frequency: 运行频率

        Returns:
            ServerFarm 对象
        """
        return cls(servers=[Server(**config) for config in configs])

    def get_server(self, index: int) -> Server:
        """根据编号获取服务器"""
        return self.servers[index]

    def get_server_count(self) -> int:
        """获取服务器数量"""
        return len(self.servers)

    def get_last_finish_time(self) -> int:
        """所有服务器中最晚的空闲时刻"""
        return max((s.next_available_time for s in self.servers), default=0)

    def get_total_busy_time(self) -> float:
        """所有服务器累计忙碌时间之和"""
        return sum(s.busy_time for s in self.servers)

    def get_frequencies(self) -> List[float]:
        """每台服务器的频率"""
        return [s.frequency for s in self.servers]

    def get_farm_statistics(self) -> Dict:
        """
        获取集群整体统计信息

        Returns:
            统计信息字典
        """
        return {
            "server_count": len(self.servers),
            "tiers": sorted({s.frequency for s in self.servers}),
            "idle_servers": sum(1 for s in self.servers if s.is_idle()),
            "total_busy_time": self.get_total_busy_time(),
            "last_finish_time": self.get_last_finish_time(),
        }

    def reset(self) -> None:
        """重置所有服务器状态"""
        for server in self.servers:
            server.reset()

    def freeze(self) -> None:
        """冻结所有服务器，之后任何修改都会抛出 RuntimeError"""
        for server in self.servers:
            server.freeze()

    def is_frozen(self) -> bool:
        return all(s.frozen for s in self.servers)

    def __len__(self) -> int:
        return len(self.servers)

    def __repr__(self) -> str:
        return f"ServerFarm(servers={len(self.servers)}, tiers={sorted({s.frequency for s in self.servers})})"


def create_server_farm(
    servers: int = DEFAULT_SERVERS,
    tiers: Sequence[float] = DEFAULT_FREQUENCY_TIERS,
) -> ServerFarm:
    """
    创建按档位均分频率的服务器集群

    Args:
        servers: 服务器数量
        tiers: 各档位频率

    Returns:
        集群对象
    """
    return ServerFarm.from_configs(get_farm_config(servers, tiers))
