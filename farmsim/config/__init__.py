"""配置层"""

from .farm_configs import (
    AVAILABLE_POLICIES,
    DEFAULT_DURATION,
    DEFAULT_FREQUENCY_TIERS,
    DEFAULT_IDLE_POWER,
    DEFAULT_POLICY,
    DEFAULT_SERVERS,
    MIN_EXECUTION,
    ConfigurationError,
    SimulationConfig,
    get_farm_config,
    get_tier_frequencies,
    get_tier_index,
)

__all__ = [
    "AVAILABLE_POLICIES",
    "DEFAULT_DURATION",
    "DEFAULT_FREQUENCY_TIERS",
    "DEFAULT_IDLE_POWER",
    "DEFAULT_POLICY",
    "DEFAULT_SERVERS",
    "MIN_EXECUTION",
    "ConfigurationError",
    "SimulationConfig",
    "get_farm_config",
    "get_tier_frequencies",
    "get_tier_index",
]
