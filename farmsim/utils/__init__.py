"""工具函数"""

from .logging_config import LOG_LEVELS, configure_logging
from .rng import RandomSource, create_rng

__all__ = ["LOG_LEVELS", "RandomSource", "configure_logging", "create_rng"]
