"""
随机数源
"""

import logging
import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """提供 [0, 1) 均匀随机数的随机源，random.Random 即满足该接口"""

    def random(self) -> float:
        ...


def create_rng(seed: Optional[int] = None) -> random.Random:
    """
    创建独立的随机源

    Args:
        seed: 随机种子，None 时从系统熵源取种子

    Returns:
        random.Random 实例
    """
    if seed is None:
        seed = random.SystemRandom().randrange(2 ** 32)
        logging.info(f"Seeded random source from entropy: {seed}")
    return random.Random(seed)
