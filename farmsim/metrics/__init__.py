"""评估指标层"""

from .calculator import Metrics, MetricsCalculator, ResultComparator

__all__ = ["Metrics", "MetricsCalculator", "ResultComparator"]
