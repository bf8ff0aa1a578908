"""
报告模块

进程级结果汇总与退出时的汇总输出。
"""

from .aggregator import AggregateCounters, ResultAggregator, get_aggregator

__all__ = [
    "AggregateCounters",
    "ResultAggregator",
    "get_aggregator",
]
