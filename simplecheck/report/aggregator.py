"""
结果汇总

进程内唯一的 ResultAggregator 记录所有比对的总数与失败数，
每次比对立即输出一行，进程正常退出时 (atexit) 输出一次汇总:

    <空行>
    --------------------------------------
    Test summary:
    Executed tests: <total>
    Failed tests: <failed>

多线程调用时，计数更新与该次输出行在同一临界区内完成，
不会丢失计数，也不会出现交错的半行输出。
"""

import atexit
import sys
import threading
from dataclasses import dataclass
from typing import List, Optional, TextIO

from simplecheck.compare import ComparisonOutcome, is_equal, render
from simplecheck.core.constants import SUMMARY_SEPARATOR
from simplecheck.core.log import logger


@dataclass(frozen=True)
class AggregateCounters:
    """计数快照，failed <= total"""

    total: int = 0
    failed: int = 0

    @property
    def passed(self) -> int:
        """通过数"""
        return self.total - self.failed


class ResultAggregator:
    """
    比对结果汇总器

    使用示例:
        agg = ResultAggregator.instance()
        agg.check(1, 1)            # 输出 "Test successful! ..."
        agg.failed                 # 0

    instance() 返回进程级单例并在首次创建时注册 atexit 汇总；
    直接构造的对象不注册，需要自行调用 print_summary()。
    计数只增不减，没有 reset。
    """

    _instance: Optional["ResultAggregator"] = None
    _instance_lock = threading.Lock()

    def __init__(self, stream: TextIO = None):
        """
        Args:
            stream: 输出流，默认在写入时取 sys.stdout
        """
        self._stream = stream
        # 可重入: 临界区内触发的 GC/__del__ 可能再次进入
        self._lock = threading.RLock()
        self._total = 0
        self._failed = 0
        self._summarized = False

    @classmethod
    def instance(cls) -> "ResultAggregator":
        """获取进程级单例 (首次调用时创建)"""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    aggregator = cls()
                    atexit.register(aggregator.print_summary)
                    cls._instance = aggregator
                    logger.debug("result aggregator created, summary registered at exit")
        return cls._instance

    @property
    def stream(self) -> TextIO:
        """当前输出流"""
        return self._stream if self._stream is not None else sys.stdout

    @property
    def total(self) -> int:
        """已执行的比对数"""
        return self._total

    @property
    def failed(self) -> int:
        """失败的比对数"""
        return self._failed

    @property
    def passed(self) -> int:
        """通过的比对数"""
        return self.counters.passed

    @property
    def all_passed(self) -> bool:
        """是否没有失败"""
        return self._failed == 0

    @property
    def counters(self) -> AggregateCounters:
        """一致的计数快照"""
        with self._lock:
            return AggregateCounters(total=self._total, failed=self._failed)

    def check(self, expected, actual, message: str = None) -> bool:
        """
        比对并记录

        Args:
            expected: 期望值
            actual: 实际值
            message: 附加在输出行末尾的说明

        Returns:
            是否相等
        """
        passed = is_equal(expected, actual)
        # 在锁外格式化，用户的 __str__ 不进入临界区
        outcome = ComparisonOutcome(
            expected=render(expected),
            actual=render(actual),
            passed=passed,
            message=message,
        )
        self.record(outcome)
        return passed

    def record(self, outcome: ComparisonOutcome) -> None:
        """计数并输出一行"""
        with self._lock:
            self._total += 1
            if not outcome.passed:
                self._failed += 1
            self._write(outcome.line())

    def summary_lines(self) -> List[str]:
        """汇总块的各行"""
        counters = self.counters
        return [
            "",
            SUMMARY_SEPARATOR,
            "Test summary:",
            f"Executed tests: {counters.total}",
            f"Failed tests: {counters.failed}",
        ]

    def print_summary(self) -> bool:
        """
        输出汇总 (只输出一次)

        Returns:
            本次是否实际输出
        """
        with self._lock:
            if self._summarized:
                return False
            self._summarized = True
            self._write("\n".join(self.summary_lines()))
        return True

    def _write(self, text: str) -> None:
        stream = self.stream
        stream.write(text + "\n")
        stream.flush()


def get_aggregator() -> ResultAggregator:
    """获取进程级 ResultAggregator"""
    return ResultAggregator.instance()
