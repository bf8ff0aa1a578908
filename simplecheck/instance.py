"""
实例计数

统计某个类型当前存活的实例数和累计创建数，进程退出时输出:

    The remaining number of objects of type Widget at the end of the program is 2 (NOT zero!)
    The total number of objects created was 3

两种用法:

1. 继承 InstanceCounter (直接写在基类列表中的类即被计数的类型，
   其子类计入同一类型):

    class Widget(InstanceCounter):
        ...

2. 在构造/析构处显式调用:

    track(Buffer).increment()
    track(Buffer).decrement()

通过 __new__ 创建的对象都计为新实例，包括 copy.copy、copy.deepcopy
和反序列化。手动 decrement 多于 increment 时存活数会变成负数，
原样输出，不做截断。
"""

import atexit
import sys
import threading
from typing import Dict, List, Optional, TextIO

from simplecheck.core.constants import (
    INSTANCE_NOT_ZERO_MARKER,
    INSTANCE_REMAINING_TEMPLATE,
    INSTANCE_TOTAL_TEMPLATE,
)
from simplecheck.core.log import logger


class InstanceCounters:
    """单个类型的实例计数器"""

    def __init__(self, tracked_type: type, stream: TextIO = None):
        self.tracked_type = tracked_type
        self._stream = stream
        # 可重入: __del__ 可能在持锁期间由 GC 触发
        self._lock = threading.RLock()
        self._live = 0
        self._total = 0
        self._reported = False

    @property
    def name(self) -> str:
        """类型名"""
        return self.tracked_type.__qualname__

    @property
    def live(self) -> int:
        """当前存活数"""
        return self._live

    @property
    def total(self) -> int:
        """累计创建数"""
        return self._total

    def increment(self) -> None:
        """记录一次创建"""
        with self._lock:
            self._live += 1
            self._total += 1

    def decrement(self) -> None:
        """记录一次销毁"""
        with self._lock:
            self._live -= 1
            live = self._live
        if live < 0:
            logger.warn(f"live count of {self.name} dropped to {live}: decrement without matching increment")

    def report_lines(self) -> List[str]:
        """退出时输出的两行"""
        with self._lock:
            live, total = self._live, self._total
        remaining = INSTANCE_REMAINING_TEMPLATE.format(name=self.name, live=live)
        if live > 0:
            remaining += INSTANCE_NOT_ZERO_MARKER
        return [remaining, INSTANCE_TOTAL_TEMPLATE.format(total=total)]

    def print_report(self) -> bool:
        """
        输出计数报告 (只输出一次)

        Returns:
            本次是否实际输出
        """
        with self._lock:
            if self._reported:
                return False
            self._reported = True
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write("\n".join(self.report_lines()) + "\n")
            stream.flush()
        return True


# 全局注册表: 类型 -> 计数器
_counters: Dict[type, InstanceCounters] = {}
_counters_lock = threading.RLock()


def track(tracked_type: type) -> InstanceCounters:
    """
    获取类型的计数器

    首次调用时创建并注册 atexit 报告，之后总是返回同一个对象。
    atexit 按注册的逆序执行，因此报告顺序与首次使用顺序相反。
    """
    counters = _counters.get(tracked_type)
    if counters is None:
        with _counters_lock:
            counters = _counters.get(tracked_type)
            if counters is None:
                counters = InstanceCounters(tracked_type)
                atexit.register(counters.print_report)
                _counters[tracked_type] = counters
                logger.debug(f"tracking instances of {counters.name}")
    return counters


def tracked_types() -> List[type]:
    """已计数的类型 (按首次使用顺序)"""
    with _counters_lock:
        return list(_counters)


class InstanceCounter:
    """
    实例计数 mixin

    直接继承本类的类成为被计数的类型，子类不单独计数。
    """

    _tracked_type: Optional[type] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if InstanceCounter in cls.__bases__:
            cls._tracked_type = cls

    def __new__(cls, *args, **kwargs):
        parent_new = super().__new__
        if parent_new is object.__new__:
            instance = parent_new(cls)
        else:
            instance = parent_new(cls, *args, **kwargs)
        cls.instance_counter().increment()
        return instance

    def __del__(self):
        type(self).instance_counter().decrement()
        parent_del = getattr(super(), "__del__", None)
        if parent_del is not None:
            parent_del()

    @classmethod
    def instance_counter(cls) -> InstanceCounters:
        """本类型的计数器"""
        tracked = cls._tracked_type or cls
        # 缓存在类上，解释器退出阶段的 __del__ 不再访问模块级注册表
        counters = tracked.__dict__.get("_instance_counters")
        if counters is None:
            counters = track(tracked)
            tracked._instance_counters = counters
        return counters
