"""simplecheck

极简的断言与汇总核心: 每次比对立即输出一行结果，进程退出时输出汇总。

基本用法:
    from simplecheck import check

    check(1, 1)
    check(0.1 + 0.2, 0.3)           # 浮点容差 1e-4
    check("abc", "abc")

实例计数:
    from simplecheck import InstanceCounter

    class Widget(InstanceCounter):
        pass

检查块:
    from simplecheck import check_block, run_check_blocks

    @check_block
    def basics():
        check(True)

    run_check_blocks()
"""
__version__ = "1.7.0"

from simplecheck.check import check, check_exception, coerce_expected, verify
from simplecheck.compare import is_equal, render
from simplecheck.core import (
    CheckConfig,
    ConfigError,
    RegistryError,
    SimpleCheckError,
    TypeConstraintError,
    get_config,
    load_config,
    reset_config,
    set_config,
)
from simplecheck.instance import InstanceCounter, InstanceCounters, track, tracked_types
from simplecheck.registry import CheckBlock, check_block, get_registry, run_check_blocks
from simplecheck.report import ResultAggregator, get_aggregator

__all__ = [
    "__version__",
    # check
    "check",
    "verify",
    "check_exception",
    "coerce_expected",
    "is_equal",
    "render",
    # report
    "ResultAggregator",
    "get_aggregator",
    # instance
    "InstanceCounter",
    "InstanceCounters",
    "track",
    "tracked_types",
    # registry
    "CheckBlock",
    "check_block",
    "get_registry",
    "run_check_blocks",
    # config
    "CheckConfig",
    "get_config",
    "set_config",
    "reset_config",
    "load_config",
    # errors
    "SimpleCheckError",
    "TypeConstraintError",
    "ConfigError",
    "RegistryError",
]
