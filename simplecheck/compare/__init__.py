"""
比对模块

相等判定、值格式化与单次比对结果。

基本使用:
    from simplecheck.compare import is_equal, render

    is_equal(1.0, 1.00001)    # True, 容差 1e-4
    render(False)             # '"false"'
"""

from .types import ComparisonOutcome
from .equality import (
    is_bool,
    is_close,
    is_equal,
    is_floating,
    is_integral,
)
from .render import render, to_text

__all__ = [
    # 类型
    "ComparisonOutcome",
    # 相等判定
    "is_equal",
    "is_close",
    "is_bool",
    "is_floating",
    "is_integral",
    # 格式化
    "render",
    "to_text",
]
