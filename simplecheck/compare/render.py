"""
值格式化

把任意可比对的值转成带双引号的字符串，用于输出行。
"""

from enum import Enum

from simplecheck.core.config import get_config

from .equality import is_bool, is_floating, is_integral


def to_text(value, precision: int = None) -> str:
    """
    值的文本表示 (不带引号)

    - bool: "true" / "false"
    - Enum: 底层值，不输出成员名
    - 浮点: precision 位有效数字
    - 整数: 完整输出

    Args:
        value: 任意值
        precision: 浮点有效位数，默认取全局配置

    Returns:
        文本，不会抛出异常
    """
    if is_bool(value):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return to_text(value.value, precision)
    if is_floating(value):
        if precision is None:
            precision = get_config().precision
        return format(float(value), f".{precision}g")
    if is_integral(value):
        return str(int(value))
    try:
        return str(value)
    except Exception:  # pylint: disable=broad-except
        return object.__repr__(value)


def render(value, precision: int = None) -> str:
    """带双引号的文本表示，如 render(True) == '"true"'"""
    return f'"{to_text(value, precision)}"'
