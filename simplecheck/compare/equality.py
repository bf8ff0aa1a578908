"""
相等判定

判定规则 (按顺序显式分派):
    类型                        | 判定
    ----------------------------|------------------------------
    bool / numpy.bool_          | 真值相同
    float / numpy.floating      | |actual - expected| < epsilon
    其他                        | expected == actual

浮点容差对 float32 与 float64 统一为 1e-4，严格小于:
差值恰好为 1e-4 判为不相等，NaN 与 NaN 不相等。
"""

from numbers import Real

import numpy as np

from simplecheck.core.config import get_config
from simplecheck.core.errors import TypeConstraintError

BOOL_TYPES = (bool, np.bool_)
FLOAT_TYPES = (float, np.floating)
INTEGRAL_TYPES = (int, np.integer)


def is_bool(value) -> bool:
    """是否为布尔值"""
    return isinstance(value, BOOL_TYPES)


def is_floating(value) -> bool:
    """是否为浮点标量 (Python float 或 numpy 浮点)"""
    return isinstance(value, FLOAT_TYPES)


def is_integral(value) -> bool:
    """是否为整数 (bool 除外)"""
    return isinstance(value, INTEGRAL_TYPES) and not is_bool(value)


def _is_real(value) -> bool:
    return not is_bool(value) and isinstance(value, (Real, np.number)) and not isinstance(
        value, np.complexfloating
    )


def is_close(expected, actual, epsilon: float = None) -> bool:
    """
    浮点比对

    Args:
        expected: 期望值
        actual: 实际值
        epsilon: 容差，默认取全局配置

    Returns:
        |actual - expected| < epsilon
    """
    if epsilon is None:
        epsilon = get_config().epsilon
    # 转为 Python float 计算，inf - inf 得 NaN，与 NaN 一样判为不相等
    try:
        distance = abs(float(actual) - float(expected))
    except OverflowError:
        # 超出 float 范围的整数，按 int 与 float 精确比较
        return bool(expected == actual)
    return distance < epsilon


def is_equal(expected, actual) -> bool:
    """
    判断两个值是否相等

    Args:
        expected: 期望值
        actual: 实际值

    Returns:
        是否相等

    Raises:
        TypeConstraintError: 值的 == 结果没有真值 (例如 numpy 数组)
    """
    if is_bool(expected) and is_bool(actual):
        return bool(expected) == bool(actual)

    if (is_floating(expected) or is_floating(actual)) and _is_real(expected) and _is_real(actual):
        return is_close(expected, actual)

    try:
        return bool(expected == actual)
    except (TypeError, ValueError) as exc:
        raise TypeConstraintError(
            f"values of type {type(actual).__name__!r} have no usable equality: {exc}"
        ) from exc
