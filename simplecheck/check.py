"""
比对入口

测试代码使用的公共接口:

    from simplecheck import check, check_exception

    check(1, 1)                  # 通过
    check(1.5, 1)                # 失败: 1 扩展为 1.0 后比对
    check("abc", "cde", "名字")  # 失败，输出行末尾附 [名字]
    check(flag)                  # 等价于 check(flag, True)
    check_exception(int, "x", expected_exception=ValueError)

期望值先转换到实际值的类型，不允许窄化转换:
    实际值类型 | 可接受的期望值
    -----------|-------------------------------
    bool       | bool
    浮点       | 浮点、整数 (整数扩展为浮点)、bool
    整数       | 整数、bool (浮点为窄化，拒绝)
    str        | str
    Enum       | 同一 Enum 的成员
    其他       | 原样传入，由 == 判定
"""

from enum import Enum
from typing import Callable, Tuple, Type, Union

import numpy as np

from simplecheck.compare import is_bool, is_floating, is_integral
from simplecheck.core.errors import TypeConstraintError
from simplecheck.report import get_aggregator

_MISSING = object()


def _reject(actual, expected, reason: str) -> TypeConstraintError:
    return TypeConstraintError(
        f"cannot compare {type(actual).__name__} with {type(expected).__name__}: {reason}"
    )


def coerce_expected(actual, expected):
    """
    把期望值转换到实际值的类型

    Args:
        actual: 实际值
        expected: 期望值

    Returns:
        转换后的期望值

    Raises:
        TypeConstraintError: 需要窄化转换或类型不兼容
    """
    if is_bool(actual):
        if not is_bool(expected):
            raise _reject(actual, expected, "expected value must be a bool")
        return bool(expected)

    if isinstance(actual, Enum):
        if not isinstance(expected, type(actual)):
            raise _reject(actual, expected, f"expected value must be a {type(actual).__name__} member")
        return expected

    if is_floating(actual):
        if not (is_floating(expected) or is_integral(expected) or is_bool(expected)):
            raise _reject(actual, expected, "expected value must be numeric")
        try:
            with np.errstate(over="raise"):
                converted = type(actual)(expected)
        except (OverflowError, FloatingPointError) as exc:
            raise _reject(actual, expected, str(exc)) from exc
        # 有限值转换后变为 inf 属于超出范围
        if np.isinf(converted) and not np.isinf(float(expected)):
            raise _reject(actual, expected, f"value out of range for {type(actual).__name__}")
        return converted

    if is_integral(actual):
        if is_floating(expected):
            raise _reject(actual, expected, "narrowing conversion from floating point")
        if not (is_integral(expected) or is_bool(expected)):
            raise _reject(actual, expected, "expected value must be an integer")
        return int(expected)

    if isinstance(actual, str):
        if not isinstance(expected, str):
            raise _reject(actual, expected, "expected value must be a str")
        return expected

    return expected


def _truth(actual) -> bool:
    try:
        return bool(actual)
    except (TypeError, ValueError) as exc:
        raise TypeConstraintError(
            f"value of type {type(actual).__name__!r} has no truth value: {exc}"
        ) from exc


def verify(actual, expected=_MISSING, message: str = None) -> bool:
    """
    与 check 相同，但返回比对结果

    Args:
        actual: 实际值
        expected: 期望值，省略时检查 actual 为真
        message: 附加在输出行末尾的说明

    Returns:
        是否相等
    """
    if expected is _MISSING:
        actual, expected = _truth(actual), True
    expected = coerce_expected(actual, expected)
    return get_aggregator().check(expected, actual, message)


def check(actual, expected=_MISSING, message: str = None) -> None:
    """
    检查实际值等于期望值，立即输出结果行并计入汇总

    比对失败不会抛出异常，只会计数和输出。
    """
    verify(actual, expected, message)


def check_exception(
    func: Callable,
    *args,
    expected_exception: Union[Type[BaseException], Tuple[Type[BaseException], ...]] = Exception,
    message: str = None,
    **kwargs,
) -> None:
    """
    检查调用 func 会抛出 expected_exception

    抛出其他类型的异常时原样向上传播。

    Args:
        func: 被调用的函数
        *args: 传给 func 的位置参数
        expected_exception: 期望的异常类型
        message: 附加在输出行末尾的说明
        **kwargs: 传给 func 的关键字参数
    """
    try:
        func(*args, **kwargs)
    except expected_exception:
        raised = True
    else:
        raised = False
    check(raised, True, message)
