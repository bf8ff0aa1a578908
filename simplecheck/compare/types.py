"""
比对结果类型定义
"""

from dataclasses import dataclass
from typing import Optional

from simplecheck.core.constants import FAIL_TEMPLATE, PASS_TEMPLATE


@dataclass(frozen=True)
class ComparisonOutcome:
    """
    单次比对结果

    只在一次 check 调用内存在: 构造、输出、丢弃，不做保存。
    expected / actual 为 render() 之后的字符串。
    """

    expected: str
    actual: str
    passed: bool
    message: Optional[str] = None

    def line(self) -> str:
        """生成输出行 (不含换行符)"""
        if self.passed:
            text = PASS_TEMPLATE.format(expected=self.expected)
        else:
            text = FAIL_TEMPLATE.format(expected=self.expected, actual=self.actual)
        if self.message:
            text += f" [{self.message}]"
        return text
