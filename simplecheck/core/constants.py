"""全局常量定义

集中管理比对容差、打印精度等默认值。
"""

# ============================================================
# 比对阈值
# ============================================================

# 浮点比对: |actual - expected| < DEFAULT_EPSILON 视为相等
# float32 / float64 统一使用同一容差，不按精度分级
DEFAULT_EPSILON = 1e-4


# ============================================================
# 输出格式
# ============================================================

# 浮点数打印的有效位数
DEFAULT_PRECISION = 10

SUMMARY_SEPARATOR = "-" * 38

PASS_TEMPLATE = "Test successful! Expected value == actual value (={expected})"
FAIL_TEMPLATE = "Error in test: expected value {expected}, but actual value was {actual}"

INSTANCE_REMAINING_TEMPLATE = (
    "The remaining number of objects of type {name} at the end of the program is {live}"
)
INSTANCE_NOT_ZERO_MARKER = " (NOT zero!)"
INSTANCE_TOTAL_TEMPLATE = "The total number of objects created was {total}"
