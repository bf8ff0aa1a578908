"""异常定义

比对失败不是异常: 失败会被计数并打印，从不抛出。
这里只定义调用方误用时抛出的异常。
"""


class SimpleCheckError(Exception):
    """simplecheck 所有异常的基类"""


class TypeConstraintError(SimpleCheckError, TypeError):
    """值的类型不支持比对 (无相等语义，或期望值需要窄化转换)"""


class ConfigError(SimpleCheckError, ValueError):
    """配置值非法或配置文件无法解析"""


class RegistryError(SimpleCheckError, KeyError):
    """检查块注册冲突 (重名)"""
