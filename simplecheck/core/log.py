"""日志模块

仅用于内部诊断信息，全部写到 stderr: stdout 只留给比对结果行与汇总。
默认级别为 WARN。
"""
import sys
from datetime import datetime
from enum import IntEnum


class Level(IntEnum):
    """日志级别枚举"""
    DEBUG = 10
    WARN = 30
    ERROR = 40

DEBUG, WARN, ERROR = Level.DEBUG, Level.WARN, Level.ERROR

_level = WARN
_module = "simplecheck"

def set_level(level: Level):
    """设置日志级别"""
    global _level  # pylint: disable=global-statement
    _level = level

def get_level() -> Level:
    """获取当前日志级别"""
    return _level

def _log(level: Level, module: str, msg: str):
    if level < _level:
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    line = f"[{ts}] [{level.name}] [{module}] {msg}"
    print(line, file=sys.stderr)

class Logger:
    """日志记录器"""
    def __init__(self, module: str = ""):
        self.module = module or _module

    def debug(self, msg: str):
        """记录 DEBUG 级别日志"""
        _log(DEBUG, self.module, msg)

    def warn(self, msg: str):
        """记录 WARN 级别日志"""
        _log(WARN, self.module, msg)

    def error(self, msg: str):
        """记录 ERROR 级别日志"""
        _log(ERROR, self.module, msg)

logger = Logger()
