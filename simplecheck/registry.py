"""检查块注册表

把需要在主流程之前执行的检查代码登记为命名块，再显式调用
run_check_blocks() 按登记顺序执行。每个块只执行一次。

    from simplecheck import check, check_block, run_check_blocks

    @check_block
    def arithmetic():
        check(1 + 1, 2)

    @check_block("strings")
    def _():
        check("a" * 3, "aaa")

    run_check_blocks()

跨模块的登记顺序取决于模块导入顺序，不应依赖。
"""
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from simplecheck.core.errors import RegistryError
from simplecheck.core.log import logger


@dataclass
class CheckBlock:
    """检查块"""

    name: str
    func: Callable[[], None]
    ran: bool = False


class CheckBlockRegistry:
    """检查块注册表，保持登记顺序"""

    def __init__(self):
        self._blocks: Dict[str, CheckBlock] = {}
        self._lock = threading.Lock()

    def register(self, func: Callable[[], None], name: str = None) -> CheckBlock:
        """
        登记一个无参数的可调用对象

        Args:
            func: 检查代码
            name: 块名，默认为 "<模块>.<限定名>"

        Raises:
            RegistryError: 块名已存在
        """
        name = name or f"{func.__module__}.{func.__qualname__}"
        with self._lock:
            if name in self._blocks:
                raise RegistryError(f"check block {name!r} is already registered")
            block = CheckBlock(name=name, func=func)
            self._blocks[name] = block
        logger.debug(f"registered check block {name}")
        return block

    def get(self, name: str) -> Optional[CheckBlock]:
        """按名称获取块"""
        return self._blocks.get(name)

    def names(self) -> List[str]:
        """所有块名 (登记顺序)"""
        with self._lock:
            return list(self._blocks)

    def pending(self) -> List[CheckBlock]:
        """尚未执行的块"""
        with self._lock:
            return [b for b in self._blocks.values() if not b.ran]

    def run(self) -> int:
        """
        按登记顺序执行尚未执行的块

        块内抛出的异常记录日志后继续向上传播，该块不会被再次执行。

        Returns:
            本次执行的块数
        """
        count = 0
        for block in self.pending():
            with self._lock:
                if block.ran:
                    continue
                block.ran = True
            logger.debug(f"running check block {block.name}")
            try:
                block.func()
            except Exception as exc:
                logger.error(f"check block {block.name} raised {type(exc).__name__}: {exc}")
                raise
            count += 1
        return count

    def clear(self) -> None:
        """清空注册表"""
        with self._lock:
            self._blocks.clear()

    def __len__(self) -> int:
        return len(self._blocks)


# 全局注册表
_registry = CheckBlockRegistry()


def get_registry() -> CheckBlockRegistry:
    """获取全局注册表"""
    return _registry


def check_block(name_or_func=None):
    """
    装饰器: 登记检查块

    可直接使用 @check_block，也可指定名称 @check_block("name")。
    返回原函数。
    """
    if callable(name_or_func):
        _registry.register(name_or_func)
        return name_or_func

    def decorator(func):
        _registry.register(func, name=name_or_func)
        return func

    return decorator


def run_check_blocks() -> int:
    """执行全局注册表中尚未执行的块，返回执行的块数"""
    return _registry.run()
