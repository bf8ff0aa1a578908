"""全局配置模块"""
import threading
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional, Union

import yaml

from simplecheck.core.constants import DEFAULT_EPSILON, DEFAULT_PRECISION
from simplecheck.core.errors import ConfigError
from simplecheck.core.log import logger


@dataclass
class CheckConfig:
    """比对配置"""
    epsilon: float = DEFAULT_EPSILON      # 浮点比对容差 (严格小于)
    precision: int = DEFAULT_PRECISION    # 浮点打印有效位数

    def validate(self):
        """验证配置"""
        if isinstance(self.epsilon, bool) or not isinstance(self.epsilon, (int, float)):
            raise ConfigError(f"epsilon must be a number, got {self.epsilon!r}")
        if not self.epsilon > 0:
            raise ConfigError(f"epsilon must be positive, got {self.epsilon!r}")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise ConfigError(f"precision must be an integer, got {self.precision!r}")
        if self.precision < 1:
            raise ConfigError(f"precision must be >= 1, got {self.precision}")


# 全局配置实例 (线程安全)
_config_lock = threading.Lock()
_global_config: Optional[CheckConfig] = None


def get_config() -> CheckConfig:
    """获取全局配置"""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        if _global_config is None:
            _global_config = CheckConfig()
        return _global_config


def set_config(epsilon: float = None, precision: int = None) -> CheckConfig:
    """
    设置全局配置

    Args:
        epsilon: 浮点比对容差
        precision: 浮点打印有效位数

    Example:
        set_config(epsilon=1e-6)
    """
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        candidate = CheckConfig(**asdict(_global_config)) if _global_config else CheckConfig()
        updates = {"epsilon": epsilon, "precision": precision}
        for key, value in updates.items():
            if value is not None:
                setattr(candidate, key, value)

        # 校验失败时保留原配置
        candidate.validate()
        _global_config = candidate
        return _global_config


def reset_config():
    """重置为默认配置"""
    global _global_config  # pylint: disable=global-statement
    with _config_lock:
        _global_config = CheckConfig()


def load_config(path: Union[str, Path]) -> CheckConfig:
    """
    从 YAML 文件加载配置并设为全局配置

    文件内容为映射，支持的键: epsilon, precision

    Args:
        path: YAML 文件路径

    Returns:
        生效后的 CheckConfig

    Raises:
        ConfigError: 文件不存在、解析失败或包含未知键
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    unknown = set(raw) - {"epsilon", "precision"}
    if unknown:
        raise ConfigError(f"Unknown config keys in {path}: {sorted(unknown)}")

    logger.debug(f"loading config from {path}: {raw}")
    return set_config(epsilon=raw.get("epsilon"), precision=raw.get("precision"))
