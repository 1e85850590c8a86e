# -*- coding: utf-8 -*-
"""
环境变量读取工具

变量为空或无法解析时返回默认值，选用的值会记录到日志。
"""

import logging
import os
from typing import Callable, TypeVar

from otelconfig.oteltrace.config import parse_duration

logger = logging.getLogger(__name__)

T = TypeVar("T")

_TRUE = ("1", "t", "true", "y", "yes", "on")
_FALSE = ("0", "f", "false", "n", "no", "off")


def parse_bool(value: str) -> bool:
    """解析布尔值"""
    lower = value.strip().lower()
    if lower in _TRUE:
        return True
    if lower in _FALSE:
        return False
    raise ValueError(f"invalid boolean: {value!r}")


def _env(name: str, default: T, parse: Callable[[str], T]) -> T:
    raw = os.environ.get(name, "")
    if raw:
        try:
            value = parse(raw)
        except ValueError as e:
            logger.warning("bad %s=[%s]: error: %s", name, raw, e)
        else:
            logger.info("%s=[%s] using %s=%s default=%s", name, raw, name, value, default)
            return value
    logger.info("%s=[%s] using %s=%s default=%s", name, raw, name, default, default)
    return default


def env_str(name: str, default: str = "") -> str:
    """读取字符串"""
    return _env(name, default, str)


def env_bool(name: str, default: bool = False) -> bool:
    """读取布尔值"""
    return _env(name, default, parse_bool)


def env_int(name: str, default: int = 0) -> int:
    """读取整数"""
    return _env(name, default, int)


def env_duration(name: str, default: float = 0.0) -> float:
    """读取时间（秒），支持 "5s"、"100ms" 等格式"""
    return _env(name, default, parse_duration)
