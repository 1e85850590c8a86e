# -*- coding: utf-8 -*-
"""
日志配置模块

支持：
- 多种日志格式（glog、text、json）
- 多种日志级别
- 在日志中附加 trace_id / span_id
"""

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .formatter import GlogFormatter, JsonFormatter, TextFormatter


class LogFormatter(str, Enum):
    """日志格式枚举"""
    GLOG = "glog"
    TEXT = "text"
    JSON = "json"


# 日志级别映射
LEVEL_MAP = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "warn": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
}


@dataclass
class LogConfig:
    """
    日志配置

    Attributes:
        formatter: 日志格式（glog、text、json）
        level: 日志级别
        report_caller: 是否报告调用者信息
        enable_colors: 是否启用颜色输出（仅 glog）
        with_trace_context: 是否附加 trace_id / span_id（glog、json）
    """
    formatter: str = "glog"
    level: str = "info"
    report_caller: bool = True
    enable_colors: bool = False
    with_trace_context: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogConfig":
        """从字典创建配置"""
        return cls(
            formatter=data.get("formatter", "glog"),
            level=data.get("level", "info"),
            report_caller=data.get("report_caller", True),
            enable_colors=data.get("enable_colors", False),
            with_trace_context=data.get("with_trace_context", True),
        )


def create_formatter(config: LogConfig) -> logging.Formatter:
    """根据配置创建格式化器"""
    name = config.formatter.lower()
    if name == LogFormatter.GLOG.value:
        return GlogFormatter(
            enable_colors=config.enable_colors,
            report_caller=config.report_caller,
            with_trace_context=config.with_trace_context,
        )
    if name == LogFormatter.JSON.value:
        return JsonFormatter(
            report_caller=config.report_caller,
            with_trace_context=config.with_trace_context,
        )
    return TextFormatter(report_caller=config.report_caller)


def install_logs(config: Optional[LogConfig] = None) -> None:
    """
    安装日志配置

    替换根日志记录器的处理器，输出到 stdout。

    Args:
        config: 日志配置，如果为 None 则使用默认配置
    """
    if config is None:
        config = LogConfig()

    level = LEVEL_MAP.get(config.level.lower(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(create_formatter(config))
    root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        "logs installed: level=%s, formatter=%s", config.level, config.formatter
    )
