# -*- coding: utf-8 -*-
"""
otelconfig logs - 日志安装

- 多种日志格式（glog、text、json）
- 日志中附加当前 Span 的 trace_id / span_id
"""

from .config import (
    LogConfig,
    LogFormatter,
    create_formatter,
    install_logs,
)
from .formatter import GlogFormatter, JsonFormatter, TextFormatter, trace_context_fields

__all__ = [
    "LogConfig",
    "LogFormatter",
    "create_formatter",
    "install_logs",
    "GlogFormatter",
    "JsonFormatter",
    "TextFormatter",
    "trace_context_fields",
]
