# -*- coding: utf-8 -*-
"""
日志格式化器

- GlogFormatter：[LEVEL] [DATETIME] [PID] [FILE:LINE](FUNC) MESSAGE trace_id=... span_id=...
- TextFormatter：DATETIME - NAME - LEVEL - MESSAGE
- JsonFormatter：JSON

GlogFormatter 和 JsonFormatter 可附加当前 Span 的 trace_id / span_id。
"""

import json
import logging
import os
from datetime import datetime
from typing import Dict

from opentelemetry import trace

_PID = os.getpid()


def trace_context_fields() -> Dict[str, str]:
    """当前 Span 的 trace_id / span_id，没有有效 Span 时返回空字典"""
    ctx = trace.get_current_span().get_span_context()
    if not ctx.is_valid:
        return {}
    return {
        "trace_id": format(ctx.trace_id, "032x"),
        "span_id": format(ctx.span_id, "016x"),
    }


class GlogFormatter(logging.Formatter):
    """
    Google Log 格式化器

    示例：
    [INFO] [20240917 23:00:00.123456] [12345] [main.py:10](main) working trace_id=4bf9... span_id=00f0...
    """

    LEVEL_MAP = {
        logging.DEBUG: "DEBU",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERRO",
        logging.CRITICAL: "FATA",
    }

    COLORS = {
        logging.DEBUG: "\033[37m",
        logging.INFO: "\033[36m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        datefmt: str = "%Y%m%d %H:%M:%S",
        enable_colors: bool = False,
        report_caller: bool = True,
        with_trace_context: bool = True,
    ):
        super().__init__()
        self.datefmt = datefmt
        self.enable_colors = enable_colors
        self.report_caller = report_caller
        self.with_trace_context = with_trace_context

    def format(self, record: logging.LogRecord) -> str:
        level = f"[{self.LEVEL_MAP.get(record.levelno, 'UNKN')}]"
        if self.enable_colors:
            level = f"{self.COLORS.get(record.levelno, '')}{level}{self.RESET}"

        dt = datetime.fromtimestamp(record.created)
        parts = [
            level,
            f"[{dt.strftime(self.datefmt)}.{dt.microsecond:06d}]",
            f"[{_PID}]",
        ]

        if self.report_caller:
            filename = os.path.basename(record.pathname)
            parts.append(f"[{filename}:{record.lineno}]({record.funcName})")

        parts.append(record.getMessage())

        if self.with_trace_context:
            parts.extend(f"{k}={v}" for k, v in trace_context_fields().items())

        text = " ".join(parts)
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text


class TextFormatter(logging.Formatter):
    """文本格式化器"""

    def __init__(self, datefmt: str = "%Y-%m-%d %H:%M:%S", report_caller: bool = True):
        if report_caller:
            fmt = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
        else:
            fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        super().__init__(fmt=fmt, datefmt=datefmt)


class JsonFormatter(logging.Formatter):
    """JSON 格式化器"""

    def __init__(self, report_caller: bool = True, with_trace_context: bool = True):
        super().__init__()
        self.report_caller = report_caller
        self.with_trace_context = with_trace_context

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        if self.report_caller:
            log_data["file"] = record.pathname
            log_data["line"] = record.lineno
            log_data["function"] = record.funcName

        if self.with_trace_context:
            log_data.update(trace_context_fields())

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)
