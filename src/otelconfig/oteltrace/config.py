# -*- coding: utf-8 -*-
"""
oteltrace 配置模块

提供：
- TraceOptions：trace_start 的启动参数
- ExporterKind：导出器类型
- 环境变量名常量
- 配置加载（YAML 文件 / 字典 / 环境变量）
"""

import logging
import math
import os
import re
from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from otelconfig.oteltrace.errors import UnrecognizedExporterError

logger = logging.getLogger(__name__)

# ========== 环境变量 ==========
ENV_EXPORTER = "OTELCONFIG_EXPORTER"
ENV_OTLP_ENDPOINT = "OTEL_EXPORTER_OTLP_ENDPOINT"
ENV_SERVICE_NAME = "OTEL_SERVICE_NAME"
ENV_RESOURCE_ATTRIBUTES = "OTEL_RESOURCE_ATTRIBUTES"
ENV_PROPAGATORS = "OTEL_PROPAGATORS"
ENV_JAEGER_ENDPOINT = "OTEL_EXPORTER_JAEGER_ENDPOINT"

# Tracer 名称（标识本库）
LIBRARY_NAME = "github.com/udhos/otelconfig"

DEFAULT_SHUTDOWN_TIMEOUT = "5s"

_DURATION_UNITS = {
    "h": 3600.0,
    "m": 60.0,
    "s": 1.0,
    "ms": 0.001,
    "us": 0.000001,
    "µs": 0.000001,
    "ns": 0.000000001,
}

_DURATION_RE = re.compile(r"(\d+(?:\.\d+)?)(h|ms|us|µs|ns|m|s)")


def get_env(caller: str, key: str, debug: bool = False) -> str:
    """
    读取环境变量

    debug 为 True 时以 INFO 级别记录读取到的值，否则记录为 DEBUG。
    """
    value = os.environ.get(key, "")
    level = logging.INFO if debug else logging.DEBUG
    logger.log(level, "%s: %s='%s'", caller, key, value)
    return value


def parse_duration(value: Union[str, int, float]) -> float:
    """
    解析时间字符串为秒数

    支持格式：
    - 纯数字：直接作为秒数
    - "5s"、"100ms"、"250us"
    - "1m30s"、"1h"

    Args:
        value: 时间值

    Returns:
        秒数（float）

    Raises:
        ValueError: 无法解析
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    if not text:
        raise ValueError("invalid duration: empty string")

    try:
        return float(text)
    except ValueError:
        pass

    pos = 0
    total = 0.0
    for match in _DURATION_RE.finditer(text):
        if match.start() != pos:
            break
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()

    if pos != len(text):
        raise ValueError(f"invalid duration: {value!r}")

    return total


class ExporterKind(str, Enum):
    """导出器类型"""
    GRPC = "grpc"
    HTTP = "http"
    JAEGER = "jaeger"
    STDOUT = "stdout"


def parse_exporter_kind(token: str) -> ExporterKind:
    """
    解析导出器类型

    空字符串等价于 grpc。

    Raises:
        UnrecognizedExporterError: 未知类型
    """
    if token == "":
        return ExporterKind.GRPC
    try:
        return ExporterKind(token)
    except ValueError:
        raise UnrecognizedExporterError(token) from None


class TraceOptions(BaseModel):
    """trace_start 启动参数"""
    model_config = ConfigDict(frozen=True)

    default_service_name: str = Field(default="", description="默认服务名称")
    disable_tracing: bool = Field(default=False, description="使用 NoOp TracerProvider")
    disable_propagation: bool = Field(default=False, description="不安装 propagator")
    debug_logging: bool = Field(default=False, description="输出调试日志")
    shutdown_timeout: str = Field(
        default=DEFAULT_SHUTDOWN_TIMEOUT,
        description="关闭 TracerProvider 的超时时间",
    )

    @field_validator("shutdown_timeout", mode="before")
    @classmethod
    def _check_shutdown_timeout(cls, value: Any) -> str:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = f"{value}s"
        seconds = parse_duration(value)
        if not math.isfinite(seconds) or seconds <= 0:
            raise ValueError("shutdown_timeout must be a positive finite duration")
        return value

    @property
    def shutdown_timeout_seconds(self) -> float:
        """获取关闭超时秒数"""
        return parse_duration(self.shutdown_timeout)


def load_options(
    config_file: Optional[str] = None,
    config_dict: Optional[Dict[str, Any]] = None,
    env_prefix: str = "",
) -> TraceOptions:
    """
    加载 TraceOptions

    优先级：环境变量 > config_dict > config_file > 默认值

    Args:
        config_file: YAML 配置文件路径
        config_dict: 配置字典
        env_prefix: 环境变量前缀

    Returns:
        TraceOptions 实例
    """
    data: Dict[str, Any] = {}

    if config_file and os.path.exists(config_file):
        import yaml

        with open(config_file, "r", encoding="utf-8") as f:
            file_data = yaml.safe_load(f) or {}
        data.update(_root_section(file_data))

    if config_dict:
        data.update(_root_section(config_dict))

    if env_prefix:
        _override_from_env(data, env_prefix)

    return TraceOptions(**data)


def _root_section(data: Dict[str, Any]) -> Dict[str, Any]:
    """支持 oteltrace 或 trace 作为根键"""
    return data.get("oteltrace") or data.get("trace") or data


def _override_from_env(data: Dict[str, Any], prefix: str) -> None:
    """从环境变量覆盖配置"""
    prefix = prefix.upper()

    for field_name in TraceOptions.model_fields:
        value = os.environ.get(f"{prefix}_{field_name.upper()}")
        if value is not None:
            # bool 字段由 pydantic 解析 "true"/"1"/"yes" 等取值
            data[field_name] = value
