# -*- coding: utf-8 -*-
"""
oteltrace 模块

从环境变量初始化 OpenTelemetry tracing：
- 导出器选择（grpc、http、jaeger、stdout）
- Resource（服务名称优先级）
- 全局 propagator
- 带截止时间的关闭函数

示例:
    ```python
    from otelconfig.oteltrace import TraceOptions, trace_start

    tracer, shutdown = trace_start(TraceOptions(default_service_name="my-service"))
    with tracer.start_as_current_span("main"):
        pass
    shutdown()
    ```
"""

from otelconfig.oteltrace.config import (
    LIBRARY_NAME,
    ExporterKind,
    TraceOptions,
    load_options,
    parse_duration,
    parse_exporter_kind,
)
from otelconfig.oteltrace.errors import (
    EndpointConstructionError,
    ShutdownFailure,
    TracingError,
    UnrecognizedExporterError,
)
from otelconfig.oteltrace.registry import ProviderRegistry, default_registry
from otelconfig.oteltrace.service import trace_start

__all__ = [
    # Config
    "LIBRARY_NAME",
    "ExporterKind",
    "TraceOptions",
    "load_options",
    "parse_duration",
    "parse_exporter_kind",
    # Errors
    "TracingError",
    "UnrecognizedExporterError",
    "EndpointConstructionError",
    "ShutdownFailure",
    # Registry
    "ProviderRegistry",
    "default_registry",
    # Service
    "trace_start",
]
