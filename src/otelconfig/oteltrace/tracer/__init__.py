# -*- coding: utf-8 -*-
"""
OpenTelemetry Tracer 模块

提供：
- OTLP 导出器（gRPC/HTTP）
- Jaeger 导出器
- Stdout 导出器（调试用）
- TracerProvider 创建
"""

from otelconfig.oteltrace.tracer.tracer import (
    TracerExporterBuilder,
    build_tracer_provider,
    get_tracer,
)
from otelconfig.oteltrace.tracer.exporter import create_exporter, new_exporter_builder

__all__ = [
    "TracerExporterBuilder",
    "build_tracer_provider",
    "get_tracer",
    "create_exporter",
    "new_exporter_builder",
]
