# -*- coding: utf-8 -*-
"""
OpenTelemetry Tracer 核心实现

提供：
- 导出器构建器接口定义
- TracerProvider 创建（Resource + BatchSpanProcessor）
"""

import logging
from abc import ABC, abstractmethod

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter

from otelconfig.oteltrace.config import LIBRARY_NAME
from otelconfig.oteltrace.resource import create_resource

logger = logging.getLogger(__name__)


class TracerExporterBuilder(ABC):
    """
    Tracer 导出器构建器接口

    所有导出器实现都需要实现此接口。
    构建时不得进行网络 I/O（连接延迟建立）。
    """

    @abstractmethod
    def build(self) -> SpanExporter:
        """
        构建 SpanExporter

        Returns:
            SpanExporter 实例
        """


def build_tracer_provider(
    default_service_name: str,
    exporter: SpanExporter,
    debug: bool = False,
) -> TracerProvider:
    """
    创建 TracerProvider

    服务名称优先级（从高到低）：
    1. OTEL_SERVICE_NAME=mysrv
    2. OTEL_RESOURCE_ATTRIBUTES=service.name=mysrv
    3. default_service_name="mysrv"

    Args:
        default_service_name: 默认服务名称
        exporter: SpanExporter 实例
        debug: 是否输出调试日志

    Returns:
        TracerProvider 实例
    """
    if debug:
        logger.info(
            "build_tracer_provider: service='%s' exporter=%s",
            default_service_name,
            type(exporter).__name__,
        )

    resource = create_resource(default_service_name, debug=debug)

    provider = TracerProvider(resource=resource)
    # 生产环境始终使用批量导出
    provider.add_span_processor(BatchSpanProcessor(exporter))

    return provider


def get_tracer(provider: trace.TracerProvider) -> trace.Tracer:
    """
    获取本库名称标识的 Tracer

    示例:
        ```python
        tracer = get_tracer(provider)
        with tracer.start_as_current_span("my-operation") as span:
            span.set_attribute("key", "value")
        ```
    """
    return provider.get_tracer(LIBRARY_NAME)
