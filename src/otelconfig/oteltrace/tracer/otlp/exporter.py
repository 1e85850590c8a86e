# -*- coding: utf-8 -*-
"""
OTLP Trace 导出器

支持：
- gRPC 协议（默认 localhost:4317）
- HTTP 协议（默认 localhost:4318）

未指定 endpoint 时由 OTLP 客户端自行解析
（OTEL_EXPORTER_OTLP_TRACES_ENDPOINT / OTEL_EXPORTER_OTLP_ENDPOINT / 内置默认值）。
"""

import logging
from typing import Optional

from opentelemetry.sdk.trace.export import SpanExporter

from otelconfig.oteltrace.tracer.tracer import TracerExporterBuilder

logger = logging.getLogger(__name__)

HTTP_TRACES_PATH = "/v1/traces"


class OTLPGrpcTraceExporterBuilder(TracerExporterBuilder):
    """
    OTLP gRPC Trace 导出器构建器

    示例:
        ```python
        builder = OTLPGrpcTraceExporterBuilder(endpoint="http://jaeger-collector:4317")
        exporter = builder.build()
        ```
    """

    def __init__(self, endpoint: str = "", insecure: bool = True, debug: bool = False):
        """
        Args:
            endpoint: OTLP 端点地址，空字符串表示使用客户端默认解析
            insecure: 是否禁用 TLS
            debug: 是否输出调试日志
        """
        self._endpoint = endpoint
        self._insecure = insecure
        self._debug = debug

    @property
    def endpoint(self) -> Optional[str]:
        """传给导出器的 endpoint（None 表示由客户端解析）"""
        return self._endpoint or None

    def build(self) -> SpanExporter:
        """构建 SpanExporter"""
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )

        exporter = OTLPSpanExporter(endpoint=self.endpoint, insecure=self._insecure)

        if self._debug:
            logger.info(
                "OTLP gRPC Trace exporter created: endpoint=%s, insecure=%s",
                self.endpoint or "<default>",
                self._insecure,
            )

        return exporter


class OTLPHttpTraceExporterBuilder(TracerExporterBuilder):
    """
    OTLP HTTP Trace 导出器构建器

    指定 endpoint 时自动补全 scheme 和 /v1/traces 路径。
    """

    def __init__(self, endpoint: str = "", insecure: bool = True, debug: bool = False):
        """
        Args:
            endpoint: OTLP 端点地址，空字符串表示使用客户端默认解析
            insecure: 是否禁用 TLS（仅影响补全的 scheme）
            debug: 是否输出调试日志
        """
        self._endpoint = endpoint
        self._insecure = insecure
        self._debug = debug

    @property
    def endpoint(self) -> Optional[str]:
        """传给导出器的 endpoint（None 表示由客户端解析）"""
        if not self._endpoint:
            return None

        endpoint = self._endpoint
        if not endpoint.startswith(("http://", "https://")):
            scheme = "http" if self._insecure else "https"
            endpoint = f"{scheme}://{endpoint}"
        endpoint = endpoint.rstrip("/")
        if not endpoint.endswith(HTTP_TRACES_PATH):
            endpoint = f"{endpoint}{HTTP_TRACES_PATH}"
        return endpoint

    def build(self) -> SpanExporter:
        """构建 SpanExporter"""
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import (
            OTLPSpanExporter,
        )

        exporter = OTLPSpanExporter(endpoint=self.endpoint)

        if self._debug:
            logger.info(
                "OTLP HTTP Trace exporter created: endpoint=%s",
                self.endpoint or "<default>",
            )

        return exporter
