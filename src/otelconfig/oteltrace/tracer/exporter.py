# -*- coding: utf-8 -*-
"""
导出器选择

OTELCONFIG_EXPORTER → ExporterKind → TracerExporterBuilder → SpanExporter
"""

import logging

from opentelemetry.sdk.trace.export import SpanExporter

from otelconfig.oteltrace.config import ExporterKind, parse_exporter_kind
from otelconfig.oteltrace.tracer.jaeger.exporter import JaegerTraceExporterBuilder
from otelconfig.oteltrace.tracer.otlp.exporter import (
    OTLPGrpcTraceExporterBuilder,
    OTLPHttpTraceExporterBuilder,
)
from otelconfig.oteltrace.tracer.stdout.exporter import StdoutTraceExporterBuilder
from otelconfig.oteltrace.tracer.tracer import TracerExporterBuilder

logger = logging.getLogger(__name__)


def new_exporter_builder(
    kind: ExporterKind,
    endpoint: str = "",
    debug: bool = False,
) -> TracerExporterBuilder:
    """
    根据导出器类型创建构建器

    grpc / http 不传 endpoint，由 OTLP 客户端按自身规则解析
    （OTEL_EXPORTER_OTLP_TRACES_ENDPOINT 优先于 OTEL_EXPORTER_OTLP_ENDPOINT）；
    endpoint 只用于 jaeger。

    Args:
        kind: 导出器类型
        endpoint: OTEL_EXPORTER_OTLP_ENDPOINT 的值（仅 jaeger 使用）
        debug: 是否输出调试日志

    Raises:
        EndpointConstructionError: jaeger endpoint 非法
    """
    if kind is ExporterKind.GRPC:
        return OTLPGrpcTraceExporterBuilder(insecure=True, debug=debug)
    elif kind is ExporterKind.HTTP:
        return OTLPHttpTraceExporterBuilder(insecure=True, debug=debug)
    elif kind is ExporterKind.JAEGER:
        return JaegerTraceExporterBuilder(endpoint=endpoint, debug=debug)
    elif kind is ExporterKind.STDOUT:
        return StdoutTraceExporterBuilder(debug=debug)

    raise AssertionError(f"unhandled exporter kind: {kind!r}")


def create_exporter(token: str, endpoint: str = "", debug: bool = False) -> SpanExporter:
    """
    创建 SpanExporter

    Args:
        token: 导出器类型（""、grpc、http、jaeger、stdout）
        endpoint: OTEL_EXPORTER_OTLP_ENDPOINT 的值（仅 jaeger 使用）
        debug: 是否输出调试日志

    Raises:
        UnrecognizedExporterError: 未知的导出器类型
        EndpointConstructionError: jaeger endpoint 非法
    """
    kind = parse_exporter_kind(token)
    if debug:
        logger.info("create_exporter: token='%s' kind=%s", token, kind.value)
    return new_exporter_builder(kind, endpoint=endpoint, debug=debug).build()
