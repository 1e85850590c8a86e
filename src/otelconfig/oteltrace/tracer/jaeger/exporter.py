# -*- coding: utf-8 -*-
"""
Jaeger Trace 导出器

通过 HTTP（Thrift）直接上报到 Jaeger collector。
需要安装 jaeger 扩展：pip install otelconfig[jaeger]
"""

import logging
import os
import posixpath
from urllib.parse import urlsplit, urlunsplit

from opentelemetry.sdk.trace.export import SpanExporter

from otelconfig.oteltrace.config import ENV_JAEGER_ENDPOINT
from otelconfig.oteltrace.errors import EndpointConstructionError
from otelconfig.oteltrace.tracer.tracer import TracerExporterBuilder

logger = logging.getLogger(__name__)

JAEGER_TRACES_PATH = "/api/traces"
DEFAULT_COLLECTOR_ENDPOINT = "http://localhost:14268/api/traces"


def jaeger_collector_endpoint(base: str) -> str:
    """
    由 base URL 推导 collector 地址

    "http://jaeger-collector:14268" → "http://jaeger-collector:14268/api/traces"

    Raises:
        EndpointConstructionError: base 不是合法的 http(s) URL
    """
    try:
        parts = urlsplit(base.strip())
        # 非法端口在访问 port 时才会报错
        parts.port
    except ValueError as e:
        raise EndpointConstructionError(base, str(e)) from e

    if parts.scheme not in ("http", "https"):
        raise EndpointConstructionError(base, "scheme must be http or https")
    if not parts.hostname:
        raise EndpointConstructionError(base, "missing host")

    segments = [s for s in (parts.path.strip("/"), JAEGER_TRACES_PATH.strip("/")) if s]
    path = posixpath.normpath("/" + "/".join(segments))

    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def default_collector_endpoint() -> str:
    """Jaeger 导出器内置的 collector 地址"""
    return os.environ.get(ENV_JAEGER_ENDPOINT) or DEFAULT_COLLECTOR_ENDPOINT


class JaegerTraceExporterBuilder(TracerExporterBuilder):
    """
    Jaeger Trace 导出器构建器

    示例:
        ```python
        builder = JaegerTraceExporterBuilder(endpoint="http://jaeger-collector:14268")
        builder.collector_endpoint  # http://jaeger-collector:14268/api/traces
        exporter = builder.build()
        ```
    """

    def __init__(self, endpoint: str = "", debug: bool = False):
        """
        Args:
            endpoint: collector base URL，空字符串表示使用内置默认地址
            debug: 是否输出调试日志

        Raises:
            EndpointConstructionError: endpoint 非法
        """
        if endpoint:
            self._collector_endpoint = jaeger_collector_endpoint(endpoint)
            if debug:
                logger.info("jaeger endpoint: %s", self._collector_endpoint)
        else:
            self._collector_endpoint = default_collector_endpoint()
        self._debug = debug

    @property
    def collector_endpoint(self) -> str:
        """collector 地址"""
        return self._collector_endpoint

    def build(self) -> SpanExporter:
        """构建 SpanExporter"""
        from opentelemetry.exporter.jaeger.thrift import JaegerExporter

        exporter = JaegerExporter(collector_endpoint=self._collector_endpoint)

        if self._debug:
            logger.info(
                "Jaeger Trace exporter created: collector_endpoint=%s",
                self._collector_endpoint,
            )

        return exporter
