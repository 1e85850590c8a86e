# -*- coding: utf-8 -*-
"""
Stdout Trace 导出器

用于调试，将 Span 以易读的 JSON 输出到控制台。忽略 endpoint。
"""

import json
import logging
import os
import sys
from typing import Optional, TextIO

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import ConsoleSpanExporter, SpanExporter

from otelconfig.oteltrace.tracer.tracer import TracerExporterBuilder

logger = logging.getLogger(__name__)


def format_span(span: ReadableSpan) -> str:
    """格式化 Span"""
    return json.dumps(
        {
            "name": span.name,
            "trace_id": format(span.context.trace_id, "032x"),
            "span_id": format(span.context.span_id, "016x"),
            "parent_id": format(span.parent.span_id, "016x") if span.parent else None,
            "start_time": span.start_time,
            "end_time": span.end_time,
            "status": span.status.status_code.name,
            "attributes": dict(span.attributes) if span.attributes else {},
            "resource": dict(span.resource.attributes),
        },
        indent=2,
        default=str,
    ) + os.linesep


class StdoutTraceExporterBuilder(TracerExporterBuilder):
    """
    Stdout Trace 导出器构建器

    示例:
        ```python
        builder = StdoutTraceExporterBuilder(pretty_print=True)
        exporter = builder.build()
        ```
    """

    def __init__(
        self,
        pretty_print: bool = True,
        out: Optional[TextIO] = None,
        debug: bool = False,
    ):
        """
        Args:
            pretty_print: 是否格式化输出
            out: 输出流（默认 stdout）
            debug: 是否输出调试日志
        """
        self._pretty_print = pretty_print
        self._out = out or sys.stdout
        self._debug = debug

    def build(self) -> SpanExporter:
        """构建 SpanExporter"""
        if self._pretty_print:
            exporter = ConsoleSpanExporter(out=self._out, formatter=format_span)
        else:
            exporter = ConsoleSpanExporter(out=self._out)

        if self._debug:
            logger.info("Stdout Trace exporter created: pretty_print=%s", self._pretty_print)

        return exporter
