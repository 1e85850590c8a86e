#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
oteltrace 使用示例

    export OTELCONFIG_EXPORTER=stdout
    python examples/oteltrace/main.py

环境变量：
- OTELCONFIG_EXPORTER：grpc（默认）、http、jaeger、stdout
- OTEL_EXPORTER_OTLP_ENDPOINT：collector 地址
- OTEL_PROPAGATORS：tracecontext,baggage（默认）、b3multi ...
- WORK_COUNT：work span 数量（默认 10）
- WORK_DURATION：每个 work 的耗时（默认 200ms）
"""

import logging
import os
import sys
import time

from opentelemetry import trace

from otelconfig.env import env_bool, env_duration, env_int
from otelconfig.logs import LogConfig, install_logs
from otelconfig.oteltrace import TraceOptions, TracingError, trace_start

logger = logging.getLogger(__name__)


def work(i: int, tracer: trace.Tracer, duration: float) -> None:
    """执行一次工作并记录 span"""
    me = f"work {i}"
    with tracer.start_as_current_span(me):
        logger.info("%s: working", me)
        time.sleep(duration)


def main() -> None:
    """主函数"""
    install_logs(LogConfig(formatter="glog", level="info"))

    me = os.path.basename(sys.argv[0])

    options = TraceOptions(
        default_service_name=me,
        disable_tracing=env_bool("DISABLE_TRACING", False),
        debug_logging=True,
    )

    try:
        tracer, shutdown = trace_start(options)
    except TracingError as e:
        logger.critical("tracer: %s", e)
        sys.exit(1)

    count = env_int("WORK_COUNT", 10)
    duration = env_duration("WORK_DURATION", 0.2)

    try:
        with tracer.start_as_current_span("main"):
            for i in range(count):
                work(i, tracer, duration)
    finally:
        shutdown()


if __name__ == "__main__":
    main()
