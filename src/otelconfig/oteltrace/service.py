# -*- coding: utf-8 -*-
"""
Tracing 初始化入口

运行时可通过以下环境变量定制：

    # Jaeger
    export OTELCONFIG_EXPORTER=jaeger
    export OTEL_PROPAGATORS=b3multi
    export OTEL_EXPORTER_OTLP_ENDPOINT=http://jaeger-collector:14268

    # gRPC + OTLP
    export OTELCONFIG_EXPORTER=grpc
    export OTEL_PROPAGATORS=b3multi
    export OTEL_EXPORTER_OTLP_ENDPOINT=http://jaeger-collector:4317

    # HTTP + OTLP
    export OTELCONFIG_EXPORTER=http
    export OTEL_PROPAGATORS=b3multi
    export OTEL_EXPORTER_OTLP_ENDPOINT=http://jaeger-collector:4318
"""

import logging
from typing import Callable, Optional, Tuple

from opentelemetry import trace

from otelconfig.oteltrace.config import (
    ENV_EXPORTER,
    ENV_OTLP_ENDPOINT,
    TraceOptions,
    get_env,
)
from otelconfig.oteltrace.propagation import configure_propagation
from otelconfig.oteltrace.registry import ProviderRegistry, default_registry
from otelconfig.oteltrace.shutdown import FailureHandler, noop_shutdown, shutdown_func
from otelconfig.oteltrace.tracer.exporter import create_exporter
from otelconfig.oteltrace.tracer.tracer import build_tracer_provider, get_tracer

logger = logging.getLogger(__name__)


def trace_start(
    options: Optional[TraceOptions] = None,
    registry: Optional[ProviderRegistry] = None,
    on_shutdown_failure: Optional[FailureHandler] = None,
) -> Tuple[trace.Tracer, Callable[[], None]]:
    """
    初始化 tracing

    Args:
        options: 启动参数
        registry: 登记表（默认进程级 registry）
        on_shutdown_failure: 关闭失败处理函数（默认记录错误并退出进程）

    Returns:
        (tracer, shutdown)：进程退出前调用 shutdown flush 未导出的 span

    Raises:
        UnrecognizedExporterError: OTELCONFIG_EXPORTER 取值未知
        EndpointConstructionError: jaeger endpoint 非法

    示例:
        ```python
        tracer, shutdown = trace_start(TraceOptions(default_service_name="my-service"))
        try:
            with tracer.start_as_current_span("main"):
                work()
        finally:
            shutdown()
        ```
    """
    me = "trace_start"

    options = options or TraceOptions()
    registry = registry or default_registry()
    debug = options.debug_logging

    exporter_token = get_env(me, ENV_EXPORTER, debug)
    endpoint = get_env(me, ENV_OTLP_ENDPOINT, debug)

    if options.disable_tracing:
        provider = trace.NoOpTracerProvider()
        shutdown = noop_shutdown
    else:
        exporter = create_exporter(exporter_token, endpoint, debug=debug)
        provider = build_tracer_provider(
            options.default_service_name, exporter, debug=debug
        )
        shutdown = shutdown_func(
            provider,
            timeout=options.shutdown_timeout_seconds,
            on_failure=on_shutdown_failure,
        )

    # 设置为全局 TracerProvider，之后引入的 instrumentation 默认使用它
    registry.install(provider)

    if not options.disable_propagation:
        configure_propagation(debug=debug, registry=registry)

    logger.log(
        logging.INFO if debug else logging.DEBUG,
        "Tracing started: exporter=%s, disable_tracing=%s, disable_propagation=%s",
        exporter_token or "grpc",
        options.disable_tracing,
        options.disable_propagation,
    )

    return get_tracer(provider), shutdown
