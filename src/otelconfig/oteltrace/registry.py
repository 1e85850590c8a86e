# -*- coding: utf-8 -*-
"""
全局 TracerProvider / propagator 登记

启动阶段由单线程写入一次，之后只读。不加锁。
OpenTelemetry 的全局 TracerProvider 只能设置一次，
registry 始终记录本库最近一次安装的对象，便于查询和测试。
"""

import logging
from typing import Optional

from opentelemetry import trace
from opentelemetry.propagators.textmap import TextMapPropagator

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """TracerProvider / propagator 登记表"""

    def __init__(self):
        self._tracer_provider: Optional[trace.TracerProvider] = None
        self._propagator: Optional[TextMapPropagator] = None

    def install(self, provider: trace.TracerProvider) -> None:
        """
        安装全局 TracerProvider

        不防止重复安装，由调用方保证每个进程只调用一次。
        """
        if self._tracer_provider is not None:
            logger.warning(
                "replacing tracer provider %s with %s",
                type(self._tracer_provider).__name__,
                type(provider).__name__,
            )
        self._tracer_provider = provider
        trace.set_tracer_provider(provider)

    def set_propagator(self, propagator: TextMapPropagator) -> None:
        """记录已安装的全局 propagator"""
        self._propagator = propagator

    def reset(self) -> None:
        """清空登记（不影响 OpenTelemetry 全局状态）"""
        self._tracer_provider = None
        self._propagator = None

    @property
    def tracer_provider(self) -> Optional[trace.TracerProvider]:
        """当前 TracerProvider"""
        return self._tracer_provider

    @property
    def propagator(self) -> Optional[TextMapPropagator]:
        """当前 propagator"""
        return self._propagator


_default_registry = ProviderRegistry()


def default_registry() -> ProviderRegistry:
    """进程级 registry"""
    return _default_registry
