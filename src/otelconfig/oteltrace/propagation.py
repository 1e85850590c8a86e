# -*- coding: utf-8 -*-
"""
Trace 上下文传播

根据 OTEL_PROPAGATORS 组合 propagator 并设置为全局 propagator。

支持的取值（需安装对应包）：
- tracecontext、baggage：opentelemetry-api
- b3、b3multi：opentelemetry-propagator-b3
- jaeger：opentelemetry-propagator-jaeger
- xray：opentelemetry-propagator-aws-xray
- ottrace：opentelemetry-propagator-ot-trace
- none：不传播
"""

import logging
from importlib.metadata import entry_points
from typing import List, Optional, Sequence

from opentelemetry.propagate import set_global_textmap
from opentelemetry.propagators.composite import CompositePropagator
from opentelemetry.propagators.textmap import TextMapPropagator

from otelconfig.oteltrace.config import ENV_PROPAGATORS, get_env
from otelconfig.oteltrace.registry import ProviderRegistry, default_registry

logger = logging.getLogger(__name__)

PROPAGATOR_ENTRY_POINT_GROUP = "opentelemetry_propagator"
PROPAGATOR_NONE = "none"
DEFAULT_PROPAGATORS = ("tracecontext", "baggage")


def parse_propagator_names(raw: str) -> List[str]:
    """
    解析 propagator 列表

    "b3multi, tracecontext,,b3multi" → ["b3multi", "tracecontext"]
    """
    names: List[str] = []
    for name in raw.split(","):
        name = name.strip()
        if name and name not in names:
            names.append(name)
    return names


def load_propagator(name: str) -> TextMapPropagator:
    """
    通过 entry point 加载 propagator

    Raises:
        ValueError: 未安装对应的 propagator
    """
    for entry_point in entry_points(group=PROPAGATOR_ENTRY_POINT_GROUP, name=name):
        return entry_point.load()()
    raise ValueError(f"propagator not found: '{name}'")


def _compose(names: Sequence[str]) -> CompositePropagator:
    if any(name.lower() == PROPAGATOR_NONE for name in names):
        return CompositePropagator([])
    return CompositePropagator([load_propagator(name) for name in names])


def create_propagator(
    defaults: Sequence[str] = DEFAULT_PROPAGATORS,
    debug: bool = False,
) -> CompositePropagator:
    """
    创建组合 propagator

    OTEL_PROPAGATORS 未设置时使用 defaults；
    包含无法识别的取值时记录错误并使用 defaults。

    Args:
        defaults: 默认 propagator 名称
        debug: 是否输出调试日志
    """
    me = "create_propagator"

    names = parse_propagator_names(get_env(me, ENV_PROPAGATORS, debug))
    if not names:
        return _compose(defaults)

    try:
        return _compose(names)
    except ValueError as e:
        logger.error(
            "%s: %s=%s: %s, using default %s",
            me,
            ENV_PROPAGATORS,
            ",".join(names),
            e,
            ",".join(defaults),
        )
        return _compose(defaults)


def configure_propagation(
    debug: bool = False,
    registry: Optional[ProviderRegistry] = None,
) -> CompositePropagator:
    """
    安装全局 propagator

    重复调用会替换之前安装的 propagator。

    Returns:
        安装的 propagator
    """
    propagator = create_propagator(debug=debug)

    if debug:
        logger.info(
            "configure_propagation: propagator fields: %s", sorted(propagator.fields)
        )

    set_global_textmap(propagator)
    (registry or default_registry()).set_propagator(propagator)

    return propagator
