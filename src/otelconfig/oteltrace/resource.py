# -*- coding: utf-8 -*-
"""
OpenTelemetry Resource 实现

决定 service.name 是否写入 Resource：
环境变量中已给出服务名时不写入，交由 SDK 的环境变量检测器生效。
"""

import logging
from typing import Optional, Tuple

from opentelemetry.sdk.resources import Resource
from opentelemetry.semconv.resource import ResourceAttributes

from otelconfig.oteltrace.config import (
    ENV_RESOURCE_ATTRIBUTES,
    ENV_SERVICE_NAME,
    get_env,
)

logger = logging.getLogger(__name__)

SCHEMA_URL = "https://opentelemetry.io/schemas/1.21.0"
SERVICE_NAME = ResourceAttributes.SERVICE_NAME


def parse_resource_attributes(raw: str) -> Tuple[Tuple[str, str], ...]:
    """
    解析 OTEL_RESOURCE_ATTRIBUTES

    "service.name=mysrv,env=prod" → (("service.name", "mysrv"), ("env", "prod"))
    没有 "=" 的字段值为空字符串。
    """
    pairs = []
    for field in raw.split(","):
        if not field:
            continue
        key, _, value = field.partition("=")
        pairs.append((key.strip(), value.strip()))
    return tuple(pairs)


def service_name_from_env(debug: bool = False) -> Optional[str]:
    """
    从环境变量获取服务名称

    Returns:
        OTEL_SERVICE_NAME 或 OTEL_RESOURCE_ATTRIBUTES 中的 service.name，
        都不存在时返回 None
    """
    me = "service_name_from_env"

    svc = get_env(me, ENV_SERVICE_NAME, debug)
    if svc.strip():
        if debug:
            logger.info("%s: found %s='%s'", me, ENV_SERVICE_NAME, svc)
        return svc

    attrs = get_env(me, ENV_RESOURCE_ATTRIBUTES, debug)
    for key, value in parse_resource_attributes(attrs):
        if key == SERVICE_NAME:
            if debug:
                logger.info(
                    "%s: found %s: %s='%s'", me, ENV_RESOURCE_ATTRIBUTES, key, value
                )
            return value

    return None


def has_service_env_var(debug: bool = False) -> bool:
    """环境变量是否指定了服务名称"""
    return service_name_from_env(debug) is not None


def create_resource(default_service_name: str = "", debug: bool = False) -> Resource:
    """
    创建 OpenTelemetry Resource

    Resource 始终带有 schema URL；
    仅当环境变量未指定服务名称且 default_service_name 非空时写入 service.name。

    Args:
        default_service_name: 默认服务名称
        debug: 是否输出调试日志

    Returns:
        OpenTelemetry Resource 实例
    """
    attrs = {}
    if default_service_name and not has_service_env_var(debug):
        attrs[SERVICE_NAME] = default_service_name

    # Resource.create 会合并 OTEL_SERVICE_NAME / OTEL_RESOURCE_ATTRIBUTES
    return Resource.create(attrs, schema_url=SCHEMA_URL)
