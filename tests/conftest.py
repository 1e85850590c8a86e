#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
pytest 配置文件

提供测试夹具和配置
"""

import sys
from pathlib import Path

import pytest

# 将 src 目录添加到 Python 路径
ROOT_DIR = Path(__file__).parent.parent
SRC_DIR = ROOT_DIR / "src"
sys.path.insert(0, str(SRC_DIR))

from otelconfig.oteltrace.registry import ProviderRegistry  # noqa: E402

# 会影响 tracing 初始化的环境变量
OTEL_ENV_VARS = (
    "OTELCONFIG_EXPORTER",
    "OTEL_EXPORTER_OTLP_ENDPOINT",
    "OTEL_EXPORTER_OTLP_TRACES_ENDPOINT",
    "OTEL_EXPORTER_JAEGER_ENDPOINT",
    "OTEL_SERVICE_NAME",
    "OTEL_RESOURCE_ATTRIBUTES",
    "OTEL_PROPAGATORS",
)


@pytest.fixture(scope="session")
def project_root() -> Path:
    """项目根目录"""
    return ROOT_DIR


@pytest.fixture(autouse=True)
def clean_otel_env(monkeypatch):
    """每个测试函数开始时清空 OTel 环境变量"""
    for name in OTEL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="function")
def registry() -> ProviderRegistry:
    """独立的 registry（每个测试函数独立）"""
    return ProviderRegistry()
