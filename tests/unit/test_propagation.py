"""
propagator 配置测试
"""

import pytest
from opentelemetry import propagate

from otelconfig.oteltrace.propagation import (
    configure_propagation,
    create_propagator,
    load_propagator,
    parse_propagator_names,
)

DEFAULT_FIELDS = {"traceparent", "tracestate", "baggage"}


class TestParsePropagatorNames:
    """propagator 列表解析测试"""

    def test_trim_and_dedup(self):
        assert parse_propagator_names(" b3multi, tracecontext,,b3multi ") == [
            "b3multi",
            "tracecontext",
        ]

    def test_empty(self):
        assert parse_propagator_names("") == []
        assert parse_propagator_names(" , ") == []


class TestCreatePropagator:
    """组合 propagator 测试"""

    def test_default(self):
        assert create_propagator().fields == DEFAULT_FIELDS

    def test_b3multi(self, monkeypatch):
        monkeypatch.setenv("OTEL_PROPAGATORS", "b3multi")
        fields = create_propagator().fields
        assert fields != DEFAULT_FIELDS
        assert "x-b3-traceid" in fields
        assert "traceparent" not in fields

    def test_jaeger(self, monkeypatch):
        monkeypatch.setenv("OTEL_PROPAGATORS", "jaeger,tracecontext")
        fields = create_propagator().fields
        assert "uber-trace-id" in fields
        assert "traceparent" in fields

    @pytest.mark.parametrize("value", ["none", "tracecontext,none", "NONE"])
    def test_none(self, monkeypatch, value):
        monkeypatch.setenv("OTEL_PROPAGATORS", value)
        assert create_propagator().fields == set()

    def test_unknown_falls_back_to_default(self, monkeypatch, caplog):
        monkeypatch.setenv("OTEL_PROPAGATORS", "tracecontext,bogus")
        with caplog.at_level("ERROR"):
            propagator = create_propagator()
        assert propagator.fields == DEFAULT_FIELDS
        assert "bogus" in caplog.text

    def test_custom_defaults(self):
        assert create_propagator(defaults=("tracecontext",)).fields == {
            "traceparent",
            "tracestate",
        }

    def test_load_unknown(self):
        with pytest.raises(ValueError):
            load_propagator("bogus")


class TestConfigurePropagation:
    """全局 propagator 安装测试"""

    def test_installs_global(self, registry):
        propagator = configure_propagation(registry=registry)
        assert propagate.get_global_textmap() is propagator
        assert registry.propagator is propagator

    def test_reinvocation_replaces(self, monkeypatch, registry):
        first = configure_propagation(registry=registry)
        monkeypatch.setenv("OTEL_PROPAGATORS", "b3multi")
        second = configure_propagation(registry=registry)
        assert second is not first
        assert propagate.get_global_textmap() is second
        assert registry.propagator is second

    def test_debug_logs_fields(self, registry, caplog):
        with caplog.at_level("INFO"):
            configure_propagation(debug=True, registry=registry)
        assert "propagator fields" in caplog.text
        assert "OTEL_PROPAGATORS=''" in caplog.text
