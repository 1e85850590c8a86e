"""
配置模块测试
"""

import pytest
from pydantic import ValidationError

from otelconfig.oteltrace.config import (
    TraceOptions,
    get_env,
    load_options,
    parse_duration,
)


class TestParseDuration:
    """时间解析测试"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (5, 5.0),
            (0.5, 0.5),
            ("5", 5.0),
            ("2.5", 2.5),
            ("5s", 5.0),
            ("100ms", 0.1),
            ("250us", 0.00025),
            ("1m30s", 90.0),
            ("1h", 3600.0),
            ("1h30m", 5400.0),
            (" 10s ", 10.0),
        ],
    )
    def test_valid(self, value, expected):
        assert parse_duration(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", ["", "abc", "5x", "s5", "5s junk", True])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_duration(value)


class TestTraceOptions:
    """TraceOptions 测试"""

    def test_defaults(self):
        options = TraceOptions()
        assert options.default_service_name == ""
        assert not options.disable_tracing
        assert not options.disable_propagation
        assert not options.debug_logging
        assert options.shutdown_timeout_seconds == 5.0

    def test_frozen(self):
        options = TraceOptions()
        with pytest.raises(ValidationError):
            options.disable_tracing = True

    def test_numeric_shutdown_timeout(self):
        assert TraceOptions(shutdown_timeout=2).shutdown_timeout_seconds == 2.0

    @pytest.mark.parametrize(
        "value", ["0s", "-1", "never", "inf", "-inf", "nan", float("inf"), float("nan")]
    )
    def test_invalid_shutdown_timeout(self, value):
        with pytest.raises(ValidationError):
            TraceOptions(shutdown_timeout=value)


class TestLoadOptions:
    """配置加载测试"""

    def test_defaults(self):
        assert load_options() == TraceOptions()

    def test_from_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "oteltrace:\n"
            "  default_service_name: from-file\n"
            "  debug_logging: true\n"
            "  shutdown_timeout: 2s\n",
            encoding="utf-8",
        )

        options = load_options(config_file=str(config_file))

        assert options.default_service_name == "from-file"
        assert options.debug_logging
        assert options.shutdown_timeout_seconds == 2.0

    def test_dict_overrides_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("default_service_name: from-file\n", encoding="utf-8")

        options = load_options(
            config_file=str(config_file),
            config_dict={"trace": {"default_service_name": "from-dict"}},
        )

        assert options.default_service_name == "from-dict"

    def test_env_overrides_dict(self, monkeypatch):
        monkeypatch.setenv("APP_DEFAULT_SERVICE_NAME", "from-env")
        monkeypatch.setenv("APP_DISABLE_TRACING", "yes")
        monkeypatch.setenv("APP_SHUTDOWN_TIMEOUT", "1")

        options = load_options(
            config_dict={"default_service_name": "from-dict"},
            env_prefix="app",
        )

        assert options.default_service_name == "from-env"
        assert options.disable_tracing
        assert options.shutdown_timeout_seconds == 1.0

    def test_env_unbounded_timeout(self, monkeypatch):
        """关闭超时必须是有限值"""
        monkeypatch.setenv("APP_SHUTDOWN_TIMEOUT", "inf")
        with pytest.raises(ValidationError):
            load_options(env_prefix="app")

    def test_missing_file(self, tmp_path):
        options = load_options(config_file=str(tmp_path / "missing.yaml"))
        assert options == TraceOptions()


class TestGetEnv:
    """环境变量读取测试"""

    def test_value(self, monkeypatch):
        monkeypatch.setenv("OTELCONFIG_EXPORTER", "http")
        assert get_env("test", "OTELCONFIG_EXPORTER") == "http"

    def test_missing(self):
        assert get_env("test", "OTELCONFIG_EXPORTER") == ""

    def test_debug(self, monkeypatch, caplog):
        monkeypatch.setenv("OTELCONFIG_EXPORTER", "http")
        with caplog.at_level("INFO"):
            get_env("test", "OTELCONFIG_EXPORTER", debug=True)
        assert "test: OTELCONFIG_EXPORTER='http'" in caplog.text

    def test_quiet(self, monkeypatch, caplog):
        monkeypatch.setenv("OTELCONFIG_EXPORTER", "http")
        with caplog.at_level("INFO"):
            get_env("test", "OTELCONFIG_EXPORTER")
        assert "OTELCONFIG_EXPORTER" not in caplog.text
