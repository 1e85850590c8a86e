"""
TracerProvider 关闭测试
"""

import threading
import time

import pytest
from opentelemetry.sdk.trace import TracerProvider

from otelconfig.oteltrace.errors import ShutdownFailure
from otelconfig.oteltrace.shutdown import (
    SHUTDOWN_TIMEOUT_SECONDS,
    fail_fatally,
    noop_shutdown,
    shutdown_func,
)


class FakeProvider:
    """记录 shutdown 调用的 provider"""

    def __init__(self, block=None, error=None):
        self.calls = 0
        self._block = block
        self._error = error

    def shutdown(self):
        self.calls += 1
        if self._block is not None:
            self._block.wait(10)
        if self._error is not None:
            raise self._error


def test_default_timeout():
    assert SHUTDOWN_TIMEOUT_SECONDS == 5.0


def test_noop_shutdown():
    assert noop_shutdown() is None


def test_shutdown_success():
    failures = []
    provider = FakeProvider()

    shutdown_func(provider, on_failure=failures.append)()

    assert provider.calls == 1
    assert failures == []


def test_shutdown_real_provider():
    failures = []
    provider = TracerProvider(shutdown_on_exit=False)

    shutdown_func(provider, timeout=5.0, on_failure=failures.append)()

    assert failures == []


def test_shutdown_deadline():
    """flush 卡住时在截止时间返回"""
    failures = []
    release = threading.Event()
    provider = FakeProvider(block=release)

    start = time.monotonic()
    try:
        shutdown_func(provider, timeout=0.2, on_failure=failures.append)()
        elapsed = time.monotonic() - start
    finally:
        release.set()

    assert elapsed < 2.0
    assert len(failures) == 1
    assert failures[0].timed_out
    assert "deadline exceeded" in str(failures[0])


def test_shutdown_error():
    failures = []
    error = RuntimeError("exporter broken")
    provider = FakeProvider(error=error)

    shutdown_func(provider, on_failure=failures.append)()

    assert len(failures) == 1
    assert not failures[0].timed_out
    assert failures[0].__cause__ is error
    assert "exporter broken" in str(failures[0])


def test_fail_fatally(caplog):
    failure = ShutdownFailure("deadline exceeded", timed_out=True)

    with caplog.at_level("CRITICAL"):
        with pytest.raises(SystemExit) as exc_info:
            fail_fatally(failure)

    assert exc_info.value.code == 1
    assert exc_info.value.__cause__ is failure
    assert "trace shutdown: deadline exceeded" in caplog.text


def test_default_handler_is_fatal():
    release = threading.Event()
    provider = FakeProvider(block=release)

    try:
        with pytest.raises(SystemExit) as exc_info:
            shutdown_func(provider, timeout=0.1)()
    finally:
        release.set()

    assert isinstance(exc_info.value.__cause__, ShutdownFailure)
