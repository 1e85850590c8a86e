# -*- coding: utf-8 -*-
"""
TracerProvider 关闭

在截止时间内 flush 并关闭 TracerProvider，避免卡住的导出器阻塞进程退出。
关闭失败或超时默认视为致命错误。
"""

import logging
import threading
from typing import Callable, List, Optional

from otelconfig.oteltrace.config import DEFAULT_SHUTDOWN_TIMEOUT, parse_duration
from otelconfig.oteltrace.errors import ShutdownFailure

logger = logging.getLogger(__name__)

SHUTDOWN_TIMEOUT_SECONDS = parse_duration(DEFAULT_SHUTDOWN_TIMEOUT)

FailureHandler = Callable[[ShutdownFailure], None]


def fail_fatally(failure: ShutdownFailure) -> None:
    """记录错误并以状态码 1 退出"""
    logger.critical("trace shutdown: %s", failure)
    raise SystemExit(1) from failure


def noop_shutdown() -> None:
    """未启用 tracing 时的关闭函数"""


def shutdown_func(
    provider,
    timeout: float = SHUTDOWN_TIMEOUT_SECONDS,
    on_failure: Optional[FailureHandler] = None,
) -> Callable[[], None]:
    """
    创建绑定到 provider 的关闭函数

    关闭在后台线程中执行，调用方最多等待 timeout 秒（从调用关闭函数时开始计时）。
    超时或 provider.shutdown() 抛出异常时调用 on_failure，默认 fail_fatally。

    Args:
        provider: TracerProvider
        timeout: 截止时间（秒）
        on_failure: 失败处理函数

    Returns:
        关闭函数，每个 provider 只应调用一次
    """
    handler = on_failure or fail_fatally

    def shutdown() -> None:
        done = threading.Event()
        errors: List[BaseException] = []

        def _run():
            try:
                provider.shutdown()
            except Exception as e:
                errors.append(e)
            finally:
                done.set()

        worker = threading.Thread(target=_run, name="otelconfig-shutdown", daemon=True)
        worker.start()

        if not done.wait(timeout):
            handler(
                ShutdownFailure(
                    f"deadline exceeded after {timeout:.3g}s", timed_out=True
                )
            )
            return

        if errors:
            failure = ShutdownFailure(str(errors[0]))
            failure.__cause__ = errors[0]
            handler(failure)
            return

        logger.debug("trace shutdown completed")

    return shutdown
