# -*- coding: utf-8 -*-
"""
oteltrace 错误定义

- UnrecognizedExporterError：未知的导出器类型（配置错误）
- EndpointConstructionError：无法从 endpoint 推导 Jaeger collector 地址
- ShutdownFailure：关闭 TracerProvider 失败或超时
"""


class TracingError(Exception):
    """oteltrace 错误基类"""


class UnrecognizedExporterError(TracingError, ValueError):
    """未知的导出器类型"""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"createExporter: unrecognized exporter type: '{token}'")


class EndpointConstructionError(TracingError, ValueError):
    """非法的 endpoint"""

    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"invalid endpoint '{endpoint}': {reason}")


class ShutdownFailure(TracingError):
    """TracerProvider 关闭失败（出错或超过截止时间）"""

    def __init__(self, message: str, timed_out: bool = False):
        self.timed_out = timed_out
        super().__init__(message)
