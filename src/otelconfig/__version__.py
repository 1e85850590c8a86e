# -*- coding: utf-8 -*-

__title__ = "otelconfig"
__description__ = "Bootstrap OpenTelemetry tracing from environment variables."
__url__ = "https://github.com/udhos/otelconfig"
__version__ = "0.1.0"
__author__ = "otelconfig developers"
__author_email__ = ""
__license__ = "MIT"
