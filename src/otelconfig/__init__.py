"""
otelconfig is a small toolkit to bootstrap OpenTelemetry tracing in python services.

Modules:
- otelconfig.oteltrace: tracer provider bootstrap (exporters, resource, propagators, shutdown)
- otelconfig.logs: log installation with trace correlation
- otelconfig.env: environment variable helpers
"""

from otelconfig.__version__ import __version__

__all__ = ["__version__"]
