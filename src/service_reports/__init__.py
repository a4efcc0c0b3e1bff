"""
service-reports - per-service text reports from trace-analysis job output

Reads the line-oriented results of the upstream analysis jobs (timeouts,
retries, worst runtimes, expensive endpoints, redundant memcache requests)
and appends one human-readable report per service to an output directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from service_reports.core.lazy import make_getattr
from service_reports.core.version import __version__

__all__ = ["InputReader", "ReportKind", "WriterRegistry", "__version__", "main"]

if TYPE_CHECKING:
    from service_reports.cli.main import main
    from service_reports.output.registry import WriterRegistry
    from service_reports.pipeline.reader import InputReader
    from service_reports.reports.kinds import ReportKind

__getattr__: Any = make_getattr(
    __name__,
    {
        "InputReader": "service_reports.pipeline.reader",
        "ReportKind": "service_reports.reports.kinds",
        "WriterRegistry": "service_reports.output.registry",
        "main": "service_reports.cli.main",
    },
)
