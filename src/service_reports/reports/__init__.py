"""Reports module - report kinds, line templates and the shared driver."""

from service_reports.reports.formatter import (
    report_path,
    sum_memcache_requests,
    write_header,
    write_report,
    write_value,
)
from service_reports.reports.kinds import ReportKind
from service_reports.reports.links import dependency_url, trace_link, trace_url
from service_reports.reports.models import OutputRecord

__all__ = [
    "OutputRecord",
    "ReportKind",
    "dependency_url",
    "report_path",
    "sum_memcache_requests",
    "trace_link",
    "trace_url",
    "write_header",
    "write_report",
    "write_value",
]
