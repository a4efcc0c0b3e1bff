"""Shared report driver.

``write_report`` is the only place that touches output files: it asks the
registry for the service's writer, emits the kind's lines, and flushes so
partial output is visible even if the run is interrupted.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import TextIO

from service_reports.core.exceptions import ConfigurationError, OutputError, RecordParseError
from service_reports.output.registry import WriterRegistry
from service_reports.reports.kinds import ReportKind
from service_reports.reports.models import OutputRecord

logger = logging.getLogger(__name__)

# Optional sign, ASCII digits only. int() alone would accept "1_000" and non-ASCII digits.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def report_path(output_dir: str | os.PathLike[str], service: str) -> Path:
    """Return the file a service's report is appended to."""
    return Path(output_dir) / service


def sum_memcache_requests(record: OutputRecord) -> int:
    """Sum a MemcacheRequest record's integer values.

    Raises:
        RecordParseError: On the first value that is not a plain decimal integer
    """
    total = 0
    for value in record.values:
        if not _INTEGER_PATTERN.fullmatch(value):
            raise RecordParseError(
                "Non-integer memcache request count",
                service=record.service,
                value=value,
                kind=ReportKind.MEMCACHE_REQUEST.job_name,
            )
        total += int(value)
    return total


def write_header(kind: ReportKind, service: str, writer: TextIO) -> None:
    """Write the kind's header line for ``service``."""
    writer.write(f"{kind.header(service)}\n")


def write_value(kind: ReportKind, value: str, writer: TextIO, zipkin_url: str | None = None) -> None:
    """Write one value line, rendered for the kind."""
    writer.write(f"{kind.render_value(value, zipkin_url)}\n")


def write_report(
    kind: ReportKind,
    record: OutputRecord,
    registry: WriterRegistry,
    output_dir: str | os.PathLike[str],
    zipkin_url: str | None = None,
) -> int:
    """Append a record's report to ``{output_dir}/{service}``.

    Values are validated before the writer is acquired, so a record that
    fails to parse leaves its file untouched.

    Args:
        kind: Report kind to render
        record: Service and its values, in input order
        registry: Registry that owns the output handles
        output_dir: Directory holding one file per service
        zipkin_url: Base URL for trace links (WorstRuntimesPerTrace only)

    Returns:
        Number of lines written

    Raises:
        RecordParseError: If a MemcacheRequest value is not an integer
        ConfigurationError: If trace links are requested without a zipkin URL
        OutputError: If the report file cannot be opened or written
    """
    total = None
    if kind.aggregates:
        total = sum_memcache_requests(record)
    elif kind.requires_zipkin_url and not zipkin_url:
        raise ConfigurationError(f"{kind.job_name} reports need a zipkin URL", field="zipkin_url")

    path = os.fspath(report_path(output_dir, record.service))
    writer = registry.get_writer(path)
    try:
        if total is not None:
            writer.write(f"{kind.header(record.service, total=total)}\n")
            lines = 1
        else:
            write_header(kind, record.service, writer)
            for value in record.values:
                write_value(kind, value, writer, zipkin_url)
            lines = 1 + len(record.values)
        writer.flush()
    except OSError as e:
        raise OutputError("Failed to write report", output_path=path, details=str(e), original_error=e) from e

    logger.debug(f"Wrote {lines} line(s) for {record.service} to {path}")
    return lines
