"""Report kinds and their line templates.

Each kind pairs a header template with a value mapper. MemcacheRequest is
the exception: it sums its values and writes a single summary line instead
of a header followed by one line per value.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from service_reports.core.exceptions import ConfigurationError
from service_reports.reports.links import trace_link

ValueMapper = Callable[[str, "str | None"], str]


def _passthrough(value: str, zipkin_url: str | None = None) -> str:
    return value


def _trace_anchor(value: str, zipkin_url: str | None = None) -> str:
    if not zipkin_url:
        raise ConfigurationError("A zipkin URL is required to link traces", field="zipkin_url")
    return trace_link(zipkin_url, value)


class ReportKind(Enum):
    """The closed set of per-service reports.

    Member values are ``(job_name, header_template, value_mapper, combines_similar_names)``.
    """

    MEMCACHE_REQUEST = (
        "MemcacheRequest",
        "{service} made {total} redundant memcache requests",
        _passthrough,
        True,
    )
    TIMEOUTS = (
        "Timeouts",
        "{service} timed out in calls to the following services:",
        _passthrough,
        False,
    )
    RETRIES = (
        "Retries",
        "{service} retried in calls to the following services:",
        _passthrough,
        False,
    )
    WORST_RUNTIMES = (
        "WorstRuntimes",
        "Service {service} took the longest for these spans:",
        _passthrough,
        False,
    )
    WORST_RUNTIMES_PER_TRACE = (
        "WorstRuntimesPerTrace",
        "Service {service} took the longest for these traces:",
        _trace_anchor,
        False,
    )
    EXPENSIVE_ENDPOINTS = (
        "ExpensiveEndpoints",
        "The most expensive calls for {service} were:",
        _passthrough,
        False,
    )

    def __init__(
        self, job_name: str, header_template: str, value_mapper: ValueMapper, combines_similar_names: bool
    ):
        self.job_name = job_name
        self.header_template = header_template
        self.value_mapper = value_mapper
        self.combines_similar_names = combines_similar_names

    @property
    def aggregates(self) -> bool:
        """True when the kind writes one summary line instead of one line per value."""
        return self is ReportKind.MEMCACHE_REQUEST

    @property
    def requires_zipkin_url(self) -> bool:
        return self.value_mapper is _trace_anchor

    def header(self, service: str, **fields: object) -> str:
        return self.header_template.format(service=service, **fields)

    def render_value(self, value: str, zipkin_url: str | None = None) -> str:
        return self.value_mapper(value, zipkin_url)

    @classmethod
    def job_names(cls) -> list[str]:
        return [kind.job_name for kind in cls]

    @classmethod
    def from_name(cls, name: str | ReportKind) -> ReportKind:
        """Resolve a job name ("WorstRuntimes") or member name ("WORST_RUNTIMES").

        Matching is case-insensitive.

        Raises:
            ConfigurationError: If no kind matches
        """
        if isinstance(name, cls):
            return name
        wanted = str(name).strip().lower()
        for kind in cls:
            if wanted in (kind.job_name.lower(), kind.name.lower()):
                return kind
        raise ConfigurationError(
            f"Unknown report kind '{name}'", field="kind", details=f"expected one of {', '.join(cls.job_names())}"
        )
