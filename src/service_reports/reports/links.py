"""URL builders for the trace web UI."""

from __future__ import annotations


def _base(zipkin_url: str | None) -> str:
    return (zipkin_url or "").rstrip("/")


def trace_url(zipkin_url: str, trace_id: str) -> str:
    """Return the trace page URL for ``trace_id``."""
    return f"{_base(zipkin_url)}/traces/{trace_id}"


def trace_link(zipkin_url: str, trace_id: str) -> str:
    """Return an HTML anchor pointing at the trace page for ``trace_id``.

    Example:
        >>> trace_link("http://z", "t1")
        '<a href="http://z/traces/t1">t1</a>'
    """
    return f'<a href="{trace_url(zipkin_url, trace_id)}">{trace_id}</a>'


def dependency_url(start_ts: str | int, end_ts: str | int, zipkin_url: str | None = None) -> str:
    """Return the dependency graph page URL for a time window.

    The parameter order (endTs first) matches the links the web UI builds.
    """
    return f"{_base(zipkin_url)}/dependency?endTs={end_ts}&startTs={start_ts}"
