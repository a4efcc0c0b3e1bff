"""Timing of per-input report runs for ``--show-timings``."""

import logging
import time

from service_reports.core.constants import BANNER_WIDTH


class PerformanceTracker:
    """Records how long each named operation took.

    The CLI wraps each input file in ``start``/``end`` and prints
    :meth:`get_summary` at the end of the run.
    """

    def __init__(self, logger: logging.Logger | logging.LoggerAdapter):
        self.logger = logger
        self.metrics: dict[str, float] = {}
        self._started: dict[str, float] = {}

    def start(self, operation_name: str) -> None:
        self._started[operation_name] = time.perf_counter()

    def end(self, operation_name: str) -> float | None:
        """Stop timing ``operation_name`` and return its duration in seconds.

        Returns None if the operation was never started.
        """
        started = self._started.pop(operation_name, None)
        if started is None:
            return None
        duration = time.perf_counter() - started
        self.metrics[operation_name] = duration
        self.logger.debug(f"{operation_name} took {duration:.2f}s")
        return duration

    def get_summary(self) -> str:
        """Return a banner-framed table of operations, slowest first."""
        if not self.metrics:
            return "No performance metrics collected"

        total = sum(self.metrics.values())
        rule = "=" * BANNER_WIDTH
        lines = ["", rule, "PERFORMANCE SUMMARY", rule]
        for operation, duration in sorted(self.metrics.items(), key=lambda item: item[1], reverse=True):
            share = duration / total * 100 if total > 0 else 0
            lines.append(f"{operation:35s}: {duration:6.2f}s ({share:5.1f}%)")
        lines += [rule, f"{'Total Execution Time':35s}: {total:6.2f}s", rule]
        return "\n".join(lines)
