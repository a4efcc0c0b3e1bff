"""Configuration dataclasses for service-reports.

These dataclasses centralize all configuration options for type safety
and easy testing. They can be created from command-line arguments or
used directly in code.
"""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass, field


@dataclass
class LogConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level string (default: "INFO")
        format: "text" or "json" (default: "text")
        log_dir: Directory for rotating log files (default: "logs")
    """

    level: str = "INFO"
    format: str = "text"
    log_dir: str = "logs"


@dataclass
class ReportConfig:
    """Master configuration for a report run.

    Attributes:
        kind: Report kind job name (e.g. "Timeouts", "MemcacheRequest")
        output_dir: Directory that receives one file per service
        combine_similar_names: Merge similar service names; None uses the kind's default
        zipkin_url: Base URL of the trace web UI, used for trace links
        job_name: Name used for log files; defaults to the kind's job name
        continue_on_error: Log and skip a failing service instead of aborting
        quiet: Suppress progress bars and summaries
        max_name_distance: Edit distance under which two service names are combined
        log: Logging configuration
    """

    kind: str = ""
    output_dir: str = "."
    combine_similar_names: bool | None = None
    zipkin_url: str | None = None
    job_name: str | None = None
    continue_on_error: bool = False
    quiet: bool = False
    max_name_distance: int = 1
    log: LogConfig = field(default_factory=LogConfig)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ReportConfig:
        """Create configuration from parsed command-line arguments.

        Unset flags fall back to ZIPKIN_URL, SERVICE_REPORTS_OUTPUT_DIR and LOG_LEVEL.
        """
        from service_reports.core.constants import ENV_LOG_LEVEL, ENV_OUTPUT_DIR, ENV_ZIPKIN_URL

        return cls(
            kind=getattr(args, "kind", "") or "",
            output_dir=getattr(args, "output_dir", None) or os.environ.get(ENV_OUTPUT_DIR, "."),
            combine_similar_names=getattr(args, "combine_similar_names", None),
            zipkin_url=getattr(args, "zipkin_url", None) or os.environ.get(ENV_ZIPKIN_URL) or None,
            job_name=getattr(args, "job_name", None),
            continue_on_error=getattr(args, "continue_on_error", False),
            quiet=getattr(args, "quiet", False),
            max_name_distance=getattr(args, "max_name_distance", 1),
            log=LogConfig(
                level=getattr(args, "log_level", None) or os.environ.get(ENV_LOG_LEVEL, "INFO"),
                format=getattr(args, "log_format", "text"),
            ),
        )
