"""CLI argument parsing."""

from __future__ import annotations

import argparse

from service_reports.core.constants import LOG_FORMATS, VALID_LOG_LEVELS
from service_reports.core.version import __version__
from service_reports.reports.kinds import ReportKind

# Attempt to load argcomplete for shell tab-completion (optional dependency)
_ARGCOMPLETE_AVAILABLE = False
try:
    import argcomplete

    _ARGCOMPLETE_AVAILABLE = True
except ImportError:
    pass  # argcomplete not installed


def _non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from None
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {parsed}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate from parsing for completion and tests)."""
    parser = argparse.ArgumentParser(
        prog="service-reports",
        description="Turn trace-analysis job output into per-service text reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Report kinds:
  {", ".join(ReportKind.job_names())}

Examples:
  # Timeouts report for every service in one job output file
  service-reports Timeouts part-00000 --output-dir ./reports

  # Several job output files, processed in order into the same reports
  service-reports Retries part-00000 part-00001 -o ./reports

  # Trace links (base URL may also come from ZIPKIN_URL or a .env file)
  service-reports WorstRuntimesPerTrace part-00000 -o ./reports --zipkin-url http://zipkin.local:8080

  # Keep going when a single service fails
  service-reports MemcacheRequest part-00000 -o ./reports --continue-on-error

  # Link to the dependency graph for a time window
  service-reports --dependency-link 1350000000000 1350086400000
""",
    )

    parser.add_argument(
        "kind",
        nargs="?",
        metavar="KIND",
        help="Report kind to produce (case-insensitive)",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help="Job output file(s) with one 'service value' pair per line",
    )

    output_group = parser.add_argument_group("Output")
    output_group.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Directory for per-service report files (default: $SERVICE_REPORTS_OUTPUT_DIR or .)",
    )
    output_group.add_argument(
        "--zipkin-url",
        default=None,
        help="Base URL of the trace web UI for trace links (default: $ZIPKIN_URL)",
    )
    output_group.add_argument(
        "--combine-similar-names",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Merge similarly named services into one report (default: on for MemcacheRequest only)",
    )
    output_group.add_argument(
        "--max-name-distance",
        type=_non_negative_int,
        default=1,
        metavar="N",
        help="Edit distance under which service names are combined (default: 1)",
    )
    output_group.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Log and skip services whose report fails instead of aborting the run",
    )
    output_group.add_argument(
        "--job-name",
        default=None,
        help="Name used in log file names and log context (default: the report kind)",
    )

    links_group = parser.add_argument_group("Links")
    links_group.add_argument(
        "--dependency-link",
        nargs=2,
        metavar=("START_TS", "END_TS"),
        default=None,
        help="Print the dependency graph URL for a time window and exit",
    )
    links_group.add_argument(
        "--list-kinds",
        action="store_true",
        help="List the available report kinds and exit",
    )

    logging_group = parser.add_argument_group("Logging")
    logging_group.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    logging_group.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default="text",
        help="Log output format: text or json (default: text)",
    )
    logging_group.add_argument(
        "--log-dir",
        default="logs",
        help="Directory for rotating log files (default: logs)",
    )
    logging_group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress progress bars and the run summary",
    )
    logging_group.add_argument(
        "--show-timings",
        action="store_true",
        help="Print a per-file timing summary",
    )
    logging_group.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored console output",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = build_parser()

    # Enable shell tab-completion if argcomplete is installed
    if _ARGCOMPLETE_AVAILABLE:
        argcomplete.autocomplete(parser)

    return parser.parse_args(argv)
