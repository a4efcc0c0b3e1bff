"""CLI entrypoint."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from service_reports.cli.parser import parse_arguments
from service_reports.core.colors import ConsoleColors
from service_reports.core.config import ReportConfig
from service_reports.core.constants import (
    BANNER_WIDTH,
    ENV_ZIPKIN_URL,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    EXIT_USAGE,
)
from service_reports.core.exceptions import ConfigurationError, ServiceReportsError
from service_reports.core.logging import flush_logging_handlers, setup_logging
from service_reports.core.perf import PerformanceTracker
from service_reports.output.registry import WriterRegistry
from service_reports.pipeline.models import ProcessingResult
from service_reports.pipeline.reader import InputReader
from service_reports.reports.kinds import ReportKind
from service_reports.reports.links import dependency_url

# Attempt to load python-dotenv if available (optional dependency)
_DOTENV_AVAILABLE = False
try:
    from dotenv import load_dotenv

    _DOTENV_AVAILABLE = True
except ImportError:
    pass  # python-dotenv not installed


def _print_error(msg: str) -> None:
    print(ConsoleColors.error(f"ERROR: {msg}"), file=sys.stderr)


def print_summary(results: list[ProcessingResult]) -> None:
    """Print a per-input summary of the run."""
    print()
    print("=" * BANNER_WIDTH)
    print(ConsoleColors.bold("REPORT SUMMARY"))
    print("=" * BANNER_WIDTH)
    for result in results:
        status = ConsoleColors.status(result.success, "✓" if result.success else "✗")
        print(f"{status} {result.input_path}")
        print(
            f"    {result.records_count} record(s), {result.services_count} service(s), "
            f"{result.lines_written} line(s) -> {result.output_dir} ({result.duration:.2f}s)"
        )
        for service, error in result.failed_services.items():
            print(ConsoleColors.error(f"    ✗ {service}: {error}"))
    failed = sum(result.failed_count for result in results)
    if failed:
        print(ConsoleColors.warning(f"{failed} service report(s) skipped after errors; see the log for details"))
    print("=" * BANNER_WIDTH)


def run_reports(
    config: ReportConfig,
    inputs: list[str],
    logger: logging.Logger | logging.LoggerAdapter,
    perf_tracker: PerformanceTracker | None = None,
) -> list[ProcessingResult]:
    """Process every input file in order, sharing one writer registry.

    All writers are closed before returning, including when a file fails.

    Raises:
        ServiceReportsError: On the first fatal error
    """
    results: list[ProcessingResult] = []
    with WriterRegistry() as registry:
        reader = InputReader(config.kind, registry, config, logger)
        for input_path in inputs:
            operation = f"{reader.kind.job_name}: {Path(input_path).name}"
            if perf_tracker is not None:
                perf_tracker.start(operation)
            try:
                results.append(reader.start(input_path))
            finally:
                if perf_tracker is not None:
                    perf_tracker.end(operation)
    return results


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the script"""
    if _DOTENV_AVAILABLE:
        load_dotenv()

    args = parse_arguments(argv)

    ConsoleColors.configure(no_color=args.no_color)

    if args.list_kinds:
        for kind in ReportKind:
            combine = " (combines similar names)" if kind.combines_similar_names else ""
            print(f"{kind.job_name}{combine}")
        return EXIT_SUCCESS

    if args.dependency_link:
        start_ts, end_ts = args.dependency_link
        zipkin_url = args.zipkin_url or os.environ.get(ENV_ZIPKIN_URL)
        print(dependency_url(start_ts, end_ts, zipkin_url))
        return EXIT_SUCCESS

    if not args.kind:
        _print_error(f"a report kind is required ({', '.join(ReportKind.job_names())})")
        return EXIT_USAGE
    if not args.inputs:
        _print_error("at least one input file is required")
        return EXIT_USAGE

    try:
        kind = ReportKind.from_name(args.kind)
    except ConfigurationError as e:
        _print_error(str(e))
        return EXIT_USAGE

    config = ReportConfig.from_args(args)
    config.kind = kind.job_name
    config.log.log_dir = args.log_dir

    logger = setup_logging(
        job_name=config.job_name or kind.job_name,
        log_level=config.log.level,
        log_format=config.log.format,
        log_dir=config.log.log_dir,
    )
    perf_tracker = PerformanceTracker(logger)

    try:
        results = run_reports(config, args.inputs, logger, perf_tracker)
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        _print_error(str(e))
        return EXIT_USAGE
    except ServiceReportsError as e:
        logger.error(f"Report run aborted: {e}")
        _print_error(str(e))
        return EXIT_FAILURE
    finally:
        flush_logging_handlers(logger)

    if not config.quiet:
        print_summary(results)
    if args.show_timings:
        print(perf_tracker.get_summary())

    if all(result.success for result in results):
        return EXIT_SUCCESS
    return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
