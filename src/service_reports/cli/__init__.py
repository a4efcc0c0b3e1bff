"""CLI module - Command-line interface components."""

from service_reports.cli.main import main, print_summary, run_reports
from service_reports.cli.parser import build_parser, parse_arguments

__all__ = [
    "build_parser",
    "main",
    "parse_arguments",
    "print_summary",
    "run_reports",
]
